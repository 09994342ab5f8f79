"""Shared HTTP request retry utilities using tenacity."""

from dataclasses import dataclass

import httpx
from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)


@dataclass
class RequestRetryConfig:
    """Configuration for HTTP request retries with exponential backoff."""

    max_attempts: int = 3
    min_wait: float = 0.5
    max_wait: float = 5.0
    multiplier: float = 1.0


def get_request_retrying(config: RequestRetryConfig | None = None) -> Retrying:
    """Get configured Retrying for httpx.RequestError (network errors).

    Usage:
        for attempt in get_request_retrying():
            with attempt:
                response = client.get(url)

    HTTP error statuses are not retried: the API answers them deterministically.
    """
    cfg = config or RequestRetryConfig()
    return Retrying(
        retry=retry_if_exception_type(httpx.RequestError),
        stop=stop_after_attempt(cfg.max_attempts),
        wait=wait_exponential(
            multiplier=cfg.multiplier,
            min=cfg.min_wait,
            max=cfg.max_wait,
        ),
        reraise=True,
    )
