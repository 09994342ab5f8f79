"""Utility functions and helpers."""

from idspace.utils.numbers import coerce_id, coerce_number, is_positive_integer, parse_count
from idspace.utils.request_retry import RequestRetryConfig, get_request_retrying

__all__ = [
    "coerce_id",
    "coerce_number",
    "is_positive_integer",
    "parse_count",
    "RequestRetryConfig",
    "get_request_retrying",
]
