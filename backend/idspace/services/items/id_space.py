"""The virtual id space: an implicit base range merged with extra ids."""

from collections.abc import Iterator, Sequence

# Ids 1..BASE_MAX_ID always exist and are never stored
BASE_MAX_ID = 1_000_000


def is_base_id(id_: int, base_max: int = BASE_MAX_ID) -> bool:
    """True if the id lies inside the implicit base range."""
    return 1 <= id_ <= base_max


def iter_id_space(extra_ids: Sequence[int], base_max: int = BASE_MAX_ID) -> Iterator[int]:
    """Yield every existing id in ascending order.

    Merges the implicit range ``1..base_max`` with the sorted ``extra_ids``
    without materializing the range. Each call starts over from id 1.
    """
    extra_index = 0
    extra_count = len(extra_ids)

    for base_id in range(1, base_max + 1):
        while extra_index < extra_count and extra_ids[extra_index] < base_id:
            yield extra_ids[extra_index]
            extra_index += 1
        yield base_id

    while extra_index < extra_count:
        yield extra_ids[extra_index]
        extra_index += 1
