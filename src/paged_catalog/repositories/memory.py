"""In-memory collection accessor."""

from collections.abc import Iterable, Sequence


class InMemoryAccessor[T]:
    """CollectionAccessor over a list kept in insertion order.

    Used as the reference accessor in tests and for collections that are
    small enough to hold in memory.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)

    def append(self, item: T) -> None:
        self._items.append(item)

    async def count(self) -> int:
        return len(self._items)

    async def slice(self, offset: int, limit: int) -> Sequence[T]:
        if offset < 0:
            raise ValueError(f"offset must be >= 0, got {offset}")
        if limit < 1:
            raise ValueError(f"limit must be >= 1, got {limit}")
        return tuple(self._items[offset : offset + limit])
