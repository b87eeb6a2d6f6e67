"""Collection accessor contract.

Anything that can count a collection and return a bounded, stably ordered
slice of it can be paginated by services.pagination.get_page.
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class CollectionAccessor[T](Protocol):
    """Read access to an ordered collection.

    ``count`` is computed at call time; two calls may disagree if the store
    changes in between. ``slice`` returns elements in a stable total order,
    fewer than ``limit`` only at the end of the collection and an empty
    sequence once ``offset >= count()``. Implementations raise
    AccessorUnavailable when their store cannot be reached.
    """

    async def count(self) -> int: ...

    async def slice(self, offset: int, limit: int) -> Sequence[T]: ...
