"""ProductAccessor error translation, with a session stub instead of a database."""

from typing import Any

import pytest
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError

from paged_catalog.exceptions import AccessorUnavailable
from paged_catalog.repositories.base import CollectionAccessor
from paged_catalog.repositories.product import ProductAccessor


class FailingSession:
    def __init__(self, error: BaseException) -> None:
        self.error = error
        self.calls = 0

    async def execute(self, *args: Any, **kwargs: Any) -> Any:
        self.calls += 1
        raise self.error


def _operational() -> OperationalError:
    return OperationalError("SELECT 1", {}, Exception("server closed the connection"))


def test_product_accessor_satisfies_protocol() -> None:
    assert isinstance(ProductAccessor(FailingSession(_operational())), CollectionAccessor)  # type: ignore[arg-type]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [
        _operational(),
        InterfaceError("SELECT 1", {}, Exception("connection is closed")),
        ConnectionRefusedError(111, "Connection refused"),
    ],
)
async def test_connection_errors_become_accessor_unavailable(error: BaseException) -> None:
    session = FailingSession(error)
    accessor = ProductAccessor(session)  # type: ignore[arg-type]

    with pytest.raises(AccessorUnavailable) as exc_info:
        await accessor.count()
    assert exc_info.value.collection == "products"
    assert exc_info.value.__cause__ is error

    with pytest.raises(AccessorUnavailable):
        await accessor.slice(0, 10)


@pytest.mark.asyncio
async def test_failures_are_not_retried() -> None:
    session = FailingSession(_operational())
    accessor = ProductAccessor(session)  # type: ignore[arg-type]

    with pytest.raises(AccessorUnavailable):
        await accessor.count()
    assert session.calls == 1


@pytest.mark.asyncio
async def test_other_database_errors_pass_through() -> None:
    error = IntegrityError("INSERT", {}, Exception("duplicate key"))
    accessor = ProductAccessor(FailingSession(error))  # type: ignore[arg-type]

    with pytest.raises(IntegrityError):
        await accessor.count()
