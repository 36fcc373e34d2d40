"""Tagged result type returned by validators and use cases.

``Ok`` wraps a value; ``Err`` wraps a ``DomainError``. Adapters decide how to
render an ``Err``: the HTTP routes call ``unwrap()`` and let the registered
exception handlers translate the raised error.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar, Union

from product_catalog.domain.errors import DomainError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    error: DomainError

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def code(self) -> str:
        return self.error.error_code

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def status_hint(self) -> int:
        return self.error.status_hint

    @property
    def details(self) -> list[dict[str, Any]] | None:
        return getattr(self.error, "errors", None)

    def unwrap(self) -> NoReturn:
        raise self.error


Result = Union[Ok[T], Err]
