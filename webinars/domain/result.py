"""Result type returned by use cases.

A use case returns Ok with its value, or Err carrying exactly one
DomainError. Storage failures are not wrapped; they propagate as raised.
"""

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeAlias, TypeVar

from webinars.domain.errors import DomainError

T = TypeVar("T")
E = TypeVar("E", bound=DomainError)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome carrying a domain error."""

    error: E

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise self.error


Result: TypeAlias = Ok[T] | Err[E]
