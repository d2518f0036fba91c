from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Generic, ParamSpec, TypeVar

from tagged_context.domain.failures import describe
from tagged_context.errors import UnknownError

P = ParamSpec("P")
T = TypeVar("T")
E = TypeVar("E")
F = TypeVar("F")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome of a computation."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False

    def map_error(self, fn: Callable[[Any], Any]) -> Ok[T]:
        return self

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed outcome; *error* may be any value, not only an exception."""

    error: E

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True

    def map_error(self, fn: Callable[[E], F]) -> Err[F]:
        return Err(fn(self.error))

    def unwrap(self) -> Any:
        """Raise *error*, or an ``UnknownError`` when it is not an exception."""
        if isinstance(self.error, BaseException):
            raise self.error
        raise UnknownError(describe(self.error))


Result = Ok[T] | Err[E]


def attempt(fn: Callable[P, T], *args: P.args, **kwargs: P.kwargs) -> Ok[T] | Err[Exception]:
    """Run *fn* and capture the outcome.

    Only ``Exception`` is captured; cancellation and interpreter exits propagate.
    """
    try:
        return Ok(fn(*args, **kwargs))
    except Exception as exc:
        return Err(exc)


async def attempt_async(
    fn: Callable[P, Awaitable[T]], *args: P.args, **kwargs: P.kwargs
) -> Ok[T] | Err[Exception]:
    try:
        return Ok(await fn(*args, **kwargs))
    except Exception as exc:
        return Err(exc)
