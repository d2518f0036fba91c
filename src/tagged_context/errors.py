from __future__ import annotations

from dataclasses import KW_ONLY, dataclass
from typing import ClassVar, Protocol, TypeGuard


class TaggedErrorLike(Protocol):
    """Structural shape of a node in an error chain."""

    @property
    def tag(self) -> str: ...

    @property
    def message(self) -> str: ...


@dataclass(frozen=True, eq=False)
class _FrozenFields(Exception):
    message: str
    _: KW_ONLY
    context: str | None = None
    cause: TaggedErrorLike | None = None


# frozen only for the fields above; tracebacks and notes stay writable
class TaggedErrorWithContext(_FrozenFields):
    """Base error for every tagged variant.

    Attributes:
        tag: Discriminant of the variant, fixed per class.
        message: Human-readable message describing the error.
        context: Optional explanation distinct from *message*.
        cause: Optional error this one wraps.
    """

    tag: ClassVar[str] = "TaggedError"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


def tagged_error(tag: str) -> type[TaggedErrorWithContext]:
    """Return a new variant class whose instances carry *tag*.

    Two calls with the same *tag* produce two distinct classes.
    """
    return type(
        tag,
        (TaggedErrorWithContext,),
        {"tag": tag, "__module__": __name__},
    )


UnknownError = tagged_error("UnknownError")


def is_tagged_error_with_context(value: object) -> TypeGuard[TaggedErrorLike]:
    if value is None or isinstance(value, type):
        return False
    try:
        tag = getattr(value, "tag", None)
        message = getattr(value, "message", None)
    except Exception:
        return False
    return isinstance(tag, str) and isinstance(message, str)
