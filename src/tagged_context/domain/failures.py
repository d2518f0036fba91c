from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from tagged_context.errors import TaggedErrorLike, is_tagged_error_with_context

NULL_TEXT = "null"


class ForeignMessagePolicy(str, Enum):
    """Which message a wrapping node gets when its cause is not tagged."""

    ORIGINAL = "original"
    CONTEXT = "context"


@dataclass(frozen=True, slots=True)
class TaggedNode:
    node: TaggedErrorLike


@dataclass(frozen=True, slots=True)
class ForeignError:
    """Exception that does not carry a tag."""

    error: BaseException
    message: str


@dataclass(frozen=True, slots=True)
class OtherValue:
    """Anything else a computation may fail with."""

    value: object
    message: str


Failure = TaggedNode | ForeignError | OtherValue


def describe(value: object) -> str:
    """String conversion used for diagnostics; never raises."""
    if value is None:
        return NULL_TEXT
    try:
        return str(value)
    except Exception:
        return object.__repr__(value)


def classify(value: object) -> Failure:
    if is_tagged_error_with_context(value):
        return TaggedNode(value)
    if isinstance(value, BaseException):
        try:
            message = getattr(value, "message", None)
        except Exception:
            message = None
        if not isinstance(message, str):
            message = describe(value)
        return ForeignError(value, message)
    return OtherValue(value, describe(value))
