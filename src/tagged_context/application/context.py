from __future__ import annotations

import functools
import inspect
from collections.abc import Callable
from types import TracebackType
from typing import Any, Generic, TypeVar, overload

from loguru import logger

from tagged_context.domain.failures import (
    ForeignMessagePolicy,
    TaggedNode,
    classify,
)
from tagged_context.domain.result import Err, Ok
from tagged_context.errors import TaggedErrorWithContext, UnknownError

V = TypeVar("V", bound=TaggedErrorWithContext)
T = TypeVar("T")
C = TypeVar("C", bound=Callable[..., Any])


class TaggedContext(Generic[V]):
    """Re-tag failures as *variant*, keeping the original as the cause.

    Works on ``Ok``/``Err`` results, as a decorator for sync and async callables
    and as a context manager. *context* is only called when a failure is wrapped.
    """

    def __init__(
        self,
        variant: type[V],
        context: Callable[[], str],
        *,
        foreign_message: ForeignMessagePolicy = ForeignMessagePolicy.ORIGINAL,
    ) -> None:
        self.variant = variant
        self.context = context
        self.foreign_message = ForeignMessagePolicy(foreign_message)

    def wrap(self, failure: object) -> V:
        kind = classify(failure)
        if isinstance(kind, TaggedNode):
            logger.debug("Adding {} context to {}", self.variant.tag, kind.node.tag)
            return self.variant(self.context(), cause=kind.node)

        # foreign failures get a synthesized leaf carrying their own message
        if self.foreign_message is ForeignMessagePolicy.CONTEXT:
            message = self.context()
        else:
            message = kind.message
        logger.debug(
            "Normalizing {} failure into {}", type(kind).__name__, self.variant.tag
        )
        return self.variant(message, cause=UnknownError(kind.message))

    @overload
    def __call__(self, target: Ok[T]) -> Ok[T]: ...

    @overload
    def __call__(self, target: Err[Any]) -> Err[V]: ...

    @overload
    def __call__(self, target: C) -> C: ...

    def __call__(self, target: Any) -> Any:
        if isinstance(target, (Ok, Err)):
            return target.map_error(self.wrap)
        if not callable(target):
            raise TypeError(
                f"Expected a result or a callable, got {type(target).__name__}"
            )
        return self._decorate(target)

    def _decorate(self, func: C) -> C:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                with self:
                    return await func(*args, **kwargs)

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            with self:
                return func(*args, **kwargs)

        return sync_wrapper  # type: ignore[return-value]

    def __enter__(self) -> TaggedContext[V]:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        # cancellation and interpreter exits are not failures of the block
        if exc is None or not isinstance(exc, Exception):
            return False
        raise self.wrap(exc) from exc


def with_tagged_context(
    variant: type[V],
    context: Callable[[], str],
    *,
    foreign_message: ForeignMessagePolicy = ForeignMessagePolicy.ORIGINAL,
) -> TaggedContext[V]:
    return TaggedContext(variant, context, foreign_message=foreign_message)
