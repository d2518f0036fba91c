from loguru import logger

from tagged_context.application.chain import get_error_chain
from tagged_context.application.context import TaggedContext, with_tagged_context
from tagged_context.application.formatting import (
    format_error_with_context,
    log_error_with_context,
    print_error_with_context,
)
from tagged_context.domain.failures import (
    Failure,
    ForeignError,
    ForeignMessagePolicy,
    OtherValue,
    TaggedNode,
    classify,
)
from tagged_context.domain.result import Err, Ok, Result, attempt, attempt_async
from tagged_context.errors import (
    TaggedErrorLike,
    TaggedErrorWithContext,
    UnknownError,
    is_tagged_error_with_context,
    tagged_error,
)

logger.disable("tagged_context")

__all__ = [
    "Err",
    "Failure",
    "ForeignError",
    "ForeignMessagePolicy",
    "Ok",
    "OtherValue",
    "Result",
    "TaggedContext",
    "TaggedErrorLike",
    "TaggedErrorWithContext",
    "TaggedNode",
    "UnknownError",
    "attempt",
    "attempt_async",
    "classify",
    "format_error_with_context",
    "get_error_chain",
    "is_tagged_error_with_context",
    "log_error_with_context",
    "print_error_with_context",
    "tagged_error",
    "with_tagged_context",
]
