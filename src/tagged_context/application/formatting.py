from __future__ import annotations

import sys
import traceback
from typing import TextIO

from loguru import logger

from tagged_context.domain.failures import ForeignError, TaggedNode, classify

INDENT = "  "


def _traceback_lines(exc: BaseException) -> list[str]:
    if exc.__traceback__ is None:
        return []
    return "".join(traceback.format_tb(exc.__traceback__)).splitlines()


def format_error_with_context(error: object, *, include_traceback: bool = True) -> str:
    """Render *error* and everything it wraps as indented text.

    Tagged nodes render as ``Error [<tag>]: <message>``, each cause two spaces
    deeper than its parent behind a ``Caused by:`` line. Foreign exceptions and
    arbitrary values end the walk.
    """
    lines: list[str] = []
    current: object = error
    depth = 0
    while True:
        indent = INDENT * depth
        failure = classify(current)
        if isinstance(failure, TaggedNode):
            node = failure.node
            lines.append(f"{indent}Error [{node.tag}]: {node.message}")
            context = getattr(node, "context", None)
            if context and context != node.message:
                lines.append(f"{indent}{INDENT}Context: {context}")
            cause = getattr(node, "cause", None)
            if cause is None:
                break
            lines.append(f"{indent}{INDENT}Caused by:")
            current = cause
            depth += 1
            continue
        lines.append(f"{indent}Error: {failure.message}")
        if isinstance(failure, ForeignError) and include_traceback:
            frames = _traceback_lines(failure.error)
            if frames:
                lines.append(f"{indent}Stack trace:")
                lines.extend(f"{indent}{line}" for line in frames)
        break
    return "\n".join(lines)


def print_error_with_context(error: object, file: TextIO | None = None) -> None:
    """Write the rendering of *error* to *file*, stderr by default."""
    stream = sys.stderr if file is None else file
    print(format_error_with_context(error), file=stream)


def log_error_with_context(error: object, level: str = "ERROR") -> None:
    logger.log(level, "{}", format_error_with_context(error))
