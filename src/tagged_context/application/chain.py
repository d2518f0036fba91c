from __future__ import annotations

from tagged_context.errors import TaggedErrorLike, is_tagged_error_with_context


def get_error_chain(error: object) -> list[TaggedErrorLike]:
    """Return *error* and its tagged causes, outermost first.

    The walk stops at the first cause that is not a tagged error; that cause is
    not part of the result.
    """
    chain: list[TaggedErrorLike] = []
    current = error
    while is_tagged_error_with_context(current):
        chain.append(current)
        current = getattr(current, "cause", None)
    return chain
