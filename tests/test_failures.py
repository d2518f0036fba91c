from dataclasses import dataclass
from types import SimpleNamespace

from tagged_context.domain.failures import (
    ForeignError,
    ForeignMessagePolicy,
    OtherValue,
    TaggedNode,
    classify,
    describe,
)
from tagged_context.errors import tagged_error

NetworkError = tagged_error("NetworkError")


@dataclass(frozen=True)
class ServiceFailure(Exception):
    message: str
    code: str | None = None


class BadStr:
    def __str__(self) -> str:
        raise RuntimeError("cannot render")


def test_classify_tagged_node() -> None:
    error = NetworkError("Connection timeout")
    assert classify(error) == TaggedNode(error)


def test_classify_duck_typed_node() -> None:
    node = SimpleNamespace(tag="UnknownError", message="odd")
    failure = classify(node)
    assert isinstance(failure, TaggedNode)
    assert failure.node is node


def test_classify_plain_exception_uses_str() -> None:
    exc = ValueError("bad value")
    failure = classify(exc)
    assert isinstance(failure, ForeignError)
    assert failure.error is exc
    assert failure.message == "bad value"


def test_classify_exception_with_message_attribute() -> None:
    failure = classify(ServiceFailure("service down", code="SVC"))
    assert isinstance(failure, ForeignError)
    assert failure.message == "service down"


def test_classify_other_values() -> None:
    assert classify("String error") == OtherValue("String error", "String error")
    assert classify(42) == OtherValue(42, "42")
    assert classify(None) == OtherValue(None, "null")


def test_describe_never_raises() -> None:
    value = BadStr()
    text = describe(value)
    assert text.startswith("<")
    assert "BadStr" in text
    assert isinstance(classify(value), OtherValue)


def test_foreign_message_policy_values() -> None:
    assert ForeignMessagePolicy("original") is ForeignMessagePolicy.ORIGINAL
    assert ForeignMessagePolicy("context") is ForeignMessagePolicy.CONTEXT
