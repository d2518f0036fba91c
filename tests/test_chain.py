from types import SimpleNamespace

import pytest

from tagged_context.application.chain import get_error_chain
from tagged_context.errors import UnknownError, tagged_error


class NetworkError(tagged_error("NetworkError")):
    pass


class DatabaseError(tagged_error("DatabaseError")):
    pass


class ServiceError(tagged_error("ServiceError")):
    pass


@pytest.mark.parametrize("value", [ValueError("Regular error"), "String error", None, 7])
def test_returns_empty_list_for_non_tagged_errors(value: object) -> None:
    assert get_error_chain(value) == []


def test_returns_single_error_for_error_without_cause() -> None:
    error = NetworkError("Test error")
    chain = get_error_chain(error)
    assert len(chain) == 1
    assert chain[0] is error


def test_returns_full_error_chain() -> None:
    network_error = NetworkError("Network error")
    db_error = DatabaseError("DB error", cause=network_error)
    service_error = ServiceError("Service error", cause=db_error)

    chain = get_error_chain(service_error)

    assert [node.tag for node in chain] == [
        "ServiceError",
        "DatabaseError",
        "NetworkError",
    ]
    assert chain[0] is service_error
    assert chain[1] is db_error
    assert chain[2] is network_error


def test_handles_mixed_error_types_in_chain() -> None:
    service_error = ServiceError(
        "Service error",
        cause=SimpleNamespace(tag="UnknownError", message="Unknown error occurred"),
    )
    chain = get_error_chain(service_error)
    assert [node.tag for node in chain] == ["ServiceError", "UnknownError"]


def test_stops_before_non_conforming_cause() -> None:
    leaf = UnknownError("leaf")
    wrapper = SimpleNamespace(tag="Wrapper", message="outer", cause=ValueError("raw"))
    assert get_error_chain(wrapper) == [wrapper]
    outer = ServiceError("outer", cause=leaf)
    assert get_error_chain(outer) == [outer, leaf]


def test_is_restartable() -> None:
    error = ServiceError("a", cause=DatabaseError("b", cause=NetworkError("c")))
    assert get_error_chain(error) == get_error_chain(error)


def test_handles_long_chains() -> None:
    error = NetworkError("root")
    for index in range(5000):
        error = DatabaseError(f"layer {index}", cause=error)
    chain = get_error_chain(error)
    assert len(chain) == 5001
    assert chain[-1].message == "root"
