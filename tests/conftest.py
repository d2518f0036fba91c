import logging
from collections.abc import Callable, Iterator

import pytest
from loguru import logger


class CountingContext:
    """Context producer that records how often it was asked."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.calls = 0

    def __call__(self) -> str:
        self.calls += 1
        return self.text


@pytest.fixture
def counting_context() -> Callable[[str], CountingContext]:
    def factory(text: str = "context") -> CountingContext:
        return CountingContext(text)

    return factory


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop settings coming from the surrounding environment."""
    for name in (
        "TAGGED_CONTEXT_LOG_LEVEL",
        "TAGGED_CONTEXT_FOREIGN_MESSAGE",
        "TAGGED_CONTEXT_INCLUDE_TRACEBACK",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def loguru_caplog(caplog: pytest.LogCaptureFixture) -> Iterator[pytest.LogCaptureFixture]:
    """Route loguru records of the package into caplog."""
    caplog.set_level(logging.DEBUG)
    logger.enable("tagged_context")
    sink_id = logger.add(caplog.handler, level="DEBUG", format="{message}")
    yield caplog
    logger.remove(sink_id)
    logger.disable("tagged_context")
