from collections.abc import Generator
from logging import DEBUG

import pytest


class PlainText:
    """Textual source which is not an ImmutableB."""

    def __init__(self, text: str | None) -> None:
        self._text = text

    def get_text(self) -> str | None:
        return self._text


@pytest.fixture
def plain_text() -> type[PlainText]:
    return PlainText


@pytest.fixture
def debug_logs(caplog: pytest.LogCaptureFixture) -> Generator[pytest.LogCaptureFixture]:
    """
    Capture debug records of the textvalue loggers.
    """
    with caplog.at_level(DEBUG, logger="textvalue"):
        yield caplog
