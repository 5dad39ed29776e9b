from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog

from geoarena.core.logging import configure_logging


@pytest.fixture(autouse=True)
def restore_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


def test_configure_logging_uses_json_renderer_by_default() -> None:
    configure_logging("DEBUG")

    processors = structlog.get_config()["processors"]

    assert isinstance(processors[-1], structlog.processors.JSONRenderer)
    assert any(isinstance(processor, structlog.processors.TimeStamper) for processor in processors)


def test_configure_logging_console_format() -> None:
    configure_logging("info", "console")

    assert isinstance(structlog.get_config()["processors"][-1], structlog.dev.ConsoleRenderer)
