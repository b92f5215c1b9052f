"""Fixtures for unit tests."""

from typing import Generator

import pytest
import structlog
from pytest import MonkeyPatch

SETTINGS_ENVIRONMENT_VARIABLES = ("GITHUB_PAT_TOKEN", "GITHUB_API_URL", "REQUEST_TIMEOUT", "DEFAULT_ERROR_MESSAGE", "DEBUG")


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def isolate_settings_environment(monkeypatch: MonkeyPatch) -> None:
    """Keep the developer's GitHub settings out of the tests."""
    for name in SETTINGS_ENVIRONMENT_VARIABLES:
        monkeypatch.delenv(name, raising=False)
