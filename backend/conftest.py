"""Root conftest: load test environment variables and route structlog through caplog."""

from pathlib import Path

import pytest
import structlog
from dotenv import load_dotenv

from shared.logging import SHARED_PROCESSORS

load_dotenv(Path(__file__).resolve().parent.parent / ".env.tests")

structlog.configure(
    processors=[
        *SHARED_PROCESSORS,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ],
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=False,
)


@pytest.fixture(autouse=True)
def _clear_log_context():
    """Prevent context leaking between tests."""
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()
