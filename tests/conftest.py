"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
from structlog.testing import capture_logs


@pytest.fixture
def captured_logs() -> Iterator[list[dict]]:
    """Capture structlog events emitted during the test.

    Yields:
        List of event dicts (event name, log_level and bound keys)
    """
    with capture_logs() as logs:
        yield logs
