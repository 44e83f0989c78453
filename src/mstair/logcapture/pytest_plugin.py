# File: src/mstair/logcapture/pytest_plugin.py
"""
pytest fixtures for log capture.

Enable in a conftest.py:
    pytest_plugins = ["mstair.logcapture.pytest_plugin"]

Example:
    >>> def test_warns_on_low_stock(log_capturer):
    ...     events = log_capturer("svc.orders", lambda: reserve(sku="A1", qty=99))
    ...     assert events.get_messages() == ["low stock"]
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest

from mstair.logcapture.captured_events import CapturedLoggingEvents
from mstair.logcapture.config import CaptureSettings
from mstair.logcapture.log_capturer import capture


__all__ = ["capture_settings", "log_capturer"]


@pytest.fixture
def capture_settings() -> Iterator[CaptureSettings]:
    """Fresh CaptureSettings read from the current environment; the cache is reset after."""
    CaptureSettings.reset_instance()
    yield CaptureSettings.get_instance()
    CaptureSettings.reset_instance()


@pytest.fixture
def log_capturer(capture_settings: CaptureSettings) -> Callable[..., CapturedLoggingEvents]:
    """The capture() function, with settings reloaded for this test."""
    return capture


# End of file: src/mstair/logcapture/pytest_plugin.py
