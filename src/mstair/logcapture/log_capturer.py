# File: src/mstair/logcapture/log_capturer.py
"""
Capture the log records a unit of work emits on one logger.

Example:
    >>> from mstair.logcapture.log_capturer import capture
    >>> events = capture("svc.orders", lambda: create_order(42))
    >>> events.get_messages()
    ['order created: 42']
    >>> events.completed_normally()
    True

The code under test only needs to log through the standard logging API
(``logging.getLogger(__name__)``); how the application configures handlers
does not matter, because the capture installs its own handler on the target
logger and cuts propagation to ancestors for the duration of the run.

Bracket:
- resolve the target logger
- force propagate=False, lower the level, clear `disabled`, attach a fresh ListHandler
- run the work
- always: detach the handler, restore propagation per PropagationRestore,
  restore level and `disabled`

Limitations:
- Only records delivered while the work runs synchronously are captured;
  background threads logging after capture() returns are missed.
- A global logging.disable(level) still applies: records at or below that
  level are dropped before any handler runs, so the capture sees nothing.
- The target logger is process-wide state. Concurrent captures on the same
  logger from different threads are unsafe; distinct loggers are fine.
- Nested captures on the same logger only restore correctly with
  PropagationRestore.PREVIOUS; ENABLE re-enables propagation when the inner
  capture ends.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from mstair.logcapture.captured_events import (
    CaptureOutcome,
    CapturedLoggingEvents,
    Completed,
    Failed,
)
from mstair.logcapture.config import CaptureSettings, PropagationRestore
from mstair.logcapture.list_handler import ListHandler
from mstair.logcapture.logger_reference import LoggerTarget, logger_reference


__all__ = [
    "CaptureSession",
    "capture",
    "capturing",
]

_LOG = logging.getLogger(__name__)


@dataclass(slots=True)
class _SavedLoggerState:
    """Logger attributes a capture changes and must put back."""

    propagate: bool
    level: int
    disabled: bool

    @classmethod
    def of(cls, logger: logging.Logger) -> _SavedLoggerState:
        return cls(propagate=logger.propagate, level=logger.level, disabled=logger.disabled)


class CaptureSession:
    """
    Live view of a capture in progress, yielded by capturing().

    `records` grows while the capture is active. snapshot() may be called at
    any time; after the bracket has exited it reflects the final state.
    """

    def __init__(self, logger: logging.Logger, handler: ListHandler) -> None:
        self.logger = logger
        self._handler = handler
        self._outcome: CaptureOutcome = Completed()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} logger={self.logger.name!r} records={len(self.records)}>"

    @property
    def records(self) -> list[logging.LogRecord]:
        return self._handler.records

    @property
    def active(self) -> bool:
        """True while the capturing handler is attached."""
        return self._handler.attached

    def fail(self, exception: Exception) -> None:
        """Record that the monitored work raised `exception`."""
        self._outcome = Failed(exception)

    def snapshot(self) -> CapturedLoggingEvents:
        """Return an immutable copy of the records captured so far and the outcome."""
        return CapturedLoggingEvents(tuple(self._handler.records), self._outcome)


@contextmanager
def capturing(
    target: LoggerTarget,
    *,
    restore: PropagationRestore | str | None = None,
    level: int | str | None = None,
) -> Iterator[CaptureSession]:
    """
    Context manager that captures records logged on `target` inside the block.

    Exceptions raised in the block propagate normally; the logger is restored
    on every exit path.

    Example:
        >>> with capturing(OrderService) as session:
        ...     OrderService().create(42)
        >>> session.snapshot().get_levels()
        [20]

    :param target: Logger name, class, module, Logger, or LoggerReference.
    :param restore: Propagation restore policy; defaults to LOG_CAPTURE_RESTORE_PROPAGATION.
    :param level: Level to lower the logger to, or "KEEP"; defaults to LOG_CAPTURE_LEVEL.
    :yield: The CaptureSession collecting records.
    :raises TypeError: If `target` is not a supported logger target.
    :raises ValueError: If `restore` or `level` is not a valid value.
    """
    reference = logger_reference(target)
    settings = CaptureSettings.get_instance().with_overrides(level=level, restore=restore)
    logger = reference.resolve()
    if not isinstance(logger, logging.Logger):
        raise TypeError(
            f"Cannot capture from {target!r}: resolve() returned "
            f"{type(logger).__name__}, expected logging.Logger"
        )
    _LOG.debug(
        "Capturing %r (level=%s, restore=%s)",
        logger.name,
        "KEEP" if settings.level is None else logging.getLevelName(settings.level),
        settings.restore.value,
    )

    saved = _SavedLoggerState.of(logger)
    handler = ListHandler()
    session = CaptureSession(logger, handler)

    logger.propagate = False
    try:
        if settings.level is not None:
            logger.setLevel(settings.level)
        logger.disabled = False
        handler.attach(logger)
        yield session
    finally:
        handler.detach()
        logger.propagate = True if settings.restore is PropagationRestore.ENABLE else saved.propagate
        logger.disabled = saved.disabled
        if settings.level is not None:
            logger.setLevel(saved.level)

    _LOG.debug("Captured %d record(s) from %r", len(session.records), logger.name)


def capture(
    target: LoggerTarget,
    work: Callable[[], object],
    *,
    restore: PropagationRestore | str | None = None,
    level: int | str | None = None,
) -> CapturedLoggingEvents:
    """
    Run `work` and return the records it logged on `target`.

    An Exception raised by `work` is caught and carried in the result
    (see CapturedLoggingEvents.exception and completed_normally()); it is
    never re-raised. BaseExceptions such as KeyboardInterrupt and SystemExit
    propagate after the logger has been restored.

    :param target: Logger name, class, module, Logger, or LoggerReference.
    :param work: Zero-argument callable to monitor; its return value is ignored.
    :param restore: Propagation restore policy; defaults to LOG_CAPTURE_RESTORE_PROPAGATION.
    :param level: Level to lower the logger to, or "KEEP"; defaults to LOG_CAPTURE_LEVEL.
    :return CapturedLoggingEvents: Records in emission order and the run's outcome.
    :raises TypeError: If `target` is not a supported logger target.
    :raises ValueError: If `restore` or `level` is not a valid value.
    """
    with capturing(target, restore=restore, level=level) as session:
        try:
            work()
        except Exception as e:
            session.fail(e)
    return session.snapshot()


# End of file: src/mstair/logcapture/log_capturer.py
