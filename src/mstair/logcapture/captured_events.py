# File: src/mstair/logcapture/captured_events.py
"""
Immutable result of one capture run.

Example:
    >>> events = capture("svc.orders", place_order)
    >>> events.completed_normally()
    True
    >>> events.get_messages(at_least(logging.WARNING))
    ['low stock']

The run's outcome is a discriminated result, Completed or Failed(exception),
so "the work raised nothing" can never be confused with a missing field.
Every projection preserves emission order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, TypeAlias

from colorama import Fore, Style

from mstair.logcapture.logger_constants import CONSTRUCT, TRACE, initialize_logger_constants


__all__ = [
    "CaptureOutcome",
    "CapturedLoggingEvents",
    "Completed",
    "Failed",
    "RecordPredicate",
    "at_least",
    "at_level",
    "from_logger",
    "message_contains",
]

RecordPredicate: TypeAlias = Callable[[logging.LogRecord], bool]

LEVEL_COLORS: dict[int, str] = {
    TRACE: Fore.MAGENTA,
    logging.DEBUG: Style.DIM,
    CONSTRUCT: Fore.BLUE,
    logging.INFO: Fore.WHITE,
    logging.WARNING: Fore.YELLOW,
    logging.ERROR: Fore.RED,
    logging.CRITICAL: Fore.LIGHTRED_EX,
}


@dataclass(frozen=True, slots=True)
class Completed:
    """The monitored work returned normally."""

    @property
    def exception(self) -> None:
        return None


@dataclass(frozen=True, slots=True)
class Failed:
    """The monitored work raised `exception`."""

    exception: Exception


CaptureOutcome: TypeAlias = Completed | Failed


@dataclass(frozen=True, slots=True)
class CapturedLoggingEvents:
    """
    Records captured from one monitored run, plus how the run ended.

    `events` is never None in an instance built by capture(); the filtering
    projections still treat None as empty, while get_size() does not.
    """

    events: Sequence[logging.LogRecord] | None = ()
    outcome: CaptureOutcome = field(default_factory=Completed)

    def __str__(self) -> str:
        return self.render()

    @property
    def exception(self) -> Exception | None:
        """The exception raised by the monitored work, or None."""
        return self.outcome.exception

    def completed_normally(self) -> bool:
        return isinstance(self.outcome, Completed)

    def get_events(self, predicate: RecordPredicate | None = None) -> list[logging.LogRecord]:
        """
        Return the captured records satisfying `predicate` (all if omitted).

        :param predicate: Filter applied to each record; order is preserved.
        :return list[logging.LogRecord]: Matching records, empty if none were captured.
        """
        if self.events is None:
            return []
        if predicate is None:
            return list(self.events)
        return [record for record in self.events if predicate(record)]

    def get_messages(self, predicate: RecordPredicate | None = None) -> list[str]:
        """Return the interpolated message text of each (matching) record."""
        return [record.getMessage() for record in self.get_events(predicate)]

    def get_throwables(self, predicate: RecordPredicate | None = None) -> list[BaseException]:
        """
        Return the exception attached to each (matching) record.

        Not every record carries exc_info, so the result may be shorter than
        get_events(). Records logged with ``exc_info=True`` outside an except
        block carry ``(None, None, None)`` and are skipped as well.
        """
        throwables: list[BaseException] = []
        for record in self.get_events(predicate):
            exc_info = record.exc_info
            if exc_info and exc_info[1] is not None:
                throwables.append(exc_info[1])
        return throwables

    def get_levels(self, predicate: RecordPredicate | None = None) -> list[int]:
        """Return the numeric level of each (matching) record."""
        return [record.levelno for record in self.get_events(predicate)]

    def get_level_names(self, predicate: RecordPredicate | None = None) -> list[str]:
        """Return the level name of each (matching) record."""
        return [record.levelname for record in self.get_events(predicate)]

    def get_size(self) -> int:
        """Return the number of captured records, ignoring any filter."""
        return len(self.events)  # type: ignore[arg-type]

    def render(self, *, color: bool = False) -> str:
        """
        Render the records as text, one block per record.

        Each block is ``<logger name> <LEVEL>`` followed by the message lines
        indented by two spaces; blank message lines are dropped.

        :param color: Color level names by severity with ANSI codes.
        """
        blocks: list[str] = []
        for record in self.get_events():
            level_name = record.levelname
            if color:
                level_name = f"{_level_color(record.levelno)}{level_name}{Style.RESET_ALL}"
            lines = [line for line in record.getMessage().split("\n") if line.strip()]
            blocks.append(f"{record.name} {level_name}\n  " + "\n  ".join(lines))
        return "\n".join(blocks)


def _level_color(levelno: int) -> str:
    """Return the color of the highest configured level not above `levelno`."""
    initialize_logger_constants()
    candidates = [lvl for lvl in LEVEL_COLORS if lvl <= levelno]
    if not candidates:
        return Fore.RESET
    return LEVEL_COLORS[max(candidates)]


def at_level(level: int | str) -> RecordPredicate:
    """Predicate matching records at exactly `level` (number or name)."""
    levelno = _levelno(level)
    return lambda record: record.levelno == levelno


def at_least(level: int | str) -> RecordPredicate:
    """Predicate matching records at `level` or more severe."""
    levelno = _levelno(level)
    return lambda record: record.levelno >= levelno


def from_logger(name: str) -> RecordPredicate:
    """
    Predicate matching records from logger `name` or any of its descendants.

    "" and "root" name the root logger, whose descendants are every logger.
    """
    if name in {"", "root"}:
        return lambda record: True
    prefix = f"{name}."
    return lambda record: record.name == name or record.name.startswith(prefix)


def message_contains(text: str) -> RecordPredicate:
    """Predicate matching records whose interpolated message contains `text`."""
    return lambda record: text in record.getMessage()


def _levelno(level: Any) -> int:
    if isinstance(level, int):
        return level
    initialize_logger_constants()
    mapped = logging.getLevelNamesMapping().get(str(level).upper())
    if mapped is None:
        raise ValueError(f"Unknown log level: {level!r}")
    return mapped


# End of file: src/mstair/logcapture/captured_events.py
