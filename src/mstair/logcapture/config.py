# File: src/mstair/logcapture/config.py
"""
Environment variable-driven defaults for log capture.

Two variables are recognized:
- LOG_CAPTURE_LEVEL: level the target logger is lowered to while capturing.
  A level name (TRACE, DEBUG, ...), a decimal number, or KEEP to leave the
  logger's own level in place. Default: 1 (everything reaches the handler).
- LOG_CAPTURE_RESTORE_PROPAGATION: how `propagate` is restored afterward,
  either "enable" (default) or "previous".

A `.env` file is loaded first; variables already present in the environment
win. Keyword arguments passed to capture()/capturing() take precedence over
both. See CaptureSettings for resolution rules.
"""

from __future__ import annotations

import dataclasses
import enum
import logging
import os
from dataclasses import dataclass
from typing import IO, Final

import dotenv

from mstair.logcapture.logger_constants import CAPTURE_ALL, KEEP_LEVEL, level_names_mapping


__all__ = [
    "CaptureSettings",
    "PropagationRestore",
    "fs_load_dotenv",
    "parse_level",
    "parse_restore",
]

ENV_LOG_CAPTURE_LEVEL: Final[str] = "LOG_CAPTURE_LEVEL"
ENV_LOG_CAPTURE_RESTORE_PROPAGATION: Final[str] = "LOG_CAPTURE_RESTORE_PROPAGATION"

_LOG = logging.getLogger(__name__)

_capture_settings_instance: CaptureSettings | None = None


class PropagationRestore(enum.Enum):
    """
    How a capture leaves the target logger's `propagate` flag.

    - ENABLE: set propagate=True afterward, whatever it was before. A logger
      that was deliberately non-propagating comes out propagating.
    - PREVIOUS: put back the value saved when the capture started.
    """

    ENABLE = "enable"
    PREVIOUS = "previous"


def fs_load_dotenv(
    *,
    dotenv_path: str | os.PathLike[str] | None = None,
    stream: IO[str] | None = None,
    override: bool = False,
    encoding: str | None = "utf-8",
) -> bool:
    """
    Parse a .env file and load the variables found into the environment.

    If both `dotenv_path` and `stream` are None, `find_dotenv()` locates the
    file with its default parameters.

    :param dotenv_path: Absolute or relative path to .env file.
    :param stream: Text stream with .env content, used if `dotenv_path` is None.
    :param override: Whether .env values replace variables already set.
    :param encoding: Encoding used to read the file.
    :return: True if at least one environment variable is set else False
    """
    return dotenv.load_dotenv(
        dotenv_path=dotenv_path,
        stream=stream,
        override=override,
        encoding=encoding,
    )


def parse_level(value: int | str) -> int | None:
    """
    Return the numeric capture level for `value`, or None for KEEP.

    NOTSET (0) would make the logger inherit its parent's threshold, so it
    is mapped to CAPTURE_ALL.

    :param value: Level number, level name, decimal string, or "KEEP".
    :raises ValueError: If the value names no known level.
    """
    level: int | None
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"Invalid capture level: {value!r}")
        level = value
    else:
        text = value.strip().strip("\"'")
        if text.upper() == KEEP_LEVEL:
            return None
        if text.isdigit():
            level = int(text, 10)
        else:
            level = level_names_mapping().get(text.upper())
            if level is None:
                raise ValueError(f"Invalid capture level: {value!r}")
    return level if level != logging.NOTSET else CAPTURE_ALL


def parse_restore(value: PropagationRestore | str) -> PropagationRestore:
    """
    Return the PropagationRestore member for `value` (case-insensitive).

    :raises ValueError: If the value is not a policy name.
    """
    if isinstance(value, PropagationRestore):
        return value
    text = value.strip().strip("\"'").lower()
    try:
        return PropagationRestore(text)
    except ValueError:
        choices = ", ".join(m.value for m in PropagationRestore)
        raise ValueError(
            f"Invalid propagation restore policy {value!r} (expected one of: {choices})"
        ) from None


@dataclass(slots=True, frozen=True)
class CaptureSettings:
    """
    Resolved defaults for one capture.

    `level` is None when the target logger's level is to be left alone.
    """

    level: int | None = CAPTURE_ALL
    restore: PropagationRestore = PropagationRestore.ENABLE

    @classmethod
    def from_environment(cls) -> CaptureSettings:
        """Build settings from .env and os.environ, warning on unusable values."""
        fs_load_dotenv()
        defaults = cls()
        level = defaults.level
        restore = defaults.restore

        raw_level = os.environ.get(ENV_LOG_CAPTURE_LEVEL, "")
        if raw_level.strip():
            try:
                level = parse_level(raw_level)
            except ValueError as e:
                _LOG.warning("Ignoring %s=%r: %s", ENV_LOG_CAPTURE_LEVEL, raw_level, e)

        raw_restore = os.environ.get(ENV_LOG_CAPTURE_RESTORE_PROPAGATION, "")
        if raw_restore.strip():
            try:
                restore = parse_restore(raw_restore)
            except ValueError as e:
                _LOG.warning(
                    "Ignoring %s=%r: %s", ENV_LOG_CAPTURE_RESTORE_PROPAGATION, raw_restore, e
                )

        return cls(level=level, restore=restore)

    @classmethod
    def get_instance(cls) -> CaptureSettings:
        """Return the cached environment settings, loading them on first use."""
        global _capture_settings_instance
        if _capture_settings_instance is None:
            _capture_settings_instance = cls.from_environment()
        return _capture_settings_instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the cached settings so the next get_instance() rereads the environment."""
        global _capture_settings_instance
        _capture_settings_instance = None

    def with_overrides(
        self,
        *,
        level: int | str | None = None,
        restore: PropagationRestore | str | None = None,
    ) -> CaptureSettings:
        """
        Return a copy with explicit keyword values applied.

        None means "use this instance's value"; pass "KEEP" to leave the
        logger's level untouched.
        """
        changes: dict[str, object] = {}
        if level is not None:
            changes["level"] = parse_level(level)
        if restore is not None:
            changes["restore"] = parse_restore(restore)
        return dataclasses.replace(self, **changes) if changes else self


# End of file: src/mstair/logcapture/config.py
