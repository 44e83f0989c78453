# File: src/mstair/logcapture/logger_reference.py
"""
Ways of naming the logger a capture is attached to.

Every form reduces to one capability, `resolve() -> logging.Logger`, so the
capture bracket is identical however the caller identified the logger:

- ClassLoggerReference: a class (or module) resolved with the usual naming,
  `<module>.<qualname>` for classes and `__name__` for modules.
- NamedLoggerReference: a dotted logger name; "" is the root logger.
- HandleLoggerReference: a logging.Logger used as-is.

Unknown names are never an error: logging.getLogger() creates the logger.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import ModuleType
from typing import Protocol, TypeAlias, runtime_checkable


__all__ = [
    "ClassLoggerReference",
    "HandleLoggerReference",
    "LoggerReference",
    "LoggerTarget",
    "NamedLoggerReference",
    "logger_name_for",
    "logger_reference",
]


@runtime_checkable
class LoggerReference(Protocol):
    """Anything that can produce the logger to capture from."""

    def resolve(self) -> logging.Logger: ...


LoggerTarget: TypeAlias = (
    str | type | ModuleType | logging.Logger | logging.LoggerAdapter | LoggerReference
)


def logger_name_for(owner: type | ModuleType) -> str:
    """
    Return the logger name conventionally used by a class or module.

    Classes get their fully qualified name, matching loggers created with
    ``logging.getLogger(f"{__name__}.{cls.__qualname__}")``; modules get
    ``__name__``, matching ``logging.getLogger(__name__)``.
    """
    if isinstance(owner, ModuleType):
        return owner.__name__
    return f"{owner.__module__}.{owner.__qualname__}"


@dataclass(frozen=True, slots=True)
class ClassLoggerReference:
    owner: type | ModuleType

    def resolve(self) -> logging.Logger:
        return logging.getLogger(logger_name_for(self.owner))


@dataclass(frozen=True, slots=True)
class NamedLoggerReference:
    name: str

    def resolve(self) -> logging.Logger:
        return logging.getLogger(self.name)


@dataclass(frozen=True, slots=True)
class HandleLoggerReference:
    logger: logging.Logger

    def resolve(self) -> logging.Logger:
        return self.logger


def logger_reference(target: LoggerTarget) -> LoggerReference:
    """
    Coerce any supported logger target to a LoggerReference.

    LoggerAdapter targets resolve to the adapter's underlying logger.

    :param target: Logger name, class, module, Logger, LoggerAdapter, or reference.
    :return: A reference whose resolve() yields the logger.
    :raises TypeError: If the target is none of the supported kinds.
    """
    if isinstance(target, str):
        return NamedLoggerReference(target)
    if isinstance(target, logging.Logger):
        return HandleLoggerReference(target)
    if isinstance(target, logging.LoggerAdapter):
        inner = target.logger
        if isinstance(inner, logging.Logger):
            return HandleLoggerReference(inner)
        return logger_reference(inner)
    if isinstance(target, (type, ModuleType)):
        return ClassLoggerReference(target)
    if isinstance(target, LoggerReference):
        return target
    raise TypeError(
        "Cannot capture from "
        f"{type(target).__name__} {target!r}: expected a logger name, class, module, "
        "logging.Logger, or LoggerReference"
    )


# End of file: src/mstair/logcapture/logger_reference.py
