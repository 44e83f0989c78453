# File: src/mstair/logcapture/list_handler.py
"""
In-memory handler that keeps every record it receives, in arrival order.

A ListHandler belongs to exactly one capture: it is attached once, detached
once, and refuses to be attached again so records from separate runs never
mix.
"""

from __future__ import annotations

import logging


__all__ = ["ListHandler"]


class ListHandler(logging.Handler):
    """
    Handler collecting LogRecords in `records`.

    Records are stored as delivered, without formatting; Handler.handle()
    serializes emit() calls with the handler lock.
    """

    def __init__(self, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.records: list[logging.LogRecord] = []
        self._attached_to: logging.Logger | None = None
        self._used = False

    def __repr__(self) -> str:
        target = self._attached_to.name if self._attached_to else None
        return f"<{self.__class__.__name__} records={len(self.records)} attached_to={target!r}>"

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)

    @property
    def attached(self) -> bool:
        """True while the handler is attached to a logger."""
        return self._attached_to is not None

    def attach(self, logger: logging.Logger) -> None:
        """
        Add this handler to `logger`.

        :raises RuntimeError: If the handler has already been attached once.
        """
        if self._used:
            raise RuntimeError(f"{self!r} has already been used and cannot be attached again")
        self._used = True
        self._attached_to = logger
        logger.addHandler(self)

    def detach(self) -> None:
        """Remove this handler from its logger; a no-op when not attached."""
        if self._attached_to is None:
            return
        self._attached_to.removeHandler(self)
        self._attached_to = None


# End of file: src/mstair/logcapture/list_handler.py
