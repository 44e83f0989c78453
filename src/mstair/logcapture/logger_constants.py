# File: src/mstair/logcapture/logger_constants.py

import logging
from typing import Final


CAPTURE_ALL: Final[int] = 1  # Lowest level that still reaches handlers (NOTSET means "inherit")
KEEP_LEVEL: Final[str] = "KEEP"  # Leave the target logger's level untouched during a capture

CONSTRUCT = logging.INFO - 1  # (19)
TRACE = logging.DEBUG - 1  # (9)


_logging_constants_initialized = False


def initialize_logger_constants():
    """Register custom level names with logging if not already registered."""
    global _logging_constants_initialized
    if _logging_constants_initialized:
        return
    _logging_constants_initialized = True
    for key, value in {
        "TRACE": TRACE,
        "CONSTRUCT": CONSTRUCT,
    }.items():
        if key not in logging.getLevelNamesMapping():
            logging.addLevelName(value, key)


def level_names_mapping() -> dict[str, int]:
    """Uppercase level-name mapping from logging, including the custom levels."""
    initialize_logger_constants()
    return {
        k.upper(): v
        for k, v in logging.getLevelNamesMapping().items()
        if isinstance(k, str) and k.isupper() and isinstance(v, int)
    }


# End of file: src/mstair/logcapture/logger_constants.py
