"""
package: mstair.logcapture
"""

# <AUTOGEN_INIT>
from mstair.logcapture import (
    captured_events,
    config,
    list_handler,
    log_capturer,
    logger_constants,
    logger_reference,
)


__all__ = [
    "captured_events",
    "config",
    "list_handler",
    "log_capturer",
    "logger_constants",
    "logger_reference",
]
# </AUTOGEN_INIT>

__version__ = "0.1.0"
