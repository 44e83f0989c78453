# File: src/mstair/logcapture/test_list_handler.py
"""
Tests for ListHandler: ordered collection and single-use attachment.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterator

import pytest

from mstair.logcapture.list_handler import ListHandler


@pytest.fixture
def logger() -> Iterator[logging.Logger]:
    log = logging.getLogger(f"test.list_handler.{uuid.uuid4().hex}")
    log.setLevel(logging.DEBUG)
    log.propagate = False
    yield log
    log.handlers.clear()


def test_records_kept_in_arrival_order(logger: logging.Logger) -> None:
    handler = ListHandler()
    handler.attach(logger)
    logger.info("first")
    logger.debug("second %s", "arg")
    handler.detach()

    assert [r.getMessage() for r in handler.records] == ["first", "second arg"]
    assert [r.levelno for r in handler.records] == [logging.INFO, logging.DEBUG]


def test_detach_stops_collection(logger: logging.Logger) -> None:
    handler = ListHandler()
    handler.attach(logger)
    assert handler.attached is True
    assert handler in logger.handlers

    handler.detach()
    logger.info("ignored")

    assert handler.attached is False
    assert handler not in logger.handlers
    assert handler.records == []


def test_detach_when_not_attached_is_noop() -> None:
    handler = ListHandler()
    handler.detach()
    assert handler.attached is False


def test_handler_cannot_be_reused(logger: logging.Logger) -> None:
    handler = ListHandler()
    handler.attach(logger)
    handler.detach()
    with pytest.raises(RuntimeError, match="already been used"):
        handler.attach(logger)
    assert handler not in logger.handlers


def test_handler_level_filters(logger: logging.Logger) -> None:
    handler = ListHandler(logging.WARNING)
    handler.attach(logger)
    logger.info("quiet")
    logger.warning("loud")
    handler.detach()
    assert [r.getMessage() for r in handler.records] == ["loud"]


def test_repr_names_logger(logger: logging.Logger) -> None:
    handler = ListHandler()
    handler.attach(logger)
    assert repr(handler) == f"<ListHandler records=0 attached_to={logger.name!r}>"
    handler.detach()
    assert repr(handler) == "<ListHandler records=0 attached_to=None>"


# End of file: src/mstair/logcapture/test_list_handler.py
