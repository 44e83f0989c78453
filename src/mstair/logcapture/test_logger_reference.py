# File: src/mstair/logcapture/test_logger_reference.py
"""
Tests for LoggerReference adapters and logger_reference() coercion.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import ModuleType

import pytest

from mstair.logcapture.logger_reference import (
    ClassLoggerReference,
    HandleLoggerReference,
    LoggerReference,
    NamedLoggerReference,
    logger_name_for,
    logger_reference,
)


class Warehouse:
    class Shelf:
        pass


@dataclass(frozen=True)
class _AuditReference:
    """A caller-defined reference; only resolve() is required."""

    def resolve(self) -> logging.Logger:
        return logging.getLogger("audit")


# ---------- Naming ----------


def test_logger_name_for_class_uses_qualname() -> None:
    assert logger_name_for(Warehouse) == f"{__name__}.Warehouse"
    assert logger_name_for(Warehouse.Shelf) == f"{__name__}.Warehouse.Shelf"


def test_logger_name_for_module_uses_dunder_name() -> None:
    assert logger_name_for(ModuleType("svc.orders")) == "svc.orders"


# ---------- Adapters ----------


def test_each_adapter_resolves_the_registry_logger() -> None:
    expected = logging.getLogger(f"{__name__}.Warehouse")
    assert ClassLoggerReference(Warehouse).resolve() is expected
    assert NamedLoggerReference(expected.name).resolve() is expected
    assert HandleLoggerReference(expected).resolve() is expected


def test_empty_name_is_root() -> None:
    assert NamedLoggerReference("").resolve() is logging.getLogger()


def test_handle_reference_does_not_consult_registry() -> None:
    detached = logging.Logger("not.registered")
    assert HandleLoggerReference(detached).resolve() is detached
    assert logging.getLogger("not.registered") is not detached


# ---------- Coercion ----------


class TestLoggerReferenceCoercion:
    def test_str(self) -> None:
        assert logger_reference("svc.orders") == NamedLoggerReference("svc.orders")

    def test_class_and_module(self) -> None:
        module = ModuleType("svc.stock")
        assert logger_reference(Warehouse) == ClassLoggerReference(Warehouse)
        assert logger_reference(module) == ClassLoggerReference(module)

    def test_logger(self) -> None:
        log = logging.getLogger("svc.orders")
        assert logger_reference(log) == HandleLoggerReference(log)

    def test_root_logger_instance(self) -> None:
        root = logging.getLogger()
        assert logger_reference(root).resolve() is root

    def test_adapter_unwraps_to_logger(self) -> None:
        log = logging.getLogger("svc.orders")
        adapter = logging.LoggerAdapter(logging.LoggerAdapter(log, {}), {})
        assert logger_reference(adapter).resolve() is log

    def test_custom_reference_passes_through(self) -> None:
        ref = _AuditReference()
        assert isinstance(ref, LoggerReference)
        assert logger_reference(ref) is ref

    @pytest.mark.parametrize("target", [None, 42, 3.5, b"svc.orders", ["svc"]])
    def test_unsupported_targets(self, target: object) -> None:
        with pytest.raises(TypeError, match="expected a logger name"):
            logger_reference(target)  # type: ignore[arg-type]


# End of file: src/mstair/logcapture/test_logger_reference.py
