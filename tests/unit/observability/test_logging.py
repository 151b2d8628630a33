"""Unit tests for observability logging."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from maskit import Maskit, Rule
from maskit.observability.logging import JsonLoggerFactory, MaskingProcessor, get_logger


@pytest.fixture()
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestMaskingProcessor:
    def test_masks_event_fields(self) -> None:
        processor = MaskingProcessor(Maskit().compile([Rule("password", 6)]))
        result = processor(None, "info", {"event": "login", "password": "hunter2"})
        assert result == {"event": "login", "password": "******"}

    def test_mask_everything_keeps_reserved_keys(self) -> None:
        processor = MaskingProcessor(Maskit().compile())
        result = processor(None, "info", {"event": "login", "level": "info", "user": "bob"})
        assert result == {"event": "login", "level": "info", "user": "***"}

    def test_mask_everything_passes_exceptions_through(self) -> None:
        boom = ValueError("x")
        processor = MaskingProcessor(Maskit().compile())
        result = processor(None, "error", {"event": "boom", "exc_info": boom, "request_id": uuid.UUID(int=1)})
        assert result["exc_info"] is boom
        assert result["request_id"] == "*" * 36

    def test_param_is_forwarded(self) -> None:
        compiled = Maskit().compile([Rule("user", 1, ignore=lambda p: p["debug"])])
        processor = MaskingProcessor(compiled, {"debug": True})
        assert processor(None, "info", {"event": "e", "user": "bob"})["user"] == "bob"


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("maskit.test", component="engine").info("hello")
        assert logs == [{"event": "hello", "component": "engine", "log_level": "info"}]


class TestJsonLoggerFactory:
    def test_installs_masking_processor(self, restore_logging: None) -> None:
        compiled = Maskit().compile([Rule("token", 3)])
        JsonLoggerFactory.configure(level=logging.DEBUG, mask=compiled)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[0], MaskingProcessor)
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_without_mask(self, restore_logging: None) -> None:
        JsonLoggerFactory.configure()
        processors = structlog.get_config()["processors"]
        assert not any(isinstance(p, MaskingProcessor) for p in processors)
