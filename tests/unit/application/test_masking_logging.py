"""Unit tests for masking log output (stdlib filter, facade log)."""

from __future__ import annotations

import logging

from structlog.testing import capture_logs

from maskit import Maskit, Rule
from maskit.application.masking import MaskingLogFilter


def _record(msg: object, args: object = ()) -> logging.LogRecord:
    return logging.LogRecord(
        name="test", level=logging.INFO, pathname="", lineno=0,
        msg=msg, args=args, exc_info=None,  # type: ignore[arg-type]
    )


class TestMaskingLogFilter:
    def test_masks_dict_msg(self) -> None:
        log_filter = MaskingLogFilter(Maskit().compile([Rule("email", 3)]))
        record = _record({"email": "user@example.com", "text": "hello"})
        log_filter.filter(record)
        assert record.msg == {"email": "***", "text": "hello"}

    def test_masks_dict_args(self) -> None:
        log_filter = MaskingLogFilter(Maskit().compile([Rule("ssn", 3)]))
        record = _record("%s %s", ({"ssn": "123-45-6789"}, "plain"))
        log_filter.filter(record)
        assert record.args == ({"ssn": "***"}, "plain")

    def test_param_is_forwarded(self) -> None:
        compiled = Maskit().compile([Rule("email", 3, ignore=lambda p: p["role"] == "admin")])
        record = _record({"email": "a@b.c"})
        MaskingLogFilter(compiled, {"role": "admin"}).filter(record)
        assert record.msg == {"email": "a@b.c"}

    def test_plain_text_passes_through(self) -> None:
        record = _record("plain text")
        assert MaskingLogFilter(Maskit().compile()).filter(record) is True
        assert record.msg == "plain text"


class TestMaskitLog:
    def test_emits_structured_event(self) -> None:
        maskit = Maskit()
        masked = maskit.apply({"name": "John"}, values=[Rule("name", 4)])
        with capture_logs() as logs:
            maskit.log(masked)
        assert logs == [{"event": "masked_object", "payload": {"name": "****"}, "log_level": "info"}]
