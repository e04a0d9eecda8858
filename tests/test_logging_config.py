"""Tests for context-aware logging."""

import json
import logging

from recipebox.logging_config import (
    ContextualFormatter,
    LoggingContext,
    StructuredJsonFormatter,
    request_id_ctx,
    storage_key_ctx,
)


def make_record(message: str = "loaded") -> logging.LogRecord:
    return logging.LogRecord(
        name="recipebox.storage",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )


class TestLoggingContext:
    def test_sets_and_restores_context(self):
        with LoggingContext(request_id="abc123456789", storage_key="pantry-staples"):
            assert request_id_ctx.get() == "abc123456789"
            assert storage_key_ctx.get() == "pantry-staples"

            with LoggingContext(storage_key="weekly-meal-plan"):
                assert storage_key_ctx.get() == "weekly-meal-plan"
                assert request_id_ctx.get() == "abc123456789"

            assert storage_key_ctx.get() == "pantry-staples"

        assert request_id_ctx.get() is None
        assert storage_key_ctx.get() is None


class TestFormatters:
    def test_contextual_formatter_includes_context(self):
        with LoggingContext(request_id="abc123456789", storage_key="pantry-staples"):
            formatted = ContextualFormatter().format(make_record())

        assert "[req=abc12345, key=pantry-staples]" in formatted
        assert formatted.endswith("| loaded")

    def test_json_formatter_includes_context(self):
        with LoggingContext(storage_key="grocery-list-checked"):
            data = json.loads(StructuredJsonFormatter().format(make_record()))

        assert data["message"] == "loaded"
        assert data["storage_key"] == "grocery-list-checked"
        assert "request_id" not in data
        assert data["level"] == "INFO"
