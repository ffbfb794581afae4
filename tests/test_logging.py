# ============================================================================
# STRUCTURED LOGGING TESTS
# ============================================================================
# STATUS: Tests - Log context stack and formatters
# PURPOSE: Verify context merging, JSON and human output
# CREATED: 17 OCT 2026
# ============================================================================
"""
Structured Logging Tests

Run with:
    pytest tests/test_logging.py -v
"""

import json
import logging

from ddlforge.core.logging import (
    ComponentType,
    HumanFormatter,
    LogContext,
    StructuredFormatter,
    get_current_context,
    get_logger,
    log_context,
)


def _record(message="Rendered", extra=None):
    record = logging.LogRecord(
        name="ddlforge.schema.table",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=message,
        args=(),
        exc_info=None,
    )
    if extra is not None:
        record.extra = extra
    return record


class TestLogContext:
    def test_empty_by_default(self):
        assert get_current_context().to_dict() == {}

    def test_nested_contexts_merge(self):
        with log_context(dialect="postgres"):
            with log_context(table="users", extra={"columns": 3}):
                context = get_current_context()
                assert context.to_dict() == {
                    "dialect": "postgres",
                    "table": "users",
                    "columns": 3,
                }
            assert get_current_context().table is None
        assert get_current_context().dialect is None

    def test_to_dict_skips_none(self):
        assert LogContext(column="email").to_dict() == {"column": "email"}


class TestFormatters:
    def test_structured_formatter(self):
        with log_context(dialect="postgres", table="users"):
            output = StructuredFormatter().format(_record(extra={"statement_count": 2}))
        data = json.loads(output)
        assert data["level"] == "INFO"
        assert data["logger"] == "ddlforge.schema.table"
        assert data["message"] == "Rendered"
        assert data["context"] == {"dialect": "postgres", "table": "users"}
        assert data["data"] == {"statement_count": 2}
        assert data["timestamp"].endswith("Z")

    def test_human_formatter(self):
        with log_context(table="users", column="email"):
            output = HumanFormatter().format(_record())
        assert "INFO" in output
        assert "[table=users, column=email]" in output
        assert output.endswith("ddlforge.schema.table [table=users, column=email]: Rendered")


class TestContextLogger:
    def test_includes_context_and_component(self, caplog):
        logger = get_logger("ddlforge.test", ComponentType.SCHEMA)
        with caplog.at_level(logging.INFO, logger="ddlforge.test"):
            with log_context(table="users"):
                logger.info("Rendering", extra={"column_count": 2})
        record = caplog.records[-1]
        assert record.extra == {"column_count": 2, "table": "users", "component": "schema"}
