# ============================================================================
# DIALECT REGISTRY & CONFIG TESTS
# ============================================================================
# STATUS: Tests - Dialect lookup, registration and generator defaults
# PURPOSE: Verify registry errors, generator reuse and env overrides
# CREATED: 17 OCT 2026
# ============================================================================
"""
Dialect Registry & Config Tests

Run with:
    pytest tests/test_registry.py -v
"""

import pytest

from ddlforge.core.config import GeneratorDefaults, get_defaults, reset_defaults
from ddlforge.core.contracts import DialectNotFoundError, DuplicateDialectError
from ddlforge.generators import (
    PostgresColumnGenerator,
    PostgresTableGenerator,
    get_dialect,
    list_dialects,
    register_dialect,
    unregister_dialect,
)


@pytest.fixture(autouse=True)
def fresh_defaults():
    reset_defaults()
    yield
    reset_defaults()


class CompactColumnGenerator(PostgresColumnGenerator):
    """Same ALTER syntax as PostgreSQL, different string type."""

    def string(self, name, length=None):
        return self.text(name)


# ============================================================================
# REGISTRY TESTS
# ============================================================================


class TestRegistry:
    def test_postgres_registered(self):
        assert "postgres" in list_dialects()

    def test_get_dialect(self):
        dialect = get_dialect("postgres")
        assert dialect.name == "postgres"
        assert isinstance(dialect.table, PostgresTableGenerator)
        assert isinstance(dialect.columns, PostgresColumnGenerator)

    def test_default_dialect(self):
        assert get_dialect().name == "postgres"

    def test_unknown_dialect(self):
        with pytest.raises(DialectNotFoundError) as exc_info:
            get_dialect("oracle")
        assert exc_info.value.dialect_name == "oracle"

    def test_duplicate_registration(self):
        with pytest.raises(DuplicateDialectError):
            register_dialect("postgres", PostgresTableGenerator, PostgresColumnGenerator)

    def test_reuse_one_contract(self):
        register_dialect("compact", PostgresTableGenerator, CompactColumnGenerator)
        try:
            compact = get_dialect("compact")
            postgres = get_dialect("postgres")
            assert compact.table.rename_table("a", "b") == postgres.table.rename_table("a", "b")
            assert compact.columns.string("name") == '"name" TEXT'
            assert postgres.columns.string("name") == '"name" VARCHAR(255)'
        finally:
            unregister_dialect("compact")
        assert "compact" not in list_dialects()

    def test_defaults_passed_to_generators(self):
        defaults = GeneratorDefaults(string_length=64)
        dialect = get_dialect("postgres", defaults=defaults)
        assert dialect.table.defaults is defaults
        assert dialect.columns.string("code") == '"code" VARCHAR(64)'


# ============================================================================
# CONFIG TESTS
# ============================================================================


class TestGeneratorDefaults:
    def test_values(self):
        defaults = GeneratorDefaults()
        assert defaults.default_dialect == "postgres"
        assert defaults.string_length == 255
        assert defaults.increments_column == "id"
        assert defaults.timestamp_columns == ("created_at", "updated_at")

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("DDLFORGE_STRING_LENGTH", "100")
        monkeypatch.setenv("DDLFORGE_INCREMENTS_COLUMN", "pk")
        monkeypatch.setenv("DDLFORGE_TIMESTAMP_COLUMNS", "inserted_at, modified_at")
        defaults = GeneratorDefaults.from_env()
        assert defaults.string_length == 100
        assert defaults.increments_column == "pk"
        assert defaults.timestamp_columns == ("inserted_at", "modified_at")

    def test_get_defaults_is_cached(self, monkeypatch):
        first = get_defaults()
        monkeypatch.setenv("DDLFORGE_STRING_LENGTH", "10")
        assert get_defaults() is first
        reset_defaults()
        assert get_defaults().string_length == 10

    def test_env_reaches_generators(self, monkeypatch):
        monkeypatch.setenv("DDLFORGE_STRING_LENGTH", "80")
        reset_defaults()
        assert get_dialect("postgres").columns.string("name") == '"name" VARCHAR(80)'

    def test_unknown_env_dialect(self, monkeypatch):
        monkeypatch.setenv("DDLFORGE_DIALECT", "nosuch")
        reset_defaults()
        with pytest.raises(DialectNotFoundError):
            get_dialect()
