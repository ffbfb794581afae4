# ============================================================================
# POSTGRESQL DIALECT TESTS
# ============================================================================
# STATUS: Tests - Table-level and column-level PostgreSQL fragments
# PURPOSE: Verify rendered DDL strings and generator contract properties
# CREATED: 17 OCT 2026
# ============================================================================
"""
PostgreSQL Dialect Tests

Unit tests for the reference dialect:
- Table-level statements (create, drop, rename, alter, indexes, constraints)
- Column-level fragments (fixed types and typed ColumnType rendering)
- Contract properties that must hold for every registered dialect

Run with:
    pytest tests/test_postgres_generator.py -v
"""

import pytest

from ddlforge.core.config import GeneratorDefaults
from ddlforge.generators import (
    ColumnGenerator,
    PostgresColumnGenerator,
    PostgresTableGenerator,
    TableGenerator,
    get_dialect,
    list_dialects,
)
from ddlforge.types import (
    array,
    binary,
    boolean,
    custom,
    double,
    float_,
    foreign,
    integer,
    primary,
    text,
    varchar,
)


@pytest.fixture
def table_gen():
    return PostgresTableGenerator(defaults=GeneratorDefaults())


@pytest.fixture
def column_gen():
    return PostgresColumnGenerator(defaults=GeneratorDefaults())


# ============================================================================
# CONTRACT TESTS
# ============================================================================


class TestContracts:
    def test_contracts_are_abstract(self):
        with pytest.raises(TypeError):
            TableGenerator()
        with pytest.raises(TypeError):
            ColumnGenerator()

    def test_postgres_implements_both(self, table_gen, column_gen):
        assert isinstance(table_gen, TableGenerator)
        assert isinstance(column_gen, ColumnGenerator)


@pytest.mark.parametrize("dialect_name", list_dialects())
class TestEveryDialect:
    def test_increments_differs_from_integer(self, dialect_name):
        columns = get_dialect(dialect_name).columns
        assert columns.increments() != columns.integer("id")
        assert columns.increments("count") != columns.integer("count")

    def test_if_not_exists_marker(self, dialect_name):
        table = get_dialect(dialect_name).table
        guarded = table.create_table_if_not_exists("users")
        plain = table.create_table("users")
        assert "users" in guarded
        assert guarded != plain
        assert "IF NOT EXISTS" in guarded

    def test_rename_is_asymmetric(self, dialect_name):
        table = get_dialect(dialect_name).table
        assert table.rename_table("a", "b") != table.rename_table("b", "a")

    def test_end_to_end_varchar(self, dialect_name):
        columns = get_dialect(dialect_name).columns
        column_type = varchar().size(255).nullable(False).unique(True)
        fragment = columns.column("email", column_type)
        assert "255" in fragment
        assert "NOT NULL" in fragment
        assert "UNIQUE" in fragment


# ============================================================================
# TABLE GENERATOR TESTS
# ============================================================================


class TestPostgresTableGenerator:
    def test_create_table(self, table_gen):
        assert table_gen.create_table("users") == 'CREATE TABLE "users"'

    def test_create_table_if_not_exists(self, table_gen):
        assert table_gen.create_table_if_not_exists("users") == 'CREATE TABLE IF NOT EXISTS "users"'

    def test_drop_table(self, table_gen):
        assert table_gen.drop_table("users") == 'DROP TABLE "users"'
        assert table_gen.drop_table_if_exists("users") == 'DROP TABLE IF EXISTS "users"'

    def test_rename_table(self, table_gen):
        assert table_gen.rename_table("a", "b") == 'ALTER TABLE "a" RENAME TO "b"'

    def test_modify_table(self, table_gen):
        assert table_gen.modify_table("users") == 'ALTER TABLE "users"'

    def test_identifiers_are_quoted(self, table_gen):
        assert table_gen.create_table('we"ird') == 'CREATE TABLE "we""ird"'

    def test_schema_qualification(self):
        gen = PostgresTableGenerator(defaults=GeneratorDefaults(), schema="app")
        assert gen.create_table("users") == 'CREATE TABLE "app"."users"'
        assert gen.rename_table("users", "people") == 'ALTER TABLE "app"."users" RENAME TO "people"'

    def test_create_index(self, table_gen):
        assert table_gen.create_index("users", "idx_users_email", ["email"]) == (
            'CREATE INDEX "idx_users_email" ON "users" ("email")'
        )
        assert table_gen.create_index("users", "uq", ["a", "b"], unique=True) == (
            'CREATE UNIQUE INDEX "uq" ON "users" ("a", "b")'
        )

    def test_drop_index(self, table_gen):
        assert table_gen.drop_index("idx_users_email") == 'DROP INDEX "idx_users_email"'

    def test_primary_constraint(self, table_gen):
        assert table_gen.primary_constraint(["job_id", "node_id"]) == 'PRIMARY KEY ("job_id", "node_id")'

    def test_unique_constraint(self, table_gen):
        assert table_gen.unique_constraint("uq_users_email", ["email"]) == (
            'CONSTRAINT "uq_users_email" UNIQUE ("email")'
        )

    def test_foreign_constraint(self, table_gen):
        assert table_gen.foreign_constraint("fk_orders_user_id", "user_id", "users") == (
            'CONSTRAINT "fk_orders_user_id" FOREIGN KEY ("user_id") REFERENCES "users" ("id")'
        )

    def test_foreign_constraint_on_delete(self, table_gen):
        fragment = table_gen.foreign_constraint(
            "fk", "user_id", "users", ref_column="user_id", on_delete="cascade"
        )
        assert fragment.endswith('REFERENCES "users" ("user_id") ON DELETE CASCADE')

    def test_foreign_constraint_rejects_unknown_action(self, table_gen):
        with pytest.raises(ValueError):
            table_gen.foreign_constraint("fk", "user_id", "users", on_delete="EXPLODE")

    def test_comments(self, table_gen):
        assert table_gen.comment_table("users", "Accounts") == (
            'COMMENT ON TABLE "users" IS \'Accounts\''
        )
        assert table_gen.comment_column("users", "email", "Login") == (
            'COMMENT ON COLUMN "users"."email" IS \'Login\''
        )


# ============================================================================
# COLUMN GENERATOR TESTS
# ============================================================================


class TestPostgresColumnFragments:
    def test_drop_and_rename(self, column_gen):
        assert column_gen.drop_column("legacy") == 'DROP COLUMN "legacy"'
        assert column_gen.rename_column("a", "b") == 'RENAME COLUMN "a" TO "b"'

    def test_increments(self, column_gen):
        assert column_gen.increments() == '"id" SERIAL PRIMARY KEY'

    def test_increments_uses_configured_name(self):
        gen = PostgresColumnGenerator(defaults=GeneratorDefaults(increments_column="pk"))
        assert gen.increments() == '"pk" SERIAL PRIMARY KEY'

    @pytest.mark.parametrize("method,expected", [
        ("integer", '"c" INTEGER'),
        ("big_integer", '"c" BIGINT'),
        ("text", '"c" TEXT'),
        ("string", '"c" VARCHAR(255)'),
        ("float", '"c" REAL'),
        ("double", '"c" DOUBLE PRECISION'),
        ("decimal", '"c" NUMERIC(10, 2)'),
        ("boolean", '"c" BOOLEAN'),
        ("date", '"c" DATE'),
        ("date_time", '"c" TIMESTAMPTZ'),
        ("time", '"c" TIME'),
        ("timestamp", '"c" TIMESTAMP'),
        ("binary", '"c" BYTEA'),
        ("json", '"c" JSON'),
        ("jsonb", '"c" JSONB'),
        ("uuid", '"c" UUID'),
    ])
    def test_fixed_types(self, column_gen, method, expected):
        assert getattr(column_gen, method)("c") == expected

    def test_string_length(self, column_gen):
        assert column_gen.string("code", 8) == '"code" VARCHAR(8)'

    def test_string_uses_configured_bound(self):
        gen = PostgresColumnGenerator(defaults=GeneratorDefaults(string_length=100))
        assert gen.string("name") == '"name" VARCHAR(100)'

    def test_string_length_is_not_replaced_by_bound(self, column_gen):
        with pytest.raises(ValueError):
            column_gen.string("code", 0)

    def test_enumerable_needs_values(self, column_gen):
        with pytest.raises(ValueError):
            column_gen.enumerable("status", [])

    def test_decimal_precision(self, column_gen):
        assert column_gen.decimal("price", 12, 4) == '"price" NUMERIC(12, 4)'

    def test_timestamps(self, column_gen):
        assert column_gen.timestamps() == '"created_at" TIMESTAMP, "updated_at" TIMESTAMP'
        assert column_gen.drop_timestamps() == 'DROP COLUMN "created_at", DROP COLUMN "updated_at"'

    def test_enumerable(self, column_gen):
        assert column_gen.enumerable("status", ["open", "closed"]) == (
            '"status" TEXT CHECK ("status" IN (\'open\', \'closed\'))'
        )

    def test_specific_type(self, column_gen):
        assert column_gen.specific_type("geom", "GEOMETRY(Point, 4326)") == (
            '"geom" GEOMETRY(Point, 4326)'
        )

    def test_drop_constraints(self, column_gen):
        assert column_gen.drop_foreign("fk_orders_user_id") == 'DROP CONSTRAINT "fk_orders_user_id"'
        assert column_gen.drop_unique("uq_users_email") == 'DROP CONSTRAINT "uq_users_email"'
        assert column_gen.drop_primary("users") == 'DROP CONSTRAINT "users_pkey"'


class TestPostgresTypedColumns:
    @pytest.mark.parametrize("column_type,expected", [
        (text(), "TEXT"),
        (varchar(), "VARCHAR"),
        (varchar().size(40), "VARCHAR(40)"),
        (primary(), "SERIAL PRIMARY KEY"),
        (integer(), "INTEGER"),
        (integer().increments(True), "SERIAL"),
        (float_(), "REAL"),
        (double(), "DOUBLE PRECISION"),
        (boolean(), "BOOLEAN"),
        (binary(), "BYTEA"),
        (foreign("users"), 'INTEGER REFERENCES "users" ("id")'),
        (custom("TSVECTOR"), "TSVECTOR"),
        (array(integer()), "INTEGER[]"),
        (array(varchar()).size(64), "VARCHAR(64)[]"),
        (array(array(text())), "TEXT[][]"),
    ])
    def test_type_name(self, column_gen, column_type, expected):
        assert column_gen.type_name(column_type) == expected

    def test_end_to_end_varchar(self, column_gen):
        column_type = varchar().size(255).nullable(False).unique(True)
        assert column_gen.column("email", column_type) == '"email" VARCHAR(255) NOT NULL UNIQUE'

    def test_nullable_column(self, column_gen):
        assert column_gen.column("bio", text().nullable(True)) == '"bio" TEXT'

    def test_primary_column_skips_redundant_constraints(self, column_gen):
        assert column_gen.column("id", primary().unique(True)) == '"id" SERIAL PRIMARY KEY'

    def test_foreign_column(self, column_gen):
        assert column_gen.column("user_id", foreign("users")) == (
            '"user_id" INTEGER REFERENCES "users" ("id") NOT NULL'
        )

    @pytest.mark.parametrize("column_type,expected", [
        (varchar().default("anon"), "DEFAULT 'anon'"),
        (integer().default(0), "DEFAULT 0"),
        (boolean().default(True), "DEFAULT true"),
        (boolean().default(False), "DEFAULT false"),
        (array(text()).default(["a", "b"]), "DEFAULT ARRAY['a', 'b']"),
        (array(text()).default([]), "DEFAULT '{}'"),
    ])
    def test_defaults(self, column_gen, column_type, expected):
        assert column_gen.column("c", column_type).endswith(expected)

    def test_add_column(self, column_gen):
        assert column_gen.add_column("age", integer().nullable(True)) == 'ADD COLUMN "age" INTEGER'

    def test_indexed_does_not_change_fragment(self, column_gen):
        assert column_gen.column("email", text().indexed(True)) == column_gen.column("email", text())

    def test_json_document_defaults(self, column_gen):
        settings = custom("JSONB").default({"theme": "dark"})
        assert settings.validate()
        fragment = column_gen.column("settings", settings)
        assert fragment.startswith('"settings" JSONB NOT NULL DEFAULT ')
        assert '{"theme": "dark"}' in fragment
        assert fragment.endswith("::jsonb")

        tags = custom("JSONB").default(["a", "b"])
        assert tags.validate()
        assert '["a", "b"]' in column_gen.column("tags", tags)

    def test_nested_array_default(self, column_gen):
        column_type = array(array(integer())).default([[1, 2], [3, 4]])
        assert column_gen.column("grid", column_type).endswith(
            "DEFAULT ARRAY[ARRAY[1, 2], ARRAY[3, 4]]"
        )

    def test_unrenderable_raw_default_fails_validation(self):
        assert not custom("INET").default({1, 2}).validate()

    def test_foreign_column_follows_schema(self):
        gen = PostgresColumnGenerator(defaults=GeneratorDefaults(), schema="app")
        assert gen.type_name(foreign("users")) == 'INTEGER REFERENCES "app"."users" ("id")'

    def test_dialect_schema_reaches_both_generators(self):
        dialect = get_dialect("postgres", defaults=GeneratorDefaults(), schema="app")
        assert dialect.table.create_table("users") == 'CREATE TABLE "app"."users"'
        assert dialect.columns.column("user_id", foreign("users")).startswith(
            '"user_id" INTEGER REFERENCES "app"."users"'
        )
