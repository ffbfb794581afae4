# ============================================================================
# POSTGRESQL DIALECT
# ============================================================================
# STATUS: Core - Reference dialect implementation
# PURPOSE: Render table and column DDL fragments for PostgreSQL
# CREATED: 17 OCT 2026
# EXPORTS: PostgresTableGenerator, PostgresColumnGenerator
# DEPENDENCIES: psycopg
# ============================================================================
"""
PostgreSQL dialect.

Type mapping:
    Text         -> TEXT
    Varchar      -> VARCHAR / VARCHAR(n)
    Primary      -> SERIAL PRIMARY KEY
    Integer      -> INTEGER (SERIAL when incrementing)
    Float        -> REAL
    Double       -> DOUBLE PRECISION
    Boolean      -> BOOLEAN
    Binary       -> BYTEA (size is not enforced by PostgreSQL and is dropped)
    Foreign(t)   -> INTEGER REFERENCES "t" ("id")
    Custom(raw)  -> raw
    Array(e)     -> <e>[]   (size applies to the innermost element)

Fragments are composed with psycopg.sql and rendered without a connection.
"""

from typing import Optional, Sequence

from psycopg import sql

from ddlforge.core.config import GeneratorDefaults
from ddlforge.core.contracts import Kind
from ddlforge.core.logging import ComponentType, get_logger
from ddlforge.generators.base import ColumnGenerator, TableGenerator
from ddlforge.generators.ddl_utils import (
    CommentBuilder,
    ConstraintBuilder,
    IndexBuilder,
    literal,
    qualified,
    render,
)
from ddlforge.types.impls import BaseType, ColumnType

logger = get_logger(__name__, ComponentType.GENERATOR)


SIMPLE_TYPES = {
    Kind.TEXT: "TEXT",
    Kind.VARCHAR: "VARCHAR",
    Kind.INTEGER: "INTEGER",
    Kind.FLOAT: "REAL",
    Kind.DOUBLE: "DOUBLE PRECISION",
    Kind.BOOLEAN: "BOOLEAN",
    Kind.BINARY: "BYTEA",
}


# ============================================================================
# TABLE GENERATOR
# ============================================================================

class PostgresTableGenerator(TableGenerator):
    """
    PostgreSQL table-level statements.

    With ``schema`` set, every table name is schema-qualified.
    """

    def __init__(
        self,
        defaults: Optional[GeneratorDefaults] = None,
        schema: Optional[str] = None,
    ):
        super().__init__(defaults=defaults)
        self.schema = schema

    def _table(self, name: str) -> sql.Identifier:
        return qualified(name, self.schema)

    def create_table(self, name: str) -> str:
        logger.debug(f"create_table {name}")
        return render(sql.SQL("CREATE TABLE {}").format(self._table(name)))

    def create_table_if_not_exists(self, name: str) -> str:
        return render(sql.SQL("CREATE TABLE IF NOT EXISTS {}").format(self._table(name)))

    def drop_table(self, name: str) -> str:
        return render(sql.SQL("DROP TABLE {}").format(self._table(name)))

    def drop_table_if_exists(self, name: str) -> str:
        return render(sql.SQL("DROP TABLE IF EXISTS {}").format(self._table(name)))

    def rename_table(self, old: str, new: str) -> str:
        # RENAME TO never takes a schema; the table stays in its schema
        return render(sql.SQL("ALTER TABLE {} RENAME TO {}").format(
            self._table(old),
            sql.Identifier(new)
        ))

    def modify_table(self, name: str) -> str:
        return render(sql.SQL("ALTER TABLE {}").format(self._table(name)))

    def create_index(
        self,
        table: str,
        name: str,
        columns: Sequence[str],
        unique: bool = False,
    ) -> str:
        if unique:
            return render(IndexBuilder.unique(table, columns, name=name, schema=self.schema))
        return render(IndexBuilder.btree(table, columns, name=name, schema=self.schema))

    def drop_index(self, name: str) -> str:
        return render(IndexBuilder.drop(name, schema=self.schema))

    def primary_constraint(self, columns: Sequence[str]) -> str:
        return render(ConstraintBuilder.primary_key(columns))

    def unique_constraint(self, name: str, columns: Sequence[str]) -> str:
        return render(ConstraintBuilder.unique(name, columns))

    def foreign_constraint(
        self,
        name: str,
        column: str,
        ref_table: str,
        ref_column: Optional[str] = None,
        on_delete: Optional[str] = None,
    ) -> str:
        return render(ConstraintBuilder.foreign_key(
            name,
            column,
            ref_table,
            ref_column or self.defaults.foreign_key_column,
            on_delete=on_delete,
            ref_schema=self.schema,
        ))

    def comment_table(self, table: str, comment: str) -> str:
        return render(CommentBuilder.table(table, comment, schema=self.schema))

    def comment_column(self, table: str, column: str, comment: str) -> str:
        return render(CommentBuilder.column(table, column, comment, schema=self.schema))


# ============================================================================
# COLUMN GENERATOR
# ============================================================================

class PostgresColumnGenerator(ColumnGenerator):
    """
    PostgreSQL column definitions and ALTER actions.

    With ``schema`` set, foreign key columns reference schema-qualified
    tables, matching PostgresTableGenerator.
    """

    def __init__(
        self,
        defaults: Optional[GeneratorDefaults] = None,
        schema: Optional[str] = None,
    ):
        super().__init__(defaults=defaults)
        self.schema = schema

    @staticmethod
    def _define(name: str, type_sql: str) -> str:
        return render(sql.SQL("{} {}").format(sql.Identifier(name), sql.SQL(type_sql)))

    # =========================================================================
    # ALTER ACTIONS
    # =========================================================================

    def drop_column(self, name: str) -> str:
        return render(sql.SQL("DROP COLUMN {}").format(sql.Identifier(name)))

    def rename_column(self, old: str, new: str) -> str:
        return render(sql.SQL("RENAME COLUMN {} TO {}").format(
            sql.Identifier(old),
            sql.Identifier(new)
        ))

    def add_column(self, name: str, column_type: ColumnType) -> str:
        return f"ADD COLUMN {self.column(name, column_type)}"

    def drop_foreign(self, name: str) -> str:
        return render(ConstraintBuilder.drop(name))

    def drop_unique(self, name: str) -> str:
        return render(ConstraintBuilder.drop(name))

    def drop_primary(self, table: str) -> str:
        # Implicit name PostgreSQL gives a table's primary key
        return render(ConstraintBuilder.drop(f"{table}_pkey"))

    # =========================================================================
    # COLUMN DEFINITIONS
    # =========================================================================

    def increments(self, name: Optional[str] = None) -> str:
        return self._define(name or self.defaults.increments_column, "SERIAL PRIMARY KEY")

    def integer(self, name: str) -> str:
        return self._define(name, "INTEGER")

    def big_integer(self, name: str) -> str:
        return self._define(name, "BIGINT")

    def text(self, name: str) -> str:
        return self._define(name, "TEXT")

    def string(self, name: str, length: Optional[int] = None) -> str:
        """
        Raises:
            ValueError: If length is less than 1
        """
        if length is None:
            length = self.defaults.string_length
        if int(length) < 1:
            raise ValueError(f"VARCHAR length must be positive, got {length}")
        return self._define(name, f"VARCHAR({int(length)})")

    def float(self, name: str) -> str:
        return self._define(name, "REAL")

    def double(self, name: str) -> str:
        return self._define(name, "DOUBLE PRECISION")

    def decimal(
        self,
        name: str,
        precision: Optional[int] = None,
        scale: Optional[int] = None,
    ) -> str:
        precision = int(precision if precision is not None else self.defaults.decimal_precision)
        scale = int(scale if scale is not None else self.defaults.decimal_scale)
        return self._define(name, f"NUMERIC({precision}, {scale})")

    def boolean(self, name: str) -> str:
        return self._define(name, "BOOLEAN")

    def date(self, name: str) -> str:
        return self._define(name, "DATE")

    def date_time(self, name: str) -> str:
        return self._define(name, "TIMESTAMPTZ")

    def time(self, name: str) -> str:
        return self._define(name, "TIME")

    def timestamp(self, name: str) -> str:
        return self._define(name, "TIMESTAMP")

    def binary(self, name: str) -> str:
        return self._define(name, "BYTEA")

    def json(self, name: str) -> str:
        return self._define(name, "JSON")

    def jsonb(self, name: str) -> str:
        return self._define(name, "JSONB")

    def uuid(self, name: str) -> str:
        return self._define(name, "UUID")

    def enumerable(self, name: str, values: Sequence[str]) -> str:
        """
        Raises:
            ValueError: If values is empty (IN () is not valid SQL)
        """
        if not values:
            raise ValueError(f"enumerable column {name} needs at least one value")
        return render(sql.SQL("{name} TEXT CHECK ({name} IN ({values}))").format(
            name=sql.Identifier(name),
            values=sql.SQL(", ").join(sql.Literal(str(v)) for v in values)
        ))

    def specific_type(self, name: str, raw_type: str) -> str:
        return self._define(name, raw_type)

    # =========================================================================
    # TYPED COLUMNS
    # =========================================================================

    def _base_sql(self, base: BaseType, size: Optional[int], increments: bool) -> sql.Composable:
        kind = base.kind

        if kind is Kind.PRIMARY:
            return sql.SQL("SERIAL PRIMARY KEY")
        if kind is Kind.INTEGER and increments:
            return sql.SQL("SERIAL")
        if kind is Kind.VARCHAR and size:
            return sql.SQL("VARCHAR({})").format(sql.SQL(str(int(size))))
        if kind is Kind.FOREIGN:
            return sql.SQL("INTEGER REFERENCES {} ({})").format(
                qualified(base.name, self.schema),
                sql.Identifier(self.defaults.foreign_key_column)
            )
        if kind is Kind.CUSTOM:
            return sql.SQL(base.name)
        if kind is Kind.ARRAY:
            return sql.SQL("{}[]").format(self._base_sql(base.element, size, False))
        return sql.SQL(SIMPLE_TYPES[kind])

    def type_name(self, column_type: ColumnType) -> str:
        return render(self._base_sql(
            self.kind_of(column_type),
            column_type.size_limit,
            column_type.is_incrementing,
        ))

    def column(self, name: str, column_type: ColumnType) -> str:
        base = self.kind_of(column_type)
        is_primary = base.kind is Kind.PRIMARY

        parts = [
            sql.Identifier(name),
            sql.SQL(" "),
            self._base_sql(base, column_type.size_limit, column_type.is_incrementing),
        ]

        # PRIMARY KEY already implies NOT NULL and UNIQUE
        if not column_type.is_nullable and not is_primary:
            parts.append(sql.SQL(" NOT NULL"))
        if column_type.is_unique and not is_primary:
            parts.append(sql.SQL(" UNIQUE"))
        if column_type.default_value is not None:
            parts.extend([sql.SQL(" DEFAULT "), literal(column_type.default_value, base.depth())])

        fragment = render(sql.Composed(parts))
        logger.debug(f"column {name}: {fragment}")
        return fragment


__all__ = ["PostgresTableGenerator", "PostgresColumnGenerator"]
