# ============================================================================
# DDL UTILITIES
# ============================================================================
# STATUS: Core - Shared psycopg.sql composition helpers
# PURPOSE: Identifier, index, constraint and comment builders
# CREATED: 17 OCT 2026
# EXPORTS: render, qualified, IndexBuilder, ConstraintBuilder, CommentBuilder
# DEPENDENCIES: psycopg
# ============================================================================
"""
DDL Utilities - Shared SQL Composition Patterns.

Builders return psycopg.sql.Composed objects; ``render()`` turns them into
plain strings without a database connection (identifiers are double-quoted,
literals escaped). No string concatenation of user-supplied names.

Usage:
    from ddlforge.generators.ddl_utils import IndexBuilder, render

    idx = IndexBuilder.btree('users', ['email'])
    render(idx)
    # CREATE INDEX "idx_users_email" ON "users" ("email")
"""

from typing import Any, List, Optional, Sequence, Union

from psycopg import sql
from psycopg.types.json import Jsonb


def render(statement: sql.Composable) -> str:
    """Render a composed statement to a string without a connection."""
    return statement.as_string(None)


def qualified(name: str, schema: Optional[str] = None) -> sql.Identifier:
    """Identifier for ``name``, schema-qualified when a schema is given."""
    if schema:
        return sql.Identifier(schema, name)
    return sql.Identifier(name)


def identifier_list(columns: Sequence[str]) -> sql.Composed:
    """Comma-separated, quoted column identifiers."""
    return sql.SQL(", ").join(sql.Identifier(c) for c in columns)


def literal(value: Any, array_depth: int = 0) -> sql.Composable:
    """
    SQL literal for a default value.

    Args:
        value: Default value
        array_depth: Number of ARRAY layers of the column kind

    Booleans render as true/false. Sequences render as ARRAY[...] while
    ``array_depth`` allows it; dicts and any remaining sequences become
    JSONB documents. Everything else is escaped by psycopg.
    """
    if isinstance(value, bool):
        return sql.SQL("true" if value else "false")
    if isinstance(value, (list, tuple)) and array_depth > 0:
        if not value:
            return sql.SQL("'{}'")
        return sql.SQL("ARRAY[{}]").format(
            sql.SQL(", ").join(literal(v, array_depth - 1) for v in value)
        )
    if isinstance(value, (dict, list, tuple)):
        return sql.Literal(Jsonb(value))
    return sql.Literal(value)


# ============================================================================
# INDEX BUILDER
# ============================================================================

class IndexBuilder:
    """
    Builder for index DDL statements.

    All methods are static and return sql.Composed objects.
    """

    @staticmethod
    def _normalize_columns(columns: Union[str, Sequence[str]]) -> List[str]:
        """Convert single column or sequence to list."""
        if isinstance(columns, str):
            return [columns]
        return list(columns)

    @staticmethod
    def generate_index_name(
        table: str,
        columns: Sequence[str],
        prefix: str = 'idx'
    ) -> str:
        """Generate conventional index name."""
        col_part = '_'.join(columns)
        return f"{prefix}_{table}_{col_part}"

    @staticmethod
    def btree(
        table: str,
        columns: Union[str, Sequence[str]],
        name: Optional[str] = None,
        schema: Optional[str] = None,
    ) -> sql.Composed:
        """
        Create B-tree index.

        Args:
            table: Table name
            columns: Column name(s) to index
            name: Optional custom index name
            schema: Optional schema qualifying the table

        Returns:
            sql.Composed CREATE INDEX statement
        """
        cols = IndexBuilder._normalize_columns(columns)
        idx_name = name or IndexBuilder.generate_index_name(table, cols)

        return sql.SQL("CREATE INDEX {name} ON {table} ({columns})").format(
            name=sql.Identifier(idx_name),
            table=qualified(table, schema),
            columns=identifier_list(cols)
        )

    @staticmethod
    def unique(
        table: str,
        columns: Union[str, Sequence[str]],
        name: Optional[str] = None,
        schema: Optional[str] = None,
    ) -> sql.Composed:
        """Create unique index."""
        cols = IndexBuilder._normalize_columns(columns)
        idx_name = name or IndexBuilder.generate_index_name(table, cols, prefix='idx_unique')

        return sql.SQL("CREATE UNIQUE INDEX {name} ON {table} ({columns})").format(
            name=sql.Identifier(idx_name),
            table=qualified(table, schema),
            columns=identifier_list(cols)
        )

    @staticmethod
    def drop(name: str, schema: Optional[str] = None) -> sql.Composed:
        """Drop an index by name."""
        return sql.SQL("DROP INDEX {}").format(qualified(name, schema))


# ============================================================================
# CONSTRAINT BUILDER
# ============================================================================

ON_DELETE_ACTIONS = ("CASCADE", "SET NULL", "SET DEFAULT", "RESTRICT", "NO ACTION")


class ConstraintBuilder:
    """
    Builder for table constraint fragments.

    Fragments are valid both inside a CREATE TABLE body and after
    ``ALTER TABLE ... ADD``.
    """

    @staticmethod
    def primary_key(columns: Sequence[str]) -> sql.Composed:
        return sql.SQL("PRIMARY KEY ({})").format(identifier_list(columns))

    @staticmethod
    def unique(name: str, columns: Sequence[str]) -> sql.Composed:
        return sql.SQL("CONSTRAINT {} UNIQUE ({})").format(
            sql.Identifier(name),
            identifier_list(columns)
        )

    @staticmethod
    def foreign_key(
        name: str,
        column: str,
        ref_table: str,
        ref_column: str,
        on_delete: Optional[str] = None,
        ref_schema: Optional[str] = None,
    ) -> sql.Composed:
        """
        FOREIGN KEY constraint fragment.

        Raises:
            ValueError: If on_delete is not a known referential action
        """
        stmt = sql.SQL("CONSTRAINT {} FOREIGN KEY ({}) REFERENCES {} ({})").format(
            sql.Identifier(name),
            sql.Identifier(column),
            qualified(ref_table, ref_schema),
            sql.Identifier(ref_column)
        )
        if on_delete:
            action = on_delete.upper()
            if action not in ON_DELETE_ACTIONS:
                raise ValueError(f"Unknown ON DELETE action: {on_delete}")
            stmt = sql.SQL("{} ON DELETE {}").format(stmt, sql.SQL(action))
        return stmt

    @staticmethod
    def drop(name: str) -> sql.Composed:
        return sql.SQL("DROP CONSTRAINT {}").format(sql.Identifier(name))


# ============================================================================
# COMMENT BUILDER
# ============================================================================

class CommentBuilder:
    """
    Builder for COMMENT statements.
    """

    @staticmethod
    def table(table: str, comment: str, schema: Optional[str] = None) -> sql.Composed:
        """Add comment to table."""
        return sql.SQL("COMMENT ON TABLE {} IS {}").format(
            qualified(table, schema),
            sql.Literal(comment)
        )

    @staticmethod
    def column(table: str, column: str, comment: str, schema: Optional[str] = None) -> sql.Composed:
        """Add comment to column."""
        target = sql.Identifier(schema, table, column) if schema else sql.Identifier(table, column)
        return sql.SQL("COMMENT ON COLUMN {} IS {}").format(
            target,
            sql.Literal(comment)
        )


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    'render',
    'qualified',
    'identifier_list',
    'literal',
    'IndexBuilder',
    'ConstraintBuilder',
    'CommentBuilder',
    'ON_DELETE_ACTIONS',
]
