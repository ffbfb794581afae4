# ============================================================================
# TABLE BUILDER
# ============================================================================
# STATUS: Schema - Table descriptions rendered through a dialect
# PURPOSE: Compose generator fragments into complete DDL statements
# CREATED: 17 OCT 2026
# EXPORTS: Column, Table, TableAlteration
# ============================================================================
"""
Table builder.

Holds a named table and an ordered sequence of named columns, validates
them, and renders complete statements through a dialect's generators:

    from ddlforge.generators import get_dialect
    from ddlforge.schema import Table
    from ddlforge.types import primary, varchar

    users = (
        Table("users")
        .add_column("id", primary())
        .add_column("email", varchar().size(255).unique(True))
    )
    for stmt in users.create_sql(get_dialect("postgres")):
        print(stmt)

Names are checked when they are added (InvalidIdentifierError); column
metadata is checked when rendered (InvalidColumnError). The generators
themselves never raise for well-formed input.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ddlforge.core.contracts import (
    DuplicatePrimaryKeyError,
    InvalidColumnError,
    InvalidIdentifierError,
    Kind,
)
from ddlforge.core.logging import ComponentType, get_logger, log_context
from ddlforge.generators.base import ColumnGenerator
from ddlforge.generators.ddl_utils import IndexBuilder
from ddlforge.generators.registry import Dialect
from ddlforge.types.impls import ColumnType

logger = get_logger(__name__, ComponentType.SCHEMA)


def require_name(name: Optional[str], role: str) -> str:
    """
    Reject empty or whitespace-only identifiers.

    Raises:
        InvalidIdentifierError: If the name is empty
    """
    if not isinstance(name, str) or not name.strip():
        raise InvalidIdentifierError(name, role=role)
    return name


def check_column(name: str, column_type: ColumnType) -> None:
    """
    Raises:
        InvalidColumnError: If the column's metadata fails validation
    """
    reasons = column_type.validation_errors()
    if reasons:
        with log_context(column=name):
            logger.warning(
                f"Rejected column {name}",
                extra={"reasons": [r.value for r in reasons]},
            )
        raise InvalidColumnError(name, reasons)


# ============================================================================
# DESCRIPTIONS
# ============================================================================

@dataclass(frozen=True)
class Column:
    """A named column and its fully-configured type."""
    name: str
    column_type: ColumnType


@dataclass(frozen=True)
class IndexDefinition:
    name: str
    columns: Tuple[str, ...]
    unique: bool = False


@dataclass(frozen=True)
class UniqueDefinition:
    name: str
    columns: Tuple[str, ...]


@dataclass(frozen=True)
class ForeignKeyDefinition:
    name: str
    column: str
    ref_table: str
    ref_column: Optional[str] = None
    on_delete: Optional[str] = None


# ============================================================================
# TABLE
# ============================================================================

class Table:
    """
    Description of a table to create or drop.

    Builder methods mutate the description and return it for chaining.
    """

    def __init__(self, name: str, comment: Optional[str] = None):
        self.name = require_name(name, "table")
        self.comment = comment
        self.columns: List[Column] = []
        self.primary_key: List[str] = []
        self.uniques: List[UniqueDefinition] = []
        self.foreign_keys: List[ForeignKeyDefinition] = []
        self.indexes: List[IndexDefinition] = []

    def column_names(self) -> List[str]:
        return [c.name for c in self.columns]

    def primary_columns(self) -> List[str]:
        """Columns declared with primary()."""
        return [
            c.name for c in self.columns
            if ColumnGenerator.kind_of(c.column_type).kind is Kind.PRIMARY
        ]

    # =========================================================================
    # BUILDER
    # =========================================================================

    def add_column(self, name: str, column_type: ColumnType) -> "Table":
        require_name(name, "column")
        if name in self.column_names():
            raise InvalidIdentifierError(name, role="duplicate column")
        if ColumnGenerator.kind_of(column_type).kind is Kind.PRIMARY:
            if self.primary_key or self.primary_columns():
                raise DuplicatePrimaryKeyError(self.name, [name])
        self.columns.append(Column(name, column_type))
        return self

    def set_primary_key(self, columns: Sequence[str]) -> "Table":
        """
        Table-level primary key, for keys not declared with primary().

        Raises:
            DuplicatePrimaryKeyError: If a primary() column already exists
        """
        columns = [require_name(c, "primary key column") for c in columns]
        if self.primary_columns():
            raise DuplicatePrimaryKeyError(self.name, columns)
        self.primary_key = columns
        return self

    def add_unique(self, columns: Sequence[str], name: Optional[str] = None) -> "Table":
        cols = tuple(require_name(c, "unique column") for c in columns)
        name = name or IndexBuilder.generate_index_name(self.name, cols, prefix="uq")
        self.uniques.append(UniqueDefinition(require_name(name, "constraint"), cols))
        return self

    def add_foreign(
        self,
        column: str,
        ref_table: str,
        ref_column: Optional[str] = None,
        on_delete: Optional[str] = None,
        name: Optional[str] = None,
    ) -> "Table":
        require_name(column, "foreign key column")
        require_name(ref_table, "referenced table")
        name = name or IndexBuilder.generate_index_name(self.name, [column], prefix="fk")
        self.foreign_keys.append(ForeignKeyDefinition(
            name=require_name(name, "constraint"),
            column=column,
            ref_table=ref_table,
            ref_column=ref_column,
            on_delete=on_delete,
        ))
        return self

    def add_index(
        self,
        columns: Sequence[str],
        name: Optional[str] = None,
        unique: bool = False,
    ) -> "Table":
        cols = tuple(require_name(c, "index column") for c in columns)
        name = name or IndexBuilder.generate_index_name(
            self.name, cols, prefix="idx_unique" if unique else "idx"
        )
        self.indexes.append(IndexDefinition(require_name(name, "index"), cols, unique))
        return self

    # =========================================================================
    # RENDERING
    # =========================================================================

    def _index_statements(self, dialect: Dialect) -> List[str]:
        statements = []
        for column in self.columns:
            if column.column_type.is_indexed:
                idx_name = IndexBuilder.generate_index_name(self.name, [column.name])
                statements.append(dialect.table.create_index(self.name, idx_name, [column.name]))
        for index in self.indexes:
            statements.append(
                dialect.table.create_index(self.name, index.name, index.columns, unique=index.unique)
            )
        return statements

    def create_sql(self, dialect: Dialect, if_not_exists: bool = False) -> List[str]:
        """
        Render CREATE TABLE followed by its index and comment statements.

        Raises:
            InvalidColumnError: If any column's metadata fails validation
        """
        with log_context(dialect=dialect.name, table=self.name, operation="create"):
            for column in self.columns:
                check_column(column.name, column.column_type)

            if if_not_exists:
                opening = dialect.table.create_table_if_not_exists(self.name)
            else:
                opening = dialect.table.create_table(self.name)

            body = []
            for column in self.columns:
                with log_context(column=column.name):
                    body.append(dialect.columns.column(column.name, column.column_type))
            if self.primary_key:
                body.append(dialect.table.primary_constraint(self.primary_key))
            for unique in self.uniques:
                body.append(dialect.table.unique_constraint(unique.name, unique.columns))
            for fk in self.foreign_keys:
                body.append(dialect.table.foreign_constraint(
                    fk.name, fk.column, fk.ref_table,
                    ref_column=fk.ref_column,
                    on_delete=fk.on_delete,
                ))

            statements = [f"{opening} ({', '.join(body)})"]
            statements.extend(self._index_statements(dialect))
            if self.comment:
                statements.append(dialect.table.comment_table(self.name, self.comment))

            logger.debug(f"Rendered {len(statements)} statements for {self.name}")
            return statements

    def drop_sql(self, dialect: Dialect, if_exists: bool = False) -> str:
        if if_exists:
            return dialect.table.drop_table_if_exists(self.name)
        return dialect.table.drop_table(self.name)


# ============================================================================
# TABLE ALTERATION
# ============================================================================

class TableAlteration:
    """
    Changes to an existing table.

    Column actions are comma-joined into one ALTER statement; renames and
    index changes each get their own statement.
    """

    def __init__(self, name: str):
        self.name = require_name(name, "table")
        self.new_name: Optional[str] = None
        self.added: List[Column] = []
        self.dropped: List[str] = []
        self.renamed: List[Tuple[str, str]] = []
        self.dropped_constraints: List[Tuple[str, str]] = []
        self.dropped_indexes: List[str] = []

    def add_column(self, name: str, column_type: ColumnType) -> "TableAlteration":
        require_name(name, "column")
        self.added.append(Column(name, column_type))
        return self

    def drop_column(self, name: str) -> "TableAlteration":
        self.dropped.append(require_name(name, "column"))
        return self

    def rename_column(self, old: str, new: str) -> "TableAlteration":
        self.renamed.append((require_name(old, "column"), require_name(new, "column")))
        return self

    def drop_foreign(self, name: str) -> "TableAlteration":
        self.dropped_constraints.append(("foreign", require_name(name, "constraint")))
        return self

    def drop_unique(self, name: str) -> "TableAlteration":
        self.dropped_constraints.append(("unique", require_name(name, "constraint")))
        return self

    def drop_primary(self) -> "TableAlteration":
        self.dropped_constraints.append(("primary", self.name))
        return self

    def drop_index(self, name: str) -> "TableAlteration":
        self.dropped_indexes.append(require_name(name, "index"))
        return self

    def rename_to(self, new_name: str) -> "TableAlteration":
        self.new_name = require_name(new_name, "table")
        return self

    def alter_sql(self, dialect: Dialect) -> List[str]:
        """
        Render the ALTER statements for this alteration.

        Raises:
            InvalidColumnError: If an added column's metadata fails validation
        """
        with log_context(dialect=dialect.name, table=self.name, operation="alter"):
            columns = dialect.columns
            actions = []

            for column in self.added:
                check_column(column.name, column.column_type)
                with log_context(column=column.name):
                    actions.append(columns.add_column(column.name, column.column_type))
            for name in self.dropped:
                actions.append(columns.drop_column(name))
            for kind, name in self.dropped_constraints:
                if kind == "foreign":
                    actions.append(columns.drop_foreign(name))
                elif kind == "unique":
                    actions.append(columns.drop_unique(name))
                else:
                    actions.append(columns.drop_primary(name))

            opening = dialect.table.modify_table(self.name)
            statements = []
            if actions:
                statements.append(f"{opening} {', '.join(actions)}")
            for old, new in self.renamed:
                statements.append(f"{opening} {columns.rename_column(old, new)}")

            for column in self.added:
                if column.column_type.is_indexed:
                    idx_name = IndexBuilder.generate_index_name(self.name, [column.name])
                    statements.append(dialect.table.create_index(self.name, idx_name, [column.name]))
            for name in self.dropped_indexes:
                statements.append(dialect.table.drop_index(name))

            # Last, so earlier statements still address the old name
            if self.new_name:
                statements.append(dialect.table.rename_table(self.name, self.new_name))

            logger.debug(f"Rendered {len(statements)} statements for {self.name}")
            return statements


__all__ = [
    "Column",
    "IndexDefinition",
    "UniqueDefinition",
    "ForeignKeyDefinition",
    "Table",
    "TableAlteration",
    "require_name",
    "check_column",
]
