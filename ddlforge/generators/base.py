# ============================================================================
# GENERATOR CONTRACTS
# ============================================================================
# STATUS: Core - Capability contracts every dialect implements
# PURPOSE: Table-level and column-level SQL fragment generators
# CREATED: 17 OCT 2026
# EXPORTS: TableGenerator, ColumnGenerator
# ============================================================================
"""
Generator contracts.

Each database backend spells DDL differently. A dialect implements two
separate contracts:

- TableGenerator: table-structure statements (create, drop, rename, alter,
  indexes, table constraints)
- ColumnGenerator: column definitions and column-level ALTER actions

Keeping them apart lets a dialect reuse one implementation and vary the
other, e.g. two backends sharing ALTER syntax but not column type names.

Every method takes plain identifiers (and, for typed columns, a
ColumnType) and returns a string fragment. Nothing is executed, nothing is
mutated, and ordering statements is the caller's job.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ddlforge.core.config import GeneratorDefaults, get_defaults
from ddlforge.types.impls import BaseType, ColumnType


class TableGenerator(ABC):
    """Generates table-level SQL statements."""

    def __init__(self, defaults: Optional[GeneratorDefaults] = None):
        self.defaults = defaults or get_defaults()

    @abstractmethod
    def create_table(self, name: str) -> str:
        """Opening of a CREATE TABLE statement; the column body is appended by the caller."""
        pass

    @abstractmethod
    def create_table_if_not_exists(self, name: str) -> str:
        """Like create_table, guarded against an existing table."""
        pass

    @abstractmethod
    def drop_table(self, name: str) -> str:
        pass

    @abstractmethod
    def drop_table_if_exists(self, name: str) -> str:
        pass

    @abstractmethod
    def rename_table(self, old: str, new: str) -> str:
        """Rename a table from ``old`` to ``new``."""
        pass

    @abstractmethod
    def modify_table(self, name: str) -> str:
        """Opening of an ALTER statement; column actions are appended by the caller."""
        pass

    @abstractmethod
    def create_index(
        self,
        table: str,
        name: str,
        columns: Sequence[str],
        unique: bool = False,
    ) -> str:
        pass

    @abstractmethod
    def drop_index(self, name: str) -> str:
        pass

    @abstractmethod
    def primary_constraint(self, columns: Sequence[str]) -> str:
        """Primary key table constraint over one or more columns."""
        pass

    @abstractmethod
    def unique_constraint(self, name: str, columns: Sequence[str]) -> str:
        pass

    @abstractmethod
    def foreign_constraint(
        self,
        name: str,
        column: str,
        ref_table: str,
        ref_column: Optional[str] = None,
        on_delete: Optional[str] = None,
    ) -> str:
        """Foreign key table constraint; ``ref_column`` falls back to the configured key column."""
        pass

    @abstractmethod
    def comment_table(self, table: str, comment: str) -> str:
        pass

    @abstractmethod
    def comment_column(self, table: str, column: str, comment: str) -> str:
        pass


class ColumnGenerator(ABC):
    """
    Generates column definitions and column-level ALTER actions.

    Typed rendering (``type_name``, ``column``, ``add_column``) reads the
    column kind through ``kind_of``.
    """

    def __init__(self, defaults: Optional[GeneratorDefaults] = None):
        self.defaults = defaults or get_defaults()

    @staticmethod
    def kind_of(column_type: ColumnType) -> BaseType:
        """Column kind of a ColumnType, for dialect implementations."""
        return column_type._get_inner()

    # =========================================================================
    # ALTER ACTIONS
    # =========================================================================

    @abstractmethod
    def drop_column(self, name: str) -> str:
        pass

    @abstractmethod
    def rename_column(self, old: str, new: str) -> str:
        pass

    @abstractmethod
    def add_column(self, name: str, column_type: ColumnType) -> str:
        pass

    @abstractmethod
    def drop_foreign(self, name: str) -> str:
        """Drop a named foreign key constraint."""
        pass

    @abstractmethod
    def drop_unique(self, name: str) -> str:
        """Drop a named unique constraint."""
        pass

    @abstractmethod
    def drop_primary(self, table: str) -> str:
        """Drop the primary key constraint of ``table``."""
        pass

    def drop_timestamps(self) -> str:
        """Drop both configured timestamp columns."""
        return ", ".join(self.drop_column(c) for c in self.defaults.timestamp_columns)

    # =========================================================================
    # COLUMN DEFINITIONS
    # =========================================================================

    @abstractmethod
    def increments(self, name: Optional[str] = None) -> str:
        """Auto-incrementing primary key column (named by config when omitted)."""
        pass

    @abstractmethod
    def integer(self, name: str) -> str:
        pass

    @abstractmethod
    def big_integer(self, name: str) -> str:
        pass

    @abstractmethod
    def text(self, name: str) -> str:
        pass

    @abstractmethod
    def string(self, name: str, length: Optional[int] = None) -> str:
        """Bounded string column; the bound defaults to config string_length."""
        pass

    @abstractmethod
    def float(self, name: str) -> str:
        pass

    @abstractmethod
    def double(self, name: str) -> str:
        pass

    @abstractmethod
    def decimal(
        self,
        name: str,
        precision: Optional[int] = None,
        scale: Optional[int] = None,
    ) -> str:
        pass

    @abstractmethod
    def boolean(self, name: str) -> str:
        pass

    @abstractmethod
    def date(self, name: str) -> str:
        pass

    @abstractmethod
    def date_time(self, name: str) -> str:
        pass

    @abstractmethod
    def time(self, name: str) -> str:
        pass

    @abstractmethod
    def timestamp(self, name: str) -> str:
        pass

    def timestamps(self) -> str:
        """Both configured timestamp columns."""
        return ", ".join(self.timestamp(c) for c in self.defaults.timestamp_columns)

    @abstractmethod
    def binary(self, name: str) -> str:
        pass

    @abstractmethod
    def json(self, name: str) -> str:
        pass

    @abstractmethod
    def jsonb(self, name: str) -> str:
        pass

    @abstractmethod
    def uuid(self, name: str) -> str:
        pass

    @abstractmethod
    def enumerable(self, name: str, values: Sequence[str]) -> str:
        """Column restricted to a fixed set of string values."""
        pass

    @abstractmethod
    def specific_type(self, name: str, raw_type: str) -> str:
        """Column with a raw, dialect-specific type."""
        pass

    # =========================================================================
    # TYPED COLUMNS
    # =========================================================================

    @abstractmethod
    def type_name(self, column_type: ColumnType) -> str:
        """Dialect type for a ColumnType, size included."""
        pass

    @abstractmethod
    def column(self, name: str, column_type: ColumnType) -> str:
        """Full column definition: type, constraints and default."""
        pass


__all__ = ["TableGenerator", "ColumnGenerator"]
