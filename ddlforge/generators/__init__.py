# ============================================================================
# GENERATORS MODULE
# ============================================================================
# STATUS: Core - SQL fragment generators
# PURPOSE: Generator contracts, dialect registry, built-in dialects
# CREATED: 17 OCT 2026
# ============================================================================
"""
SQL string generators.

Each database backend generates different SQL syntax. The contracts in
``ddlforge.generators.base`` abstract those differences away from the
schema description; each dialect implements both of them.

    from ddlforge.generators import get_dialect

    pg = get_dialect("postgres")
    pg.table.create_table("users")      # CREATE TABLE "users"
    pg.columns.string("email")          # "email" VARCHAR(255)
"""

from ddlforge.generators.base import ColumnGenerator, TableGenerator
from ddlforge.generators.registry import (
    Dialect,
    register_dialect,
    unregister_dialect,
    get_dialect,
    list_dialects,
)
from ddlforge.generators.postgres import PostgresColumnGenerator, PostgresTableGenerator

register_dialect("postgres", PostgresTableGenerator, PostgresColumnGenerator)

__all__ = [
    # Contracts
    "TableGenerator",
    "ColumnGenerator",
    # Registry
    "Dialect",
    "register_dialect",
    "unregister_dialect",
    "get_dialect",
    "list_dialects",
    # Built-in dialects
    "PostgresTableGenerator",
    "PostgresColumnGenerator",
]
