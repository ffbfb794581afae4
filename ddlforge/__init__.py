# ============================================================================
# DDLFORGE
# ============================================================================
# STATUS: Package initialization
# PURPOSE: Database-agnostic schema definitions rendered to dialect DDL
# CREATED: 17 OCT 2026
# ============================================================================
"""
ddlforge - describe tables once, render DDL per dialect.

    from ddlforge import Table, get_dialect, primary, varchar

    users = Table("users").add_column("id", primary())
    users.add_column("email", varchar().size(255).unique(True))
    users.create_sql(get_dialect("postgres"))
"""

from ddlforge.__version__ import __version__
from ddlforge.core.contracts import (
    Kind,
    InvalidMetadata,
    SchemaError,
    InvalidIdentifierError,
    InvalidColumnError,
    DuplicatePrimaryKeyError,
    DialectNotFoundError,
    DuplicateDialectError,
    ModelMetadataError,
)
from ddlforge.types import (
    BaseType,
    ColumnType,
    text,
    varchar,
    primary,
    integer,
    float_,
    double,
    boolean,
    binary,
    foreign,
    custom,
    array,
)
from ddlforge.generators import (
    TableGenerator,
    ColumnGenerator,
    Dialect,
    get_dialect,
    register_dialect,
    list_dialects,
)
from ddlforge.schema import Table, TableAlteration, PydanticToTable

__all__ = [
    "__version__",
    # Contracts
    "Kind",
    "InvalidMetadata",
    "SchemaError",
    "InvalidIdentifierError",
    "InvalidColumnError",
    "DuplicatePrimaryKeyError",
    "DialectNotFoundError",
    "DuplicateDialectError",
    "ModelMetadataError",
    # Types
    "BaseType",
    "ColumnType",
    "text",
    "varchar",
    "primary",
    "integer",
    "float_",
    "double",
    "boolean",
    "binary",
    "foreign",
    "custom",
    "array",
    # Generators
    "TableGenerator",
    "ColumnGenerator",
    "Dialect",
    "get_dialect",
    "register_dialect",
    "list_dialects",
    # Schema
    "Table",
    "TableAlteration",
    "PydanticToTable",
]
