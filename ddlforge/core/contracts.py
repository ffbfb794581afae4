# ============================================================================
# BASE CONTRACTS, ENUMS & EXCEPTIONS
# ============================================================================
# STATUS: Foundation - Column kinds, validation reasons, error taxonomy
# PURPOSE: Shared vocabulary for the type model, generators and builders
# CREATED: 17 OCT 2026
# EXPORTS: Kind, InvalidMetadata, SchemaError and subclasses
# ============================================================================
"""
Base contracts for ddlforge.

These cross every layer:
- Type model (what a column stores)
- Generators (how a dialect spells it)
- Table builder (where bad input is rejected)

Render functions never raise for well-formed input. The exceptions below
are raised by the builder, registry and model bridge layers only.
"""

from enum import Enum
from typing import List, Optional, Sequence


# ============================================================================
# COLUMN KINDS
# ============================================================================

class Kind(str, Enum):
    """
    Closed set of column kinds, independent of any dialect.

    FOREIGN and CUSTOM carry a name; ARRAY wraps exactly one element kind.
    """
    TEXT = "text"
    VARCHAR = "varchar"
    PRIMARY = "primary"          # Auto-incrementing integer primary key
    INTEGER = "integer"
    FLOAT = "float"
    DOUBLE = "double"
    BOOLEAN = "boolean"
    BINARY = "binary"
    FOREIGN = "foreign"          # Reference to another table
    CUSTOM = "custom"            # Raw dialect type name, passed through
    ARRAY = "array"

    def carries_name(self) -> bool:
        """Check if this kind carries a table or type name."""
        return self in (Kind.FOREIGN, Kind.CUSTOM)

    def is_variable_length(self) -> bool:
        """Check if a size hint is meaningful for this kind."""
        return self in (Kind.VARCHAR, Kind.BINARY)

    def is_integer_like(self) -> bool:
        """Check if auto-increment is meaningful for this kind."""
        return self in (Kind.INTEGER, Kind.PRIMARY)


# ============================================================================
# VALIDATION REASONS
# ============================================================================

class InvalidMetadata(str, Enum):
    """
    Reasons a column's metadata is inconsistent with its kind.

    Reported by ColumnType.validation_errors(), never raised.
    """
    SIZE_ON_FIXED_LENGTH_KIND = "size_on_fixed_length_kind"
    NON_POSITIVE_SIZE = "non_positive_size"
    INCREMENTS_ON_NON_INTEGER_KIND = "increments_on_non_integer_kind"
    DEFAULT_SHAPE_MISMATCH = "default_shape_mismatch"
    DEFAULT_ON_INCREMENTING = "default_on_incrementing"
    NULLABLE_PRIMARY_KEY = "nullable_primary_key"
    UNSUPPORTED_ARRAY_ELEMENT = "unsupported_array_element"


# ============================================================================
# EXCEPTIONS
# ============================================================================

class SchemaError(Exception):
    """Base exception for schema building errors."""
    pass


class InvalidIdentifierError(SchemaError):
    """Raised when a table, column, index or constraint name is empty."""

    def __init__(self, identifier: Optional[str], role: str = "identifier"):
        self.identifier = identifier
        self.role = role
        super().__init__(f"Invalid {role} name: {identifier!r}")


class InvalidColumnError(SchemaError):
    """Raised when a column's metadata fails validation at render time."""

    def __init__(self, column_name: str, reasons: Sequence[InvalidMetadata]):
        self.column_name = column_name
        self.reasons: List[InvalidMetadata] = list(reasons)
        reason_str = ", ".join(r.value for r in self.reasons)
        super().__init__(f"Invalid metadata for column {column_name!r}: {reason_str}")


class DuplicatePrimaryKeyError(SchemaError):
    """Raised when a table would end up with more than one primary key."""

    def __init__(self, table_name: str, columns: Sequence[str]):
        self.table_name = table_name
        self.columns: List[str] = list(columns)
        super().__init__(
            f"Table {table_name!r} already has a primary key; "
            f"cannot also declare one on {', '.join(self.columns)}"
        )


class DialectError(SchemaError):
    """Base exception for dialect registry errors."""
    pass


class DialectNotFoundError(DialectError):
    """Raised when a dialect is not found in the registry."""

    def __init__(self, dialect_name: str):
        self.dialect_name = dialect_name
        super().__init__(f"Dialect not found: {dialect_name}")


class DuplicateDialectError(DialectError):
    """Raised when a dialect name is already registered."""

    def __init__(self, dialect_name: str):
        self.dialect_name = dialect_name
        super().__init__(f"Dialect already registered: {dialect_name}")


class ModelMetadataError(SchemaError):
    """Raised when a Pydantic model lacks the __sql_* metadata it needs."""

    def __init__(self, model_name: str, attribute: str):
        self.model_name = model_name
        self.attribute = attribute
        super().__init__(f"Model {model_name} missing {attribute} attribute")


__all__ = [
    "Kind",
    "InvalidMetadata",
    "SchemaError",
    "InvalidIdentifierError",
    "InvalidColumnError",
    "DuplicatePrimaryKeyError",
    "DialectError",
    "DialectNotFoundError",
    "DuplicateDialectError",
    "ModelMetadataError",
]
