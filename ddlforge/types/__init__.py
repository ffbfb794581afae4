# ============================================================================
# TYPES MODULE
# ============================================================================
# STATUS: Core - Kind-specific column type constructors
# PURPOSE: Public entry point for building ColumnType values
# CREATED: 17 OCT 2026
# ============================================================================
"""
Column type constructors.

Each function returns a fresh ColumnType for one kind, with every metadata
field at its default (not nullable, not unique, not indexed, no default,
no size). ``primary()`` is the exception: it starts auto-incrementing.

    from ddlforge.types import varchar, integer, array

    email = varchar().size(255).unique(True)
    tags = array(varchar()).size(64).default([])
    age = integer().nullable(True)

Default values:
    The type parameter of each constructor is the type its default value
    must have. Passing a value of another shape is not rejected by
    ``default()`` itself; ``validate()`` reports it as a shape mismatch.
"""

from typing import List, Union

from ddlforge.types.impls import (
    BaseType,
    ColumnType,
    TEXT,
    VARCHAR,
    PRIMARY,
    INTEGER,
    FLOAT,
    DOUBLE,
    BOOLEAN,
    BINARY,
)


def text() -> ColumnType[str]:
    """Unbounded text."""
    return ColumnType(TEXT)


def varchar() -> ColumnType[str]:
    """Variable-length string; bound it with ``.size(n)``."""
    return ColumnType(VARCHAR)


def primary() -> ColumnType[int]:
    """Auto-incrementing integer primary key."""
    return ColumnType(PRIMARY, is_incrementing=True)


def integer() -> ColumnType[int]:
    return ColumnType(INTEGER)


def float_() -> ColumnType[float]:
    """Single precision floating point number."""
    return ColumnType(FLOAT)


def double() -> ColumnType[float]:
    """Double precision floating point number."""
    return ColumnType(DOUBLE)


def boolean() -> ColumnType[bool]:
    return ColumnType(BOOLEAN)


def binary() -> ColumnType[bytes]:
    return ColumnType(BINARY)


def foreign(table: str) -> ColumnType[Union[int, str]]:
    """Foreign key referencing ``table``."""
    return ColumnType(BaseType.foreign(table))


def custom(raw: str) -> ColumnType:
    """Raw dialect type name, rendered as-is."""
    return ColumnType(BaseType.custom(raw))


def array(element: Union[ColumnType, BaseType]) -> ColumnType[List]:
    """
    Array of another column type.

    Only the element's kind and size are carried over; the array gets its
    own nullability, uniqueness and default.
    """
    if isinstance(element, ColumnType):
        return ColumnType(
            BaseType.array(element._get_inner()),
            size_limit=element.size_limit,
        )
    return ColumnType(BaseType.array(element))


__all__ = [
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
]
