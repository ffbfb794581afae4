# ============================================================================
# COLUMN METADATA VALIDATION
# ============================================================================
# STATUS: Core - Kind vs metadata consistency rules
# PURPOSE: Report (never raise) metadata that does not fit a column kind
# CREATED: 17 OCT 2026
# ============================================================================
"""
Metadata validation rules.

Rules:
- size only on VARCHAR / BINARY, or on an ARRAY whose innermost element is
  one of those (array size bounds the element, not the array length)
- size must be positive
- increments only on INTEGER / PRIMARY
- default must structurally match the kind (and fit within size); raw
  (CUSTOM) kinds take scalars, dates, UUIDs, or JSON documents
- no default on an auto-incrementing column
- PRIMARY cannot be nullable
- arrays cannot hold PRIMARY or FOREIGN elements
"""

from datetime import date, time, timedelta
from decimal import Decimal
from typing import TYPE_CHECKING, Any, List, Optional
from uuid import UUID

from ddlforge.core.contracts import InvalidMetadata, Kind

if TYPE_CHECKING:
    from ddlforge.types.impls import BaseType

_BYTES_TYPES = (bytes, bytearray, memoryview)
# Values a raw-typed default can be rendered from (dicts and lists as JSONB)
_CUSTOM_DEFAULT_TYPES = (
    str, int, float, Decimal, UUID, date, time, timedelta, dict, list, tuple,
) + _BYTES_TYPES


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def default_matches(base: "BaseType", value: Any, size: Optional[int] = None) -> bool:
    """
    Check that a default value has the shape the column kind stores.

    For arrays, ``size`` is applied to each element.
    """
    kind = base.kind

    if kind in (Kind.TEXT, Kind.VARCHAR):
        if not isinstance(value, str):
            return False
        return size is None or size < 1 or len(value) <= size
    if kind in (Kind.INTEGER, Kind.PRIMARY):
        return _is_int(value)
    if kind in (Kind.FLOAT, Kind.DOUBLE):
        return _is_int(value) or isinstance(value, float)
    if kind is Kind.BOOLEAN:
        return isinstance(value, bool)
    if kind is Kind.BINARY:
        if not isinstance(value, _BYTES_TYPES):
            return False
        return size is None or size < 1 or len(value) <= size
    if kind is Kind.FOREIGN:
        return _is_int(value) or isinstance(value, str)
    if kind is Kind.CUSTOM:
        return isinstance(value, _CUSTOM_DEFAULT_TYPES)
    if kind is Kind.ARRAY:
        if not isinstance(value, (list, tuple)):
            return False
        return all(default_matches(base.element, item, size) for item in value)
    return False


def collect_errors(
    base: "BaseType",
    *,
    nullable: bool,
    increments: bool,
    default: Any,
    size: Optional[int],
) -> List[InvalidMetadata]:
    """
    Collect every validation failure for a kind and its metadata.

    Returns:
        List of InvalidMetadata reasons, empty when the metadata is valid
    """
    errors: List[InvalidMetadata] = []
    innermost = base.innermost()

    if size is not None:
        if not innermost.kind.is_variable_length():
            errors.append(InvalidMetadata.SIZE_ON_FIXED_LENGTH_KIND)
        if size < 1:
            errors.append(InvalidMetadata.NON_POSITIVE_SIZE)

    if increments and not base.kind.is_integer_like():
        errors.append(InvalidMetadata.INCREMENTS_ON_NON_INTEGER_KIND)

    if default is not None:
        if not default_matches(base, default, size):
            errors.append(InvalidMetadata.DEFAULT_SHAPE_MISMATCH)
        if increments or base.kind is Kind.PRIMARY:
            errors.append(InvalidMetadata.DEFAULT_ON_INCREMENTING)

    if base.kind is Kind.PRIMARY and nullable:
        errors.append(InvalidMetadata.NULLABLE_PRIMARY_KEY)

    if base.kind is Kind.ARRAY and innermost.kind in (Kind.PRIMARY, Kind.FOREIGN):
        errors.append(InvalidMetadata.UNSUPPORTED_ARRAY_ELEMENT)

    return errors


__all__ = ["default_matches", "collect_errors"]
