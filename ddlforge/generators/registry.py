# ============================================================================
# DIALECT REGISTRY
# ============================================================================
# STATUS: Core - Dialect registration and lookup
# PURPOSE: Pair table and column generators under a backend name
# CREATED: 17 OCT 2026
# ============================================================================
"""
Dialect Registry

Central registry of SQL dialects. A dialect is one TableGenerator class
plus one ColumnGenerator class registered under a backend name.

Design:
- Built-in dialects register at import time
- Registry is a simple dict (dialect_name -> generator classes)
- Fail-fast on duplicate registration
- get_dialect() builds fresh generator instances with the given defaults
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Type

from ddlforge.core.config import GeneratorDefaults, get_defaults
from ddlforge.core.contracts import DialectNotFoundError, DuplicateDialectError
from ddlforge.generators.base import ColumnGenerator, TableGenerator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Dialect:
    """
    A backend's pair of generators.

    Attributes:
        name: Registered dialect name (e.g. "postgres")
        table: Table-level generator
        columns: Column-level generator
    """
    name: str
    table: TableGenerator
    columns: ColumnGenerator


# Global registry
_dialects: Dict[str, Tuple[Type[TableGenerator], Type[ColumnGenerator]]] = {}


def register_dialect(
    name: str,
    table_generator: Type[TableGenerator],
    column_generator: Type[ColumnGenerator],
) -> None:
    """
    Register a dialect under ``name``.

    Raises:
        DuplicateDialectError: If the name is already registered
    """
    if name in _dialects:
        raise DuplicateDialectError(name)

    _dialects[name] = (table_generator, column_generator)
    logger.debug(
        f"Registered dialect {name}: "
        f"{table_generator.__name__}, {column_generator.__name__}"
    )


def unregister_dialect(name: str) -> None:
    """Remove a dialect (for testing)."""
    _dialects.pop(name, None)


def get_dialect(
    name: Optional[str] = None,
    defaults: Optional[GeneratorDefaults] = None,
    **options: Any,
) -> Dialect:
    """
    Build the generators of a registered dialect.

    Args:
        name: Dialect name; the configured default dialect when omitted
        defaults: Generator defaults; the process-wide defaults when omitted
        **options: Dialect-specific options passed to both generators
            (e.g. schema="app" for postgres)

    Raises:
        DialectNotFoundError: If no dialect is registered under the name
    """
    defaults = defaults or get_defaults()
    name = name or defaults.default_dialect

    if name not in _dialects:
        raise DialectNotFoundError(name)

    table_cls, column_cls = _dialects[name]
    return Dialect(
        name=name,
        table=table_cls(defaults=defaults, **options),
        columns=column_cls(defaults=defaults, **options),
    )


def list_dialects() -> List[str]:
    """Names of all registered dialects."""
    return sorted(_dialects)


__all__ = [
    "Dialect",
    "register_dialect",
    "unregister_dialect",
    "get_dialect",
    "list_dialects",
]
