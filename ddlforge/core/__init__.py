# ============================================================================
# CORE MODULE
# ============================================================================
# STATUS: Core module initialization
# PURPOSE: Export contracts, logging and configuration
# CREATED: 17 OCT 2026
# ============================================================================

from ddlforge.core.contracts import (
    Kind,
    InvalidMetadata,
    SchemaError,
    InvalidIdentifierError,
    InvalidColumnError,
    DuplicatePrimaryKeyError,
    DialectError,
    DialectNotFoundError,
    DuplicateDialectError,
    ModelMetadataError,
)
from ddlforge.core.config import GeneratorDefaults, get_defaults, reset_defaults

__all__ = [
    # Enums
    "Kind",
    "InvalidMetadata",
    # Exceptions
    "SchemaError",
    "InvalidIdentifierError",
    "InvalidColumnError",
    "DuplicatePrimaryKeyError",
    "DialectError",
    "DialectNotFoundError",
    "DuplicateDialectError",
    "ModelMetadataError",
    # Config
    "GeneratorDefaults",
    "get_defaults",
    "reset_defaults",
]
