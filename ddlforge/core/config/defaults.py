# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================
# STATUS: Core - Default generator settings
# PURPOSE: Centralized defaults for dialect selection and column fragments
# CREATED: 17 OCT 2026
# ============================================================================
"""
Configuration Defaults

Provides the defaults that generators fall back to when a caller does not
say otherwise: the bound of a plain string column, the name of the
auto-increment column, the timestamp column pair, and so on.

Design:
- Immutable dataclass for defaults
- Environment variable overrides (DDLFORGE_*)
- Process-wide instance via get_defaults()
"""

import os
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class GeneratorDefaults:
    """
    Defaults used by dialect generators and the table builder.
    """
    # Dialect used when none is named
    default_dialect: str = "postgres"

    # string(name) bound
    string_length: int = 255

    # increments() column name
    increments_column: str = "id"

    # timestamps() / drop_timestamps() column pair
    timestamp_columns: Tuple[str, str] = ("created_at", "updated_at")

    # Referenced column for Foreign kinds and foreign constraints
    foreign_key_column: str = "id"

    # decimal(name) precision and scale
    decimal_precision: int = 10
    decimal_scale: int = 2

    @classmethod
    def from_env(cls) -> "GeneratorDefaults":
        """Create from environment variables."""
        timestamps = os.getenv("DDLFORGE_TIMESTAMP_COLUMNS", "created_at,updated_at")
        created, _, updated = timestamps.partition(",")
        return cls(
            default_dialect=os.getenv("DDLFORGE_DIALECT", "postgres"),
            string_length=int(os.getenv("DDLFORGE_STRING_LENGTH", 255)),
            increments_column=os.getenv("DDLFORGE_INCREMENTS_COLUMN", "id"),
            timestamp_columns=(created.strip() or "created_at", updated.strip() or "updated_at"),
            foreign_key_column=os.getenv("DDLFORGE_FOREIGN_KEY_COLUMN", "id"),
            decimal_precision=int(os.getenv("DDLFORGE_DECIMAL_PRECISION", 10)),
            decimal_scale=int(os.getenv("DDLFORGE_DECIMAL_SCALE", 2)),
        )


# ============================================================================
# GLOBAL DEFAULTS INSTANCE
# ============================================================================

_defaults: Optional[GeneratorDefaults] = None


def get_defaults() -> GeneratorDefaults:
    """Get global defaults instance."""
    global _defaults
    if _defaults is None:
        _defaults = GeneratorDefaults.from_env()
    return _defaults


def reset_defaults() -> None:
    """Reset defaults (for testing)."""
    global _defaults
    _defaults = None


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "GeneratorDefaults",
    "get_defaults",
    "reset_defaults",
]
