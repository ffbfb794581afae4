# ============================================================================
# CONFIGURATION MODULE
# ============================================================================
# STATUS: Core - Configuration and defaults
# PURPOSE: Centralized configuration management
# CREATED: 17 OCT 2026
# ============================================================================
"""
Configuration Module

Provides centralized defaults for ddlforge generators.
"""

from ddlforge.core.config.defaults import (
    GeneratorDefaults,
    get_defaults,
    reset_defaults,
)

__all__ = [
    "GeneratorDefaults",
    "get_defaults",
    "reset_defaults",
]
