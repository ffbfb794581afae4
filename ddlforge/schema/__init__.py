# ============================================================================
# SCHEMA MODULE
# ============================================================================
# STATUS: Schema - Table descriptions and model bridge
# PURPOSE: Compose generator fragments into statements; tables from Pydantic models
# CREATED: 17 OCT 2026
# ============================================================================

from ddlforge.schema.table import (
    Column,
    Table,
    TableAlteration,
)
from ddlforge.schema.sql_generator import PydanticToTable

__all__ = [
    # Builders
    "Column",
    "Table",
    "TableAlteration",
    # Model bridge
    "PydanticToTable",
]
