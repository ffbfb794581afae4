# ============================================================================
# PYDANTIC TO TABLE BRIDGE
# ============================================================================
# STATUS: Schema - Table descriptions from Pydantic models
# PURPOSE: Derive Table descriptions (and their DDL) from annotated models
# CREATED: 17 OCT 2026
# EXPORTS: PydanticToTable
# DEPENDENCIES: pydantic, annotated_types
# ============================================================================
"""
Pydantic to Table bridge.

Lets a Pydantic model be the single description of a table. Fields become
columns; SQL metadata comes from ClassVar attributes:

    - __sql_table__: Table name (required)
    - __sql_primary_key__: Primary key column(s) - string or list
    - __sql_foreign_keys__: Dict of {column: "table(column)"}
    - __sql_indexes__: List of index definitions, either
      (name, columns) tuples or {"name", "columns", "unique"} dicts
    - __sql_serial_columns__: Columns that auto-increment

Usage:
    bridge = PydanticToTable(get_dialect("postgres"))
    for stmt in bridge.generate([User, Order]):
        print(stmt)
"""

import re
import types
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple, Type, Union, get_args, get_origin
from uuid import UUID

from annotated_types import MaxLen
from pydantic import BaseModel
from pydantic.fields import FieldInfo

from ddlforge.core.contracts import ModelMetadataError
from ddlforge.core.logging import ComponentType, get_logger, log_context
from ddlforge.generators.registry import Dialect, get_dialect
from ddlforge.schema.table import Table
from ddlforge.types import (
    ColumnType,
    array,
    binary,
    boolean,
    custom,
    double,
    integer,
    primary,
    varchar,
)

logger = get_logger(__name__, ComponentType.SCHEMA)

_UNION_ORIGINS = (Union, types.UnionType)
_FOREIGN_KEY_PATTERN = re.compile(r"^(?:\w+\.)?(\w+)\((\w+)\)$")


def _int_valued(enum_cls: Type[Enum]) -> bool:
    """True when every member value is a plain int (IntEnum and friends)."""
    return all(
        isinstance(m.value, int) and not isinstance(m.value, bool)
        for m in enum_cls
    )


class PydanticToTable:
    """
    Convert Pydantic models to Table descriptions.

    Analyzes models with __sql_* metadata and builds the corresponding
    Table, which a dialect then renders.
    """

    TYPE_MAP = {
        int: integer,
        float: double,
        bool: boolean,
        bytes: binary,
        datetime: lambda: custom("TIMESTAMPTZ"),
        date: lambda: custom("DATE"),
        UUID: lambda: custom("UUID"),
        dict: lambda: custom("JSONB"),
        Dict: lambda: custom("JSONB"),
    }

    def __init__(self, dialect: Optional[Dialect] = None):
        """
        Args:
            dialect: Dialect used by generate(); the configured default when omitted
        """
        self.dialect = dialect or get_dialect()

    # =========================================================================
    # METADATA EXTRACTION
    # =========================================================================

    @staticmethod
    def get_model_metadata(model: Type[BaseModel]) -> Dict[str, Any]:
        """
        Extract SQL DDL metadata from a Pydantic model.

        Looks for __sql_* attributes (which Python mangles to _ClassName__sql_*).

        Returns:
            Dict with table, primary_key, foreign_keys, indexes, serial_columns
        """
        def get_attr(name: str, default=None):
            mangled = f"_{model.__name__}__{name}"
            return getattr(model, mangled, getattr(model, f"__{name}", default))

        metadata = {
            "table": get_attr("sql_table__"),
            "primary_key": get_attr("sql_primary_key__", []),
            "foreign_keys": get_attr("sql_foreign_keys__", {}),
            "indexes": get_attr("sql_indexes__", []),
            "serial_columns": get_attr("sql_serial_columns__", []),
        }

        # Normalize primary_key to list
        if isinstance(metadata["primary_key"], str):
            metadata["primary_key"] = [metadata["primary_key"]]

        return metadata

    # =========================================================================
    # TYPE CONVERSION
    # =========================================================================

    @staticmethod
    def _unwrap_optional(field_type: Any) -> Tuple[Any, bool]:
        """Strip Optional[...] / X | None, reporting whether it was there."""
        if get_origin(field_type) in _UNION_ORIGINS:
            args = get_args(field_type)
            remaining = tuple(a for a in args if a is not type(None))
            if len(remaining) < len(args):
                if len(remaining) == 1:
                    return remaining[0], True
                return Union[remaining], True
        return field_type, False

    @staticmethod
    def _max_length(field_info: Optional[FieldInfo]) -> Optional[int]:
        if field_info is not None and field_info.metadata:
            for constraint in field_info.metadata:
                if isinstance(constraint, MaxLen):
                    return constraint.max_length
        return None

    def python_type_to_column(
        self,
        field_type: Any,
        field_info: Optional[FieldInfo] = None,
    ) -> ColumnType:
        """
        Convert a Python annotation to a ColumnType.

        Args:
            field_type: Annotation from the Pydantic model
            field_info: Pydantic field information (for max_length)

        Returns:
            ColumnType with nullability set from Optional[...]
        """
        actual_type, is_optional = self._unwrap_optional(field_type)
        column_type = self._base_column(actual_type, field_info)
        return column_type.nullable(is_optional)

    def _base_column(self, actual_type: Any, field_info: Optional[FieldInfo]) -> ColumnType:
        origin = get_origin(actual_type)

        if origin in (list, List):
            args = get_args(actual_type)
            element = args[0] if args else None
            if element is None or get_origin(element) in (dict, Dict) or element in (dict, Dict):
                return custom("JSONB")
            return array(self._base_column(element, None))
        if origin in (dict, Dict):
            return custom("JSONB")
        if actual_type in (list, List):
            return custom("JSONB")

        if actual_type is str:
            max_length = self._max_length(field_info)
            if max_length:
                return varchar().size(max_length)
            return varchar()

        if isinstance(actual_type, type) and issubclass(actual_type, Enum):
            return integer() if _int_valued(actual_type) else varchar()

        factory = self.TYPE_MAP.get(actual_type)
        if factory:
            return factory()

        return custom("JSONB")

    @staticmethod
    def _default_for(field_info: FieldInfo) -> Any:
        """Simple field default as a column default, or None."""
        # default_factory fields are not required but have no plain default
        if field_info.is_required() or field_info.default_factory is not None:
            return None
        default = field_info.default
        if default is None:
            return None
        if isinstance(default, Enum):
            # Stored the way _base_column typed the enum column
            if _int_valued(type(default)):
                return default.value
            return str(default.value)
        if isinstance(default, (str, int, float, bool)):
            return default
        return None

    # =========================================================================
    # TABLE GENERATION
    # =========================================================================

    def table_for(self, model: Type[BaseModel]) -> Table:
        """
        Build a Table description from a Pydantic model.

        Raises:
            ModelMetadataError: If the model has no __sql_table__
        """
        meta = self.get_model_metadata(model)
        table_name = meta["table"]
        primary_key = list(meta["primary_key"])
        serial_columns = meta["serial_columns"]

        if not table_name:
            raise ModelMetadataError(model.__name__, "__sql_table__")

        logger.debug(f"Building table {table_name} from {model.__name__}")

        table = Table(table_name)

        for field_name, field_info in model.model_fields.items():
            if field_name in serial_columns:
                if primary_key == [field_name]:
                    column_type = primary()
                    primary_key = []
                else:
                    column_type = integer().increments(True)
            else:
                column_type = self.python_type_to_column(field_info.annotation, field_info)
                default = self._default_for(field_info)
                if default is not None:
                    column_type = column_type.default(default)

            table.add_column(field_name, column_type)

        if primary_key:
            table.set_primary_key(primary_key)

        for fk_column, fk_reference in meta["foreign_keys"].items():
            match = _FOREIGN_KEY_PATTERN.match(fk_reference)
            if not match:
                logger.warning(f"Skipping unparseable foreign key {fk_column} -> {fk_reference}")
                continue
            ref_table, ref_column = match.groups()
            table.add_foreign(fk_column, ref_table, ref_column=ref_column, on_delete="CASCADE")

        for idx_def in meta["indexes"]:
            self._add_index(table, idx_def)

        return table

    @staticmethod
    def _add_index(table: Table, idx_def: Any) -> None:
        # Handle tuple format: (name, columns)
        if isinstance(idx_def, tuple):
            name = idx_def[0]
            columns = idx_def[1] if len(idx_def) > 1 else []
            unique = False
        # Handle dict format
        elif isinstance(idx_def, dict):
            name = idx_def.get("name")
            columns = idx_def.get("columns", [])
            unique = idx_def.get("unique", False)
        else:
            logger.warning(f"Skipping index definition of type {type(idx_def).__name__}")
            return

        if not columns or not name:
            return

        if isinstance(columns, str):
            columns = [columns]

        table.add_index(columns, name=name, unique=unique)

    def generate(
        self,
        models: Sequence[Type[BaseModel]],
        if_not_exists: bool = True,
    ) -> List[str]:
        """
        Render CREATE statements for models, in the order given.

        Returns:
            List of statement strings ready for a migration runner
        """
        statements = []
        with log_context(dialect=self.dialect.name, operation="generate"):
            for model in models:
                statements.extend(
                    self.table_for(model).create_sql(self.dialect, if_not_exists=if_not_exists)
                )
            logger.info(f"Generated {len(statements)} DDL statements for {len(models)} models")
        return statements


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = ['PydanticToTable']
