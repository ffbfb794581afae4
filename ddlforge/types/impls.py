# ============================================================================
# COLUMN TYPE MODEL
# ============================================================================
# STATUS: Core - Dialect-independent column kinds and metadata
# PURPOSE: BaseType variants and the immutable ColumnType metadata envelope
# CREATED: 17 OCT 2026
# EXPORTS: BaseType, ColumnType
# DEPENDENCIES: pydantic
# ============================================================================
"""
Column Type Model.

BaseType describes WHAT a column stores. ColumnType wraps exactly one
BaseType together with the metadata a dialect needs to render it
(nullability, uniqueness, auto-increment, index, default, size).

Both are frozen Pydantic models. Every builder call returns a copy with one
field changed, so a column type is never observed half-configured:

    column = varchar().size(255).nullable(False).unique(True)

Using the constructors directly is not recommended; use the kind-specific
factories in ``ddlforge.types`` instead.
"""

from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field, PrivateAttr, model_validator

from ddlforge.core.contracts import InvalidMetadata, Kind
from ddlforge.types.validation import collect_errors

T = TypeVar("T")


# ============================================================================
# BASE TYPE
# ============================================================================

class BaseType(BaseModel):
    """
    One variant of the closed column-kind set.

    FOREIGN and CUSTOM carry ``name`` (a referenced table or a raw type name).
    ARRAY carries ``element``, which may itself be an ARRAY.
    """

    kind: Kind
    name: Optional[str] = Field(default=None, description="Referenced table or raw type")
    element: Optional["BaseType"] = Field(default=None, description="Array element kind")

    model_config = {"frozen": True}

    def __init__(
        self,
        kind: Kind,
        name: Optional[str] = None,
        element: Optional["BaseType"] = None,
        **data: Any,
    ):
        super().__init__(kind=kind, name=name, element=element, **data)

    # ----------------------------------------------------------------
    # Validators
    # ----------------------------------------------------------------

    @model_validator(mode="after")
    def validate_payload(self) -> "BaseType":
        if self.kind.carries_name():
            if not self.name:
                raise ValueError(f"{self.kind.value} requires a non-empty name")
        elif self.name is not None:
            raise ValueError(f"{self.kind.value} does not take a name")

        if self.kind is Kind.ARRAY:
            if self.element is None:
                raise ValueError("array requires an element BaseType")
        elif self.element is not None:
            raise ValueError(f"{self.kind.value} does not take an element")
        return self

    # ----------------------------------------------------------------
    # Constructors
    # ----------------------------------------------------------------

    @classmethod
    def foreign(cls, table: str) -> "BaseType":
        """Foreign key to another table."""
        return cls(Kind.FOREIGN, name=table)

    @classmethod
    def custom(cls, raw: str) -> "BaseType":
        """Raw dialect type, passed through untouched."""
        return cls(Kind.CUSTOM, name=raw)

    @classmethod
    def array(cls, element: "BaseType") -> "BaseType":
        """Array of any other kind, arrays included."""
        return cls(Kind.ARRAY, element=element)

    def innermost(self) -> "BaseType":
        """Follow ARRAY elements down to the first non-array kind."""
        current = self
        while current.kind is Kind.ARRAY:
            current = current.element
        return current

    def depth(self) -> int:
        """Number of ARRAY layers around the innermost kind."""
        depth = 0
        current = self
        while current.kind is Kind.ARRAY:
            depth += 1
            current = current.element
        return depth


TEXT = BaseType(Kind.TEXT)
VARCHAR = BaseType(Kind.VARCHAR)
PRIMARY = BaseType(Kind.PRIMARY)
INTEGER = BaseType(Kind.INTEGER)
FLOAT = BaseType(Kind.FLOAT)
DOUBLE = BaseType(Kind.DOUBLE)
BOOLEAN = BaseType(Kind.BOOLEAN)
BINARY = BaseType(Kind.BINARY)


# ============================================================================
# COLUMN TYPE
# ============================================================================

class ColumnType(BaseModel, Generic[T]):
    """
    A column kind plus all the metadata attached to it.

    ``T`` is the type of the column's default value (``str`` for varchar,
    ``int`` for integer, ``List[str]`` for an array of varchar, ...).

    Metadata is readable through the ``is_*``, ``default_value`` and
    ``size_limit`` fields, or as a dict through ``metadata()``. The kind
    itself is a private attribute reserved for generator implementations
    (``_get_inner``).
    """

    is_nullable: bool = False
    is_unique: bool = False
    is_incrementing: bool = False
    is_indexed: bool = False
    default_value: Optional[T] = None
    size_limit: Optional[int] = None

    _inner: BaseType = PrivateAttr()

    model_config = {"frozen": True}

    def __init__(self, inner: BaseType, /, **data: Any):
        if not isinstance(inner, BaseType):
            raise TypeError(f"ColumnType wraps a BaseType, got {type(inner).__name__}")
        super().__init__(**data)
        self._inner = inner

    # ----------------------------------------------------------------
    # Builder calls
    # ----------------------------------------------------------------

    def nullable(self, flag: bool = True) -> "ColumnType[T]":
        """Set the nullability of this type."""
        return self.model_copy(update={"is_nullable": flag})

    def unique(self, flag: bool = True) -> "ColumnType[T]":
        """Set the uniqueness of this type."""
        return self.model_copy(update={"is_unique": flag})

    def increments(self, flag: bool = True) -> "ColumnType[T]":
        """
        Mark this type as auto-incrementing.

        Only meaningful for integer-like kinds; validate() reports misuse,
        dialects decide how to render it.
        """
        return self.model_copy(update={"is_incrementing": flag})

    def indexed(self, flag: bool = True) -> "ColumnType[T]":
        """Ask the backend to create an index for this column."""
        return self.model_copy(update={"is_indexed": flag})

    def default(self, value: T) -> "ColumnType[T]":
        """Provide a default value, replacing any earlier one."""
        return self.model_copy(update={"default_value": value})

    def size(self, n: int) -> "ColumnType[T]":
        """
        Set a size limit (varchar, binary, or the element of an array).
        """
        return self.model_copy(update={"size_limit": n})

    # ----------------------------------------------------------------
    # Inspection
    # ----------------------------------------------------------------

    def metadata(self) -> Dict[str, Any]:
        """Observable metadata keyed by builder name."""
        return {
            "nullable": self.is_nullable,
            "unique": self.is_unique,
            "increments": self.is_incrementing,
            "indexed": self.is_indexed,
            "default": self.default_value,
            "size": self.size_limit,
        }

    def validation_errors(self) -> List[InvalidMetadata]:
        """Every reason this metadata is inconsistent with the kind."""
        return collect_errors(
            self._inner,
            nullable=self.is_nullable,
            increments=self.is_incrementing,
            default=self.default_value,
            size=self.size_limit,
        )

    def validate(self) -> bool:
        """Check whether the accumulated metadata fits this column kind."""
        return not self.validation_errors()

    def _get_inner(self) -> BaseType:
        """The column kind. For generator implementations only."""
        return self._inner


__all__ = [
    "BaseType",
    "ColumnType",
    "TEXT",
    "VARCHAR",
    "PRIMARY",
    "INTEGER",
    "FLOAT",
    "DOUBLE",
    "BOOLEAN",
    "BINARY",
]
