"""
Dataclasses for normalized schema items and type definitions.

An `Item` is what one schema object normalizes to. Items are immutable
values: every reference site holds its own copy, and named types are
referred to by integer handles into a `TypeRegistry` rather than by
object links.
"""

import enum
from dataclasses import dataclass
from typing import Optional, Tuple, Union

# Full signed 64-bit range used when an integer schema omits a bound
INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


class PrimitiveKind(str, enum.Enum):
    """JSON scalar kinds a schema `type` can name."""

    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class StructRef:
    """Reference to a registered struct definition."""

    # Index into TypeRegistry.structs
    handle: int


@dataclass(frozen=True)
class EnumRef:
    """Reference to a registered enum definition."""

    # Index into TypeRegistry.enums
    handle: int


@dataclass(frozen=True)
class Array:
    """A JSON array of one element item."""

    element: "Item"
    # Lower bound on length, 0 when the schema omits `minItems`
    min_items: int = 0
    # Upper bound on length, None when unbounded
    max_items: Optional[int] = None

    @property
    def fixed_length(self) -> Optional[int]:
        """The exact length when both bounds agree, otherwise None."""
        if self.max_items is not None and self.min_items == self.max_items:
            return self.max_items
        return None


@dataclass(frozen=True)
class Map:
    """A JSON object used as a string-keyed dictionary."""

    value: "Item"


@dataclass(frozen=True)
class Primitive:
    """A JSON scalar."""

    kind: PrimitiveKind
    # Inclusive bounds, only meaningful for integers
    minimum: int = INT_MIN
    maximum: int = INT_MAX


@dataclass(frozen=True)
class PassthroughExtension:
    """An open-ended extension slot, kept as the raw JSON value."""


@dataclass(frozen=True)
class Unknown:
    """A schema with no type information, kept as the raw JSON value."""


# Union type for any normalized item
Item = Union[StructRef, EnumRef, Array, Map, Primitive, PassthroughExtension, Unknown]


@dataclass(frozen=True)
class NamedProperty:
    """One property of a struct."""

    # JSON key as written in the schema
    name: str
    item: Item
    required: bool = False
    description: Optional[str] = None


@dataclass(frozen=True)
class StructDefinition:
    """A named record type."""

    title: str
    description: Optional[str] = None
    properties: Tuple[NamedProperty, ...] = ()

    def property(self, name: str) -> Optional[NamedProperty]:
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None


@dataclass(frozen=True)
class EnumOption:
    """One member of an enumeration."""

    name: str
    value: Union[int, str, float]
    description: Optional[str] = None


@dataclass(frozen=True)
class EnumDefinition:
    """A named enumeration of constants of one scalar kind."""

    title: str
    kind: PrimitiveKind
    description: Optional[str] = None
    options: Tuple[EnumOption, ...] = ()


Definition = Union[StructDefinition, EnumDefinition]

__all__ = [
    "INT_MIN",
    "INT_MAX",
    "PrimitiveKind",
    "StructRef",
    "EnumRef",
    "Array",
    "Map",
    "Primitive",
    "PassthroughExtension",
    "Unknown",
    "Item",
    "NamedProperty",
    "StructDefinition",
    "EnumOption",
    "EnumDefinition",
    "Definition",
]
