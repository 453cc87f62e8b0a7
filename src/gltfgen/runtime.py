"""
runtime.py
----------

Decode protocol that generated models are written against.

Every generated dataclass field carries a `Codec` in its metadata
describing how to read the matching JSON value. `decode_struct` walks
those fields:

- a required key that is absent makes the whole object fail with
  `MissingField`, which propagates to the enclosing object
- an optional key that is absent, or whose value fails to decode,
  gets the field default: an empty tuple for variable-length arrays,
  an empty dict for maps, None for everything else
- keys the schema does not know about are ignored

Arrays decode to tuples, so a decoded object is hashable unless it
holds a map or a raw JSON object.
"""

import dataclasses
import enum
import logging
from typing import Any, Callable, Dict, Optional, Type, TypeVar

from .errors import DecodeError, MissingField
from .items import INT_MAX, INT_MIN

log = logging.getLogger(__name__)

# Key of the field metadata entry holding the decode information
METADATA_KEY = "gltfgen"

T = TypeVar("T")


class Codec:
    """Decode one JSON value."""

    def decode(self, value: Any, path: str) -> Any:
        raise NotImplementedError

    def default(self) -> Any:
        """Value used for an absent optional field."""
        return None


@dataclasses.dataclass(frozen=True)
class IntegerCodec(Codec):
    minimum: int = INT_MIN
    maximum: int = INT_MAX

    def decode(self, value, path):
        if isinstance(value, bool):
            raise DecodeError("expected an integer, got a boolean", path)
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        if not isinstance(value, int):
            raise DecodeError(f"expected an integer, got {value!r}", path)
        if not self.minimum <= value <= self.maximum:
            raise DecodeError(
                f"{value} outside [{self.minimum}, {self.maximum}]", path)
        return value


@dataclasses.dataclass(frozen=True)
class NumberCodec(Codec):
    def decode(self, value, path):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise DecodeError(f"expected a number, got {value!r}", path)
        return float(value)


@dataclasses.dataclass(frozen=True)
class StringCodec(Codec):
    def decode(self, value, path):
        if not isinstance(value, str):
            raise DecodeError(f"expected a string, got {value!r}", path)
        return value


@dataclasses.dataclass(frozen=True)
class BooleanCodec(Codec):
    def decode(self, value, path):
        if not isinstance(value, bool):
            raise DecodeError(f"expected a boolean, got {value!r}", path)
        return value


@dataclasses.dataclass(frozen=True)
class PassthroughCodec(Codec):
    """Keep the JSON value as parsed."""

    def decode(self, value, path):
        return value


@dataclasses.dataclass(frozen=True)
class ArrayCodec(Codec):
    element: Codec
    min_items: int = 0
    max_items: Optional[int] = None

    @property
    def fixed_length(self) -> Optional[int]:
        if self.max_items is not None and self.min_items == self.max_items:
            return self.max_items
        return None

    def decode(self, value, path):
        if not isinstance(value, list):
            raise DecodeError(f"expected an array, got {type(value).__name__}", path)
        if len(value) < self.min_items:
            raise DecodeError(
                f"expected at least {self.min_items} items, got {len(value)}", path)
        if self.max_items is not None and len(value) > self.max_items:
            raise DecodeError(
                f"expected at most {self.max_items} items, got {len(value)}", path)
        return tuple(
            self.element.decode(v, f"{path}[{i}]") for i, v in enumerate(value))

    def default(self):
        # fixed-length arrays have no empty value of the right shape
        if self.fixed_length is not None:
            return None
        return ()


@dataclasses.dataclass(frozen=True)
class MapCodec(Codec):
    value: Codec

    def decode(self, value, path):
        if not isinstance(value, dict):
            raise DecodeError(f"expected an object, got {type(value).__name__}", path)
        return {k: self.value.decode(v, f"{path}.{k}") for k, v in value.items()}

    def default(self):
        return {}


@dataclasses.dataclass(frozen=True)
class EnumCodec(Codec):
    cls: Type[enum.Enum]

    def decode(self, value, path):
        if isinstance(value, bool):
            raise DecodeError(f"{value!r} is not a {self.cls.__name__}", path)
        try:
            return self.cls(value)
        except ValueError:
            raise DecodeError(f"{value!r} is not a {self.cls.__name__}", path) from None


@dataclasses.dataclass(frozen=True)
class StructCodec(Codec):
    cls: type

    def decode(self, value, path):
        return decode_struct(self.cls, value, path)


# Codecs without parameters are shared
NUMBER = NumberCodec()
STRING = StringCodec()
BOOLEAN = BooleanCodec()
PASSTHROUGH = PassthroughCodec()


def integer(minimum: int = INT_MIN, maximum: int = INT_MAX) -> IntegerCodec:
    return IntegerCodec(minimum, maximum)


def array(element: Codec, min_items: int = 0, max_items: Optional[int] = None) -> ArrayCodec:
    return ArrayCodec(element, min_items, max_items)


def mapping(value: Codec) -> MapCodec:
    return MapCodec(value)


def enumeration(cls: Type[enum.Enum]) -> EnumCodec:
    return EnumCodec(cls)


def struct(cls: type) -> StructCodec:
    return StructCodec(cls)


@dataclasses.dataclass(frozen=True)
class FieldSpec:
    """Decode metadata attached to one generated dataclass field."""

    # JSON key the field is read from
    key: str
    codec: Codec
    required: bool


def required(key: str, codec: Codec) -> Any:
    """Declare a dataclass field that must be present in the JSON."""
    return dataclasses.field(
        metadata={METADATA_KEY: FieldSpec(key, codec, True)})


def optional(key: str, codec: Codec) -> Any:
    """Declare a dataclass field that falls back to its codec default."""
    factory: Callable[[], Any] = codec.default
    return dataclasses.field(
        default_factory=factory,
        metadata={METADATA_KEY: FieldSpec(key, codec, False)})


def field_specs(cls: type) -> Dict[str, FieldSpec]:
    """Map attribute names of a generated class to their decode metadata."""
    return {
        f.name: f.metadata[METADATA_KEY]
        for f in dataclasses.fields(cls)
        if METADATA_KEY in f.metadata
    }


def decode_struct(cls: Type[T], value: Any, path: str = "$") -> T:
    """
    Decode a JSON object into a generated dataclass.

    Parameters
    ----------
    cls : type
        Generated dataclass
    value : any
        Parsed JSON value
    path : str
        Location of `value` used in error messages

    Returns
    -------
    instance : cls
        The decoded object

    Raises
    ------
    DecodeError
        If `value` is not an object, a required field is missing or
        a required field does not decode
    """
    if not isinstance(value, dict):
        raise DecodeError(
            f"expected an object for {cls.__name__}, got {type(value).__name__}", path)

    kwargs = {}
    for name, spec in field_specs(cls).items():
        child = f"{path}.{spec.key}"
        if spec.key not in value:
            if spec.required:
                raise MissingField(
                    f"{cls.__name__} requires property {spec.key!r}", path)
            continue
        try:
            kwargs[name] = spec.codec.decode(value[spec.key], child)
        except DecodeError as exc:
            if spec.required:
                raise
            log.warning("dropping optional %s: %s", child, exc)
    return cls(**kwargs)


def decode(cls: Type[T], value: Any) -> T:
    """Decode `value` into `cls`, raising `DecodeError` on failure."""
    return decode_struct(cls, value)


def try_decode(cls: Type[T], value: Any) -> Optional[T]:
    """Decode `value` into `cls`, or return None if it could not be decoded."""
    try:
        return decode_struct(cls, value)
    except DecodeError as exc:
        log.debug("could not decode %s: %s", cls.__name__, exc)
        return None


__all__ = [
    "Codec",
    "FieldSpec",
    "NUMBER",
    "STRING",
    "BOOLEAN",
    "PASSTHROUGH",
    "integer",
    "array",
    "mapping",
    "enumeration",
    "struct",
    "required",
    "optional",
    "field_specs",
    "decode_struct",
    "decode",
    "try_decode",
]
