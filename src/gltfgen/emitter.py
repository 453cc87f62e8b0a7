"""
emitter.py
----------

Serialize a `TypeRegistry` into the source of a Python module.

Enums are written first, then structs, each in handle order. Handles
are issued when a definition is complete, after everything its fields
refer to, so every class is defined before the first class that uses
it and the module needs no forward references. This is deliberately
not reverse discovery order, which would place a type shared by two
structs after the first of them.

Structs become frozen dataclasses whose fields carry `gltfgen.runtime`
decode metadata; enums become `enum.Enum` subclasses mixed with the
scalar type of their constants.
"""

import keyword
import logging
import re
import textwrap
from dataclasses import dataclass
from typing import List, Optional, Set

from .items import (
    INT_MAX,
    INT_MIN,
    Array,
    EnumDefinition,
    EnumRef,
    Item,
    Map,
    NamedProperty,
    PassthroughExtension,
    Primitive,
    PrimitiveKind,
    StructDefinition,
    StructRef,
    Unknown,
)
from .normalizer import PLACEHOLDER_NAME
from .registry import TypeRegistry

log = logging.getLogger(__name__)

INDENT = "    "
# Wrap width for generated docstrings and comments
TEXT_WIDTH = 72

# Names the generated module itself binds
RESERVED_NAMES = frozenset(
    ["enum", "dataclass", "Any", "Dict", "Optional", "Tuple", "_rt"])
# Attribute names taken by generated structs or used in their annotations
RESERVED_FIELDS = frozenset(["from_json", "int", "float", "str", "bool"])

_SCALAR_TYPES = {
    PrimitiveKind.INTEGER: "int",
    PrimitiveKind.NUMBER: "float",
    PrimitiveKind.STRING: "str",
    PrimitiveKind.BOOLEAN: "bool",
}
_SCALAR_CODECS = {
    PrimitiveKind.NUMBER: "_rt.NUMBER",
    PrimitiveKind.STRING: "_rt.STRING",
    PrimitiveKind.BOOLEAN: "_rt.BOOLEAN",
}
_ENUM_BASES = {
    PrimitiveKind.INTEGER: "enum.IntEnum",
    PrimitiveKind.STRING: "str, enum.Enum",
    PrimitiveKind.NUMBER: "float, enum.Enum",
}


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal remark about the emitted code."""

    # Class the remark is about
    owner: str
    # Attribute name, or None for the class itself
    field: Optional[str]
    message: str

    def __str__(self):
        if self.field is None:
            return f"{self.owner}: {self.message}"
        return f"{self.owner}.{self.field}: {self.message}"


def class_name(title: str) -> str:
    """
    Turn a schema title into a class name.

    "Mesh Primitive" -> "MeshPrimitive", "Sampler wrapS" -> "SamplerWrapS"
    """
    words = re.findall(r"[A-Za-z0-9]+", title)
    name = "".join(w[0].upper() + w[1:] for w in words)
    if not name:
        return "Model"
    if name[0].isdigit():
        return "T" + name
    return name


def field_name(key: str) -> str:
    """Turn a JSON key into a snake_case attribute name."""
    name = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "_", key)
    name = re.sub(r"[^0-9A-Za-z_]+", "_", name).lower().strip("_")
    if not name:
        name = "field"
    if name[0].isdigit():
        name = "_" + name
    if keyword.iskeyword(name):
        name += "_"
    return name


def member_name(name: str) -> str:
    """Turn an enum option name into an UPPER_SNAKE member name."""
    name = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "_", name)
    name = re.sub(r"[^0-9A-Za-z]+", "_", name).strip("_").upper()
    if not name:
        return "VALUE"
    if name[0].isdigit():
        return "VALUE_" + name
    return name


def _unique(name: str, taken: Set[str]) -> str:
    candidate = name
    counter = 2
    while candidate in taken:
        candidate = f"{name}_{counter}"
        counter += 1
    taken.add(candidate)
    return candidate


def _docstring(text: str, indent: str) -> List[str]:
    text = text.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')
    one_line = f'{indent}"""{text}"""'
    if "\n" not in text and len(one_line) <= 79 and not text.endswith('"'):
        return [one_line]
    lines = [f'{indent}"""']
    lines.extend(indent + line for line in textwrap.wrap(text, TEXT_WIDTH))
    lines.append(f'{indent}"""')
    return lines


def _comment(text: str, indent: str) -> List[str]:
    return [f"{indent}# {line}" for line in textwrap.wrap(text, TEXT_WIDTH)]


class Emitter:
    """
    Write the definitions of a registry as Python source.

    Parameters
    ----------
    registry : TypeRegistry
        Completed registry of one compilation
    entry : str, optional
        Entry schema name, mentioned in the module header

    Attributes
    ----------
    diagnostics : list of Diagnostic
        Remarks collected by the last call to `emit`
    """

    def __init__(self, registry: TypeRegistry, entry: Optional[str] = None):
        self.registry = registry
        self.entry = entry
        self.diagnostics: List[Diagnostic] = []

        # struct names are assigned first so enums yield on collisions
        taken = set(RESERVED_NAMES)
        self._struct_names = [
            self._claim(class_name(s.title), taken, s.title)
            for s in registry.structs]
        self._enum_names = [
            self._claim(class_name(e.title), taken, e.title)
            for e in registry.enums]
        self._naming = list(self.diagnostics)

    def _claim(self, name: str, taken: Set[str], title: str) -> str:
        unique = _unique(name, taken)
        if unique != name:
            self._diagnose(unique, None, f"renamed from {name} ({title!r})")
        return unique

    def _diagnose(self, owner: str, field: Optional[str], message: str, warn: bool = True):
        diagnostic = Diagnostic(owner, field, message)
        self.diagnostics.append(diagnostic)
        if warn:
            log.warning("%s", diagnostic)
        else:
            log.debug("%s", diagnostic)

    def name_of(self, item: Item) -> str:
        """Class name of a struct or enum reference."""
        if isinstance(item, StructRef):
            return self._struct_names[item.handle]
        if isinstance(item, EnumRef):
            return self._enum_names[item.handle]
        raise TypeError(f"{type(item).__name__} has no class name")

    def type_expression(self, item: Item) -> str:
        """
        Python annotation for an item.

        Parameters
        ----------
        item : Item
            Normalized item

        Returns
        -------
        annotation : str
            e.g. "Accessor", "Tuple[float, float, float]", "Tuple[int, ...]"
        """
        if isinstance(item, (StructRef, EnumRef)):
            return self.name_of(item)
        if isinstance(item, Array):
            element = self.type_expression(item.element)
            length = item.fixed_length
            if length is None:
                return f"Tuple[{element}, ...]"
            if length == 0:
                return "Tuple[()]"
            return "Tuple[" + ", ".join([element] * length) + "]"
        if isinstance(item, Map):
            return f"Dict[str, {self.type_expression(item.value)}]"
        if isinstance(item, Primitive):
            return _SCALAR_TYPES[item.kind]
        return "Any"

    def codec_expression(self, item: Item) -> str:
        """Source of the runtime codec that decodes an item."""
        if isinstance(item, StructRef):
            return f"_rt.struct({self.name_of(item)})"
        if isinstance(item, EnumRef):
            return f"_rt.enumeration({self.name_of(item)})"
        if isinstance(item, Array):
            args = [self.codec_expression(item.element)]
            if item.min_items or item.max_items is not None:
                args.append(str(item.min_items))
            if item.max_items is not None:
                args.append(str(item.max_items))
            return f"_rt.array({', '.join(args)})"
        if isinstance(item, Map):
            return f"_rt.mapping({self.codec_expression(item.value)})"
        if isinstance(item, Primitive):
            if item.kind is not PrimitiveKind.INTEGER:
                return _SCALAR_CODECS[item.kind]
            if item.maximum != INT_MAX:
                return f"_rt.integer({item.minimum}, {item.maximum})"
            if item.minimum != INT_MIN:
                return f"_rt.integer({item.minimum})"
            return "_rt.integer()"
        return "_rt.PASSTHROUGH"

    def emit(self) -> str:
        """Return the complete module source."""
        self.diagnostics = list(self._naming)

        source = "from " + (self.entry or "a JSON schema")
        lines = [
            f"# Generated by gltfgen {source}. Do not edit.",
            "",
            "import enum",
            "from dataclasses import dataclass",
            "from typing import Any, Dict, Optional, Tuple",
            "",
            "from gltfgen import runtime as _rt",
        ]
        for handle, definition in enumerate(self.registry.enums):
            lines.extend(["", ""])
            lines.extend(self._enum(self._enum_names[handle], definition))
        for handle, definition in enumerate(self.registry.structs):
            lines.extend(["", ""])
            lines.extend(self._struct(self._struct_names[handle], definition))
        lines.append("")
        return "\n".join(lines)

    def _enum(self, name: str, definition: EnumDefinition) -> List[str]:
        lines = [f"class {name}({_ENUM_BASES[definition.kind]}):"]
        body = []
        if definition.description:
            body.extend(_docstring(definition.description, INDENT))
            body.append("")

        taken: Set[str] = set()
        for option in definition.options:
            label = option.name
            if definition.kind is PrimitiveKind.STRING and (
                label == PLACEHOLDER_NAME or " " in label
            ):
                label = str(option.value)
            elif " " in label:
                label = f"VALUE_{option.value}"
            member = member_name(label)
            if member in taken:
                self._diagnose(name, member, "duplicate member name")
            member = _unique(member, taken)

            if option.description and member_name(option.description) != member:
                body.extend(_comment(option.description, INDENT))
            body.append(f"{INDENT}{member} = {option.value!r}")

        if not body:
            body.append(f"{INDENT}pass")
        elif body[-1] == "":
            body.pop()
        lines.extend(body)
        return lines

    def _struct(self, name: str, definition: StructDefinition) -> List[str]:
        lines = ["@dataclass(frozen=True)", f"class {name}:"]
        if definition.description:
            lines.extend(_docstring(definition.description, INDENT))
            lines.append("")

        taken = set(RESERVED_FIELDS)
        named = []
        for prop in definition.properties:
            attribute = field_name(prop.name)
            if attribute in taken:
                self._diagnose(name, attribute, f"renamed field for key {prop.name!r}")
            named.append((_unique(attribute, taken), prop))

        # a dataclass field without a default cannot follow one with a default
        ordered = [p for p in named if p[1].required] + [
            p for p in named if not p[1].required]
        for attribute, prop in ordered:
            lines.extend(self._field(name, attribute, prop))

        if ordered:
            lines.append("")
        lines.append(f"{INDENT}from_json = classmethod(_rt.decode_struct)")
        return lines

    def _field(self, owner: str, attribute: str, prop: NamedProperty) -> List[str]:
        item = prop.item
        if isinstance(item, Unknown):
            self._diagnose(owner, attribute, "untyped schema, kept as raw JSON")
        elif isinstance(item, PassthroughExtension):
            self._diagnose(owner, attribute, "extension slot, kept as raw JSON", warn=False)

        annotation = self.type_expression(item)
        codec = self.codec_expression(item)
        if prop.required:
            value = f"_rt.required({prop.name!r}, {codec})"
        else:
            value = f"_rt.optional({prop.name!r}, {codec})"
            defaulted = isinstance(item, Map) or (
                isinstance(item, Array) and item.fixed_length is None)
            if annotation != "Any" and not defaulted:
                annotation = f"Optional[{annotation}]"

        lines = []
        if prop.description:
            lines.extend(_comment(prop.description, INDENT))
        lines.append(f"{INDENT}{attribute}: {annotation} = {value}")
        return lines


__all__ = [
    "Diagnostic",
    "Emitter",
    "class_name",
    "field_name",
    "member_name",
]
