"""
normalizer.py
-------------

Turn raw JSON schema objects into normalized items.

A `CompilationContext` owns the loader and the registry for one run
and walks the schema graph depth first: `$ref` targets are followed,
`allOf` branches are merged into the struct that lists them and
`anyOf` lists of constants become enumerations. Every named object
schema ends up registered exactly once.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from .errors import (
    InvalidEnumValue,
    MissingEnumBranchType,
    MissingItems,
    MissingTitle,
    NestingTooDeep,
    ReferenceCycle,
    SchemaError,
)
from .items import (
    INT_MAX,
    INT_MIN,
    Array,
    EnumDefinition,
    EnumOption,
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
from .loader import DocumentLoader, join
from .registry import TypeRegistry

log = logging.getLogger(__name__)

# Default limit on nested normalize() calls
DEFAULT_MAX_DEPTH = 64
# Property names kept as raw JSON instead of being typed
DEFAULT_PASSTHROUGH = ("extensions",)
# Enum option name used when a branch has no description
PLACEHOLDER_NAME = "Placeholder"

_SCALARS = {kind.value: kind for kind in PrimitiveKind}
_ENUM_KINDS = {
    "integer": PrimitiveKind.INTEGER,
    "number": PrimitiveKind.NUMBER,
    "string": PrimitiveKind.STRING,
}


class CompilationContext:
    """
    State for one compilation run.

    Parameters
    ----------
    loader : DocumentLoader
        Source of `$ref` targets
    registry : TypeRegistry, optional
        Registry to fill, a new one by default
    max_depth : int
        Maximum nesting of normalize calls before giving up
    passthrough : iterable of str
        Property names normalized to `PassthroughExtension`
    """

    def __init__(
        self,
        loader: DocumentLoader,
        registry: Optional[TypeRegistry] = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
        passthrough: Iterable[str] = DEFAULT_PASSTHROUGH,
    ):
        self.loader = loader
        self.registry = registry if registry is not None else TypeRegistry()
        self.max_depth = max_depth
        self.passthrough = frozenset(passthrough)

        # references currently being resolved, outermost first
        self._documents: List[str] = []
        # struct titles whose properties are still being collected
        self._building: set = set()
        self._depth = 0

    @property
    def document(self) -> Optional[str]:
        """The reference currently being normalized, if any."""
        if self._documents:
            return self._documents[-1]
        return None

    def normalize_file(self, path: str) -> Item:
        """Normalize the schema document at `path` under the loader root."""
        return self._follow_ref(path, name_hint=None)

    def normalize(self, schema: Any, name_hint: Optional[str] = None) -> Item:
        """
        Normalize one schema object.

        Parameters
        ----------
        schema : dict
            Raw schema object
        name_hint : str, optional
            Title to use for an enumeration that has none of its own,
            usually "<struct title> <property name>"

        Returns
        -------
        item : Item
            The normalized item. Named objects are registered as a
            side effect and returned as a `StructRef`.
        """
        if self._depth >= self.max_depth:
            raise NestingTooDeep(
                f"schema nesting exceeds {self.max_depth} levels", path=self.document)
        self._depth += 1
        try:
            return self._normalize(schema, name_hint)
        finally:
            self._depth -= 1

    def _normalize(self, schema: Any, name_hint: Optional[str]) -> Item:
        if not isinstance(schema, dict):
            raise SchemaError(
                f"expected a schema object, got {type(schema).__name__}",
                path=self.document)

        if "$ref" in schema:
            return self._follow_ref(schema["$ref"], name_hint)

        kind = schema.get("type")
        if kind == "object":
            return self._object(schema, name_hint)
        if kind == "array":
            return self._array(schema, name_hint)
        if isinstance(kind, str) and kind in _SCALARS:
            return self._primitive(schema, _SCALARS[kind])

        if "allOf" in schema:
            # without a type, allOf only splices a base schema in
            branches = schema["allOf"]
            if not branches:
                return Unknown()
            return self.normalize(branches[0], name_hint)
        if "anyOf" in schema:
            return self._enum(schema, name_hint)
        return Unknown()

    def _follow_ref(self, ref: Any, name_hint: Optional[str]) -> Item:
        if not isinstance(ref, str):
            raise SchemaError("$ref must be a string", path=self.document)
        target = join(self.document or "", ref)
        if target in self._documents:
            chain = " -> ".join(self._documents + [target])
            raise ReferenceCycle(f"reference cycle {chain}", path=target)

        schema = self.loader.resolve(target)
        self._documents.append(target)
        try:
            return self.normalize(schema, name_hint)
        finally:
            self._documents.pop()

    def _object(self, schema: Dict[str, Any], name_hint: Optional[str]) -> Item:
        title = schema.get("title")
        if title is None:
            extra = schema.get("additionalProperties")
            if isinstance(extra, dict) and not schema.get("properties"):
                return Map(self.normalize(extra, name_hint))
            raise MissingTitle("object schema has no title", path=self.document)

        handle = self.registry.lookup(title)
        if handle is not None:
            return StructRef(handle)
        if title in self._building:
            raise ReferenceCycle(
                f"struct {title!r} contains itself", path=self.document)

        self._building.add(title)
        try:
            properties = self._collect(schema, title)
        finally:
            self._building.discard(title)

        definition = StructDefinition(
            title=title,
            description=schema.get("description"),
            properties=tuple(properties),
        )
        return StructRef(self.registry.register(title, definition))

    def _collect(self, schema: Dict[str, Any], title: str) -> List[NamedProperty]:
        """
        Gather the properties of an object schema and its `allOf`
        branches, first writer wins.

        An own property declared as the empty schema `{}` only restates
        an inherited one, so an inherited definition replaces it.
        """
        required = set(schema.get("required", ()))
        own = schema.get("properties", {})

        merged: Dict[str, NamedProperty] = {}
        restated = set()
        for name in sorted(own):
            raw = own[name]
            if raw == {}:
                restated.add(name)
            merged[name] = self._property(name, raw, name in required, title)

        for branch in schema.get("allOf", ()):
            for prop in self._inherited(branch, title):
                if prop.name in merged and prop.name not in restated:
                    continue
                restated.discard(prop.name)
                merged[prop.name] = NamedProperty(
                    name=prop.name,
                    item=prop.item,
                    required=prop.required or prop.name in required,
                    description=prop.description,
                )
        return list(merged.values())

    def _inherited(self, branch: Any, title: str) -> List[NamedProperty]:
        if (
            isinstance(branch, dict)
            and "properties" in branch
            and not {"$ref", "type", "title"} & branch.keys()
        ):
            # anonymous mixin of extra properties
            return self._collect(branch, title)

        item = self.normalize(branch, title)
        if isinstance(item, StructRef):
            return list(self.registry.struct(item.handle).properties)
        log.debug("allOf branch of %r contributes no properties", title)
        return []

    def _property(
        self, name: str, raw: Any, required: bool, parent: str
    ) -> NamedProperty:
        if name in self.passthrough:
            item: Item = PassthroughExtension()
        else:
            item = self.normalize(raw, name_hint=f"{parent} {name}")

        description = raw.get("description") if isinstance(raw, dict) else None
        if description is None and isinstance(item, (StructRef, EnumRef)):
            description = self.registry.definition(item).description
        return NamedProperty(
            name=name, item=item, required=required, description=description)

    def _array(self, schema: Dict[str, Any], name_hint: Optional[str]) -> Array:
        items = schema.get("items")
        if not isinstance(items, dict):
            raise MissingItems("array schema has no items schema", path=self.document)
        element = self.normalize(items, name_hint)

        max_items = schema.get("maxItems")
        return Array(
            element=element,
            min_items=int(schema.get("minItems", 0)),
            max_items=None if max_items is None else int(max_items),
        )

    @staticmethod
    def _primitive(schema: Dict[str, Any], kind: PrimitiveKind) -> Primitive:
        if kind is not PrimitiveKind.INTEGER:
            return Primitive(kind)
        return Primitive(
            kind,
            minimum=int(schema.get("minimum", INT_MIN)),
            maximum=int(schema.get("maximum", INT_MAX)),
        )

    def _enum(self, schema: Dict[str, Any], name_hint: Optional[str]) -> EnumRef:
        branches = schema["anyOf"]
        if not isinstance(branches, list) or not branches:
            raise MissingEnumBranchType("anyOf has no branches", path=self.document)

        last = branches[-1]
        last_type = last.get("type") if isinstance(last, dict) else None
        kind = _ENUM_KINDS.get(last_type) if isinstance(last_type, str) else None
        if kind is None:
            raise MissingEnumBranchType(
                "last anyOf branch must have type integer, number or string",
                path=self.document)

        options = []
        for branch in branches:
            if not isinstance(branch, dict):
                continue
            if "enum" in branch:
                constants = branch["enum"]
                if not constants:
                    raise InvalidEnumValue("empty enum list", path=self.document)
                constant = constants[0]
            elif "const" in branch:
                constant = branch["const"]
            else:
                continue

            description = branch.get("description")
            options.append(EnumOption(
                name=description if description is not None else PLACEHOLDER_NAME,
                value=self._constant(kind, constant),
                description=description,
            ))

        definition = EnumDefinition(
            title=schema.get("title") or name_hint or "Enum",
            kind=kind,
            description=schema.get("description"),
            options=tuple(options),
        )
        return EnumRef(self.registry.add_enum(definition))

    def _constant(self, kind: PrimitiveKind, value: Any) -> Union[int, str, float]:
        if kind is PrimitiveKind.STRING:
            if isinstance(value, str):
                return value
        elif isinstance(value, bool):
            pass
        elif kind is PrimitiveKind.INTEGER:
            if isinstance(value, int):
                return value
            if isinstance(value, float) and value.is_integer():
                return int(value)
        elif isinstance(value, (int, float)):
            return float(value)
        raise InvalidEnumValue(
            f"constant {value!r} is not a valid {kind.value}", path=self.document)


__all__ = [
    "CompilationContext",
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_PASSTHROUGH",
    "PLACEHOLDER_NAME",
]
