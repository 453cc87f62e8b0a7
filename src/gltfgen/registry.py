"""
registry.py
-----------

Owns every struct and enum definition produced by one compilation.

Definitions are append-only and addressed by integer handles, which
are simply their index in registration order. Struct titles are
unique: registering a title twice returns the first handle.
"""

import logging
from typing import Dict, List, Optional, Tuple, Union

from .items import EnumDefinition, EnumRef, StructDefinition, StructRef

log = logging.getLogger(__name__)


class TypeRegistry:
    def __init__(self):
        self._structs: List[StructDefinition] = []
        self._enums: List[EnumDefinition] = []
        self._titles: Dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._structs) + len(self._enums)

    def __contains__(self, title: str) -> bool:
        return title in self._titles

    @property
    def structs(self) -> Tuple[StructDefinition, ...]:
        return tuple(self._structs)

    @property
    def enums(self) -> Tuple[EnumDefinition, ...]:
        return tuple(self._enums)

    def register(self, title: str, definition: StructDefinition) -> int:
        """
        Store a completed struct definition under `title`.

        Parameters
        ----------
        title : str
            Deduplication key
        definition : StructDefinition
            Fully built definition

        Returns
        -------
        handle : int
            A fresh handle on first registration, otherwise the
            handle already stored for `title`. In the latter case
            `definition` is discarded.
        """
        existing = self._titles.get(title)
        if existing is not None:
            return existing
        handle = len(self._structs)
        self._structs.append(definition)
        self._titles[title] = handle
        log.debug("registered struct %r as handle %d", title, handle)
        return handle

    def add_enum(self, definition: EnumDefinition) -> int:
        """Store an enum definition; enums are never deduplicated."""
        handle = len(self._enums)
        self._enums.append(definition)
        log.debug("registered enum %r as handle %d", definition.title, handle)
        return handle

    def lookup(self, title: str) -> Optional[int]:
        return self._titles.get(title)

    def struct(self, handle: int) -> StructDefinition:
        return self._structs[handle]

    def enum(self, handle: int) -> EnumDefinition:
        return self._enums[handle]

    def definition(
        self, item: Union[StructRef, EnumRef]
    ) -> Union[StructDefinition, EnumDefinition]:
        """Return the definition a reference item points at."""
        if isinstance(item, StructRef):
            return self._structs[item.handle]
        if isinstance(item, EnumRef):
            return self._enums[item.handle]
        raise TypeError(f"{type(item).__name__} does not refer to a definition")


__all__ = ["TypeRegistry"]
