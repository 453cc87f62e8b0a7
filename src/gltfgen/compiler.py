"""
compiler.py
-----------

Top level of the schema compiler: normalize an entry schema and emit
Python source for everything it reaches.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Union

from .emitter import Emitter
from .items import Item
from .loader import DocumentLoader
from .normalizer import DEFAULT_MAX_DEPTH, DEFAULT_PASSTHROUGH, CompilationContext
from .registry import TypeRegistry

log = logging.getLogger(__name__)


@dataclass
class Compilation:
    """Result of compiling one schema tree."""

    context: CompilationContext
    # Item the entry schema normalized to
    root: Item
    entry: str

    @property
    def registry(self) -> TypeRegistry:
        return self.context.registry

    def emitter(self) -> Emitter:
        return Emitter(self.registry, entry=self.entry)


def compile_schema(
    root: Union[str, Path],
    entry: str,
    max_depth: int = DEFAULT_MAX_DEPTH,
    passthrough: Iterable[str] = DEFAULT_PASSTHROUGH,
) -> Compilation:
    """
    Normalize every schema reachable from `entry`.

    Parameters
    ----------
    root : str or Path
        Directory containing the schema documents
    entry : str
        Entry document, relative to `root`
    max_depth : int
        Limit on schema nesting
    passthrough : iterable of str
        Property names kept as raw JSON

    Returns
    -------
    compilation : Compilation
        The filled registry and the entry's item

    Raises
    ------
    CompileError
        If any reachable schema cannot be loaded or normalized
    """
    context = CompilationContext(
        DocumentLoader(root), max_depth=max_depth, passthrough=passthrough)
    item = context.normalize_file(entry)
    log.debug(
        "compiled %s: %d structs, %d enums",
        entry, len(context.registry.structs), len(context.registry.enums))
    return Compilation(context=context, root=item, entry=entry)


def generate_source(root: Union[str, Path], entry: str, **kwargs) -> str:
    """Compile a schema tree and return the generated module source."""
    return compile_schema(root, entry, **kwargs).emitter().emit()


__all__ = ["Compilation", "compile_schema", "generate_source"]
