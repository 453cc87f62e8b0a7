"""
loader.py
---------

Load JSON schema documents from a schema directory.

Documents are addressed by paths relative to the root, optionally
followed by a JSON pointer fragment:

- "asset.schema.json" (whole file)
- "definitions.schema.json#/$defs/vec3" (file + JSON pointer)
"""

import json
import logging
import posixpath
import re
from pathlib import Path
from typing import Any, Dict, Tuple, Union

from .errors import NotFound, ParseError

log = logging.getLogger(__name__)

# Array index in a JSON pointer: no sign, no leading zeros
_INDEX = re.compile(r"0|[1-9][0-9]*")


def split_ref(ref: str) -> Tuple[str, str]:
    """
    Split a reference into its file part and pointer part.

    Parameters
    ----------
    ref : str
        A reference such as "a.json#/$defs/b"

    Returns
    -------
    file_name : str
        Everything before '#', may be empty
    pointer : str
        Everything after '#', empty when there is no fragment
    """
    if "#" in ref:
        file_name, pointer = ref.split("#", 1)
        return file_name, pointer
    return ref, ""


def join(base: str, ref: str) -> str:
    """
    Resolve `ref` against the document `base` it was found in.

    File references are relative to the directory of `base`; a
    fragment-only reference points back into `base` itself.
    """
    base_file, _ = split_ref(base)
    file_name, pointer = split_ref(ref)
    if not file_name:
        file_name = base_file
    else:
        file_name = posixpath.normpath(
            posixpath.join(posixpath.dirname(base_file), file_name))
    if pointer:
        return f"{file_name}#{pointer}"
    return file_name


class DocumentLoader:
    """
    Read and cache schema documents under one root directory.

    Parameters
    ----------
    root : str or Path
        Directory that every resolved path must live under
    """

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root).resolve()
        self._cache: Dict[str, Any] = {}

    def __contains__(self, path: str) -> bool:
        return split_ref(path)[0] in self._cache

    def resolve(self, path: str) -> Any:
        """
        Return the parsed JSON value at `path`.

        Repeated calls with the same file share one parse.

        Parameters
        ----------
        path : str
            Relative file path with an optional '#' pointer

        Returns
        -------
        value : any
            The parsed document, or the node the pointer selects

        Raises
        ------
        NotFound
            If the file or the pointer target does not exist
        ParseError
            If the file is not valid JSON
        """
        file_name, pointer = split_ref(path)
        document = self._load(file_name)
        if not pointer:
            return document
        return self._follow(document, pointer, path)

    def _load(self, file_name: str) -> Any:
        if file_name in self._cache:
            return self._cache[file_name]

        full = (self.root / file_name).resolve()
        try:
            full.relative_to(self.root)
        except ValueError:
            raise NotFound("path escapes the schema root", path=file_name) from None
        if not full.is_file():
            raise NotFound("schema file does not exist", path=file_name)

        log.debug("loading schema %s", full)
        try:
            with open(full, encoding="utf-8") as f:
                document = json.load(f)
        except UnicodeDecodeError as exc:
            raise ParseError(f"not valid UTF-8: {exc}", path=file_name) from exc
        except json.JSONDecodeError as exc:
            raise ParseError(f"invalid JSON: {exc}", path=file_name) from exc

        self._cache[file_name] = document
        return document

    @staticmethod
    def _follow(document: Any, pointer: str, path: str) -> Any:
        # RFC 6901: segments follow every '/', empty ones included
        if not pointer.startswith("/"):
            raise NotFound(f"pointer {pointer!r} does not start with '/'", path=path)
        result = document
        for part in pointer[1:].split("/"):
            # escapes: ~1 is '/', ~0 is '~'
            part = part.replace("~1", "/").replace("~0", "~")
            if isinstance(result, list) and _INDEX.fullmatch(part) and int(part) < len(result):
                result = result[int(part)]
            elif isinstance(result, dict) and part in result:
                result = result[part]
            else:
                raise NotFound(f"pointer {pointer!r} does not resolve", path=path)
        return result


__all__ = ["DocumentLoader", "split_ref", "join"]
