"""
Exception hierarchy for gltfgen.

Three families share one base class:

- `CompileError`: the schema tree could not be turned into a model.
  Always fatal to the compilation run and carries the offending
  document path.
- `DecodeError`: one JSON instance could not be decoded into a
  generated type.
- `GLBError`: a binary glTF container could not be read.
"""

from typing import Optional


class GltfgenError(Exception):
    """Base class for every error raised by gltfgen."""


class CompileError(GltfgenError):
    """Base class for errors that abort a schema compilation."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


class NotFound(CompileError):
    """A referenced schema file or pointer does not exist under the root."""


class ParseError(CompileError):
    """A schema file is not syntactically valid JSON."""


class ReferenceCycle(CompileError):
    """A `$ref` chain revisits a schema that is still being resolved."""


class SchemaError(CompileError):
    """A schema is missing a keyword the compiler requires."""


class MissingTitle(SchemaError):
    """An object schema with properties has no `title`."""


class MissingItems(SchemaError):
    """An array schema has no `items`."""


class MissingEnumBranchType(SchemaError):
    """The last `anyOf` branch does not name a usable scalar `type`."""


class InvalidEnumValue(SchemaError):
    """An `enum` constant does not match the enumeration's scalar kind."""


class NestingTooDeep(SchemaError):
    """Normalization recursed deeper than the configured limit."""


class DecodeError(GltfgenError, ValueError):
    """A JSON value could not be decoded into a generated type."""

    def __init__(self, message: str, path: str = "$"):
        self.path = path
        super().__init__(f"{path}: {message}")


class MissingField(DecodeError):
    """A required property is absent from a JSON object."""


class GLBError(GltfgenError):
    """Base class for binary glTF container errors."""


class IncorrectMagicNumber(GLBError):
    """The first four bytes are not `glTF`; this probably isn't a GLB."""


class IncorrectFormatting(GLBError):
    """The container layout is wrong, e.g. the first chunk is not JSON."""


class TruncatedData(GLBError):
    """The container ended before a header or chunk was complete."""


class GLBIOError(GLBError):
    """Reading the underlying stream failed."""


class InvalidUTF8(GLBError):
    """The JSON chunk is not valid UTF-8."""


class InvalidJSON(GLBError):
    """The JSON chunk could not be parsed or decoded into a document."""


__all__ = [
    "GltfgenError",
    "CompileError",
    "NotFound",
    "ParseError",
    "ReferenceCycle",
    "SchemaError",
    "MissingTitle",
    "MissingItems",
    "MissingEnumBranchType",
    "InvalidEnumValue",
    "NestingTooDeep",
    "DecodeError",
    "MissingField",
    "GLBError",
    "IncorrectMagicNumber",
    "IncorrectFormatting",
    "TruncatedData",
    "GLBIOError",
    "InvalidUTF8",
    "InvalidJSON",
]
