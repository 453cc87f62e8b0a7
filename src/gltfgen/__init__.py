"""
gltfgen - Compile the glTF JSON schema into typed Python models.

This package turns a tree of JSON schema documents into frozen
dataclasses and enums, and reads glTF and GLB files into the model
compiled from the bundled glTF 2.0 schema.
"""

__version__ = "0.1.0"

# Schema compiler
from .compiler import Compilation, compile_schema, generate_source

# Runtime decode helpers used by generated code
from .runtime import decode, try_decode

# Bundled glTF model and the binary container
from . import document
from .glb import GLB

# Exceptions
from .errors import (
    CompileError,
    DecodeError,
    GLBError,
    GltfgenError,
)

__all__ = [
    # Schema compiler
    "Compilation",
    "compile_schema",
    "generate_source",
    # Decoding
    "decode",
    "try_decode",
    # glTF documents
    "document",
    "GLB",
    # Errors
    "GltfgenError",
    "CompileError",
    "DecodeError",
    "GLBError",
    # Version
    "__version__",
]
