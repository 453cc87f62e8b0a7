"""
glb.py
------

Read the binary glTF container.

A GLB file is a 12 byte header followed by chunks:

- header: magic `glTF`, container version, total length in bytes
- chunk 0: length, type `JSON`, UTF-8 text of the glTF document
- chunk 1 (optional): length, type `BIN\\0`, the binary buffer

All integers are unsigned 32 bit little-endian.
"""

import io
import json
import logging
import struct
from dataclasses import dataclass
from typing import Any, BinaryIO, Optional

import numpy as np

from . import document, runtime
from .errors import (
    DecodeError,
    GLBIOError,
    IncorrectFormatting,
    IncorrectMagicNumber,
    InvalidJSON,
    InvalidUTF8,
    TruncatedData,
)

log = logging.getLogger(__name__)

# b"glTF"
MAGIC = 0x46546C67
# b"JSON"
CHUNK_JSON = 0x4E4F534A
# b"BIN\x00"
CHUNK_BIN = 0x004E4942

_HEADER = struct.Struct("<III")
_CHUNK = struct.Struct("<II")


def _read(stream: BinaryIO, size: int, what: str) -> bytes:
    """Read exactly `size` bytes or raise."""
    data = b""
    while len(data) < size:
        try:
            block = stream.read(size - len(data))
        except OSError as exc:
            raise GLBIOError(f"failed reading {what}: {exc}") from exc
        if not block:
            raise TruncatedData(
                f"{what} needs {size} bytes, only {len(data)} available")
        data += block
    return data


@dataclass(frozen=True, eq=False)
class GLB:
    """A parsed GLB container."""

    # Decoded glTF document
    document: Any
    # Container version from the header, 2 for glTF 2.0
    version: int
    # The JSON chunk as parsed, before decoding
    json: dict
    # Contents of the BIN chunk as read-only uint8, None if absent
    binary: Optional[np.ndarray] = None

    @classmethod
    def from_reader(cls, stream: BinaryIO, document_type: Optional[type] = None) -> "GLB":
        """
        Read a GLB container from a binary stream.

        Parameters
        ----------
        stream : file-like
          Opened in binary mode, positioned at the header
        document_type : type, optional
          Generated class the JSON chunk is decoded into,
          the bundled glTF model by default

        Returns
        -------
        glb : GLB
          Header version, decoded document and binary chunk

        Raises
        ------
        GLBError
          One subclass per failure mode, see `gltfgen.errors`
        """
        magic, version, length = _HEADER.unpack(_read(stream, _HEADER.size, "header"))
        if magic != MAGIC:
            raise IncorrectMagicNumber(f"magic number is {magic:#010x}, not glTF")

        json_length, json_type = _CHUNK.unpack(
            _read(stream, _CHUNK.size, "JSON chunk header"))
        if json_type != CHUNK_JSON:
            raise IncorrectFormatting(
                f"first chunk has type {json_type:#010x}, expected JSON")
        raw = _read(stream, json_length, "JSON chunk")
        position = _HEADER.size + _CHUNK.size + json_length

        binary = None
        while position + _CHUNK.size <= length:
            chunk_length, chunk_type = _CHUNK.unpack(
                _read(stream, _CHUNK.size, "chunk header"))
            data = _read(stream, chunk_length, "chunk")
            position += _CHUNK.size + chunk_length
            if chunk_type == CHUNK_BIN and binary is None:
                binary = np.frombuffer(data, dtype=np.uint8)
            else:
                # unknown chunks must be ignored
                log.debug("skipping chunk %#010x of %d bytes", chunk_type, chunk_length)

        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidUTF8(f"JSON chunk is not UTF-8: {exc}") from exc
        try:
            parsed = json.loads(text)
        except json.JSONDecodeError as exc:
            raise InvalidJSON(f"JSON chunk does not parse: {exc}") from exc

        if document_type is None:
            document_type = document.root_type()
        try:
            decoded = runtime.decode(document_type, parsed)
        except DecodeError as exc:
            raise InvalidJSON(f"JSON chunk is not a glTF document: {exc}") from exc

        return cls(document=decoded, version=version, json=parsed, binary=binary)

    @classmethod
    def from_bytes(cls, data: bytes, document_type: Optional[type] = None) -> "GLB":
        """Read a GLB container from an in-memory blob."""
        return cls.from_reader(io.BytesIO(data), document_type=document_type)

    @classmethod
    def load(cls, path, document_type: Optional[type] = None) -> "GLB":
        """Read a GLB container from a file on disk."""
        try:
            f = open(path, "rb")
        except OSError as exc:
            raise GLBIOError(f"cannot open {path}: {exc}") from exc
        with f:
            return cls.from_reader(f, document_type=document_type)

    def buffer_view(self, index: int) -> np.ndarray:
        """
        Bytes of one buffer view of the embedded buffer.

        Parameters
        ----------
        index : int
          Index into the document's `bufferViews`

        Returns
        -------
        view : (n,) uint8
          Slice of `binary`, no copy is made
        """
        view = self.document.buffer_views[index]
        if view.buffer != 0:
            raise ValueError(f"buffer view {index} is not in the GLB buffer")
        if self.binary is None:
            raise ValueError("container has no BIN chunk")
        start = view.byte_offset or 0
        end = start + view.byte_length
        if end > len(self.binary):
            raise ValueError(
                f"buffer view {index} ends at {end}, past {len(self.binary)} bytes")
        return self.binary[start:end]


__all__ = ["GLB", "MAGIC", "CHUNK_JSON", "CHUNK_BIN"]
