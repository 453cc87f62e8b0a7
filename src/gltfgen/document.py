"""
document.py
-----------

The glTF 2.0 schema shipped with gltfgen and the model compiled from it.

`gltfgen.model` is generated from `schema/` by
`scripts/build_model.py` and committed; regenerate it after editing
the schema.

>>> from gltfgen import document
>>> gltf = document.from_json('{"asset": {"version": "2.0"}}')
>>> gltf.asset.version
'2.0'
"""

import json
from pathlib import Path
from types import ModuleType
from typing import Any, Optional

from . import model as generated
from . import runtime

# Directory holding the bundled glTF 2.0 schema documents
SCHEMA_DIR = Path(__file__).parent / "schema"
# Root document of the bundled schema
ENTRY = "glTF.schema.json"
# Generated module compiled from ENTRY
MODEL_PATH = Path(__file__).parent / "model.py"


def model() -> ModuleType:
    """
    The generated glTF model.

    Returns
    -------
    module : ModuleType
      `gltfgen.model`, holding one dataclass per glTF
      object type and one enum per constant list
    """
    return generated


def root_type() -> type:
    """The generated class of a whole glTF document."""
    return generated.GlTF


def from_json(text, document_type: Optional[type] = None) -> Any:
    """
    Decode the text of a `.gltf` file.

    Parameters
    ----------
    text : str or bytes
      JSON text of a glTF document
    document_type : type, optional
      Generated class to decode into, the bundled
      model's root class by default

    Returns
    -------
    document : document_type
      The decoded document

    Raises
    ------
    json.JSONDecodeError
      If `text` is not valid JSON
    DecodeError
      If the JSON does not match the document type
    """
    if document_type is None:
        document_type = root_type()
    return runtime.decode(document_type, json.loads(text))


__all__ = ["SCHEMA_DIR", "ENTRY", "MODEL_PATH", "model", "root_type", "from_json"]
