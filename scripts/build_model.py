#!/usr/bin/env python3
"""
Generate gltfgen/model.py from the bundled glTF 2.0 schema.

This script compiles the schema under src/gltfgen/schema and writes
the generated dataclasses and enums to src/gltfgen/model.py, which is
packaged with gltfgen. Run it after any change to the schema or the
emitter; the test suite fails while the two are out of date.

Usage:
    python scripts/build_model.py
"""

import logging
from pathlib import Path

from gltfgen.compiler import compile_schema

# Paths
SCRIPT_DIR = Path(__file__).parent
REPO_ROOT = SCRIPT_DIR.parent
SCHEMA_DIR = REPO_ROOT / "src" / "gltfgen" / "schema"
ENTRY = "glTF.schema.json"
OUTPUT_PATH = REPO_ROOT / "src" / "gltfgen" / "model.py"


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    compilation = compile_schema(SCHEMA_DIR, ENTRY)
    emitter = compilation.emitter()
    source = emitter.emit()

    with open(OUTPUT_PATH, "w", encoding="utf-8", newline="\n") as f:
        f.write(source)

    registry = compilation.registry
    print(
        f"Wrote {len(registry.structs)} structs and {len(registry.enums)} enums "
        f"to {OUTPUT_PATH} ({len(emitter.diagnostics)} diagnostics)"
    )


if __name__ == "__main__":
    main()
