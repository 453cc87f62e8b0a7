"""
Test the bundled glTF schema against jsonschema and the compiled model.
"""

import copy
import json
import logging
import unittest

from gltfgen import document

try:
    import jsonschema
    from referencing import Registry, Resource
    from referencing.jsonschema import DRAFT202012
    HAS_JSONSCHEMA = True
except ImportError:
    HAS_JSONSCHEMA = False


# Path to schema files
SCHEMA_DIR = document.SCHEMA_DIR

# Every feature of the model used at least once
SAMPLE = {
    "asset": {"version": "2.0", "copyright": "public domain"},
    "scene": 0,
    "scenes": [{"nodes": [0], "name": "main"}],
    "nodes": [
        {"children": [1], "rotation": [0.0, 0.0, 0.0, 1.0], "scale": [2.0, 2.0, 2.0]},
        {"mesh": 0, "camera": 0, "skin": 0, "weights": [0.5]},
    ],
    "cameras": [
        {"type": "perspective", "perspective": {"yfov": 0.8, "znear": 0.01}},
    ],
    "skins": [{"joints": [0], "inverseBindMatrices": 2}],
    "animations": [
        {
            "channels": [{"sampler": 0, "target": {"node": 0, "path": "rotation"}}],
            "samplers": [{"input": 3, "output": 4, "interpolation": "STEP"}],
        }
    ],
    "meshes": [
        {
            "primitives": [
                {
                    "attributes": {"POSITION": 1, "NORMAL": 2},
                    "indices": 0,
                    "mode": 4,
                    "material": 0,
                    "targets": [{"POSITION": 5}],
                }
            ],
            "weights": [0.0],
        }
    ],
    "accessors": [
        {"bufferView": 0, "componentType": 5123, "count": 3, "type": "SCALAR"},
        {
            "bufferView": 1,
            "componentType": 5126,
            "count": 3,
            "type": "VEC3",
            "max": [1.0, 1.0, 0.0],
            "min": [0.0, 0.0, 0.0],
        },
        {
            "componentType": 5126,
            "count": 3,
            "type": "VEC3",
            "sparse": {
                "count": 1,
                "indices": {"bufferView": 0, "componentType": 5123},
                "values": {"bufferView": 1},
            },
        },
        {"componentType": 5126, "count": 2, "type": "SCALAR"},
        {"componentType": 5126, "count": 2, "type": "VEC4"},
        {"componentType": 5126, "count": 3, "type": "VEC3"},
    ],
    "bufferViews": [
        {"buffer": 0, "byteLength": 6, "target": 34963},
        {"buffer": 0, "byteOffset": 8, "byteLength": 36, "byteStride": 12},
    ],
    "buffers": [{"byteLength": 44, "uri": "data.bin"}],
    "materials": [
        {
            "name": "red",
            "pbrMetallicRoughness": {
                "baseColorFactor": [1.0, 0.0, 0.0, 1.0],
                "baseColorTexture": {"index": 0, "texCoord": 1},
                "metallicFactor": 0.0,
            },
            "occlusionTexture": {"index": 0, "strength": 0.5},
            "emissiveFactor": [0.0, 0.0, 0.0],
            "alphaMode": "MASK",
            "alphaCutoff": 0.25,
            "doubleSided": True,
        }
    ],
    "textures": [{"sampler": 0, "source": 0}],
    "images": [{"bufferView": 1, "mimeType": "image/png"}],
    "samplers": [{"magFilter": 9728, "minFilter": 9987, "wrapT": 33648}],
}


def load_schemas():
    """Parse every file in the bundled glTF schema directory, keyed by file name."""
    schemas = {}
    for schema_file in SCHEMA_DIR.glob("*.json"):
        with open(schema_file) as f:
            schemas[schema_file.name] = json.load(f)
    return schemas


def create_registry(schemas):
    """Register each bundled schema under its file name so relative $refs resolve."""
    resources = []
    for name, schema in schemas.items():
        resource = Resource.from_contents(schema, default_specification=DRAFT202012)
        resources.append((name, resource))
    return Registry().with_resources(resources)


@unittest.skipIf(not HAS_JSONSCHEMA, "jsonschema not installed")
class TestBundledSchema(unittest.TestCase):
    """Test glTF documents against the bundled JSON schema."""

    @classmethod
    def setUpClass(cls):
        """Parse the bundle once; the root document is the glTF entry schema."""
        cls.schemas = load_schemas()
        cls.registry = create_registry(cls.schemas)
        cls.root_schema = cls.schemas[document.ENTRY]

    def get_validator(self, schema):
        """A 2020-12 validator for one glTF schema that can follow refs into the bundle."""
        return jsonschema.Draft202012Validator(
            schema,
            registry=self.registry,
        )

    def test_schemas_are_valid(self):
        """Every bundled file is itself a valid 2020-12 schema."""
        self.assertIn("glTF.schema.json", self.schemas)
        for name, schema in self.schemas.items():
            with self.subTest(name=name):
                jsonschema.Draft202012Validator.check_schema(schema)

    def test_sample_validates(self):
        """Test that the full sample document validates."""
        self.get_validator(self.root_schema).validate(SAMPLE)

    def test_sample_decodes(self):
        """A document the schema accepts decodes without dropping anything."""
        with self.assertNoLogs("gltfgen.runtime", level=logging.WARNING):
            gltf = document.from_json(json.dumps(SAMPLE))

        self.assertEqual(len(gltf.accessors), len(SAMPLE["accessors"]))
        self.assertEqual(gltf.accessors[2].sparse.indices.buffer_view, 0)
        self.assertEqual(gltf.cameras[0].perspective.yfov, 0.8)
        self.assertEqual(gltf.skins[0].inverse_bind_matrices, 2)
        self.assertEqual(gltf.animations[0].samplers[0].interpolation.value, "STEP")
        self.assertEqual(gltf.animations[0].channels[0].target.path.value, "rotation")
        self.assertEqual(gltf.meshes[0].primitives[0].targets, ({"POSITION": 5},))
        self.assertEqual(gltf.materials[0].occlusion_texture.strength, 0.5)
        self.assertEqual(gltf.materials[0].pbr_metallic_roughness.base_color_texture.tex_coord, 1)
        self.assertEqual(gltf.samplers[0].min_filter.name, "LINEAR_MIPMAP_LINEAR")
        self.assertEqual(gltf.images[0].mime_type.value, "image/png")
        self.assertEqual(gltf.nodes[0].scale, (2.0, 2.0, 2.0))

    def test_missing_asset(self):
        """Test that a document without an asset fails validation."""
        invalid = copy.deepcopy(SAMPLE)
        del invalid["asset"]
        validator = self.get_validator(self.root_schema)
        with self.assertRaises(jsonschema.ValidationError):
            validator.validate(invalid)

    def test_invalid_translation_length(self):
        """Test that a vec3 with wrong length fails validation."""
        invalid = copy.deepcopy(SAMPLE)
        invalid["nodes"][0]["translation"] = [0.0, 0.0]
        validator = self.get_validator(self.root_schema)
        with self.assertRaises(jsonschema.ValidationError):
            validator.validate(invalid)

        # the model agrees and drops the malformed value
        gltf = document.from_json(json.dumps(invalid))
        self.assertIsNone(gltf.nodes[0].translation)

    def test_invalid_count(self):
        """Test that an empty accessor fails validation."""
        invalid = copy.deepcopy(SAMPLE)
        invalid["accessors"][0]["count"] = 0
        validator = self.get_validator(self.root_schema)
        with self.assertRaises(jsonschema.ValidationError):
            validator.validate(invalid)

    def test_invalid_byte_stride(self):
        invalid = copy.deepcopy(SAMPLE)
        invalid["bufferViews"][1]["byteStride"] = 2
        validator = self.get_validator(self.root_schema)
        with self.assertRaises(jsonschema.ValidationError):
            validator.validate(invalid)


if __name__ == "__main__":
    unittest.main()
