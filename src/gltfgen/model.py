# Generated by gltfgen from glTF.schema.json. Do not edit.

import enum
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from gltfgen import runtime as _rt


class AccessorComponentType(enum.IntEnum):
    """The datatype of the accessor's components."""

    BYTE = 5120
    UNSIGNED_BYTE = 5121
    SHORT = 5122
    UNSIGNED_SHORT = 5123
    UNSIGNED_INT = 5125
    FLOAT = 5126


class AccessorSparseIndicesComponentType(enum.IntEnum):
    """The indices data type."""

    UNSIGNED_BYTE = 5121
    UNSIGNED_SHORT = 5123
    UNSIGNED_INT = 5125


class AccessorType(str, enum.Enum):
    """
    Specifies if the accessor's elements are scalars, vectors, or matrices.
    """

    SCALAR = 'SCALAR'
    VEC2 = 'VEC2'
    VEC3 = 'VEC3'
    VEC4 = 'VEC4'
    MAT2 = 'MAT2'
    MAT3 = 'MAT3'
    MAT4 = 'MAT4'


class AnimationChannelTargetPath(str, enum.Enum):
    """
    The name of the node's TRS property to animate, or the `"weights"` of
    the Morph Targets it instantiates.
    """

    # The values are the translation along the X, Y, and Z axes.
    TRANSLATION = 'translation'
    # The values are a quaternion in the order x, y, z, w where w is the
    # scalar.
    ROTATION = 'rotation'
    # The values are scaling factors along the X, Y, and Z axes.
    SCALE = 'scale'
    # The values are the weights of the morph targets.
    WEIGHTS = 'weights'


class AnimationSamplerInterpolation(str, enum.Enum):
    """Interpolation algorithm."""

    # The animated values are linearly interpolated between keyframes.
    LINEAR = 'LINEAR'
    # The animated values remain constant to the output of the first keyframe,
    # until the next keyframe.
    STEP = 'STEP'
    # The animation's interpolation is computed using a cubic spline with
    # specified tangents.
    CUBICSPLINE = 'CUBICSPLINE'


class BufferViewTarget(enum.IntEnum):
    """
    The hint representing the intended GPU buffer type to use with this
    buffer view.
    """

    ARRAY_BUFFER = 34962
    ELEMENT_ARRAY_BUFFER = 34963


class CameraType(str, enum.Enum):
    """
    Specifies if the camera uses a perspective or orthographic projection.
    """

    PERSPECTIVE = 'perspective'
    ORTHOGRAPHIC = 'orthographic'


class ImageMimeType(str, enum.Enum):
    """
    The image's media type. This field **MUST** be defined when `bufferView`
    is defined.
    """

    IMAGE_JPEG = 'image/jpeg'
    IMAGE_PNG = 'image/png'


class MaterialAlphaMode(str, enum.Enum):
    """The alpha rendering mode of the material."""

    # The alpha value is ignored, and the rendered output is fully opaque.
    OPAQUE = 'OPAQUE'
    # The rendered output is either fully opaque or fully transparent
    # depending on the alpha value and the specified `alphaCutoff` value.
    MASK = 'MASK'
    # The alpha value is used to composite the source and destination areas.
    BLEND = 'BLEND'


class MeshPrimitiveMode(enum.IntEnum):
    """The topology type of primitives to render."""

    POINTS = 0
    LINES = 1
    LINE_LOOP = 2
    LINE_STRIP = 3
    TRIANGLES = 4
    TRIANGLE_STRIP = 5
    TRIANGLE_FAN = 6


class SamplerMagFilter(enum.IntEnum):
    """Magnification filter."""

    NEAREST = 9728
    LINEAR = 9729


class SamplerMinFilter(enum.IntEnum):
    """Minification filter."""

    NEAREST = 9728
    LINEAR = 9729
    NEAREST_MIPMAP_NEAREST = 9984
    LINEAR_MIPMAP_NEAREST = 9985
    NEAREST_MIPMAP_LINEAR = 9986
    LINEAR_MIPMAP_LINEAR = 9987


class SamplerWrapS(enum.IntEnum):
    """S (U) wrapping mode."""

    CLAMP_TO_EDGE = 33071
    MIRRORED_REPEAT = 33648
    REPEAT = 10497


class SamplerWrapT(enum.IntEnum):
    """T (V) wrapping mode."""

    CLAMP_TO_EDGE = 33071
    MIRRORED_REPEAT = 33648
    REPEAT = 10497


@dataclass(frozen=True)
class GlTFProperty:
    extensions: Any = _rt.optional('extensions', _rt.PASSTHROUGH)
    extras: Any = _rt.optional('extras', _rt.PASSTHROUGH)

    from_json = classmethod(_rt.decode_struct)


@dataclass(frozen=True)
class AccessorSparseIndices:
    """
    An object pointing to a buffer view containing the indices of deviating
    accessor values.
    """

    # The index of the buffer view with sparse indices.
    buffer_view: int = _rt.required('bufferView', _rt.integer(0))
    # The indices data type.
    component_type: AccessorSparseIndicesComponentType = _rt.required('componentType', _rt.enumeration(AccessorSparseIndicesComponentType))
    # The offset relative to the start of the buffer view in bytes.
    byte_offset: Optional[int] = _rt.optional('byteOffset', _rt.integer(0))
    extensions: Any = _rt.optional('extensions', _rt.PASSTHROUGH)
    extras: Any = _rt.optional('extras', _rt.PASSTHROUGH)

    from_json = classmethod(_rt.decode_struct)


@dataclass(frozen=True)
class AccessorSparseValues:
    """
    An object pointing to a buffer view containing the deviating accessor
    values.
    """

    # The index of the bufferView with sparse values.
    buffer_view: int = _rt.required('bufferView', _rt.integer(0))
    # The offset relative to the start of the bufferView in bytes.
    byte_offset: Optional[int] = _rt.optional('byteOffset', _rt.integer(0))
    extensions: Any = _rt.optional('extensions', _rt.PASSTHROUGH)
    extras: Any = _rt.optional('extras', _rt.PASSTHROUGH)

    from_json = classmethod(_rt.decode_struct)


@dataclass(frozen=True)
class AccessorSparse:
    """
    Sparse storage of accessor values that deviate from their initialization
    value.
    """

    # Number of deviating accessor values stored in the sparse array.
    count: int = _rt.required('count', _rt.integer(1))
    # An object pointing to a buffer view containing the indices of deviating
    # accessor values.
    indices: AccessorSparseIndices = _rt.required('indices', _rt.struct(AccessorSparseIndices))
    # An object pointing to a buffer view containing the deviating accessor
    # values.
    values: AccessorSparseValues = _rt.required('values', _rt.struct(AccessorSparseValues))
    extensions: Any = _rt.optional('extensions', _rt.PASSTHROUGH)
    extras: Any = _rt.optional('extras', _rt.PASSTHROUGH)

    from_json = classmethod(_rt.decode_struct)


@dataclass(frozen=True)
class GlTFChildOfRootProperty:
    extensions: Any = _rt.optional('extensions', _rt.PASSTHROUGH)
    extras: Any = _rt.optional('extras', _rt.PASSTHROUGH)
    # The user-defined name of this object.
    name: Optional[str] = _rt.optional('name', _rt.STRING)

    from_json = classmethod(_rt.decode_struct)


@dataclass(frozen=True)
class Accessor:
    """A typed view into a buffer view that contains raw binary data."""

    # The datatype of the accessor's components.
    component_type: AccessorComponentType = _rt.required('componentType', _rt.enumeration(AccessorComponentType))
    # The number of elements referenced by this accessor.
    count: int = _rt.required('count', _rt.integer(1))
    # Specifies if the accessor's elements are scalars, vectors, or matrices.
    type: AccessorType = _rt.required('type', _rt.enumeration(AccessorType))
    # The index of the buffer view.
    buffer_view: Optional[int] = _rt.optional('bufferView', _rt.integer(0))
    # The offset relative to the start of the buffer view in bytes.
    byte_offset: Optional[int] = _rt.optional('byteOffset', _rt.integer(0))
    extensions: Any = _rt.optional('extensions', _rt.PASSTHROUGH)
    extras: Any = _rt.optional('extras', _rt.PASSTHROUGH)
    # Maximum value of each component in this accessor.
    max: Tuple[float, ...] = _rt.optional('max', _rt.array(_rt.NUMBER, 1, 16))
    # Minimum value of each component in this accessor.
    min: Tuple[float, ...] = _rt.optional('min', _rt.array(_rt.NUMBER, 1, 16))
    # The user-defined name of this object.
    name: Optional[str] = _rt.optional('name', _rt.STRING)
    # Specifies whether integer data values are normalized before usage.
    normalized: Optional[bool] = _rt.optional('normalized', _rt.BOOLEAN)
    # Sparse storage of elements that deviate from their initialization value.
    sparse: Optional[AccessorSparse] = _rt.optional('sparse', _rt.struct(AccessorSparse))

    from_json = classmethod(_rt.decode_struct)


@dataclass(frozen=True)
class AnimationChannelTarget:
    """The descriptor of the animated property."""

    # The name of the node's TRS property to animate, or the `"weights"` of
    # the Morph Targets it instantiates.
    path: AnimationChannelTargetPath = _rt.required('path', _rt.enumeration(AnimationChannelTargetPath))
    extensions: Any = _rt.optional('extensions', _rt.PASSTHROUGH)
    extras: Any = _rt.optional('extras', _rt.PASSTHROUGH)
    # The index of the node to animate.
    node: Optional[int] = _rt.optional('node', _rt.integer(0))

    from_json = classmethod(_rt.decode_struct)


@dataclass(frozen=True)
class AnimationChannel:
    """
    An animation channel combines an animation sampler with a target
    property being animated.
    """

    # The index of a sampler in this animation used to compute the value for
    # the target.
    sampler: int = _rt.required('sampler', _rt.integer(0))
    # The descriptor of the animated property.
    target: AnimationChannelTarget = _rt.required('target', _rt.struct(AnimationChannelTarget))
    extensions: Any = _rt.optional('extensions', _rt.PASSTHROUGH)
    extras: Any = _rt.optional('extras', _rt.PASSTHROUGH)

    from_json = classmethod(_rt.decode_struct)


@dataclass(frozen=True)
class AnimationSampler:
    """
    An animation sampler combines timestamps with a sequence of output
    values and defines an interpolation algorithm.
    """

    # The index of an accessor containing keyframe timestamps.
    input: int = _rt.required('input', _rt.integer(0))
    # The index of an accessor, containing keyframe output values.
    output: int = _rt.required('output', _rt.integer(0))
    extensions: Any = _rt.optional('extensions', _rt.PASSTHROUGH)
    extras: Any = _rt.optional('extras', _rt.PASSTHROUGH)
    # Interpolation algorithm.
    interpolation: Optional[AnimationSamplerInterpolation] = _rt.optional('interpolation', _rt.enumeration(AnimationSamplerInterpolation))

    from_json = classmethod(_rt.decode_struct)


@dataclass(frozen=True)
class Animation:
    """A keyframe animation."""

    # An array of animation channels. An animation channel combines an
    # animation sampler with a target property being animated.
    channels: Tuple[AnimationChannel, ...] = _rt.required('channels', _rt.array(_rt.struct(AnimationChannel), 1))
    # An array of animation samplers. An animation sampler combines timestamps
    # with a sequence of output values and defines an interpolation algorithm.
    samplers: Tuple[AnimationSampler, ...] = _rt.required('samplers', _rt.array(_rt.struct(AnimationSampler), 1))
    extensions: Any = _rt.optional('extensions', _rt.PASSTHROUGH)
    extras: Any = _rt.optional('extras', _rt.PASSTHROUGH)
    # The user-defined name of this object.
    name: Optional[str] = _rt.optional('name', _rt.STRING)

    from_json = classmethod(_rt.decode_struct)


@dataclass(frozen=True)
class Asset:
    """Metadata about the glTF asset."""

    # The glTF version in the form of `<major>.<minor>` that this asset
    # targets.
    version: str = _rt.required('version', _rt.STRING)
    # A copyright message suitable for display to credit the content creator.
    copyright: Optional[str] = _rt.optional('copyright', _rt.STRING)
    extensions: Any = _rt.optional('extensions', _rt.PASSTHROUGH)
    extras: Any = _rt.optional('extras', _rt.PASSTHROUGH)
    # Tool that generated this glTF model.  Useful for debugging.
    generator: Optional[str] = _rt.optional('generator', _rt.STRING)
    # The minimum glTF version in the form of `<major>.<minor>` that this
    # asset targets. This property **MUST NOT** be greater than the asset
    # version.
    min_version: Optional[str] = _rt.optional('minVersion', _rt.STRING)

    from_json = classmethod(_rt.decode_struct)


@dataclass(frozen=True)
class BufferView:
    """A view into a buffer generally representing a subset of the buffer."""

    # The index of the buffer.
    buffer: int = _rt.required('buffer', _rt.integer(0))
    # The length of the bufferView in bytes.
    byte_length: int = _rt.required('byteLength', _rt.integer(1))
    # The offset into the buffer in bytes.
    byte_offset: Optional[int] = _rt.optional('byteOffset', _rt.integer(0))
    # The stride, in bytes.
    byte_stride: Optional[int] = _rt.optional('byteStride', _rt.integer(4, 252))
    extensions: Any = _rt.optional('extensions', _rt.PASSTHROUGH)
    extras: Any = _rt.optional('extras', _rt.PASSTHROUGH)
    # The user-defined name of this object.
    name: Optional[str] = _rt.optional('name', _rt.STRING)
    # The hint representing the intended GPU buffer type to use with this
    # buffer view.
    target: Optional[BufferViewTarget] = _rt.optional('target', _rt.enumeration(BufferViewTarget))

    from_json = classmethod(_rt.decode_struct)


@dataclass(frozen=True)
class Buffer:
    """A buffer points to binary geometry, animation, or skins."""

    # The length of the buffer in bytes.
    byte_length: int = _rt.required('byteLength', _rt.integer(1))
    extensions: Any = _rt.optional('extensions', _rt.PASSTHROUGH)
    extras: Any = _rt.optional('extras', _rt.PASSTHROUGH)
    # The user-defined name of this object.
    name: Optional[str] = _rt.optional('name', _rt.STRING)
    # The URI (or IRI) of the buffer.
    uri: Optional[str] = _rt.optional('uri', _rt.STRING)

    from_json = classmethod(_rt.decode_struct)


@dataclass(frozen=True)
class CameraOrthographic:
    """
    An orthographic camera containing properties to create an orthographic
    projection matrix.
    """

    # The floating-point horizontal magnification of the view.
    xmag: float = _rt.required('xmag', _rt.NUMBER)
    # The floating-point vertical magnification of the view.
    ymag: float = _rt.required('ymag', _rt.NUMBER)
    # The floating-point distance to the far clipping plane.
    zfar: float = _rt.required('zfar', _rt.NUMBER)
    # The floating-point distance to the near clipping plane.
    znear: float = _rt.required('znear', _rt.NUMBER)
    extensions: Any = _rt.optional('extensions', _rt.PASSTHROUGH)
    extras: Any = _rt.optional('extras', _rt.PASSTHROUGH)

    from_json = classmethod(_rt.decode_struct)


@dataclass(frozen=True)
class CameraPerspective:
    """
    A perspective camera containing properties to create a perspective
    projection matrix.
    """

    # The floating-point vertical field of view in radians.
    yfov: float = _rt.required('yfov', _rt.NUMBER)
    # The floating-point distance to the near clipping plane.
    znear: float = _rt.required('znear', _rt.NUMBER)
    # The floating-point aspect ratio of the field of view.
    aspect_ratio: Optional[float] = _rt.optional('aspectRatio', _rt.NUMBER)
    extensions: Any = _rt.optional('extensions', _rt.PASSTHROUGH)
    extras: Any = _rt.optional('extras', _rt.PASSTHROUGH)
    # The floating-point distance to the far clipping plane.
    zfar: Optional[float] = _rt.optional('zfar', _rt.NUMBER)

    from_json = classmethod(_rt.decode_struct)


@dataclass(frozen=True)
class Camera:
    """
    A camera's projection.  A node **MAY** reference a camera to apply a
    transform to place the camera in the scene.
    """

    # Specifies if the camera uses a perspective or orthographic projection.
    type: CameraType = _rt.required('type', _rt.enumeration(CameraType))
    extensions: Any = _rt.optional('extensions', _rt.PASSTHROUGH)
    extras: Any = _rt.optional('extras', _rt.PASSTHROUGH)
    # The user-defined name of this object.
    name: Optional[str] = _rt.optional('name', _rt.STRING)
    # An orthographic camera containing properties to create an orthographic
    # projection matrix.
    orthographic: Optional[CameraOrthographic] = _rt.optional('orthographic', _rt.struct(CameraOrthographic))
    # A perspective camera containing properties to create a perspective
    # projection matrix.
    perspective: Optional[CameraPerspective] = _rt.optional('perspective', _rt.struct(CameraPerspective))

    from_json = classmethod(_rt.decode_struct)


@dataclass(frozen=True)
class Image:
    """
    Image data used to create a texture. Image **MAY** be referenced by an
    URI (or IRI) or a buffer view index.
    """

    # The index of the bufferView that contains the image. This field **MUST
    # NOT** be defined when `uri` is defined.
    buffer_view: Optional[int] = _rt.optional('bufferView', _rt.integer(0))
    extensions: Any = _rt.optional('extensions', _rt.PASSTHROUGH)
    extras: Any = _rt.optional('extras', _rt.PASSTHROUGH)
    # The image's media type. This field **MUST** be defined when `bufferView`
    # is defined.
    mime_type: Optional[ImageMimeType] = _rt.optional('mimeType', _rt.enumeration(ImageMimeType))
    # The user-defined name of this object.
    name: Optional[str] = _rt.optional('name', _rt.STRING)
    # The URI (or IRI) of the image.
    uri: Optional[str] = _rt.optional('uri', _rt.STRING)

    from_json = classmethod(_rt.decode_struct)


@dataclass(frozen=True)
class TextureInfo:
    """Reference to a texture."""

    # The index of the texture.
    index: int = _rt.required('index', _rt.integer(0))
    extensions: Any = _rt.optional('extensions', _rt.PASSTHROUGH)
    extras: Any = _rt.optional('extras', _rt.PASSTHROUGH)
    # The set index of texture's TEXCOORD attribute used for texture
    # coordinate mapping.
    tex_coord: Optional[int] = _rt.optional('texCoord', _rt.integer(0))

    from_json = classmethod(_rt.decode_struct)


@dataclass(frozen=True)
class MaterialNormalTextureInfo:
    # The index of the texture.
    index: int = _rt.required('index', _rt.integer(0))
    extensions: Any = _rt.optional('extensions', _rt.PASSTHROUGH)
    extras: Any = _rt.optional('extras', _rt.PASSTHROUGH)
    # The scalar parameter applied to each normal vector of the normal
    # texture.
    scale: Optional[float] = _rt.optional('scale', _rt.NUMBER)
    # The set index of texture's TEXCOORD attribute used for texture
    # coordinate mapping.
    tex_coord: Optional[int] = _rt.optional('texCoord', _rt.integer(0))

    from_json = classmethod(_rt.decode_struct)


@dataclass(frozen=True)
class MaterialOcclusionTextureInfo:
    # The index of the texture.
    index: int = _rt.required('index', _rt.integer(0))
    extensions: Any = _rt.optional('extensions', _rt.PASSTHROUGH)
    extras: Any = _rt.optional('extras', _rt.PASSTHROUGH)
    # A scalar multiplier controlling the amount of occlusion applied.
    strength: Optional[float] = _rt.optional('strength', _rt.NUMBER)
    # The set index of texture's TEXCOORD attribute used for texture
    # coordinate mapping.
    tex_coord: Optional[int] = _rt.optional('texCoord', _rt.integer(0))

    from_json = classmethod(_rt.decode_struct)


@dataclass(frozen=True)
class MaterialPBRMetallicRoughness:
    """
    A set of parameter values that are used to define the metallic-roughness
    material model from Physically-Based Rendering (PBR) methodology.
    """

    # The factors for the base color of the material.
    base_color_factor: Optional[Tuple[float, float, float, float]] = _rt.optional('baseColorFactor', _rt.array(_rt.NUMBER, 4, 4))
    # The base color texture.
    base_color_texture: Optional[TextureInfo] = _rt.optional('baseColorTexture', _rt.struct(TextureInfo))
    extensions: Any = _rt.optional('extensions', _rt.PASSTHROUGH)
    extras: Any = _rt.optional('extras', _rt.PASSTHROUGH)
    # The factor for the metalness of the material.
    metallic_factor: Optional[float] = _rt.optional('metallicFactor', _rt.NUMBER)
    # The metallic-roughness texture.
    metallic_roughness_texture: Optional[TextureInfo] = _rt.optional('metallicRoughnessTexture', _rt.struct(TextureInfo))
    # The factor for the roughness of the material.
    roughness_factor: Optional[float] = _rt.optional('roughnessFactor', _rt.NUMBER)

    from_json = classmethod(_rt.decode_struct)


@dataclass(frozen=True)
class Material:
    """The material appearance of a primitive."""

    # The alpha cutoff value of the material.
    alpha_cutoff: Optional[float] = _rt.optional('alphaCutoff', _rt.NUMBER)
    # The alpha rendering mode of the material.
    alpha_mode: Optional[MaterialAlphaMode] = _rt.optional('alphaMode', _rt.enumeration(MaterialAlphaMode))
    # Specifies whether the material is double sided.
    double_sided: Optional[bool] = _rt.optional('doubleSided', _rt.BOOLEAN)
    # The factors for the emissive color of the material.
    emissive_factor: Optional[Tuple[float, float, float]] = _rt.optional('emissiveFactor', _rt.array(_rt.NUMBER, 3, 3))
    # The emissive texture.
    emissive_texture: Optional[TextureInfo] = _rt.optional('emissiveTexture', _rt.struct(TextureInfo))
    extensions: Any = _rt.optional('extensions', _rt.PASSTHROUGH)
    extras: Any = _rt.optional('extras', _rt.PASSTHROUGH)
    # The user-defined name of this object.
    name: Optional[str] = _rt.optional('name', _rt.STRING)
    # The tangent space normal texture.
    normal_texture: Optional[MaterialNormalTextureInfo] = _rt.optional('normalTexture', _rt.struct(MaterialNormalTextureInfo))
    # The occlusion texture.
    occlusion_texture: Optional[MaterialOcclusionTextureInfo] = _rt.optional('occlusionTexture', _rt.struct(MaterialOcclusionTextureInfo))
    # A set of parameter values that are used to define the metallic-roughness
    # material model from Physically Based Rendering (PBR) methodology.
    pbr_metallic_roughness: Optional[MaterialPBRMetallicRoughness] = _rt.optional('pbrMetallicRoughness', _rt.struct(MaterialPBRMetallicRoughness))

    from_json = classmethod(_rt.decode_struct)


@dataclass(frozen=True)
class MeshPrimitive:
    """Geometry to be rendered with the given material."""

    # A plain JSON object, where each key corresponds to a mesh attribute
    # semantic and each value is the index of the accessor containing
    # attribute's data.
    attributes: Dict[str, int] = _rt.required('attributes', _rt.mapping(_rt.integer(0)))
    extensions: Any = _rt.optional('extensions', _rt.PASSTHROUGH)
    extras: Any = _rt.optional('extras', _rt.PASSTHROUGH)
    # The index of the accessor that contains the vertex indices.
    indices: Optional[int] = _rt.optional('indices', _rt.integer(0))
    # The index of the material to apply to this primitive when rendering.
    material: Optional[int] = _rt.optional('material', _rt.integer(0))
    # The topology type of primitives to render.
    mode: Optional[MeshPrimitiveMode] = _rt.optional('mode', _rt.enumeration(MeshPrimitiveMode))
    # An array of morph targets.
    targets: Tuple[Dict[str, int], ...] = _rt.optional('targets', _rt.array(_rt.mapping(_rt.integer(0)), 1))

    from_json = classmethod(_rt.decode_struct)


@dataclass(frozen=True)
class Mesh:
    """
    A set of primitives to be rendered.  Its global transform is defined by
    a node that references it.
    """

    # An array of primitives, each defining geometry to be rendered.
    primitives: Tuple[MeshPrimitive, ...] = _rt.required('primitives', _rt.array(_rt.struct(MeshPrimitive), 1))
    extensions: Any = _rt.optional('extensions', _rt.PASSTHROUGH)
    extras: Any = _rt.optional('extras', _rt.PASSTHROUGH)
    # The user-defined name of this object.
    name: Optional[str] = _rt.optional('name', _rt.STRING)
    # Array of weights to be applied to the morph targets.
    weights: Tuple[float, ...] = _rt.optional('weights', _rt.array(_rt.NUMBER, 1))

    from_json = classmethod(_rt.decode_struct)


@dataclass(frozen=True)
class Node:
    """A node in the node hierarchy."""

    # The index of the camera referenced by this node.
    camera: Optional[int] = _rt.optional('camera', _rt.integer(0))
    # The indices of this node's children.
    children: Tuple[int, ...] = _rt.optional('children', _rt.array(_rt.integer(0), 1))
    extensions: Any = _rt.optional('extensions', _rt.PASSTHROUGH)
    extras: Any = _rt.optional('extras', _rt.PASSTHROUGH)
    # A floating-point 4x4 transformation matrix stored in column-major order.
    matrix: Optional[Tuple[float, float, float, float, float, float, float, float, float, float, float, float, float, float, float, float]] = _rt.optional('matrix', _rt.array(_rt.NUMBER, 16, 16))
    # The index of the mesh in this node.
    mesh: Optional[int] = _rt.optional('mesh', _rt.integer(0))
    # The user-defined name of this object.
    name: Optional[str] = _rt.optional('name', _rt.STRING)
    # The node's unit quaternion rotation in the order (x, y, z, w), where w
    # is the scalar.
    rotation: Optional[Tuple[float, float, float, float]] = _rt.optional('rotation', _rt.array(_rt.NUMBER, 4, 4))
    # The node's non-uniform scale, given as the scaling factors along the x,
    # y, and z axes.
    scale: Optional[Tuple[float, float, float]] = _rt.optional('scale', _rt.array(_rt.NUMBER, 3, 3))
    # The index of the skin referenced by this node.
    skin: Optional[int] = _rt.optional('skin', _rt.integer(0))
    # The node's translation along the x, y, and z axes.
    translation: Optional[Tuple[float, float, float]] = _rt.optional('translation', _rt.array(_rt.NUMBER, 3, 3))
    # The weights of the instantiated morph target.
    weights: Tuple[float, ...] = _rt.optional('weights', _rt.array(_rt.NUMBER, 1))

    from_json = classmethod(_rt.decode_struct)


@dataclass(frozen=True)
class Sampler:
    """Texture sampler properties for filtering and wrapping modes."""

    extensions: Any = _rt.optional('extensions', _rt.PASSTHROUGH)
    extras: Any = _rt.optional('extras', _rt.PASSTHROUGH)
    # Magnification filter.
    mag_filter: Optional[SamplerMagFilter] = _rt.optional('magFilter', _rt.enumeration(SamplerMagFilter))
    # Minification filter.
    min_filter: Optional[SamplerMinFilter] = _rt.optional('minFilter', _rt.enumeration(SamplerMinFilter))
    # The user-defined name of this object.
    name: Optional[str] = _rt.optional('name', _rt.STRING)
    # S (U) wrapping mode.
    wrap_s: Optional[SamplerWrapS] = _rt.optional('wrapS', _rt.enumeration(SamplerWrapS))
    # T (V) wrapping mode.
    wrap_t: Optional[SamplerWrapT] = _rt.optional('wrapT', _rt.enumeration(SamplerWrapT))

    from_json = classmethod(_rt.decode_struct)


@dataclass(frozen=True)
class Scene:
    """The root nodes of a scene."""

    extensions: Any = _rt.optional('extensions', _rt.PASSTHROUGH)
    extras: Any = _rt.optional('extras', _rt.PASSTHROUGH)
    # The user-defined name of this object.
    name: Optional[str] = _rt.optional('name', _rt.STRING)
    # The indices of each root node.
    nodes: Tuple[int, ...] = _rt.optional('nodes', _rt.array(_rt.integer(0), 1))

    from_json = classmethod(_rt.decode_struct)


@dataclass(frozen=True)
class Skin:
    """Joints and matrices defining a skin."""

    # Indices of skeleton nodes, used as joints in this skin.
    joints: Tuple[int, ...] = _rt.required('joints', _rt.array(_rt.integer(0), 1))
    extensions: Any = _rt.optional('extensions', _rt.PASSTHROUGH)
    extras: Any = _rt.optional('extras', _rt.PASSTHROUGH)
    # The index of the accessor containing the floating-point 4x4 inverse-bind
    # matrices.
    inverse_bind_matrices: Optional[int] = _rt.optional('inverseBindMatrices', _rt.integer(0))
    # The user-defined name of this object.
    name: Optional[str] = _rt.optional('name', _rt.STRING)
    # The index of the node used as a skeleton root.
    skeleton: Optional[int] = _rt.optional('skeleton', _rt.integer(0))

    from_json = classmethod(_rt.decode_struct)


@dataclass(frozen=True)
class Texture:
    """A texture and its sampler."""

    extensions: Any = _rt.optional('extensions', _rt.PASSTHROUGH)
    extras: Any = _rt.optional('extras', _rt.PASSTHROUGH)
    # The user-defined name of this object.
    name: Optional[str] = _rt.optional('name', _rt.STRING)
    # The index of the sampler used by this texture. When undefined, a sampler
    # with repeat wrapping and auto filtering **SHOULD** be used.
    sampler: Optional[int] = _rt.optional('sampler', _rt.integer(0))
    # The index of the image used by this texture. When undefined, an
    # extension or other mechanism **SHOULD** supply an alternate texture
    # source, otherwise behavior is undefined.
    source: Optional[int] = _rt.optional('source', _rt.integer(0))

    from_json = classmethod(_rt.decode_struct)


@dataclass(frozen=True)
class GlTF:
    """The root object for a glTF asset."""

    # Metadata about the glTF asset.
    asset: Asset = _rt.required('asset', _rt.struct(Asset))
    # An array of accessors.
    accessors: Tuple[Accessor, ...] = _rt.optional('accessors', _rt.array(_rt.struct(Accessor), 1))
    # An array of keyframe animations.
    animations: Tuple[Animation, ...] = _rt.optional('animations', _rt.array(_rt.struct(Animation), 1))
    # An array of bufferViews.
    buffer_views: Tuple[BufferView, ...] = _rt.optional('bufferViews', _rt.array(_rt.struct(BufferView), 1))
    # An array of buffers.
    buffers: Tuple[Buffer, ...] = _rt.optional('buffers', _rt.array(_rt.struct(Buffer), 1))
    # An array of cameras.
    cameras: Tuple[Camera, ...] = _rt.optional('cameras', _rt.array(_rt.struct(Camera), 1))
    extensions: Any = _rt.optional('extensions', _rt.PASSTHROUGH)
    # Names of glTF extensions required to properly load this asset.
    extensions_required: Tuple[str, ...] = _rt.optional('extensionsRequired', _rt.array(_rt.STRING, 1))
    # Names of glTF extensions used in this asset.
    extensions_used: Tuple[str, ...] = _rt.optional('extensionsUsed', _rt.array(_rt.STRING, 1))
    extras: Any = _rt.optional('extras', _rt.PASSTHROUGH)
    # An array of images.
    images: Tuple[Image, ...] = _rt.optional('images', _rt.array(_rt.struct(Image), 1))
    # An array of materials.
    materials: Tuple[Material, ...] = _rt.optional('materials', _rt.array(_rt.struct(Material), 1))
    # An array of meshes.
    meshes: Tuple[Mesh, ...] = _rt.optional('meshes', _rt.array(_rt.struct(Mesh), 1))
    # An array of nodes.
    nodes: Tuple[Node, ...] = _rt.optional('nodes', _rt.array(_rt.struct(Node), 1))
    # An array of samplers.
    samplers: Tuple[Sampler, ...] = _rt.optional('samplers', _rt.array(_rt.struct(Sampler), 1))
    # The index of the default scene.
    scene: Optional[int] = _rt.optional('scene', _rt.integer(0))
    # An array of scenes.
    scenes: Tuple[Scene, ...] = _rt.optional('scenes', _rt.array(_rt.struct(Scene), 1))
    # An array of skins.
    skins: Tuple[Skin, ...] = _rt.optional('skins', _rt.array(_rt.struct(Skin), 1))
    # An array of textures.
    textures: Tuple[Texture, ...] = _rt.optional('textures', _rt.array(_rt.struct(Texture), 1))

    from_json = classmethod(_rt.decode_struct)
