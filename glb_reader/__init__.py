__all__ = [
    "GlbContainer",
    "read_container",
    "decode_accessor",
    "decode_accessor_array",
    "iter_primitive_accessors",
]

from glb_reader.gltf import GlbContainer, read_container
from glb_reader.accessors import (
    decode_accessor,
    decode_accessor_array,
    iter_primitive_accessors,
)
