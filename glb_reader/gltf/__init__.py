from .chunk import Chunk
from .constants import (
    BIN_CHUNK_TYPE,
    CHUNK_HEADER_SIZE,
    GLTF_HEADER_SIZE,
    GLTF_MAGIC,
    GLTF_VERSION,
    JSON_CHUNK_TYPE,
)
from .container import GlbContainer, read_container

__all__ = [
    "GlbContainer",
    "Chunk",
    "read_container",
    "GLTF_HEADER_SIZE",
    "CHUNK_HEADER_SIZE",
    "GLTF_MAGIC",
    "GLTF_VERSION",
    "JSON_CHUNK_TYPE",
    "BIN_CHUNK_TYPE",
]
