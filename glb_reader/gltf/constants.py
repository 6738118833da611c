GLTF_HEADER_SIZE = 12
CHUNK_HEADER_SIZE = 8

GLTF_MAGIC = b"glTF"
GLTF_VERSION = 2

JSON_CHUNK_TYPE = b"JSON"
BIN_CHUNK_TYPE = b"BIN\0"
