from glb_reader.gltf.exceptions.glb_exception import GlbException


class InvalidMetadataException(GlbException):
    """The JSON chunk is not a valid UTF-8 JSON object."""
