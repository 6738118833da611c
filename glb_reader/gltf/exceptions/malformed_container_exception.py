from glb_reader.gltf.exceptions.glb_exception import GlbException


class MalformedContainerException(GlbException):
    """Header or chunk framing is truncated or inconsistent."""
