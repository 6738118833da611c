from glb_reader.gltf.exceptions.accessor_exception import AccessorException


class BufferViewNotFoundException(AccessorException):
    """Accessor references a bufferView that does not exist."""
