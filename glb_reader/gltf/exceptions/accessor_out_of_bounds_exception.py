from glb_reader.gltf.exceptions.accessor_exception import AccessorException


class AccessorOutOfBoundsException(AccessorException):
    """A read would fall outside the bufferView or the binary buffer."""
