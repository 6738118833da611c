from glb_reader.gltf.exceptions.accessor_exception import AccessorException


class AccessorNotFoundException(AccessorException):
    """Accessor index is out of range."""
