from glb_reader.gltf.exceptions.accessor_exception import AccessorException


class UnsupportedComponentTypeException(AccessorException):
    pass
