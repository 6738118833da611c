from glb_reader.gltf.exceptions.glb_exception import GlbException


class AccessorException(GlbException):
    def __init__(
        self,
        message: str,
        accessor_index: int | None = None,
        buffer_view_index: int | None = None,
    ):
        super().__init__(message)

        self.accessor_index = accessor_index
        self.buffer_view_index = buffer_view_index
