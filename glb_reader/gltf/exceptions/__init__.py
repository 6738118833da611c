__all__ = [
    "GlbException",
    "MalformedContainerException",
    "InvalidMetadataException",
    "AccessorException",
    "AccessorNotFoundException",
    "BufferViewNotFoundException",
    "UnsupportedComponentTypeException",
    "UnsupportedAccessorTypeException",
    "AccessorOutOfBoundsException",
]

from glb_reader.gltf.exceptions.accessor_exception import AccessorException
from glb_reader.gltf.exceptions.accessor_not_found_exception import (
    AccessorNotFoundException,
)
from glb_reader.gltf.exceptions.accessor_out_of_bounds_exception import (
    AccessorOutOfBoundsException,
)
from glb_reader.gltf.exceptions.buffer_view_not_found_exception import (
    BufferViewNotFoundException,
)
from glb_reader.gltf.exceptions.glb_exception import GlbException
from glb_reader.gltf.exceptions.invalid_metadata_exception import (
    InvalidMetadataException,
)
from glb_reader.gltf.exceptions.malformed_container_exception import (
    MalformedContainerException,
)
from glb_reader.gltf.exceptions.unsupported_accessor_type_exception import (
    UnsupportedAccessorTypeException,
)
from glb_reader.gltf.exceptions.unsupported_component_type_exception import (
    UnsupportedComponentTypeException,
)
