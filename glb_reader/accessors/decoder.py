import logging

import numpy as np

from glb_reader.accessors.component_type import ComponentType
from glb_reader.accessors.data_type import DataType
from glb_reader.gltf.exceptions import (
    AccessorNotFoundException,
    AccessorOutOfBoundsException,
    BufferViewNotFoundException,
    InvalidMetadataException,
    UnsupportedAccessorTypeException,
    UnsupportedComponentTypeException,
)

logger = logging.getLogger(__name__)


def decode_accessor(
    metadata: dict, binary_buffer: bytes, accessor_index: int, *, lenient: bool = False
) -> list:
    """
    Decodes the elements of an accessor, in accessor order.

    SCALAR accessors give bare numbers, every other type gives lists of
    `DataType.num_elements()` numbers.
    """

    array = decode_accessor_array(
        metadata, binary_buffer, accessor_index, lenient=lenient
    )
    return array.tolist()


def decode_accessor_array(
    metadata: dict,
    binary_buffer: bytes,
    accessor_index: int,
    *,
    lenient: bool = False,
    normalize: bool = False,
) -> np.ndarray:
    """
    Decodes an accessor into an array of shape `(count,)` for SCALAR
    accessors and `(count, components)` otherwise.

    With `lenient`, an unknown componentType decodes as zeros instead of
    raising. With `normalize`, integer components of accessors flagged
    `normalized` are mapped to floats.
    """

    accessor = _get_accessor(metadata, accessor_index)
    count = _get_required(accessor, "count", f"Accessor {accessor_index}")

    buffer_view_index = accessor.get("bufferView")
    buffer_view = _get_buffer_view(metadata, accessor_index, buffer_view_index)
    view_bytes = _get_view_bytes(
        binary_buffer, buffer_view, accessor_index, buffer_view_index
    )

    data_type = _get_data_type(accessor, accessor_index)
    component_nb = data_type.num_elements()

    component_type = _get_component_type(accessor, accessor_index, lenient)
    # Unknown component types are bounds-checked as 1 byte wide.
    bytes_per_elem = component_type.get_size() if component_type is not None else 1
    default_stride = bytes_per_elem * component_nb

    accessor_offset = _get_optional(
        accessor, "byteOffset", f"Accessor {accessor_index}", 0
    )
    byte_stride = _get_optional(
        buffer_view, "byteStride", f"BufferView {buffer_view_index}", None
    )
    if byte_stride is not None and byte_stride < default_stride:
        raise InvalidMetadataException(
            f"BufferView {buffer_view_index} has byteStride {byte_stride}, "
            f"smaller than the {default_stride} byte elements of accessor "
            f"{accessor_index}"
        )
    stride = default_stride if byte_stride is None else byte_stride

    if count > 0:
        # The data looks like
        #   XXXppXXXppXXXppXXX
        # where X are the components and p are padding or interleaved
        # attributes. One XXXpp group is one stride's worth of data.
        last_byte = accessor_offset + (count - 1) * stride + default_stride
        if last_byte > len(view_bytes):
            raise AccessorOutOfBoundsException(
                f"Accessor {accessor_index} reads bytes up to {last_byte} "
                f"(byteOffset={accessor_offset}, stride={stride}, count={count}) "
                f"but bufferView {buffer_view_index} is {len(view_bytes)} bytes long",
                accessor_index,
                buffer_view_index,
            )

    if component_type is None:
        logger.warning(
            f"Accessor {accessor_index} has unsupported componentType "
            f"{accessor.get('componentType')!r}, decoding {count} elements as zeros"
        )
        return _shape(np.zeros((count, component_nb), dtype=np.uint8), data_type)

    if count == 0:
        array = np.empty((0, component_nb), dtype=component_type.to_numpy_dtype())
    else:
        array = np.ndarray(
            shape=(count, component_nb),
            dtype=component_type.to_numpy_dtype(),
            buffer=view_bytes,
            offset=accessor_offset,
            strides=(stride, bytes_per_elem),
        )
        # Detach from the binary buffer and convert to native byte order.
        array = array.astype(array.dtype.newbyteorder("="))

    if normalize and accessor.get("normalized"):
        array = _normalize(array, component_type)

    logger.debug(
        f"Decoded accessor {accessor_index}: {data_type} x {count}, "
        f"{component_type.name}, stride {stride}"
    )

    return _shape(array, data_type)


def _get_accessor(metadata: dict, accessor_index: int) -> dict:
    accessors: list[dict] = metadata.get("accessors", [])

    if not 0 <= accessor_index < len(accessors):
        raise AccessorNotFoundException(
            f"Accessor index {accessor_index} out of range, "
            f"file has {len(accessors)} accessors",
            accessor_index,
        )

    return accessors[accessor_index]


def _get_buffer_view(
    metadata: dict, accessor_index: int, buffer_view_index: int | None
) -> dict:
    buffer_views: list[dict] = metadata.get("bufferViews", [])

    if not isinstance(buffer_view_index, int) or isinstance(buffer_view_index, bool):
        raise BufferViewNotFoundException(
            f"Accessor {accessor_index} has no bufferView index, "
            f"got {buffer_view_index!r}",
            accessor_index,
        )

    if not 0 <= buffer_view_index < len(buffer_views):
        raise BufferViewNotFoundException(
            f"Accessor {accessor_index} references bufferView {buffer_view_index}, "
            f"file has {len(buffer_views)} bufferViews",
            accessor_index,
            buffer_view_index,
        )

    return buffer_views[buffer_view_index]


def _get_view_bytes(
    binary_buffer: bytes,
    buffer_view: dict,
    accessor_index: int,
    buffer_view_index: int,
) -> memoryview:
    view_offset = _get_optional(
        buffer_view, "byteOffset", f"BufferView {buffer_view_index}", 0
    )
    view_length = _get_required(
        buffer_view, "byteLength", f"BufferView {buffer_view_index}"
    )

    if view_offset + view_length > len(binary_buffer):
        raise AccessorOutOfBoundsException(
            f"BufferView {buffer_view_index} spans bytes {view_offset} to "
            f"{view_offset + view_length} but the binary buffer is "
            f"{len(binary_buffer)} bytes long",
            accessor_index,
            buffer_view_index,
        )

    return memoryview(binary_buffer)[view_offset : view_offset + view_length]


def _get_data_type(accessor: dict, accessor_index: int) -> DataType:
    accessor_type = accessor.get("type")

    try:
        return DataType(accessor_type)
    except ValueError:
        raise UnsupportedAccessorTypeException(
            f"Accessor {accessor_index} has type {accessor_type!r}, expected one of "
            f"{', '.join(data_type.value for data_type in DataType)}",
            accessor_index,
        ) from None


def _get_component_type(
    accessor: dict, accessor_index: int, lenient: bool
) -> ComponentType | None:
    component_type = accessor.get("componentType")

    try:
        return ComponentType(component_type)
    except ValueError:
        if lenient:
            return None

        raise UnsupportedComponentTypeException(
            f"Accessor {accessor_index} has componentType {component_type!r}, "
            f"expected one of {', '.join(str(int(value)) for value in ComponentType)}",
            accessor_index,
            accessor.get("bufferView"),
        ) from None


def _get_required(entry: dict, key: str, owner: str) -> int:
    value = entry.get(key)
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise InvalidMetadataException(
            f"{owner} must have a non-negative integer {key!r}, got {value!r}"
        )

    return value


def _get_optional(
    entry: dict, key: str, owner: str, default: int | None
) -> int | None:
    if key not in entry:
        return default

    return _get_required(entry, key, owner)


def _normalize(array: np.ndarray, component_type: ComponentType) -> np.ndarray:
    divisor = component_type.normalization_divisor()
    if divisor is None:
        return array

    array = array / divisor
    if component_type.is_signed():
        array = np.maximum(-1.0, array)

    return array.astype(np.float32, copy=False)


def _shape(array: np.ndarray, data_type: DataType) -> np.ndarray:
    if data_type is DataType.Scalar:
        return array.reshape(len(array))

    return array
