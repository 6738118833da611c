from enum import IntEnum

import numpy as np


class ComponentType(IntEnum):
    """
    Value of an accessor's `componentType` field. The codes are the OpenGL
    type enums, and each one fixes the little-endian width of a component.
    """

    Byte = 5120
    UnsignedByte = 5121
    Short = 5122
    UnsignedShort = 5123
    UnsignedInt = 5125
    Float = 5126

    def to_type_code(self) -> str:
        return {
            ComponentType.Byte: "b",
            ComponentType.UnsignedByte: "B",
            ComponentType.Short: "h",
            ComponentType.UnsignedShort: "H",
            ComponentType.UnsignedInt: "I",
            ComponentType.Float: "f",
        }[self]

    def to_numpy_dtype(self) -> np.dtype:
        return np.dtype(f"<{self.to_type_code()}")

    def get_size(self) -> int:
        return {
            ComponentType.Byte: 1,
            ComponentType.UnsignedByte: 1,
            ComponentType.Short: 2,
            ComponentType.UnsignedShort: 2,
            ComponentType.UnsignedInt: 4,
            ComponentType.Float: 4,
        }[self]

    def normalization_divisor(self) -> float | None:
        """Divisor mapping a normalized integer component to [-1, 1] or [0, 1]."""
        return {
            ComponentType.Byte: 127.0,
            ComponentType.UnsignedByte: 255.0,
            ComponentType.Short: 32767.0,
            ComponentType.UnsignedShort: 65535.0,
        }.get(self)

    def is_signed(self) -> bool:
        return self in (ComponentType.Byte, ComponentType.Short)
