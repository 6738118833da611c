from enum import StrEnum


class DataType(StrEnum):
    """
    Value of an accessor's `type` field: whether each element is a scalar,
    a vector or a matrix, and so how many components it holds.
    """

    Scalar = "SCALAR"
    Vec2 = "VEC2"
    Vec3 = "VEC3"
    Vec4 = "VEC4"
    Mat2 = "MAT2"
    Mat3 = "MAT3"
    Mat4 = "MAT4"

    def num_elements(self) -> int:
        return {
            DataType.Scalar: 1,
            DataType.Vec2: 2,
            DataType.Vec3: 3,
            DataType.Vec4: 4,
            DataType.Mat2: 4,
            DataType.Mat3: 9,
            DataType.Mat4: 16,
        }[self]
