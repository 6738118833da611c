from .component_type import ComponentType
from .data_type import DataType
from .decoder import decode_accessor, decode_accessor_array
from .primitives import INDICES_SEMANTIC, PrimitiveAccessor, iter_primitive_accessors
from .statistics import (
    AccessorBounds,
    compute_bounds,
    compute_mean,
    uv_coverage,
    uv_distribution,
)

__all__ = [
    "ComponentType",
    "DataType",
    "decode_accessor",
    "decode_accessor_array",
    "PrimitiveAccessor",
    "iter_primitive_accessors",
    "INDICES_SEMANTIC",
    "AccessorBounds",
    "compute_bounds",
    "compute_mean",
    "uv_coverage",
    "uv_distribution",
]
