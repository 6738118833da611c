"""
Summary statistics over decoded accessor elements, as used when checking
how a mesh's texture coordinates cover texture space.
"""

from dataclasses import dataclass
from typing import Sequence

import numpy as np

UV_BUCKETS = ("0-0.25", "0.25-0.5", "0.5-0.75", "0.75-1")


@dataclass(frozen=True)
class AccessorBounds:
    min: list[float]
    max: list[float]

    @property
    def size(self) -> list[float]:
        return [high - low for low, high in zip(self.min, self.max)]

    @property
    def center(self) -> list[float]:
        return [(low + high) / 2 for low, high in zip(self.min, self.max)]


def _as_matrix(elements: Sequence | np.ndarray) -> np.ndarray:
    array = np.asarray(elements, dtype=np.float64)
    if array.ndim == 1:
        array = array.reshape(-1, 1)

    if len(array) == 0:
        raise ValueError("Cannot compute statistics of an empty accessor")

    return array


def compute_bounds(elements: Sequence | np.ndarray) -> AccessorBounds:
    """Per-component min and max. Scalars count as one component."""
    array = _as_matrix(elements)
    return AccessorBounds(
        min=array.min(axis=0).tolist(),
        max=array.max(axis=0).tolist(),
    )


def compute_mean(elements: Sequence | np.ndarray) -> list[float]:
    return _as_matrix(elements).mean(axis=0).tolist()


def uv_coverage(bounds: AccessorBounds) -> float:
    """Fraction of the unit texture square spanned by the UV bounds."""
    width, height = bounds.size[:2]
    return width * height


def uv_distribution(uvs: Sequence | np.ndarray) -> dict[str, dict[str, int]]:
    """
    Counts U and V values per quarter of texture space. The last bucket is
    closed at 1, values outside [0, 1] are not counted.
    """

    array = _as_matrix(uvs)
    if array.shape[1] < 2:
        raise ValueError(f"UV elements need 2 components, got {array.shape[1]}")

    distribution = {}
    for axis, values in (("u", array[:, 0]), ("v", array[:, 1])):
        inside = values[(values >= 0.0) & (values <= 1.0)]
        bucket_indices = np.minimum((inside * 4).astype(np.int64), 3)
        counts = np.bincount(bucket_indices, minlength=len(UV_BUCKETS))
        distribution[axis] = dict(zip(UV_BUCKETS, counts.tolist()))

    return distribution
