"""Small helpers shared across the library."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

import numpy as np


def sort_int_map(m: Mapping[int, float]) -> list[int]:
    """Return the keys of ``m`` ordered by ascending value."""
    return sorted(m, key=m.__getitem__)


def floats_to_matrix(floats: Iterable[float]) -> np.ndarray:
    """Return the values as a 1 x n matrix."""
    values = np.asarray(list(floats), dtype=float)
    return values.reshape(1, values.size)


def vector_to_matrix(vector) -> np.ndarray:
    """Return a copy of a vector as a 1 x n matrix."""
    values = np.array(vector, dtype=float).ravel()
    return values.reshape(1, values.size)