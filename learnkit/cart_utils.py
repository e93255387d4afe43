"""Helpers shared by the CART decision trees."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def find_unique(data: Iterable[float]) -> list[float]:
    """Return the distinct values of ``data`` in order of first appearance."""
    return list(dict.fromkeys(data))


def get_feature(data: Iterable[Sequence[float]], feature: int) -> list[float]:
    """Return the values of column ``feature`` across every row of ``data``."""
    return [row[feature] for row in data]


def validate_split(
    tried_splits: Iterable[tuple[float, float]], feature: int, threshold: float
) -> bool:
    """Return True if splitting on ``feature`` at ``threshold`` has not been tried."""
    return not any(
        int(tried_feature) == feature and tried_threshold == threshold
        for tried_feature, tried_threshold in tried_splits
    )


def sorted_indices(values: Sequence[float]) -> list[int]:
    """Return the positions of ``values`` ordered by ascending value."""
    return sorted(range(len(values)), key=values.__getitem__)