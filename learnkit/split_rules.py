"""Split-quality measures used when choosing decision-tree rules.

Distributions are given as mappings.  A class distribution maps a class to
its count.  A split distribution maps each branch of a proposed split to the
class distribution of the rows that fall into it.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping, Sequence


def _split_entropy_from_counts(branches: Iterable[Sequence[int]]) -> float:
    rows = [list(branch) for branch in branches]
    count = sum(sum(row) for row in rows)
    if count == 0:
        raise ValueError("the distribution holds no rows")
    result = 0.0
    for row in rows:
        total = sum(row)
        if total == 0:
            continue
        for c in row:
            if c:
                p = c / count
                result -= p * math.log2(p)
        share = total / count
        result += share * math.log2(share)
    return result


def split_entropy(distribution: Mapping[object, Mapping[object, int]]) -> float:
    """Entropy of the class distribution after a split, in bits."""
    return _split_entropy_from_counts(
        list(branch.values()) for branch in distribution.values()
    )


def base_entropy(distribution: Mapping[object, int]) -> float:
    """Entropy of a class distribution before any split, in bits."""
    count = sum(distribution.values())
    if count == 0:
        raise ValueError("the distribution holds no rows")
    result = 0.0
    for c in distribution.values():
        if c:
            p = c / count
            result -= p * math.log2(p)
    return result


def numeric_attribute_entropy(
    values: Sequence[float], classes: Sequence[object]
) -> tuple[float, float]:
    """Find the threshold on a numeric attribute that minimises split entropy.

    Rows with a value below the threshold go to one side, the rest to the
    other.  Candidate thresholds are midpoints of neighbouring sorted values.
    Returns ``(entropy, threshold)``; both are infinite when no split exists.
    """
    if len(values) != len(classes):
        raise ValueError("values and classes must have the same length")

    class_index: dict[object, int] = {}
    refs = []
    for value, cls in zip(values, classes):
        index = class_index.setdefault(cls, len(class_index))
        refs.append((float(value), index))
    refs.sort(key=lambda ref: ref[0])

    n_classes = len(class_index)
    below = [0] * n_classes
    above = [0] * n_classes
    for _, cls in refs:
        above[cls] += 1

    best_entropy = math.inf
    best_value = math.inf
    prev_value = math.nan
    moved = 0
    i = 0
    n = len(refs)
    while i < n - 1:
        value = (refs[i][0] + refs[i + 1][0]) / 2
        if value == prev_value:
            i += 1
            continue
        # refs is sorted, so only rows between the previous and current
        # threshold change sides.
        while moved < n and refs[moved][0] < value:
            cls = refs[moved][1]
            below[cls] += 1
            above[cls] -= 1
            moved += 1
            i += 1
        prev_value = value
        if sum(below) == 0 or sum(above) == 0:
            # An empty side gives no defined entropy and is never chosen.
            continue
        entropy = _split_entropy_from_counts((below, above))
        if entropy < best_entropy:
            best_entropy = entropy
            best_value = value
    return best_entropy, best_value


def gini(distribution: Mapping[object, int]) -> float:
    """Gini impurity of a class distribution."""
    count = sum(distribution.values())
    if count == 0:
        raise ValueError("the distribution holds no rows")
    return 1.0 - sum((c / count) ** 2 for c in distribution.values())


def average_gini_index(distribution: Mapping[object, Mapping[object, int]]) -> float:
    """Gini impurity of a proposed split, weighted by the size of each branch."""
    subtotals = [
        (sum(branch.values()), branch) for branch in distribution.values()
    ]
    total = sum(subtotal for subtotal, _ in subtotals)
    if total == 0:
        raise ValueError("the distribution holds no rows")
    return sum(
        subtotal / total * gini(branch)
        for subtotal, branch in subtotals
        if subtotal
    )