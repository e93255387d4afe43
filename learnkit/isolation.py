"""Isolation forests for unsupervised outlier detection."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence

from learnkit.cart_regressor import RegressorNode

_EULER_GAMMA = 0.5772156649
_NUDGE = 0.000001

Row = Sequence[float]


def select_feature(data: Sequence[Row], rng: random.Random) -> int:
    """Pick a random column index of ``data``."""
    if not data or not data[0]:
        raise ValueError("data must hold at least one row and one column")
    return rng.randrange(len(data[0]))


def min_max(feature: int, data: Sequence[Row]) -> tuple[float, float]:
    """Return the smallest and largest value of column ``feature``."""
    values = [row[feature] for row in data]
    if not values:
        return math.inf, -math.inf
    return min(values), max(values)


def select_value(low: float, high: float, rng: random.Random) -> float:
    """Pick a random threshold between ``low`` and ``high``, avoiding the ends."""
    value = low + rng.random() * (high - low)
    if value == low:
        value += _NUDGE
    elif value == high:
        value -= _NUDGE
    return value


def split_data(
    value: float, feature: int, data: Sequence[Row]
) -> tuple[list[Row], list[Row]]:
    """Split rows by ``row[feature] <= value`` into ``(left, right)``."""
    left: list[Row] = []
    right: list[Row] = []
    for row in data:
        (left if row[feature] <= value else right).append(row)
    return left, right


def check_data(data: Sequence[Row]) -> bool:
    """Return True if the rows are not all identical, so they can still be split."""
    if not data:
        return False
    first = data[0]
    return any(
        value != first[i] for row in data for i, value in enumerate(row)
    )


def get_random_data(
    data: Sequence[Row], sub_space: int, rng: random.Random
) -> list[Row]:
    """Draw ``sub_space`` rows from ``data`` with replacement."""
    if sub_space > 0 and not data:
        raise ValueError("cannot sample from empty data")
    return [data[rng.randrange(len(data))] for _ in range(sub_space)]


def c_factor(n: int) -> float:
    """Average path length of an unsuccessful search in a tree of ``n`` points."""
    if n < 2:
        raise ValueError("the normalising factor needs at least two points")
    return 2.0 * (math.log(n - 1) + _EULER_GAMMA) - 2.0 * (n - 1) / n


def _build_tree(
    data: Sequence[Row], depth: int, max_depth: int, rng: random.Random
) -> RegressorNode:
    node = RegressorNode()
    depth += 1
    if depth > max_depth or len(data) <= 1 or not check_data(data):
        node.is_node_needed = False
        return node
    node.is_node_needed = True

    low = high = 0.0
    feature = 0
    split_value = 0.0
    while low == high:
        feature = select_feature(data, rng)
        low, high = min_max(feature, data)
        split_value = select_value(low, high, rng)

    left_data, right_data = split_data(split_value, feature, data)
    node.feature = feature
    node.threshold = split_value
    node.left_pred = float(len(left_data))
    node.right_pred = float(len(right_data))

    left = _build_tree(left_data, depth, max_depth, rng)
    right = _build_tree(right_data, depth, max_depth, rng)
    if left.is_node_needed:
        node.left = left
    if right.is_node_needed:
        node.right = right
    return node


def path_length(tree: RegressorNode, instance: Row, path: float) -> float:
    """Length of the path ``instance`` takes through ``tree``, starting from ``path``.

    Leaves holding more than one point add the expected remaining depth.
    """
    path += 1
    if instance[tree.feature] <= tree.threshold:
        child, size = tree.left, tree.left_pred
    else:
        child, size = tree.right, tree.right_pred
    if child is None:
        if size <= 1:
            return path
        return path + c_factor(int(size))
    return path_length(child, instance, path)


class IsolationForest:
    """An ensemble of random trees scoring how easily each point is isolated.

    ``n_trees`` trees are grown, each from ``sub_space`` rows drawn with
    replacement and to at most ``max_depth`` levels.  Every column is used as
    a feature.  Scores near 1 suggest outliers, scores near 0 normal points.
    """

    def __init__(
        self, n_trees: int, max_depth: int, sub_space: int, seed: int | None = None
    ) -> None:
        self.n_trees = n_trees
        self.max_depth = max_depth
        self.sub_space = sub_space
        self.rng = random.Random(seed)
        self.trees: list[RegressorNode] = []
        self._n_columns = 0

    @staticmethod
    def _rows(X) -> list[list[float]]:
        rows = [[float(v) for v in row] for row in X]
        if rows and len({len(row) for row in rows}) != 1:
            raise ValueError("all rows must have the same number of columns")
        return rows

    def fit(self, X) -> "IsolationForest":
        """Grow the forest from the rows of ``X``."""
        data = self._rows(X)
        if not data or not data[0]:
            raise ValueError("at least one row with one column is required")
        self._n_columns = len(data[0])
        self.trees = [
            _build_tree(get_random_data(data, self.sub_space, self.rng), 0,
                        self.max_depth, self.rng)
            for _ in range(self.n_trees)
        ]
        return self

    def _anomaly_score(self, instance: Row) -> float:
        paths = [path_length(tree, instance, 0.0) for tree in self.trees]
        mean_path = sum(paths) / len(paths)
        return 2.0 ** (-mean_path / c_factor(self.sub_space))

    def predict(self, X) -> list[float]:
        """Return the anomaly score of each row of ``X``."""
        if not self.trees:
            raise RuntimeError("The forest must be fitted first")
        data = self._rows(X)
        if data and len(data[0]) != self._n_columns:
            raise ValueError(f"expected rows of {self._n_columns} values")
        return [self._anomaly_score(row) for row in data]