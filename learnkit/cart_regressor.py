"""A CART decision tree for regression."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from learnkit.cart_utils import find_unique, get_feature, sorted_indices, validate_split

MAE = "mae"
MSE = "mse"


@dataclass
class RegressorNode:
    """One split of the tree and the prediction made on each side of it."""

    left: RegressorNode | None = None
    right: RegressorNode | None = None
    threshold: float = 0.0
    feature: int = 0
    left_pred: float = 0.0
    right_pred: float = 0.0
    is_node_needed: bool = False


def _average(y: Sequence[float]) -> float:
    if len(y) == 0:
        raise ValueError("Need at least 1 value to compute impurity")
    return sum(y) / len(y)


def mae_impurity_and_average(y: Sequence[float]) -> tuple[float, float]:
    """Return the mean absolute error of predicting the mean of ``y``, and that mean."""
    mean = _average(y)
    return sum(abs(target - mean) for target in y) / len(y), mean


def mse_impurity_and_average(y: Sequence[float]) -> tuple[float, float]:
    """Return the mean squared error of predicting the mean of ``y``, and that mean."""
    mean = _average(y)
    return sum((target - mean) ** 2 for target in y) / len(y), mean


def regression_loss(y: Sequence[float], criterion: str) -> tuple[float, float]:
    """Return the impurity of ``y`` under ``criterion`` and the mean of ``y``."""
    if criterion == MAE:
        return mae_impurity_and_average(y)
    if criterion == MSE:
        return mse_impurity_and_average(y)
    raise ValueError("Invalid impurity function, choose from MAE or MSE")


def regressor_create_split(data, feature: int, y, threshold: float):
    """Split rows by ``row[feature] < threshold``.

    Returns ``(left, right, left_y, right_y)``.
    """
    left, right, left_y, right_y = [], [], [], []
    for row, target in zip(data, y):
        if row[feature] < threshold:
            left.append(row)
            left_y.append(target)
        else:
            right.append(row)
            right_y.append(target)
    return left, right, left_y, right_y


def regressor_reorder_data(feature_values, data, y):
    """Return ``data`` and ``y`` reordered by ascending ``feature_values``."""
    order = sorted_indices(list(feature_values))
    return [data[i] for i in order], [y[i] for i in order]


def regressor_update_split(left, left_y, right, right_y, feature: int, threshold: float):
    """Move leading rows of sorted ``right`` below ``threshold`` over to ``left``.

    Returns ``(left, left_y, right, right_y)`` as new lists.
    """
    moved = 0
    while moved < len(right) and right[moved][feature] < threshold:
        moved += 1
    return (
        list(left) + list(right[:moved]),
        list(left_y) + list(right_y[:moved]),
        list(right[moved:]),
        list(right_y[moved:]),
    )


class CARTDecisionTreeRegressor:
    """A binary regression tree grown greedily to minimise MAE or MSE.

    ``max_depth`` of -1 grows the tree until its leaves are pure.
    """

    def __init__(self, criterion: str, max_depth: int) -> None:
        self.criterion = criterion.lower()
        self.max_depth = max_depth
        self.root_node: RegressorNode | None = None
        self.tried_splits: list[tuple[float, float]] = []

    def fit(self, X, y) -> "CARTDecisionTreeRegressor":
        """Grow the tree from rows of features ``X`` and numeric targets ``y``."""
        data = [[float(v) for v in row] for row in X]
        targets = [float(v) for v in y]
        if not data:
            raise ValueError("at least one training row is required")
        if len(targets) != len(data):
            raise ValueError("features and targets must have the same number of rows")
        self.root_node = self._best_split(data, targets, 0, tuple(self.tried_splits))
        return self

    def _best_split(self, data, y, depth: int, tried: tuple) -> RegressorNode:
        node = RegressorNode()
        depth += 1
        if self.max_depth != -1 and depth > self.max_depth:
            return node

        criterion = self.criterion
        orig_loss, node.left_pred = regression_loss(y, criterion)
        best_loss = orig_loss
        best_left, best_right, best_left_y, best_right_y = data, data, y, y
        best_left_loss = best_right_loss = best_loss
        node.is_node_needed = True
        n = len(data)

        for feature in range(len(data[0])):
            values = get_feature(data, feature)
            unique = sorted(find_unique(values))
            sort_data, sort_y = regressor_reorder_data(values, data, y)
            left = right = left_y = right_y = None
            for low, high in zip(unique, unique[1:]):
                threshold = (low + high) / 2
                if not validate_split(tried, feature, threshold):
                    continue
                if left is None:
                    left, right, left_y, right_y = regressor_create_split(
                        sort_data, feature, sort_y, threshold
                    )
                else:
                    left, left_y, right, right_y = regressor_update_split(
                        left, left_y, right, right_y, feature, threshold
                    )
                left_loss, left_pred = regression_loss(left_y, criterion)
                right_loss, right_pred = regression_loss(right_y, criterion)
                sub_loss = left_loss * len(left) / n + right_loss * len(right) / n
                if sub_loss < best_loss:
                    best_loss = sub_loss
                    best_left, best_right = left, right
                    best_left_y, best_right_y = left_y, right_y
                    node.threshold, node.feature = threshold, feature
                    node.left_pred, node.right_pred = left_pred, right_pred
                    best_left_loss, best_right_loss = left_loss, right_loss

        if best_loss == orig_loss:
            node.is_node_needed = False
            return node

        if best_loss > 0:
            child_tried = tried + ((float(node.feature), node.threshold),)
            if best_left_loss > 0:
                child = self._best_split(best_left, best_left_y, depth, child_tried)
                if child.is_node_needed:
                    node.left = child
            if best_right_loss > 0:
                child = self._best_split(best_right, best_right_y, depth, child_tried)
                if child.is_node_needed:
                    node.right = child
        return node

    def _root(self) -> RegressorNode:
        if self.root_node is None:
            raise RuntimeError("The tree must be fitted first")
        return self.root_node

    @staticmethod
    def _predict_single(node: RegressorNode, instance) -> float:
        while True:
            if instance[node.feature] < node.threshold:
                if node.left is None:
                    return node.left_pred
                node = node.left
            else:
                if node.right is None:
                    return node.right_pred
                node = node.right

    def predict(self, X) -> list[float]:
        """Return the predicted value for each row of ``X``."""
        root = self._root()
        return [self._predict_single(root, [float(v) for v in row]) for row in X]

    def __str__(self) -> str:
        return self._node_string(self._root(), "")

    @classmethod
    def _node_string(cls, node: RegressorNode, spacing: str) -> str:
        parts = [f"{spacing}Feature {node.feature} < {node.threshold:.3f}\n"]
        if node.left is None:
            parts.append(f"{spacing}---> True\n  {spacing}PREDICT    {node.left_pred:.3f}\n")
        if node.right is None:
            parts.append(f"{spacing}---> False\n  {spacing}PREDICT    {node.right_pred:.3f}\n")
        if node.left is not None:
            parts.append(f"{spacing}---> True\n")
            parts.append(cls._node_string(node.left, spacing + "  "))
        if node.right is not None:
            parts.append(f"{spacing}---> False\n")
            parts.append(cls._node_string(node.right, spacing + "  "))
        return "".join(parts)