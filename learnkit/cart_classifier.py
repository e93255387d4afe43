"""A CART decision tree for classification with integer labels."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from learnkit.cart_utils import find_unique, get_feature, sorted_indices, validate_split

GINI = "gini"
ENTROPY = "entropy"


@dataclass
class ClassifierNode:
    """One split of the tree and the label assigned to each side of it."""

    left: ClassifierNode | None = None
    right: ClassifierNode | None = None
    threshold: float = 0.0
    feature: int = 0
    left_label: int = 0
    right_label: int = 0
    is_node_needed: bool = False


def _label_counts(y: Sequence[int], labels: Sequence[int]) -> Counter:
    counts: Counter = Counter({label: 0 for label in labels})
    counts.update(y)
    return counts


def _mode(counts: Counter, labels: Sequence[int]) -> int:
    max_label = 0
    for label in labels:
        if counts[label] > counts[max_label]:
            max_label = label
    return max_label


def gini_impurity_and_mode(
    y: Sequence[int], labels: Sequence[int]
) -> tuple[float, int]:
    """Return the Gini impurity of ``y`` and its most frequent label."""
    n = len(y)
    counts = _label_counts(y, labels)
    impurity = 0.0
    for label in labels:
        p = counts[label] / n
        impurity += p * (1 - p)
    return impurity, _mode(counts, labels)


def entropy_and_mode(y: Sequence[int], labels: Sequence[int]) -> tuple[float, int]:
    """Return the entropy (in bits) of ``y`` and its most frequent label."""
    n = len(y)
    counts = _label_counts(y, labels)
    entropy = 0.0
    for label in labels:
        p = counts[label] / n
        if p != 0:
            entropy -= p * math.log2(p)
    return entropy, _mode(counts, labels)


def classification_loss(
    y: Sequence[int], labels: Sequence[int], criterion: str
) -> tuple[float, int]:
    """Return the impurity of ``y`` under ``criterion`` and its most frequent label."""
    if len(y) == 0:
        raise ValueError("Need at least 1 value to compute impurity")
    if criterion == GINI:
        return gini_impurity_and_mode(y, labels)
    if criterion == ENTROPY:
        return entropy_and_mode(y, labels)
    raise ValueError("Invalid impurity function, choose from GINI or ENTROPY")


def classifier_create_split(data, feature: int, y, threshold: float):
    """Split rows by ``row[feature] < threshold``.

    Returns ``(left, right, left_y, right_y)``.
    """
    left, right, left_y, right_y = [], [], [], []
    for row, label in zip(data, y):
        if row[feature] < threshold:
            left.append(row)
            left_y.append(label)
        else:
            right.append(row)
            right_y.append(label)
    return left, right, left_y, right_y


def classifier_reorder_data(feature_values, data, y):
    """Return ``data`` and ``y`` reordered by ascending ``feature_values``."""
    order = sorted_indices(list(feature_values))
    return [data[i] for i in order], [y[i] for i in order]


def classifier_update_split(left, left_y, right, right_y, feature: int, threshold: float):
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


class CARTDecisionTreeClassifier:
    """A binary decision tree grown greedily to minimise impurity.

    ``max_depth`` of -1 grows the tree until its leaves are pure.
    """

    def __init__(self, criterion: str, max_depth: int, labels) -> None:
        self.criterion = criterion.lower()
        self.max_depth = max_depth
        self.labels = [int(label) for label in labels]
        self.root_node: ClassifierNode | None = None
        self.tried_splits: list[tuple[float, float]] = []

    def fit(self, X, y) -> "CARTDecisionTreeClassifier":
        """Grow the tree from rows of features ``X`` and integer labels ``y``."""
        data = [[float(v) for v in row] for row in X]
        targets = [int(v) for v in y]
        if not data:
            raise ValueError("at least one training row is required")
        if len(targets) != len(data):
            raise ValueError("features and labels must have the same number of rows")
        self.root_node = self._best_split(data, targets, 0, tuple(self.tried_splits))
        return self

    def _best_split(self, data, y, depth: int, tried: tuple) -> ClassifierNode:
        node = ClassifierNode()
        depth += 1
        if self.max_depth != -1 and depth > self.max_depth:
            return node

        labels, criterion = self.labels, self.criterion
        orig_loss, node.left_label = classification_loss(y, labels, criterion)
        best_loss = orig_loss
        best_left, best_right, best_left_y, best_right_y = data, data, y, y
        best_left_loss = best_right_loss = best_loss
        node.is_node_needed = True
        n = len(data)

        for feature in range(len(data[0])):
            values = get_feature(data, feature)
            unique = sorted(find_unique(values))
            sort_data, sort_y = classifier_reorder_data(values, data, y)
            left = right = left_y = right_y = None
            for low, high in zip(unique, unique[1:]):
                threshold = (low + high) / 2
                if not validate_split(tried, feature, threshold):
                    continue
                if left is None:
                    left, right, left_y, right_y = classifier_create_split(
                        sort_data, feature, sort_y, threshold
                    )
                else:
                    left, left_y, right, right_y = classifier_update_split(
                        left, left_y, right, right_y, feature, threshold
                    )
                left_loss, left_label = classification_loss(left_y, labels, criterion)
                right_loss, right_label = classification_loss(right_y, labels, criterion)
                sub_loss = left_loss * len(left) / n + right_loss * len(right) / n
                if sub_loss < best_loss:
                    best_loss = sub_loss
                    best_left, best_right = left, right
                    best_left_y, best_right_y = left_y, right_y
                    node.threshold, node.feature = threshold, feature
                    node.left_label, node.right_label = left_label, right_label
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

    def _root(self) -> ClassifierNode:
        if self.root_node is None:
            raise RuntimeError("The tree must be fitted first")
        return self.root_node

    @staticmethod
    def _predict_single(node: ClassifierNode, instance) -> int:
        while True:
            if instance[node.feature] < node.threshold:
                if node.left is None:
                    return node.left_label
                node = node.left
            else:
                if node.right is None:
                    return node.right_label
                node = node.right

    def predict(self, X) -> list[int]:
        """Return the predicted label for each row of ``X``."""
        root = self._root()
        return [self._predict_single(root, [float(v) for v in row]) for row in X]

    def evaluate(self, X, y) -> float:
        """Return the fraction of rows of ``X`` whose prediction matches ``y``."""
        expected = [int(v) for v in y]
        predictions = self.predict(X)
        if len(predictions) != len(expected):
            raise ValueError("features and labels must have the same number of rows")
        if not expected:
            raise ValueError("at least one row is required")
        correct = sum(p == e for p, e in zip(predictions, expected))
        return correct / len(expected)

    def __str__(self) -> str:
        return self._node_string(self._root(), "")

    @classmethod
    def _node_string(cls, node: ClassifierNode, spacing: str) -> str:
        parts = [f"{spacing}Feature {node.feature} < {node.threshold:.3f}\n"]
        if node.left is None:
            parts.append(f"{spacing}---> True\n  {spacing}PREDICT    {node.left_label}\n")
        if node.right is None:
            parts.append(f"{spacing}---> False\n  {spacing}PREDICT    {node.right_label}\n")
        if node.left is not None:
            parts.append(f"{spacing}---> True\n")
            parts.append(cls._node_string(node.left, spacing + "  "))
        if node.right is not None:
            parts.append(f"{spacing}---> False\n")
            parts.append(cls._node_string(node.right, spacing + "  "))
        return "".join(parts)