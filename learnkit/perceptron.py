"""An averaged perceptron for two-class problems."""

from __future__ import annotations

import numpy as np

MAX_EPOCHS = 10


def process_data(X, y) -> list[tuple[object, np.ndarray]]:
    """Pair each row of numeric features in ``X`` with its class from ``y``.

    The class must take exactly two values.
    """
    features = np.asarray(X, dtype=float)
    if features.ndim != 2:
        raise ValueError("features must be a two-dimensional matrix")
    labels = list(y)
    if len(labels) != features.shape[0]:
        raise ValueError("features and classes must have the same number of rows")
    if len(dict.fromkeys(labels)) != 2:
        raise ValueError("the class must take exactly two values")
    return [(label, row.copy()) for label, row in zip(labels, features)]


class AveragePerceptron:
    """A perceptron whose weights are averaged after every update."""

    def __init__(
        self,
        features: int,
        learning_rate: float,
        starting_threshold: float,
        train_error: float,
    ) -> None:
        self.weights = np.zeros(features)
        self.edges = np.zeros(features)
        self.bias = 0.0
        self.threshold = starting_threshold
        self.learning_rate = learning_rate
        self.train_error = train_error
        self.trained = False
        self.count = 0.0
        self.classes: tuple = ()
        self._n_columns = 0

    def _score(self, features: np.ndarray) -> float:
        n = self.weights.size
        if features.size < n:
            raise ValueError(f"expected at least {n} features, got {features.size}")
        total = float(features[:n] @ self.weights)
        return 1.0 if total >= self.threshold else -1.0

    def _average(self) -> None:
        self.weights = (self.count * self.weights + self.edges) / (self.edges + 1)
        self.count += 1

    def _update_weights(self, features: np.ndarray, correction: float) -> None:
        self.weights = self.learning_rate * correction * features[: self.weights.size]
        self.edges += 1
        self._average()

    def fit(self, X, y) -> "AveragePerceptron":
        """Train for a fixed number of epochs on features ``X`` and classes ``y``."""
        data = process_data(X, y)
        self.train_error = 0.1
        expected = 0.0
        for _ in range(MAX_EPOCHS):
            for _label, features in data:
                response = self._score(features)
                correction = expected - response
                if response != expected:
                    self._update_weights(features, correction)
                    self.train_error += abs(correction)
        self._average()
        self.trained = True
        self.classes = tuple(label for label, _ in dict.fromkeys(
            (label, None) for label, _ in data
        ))
        self._n_columns = np.asarray(X, dtype=float).shape[1]
        return self

    def predict(self, X) -> list:
        """Return the predicted class for each row of ``X``."""
        if not self.trained:
            raise RuntimeError("Cannot call predict on an untrained AveragePerceptron")
        features = np.asarray(X, dtype=float)
        if features.ndim != 2 or features.shape[1] != self._n_columns:
            raise ValueError(
                f"expected rows of {self._n_columns} features, as in training"
            )
        negative, positive = self.classes
        return [positive if self._score(row) > 0.0 else negative for row in features]