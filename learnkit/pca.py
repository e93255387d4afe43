"""Principal component analysis through singular value decomposition."""

from __future__ import annotations

import numpy as np


def subtract_row_vector(matrix, vector) -> np.ndarray:
    """Return ``matrix`` with the first row of ``vector`` subtracted from every row."""
    mat = np.array(matrix, dtype=float)
    vec = np.atleast_2d(np.asarray(vector, dtype=float))
    if mat.ndim != 2 or vec.shape[1] != mat.shape[1]:
        raise ValueError("Error in dimension")
    return mat - vec[0]


class PCA:
    """Projects data onto its principal components.

    ``n_components`` of 0 keeps every component.
    """

    def __init__(self, n_components: int = 0) -> None:
        self.n_components = n_components
        self._v: np.ndarray | None = None

    def fit(self, X) -> "PCA":
        """Compute the principal axes of the mean-centred data."""
        centred = self._centre(X)
        try:
            _, _, vt = np.linalg.svd(centred, full_matrices=False)
        except np.linalg.LinAlgError as exc:
            raise ValueError("Unable to factorize") from exc
        if self.n_components < 0:
            raise ValueError("Number of components can't be less than zero")
        self._v = vt.T
        return self

    def transform(self, X) -> np.ndarray:
        """Project ``X`` onto the fitted axes, as given (without centring)."""
        if self._v is None:
            raise RuntimeError("The PCA model must be fitted first")
        data = np.asarray(X, dtype=float)
        n_samples, n_features = data.shape
        projected = data @ self._v
        if self.n_components == 0 or self.n_components > n_features:
            return projected
        result = np.zeros((n_samples, self.n_components))
        kept = min(self.n_components, projected.shape[1])
        result[:, :kept] = projected[:, :kept]
        return result

    def fit_transform(self, X) -> np.ndarray:
        """Fit the model and project the mean-centred ``X``."""
        centred = self._centre(X)
        return self.fit(centred).transform(centred)

    @staticmethod
    def _centre(X) -> np.ndarray:
        data = np.asarray(X, dtype=float)
        if data.ndim != 2:
            raise ValueError("PCA expects a two-dimensional matrix")
        return subtract_row_vector(data, data.mean(axis=0, keepdims=True))