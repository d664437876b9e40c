"""Ordinary least squares linear regression."""

from __future__ import annotations

from typing import Optional

import numpy as np


class LinearRegression:
    """Linear model over a design matrix X and a target column y."""

    def __init__(self, X: np.ndarray, y: np.ndarray) -> None:
        X = np.array(X, dtype=float)
        y = np.array(y, dtype=float)
        if X.ndim != 2 or y.ndim != 2:
            raise ValueError("X and y must be two dimensional arrays")
        if X.shape[0] != y.shape[0]:
            raise ValueError(
                f"Rows of X and y must be equal: {X.shape[0]} != {y.shape[0]}"
            )
        self.X = X
        self.y = y
        self.coefficients = np.zeros((X.shape[1], 1), dtype=float)

    def fit(self) -> Optional[np.ndarray]:
        """Return the inverse of X @ X.T, or None when that matrix is singular."""
        gram = self.X @ self.X.T
        try:
            return np.linalg.inv(gram)
        except np.linalg.LinAlgError:
            return None