"""Iterative solvers for square linear systems."""

from __future__ import annotations

from typing import Iterable

import numpy as np


def _sequential_sum(values: Iterable[float]) -> float:
    """Sum left to right with plain float addition, no compensation."""
    total = 0.0
    for value in values:
        total += float(value)
    return total


def _as_matrix(values: np.ndarray, name: str) -> np.ndarray:
    matrix = np.array(values, dtype=float)
    if matrix.ndim != 2:
        raise ValueError(f"{name} must be a two dimensional array")
    return matrix


class LinearSolver:
    """Solves X @ parameters = b by Gauss-Seidel or successive over-relaxation."""

    def __init__(self, X: np.ndarray, b: np.ndarray, threshold: float) -> None:
        X = _as_matrix(X, "X")
        b = _as_matrix(b, "b")
        rows, cols = X.shape

        if rows != cols:
            raise ValueError(f"Input must be a square matrix {rows} != {cols}")
        if b.shape[1] > 1:
            raise ValueError(
                f"Target vector can't have more than 1 column: {b.shape[1]}"
            )
        if b.shape[0] != rows:
            raise ValueError(f"Solution set rows not equal {rows} != {b.shape[0]}")

        self.X = X
        self.b = b
        self.threshold = threshold
        self.iterations = 0
        self.parameters = np.zeros((cols, 1), dtype=float)

    def _off_diagonal_dot(self, i: int) -> float:
        theta = 0.0
        for j, coefficient in enumerate(self.X[i]):
            if j != i:
                theta += float(coefficient) * float(self.parameters[j, 0])
        return theta

    def _change(self, previous: np.ndarray) -> float:
        return _sequential_sum((previous - self.parameters)[:, 0])

    def gauss_seidel(self) -> None:
        """Sweep until the summed parameter change equals the threshold exactly."""
        while True:
            previous = self.parameters.copy()
            for i in range(self.X.shape[0]):
                theta = self._off_diagonal_dot(i)
                self.parameters[i, 0] = (float(self.b[i, 0]) - theta) / float(
                    self.X[i, i]
                )
            if self._change(previous) == self.threshold:
                break
            self.iterations += 1

    def sor(self, w: float) -> None:
        """Sweep with relaxation factor w until the summed change is at most the threshold."""
        while True:
            previous = self.parameters.copy()
            for i in range(self.X.shape[0]):
                theta = self._off_diagonal_dot(i)
                kept = (1.0 - w) * float(self.parameters[i, 0])
                step = (w / float(self.X[i, i])) * (float(self.b[i, 0]) - theta)
                self.parameters[i, 0] = kept + step
            if self._change(previous) <= self.threshold:
                break
            self.iterations += 1