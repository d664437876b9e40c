"""Bootstrap resampling of a training set."""

from __future__ import annotations

from typing import Optional

import numpy as np


class Bootstrap:
    """Draws row samples and feature subsets from a training set."""

    def __init__(
        self,
        n_bootstraps: int,
        num_features: int,
        sample_size: int,
        x_train: np.ndarray,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.n_bootstraps = n_bootstraps
        self.num_features = num_features
        self.sample_size = sample_size
        self.x_train = np.asarray(x_train, dtype=float)
        self.datasets: list[np.ndarray] = []
        self.rng = rng if rng is not None else np.random.default_rng()

    def generate(self) -> None:
        """Append n_bootstraps row samples to the datasets."""
        self.datasets.extend(
            self.sample(self.sample_size) for _ in range(self.n_bootstraps)
        )

    def feature_sub_select(self) -> np.ndarray:
        """Pick random feature columns (with repeats) plus the target column."""
        target_col = self.x_train.shape[1] - 1
        columns = list(self.rng.integers(0, target_col, size=self.num_features))
        columns.append(target_col)
        return self.x_train[:, columns]

    def sample(self, sample_size: int) -> np.ndarray:
        """Draw sample_size rows at random, with replacement."""
        rows = self.rng.integers(0, self.x_train.shape[0], size=sample_size)
        return self.x_train[rows]