"""Random forests of decision trees grown on bootstrap samples."""

from __future__ import annotations

import math
import sys
from collections import Counter
from pathlib import Path
from typing import Iterable, Optional, Union

import numpy as np

from .bootstrap import Bootstrap
from .decision_tree import DecisionTreeClassifier, MetricFunction
from .decision_tree_regressor import DecisionTreeRegressor, LossFunction

PathLike = Union[str, Path]

_TOO_MANY_FEATURES = "Random Forest: Number of bootstrap features too large"


def _as_rows(features: np.ndarray) -> np.ndarray:
    features = np.asarray(features, dtype=float)
    return features.reshape(-1, 1) if features.ndim == 1 else features


def _to_class(value: float) -> int:
    """Truncate to a non-negative integer class, saturating like an unsigned cast."""
    if math.isnan(value) or value <= 0.0:
        return 0
    if math.isinf(value):
        return sys.maxsize
    return int(value)


def _bootstrap_datasets(
    n_trees: int,
    num_features: int,
    features: np.ndarray,
    rng: Optional[np.random.Generator],
) -> list[np.ndarray]:
    features = np.asarray(features, dtype=float)
    if num_features > features.shape[1]:
        raise ValueError(_TOO_MANY_FEATURES)
    bootstrap = Bootstrap(n_trees, num_features, features.shape[0], features, rng=rng)
    bootstrap.generate()
    return bootstrap.datasets


def _tree_dirs(filepath: PathLike) -> list[Path]:
    return sorted(Path(filepath).iterdir())


class RandomForestClassifier:
    """Majority vote of classification trees grown on bootstrap samples."""

    def __init__(
        self,
        max_depth: int,
        samples_split: int,
        n_trees: int,
        num_features: int,
        metric_function: MetricFunction,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.max_depth = max_depth
        self.samples_split = samples_split
        self.n_trees = n_trees
        self.num_features = num_features
        self.metric_function = metric_function
        self.rng = rng
        self.trees: list[DecisionTreeClassifier] = []

    def bootstrap_trees(self, features: np.ndarray, target: np.ndarray) -> None:
        """Fit one tree per bootstrap sample of the rows."""
        for dataset in _bootstrap_datasets(
            self.n_trees, self.num_features, features, self.rng
        ):
            tree = DecisionTreeClassifier(
                self.max_depth, self.samples_split, self.metric_function
            )
            tree.fit(dataset, target)
            self.trees.append(tree)

    def load_trees(
        self, filepath: PathLike, features: np.ndarray, target: np.ndarray
    ) -> None:
        """Load every saved tree under filepath and refit it on the given data."""
        count = 0
        for path in _tree_dirs(filepath):
            tree = DecisionTreeClassifier.load(
                path, self.max_depth, self.samples_split, self.metric_function
            )
            tree.fit(features, target)
            self.trees.append(tree)
            count += 1
        self.n_trees = count

    def fit_loaded(
        self, features: np.ndarray, target: np.ndarray, filepath: PathLike
    ) -> None:
        """Fit the forest from trees saved under filepath."""
        self.load_trees(filepath, features, target)

    def fit(self, features: np.ndarray, target: np.ndarray) -> None:
        """Grow the forest; labels are read from the last column of features."""
        self.bootstrap_trees(features, target)

    def predict(self, features: np.ndarray) -> np.ndarray:
        """Predict each row by majority vote; returns shape (rows, 1)."""
        results = []
        for row in _as_rows(features):
            votes = [tree.prediction(row, tree.root) for tree in self.trees]
            winner = self.frequency_check(votes)
            if winner is None:
                raise ValueError("Random Forest: no trees to predict with")
            results.append(float(winner))
        return np.array(results, dtype=float).reshape(len(results), 1)

    def frequency_check(self, values: Iterable[float]) -> Optional[int]:
        """Most frequent class; ties go to the largest class, None if empty."""
        counts = Counter(_to_class(float(value)) for value in values)
        if not counts:
            return None
        return max(sorted(counts), key=lambda cls: (counts[cls], cls))

    def save(self, filepath: PathLike) -> None:
        """Save each tree into filepath/tree_<index>."""
        for index, tree in enumerate(self.trees):
            tree.save(Path(filepath) / f"tree_{index}")

    @classmethod
    def load(
        cls, max_depth: int, samples_split: int, metric_function: MetricFunction
    ) -> "RandomForestClassifier":
        """Create an empty forest ready for fit_loaded."""
        return cls(max_depth, samples_split, 0, 0, metric_function)


class RandomForestRegressor:
    """Average of regression trees grown on bootstrap samples."""

    def __init__(
        self,
        max_depth: int,
        samples_split: int,
        n_trees: int,
        num_features: int,
        loss_function: LossFunction,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.max_depth = max_depth
        self.samples_split = samples_split
        self.n_trees = n_trees
        self.num_features = num_features
        self.loss_function = loss_function
        self.rng = rng
        self.trees: list[DecisionTreeRegressor] = []

    def save(self, filepath: PathLike) -> None:
        """Save each tree into filepath/tree_<index>."""
        for index, tree in enumerate(self.trees):
            tree.save(Path(filepath) / f"tree_{index}")

    def bootstrap_trees(self, features: np.ndarray, target: np.ndarray) -> None:
        """Fit one tree per bootstrap sample of the rows."""
        for dataset in _bootstrap_datasets(
            self.n_trees, self.num_features, features, self.rng
        ):
            tree = DecisionTreeRegressor(
                self.max_depth, self.samples_split, self.loss_function
            )
            tree.fit(dataset, target)
            self.trees.append(tree)

    def load_trees(
        self, filepath: PathLike, features: np.ndarray, target: np.ndarray
    ) -> None:
        """Load every saved tree under filepath and refit it on the given data."""
        count = 0
        for path in _tree_dirs(filepath):
            tree = DecisionTreeRegressor.load(
                path, self.max_depth, self.samples_split, self.loss_function
            )
            tree.fit(features, target)
            self.trees.append(tree)
            count += 1
        self.n_trees = count

    def fit(self, features: np.ndarray, target: np.ndarray) -> None:
        """Grow the forest; targets are read from the last column of features."""
        self.bootstrap_trees(features, target)

    def fit_loaded(
        self, features: np.ndarray, target: np.ndarray, filepath: PathLike
    ) -> None:
        """Fit the forest from trees saved under filepath."""
        self.load_trees(filepath, features, target)

    def predict(self, features: np.ndarray) -> np.ndarray:
        """Predict each row as the mean of the trees; returns shape (rows, 1)."""
        results = []
        for row in _as_rows(features):
            values = [tree.prediction(row, tree.root) for tree in self.trees]
            results.append(float(np.mean(values)) if values else float("nan"))
        return np.array(results, dtype=float).reshape(len(results), 1)

    @classmethod
    def load(
        cls, max_depth: int, samples_split: int, loss_function: LossFunction
    ) -> "RandomForestRegressor":
        """Create an empty forest ready for fit_loaded."""
        return cls(max_depth, samples_split, 0, 0, loss_function)