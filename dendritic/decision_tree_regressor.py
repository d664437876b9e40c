"""Decision tree regressor."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Callable, Optional, Union

import numpy as np

from .node import Node
from .tree_utils import load_root, load_tree, save_tree, split

LossFunction = Callable[[np.ndarray, np.ndarray], float]
PathLike = Union[str, Path]


def _average(values: np.ndarray) -> float:
    values = np.asarray(values, dtype=float)
    if values.size == 0:
        return float("nan")
    return float(np.mean(values))


def _unique(values: np.ndarray) -> list[float]:
    return list(dict.fromkeys(values.tolist()))


def _as_rows(inputs: np.ndarray) -> np.ndarray:
    inputs = np.asarray(inputs, dtype=float)
    return inputs.reshape(-1, 1) if inputs.ndim == 1 else inputs


class DecisionTreeRegressor:
    """Regression tree grown by minimising the summed loss of both halves.

    The last column of the training data holds the target values.
    """

    def __init__(
        self, max_depth: int, samples_split: int, loss_function: LossFunction
    ) -> None:
        self.max_depth = max_depth
        self.samples_split = samples_split
        self.loss_function = loss_function
        self.root = Node.leaf(0.0)

    def build_tree(self, features: np.ndarray, curr_depth: int) -> Node:
        """Grow a subtree from the given rows."""
        features = np.asarray(features, dtype=float)
        num_samples, num_features = features.shape

        if num_samples >= self.samples_split and curr_depth <= self.max_depth:
            mse, feature_idx, threshold = self.best_split(features)
            left, right = split(features, threshold, feature_idx)
            if mse > 0.0:
                return Node.regression(
                    features,
                    threshold,
                    feature_idx,
                    mse,
                    self.build_tree(left, curr_depth + 1),
                    self.build_tree(right, curr_depth + 1),
                )

        return Node.leaf(_average(features[:, num_features - 1]))

    def best_split(self, features: np.ndarray) -> tuple[float, int, float]:
        """Return (loss, feature index, threshold) of the lowest-loss split."""
        features = np.asarray(features, dtype=float)
        feature_index = 0
        min_mse = np.inf
        selected_threshold = 0.0

        target_col = features.shape[1] - 1
        for feat_idx in range(target_col):
            for threshold in _unique(features[:, feat_idx]):
                left, right = split(features, threshold, feat_idx)
                if left.size == 0 or right.size == 0:
                    continue
                curr_mse = self.gain(left[:, target_col], right[:, target_col])
                if curr_mse < min_mse:
                    min_mse = curr_mse
                    feature_index = feat_idx
                    selected_threshold = threshold

        return float(min_mse), feature_index, float(selected_threshold)

    def gain(self, left: np.ndarray, right: np.ndarray) -> float:
        """Sum of the losses of each half against its own mean."""
        left = np.asarray(left, dtype=float)
        right = np.asarray(right, dtype=float)
        left_avg = np.full(left.shape, _average(left))
        right_avg = np.full(right.shape, _average(right))
        left_mse = self.loss_function(left, left_avg)
        right_mse = self.loss_function(right, right_avg)
        return float(left_mse + right_mse)

    def prediction(self, inputs: np.ndarray, node: Node) -> float:
        """Predict the value of a single row, starting from the given node."""
        while node.value is None:
            child = node.left if inputs[node.feature_idx] <= node.threshold else node.right
            if child is None:
                return -1.0
            node = child
        return float(node.value)

    def predict(self, inputs: np.ndarray) -> np.ndarray:
        """Predict every row; returns a column of shape (rows, 1)."""
        rows = _as_rows(inputs)
        results = [self.prediction(row, self.root) for row in rows]
        return np.array(results, dtype=float).reshape(len(results), 1)

    def fit(self, features: np.ndarray, target: Optional[np.ndarray] = None) -> None:
        """Grow the tree; targets are read from the last column of features."""
        self.root = self.build_tree(features, 0)

    def save(self, filepath: PathLike) -> None:
        """Write the tree as tree.json inside the given directory."""
        os.makedirs(filepath, exist_ok=True)
        text = json.dumps(save_tree(self.root).to_dict(), indent=2)
        (Path(filepath) / "tree.json").write_text(text, encoding="utf-8")

    @classmethod
    def load(
        cls,
        filepath: PathLike,
        max_depth: int,
        samples_split: int,
        loss_function: LossFunction,
    ) -> "DecisionTreeRegressor":
        """Create a regressor from a tree saved in the given directory."""
        model = cls(max_depth, samples_split, loss_function)
        model.root = load_tree(load_root(filepath))
        return model