"""Decision tree classifier."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Callable, Optional, Union

import numpy as np

from .node import Node
from .tree_utils import load_root, load_tree, save_tree, split

MetricFunction = Callable[[np.ndarray], float]
PathLike = Union[str, Path]


def _unique(values: np.ndarray) -> list[float]:
    return list(dict.fromkeys(values.tolist()))


def _as_rows(inputs: np.ndarray) -> np.ndarray:
    inputs = np.asarray(inputs, dtype=float)
    return inputs.reshape(-1, 1) if inputs.ndim == 1 else inputs


class DecisionTreeClassifier:
    """Classification tree grown by maximising information gain.

    The last column of the training data holds the class labels.
    """

    def __init__(
        self, max_depth: int, samples_split: int, metric_function: MetricFunction
    ) -> None:
        self.max_depth = max_depth
        self.samples_split = samples_split
        self.metric_function = metric_function
        self.root = Node.leaf(0.0)

    def build_tree(self, features: np.ndarray, curr_depth: int) -> Node:
        """Grow a subtree from the given rows."""
        features = np.asarray(features, dtype=float)
        num_samples, num_features = features.shape

        if num_samples >= self.samples_split and curr_depth <= self.max_depth:
            info_gain, feature_idx, threshold = self.best_split(features)
            left, right = split(features, threshold, feature_idx)
            if info_gain > 0.0:
                return Node.decision(
                    features,
                    threshold,
                    feature_idx,
                    info_gain,
                    self.build_tree(left, curr_depth + 1),
                    self.build_tree(right, curr_depth + 1),
                )

        return Node.leaf(self.select_max_class(features[:, num_features - 1]))

    def best_split(self, features: np.ndarray) -> tuple[float, int, float]:
        """Return (information gain, feature index, threshold) of the best split."""
        features = np.asarray(features, dtype=float)
        max_info_gain = -np.inf
        feature_index = 0
        selected_threshold = -np.inf

        target_col = features.shape[1] - 1
        for feat_idx in range(target_col):
            for threshold in _unique(features[:, feat_idx]):
                left, right = split(features, threshold, feat_idx)
                if left.size == 0 or right.size == 0:
                    continue
                info_gain = self.information_gain(
                    features[:, target_col], left[:, target_col], right[:, target_col]
                )
                if info_gain > max_info_gain:
                    max_info_gain = info_gain
                    feature_index = feat_idx
                    selected_threshold = threshold

        return float(max_info_gain), feature_index, float(selected_threshold)

    def information_gain(
        self, feature: np.ndarray, left: np.ndarray, right: np.ndarray
    ) -> float:
        """Drop in impurity from the parent labels to the two child label sets."""
        feature_entropy = self.metric_function(feature)
        left_e = self.metric_function(left)
        right_e = self.metric_function(right)
        left_weight = np.size(left) / np.size(feature)
        right_weight = np.size(right) / np.size(feature)
        return float(feature_entropy - (left_weight * left_e + right_weight * right_e))

    def select_max_class(self, target: np.ndarray) -> float:
        """Return the largest class label present in the target values."""
        return float(np.max(target))

    def fit(self, features: np.ndarray, target: Optional[np.ndarray] = None) -> None:
        """Grow the tree; labels are read from the last column of features."""
        self.root = self.build_tree(features, 0)

    def prediction(self, inputs: np.ndarray, node: Node) -> float:
        """Predict the class of a single row, starting from the given node."""
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
        metric_function: MetricFunction,
    ) -> "DecisionTreeClassifier":
        """Create a classifier from a tree saved in the given directory."""
        model = cls(max_depth, samples_split, metric_function)
        model.root = load_tree(load_root(filepath))
        return model