"""Nodes of decision trees and their serialisable form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

import numpy as np


def _placeholder_data() -> np.ndarray:
    return np.zeros((1, 1), dtype=float)


@dataclass
class NodeSerialized:
    """A tree node without its training data, ready to be written as JSON."""

    threshold: float
    feature_idx: int
    value: Optional[float] = None
    mse: Optional[float] = None
    information_gain: Optional[float] = None
    left: Optional["NodeSerialized"] = None
    right: Optional["NodeSerialized"] = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible dictionary, children included."""
        return {
            "threshold": self.threshold,
            "feature_idx": self.feature_idx,
            "value": self.value,
            "mse": self.mse,
            "information_gain": self.information_gain,
            "left": self.left.to_dict() if self.left is not None else None,
            "right": self.right.to_dict() if self.right is not None else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "NodeSerialized":
        """Build a serialised node (and its children) from a dictionary."""
        left = data.get("left")
        right = data.get("right")
        return cls(
            threshold=float(data["threshold"]),
            feature_idx=int(data["feature_idx"]),
            value=_optional_float(data.get("value")),
            mse=_optional_float(data.get("mse")),
            information_gain=_optional_float(data.get("information_gain")),
            left=cls.from_dict(left) if left is not None else None,
            right=cls.from_dict(right) if right is not None else None,
        )


def _optional_float(value: Any) -> Optional[float]:
    return None if value is None else float(value)


@dataclass(eq=False)
class Node:
    """A decision, regression or leaf node of a tree."""

    data: np.ndarray = field(default_factory=_placeholder_data)
    threshold: float = 0.0
    feature_idx: int = 0
    value: Optional[float] = None
    mse: Optional[float] = None
    information_gain: Optional[float] = None
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    @classmethod
    def decision(
        cls,
        data: np.ndarray,
        threshold: float,
        feature_idx: int,
        information_gain: float,
        left: "Node",
        right: "Node",
    ) -> "Node":
        """Create a classifier split node."""
        return cls(
            data=np.asarray(data, dtype=float),
            threshold=threshold,
            feature_idx=feature_idx,
            information_gain=information_gain,
            left=left,
            right=right,
        )

    @classmethod
    def regression(
        cls,
        data: np.ndarray,
        threshold: float,
        feature_idx: int,
        mse: float,
        left: "Node",
        right: "Node",
    ) -> "Node":
        """Create a regressor split node."""
        return cls(
            data=np.asarray(data, dtype=float),
            threshold=threshold,
            feature_idx=feature_idx,
            mse=mse,
            left=left,
            right=right,
        )

    @classmethod
    def leaf(cls, value: float) -> "Node":
        """Create a leaf node holding a prediction value."""
        return cls(value=value)

    def save(self) -> NodeSerialized:
        """Serialise this node alone, without its children."""
        return NodeSerialized(
            threshold=self.threshold,
            feature_idx=self.feature_idx,
            value=self.value,
            mse=self.mse,
            information_gain=self.information_gain,
        )

    @classmethod
    def load(cls, node: NodeSerialized) -> "Node":
        """Rebuild a node from its serialised form, without its children."""
        return cls(
            threshold=node.threshold,
            feature_idx=node.feature_idx,
            value=node.value,
            mse=node.mse,
            information_gain=node.information_gain,
        )