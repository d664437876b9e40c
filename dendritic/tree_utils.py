"""Helpers for splitting data and storing or showing decision trees."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Union

import numpy as np

from .node import Node, NodeSerialized

PathLike = Union[str, Path]


def split(
    features: np.ndarray, threshold: float, feature_idx: int
) -> tuple[np.ndarray, np.ndarray]:
    """Split rows into those at or below the threshold and those above it."""
    features = np.asarray(features, dtype=float)
    column = features[:, feature_idx]
    return features[column <= threshold], features[column > threshold]


def save_tree(node: Node) -> NodeSerialized:
    """Serialise a whole tree, children included."""
    saved = node.save()
    if node.left is None:
        return saved
    saved.left = save_tree(node.left)
    if node.right is None:
        return saved
    saved.right = save_tree(node.right)
    return saved


def load_tree(node_save: NodeSerialized) -> Node:
    """Rebuild a whole tree from its serialised form."""
    node = Node.load(node_save)
    if node_save.left is None:
        return node
    node.left = load_tree(node_save.left)
    if node_save.right is None:
        return node
    node.right = load_tree(node_save.right)
    return node


def load_root(filepath: PathLike) -> NodeSerialized:
    """Read the serialised tree stored as tree.json in a directory."""
    text = (Path(filepath) / "tree.json").read_text(encoding="utf-8")
    return NodeSerialized.from_dict(json.loads(text))


def format_tree(node: Node, level: int = 0) -> str:
    """Render a tree as indented text, one node per line."""
    if node.value is not None:
        return f"{node.value!r}\n"
    text = f"{node.feature_idx} <= {node.threshold!r}\n"
    indent = " " * level
    text += indent + "left: "
    text += format_tree(node.left, level + 2) if node.left is not None else "\n"
    text += indent + "right: "
    text += format_tree(node.right, level + 2) if node.right is not None else "\n"
    return text


def print_tree(node: Node, level: int = 0) -> None:
    """Print a tree as indented text."""
    print(format_tree(node, level), end="")