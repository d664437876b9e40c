import json

import numpy as np
import pytest

from dendritic.node import Node, NodeSerialized
from dendritic.tree_utils import (
    format_tree,
    load_root,
    load_tree,
    print_tree,
    save_tree,
    split,
)


def _features():
    return np.array(
        [
            [69.0, 4.39],
            [69.0, 4.21],
            [65.0, 4.09],
            [72.0, 5.85],
            [73.0, 5.68],
            [70.0, 5.56],
            [73.0, 5.79],
            [65.0, 4.27],
        ]
    )


def _small_tree():
    inner = Node.decision(
        np.zeros((2, 2)), 5.5, 1, 0.3, Node.leaf(0.0), Node.leaf(1.0)
    )
    return Node.decision(np.zeros((4, 2)), 69.0, 0, 0.9, Node.leaf(2.0), inner)


def test_split_first_feature():
    left, right = split(_features(), 69.0, 0)
    assert left.shape == (4, 2)
    assert right.shape == (4, 2)
    assert left[:, 0].tolist() == [69.0, 69.0, 65.0, 65.0]
    assert right[:, 0].tolist() == [72.0, 73.0, 70.0, 73.0]


def test_split_second_feature():
    left, right = split(_features(), 5.56, 1)
    assert left.shape == (5, 2)
    assert right.shape == (3, 2)
    assert left[:, 1].tolist() == [4.39, 4.21, 4.09, 5.56, 4.27]
    assert right[:, 1].tolist() == [5.85, 5.68, 5.79]


def test_split_keeps_row_order():
    column = np.arange(14.0, 0.0, -1.0)
    features = np.column_stack([column, column * 2])
    left, right = split(features, 5.5, 0)
    assert left.shape == (5, 2)
    assert right.shape == (9, 2)
    assert left[:, 0].tolist() == [5.0, 4.0, 3.0, 2.0, 1.0]
    assert right[:, 0].tolist() == [14.0, 13.0, 12.0, 11.0, 10.0, 9.0, 8.0, 7.0, 6.0]


def test_split_with_threshold_below_all():
    left, right = split(_features(), -np.inf, 0)
    assert left.shape == (0, 2)
    assert right.shape == (8, 2)


def test_save_tree_includes_children():
    saved = save_tree(_small_tree())
    assert saved.threshold == 69.0
    assert saved.left.value == 2.0
    assert saved.right.feature_idx == 1
    assert saved.right.right.value == 1.0


def test_save_leaf_has_no_children():
    saved = save_tree(Node.leaf(3.0))
    assert saved.value == 3.0
    assert saved.left is None and saved.right is None


def test_save_load_round_trip():
    tree = _small_tree()
    restored = load_tree(save_tree(tree))
    assert format_tree(restored) == format_tree(tree)
    assert restored.right.information_gain == 0.3
    assert restored.data.shape == (1, 1)


def test_load_root(tmp_path):
    saved = save_tree(_small_tree())
    (tmp_path / "tree.json").write_text(json.dumps(saved.to_dict(), indent=2))
    loaded = load_root(tmp_path)
    assert isinstance(loaded, NodeSerialized)
    assert loaded == saved


def test_load_root_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_root(tmp_path / "absent")


def test_format_leaf():
    assert format_tree(Node.leaf(1.0)) == "1.0\n"


def test_format_tree_indents_children():
    node = Node.decision(np.zeros((1, 1)), 4.9, 0, 0.0, Node.leaf(1.0), Node.leaf(2.0))
    assert format_tree(node, 0) == "0 <= 4.9\nleft: 1.0\nright: 2.0\n"
    assert format_tree(node, 2) == "0 <= 4.9\n  left: 1.0\n  right: 2.0\n"


def test_format_tree_missing_child():
    node = Node(threshold=1.5, feature_idx=2)
    assert format_tree(node) == "2 <= 1.5\nleft: \nright: \n"


def test_print_tree(capsys):
    print_tree(_small_tree(), 0)
    out = capsys.readouterr().out
    assert out == (
        "0 <= 69.0\n"
        "left: 2.0\n"
        "right: 1 <= 5.5\n"
        "  left: 0.0\n"
        "  right: 1.0\n"
    )