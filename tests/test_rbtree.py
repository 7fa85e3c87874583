import random

import pytest

from coursealgo.rbnode import Color, node_depth
from coursealgo.rbtree import RedBlackTree


def _black_height(node):
    """Check red-black invariants below ``node`` and return its black height."""
    if node is None:
        return 1
    for child in (node.left, node.right):
        if child is not None:
            assert child.parent is node
            if node.color is Color.RED:
                assert child.color is Color.BLACK
    left = _black_height(node.left)
    right = _black_height(node.right)
    assert left == right
    return left + (1 if node.color is Color.BLACK else 0)


def _check_tree(tree):
    if tree.root is not None:
        assert tree.root.parent is None
        assert tree.root.color is Color.BLACK
    _black_height(tree.root)
    keys = [node.key for node in tree]
    assert keys == sorted(keys)
    assert len(keys) == len(tree)


def test_empty_tree():
    tree = RedBlackTree()
    assert len(tree) == 0
    assert list(tree) == []
    assert tree.root is None


def test_first_insert_becomes_black_root():
    tree = RedBlackTree()
    node, duplicate = tree.insert((12210795, "Algorithm"), "Kim")
    assert duplicate is False
    assert tree.root is node
    assert node.color is Color.BLACK
    assert node_depth(node) == 0
    assert node.payload == "Kim"


def test_duplicate_returns_existing_node_unchanged():
    tree = RedBlackTree()
    first, _ = tree.insert((12210795, "Algorithm"), "Kim")
    tree.insert((12200795, "Algorithm"), "Lee")
    again, duplicate = tree.insert((12210795, "Algorithm"), "Other")
    assert duplicate is True
    assert again is first
    assert again.payload == "Kim"
    assert len(tree) == 2


@pytest.mark.parametrize(
    "keys",
    [
        [(1, "a"), (2, "a"), (3, "a")],  # RR
        [(3, "a"), (2, "a"), (1, "a")],  # LL
        [(1, "a"), (3, "a"), (2, "a")],  # RL
        [(3, "a"), (1, "a"), (2, "a")],  # LR
    ],
)
def test_three_inserts_rotate_middle_to_root(keys):
    tree = RedBlackTree()
    for key in keys:
        tree.insert(key, None)
    assert tree.root.key == (2, "a")
    assert tree.root.left.key == (1, "a")
    assert tree.root.right.key == (3, "a")
    assert tree.root.left.color is Color.RED
    assert tree.root.right.color is Color.RED
    _check_tree(tree)


def test_recolor_keeps_root_black():
    tree = RedBlackTree()
    for key in [(2, "x"), (1, "x"), (3, "x"), (4, "x")]:
        tree.insert(key, None)
    assert tree.root.key == (2, "x")
    assert tree.root.color is Color.BLACK
    assert tree.root.left.color is Color.BLACK
    assert tree.root.right.color is Color.BLACK
    _check_tree(tree)


def test_subject_breaks_ties_on_same_id():
    tree = RedBlackTree()
    for subject in ["Misaso", "Algorithm", "Database"]:
        tree.insert((12210795, subject), None)
    assert [node.key[1] for node in tree] == ["Algorithm", "Database", "Misaso"]


def test_ascending_inserts_stay_balanced():
    tree = RedBlackTree()
    for sid in range(200):
        tree.insert((sid, "Algorithm"), sid)
    _check_tree(tree)
    assert len(tree) == 200
    assert max(node_depth(node) for node in tree) <= 2 * 8


def test_random_inserts_hold_invariants():
    rng = random.Random(7)
    tree = RedBlackTree()
    seen = set()
    for _ in range(500):
        key = (rng.randrange(100), rng.choice(["A", "B", "C"]))
        _, duplicate = tree.insert(key, None)
        assert duplicate is (key in seen)
        seen.add(key)
        _check_tree(tree)
    assert sorted(seen) == [node.key for node in tree]


def test_iteration_yields_payloads_with_keys():
    tree = RedBlackTree()
    data = {(5, "a"): "five", (1, "b"): "one", (3, "c"): "three"}
    for key, payload in data.items():
        tree.insert(key, payload)
    assert {node.key: node.payload for node in tree} == data