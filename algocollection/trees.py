"""Binary and n-ary trees: traversal, path sums and level-wise reading."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

__all__ = [
    "BinaryNode",
    "Node",
    "level_order",
    "tree_height",
    "root_to_leaf_sums",
    "roots_match",
    "read_tree_level_wise",
]


@dataclass
class BinaryNode:
    """A binary tree node holding an integer."""

    data: int
    left: BinaryNode | None = None
    right: BinaryNode | None = None


@dataclass
class Node:
    """A tree node with any number of ordered children."""

    data: int
    children: list[Node] = field(default_factory=list)


def level_order(root: BinaryNode | None) -> list[int]:
    """Node values level by level, left to right within a level."""
    if root is None:
        return []
    result: list[int] = []
    pending: deque[BinaryNode] = deque([root])
    while pending:
        node = pending.popleft()
        result.append(node.data)
        pending.extend(child for child in (node.left, node.right) if child is not None)
    return result


def tree_height(root: BinaryNode | None) -> int:
    """Number of nodes on the longest path from the root down to a leaf."""
    if root is None:
        return 0
    return 1 + max(tree_height(root.left), tree_height(root.right))


def root_to_leaf_sums(root: BinaryNode | None) -> list[int]:
    """Sum of each root-to-leaf path, leaves taken from left to right."""

    def walk(node: BinaryNode | None, total: int) -> Iterator[int]:
        if node is None:
            return
        total += node.data
        if node.left is None and node.right is None:
            yield total
            return
        yield from walk(node.left, total)
        yield from walk(node.right, total)

    return list(walk(root, 0))


def roots_match(first: Node | None, second: Node | None) -> bool:
    """Compare two trees by their roots, then by their first children.

    Two missing trees do not match. Equal root values match at once; otherwise
    the trees match only if they have the same number of children and their
    first children match.
    """
    if first is None or second is None:
        return False
    if first.data == second.data:
        return True
    if len(first.children) != len(second.children) or not first.children:
        return False
    return roots_match(first.children[0], second.children[0])


def read_tree_level_wise(tokens: Iterable[int | str]) -> Node:
    """Build a tree from a root value followed, per node in level order, by a
    child count and the children's values.

    A string is split on whitespace. Raises ``ValueError`` if the input ends early.
    """
    source = tokens.split() if isinstance(tokens, str) else tokens
    stream = iter(source)

    def take() -> int:
        try:
            return int(next(stream))
        except StopIteration:
            raise ValueError("tree description ended early") from None

    root = Node(take())
    pending: deque[Node] = deque([root])
    while pending:
        parent = pending.popleft()
        for _ in range(take()):
            child = Node(take())
            parent.children.append(child)
            pending.append(child)
    return root