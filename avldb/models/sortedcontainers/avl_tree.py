"""
AVL Tree implementation for key-ordered record storage.

Keeps sibling subtree heights within one of each other, so search,
insert, and delete stay O(log N) regardless of insertion order.
"""

from collections.abc import AsyncIterator, Iterator
from dataclasses import dataclass

from avldb.interfaces.sorted_container import SortedContainer
from avldb.models.record import Record


@dataclass(eq=False)
class Node:
    """Node in the AVL Tree."""

    record: Record
    left: "Node | None" = None
    right: "Node | None" = None
    height: int = 1


class AVLTree(SortedContainer):
    """
    AVL Tree implementation of SortedContainer.

    Properties maintained:
    1. Left subtree keys are strictly less, right subtree keys strictly greater
    2. For every node, |height(left) - height(right)| <= 1
    3. Every node caches 1 + max(height(left), height(right)); absent is 0

    Nodes carry no parent pointers; deletion re-descends from the root to
    collect ancestors.
    """

    def __init__(self) -> None:
        self._root: Node | None = None
        self._size: int = 0
        self._last_search_comparisons: int = 0

    @property
    def root(self) -> Node | None:
        return self._root

    @property
    def last_search_comparisons(self) -> int:
        """Number of nodes visited by the most recent search."""
        return self._last_search_comparisons

    def insert(self, record: Record) -> bool:
        """Insert a record in key order and rebalance on the way up. O(log N)"""
        if self._find_node(record.key) is not None:
            # Duplicate keys are never linked in
            return False

        self._root = self._insert_helper(self._root, record)
        self._size += 1
        return True

    def search(self, key: str, value: int | None = None) -> Record | None:
        """Return the record whose key matches, or None. O(log N)"""
        self._last_search_comparisons = 0
        current = self._root
        while current is not None:
            self._last_search_comparisons += 1
            if key < current.record.key:
                current = current.left
            elif key > current.record.key:
                current = current.right
            else:
                return current.record
        return None

    def delete(self, key: str, value: int) -> bool:
        """Remove the record under key when its value matches too. O(log N)"""
        node = self._find_node(key)
        if node is None or node.record.value != value:
            return False

        if node.left is not None and node.right is not None:
            # Two children: adopt the in-order successor's record, then
            # unlink the successor instead. It has no left child.
            successor = self.min_value_node(node.right)
            node.record = successor.record
            node = successor

        path = self._path_to(node)
        child = node.left if node.left is not None else node.right
        self._replace_child(path[-1] if path else None, node, child)
        node.left = None
        node.right = None

        self._rebalance_path(path)
        self._size -= 1
        return True

    def has(self, key: str) -> bool:
        return self._find_node(key) is not None

    def size(self) -> int:
        return self._size

    def height(self) -> int:
        return self.node_height(self._root)

    def clear(self) -> None:
        """Drop the root and reset all counters."""
        self._root = None
        self._size = 0
        self._last_search_comparisons = 0

    def __iter__(self) -> Iterator[Record]:
        return self.iterator()

    def iterator(
        self, start: str | None = None, end: str | None = None
    ) -> Iterator[Record]:
        return _RangeIterator(self._root, start, end)

    def __aiter__(self) -> AsyncIterator[Record]:
        return self.async_iterator()

    def async_iterator(
        self, start: str | None = None, end: str | None = None
    ) -> AsyncIterator[Record]:
        return _AsyncRangeIterator(self._root, start, end)

    @staticmethod
    def node_height(node: Node | None) -> int:
        return node.height if node is not None else 0

    @staticmethod
    def balance_factor(node: Node | None) -> int:
        """height(left) - height(right); 0 for an absent node."""
        if node is None:
            return 0
        return AVLTree.node_height(node.left) - AVLTree.node_height(node.right)

    @staticmethod
    def min_value_node(node: Node) -> Node:
        """Return the leftmost node of the subtree rooted at node."""
        while node.left is not None:
            node = node.left
        return node

    def rotate_right(self, y: Node | None) -> Node | None:
        """
        Right rotation.

        y's left child takes y's place, y becomes its right child, and the
        promoted node's former right subtree becomes y's left subtree.

        Returns:
            The new subtree root, or y unchanged if it has no left child.
        """
        if y is None or y.left is None:
            return y

        promoted = y.left
        y.left = promoted.right
        promoted.right = y

        self._update_height(y)
        self._update_height(promoted)
        return promoted

    def rotate_left(self, x: Node | None) -> Node | None:
        """Left rotation, the mirror of rotate_right."""
        if x is None or x.right is None:
            return x

        promoted = x.right
        x.right = promoted.left
        promoted.left = x

        self._update_height(x)
        self._update_height(promoted)
        return promoted

    def rebalance(self, node: Node | None) -> Node | None:
        """
        Restore the AVL property at node.

        The node's height is recomputed before its balance factor is read.

        Returns:
            The root of the (possibly rotated) subtree.
        """
        if node is None:
            return None

        self._update_height(node)
        balance = self.balance_factor(node)

        # Left-Left
        if balance > 1 and self.balance_factor(node.left) >= 0:
            return self.rotate_right(node)

        # Right-Right
        if balance < -1 and self.balance_factor(node.right) <= 0:
            return self.rotate_left(node)

        # Left-Right
        if balance > 1 and self.balance_factor(node.left) < 0:
            node.left = self.rotate_left(node.left)
            return self.rotate_right(node)

        # Right-Left
        if balance < -1 and self.balance_factor(node.right) > 0:
            node.right = self.rotate_right(node.right)
            return self.rotate_left(node)

        return node

    def _insert_helper(self, node: Node | None, record: Record) -> Node:
        """Recursive insert; every node on the path is rebalanced."""
        if node is None:
            return Node(record=record)

        if record.key < node.record.key:
            node.left = self._insert_helper(node.left, record)
        else:
            node.right = self._insert_helper(node.right, record)

        return self.rebalance(node)

    def _find_node(self, key: str) -> Node | None:
        """Find node by key without touching the comparison counter."""
        current = self._root
        while current is not None:
            if key < current.record.key:
                current = current.left
            elif key > current.record.key:
                current = current.right
            else:
                return current
        return None

    def _path_to(self, target: Node) -> list[Node]:
        """
        Collect the ancestors of target, root first.

        Equal keys descend right, which finds an in-order successor even
        after its record has been copied into the node above it.
        """
        path: list[Node] = []
        key = target.record.key
        current = self._root
        while current is not None and current is not target:
            path.append(current)
            current = current.left if key < current.record.key else current.right
        return path

    def _replace_child(
        self, parent: Node | None, node: Node, child: Node | None
    ) -> None:
        """Link child where node used to hang under parent."""
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def _rebalance_path(self, path: list[Node]) -> None:
        """Rebalance ancestors bottom-up, relinking any rotated subtree."""
        for i in range(len(path) - 1, -1, -1):
            ancestor = path[i]
            subtree = self.rebalance(ancestor)
            if subtree is not ancestor:
                self._replace_child(path[i - 1] if i > 0 else None, ancestor, subtree)

    def _update_height(self, node: Node) -> None:
        node.height = 1 + max(self.node_height(node.left), self.node_height(node.right))


class _RangeIterator(Iterator[Record]):
    """Iterator for key-range scans on the AVL Tree."""

    def __init__(self, root: Node | None, start: str | None, end: str | None) -> None:
        self._stack: list[Node] = []
        self._end = end

        # Initialize stack with nodes >= start
        self._push_left_path(root, start)

    def __iter__(self) -> Iterator[Record]:
        return self

    def __next__(self) -> Record:
        if not self._stack:
            raise StopIteration

        node = self._stack.pop()

        # Check end bound
        if self._end is not None and node.record.key >= self._end:
            self._stack.clear()
            raise StopIteration

        # Push right subtree's left path
        self._push_left_path(node.right, None)

        return node.record

    def _push_left_path(self, node: Node | None, start: str | None) -> None:
        """Push leftmost path to stack, respecting start bound."""
        while node:
            if start is not None and node.record.key < start:
                # Skip nodes less than start
                node = node.right
            else:
                self._stack.append(node)
                node = node.left


class _AsyncRangeIterator(AsyncIterator[Record]):
    """Async iterator for key-range scans on the AVL Tree (in-memory, no I/O)."""

    def __init__(self, root: Node | None, start: str | None, end: str | None) -> None:
        self._inner = _RangeIterator(root, start, end)

    def __aiter__(self) -> "_AsyncRangeIterator":
        return self

    async def __anext__(self) -> Record:
        try:
            return next(self._inner)
        except StopIteration:
            raise StopAsyncIteration from None
