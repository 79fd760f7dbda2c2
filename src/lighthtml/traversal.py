"""
Tree traversal for lighthtml.

Both iterators compute the full visiting order when they are constructed,
so later changes to the tree are not reflected and a consumed iterator
cannot be restarted. `next()` returns None once exhausted instead of raising.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterator

from .dom import ElementNode, Node


class NodeIterator(ABC):
    """A one-shot cursor over a snapshot of the tree."""

    def __init__(self, root: Node):
        self._pending: deque[Node] = deque(self._order(root))

    @staticmethod
    @abstractmethod
    def _order(root: Node) -> list[Node]:
        """Compute the visiting order starting at `root`."""
        ...

    def has_next(self) -> bool:
        return bool(self._pending)

    def next(self) -> Node | None:
        """Return the next node, or None when nothing is left."""
        if self._pending:
            return self._pending.popleft()
        return None

    def __iter__(self) -> Iterator[Node]:
        return self

    def __next__(self) -> Node:
        node = self.next()
        if node is None:
            raise StopIteration
        return node

    def __len__(self) -> int:
        """Number of nodes not yet returned."""
        return len(self._pending)


class DepthFirstIterator(NodeIterator):
    """
    Pre-order walk driven by a LIFO stack.

    Children are pushed in document order, so the last child's subtree is
    visited before its earlier siblings: root[A, B[C]] gives root, B, C, A.
    """

    @staticmethod
    def _order(root: Node) -> list[Node]:
        order: list[Node] = []
        stack: list[Node] = [root]
        while stack:
            node = stack.pop()
            order.append(node)
            stack.extend(node.child_nodes())
        return order


class BreadthFirstIterator(NodeIterator):
    """Level-order walk driven by a FIFO queue; sibling order is kept."""

    @staticmethod
    def _order(root: Node) -> list[Node]:
        order: list[Node] = []
        queue: deque[Node] = deque([root])
        while queue:
            node = queue.popleft()
            order.append(node)
            queue.extend(node.child_nodes())
        return order


STRATEGIES: dict[str, type[NodeIterator]] = {
    "depth": DepthFirstIterator,
    "breadth": BreadthFirstIterator,
}


def create_iterator(root: Node, strategy: str = "depth") -> NodeIterator:
    """Build an iterator by strategy name ('depth' or 'breadth')."""
    iterator_cls = STRATEGIES.get(strategy)
    if iterator_cls is None:
        choices = ", ".join(STRATEGIES)
        raise ValueError(f"Unknown traversal strategy: {strategy!r}. Expected one of: {choices}")
    return iterator_cls(root)


def find_elements(root: Node, tag: str) -> list[ElementNode]:
    """Collect elements with the given tag, level by level."""
    return [
        node for node in BreadthFirstIterator(root)
        if isinstance(node, ElementNode) and node.tag == tag
    ]


def find_first(root: Node, tag: str) -> ElementNode | None:
    """Find the first element with the given tag in level order."""
    matches = find_elements(root, tag)
    return matches[0] if matches else None
