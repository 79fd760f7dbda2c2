"""
Visitors over document nodes.

Each node's `accept_visitor` calls the one handler for its own variant and
does not descend into children. Visitors that want the whole tree dispatch
into children themselves.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .dom import (
    ButtonNode,
    ContainerNode,
    ElementNode,
    ListElementNode,
    ListItemNode,
    Node,
    SelectNode,
    TextInputNode,
    TextNode,
)


class NodeVisitor(ABC):
    """One handler per node variant."""

    @abstractmethod
    def visit_element(self, node: ElementNode) -> Any: ...

    @abstractmethod
    def visit_text(self, node: TextNode) -> Any: ...

    @abstractmethod
    def visit_list_element(self, node: ListElementNode) -> Any: ...

    @abstractmethod
    def visit_list_item(self, node: ListItemNode) -> Any: ...

    @abstractmethod
    def visit_text_input(self, node: TextInputNode) -> Any: ...

    @abstractmethod
    def visit_button(self, node: ButtonNode) -> Any: ...

    @abstractmethod
    def visit_select(self, node: SelectNode) -> Any: ...


class RenderingVisitor(NodeVisitor):
    """
    Records the outer HTML of every node it visits.

    With recursive=True, visiting a container also visits its children
    (in document order, after the container itself).
    """

    def __init__(self, recursive: bool = False):
        self.recursive = recursive
        self.rendered: list[str] = []

    def _record(self, node: Node) -> str:
        html = node.render_outer()
        self.rendered.append(html)
        return html

    def _record_container(self, node: ContainerNode) -> str:
        html = self._record(node)
        if self.recursive:
            for child in node.children:
                child.accept_visitor(self)
        return html

    def visit_element(self, node: ElementNode) -> str:
        return self._record_container(node)

    def visit_text(self, node: TextNode) -> str:
        return self._record(node)

    def visit_list_element(self, node: ListElementNode) -> str:
        return self._record_container(node)

    def visit_list_item(self, node: ListItemNode) -> str:
        return self._record_container(node)

    def visit_text_input(self, node: TextInputNode) -> str:
        return self._record(node)

    def visit_button(self, node: ButtonNode) -> str:
        return self._record(node)

    def visit_select(self, node: SelectNode) -> str:
        return self._record(node)
