"""
DOM - Document Object Model for lighthtml

A small, mutable tree of HTML-like nodes. Every node can render itself two
ways: outer HTML (its own markup plus children) and inner HTML (children's
content only). A node's mode selects which of the two `render()` returns.

Key invariants:
- Containers (element, list, list item) exclusively own their children.
- Nodes compare by identity, so removing a child removes that exact object.
- Changing a container's mode changes every current descendant immediately.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from .lifecycle import ElementLifecycleHooks, LifecycleHooks, TextLifecycleHooks

if TYPE_CHECKING:
    from .visitor import NodeVisitor

logger = logging.getLogger(__name__)

CLOSING = "closing"


class Mode(Enum):
    """Rendering mode of a node."""
    VIEW = "view"
    EDIT = "edit"

    @classmethod
    def parse(cls, name: str) -> Mode:
        """Parse a mode name like 'view' or 'EDIT'."""
        try:
            return cls(name.strip().lower())
        except ValueError as e:
            choices = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown mode: {name!r}. Expected one of: {choices}") from e


@dataclass(eq=False)
class Node(ABC):
    """A member of the document tree."""
    mode: Mode = field(default=Mode.VIEW, init=False)

    @abstractmethod
    def render_outer(self) -> str:
        """Full markup, including this node's own tag."""
        ...

    @abstractmethod
    def render_inner(self) -> str:
        """Content only, without this node's own tag."""
        ...

    @abstractmethod
    def accept_visitor(self, visitor: NodeVisitor) -> Any:
        """Dispatch to the visitor handler for this node's variant."""
        ...

    def child_nodes(self) -> Sequence[Node]:
        """Owned children in document order. Leaves have none."""
        return ()

    def render(self) -> str:
        """Render the way the current mode asks for."""
        if self.mode is Mode.EDIT:
            return self.render_inner()
        return self.render_outer()

    def set_mode(self, mode: Mode) -> None:
        """Move this node and all of its descendants to `mode`."""
        if self.mode is not mode:
            logger.info("%s: transition to %s mode", type(self).__name__, mode.value)
        self._apply_mode(mode)

    def set_edit_mode(self) -> None:
        self.set_mode(Mode.EDIT)

    def set_view_mode(self) -> None:
        self.set_mode(Mode.VIEW)

    def _apply_mode(self, mode: Mode) -> None:
        self.mode = mode
        for child in self.child_nodes():
            child._apply_mode(mode)


class ContainerNode(Node):
    """Shared behaviour of nodes that own a list of children."""
    children: list[Node]

    def child_nodes(self) -> Sequence[Node]:
        return self.children

    def add_child(self, child: Node | None) -> Node | None:
        """Append a child and return it for chaining. None is ignored."""
        if child is not None:
            self.children.append(child)
        return child

    def remove_child(self, child: Node | None) -> None:
        """Remove the first occurrence of `child`, if present."""
        for i, existing in enumerate(self.children):
            if existing is child:
                del self.children[i]
                return

    def render_inner(self) -> str:
        return "".join(child.render_inner() for child in self.children)


def _wrap_children(tag: str, children: Sequence[Node]) -> str:
    body = "".join(f"{child.render_outer()}\n" for child in children)
    return f"<{tag}>\n{body}</{tag}>"


@dataclass(eq=False)
class TextNode(Node):
    """Plain text. Renders as itself in both forms."""
    text: str
    hooks: LifecycleHooks = field(default_factory=TextLifecycleHooks, repr=False)

    def render_outer(self) -> str:
        return self.text

    def render_inner(self) -> str:
        return self.text

    def run_lifecycle_hooks(self) -> None:
        self.hooks.run_lifecycle_hooks()

    def accept_visitor(self, visitor: NodeVisitor) -> Any:
        return visitor.visit_text(self)


@dataclass(eq=False)
class ElementNode(ContainerNode):
    """
    A tag with classes, attributes and children.

    `closing` controls the end tag: only the value "closing" emits `</tag>`,
    anything else (e.g. "self") leaves it out.
    """
    tag: str
    display: str = "block"
    closing: str = CLOSING
    css_classes: list[str] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)
    hooks: LifecycleHooks = field(default_factory=ElementLifecycleHooks, repr=False)

    def add_attribute(self, key: str, value: str) -> None:
        """Set an attribute, replacing any existing value for `key`."""
        self.attributes[key] = value

    def remove_attribute(self, key: str) -> None:
        self.attributes.pop(key, None)

    def add_class(self, name: str) -> None:
        self.css_classes.append(name)

    def remove_class(self, name: str) -> None:
        if name in self.css_classes:
            self.css_classes.remove(name)

    def run_lifecycle_hooks(self) -> None:
        self.hooks.run_lifecycle_hooks()

    def render_outer(self) -> str:
        self.run_lifecycle_hooks()
        classes = " ".join(self.css_classes)
        parts = [f'<{self.tag} class="{classes}" display="{self.display}" closing="{self.closing}"']
        parts.extend(f' {key}="{value}"' for key, value in self.attributes.items())
        parts.append(">\n")
        # Children are indented one level, one per line
        parts.extend(f"\t{child.render_outer()}\n" for child in self.children)
        if self.closing == CLOSING:
            parts.append(f"</{self.tag}>")
        return "".join(parts)

    def accept_visitor(self, visitor: NodeVisitor) -> Any:
        return visitor.visit_element(self)


@dataclass(eq=False)
class ListElementNode(ContainerNode):
    """An ordered ("ol") or unordered ("ul") list."""
    list_type: str = "ul"
    children: list[Node] = field(default_factory=list)

    def render_outer(self) -> str:
        return _wrap_children(self.list_type, self.children)

    def accept_visitor(self, visitor: NodeVisitor) -> Any:
        return visitor.visit_list_element(self)


@dataclass(eq=False)
class ListItemNode(ContainerNode):
    children: list[Node] = field(default_factory=list)

    def render_outer(self) -> str:
        return _wrap_children("li", self.children)

    def accept_visitor(self, visitor: NodeVisitor) -> Any:
        return visitor.visit_list_item(self)


@dataclass(eq=False)
class TextInputNode(Node):
    """A single-line text field. Form controls have no inner content."""
    name: str

    def render_outer(self) -> str:
        return f'<input type="text" name="{self.name}">'

    def render_inner(self) -> str:
        return ""

    def accept_visitor(self, visitor: NodeVisitor) -> Any:
        return visitor.visit_text_input(self)


@dataclass(eq=False)
class ButtonNode(Node):
    label: str

    def render_outer(self) -> str:
        return f"<button>{self.label}</button>"

    def render_inner(self) -> str:
        return ""

    def accept_visitor(self, visitor: NodeVisitor) -> Any:
        return visitor.visit_button(self)


@dataclass(eq=False)
class SelectNode(Node):
    options: list[str] = field(default_factory=list)

    def render_outer(self) -> str:
        options = "".join(f"<option>{option}</option>" for option in self.options)
        return f"<select>{options}</select>"

    def render_inner(self) -> str:
        return ""

    def accept_visitor(self, visitor: NodeVisitor) -> Any:
        return visitor.visit_select(self)
