"""
Rendering context with view and edit states.

The context holds one state object at a time. The state decides how a node
is rendered (outer HTML in view, inner HTML in edit) and whether
attribute edits are allowed (edit only).
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from .dom import ElementNode, Mode, Node

logger = logging.getLogger(__name__)


class HtmlState(ABC):
    """A state of the rendering context."""
    mode: Mode

    @abstractmethod
    def render_html(self, node: Node) -> str: ...

    @abstractmethod
    def switch_to_view_mode(self, node: Node) -> None: ...

    @abstractmethod
    def switch_to_edit_mode(self, node: Node) -> None: ...

    @property
    def name(self) -> str:
        return type(self).__name__


class ViewState(HtmlState):
    mode = Mode.VIEW

    def render_html(self, node: Node) -> str:
        return node.render_outer()

    def switch_to_view_mode(self, node: Node) -> None:
        pass  # already viewing

    def switch_to_edit_mode(self, node: Node) -> None:
        node.set_edit_mode()


class EditState(HtmlState):
    mode = Mode.EDIT

    def render_html(self, node: Node) -> str:
        return node.render_inner()

    def switch_to_view_mode(self, node: Node) -> None:
        node.set_view_mode()

    def switch_to_edit_mode(self, node: Node) -> None:
        pass  # already editing


def state_for(mode: Mode) -> HtmlState:
    """Create the state object matching a node mode."""
    return EditState() if mode is Mode.EDIT else ViewState()


class HtmlContext:
    """Renders nodes according to its current state. Starts in view state."""

    def __init__(self, state: HtmlState | None = None):
        self._state: HtmlState
        self.transition_to(state or ViewState())

    @property
    def state(self) -> HtmlState:
        return self._state

    @property
    def mode(self) -> Mode:
        return self._state.mode

    def transition_to(self, state: HtmlState) -> None:
        logger.info("Context: transition to %s.", state.name)
        self._state = state

    def render_html(self, node: Node) -> str:
        return self._state.render_html(node)

    def switch_to_view_mode(self, node: Node) -> None:
        self._state.switch_to_view_mode(node)

    def switch_to_edit_mode(self, node: Node) -> None:
        self._state.switch_to_edit_mode(node)

    def add_attribute(self, node: ElementNode, key: str, value: str) -> bool:
        """Set an attribute. Only allowed in edit state; returns whether applied."""
        if self.mode is not Mode.EDIT:
            logger.warning("Attributes can only be added in edit mode.")
            return False
        node.add_attribute(key, value)
        return True

    def remove_attribute(self, node: ElementNode, key: str) -> bool:
        """Remove an attribute. Only allowed in edit state; returns whether applied."""
        if self.mode is not Mode.EDIT:
            logger.warning("Attributes can only be removed in edit mode.")
            return False
        node.remove_attribute(key)
        return True
