"""
Lifecycle hooks for document nodes.

Template Method: `run_lifecycle_hooks` fixes the order of the steps, each
subclass decides what a step does. The built-in hooks only emit debug logs.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class LifecycleHooks(ABC):
    """Base class for node lifecycle hooks."""

    @abstractmethod
    def on_created(self) -> None: ...

    @abstractmethod
    def on_inserted(self) -> None: ...

    @abstractmethod
    def on_removed(self) -> None: ...

    @abstractmethod
    def on_styles_applied(self) -> None: ...

    @abstractmethod
    def on_class_list_applied(self) -> None: ...

    @abstractmethod
    def on_text_rendered(self) -> None: ...

    def run_lifecycle_hooks(self) -> None:
        """Run every lifecycle step in its fixed order."""
        self.on_created()
        self.on_inserted()
        self.on_removed()
        self.on_styles_applied()
        self.on_class_list_applied()
        self.on_text_rendered()


class ElementLifecycleHooks(LifecycleHooks):
    def on_created(self) -> None:
        logger.debug("Element created.")

    def on_inserted(self) -> None:
        logger.debug("Element inserted.")

    def on_removed(self) -> None:
        logger.debug("Element removed.")

    def on_styles_applied(self) -> None:
        logger.debug("Styles applied to element.")

    def on_class_list_applied(self) -> None:
        logger.debug("Class list applied to element.")

    def on_text_rendered(self) -> None:
        logger.debug("Text rendered inside element.")


class TextLifecycleHooks(LifecycleHooks):
    def on_created(self) -> None:
        logger.debug("Text node created.")

    def on_inserted(self) -> None:
        logger.debug("Text node inserted.")

    def on_removed(self) -> None:
        logger.debug("Text node removed.")

    def on_styles_applied(self) -> None:
        logger.debug("Styles applied to text node.")

    def on_class_list_applied(self) -> None:
        logger.debug("Class list applied to text node.")

    def on_text_rendered(self) -> None:
        logger.debug("Text node rendered.")
