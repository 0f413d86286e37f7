"""Protocols for the live surface the reconciler drives."""

from typing import Any, Protocol, runtime_checkable

from vdom_todo.models.node import AttributeValue, Node


@runtime_checkable
class SurfaceProtocol(Protocol):
    """Protocol for live presentation surfaces.

    Handles are opaque to the reconciler; it only passes them back to the
    surface as parents for newly created elements.
    """

    @property
    def container(self) -> Any:
        """Handle of the element the root node is mounted under."""
        ...

    def create(self, node: Node, parent: Any) -> Any:
        """Realize ``node`` and all of its descendants under ``parent``."""
        ...

    def remove(self, node_id: str) -> None:
        """Detach and destroy the live element for ``node_id`` and its descendants."""
        ...

    def set_text(self, node_id: str, text: str) -> None:
        """Replace the text of the live element for ``node_id``."""
        ...

    def set_attribute(self, node_id: str, key: str, value: AttributeValue) -> None:
        """Set one attribute on the live element for ``node_id``."""
        ...

    def find(self, node_id: str) -> Any | None:
        """Return the live handle for ``node_id``, or None if there is none."""
        ...
