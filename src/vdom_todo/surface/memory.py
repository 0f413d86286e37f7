"""In-memory live surface: realizes nodes as live elements with selection and triggers."""

import io
from collections.abc import Callable
from dataclasses import dataclass, field

from loguru import logger

from vdom_todo.config import ACTIONABLE_TYPES, CREATED_CLASS, SELECTED_CLASS
from vdom_todo.models.node import AttributeValue, Node

NodeCallback = Callable[[str], object]


@dataclass(eq=False)
class LiveElement:
    """A realized element on the memory surface.

    Elements compare by identity, so a handle is "the same element" only if
    it was never destroyed and recreated.
    """

    tag: str
    node_id: str | None
    text: str = ""
    attributes: dict[str, AttributeValue] = field(default_factory=dict)
    classes: set[str] = field(default_factory=set)
    children: list["LiveElement"] = field(default_factory=list)
    parent: "LiveElement | None" = None
    triggers: dict[str, Callable[[], object]] = field(default_factory=dict)

    @property
    def selected(self) -> bool:
        return SELECTED_CLASS in self.classes

    def walk(self) -> list["LiveElement"]:
        """Return this element and all descendants in document order."""
        out = [self]
        for child in self.children:
            out.extend(child.walk())
        return out


class MemorySurface:
    """Keep a tree of ``LiveElement`` objects in sync with reconciler calls.

    Several live elements may briefly carry the same id while a positional
    replace is in progress. Lookups and removals then act on the earliest
    created one, the way an id selector picks the first match in document
    order.
    """

    def __init__(self, *, actionable_types: frozenset[str] = ACTIONABLE_TYPES) -> None:
        self.actionable_types = actionable_types
        self._container = LiveElement(tag="#app", node_id=None)
        self._by_id: dict[str, list[LiveElement]] = {}

        self.on_select: NodeCallback | None = None
        self.on_edit: NodeCallback | None = None
        self.on_remove: NodeCallback | None = None

    def bind(
        self,
        *,
        on_select: NodeCallback | None = None,
        on_edit: NodeCallback | None = None,
        on_remove: NodeCallback | None = None,
    ) -> None:
        """Register event handlers for clicks and triggers."""
        self.on_select = on_select
        self.on_edit = on_edit
        self.on_remove = on_remove

    @property
    def container(self) -> LiveElement:
        return self._container

    def create(self, node: Node, parent: LiveElement) -> LiveElement:
        element = LiveElement(
            tag=node.type,
            node_id=node.id,
            text=node.text,
            attributes=dict(node.attributes),
            classes={CREATED_CLASS},
            parent=parent,
        )
        parent.children.append(element)
        self._by_id.setdefault(node.id, []).append(element)

        if node.type in self.actionable_types:
            node_id = node.id
            element.triggers["edit"] = lambda: self._fire(self.on_edit, node_id)
            element.triggers["remove"] = lambda: self._fire(self.on_remove, node_id)

        for child in node.children:
            self.create(child, element)
        return element

    def remove(self, node_id: str) -> None:
        element = self.find(node_id)
        if element is None:
            logger.debug("Nothing to remove for {}", node_id)
            return

        if element.parent is not None:
            element.parent.children.remove(element)
            element.parent = None
        for gone in element.walk():
            if gone.node_id is None:
                continue
            same_id = self._by_id.get(gone.node_id, [])
            self._by_id[gone.node_id] = [e for e in same_id if e is not gone]
            if not self._by_id[gone.node_id]:
                del self._by_id[gone.node_id]

    def set_text(self, node_id: str, text: str) -> None:
        element = self.find(node_id)
        if element is not None:
            element.text = text

    def set_attribute(self, node_id: str, key: str, value: AttributeValue) -> None:
        element = self.find(node_id)
        if element is not None:
            element.attributes[key] = value

    def find(self, node_id: str) -> LiveElement | None:
        elements = self._by_id.get(node_id)
        return elements[0] if elements else None

    def click(self, node_id: str) -> bool:
        """Select the element for ``node_id``, deselecting every other element.

        Returns:
            False if no live element exists for ``node_id``.
        """
        element = self.find(node_id)
        if element is None:
            return False
        for other in self._container.walk():
            other.classes.discard(SELECTED_CLASS)
        element.classes.add(SELECTED_CLASS)
        self._fire(self.on_select, node_id)
        return True

    def press(self, node_id: str, action: str) -> bool:
        """Fire the ``action`` trigger ("edit" or "remove") of an element.

        Returns:
            False if the element does not exist or has no such trigger.
        """
        element = self.find(node_id)
        if element is None or action not in element.triggers:
            return False
        element.triggers[action]()
        return True

    def selected_id(self) -> str | None:
        for element in self._container.walk():
            if element.selected:
                return element.node_id
        return None

    def render(self) -> str:
        """Render the live elements as indented text, one element per line."""
        out = io.StringIO()
        for child in self._container.children:
            self._render(out, child, depth=0)
        return out.getvalue()

    def _render(self, out: io.StringIO, element: LiveElement, *, depth: int) -> None:
        indent = "  " * depth
        marker = "* " if element.selected else ""
        attrs = "".join(f" {k}={v!r}" for k, v in sorted(element.attributes.items()))
        line = f"{indent}{marker}<{element.tag} id={element.node_id}{attrs}>"
        if element.text:
            line += f" {element.text}"
        if element.triggers:
            line += " [" + "] [".join(sorted(element.triggers)) + "]"
        out.write(line + "\n")
        for child in element.children:
            self._render(out, child, depth=depth + 1)

    @staticmethod
    def _fire(callback: NodeCallback | None, node_id: str) -> None:
        if callback is not None:
            callback(node_id)
