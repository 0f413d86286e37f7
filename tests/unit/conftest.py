"""Shared test fixtures."""

import pytest

from vdom_todo.app import TodoApp
from vdom_todo.models.node import Node
from vdom_todo.surface.memory import MemorySurface
from tests.unit.fakes import RecordingSurface


def make_tree() -> Node:
    """Return a small fixed tree.

    root (div)
      a (li) "first"
        a1 (li) "first child"
      b (li) "second"
    """
    return Node(
        id="root",
        type="div",
        attributes={"class": "list-group"},
        children=[
            Node(
                id="a",
                type="li",
                attributes={"class": "list-group-item"},
                text="first",
                children=[Node(id="a1", type="li", text="first child")],
            ),
            Node(id="b", type="li", attributes={"class": "list-group-item"}, text="second"),
        ],
    )


@pytest.fixture
def tree() -> Node:
    return make_tree()


@pytest.fixture
def recording_surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def memory_surface() -> MemorySurface:
    return MemorySurface()


@pytest.fixture
def todo(memory_surface: MemorySurface) -> TodoApp:
    """Return a mounted todo app with an empty root."""
    return TodoApp(memory_surface)
