"""Tests for the text tree diagram."""

from vdom_todo.core.tree.diagram import render_tree_diagram
from vdom_todo.models.node import Node


def test_render_full_tree(tree: Node) -> None:
    assert render_tree_diagram(tree) == (
        "div:\n"
        "    └─ li: first\n"
        "        └─ li: first child\n"
        "    └─ li: second\n"
    )


def test_collapsed_nodes_are_marked(tree: Node) -> None:
    tree.children[0].collapsed = True
    lines = render_tree_diagram(tree).splitlines()
    assert lines[1] == "    └─ li: first [+]"
    assert lines[3] == "    └─ li: second"


def test_depth_limit_shows_truncation(tree: Node) -> None:
    diagram = render_tree_diagram(tree, max_depth=1)
    assert "first child" not in diagram
    assert "        ... (1 more child, id=a)\n" in diagram
    assert "id=b" not in diagram
