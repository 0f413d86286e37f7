"""Render the virtual tree as an indented text diagram."""

import io

from vdom_todo.models.node import Node


def render_tree_diagram(root: Node, *, max_depth: int | None = None) -> str:
    """Render a node and its descendants, one ``type: text`` line per node.

    Args:
        root: The node to start rendering from.
        max_depth: Max levels below ``root`` to include (None = unlimited).

    Returns:
        The diagram, with collapsed nodes marked ``[+]``.
    """
    out = io.StringIO()
    _render(out, root, depth=0, max_depth=max_depth)
    return out.getvalue()


def _render(out: io.StringIO, node: Node, *, depth: int, max_depth: int | None) -> None:
    indent = "    " * depth
    branch = "└─ " if depth else ""
    marker = " [+]" if node.collapsed else ""
    label = f"{node.type}: {node.text}".rstrip()
    out.write(f"{indent}{branch}{label}{marker}\n")

    if max_depth is not None and depth == max_depth:
        if node.children:
            noun = "child" if len(node.children) == 1 else "children"
            out.write(f"{indent}    ... ({len(node.children)} more {noun}, id={node.id})\n")
        return

    for child in node.children:
        _render(out, child, depth=depth + 1, max_depth=max_depth)
