"""Positional diff of two tree snapshots, applied to a live surface.

Both trees are walked in lockstep. Children are matched by index, not by
id, so inserting anywhere but the tail of a children list misaligns every
later sibling and replaces them wholesale.

Cases, for a pair (previous, current) under a live parent:

- previous missing: create current (and its subtree).
- current missing: remove previous. The surface removes descendants.
- type or id differ: remove previous, then create current.
- otherwise patch text, patch attributes present in current, then recurse
  into children by index.

Attributes that disappear from ``current`` are not retracted from the live
element.
"""

from typing import Any

from loguru import logger

from vdom_todo.models.node import Node, Patch, PatchOp
from vdom_todo.protocols import SurfaceProtocol


def reconcile(
    previous: Node | None,
    current: Node | None,
    parent: Any,
    surface: SurfaceProtocol,
) -> list[Patch]:
    """Converge the live surface from ``previous`` to ``current``.

    Args:
        previous: Root of the last reconciled snapshot, or None if nothing is mounted.
        current: Root of the working tree, or None to unmount.
        parent: Live handle under which new elements are created.
        surface: The live surface to patch.

    Returns:
        The surface calls that were made, in order.
    """
    patches: list[Patch] = []
    _reconcile(previous, current, parent, surface, patches)
    return patches


def _reconcile(
    previous: Node | None,
    current: Node | None,
    parent: Any,
    surface: SurfaceProtocol,
    patches: list[Patch],
) -> None:
    if previous is None:
        if current is not None:
            _create(current, parent, surface, patches)
        return

    if current is None:
        _remove(previous, surface, patches)
        return

    if previous.type != current.type or previous.id != current.id:
        _remove(previous, surface, patches)
        _create(current, parent, surface, patches)
        return

    if previous.text != current.text:
        surface.set_text(current.id, current.text)
        _record(patches, Patch(PatchOp.SET_TEXT, current.id, value=current.text))

    for key, value in current.attributes.items():
        if key not in previous.attributes or previous.attributes[key] != value:
            surface.set_attribute(current.id, key, value)
            _record(patches, Patch(PatchOp.SET_ATTRIBUTE, current.id, key=key, value=value))

    element = surface.find(current.id)
    if element is None:
        logger.warning("No live element for node {}, patching children under parent", current.id)
        element = parent

    for i in range(max(len(previous.children), len(current.children))):
        _reconcile(
            previous.children[i] if i < len(previous.children) else None,
            current.children[i] if i < len(current.children) else None,
            element,
            surface,
            patches,
        )


def _create(node: Node, parent: Any, surface: SurfaceProtocol, patches: list[Patch]) -> None:
    surface.create(node, parent)
    _record(patches, Patch(PatchOp.CREATE, node.id))


def _remove(node: Node, surface: SurfaceProtocol, patches: list[Patch]) -> None:
    surface.remove(node.id)
    _record(patches, Patch(PatchOp.REMOVE, node.id))


def _record(patches: list[Patch], patch: Patch) -> None:
    logger.debug("Patch {} {} {}={!r}", patch.op, patch.node_id, patch.key, patch.value)
    patches.append(patch)
