"""Insert, edit and remove nodes anywhere in the tree by id lookup."""

from loguru import logger

from vdom_todo.models.node import MutationResult, Node, Outcome


def find_node(root: Node, node_id: str) -> Node | None:
    """Find a node by id with a depth-first search from ``root``."""
    for node in root.depth_first():
        if node.id == node_id:
            return node
    return None


def insert_child(root: Node, *, parent_id: str, child: Node) -> MutationResult:
    """Append ``child`` to the children of the node identified by ``parent_id``.

    Args:
        root: Root of the working tree.
        parent_id: ID of the node that receives the child.
        child: Node to append. It must not already be part of the tree.

    Returns:
        An ignored result if the parent does not exist, otherwise applied.
    """
    visited = 0
    for node in root.depth_first():
        visited += 1
        if node.id == parent_id:
            node.children.append(child)
            return MutationResult(Outcome.APPLIED, node_id=child.id, visited=visited)

    logger.debug("Insert ignored: parent {} not found", parent_id)
    return MutationResult.ignored(
        f"Parent {parent_id!r} not found.", node_id=parent_id, visited=visited
    )


def edit_text(root: Node, *, node_id: str, text: str) -> MutationResult:
    """Replace the text of the node identified by ``node_id``.

    The text is trimmed; an empty result leaves the node unchanged. Every node
    in the tree is visited, even after the target has been found.
    """
    new_text = text.strip()
    visited = 0
    found = False

    def update_text(node: Node) -> None:
        nonlocal visited, found
        visited += 1
        if node.id == node_id:
            found = True
            node.text = new_text or node.text
        for child in node.children:
            update_text(child)

    update_text(root)

    if not found:
        logger.debug("Edit ignored: node {} not found", node_id)
        return MutationResult.ignored(
            f"Node {node_id!r} not found.", node_id=node_id, visited=visited
        )
    if not new_text:
        logger.debug("Edit ignored: empty text for node {}", node_id)
        return MutationResult.ignored("Text is empty.", node_id=node_id, visited=visited)
    return MutationResult(Outcome.APPLIED, node_id=node_id, visited=visited)


def remove_node(root: Node, *, node_id: str) -> MutationResult:
    """Detach the node identified by ``node_id`` and its subtree from its parent.

    The root itself has no parent and cannot be removed. The traversal does
    not descend into the detached subtree.
    """
    visited = 1
    removed = False

    def remove_from(node: Node) -> None:
        nonlocal visited, removed
        kept = []
        for child in node.children:
            if child.id == node_id:
                removed = True
                continue
            visited += 1
            remove_from(child)
            kept.append(child)
        node.children = kept

    remove_from(root)

    if not removed:
        if root.id == node_id:
            reason = "The root cannot be removed."
        else:
            reason = f"Node {node_id!r} not found."
        logger.debug("Remove ignored: {}", reason)
        return MutationResult.ignored(reason, node_id=node_id, visited=visited)
    return MutationResult(Outcome.APPLIED, node_id=node_id, visited=visited)
