"""Domain models for the virtual tree."""

import copy
import uuid
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum

from vdom_todo.config import ROOT_ATTRIBUTES, ROOT_ID, ROOT_TYPE, TASK_ATTRIBUTES, TASK_TYPE

AttributeValue = str | int | float | bool


@dataclass
class Node:
    """A single node in the virtual tree.

    ``id`` is assigned once at creation and survives text and attribute
    edits. Children are owned exclusively by their parent.
    """

    id: str
    type: str
    attributes: dict[str, AttributeValue] = field(default_factory=dict)
    children: list["Node"] = field(default_factory=list)
    text: str = ""
    collapsed: bool = False

    def depth_first(self) -> Iterator["Node"]:
        """Yield this node, then every descendant in pre-order."""
        yield self
        for child in self.children:
            yield from child.depth_first()


class Outcome(StrEnum):
    """Whether a mutation request changed the tree."""

    APPLIED = "applied"
    IGNORED = "ignored"


@dataclass(frozen=True)
class MutationResult:
    """Outcome of a tree mutation request."""

    outcome: Outcome
    node_id: str | None = None
    reason: str = ""
    visited: int = 0

    @property
    def applied(self) -> bool:
        return self.outcome is Outcome.APPLIED

    @classmethod
    def ignored(
        cls, reason: str, *, node_id: str | None = None, visited: int = 0
    ) -> "MutationResult":
        return cls(Outcome.IGNORED, node_id=node_id, reason=reason, visited=visited)


def new_node_id() -> str:
    """Return a fresh opaque node id."""
    return uuid.uuid4().hex


def create_node(
    type: str,  # noqa: A002
    attributes: dict[str, AttributeValue] | None = None,
    children: list[Node] | None = None,
    text: str = "",
) -> Node:
    """Create a node with a fresh id and a private copy of ``attributes``."""
    return Node(
        id=new_node_id(),
        type=type,
        attributes=dict(attributes or {}),
        children=children if children is not None else [],
        text=text,
    )


def create_root() -> Node:
    """Create the root container node."""
    return Node(id=ROOT_ID, type=ROOT_TYPE, attributes=dict(ROOT_ATTRIBUTES))


def create_task(text: str) -> Node:
    """Create a list-item node for a task."""
    return create_node(TASK_TYPE, TASK_ATTRIBUTES, text=text)


def snapshot(node: Node) -> Node:
    """Return a deep copy sharing no mutable state with ``node``."""
    return copy.deepcopy(node)


class PatchOp(StrEnum):
    """Kinds of surface calls issued by the reconciler."""

    CREATE = "create"
    REMOVE = "remove"
    SET_TEXT = "set_text"
    SET_ATTRIBUTE = "set_attribute"


@dataclass(frozen=True)
class Patch:
    """A single surface call applied during reconciliation."""

    op: PatchOp
    node_id: str
    key: str | None = None
    value: AttributeValue | None = None
