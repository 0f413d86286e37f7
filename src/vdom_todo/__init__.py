"""Virtual tree reconciliation for a todo list."""

from vdom_todo.app import TodoApp
from vdom_todo.core.reconcile.reconciler import reconcile
from vdom_todo.core.snapshot import SnapshotLifecycle
from vdom_todo.models.node import MutationResult, Node, Outcome, Patch, PatchOp, create_node
from vdom_todo.protocols import SurfaceProtocol
from vdom_todo.surface.memory import MemorySurface

__all__ = [
    "MemorySurface",
    "MutationResult",
    "Node",
    "Outcome",
    "Patch",
    "PatchOp",
    "SnapshotLifecycle",
    "SurfaceProtocol",
    "TodoApp",
    "create_node",
    "reconcile",
]
