"""Snapshot lifecycle: the working tree, its last reconciled copy, and the commit pass."""

from collections.abc import Callable

from loguru import logger

from vdom_todo.core.reconcile.reconciler import reconcile
from vdom_todo.models.node import Node, Patch, snapshot
from vdom_todo.protocols import SurfaceProtocol

TreeListener = Callable[[Node], object]


class SnapshotLifecycle:
    """Own the ``current`` working tree and the ``previous`` snapshot.

    Mutators only ever touch ``current``. ``previous`` is replaced wholesale
    by a deep copy after each pass and is otherwise never modified. It starts
    as None, so the first pass mounts the whole tree.
    """

    def __init__(self, root: Node, surface: SurfaceProtocol) -> None:
        self.current = root
        self.previous: Node | None = None
        self.surface = surface
        self.commits = 0
        self._listeners: list[TreeListener] = []

    def subscribe(self, listener: TreeListener) -> None:
        """Call ``listener`` with the current tree after every pass."""
        self._listeners.append(listener)

    def commit_and_reconcile(self) -> list[Patch]:
        """Reconcile ``previous`` against ``current``, then snapshot ``current``."""
        patches = reconcile(self.previous, self.current, self.surface.container, self.surface)
        for listener in self._listeners:
            listener(self.current)
        self.previous = snapshot(self.current)
        self.commits += 1
        logger.debug("Commit {}: {} patch(es)", self.commits, len(patches))
        return patches
