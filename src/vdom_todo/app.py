"""Todo list driven through the virtual tree: the task entry points."""

from collections.abc import Callable

from loguru import logger

from vdom_todo.config import EDIT_PROMPT
from vdom_todo.core.snapshot import SnapshotLifecycle
from vdom_todo.core.tree.mutators import edit_text, find_node, insert_child, remove_node
from vdom_todo.models.node import MutationResult, Node, Patch, create_root, create_task
from vdom_todo.surface.memory import MemorySurface

Prompt = Callable[[str], str | None]


class TodoApp:
    """A todo list whose tasks live in the virtual tree.

    Every request, applied or ignored, is followed by exactly one
    reconciliation pass.
    """

    def __init__(
        self,
        surface: MemorySurface,
        *,
        prompt: Prompt | None = None,
        root: Node | None = None,
    ) -> None:
        self.surface = surface
        self.prompt = prompt
        self.selected_id: str | None = None
        self.lifecycle = SnapshotLifecycle(root or create_root(), surface)
        self.last_patches: list[Patch] = []

        surface.bind(
            on_select=self._on_select,
            on_edit=self.request_edit,
            on_remove=self.remove_task,
        )
        self.last_patches = self.lifecycle.commit_and_reconcile()

    @property
    def tree(self) -> Node:
        return self.lifecycle.current

    def add_task(self, text: str) -> MutationResult:
        """Append a task to the root."""
        text = text.strip()
        if not text:
            return self._refresh(MutationResult.ignored("Task text is empty."))
        task = create_task(text)
        return self._refresh(insert_child(self.tree, parent_id=self.tree.id, child=task))

    def add_sub_task(self, parent_id: str | None, text: str) -> MutationResult:
        """Append a task under ``parent_id``, or under the selected node if None."""
        parent_id = parent_id or self.selected_id
        if parent_id is None:
            return self._refresh(MutationResult.ignored("Select a task to add a sub-task."))
        text = text.strip()
        if not text:
            result = MutationResult.ignored("Sub-task text is empty.", node_id=parent_id)
            return self._refresh(result)
        task = create_task(text)
        return self._refresh(insert_child(self.tree, parent_id=parent_id, child=task))

    def edit_task(self, node_id: str, text: str) -> MutationResult:
        return self._refresh(edit_text(self.tree, node_id=node_id, text=text))

    def remove_task(self, node_id: str) -> MutationResult:
        doomed = find_node(self.tree, node_id) if self.selected_id is not None else None
        result = remove_node(self.tree, node_id=node_id)
        if result.applied and doomed is not None:
            if any(node.id == self.selected_id for node in doomed.depth_first()):
                self.selected_id = None
        return self._refresh(result)

    def request_edit(self, node_id: str) -> MutationResult:
        """Ask for new text and edit the task. A None answer cancels."""
        text = self.prompt(EDIT_PROMPT) if self.prompt is not None else None
        if text is None:
            return MutationResult.ignored("Edit cancelled.", node_id=node_id)
        return self.edit_task(node_id, text)

    def select(self, node_id: str) -> bool:
        """Click the live element for ``node_id``."""
        return self.surface.click(node_id)

    def _on_select(self, node_id: str) -> None:
        self.selected_id = node_id

    def _refresh(self, result: MutationResult) -> MutationResult:
        if not result.applied:
            logger.debug("Request ignored: {}", result.reason)
        self.last_patches = self.lifecycle.commit_and_reconcile()
        return result
