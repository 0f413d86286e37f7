"""Tests for the todo task entry points."""

from vdom_todo.app import TodoApp
from vdom_todo.core.tree.mutators import find_node
from vdom_todo.models.node import Outcome, PatchOp
from vdom_todo.surface.memory import MemorySurface


def test_app_mounts_root(todo: TodoApp, memory_surface: MemorySurface) -> None:
    assert memory_surface.find("root") is not None
    assert todo.lifecycle.commits == 1
    assert [p.op for p in todo.last_patches] == [PatchOp.CREATE]


def test_add_task_trims_text_and_creates_one_element(
    todo: TodoApp, memory_surface: MemorySurface
) -> None:
    result = todo.add_task("  buy milk ")

    assert result.applied
    assert [c.text for c in todo.tree.children] == ["buy milk"]
    assert [(p.op, p.node_id) for p in todo.last_patches] == [(PatchOp.CREATE, result.node_id)]
    element = memory_surface.find(result.node_id or "")
    assert element is not None
    assert element.text == "buy milk"


def test_add_task_blank_is_ignored_but_still_reconciled(todo: TodoApp) -> None:
    result = todo.add_task("   ")

    assert result.outcome is Outcome.IGNORED
    assert todo.tree.children == []
    assert todo.last_patches == []
    assert todo.lifecycle.commits == 2


def test_add_sub_task_requires_selection(todo: TodoApp) -> None:
    todo.add_task("parent")

    result = todo.add_sub_task(None, "child")

    assert result.outcome is Outcome.IGNORED
    assert "Select" in result.reason
    assert todo.tree.children[0].children == []


def test_add_sub_task_under_selected_keeps_selection(
    todo: TodoApp, memory_surface: MemorySurface
) -> None:
    parent_id = todo.add_task("parent").node_id
    assert parent_id is not None
    assert todo.select(parent_id)
    selected_element = memory_surface.find(parent_id)

    result = todo.add_sub_task(None, "child")

    assert result.applied
    parent = find_node(todo.tree, parent_id)
    assert parent is not None
    assert [c.text for c in parent.children] == ["child"]
    # The parent element survived the pass, so it is still selected.
    assert memory_surface.find(parent_id) is selected_element
    assert selected_element is not None and selected_element.selected
    assert [e.node_id for e in selected_element.children] == [result.node_id]


def test_add_sub_task_blank_text_is_ignored(todo: TodoApp) -> None:
    parent_id = todo.add_task("parent").node_id
    assert parent_id is not None
    todo.select(parent_id)
    assert todo.add_sub_task(None, "  ").outcome is Outcome.IGNORED


def test_add_sub_task_with_explicit_parent(todo: TodoApp) -> None:
    parent_id = todo.add_task("parent").node_id
    assert parent_id is not None
    result = todo.add_sub_task(parent_id, "child")
    assert result.applied


def test_edit_task_yields_single_text_patch(todo: TodoApp) -> None:
    task_id = todo.add_task("buy milk").node_id
    assert task_id is not None

    result = todo.edit_task(task_id, "buy oat milk")

    assert result.applied
    assert [(p.op, p.value) for p in todo.last_patches] == [(PatchOp.SET_TEXT, "buy oat milk")]


def test_remove_task_removes_live_descendants(
    todo: TodoApp, memory_surface: MemorySurface
) -> None:
    parent_id = todo.add_task("parent").node_id
    assert parent_id is not None
    child_id = todo.add_sub_task(parent_id, "child").node_id
    assert child_id is not None

    result = todo.remove_task(parent_id)

    assert result.applied
    assert todo.tree.children == []
    assert [(p.op, p.node_id) for p in todo.last_patches] == [(PatchOp.REMOVE, parent_id)]
    assert memory_surface.find(parent_id) is None
    assert memory_surface.find(child_id) is None


def test_remove_root_is_ignored(todo: TodoApp) -> None:
    assert todo.remove_task("root").outcome is Outcome.IGNORED
    assert todo.last_patches == []


def test_edit_trigger_uses_prompt(memory_surface: MemorySurface) -> None:
    prompts: list[str] = []

    def prompt(message: str) -> str | None:
        prompts.append(message)
        return "  edited  "

    todo = TodoApp(memory_surface, prompt=prompt)
    task_id = todo.add_task("original").node_id
    assert task_id is not None

    assert memory_surface.press(task_id, "edit")

    assert prompts == ["Enter updated task text:"]
    assert todo.tree.children[0].text == "edited"
    element = memory_surface.find(task_id)
    assert element is not None
    assert element.text == "edited"


def test_cancelled_edit_does_not_reconcile(memory_surface: MemorySurface) -> None:
    todo = TodoApp(memory_surface, prompt=lambda message: None)
    task_id = todo.add_task("original").node_id
    assert task_id is not None
    commits = todo.lifecycle.commits

    result = todo.request_edit(task_id)

    assert result.outcome is Outcome.IGNORED
    assert todo.lifecycle.commits == commits
    assert todo.tree.children[0].text == "original"


def test_remove_trigger_removes_task(todo: TodoApp, memory_surface: MemorySurface) -> None:
    task_id = todo.add_task("doomed").node_id
    assert task_id is not None

    assert memory_surface.press(task_id, "remove")

    assert todo.tree.children == []
    assert memory_surface.find(task_id) is None


def test_tail_tasks_keep_sibling_identity(todo: TodoApp, memory_surface: MemorySurface) -> None:
    first_id = todo.add_task("first").node_id
    assert first_id is not None
    first_element = memory_surface.find(first_id)

    todo.add_task("second")
    todo.add_task("third")

    assert memory_surface.find(first_id) is first_element


def test_removing_selected_subtree_clears_selection(todo: TodoApp) -> None:
    parent_id = todo.add_task("parent").node_id
    assert parent_id is not None
    child_id = todo.add_sub_task(parent_id, "child").node_id
    assert child_id is not None
    todo.select(child_id)

    todo.remove_task(parent_id)

    assert todo.selected_id is None
    result = todo.add_sub_task(None, "orphan")
    assert result.outcome is Outcome.IGNORED
    assert "Select" in result.reason


def test_removing_other_task_keeps_selection(todo: TodoApp) -> None:
    kept_id = todo.add_task("kept").node_id
    other_id = todo.add_task("other").node_id
    assert kept_id is not None and other_id is not None
    todo.select(kept_id)

    todo.remove_task(other_id)

    assert todo.selected_id == kept_id
