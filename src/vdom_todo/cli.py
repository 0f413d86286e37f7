"""CLI for vdom-todo: an interactive todo shell backed by the virtual tree."""

import sys
from collections.abc import Iterator

import typer
from loguru import logger

from vdom_todo.app import TodoApp
from vdom_todo.core.tree.diagram import render_tree_diagram
from vdom_todo.logging_config import configure_logging
from vdom_todo.models.node import MutationResult, Patch
from vdom_todo.surface.memory import MemorySurface

app = typer.Typer(help="vdom-todo: a todo list reconciled against a live surface.")

HELP_TEXT = """Commands:
  add TEXT              add a task to the root
  sub TEXT              add a sub-task under the selected task
  select ID             select a task
  edit ID TEXT          replace the text of a task
  press ID edit|remove  fire a task's trigger (edit reads the next line)
  rm ID                 remove a task and its sub-tasks
  show                  print the live surface
  tree                  print the tree diagram
  quit                  leave the shell"""


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


def _echo_result(result: MutationResult, patches: list[Patch]) -> None:
    if not result.applied:
        typer.echo(f"ignored: {result.reason}")
        return
    typer.echo(f"ok id={result.node_id}")
    for patch in patches:
        if patch.key is not None:
            detail = f" {patch.key}={patch.value!r}"
        elif patch.value is not None:
            detail = f" {patch.value!r}"
        else:
            detail = ""
        typer.echo(f"  {patch.op} {patch.node_id}{detail}")


@app.command()
def shell() -> None:
    """Read todo commands from stdin, one per line."""
    lines: Iterator[str] = (line.rstrip("\n") for line in sys.stdin)

    def prompt(message: str) -> str | None:
        typer.echo(message)
        return next(lines, None)

    todo = TodoApp(MemorySurface(), prompt=prompt)

    for line in lines:
        command, _, rest = line.strip().partition(" ")
        if not command:
            continue
        # The id is the first word; the rest of the line is task text, kept verbatim.
        target, _, text = rest.strip().partition(" ")

        if command == "quit":
            break
        if command == "help":
            typer.echo(HELP_TEXT)
        elif command == "show":
            typer.echo(todo.surface.render(), nl=False)
        elif command == "tree":
            typer.echo(render_tree_diagram(todo.tree), nl=False)
        elif command == "add":
            _echo_result(todo.add_task(rest), todo.last_patches)
        elif command == "sub":
            _echo_result(todo.add_sub_task(None, rest), todo.last_patches)
        elif command == "select" and target and not text:
            if todo.select(target):
                typer.echo(f"selected {target}")
            else:
                typer.echo(f"No live element for '{target}'.")
        elif command == "edit" and target:
            _echo_result(todo.edit_task(target, text), todo.last_patches)
        elif command == "rm" and target and not text:
            _echo_result(todo.remove_task(target), todo.last_patches)
        elif command == "press" and target and text.strip():
            action = text.strip()
            commits = todo.lifecycle.commits
            if not todo.surface.press(target, action):
                typer.echo(f"No '{action}' trigger on '{target}'.")
            elif todo.lifecycle.commits == commits:
                typer.echo("cancelled")
            else:
                typer.echo(f"{len(todo.last_patches)} patch(es)")
        else:
            logger.error("Unknown command: {}", line)
            typer.echo("Unknown command. Type 'help' for a list.")
