"""Configuration constants for vdom-todo."""

from typing import Final

# The root node is created once at startup and is never removed.
ROOT_ID: Final = "root"
ROOT_TYPE: Final = "div"
ROOT_ATTRIBUTES: Final[dict[str, str]] = {"class": "list-group"}

# Tasks and sub-tasks are list items.
TASK_TYPE: Final = "li"
TASK_ATTRIBUTES: Final[dict[str, str]] = {"class": "list-group-item"}

# Node types whose live elements expose "edit" and "remove" triggers.
ACTIONABLE_TYPES: Final[frozenset[str]] = frozenset({TASK_TYPE})

# CSS-like class added to freshly created live elements.
CREATED_CLASS: Final = "fade-in"
SELECTED_CLASS: Final = "selected"

EDIT_PROMPT: Final = "Enter updated task text:"
