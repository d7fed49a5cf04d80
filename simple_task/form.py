from dataclasses import replace
from typing import Optional

from simple_task.config import MISSING_TITLE_MESSAGE, SAVE_BUTTON_LABEL, UPDATE_BUTTON_LABEL
from simple_task.models import Task
from simple_task.store import TaskStore


def initial_title(task_to_edit: Optional[Task]) -> str:
    """Text the title field starts with for this form visit."""
    return task_to_edit.title if task_to_edit is not None else ""


def save_button_label(task_to_edit: Optional[Task]) -> str:
    return UPDATE_BUTTON_LABEL if task_to_edit is not None else SAVE_BUTTON_LABEL


def save_task(store: TaskStore, task_to_edit: Optional[Task], title: str) -> Optional[str]:
    """
    Commit the form to the store.

    Returns the validation message when the trimmed title is empty (nothing is
    written), otherwise None after adding a new task or updating the edited one.
    """
    trimmed = (title or "").strip()
    if not trimmed:
        return MISSING_TITLE_MESSAGE

    if task_to_edit is not None:
        store.update(replace(task_to_edit, title=trimmed))
    else:
        store.add(trimmed)
    return None
