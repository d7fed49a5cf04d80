# tests/test_form.py

from __future__ import annotations

from dataclasses import replace

from simple_task.config import MISSING_TITLE_MESSAGE, SAVE_BUTTON_LABEL, UPDATE_BUTTON_LABEL
from simple_task.form import initial_title, save_button_label, save_task
from simple_task.store import TaskStore


def test_new_task_form_starts_empty() -> None:
    assert initial_title(None) == ""
    assert save_button_label(None) == SAVE_BUTTON_LABEL


def test_edit_form_is_prefilled(filled_store: TaskStore) -> None:
    task = filled_store.tasks[1]

    assert initial_title(task) == "Write report"
    assert save_button_label(task) == UPDATE_BUTTON_LABEL


def test_save_rejects_blank_title_without_writing(filled_store: TaskStore) -> None:
    before = filled_store.tasks

    assert save_task(filled_store, None, "   ") == MISSING_TITLE_MESSAGE
    assert save_task(filled_store, filled_store.tasks[0], "") == MISSING_TITLE_MESSAGE
    assert filled_store.tasks == before


def test_save_new_task_adds_trimmed_title(store: TaskStore) -> None:
    assert save_task(store, None, "  Study for exam ") is None

    assert [t.title for t in store] == ["Study for exam"]


def test_save_existing_task_updates_in_place(filled_store: TaskStore) -> None:
    first, second, third = filled_store.tasks
    filled_store.toggle_done(second.id)
    editing = replace(filled_store.get(second.id))

    assert save_task(filled_store, editing, " Write report v2 ") is None

    assert len(filled_store) == 3
    assert filled_store.tasks[0] == first
    assert filled_store.tasks[2] == third
    updated = filled_store.tasks[1]
    assert (updated.id, updated.title, updated.done) == (second.id, "Write report v2", True)
