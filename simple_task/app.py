import logging
from dataclasses import replace
from typing import Optional

import streamlit as st

from simple_task.config import (
    ADD_BUTTON_LABEL,
    BACK_BUTTON_LABEL,
    EMPTY_MESSAGE,
    FORM_SCREEN,
    FORM_TITLE,
    LIST_SCREEN,
    LIST_TITLE,
    PAGE_LAYOUT,
    PAGE_TITLE,
    TITLE_LABEL,
    TITLE_PLACEHOLDER,
    load_settings,
)
from simple_task.form import initial_title, save_button_label, save_task
from simple_task.logging_setup import setup_logging
from simple_task.models import Task
from simple_task.store import TaskStore

logger = logging.getLogger("simple_task.app")

TITLE_INPUT_KEY = "task_title"


@st.cache_resource
def configure_logging():
    """Runs once per server process, not once per rerun."""
    settings = load_settings()
    setup_logging(settings.log_level)
    logger.info("SimpleTask started (log level %s)", logging.getLevelName(settings.log_level))
    return settings


# --- Initialization ---
# Session state keeps the store alive across reruns (user interactions)
def init_session_state():
    if "task_store" not in st.session_state:
        st.session_state.task_store = TaskStore()
    if "screen" not in st.session_state:
        st.session_state.screen = LIST_SCREEN
    if "task_to_edit" not in st.session_state:
        st.session_state.task_to_edit = None
    if "form_error" not in st.session_state:
        st.session_state.form_error = None


# --- Callbacks ---
def open_form(task: Optional[Task] = None):
    """Navigate to the form. ``task`` is None for a new task."""
    # Hand the form its own copy of the record
    task_to_edit = replace(task) if task is not None else None
    st.session_state.task_to_edit = task_to_edit
    st.session_state[TITLE_INPUT_KEY] = initial_title(task_to_edit)
    st.session_state.form_error = None
    st.session_state.screen = FORM_SCREEN


def back_to_list():
    st.session_state.task_to_edit = None
    st.session_state.form_error = None
    st.session_state.screen = LIST_SCREEN


def toggle_task(store: TaskStore, task_id: str):
    store.toggle_done(task_id)


def handle_save(store: TaskStore):
    error = save_task(store, st.session_state.task_to_edit, st.session_state.get(TITLE_INPUT_KEY, ""))
    if error:
        # Stay on the form; the typed text is kept in the widget state
        st.session_state.form_error = error
        return
    back_to_list()


# --- Screens ---
def render_task_list(store: TaskStore):
    st.title(LIST_TITLE)

    st.button(ADD_BUTTON_LABEL, key="add_task", on_click=open_form, type="primary")

    if len(store) == 0:
        st.info(EMPTY_MESSAGE)
        return

    for task in store.tasks:
        # Checkbox | Title (tap to edit)
        col1, col2 = st.columns([0.1, 0.9])

        with col1:
            st.checkbox(
                label=f"Done: {task.title}",
                value=task.done,
                key=f"done_{task.id}",
                on_change=toggle_task,
                args=(store, task.id),
                label_visibility="collapsed",
            )

        with col2:
            # Strikethrough marks completed tasks
            label = f"~~{task.title}~~" if task.done else task.title
            st.button(
                label,
                key=f"edit_{task.id}",
                on_click=open_form,
                args=(task,),
                help="Edit this task",
            )


def render_task_form(store: TaskStore):
    st.title(FORM_TITLE)
    task_to_edit = st.session_state.task_to_edit

    with st.form("task_form"):
        st.text_input(TITLE_LABEL, key=TITLE_INPUT_KEY, placeholder=TITLE_PLACEHOLDER)
        st.form_submit_button(
            save_button_label(task_to_edit),
            on_click=handle_save,
            args=(store,),
            type="primary",
        )

    if st.session_state.form_error:
        st.warning(st.session_state.form_error)

    st.button(BACK_BUTTON_LABEL, key="back", on_click=back_to_list)


def main():
    st.set_page_config(page_title=PAGE_TITLE, layout=PAGE_LAYOUT)
    configure_logging()
    init_session_state()

    store = st.session_state.task_store
    if st.session_state.screen == FORM_SCREEN:
        render_task_form(store)
    else:
        render_task_list(store)


main()
