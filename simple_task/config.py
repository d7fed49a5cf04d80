import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables (optional .env next to where the app is started)
load_dotenv()

# --- Page / screen text ---
PAGE_TITLE = "SimpleTask"
PAGE_LAYOUT = "centered"

LIST_SCREEN = "list"
FORM_SCREEN = "form"

LIST_TITLE = "SimpleTask"
FORM_TITLE = "Add / Edit Task"

ADD_BUTTON_LABEL = "Add Task"
SAVE_BUTTON_LABEL = "Save Task"
UPDATE_BUTTON_LABEL = "Update Task"
BACK_BUTTON_LABEL = "Back"

TITLE_LABEL = "Task Title"
TITLE_PLACEHOLDER = "e.g. Study for exam"

EMPTY_MESSAGE = 'You have no tasks yet. Tap "Add Task" to create your first one!'
MISSING_TITLE_MESSAGE = "**Missing title**: Please enter a task title."


@dataclass(frozen=True)
class Settings:
    log_level: int = logging.INFO


def load_settings() -> Settings:
    """Read settings from the environment. Unknown log levels fall back to INFO."""
    level_name = os.getenv("SIMPLETASK_LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO
    return Settings(log_level=level)
