import itertools
import logging
from dataclasses import replace
from typing import Iterator, List, Optional, Tuple

from simple_task.models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """Holds the ordered task collection and its three mutations.

    Order is insertion order. ``update`` and ``toggle_done`` replace records in
    place and never reorder. Unknown ids are ignored.
    """

    def __init__(self) -> None:
        self._tasks: List[Task] = []
        self._ids = itertools.count(1)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    @property
    def tasks(self) -> Tuple[Task, ...]:
        """Snapshot of the collection for rendering."""
        return tuple(self._tasks)

    def get(self, task_id: str) -> Optional[Task]:
        index = self._index_of(task_id)
        return None if index is None else self._tasks[index]

    def add(self, title: str) -> None:
        """Append a new task. Empty or whitespace-only titles are ignored."""
        if not title or not title.strip():
            logger.debug("Ignoring add with empty title")
            return

        task = Task(id=str(next(self._ids)), title=title.strip())
        self._tasks.append(task)
        logger.debug("Added task %s: %r", task.id, task.title)

    def update(self, task: Task) -> None:
        """Replace the stored task that has the same id."""
        index = self._index_of(task.id)
        if index is None:
            logger.warning("Ignoring update for unknown task id %s", task.id)
            return

        self._tasks[index] = task
        logger.debug("Updated task %s: %r", task.id, task.title)

    def toggle_done(self, task_id: str) -> None:
        index = self._index_of(task_id)
        if index is None:
            logger.warning("Ignoring toggle for unknown task id %s", task_id)
            return

        current = self._tasks[index]
        self._tasks[index] = replace(current, done=not current.done)
        logger.debug("Task %s done=%s", task_id, not current.done)

    def _index_of(self, task_id: str) -> Optional[int]:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None
