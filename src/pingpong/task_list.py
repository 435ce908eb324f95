"""The ordered collection of tasks.

Positions are 0-based here; commands translate from the 1-based numbers
users type. Batch operations check every position before changing
anything, so a bad position leaves the list untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from contextlib import contextmanager
from datetime import date, datetime

from pydantic import ValidationError

from pingpong import search
from pingpong.errors import IndexOutOfRange, InvalidTimeRange, MissingArgument
from pingpong.tasks import Deadline, Event, Task, Todo
from pingpong.updater import TaskUpdate, apply_update

logger = logging.getLogger(__name__)

BLANK_DESCRIPTION_MESSAGE = "Description cannot be empty."
TIME_RANGE_MESSAGE = "Event start time cannot be after end time."


class TaskList:
    """Insertion-ordered tasks addressed by position."""

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    def size(self) -> int:
        return len(self._tasks)

    def all(self) -> list[Task]:
        """Snapshot of the tasks in order. Changing the list does not affect this one."""
        return list(self._tasks)

    # -------------------- single-task operations --------------------

    def add(self, task: Task) -> None:
        self._tasks.append(task)
        logger.debug("Added %s task at position %d", task.kind.name, len(self._tasks))

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def delete(self, index: int) -> Task:
        self._check_index(index)
        task = self._tasks.pop(index)
        logger.debug("Deleted task at position %d", index + 1)
        return task

    def mark(self, index: int) -> Task:
        task = self.get(index)
        task.mark_done()
        return task

    def unmark(self, index: int) -> Task:
        task = self.get(index)
        task.mark_undone()
        return task

    def update_task(self, index: int, update: TaskUpdate) -> Task:
        """Replace the task at ``index`` with an updated copy and return the copy."""
        task = self.get(index)
        with _as_user_error():
            updated = apply_update(task, update)
        self._tasks[index] = updated
        return updated

    def add_todo(self, description: str) -> Todo:
        """Append a todo.

        Raises:
            MissingArgument: if ``description`` is blank.
        """
        with _as_user_error():
            task = Todo(description=description)
        self.add(task)
        return task

    def add_deadline(self, description: str, by: date) -> Deadline:
        """Append a deadline.

        Raises:
            MissingArgument: if ``description`` is blank.
        """
        with _as_user_error():
            task = Deadline(description=description, by=by)
        self.add(task)
        return task

    def add_event(self, description: str, start: datetime, end: datetime) -> Event:
        """Append an event.

        Raises:
            MissingArgument: if ``description`` is blank.
            InvalidTimeRange: if ``start`` is after ``end``.
        """
        with _as_user_error():
            task = Event(description=description, start=start, end=end)
        self.add(task)
        return task

    # -------------------- batch operations --------------------

    def add_multiple(self, descriptions: Iterable[str]) -> list[Todo]:
        """Append one todo per description, in order.

        Nothing is added if any description is blank.
        """
        with _as_user_error():
            todos = [Todo(description=description) for description in descriptions]
        for todo in todos:
            self.add(todo)
        return todos

    def mark_multiple(self, indices: Sequence[int]) -> list[Task]:
        self._check_indices(indices)
        return [self.mark(index) for index in indices]

    def unmark_multiple(self, indices: Sequence[int]) -> list[Task]:
        self._check_indices(indices)
        return [self.unmark(index) for index in indices]

    def delete_multiple(self, indices: Sequence[int]) -> list[Task]:
        """Delete several tasks and return them in list order.

        Repeated positions refer to the same task and delete it once.
        """
        self._check_indices(indices)
        removed = [self.delete(index) for index in sorted(set(indices), reverse=True)]
        removed.reverse()
        return removed

    def update_multiple(
        self, indices: Sequence[int], update: TaskUpdate
    ) -> list[tuple[Task, Task]]:
        """Apply the same update to several tasks.

        Every replacement is computed before any is installed.

        Returns:
            (original, updated) pairs in the order the positions were given.
        """
        self._check_indices(indices)
        with _as_user_error():
            pairs = [
                (self._tasks[index], apply_update(self._tasks[index], update))
                for index in indices
            ]
        for index, (_, updated) in zip(indices, pairs):
            self._tasks[index] = updated
        return pairs

    # -------------------- search --------------------

    def find_by_keyword(self, keyword: str) -> list[Task]:
        return search.find_by_keyword(self._tasks, keyword)

    def find_by_keywords(self, keywords: Sequence[str]) -> list[Task]:
        return search.find_by_keywords(self._tasks, keywords)

    def find_by_date(self, target: date) -> list[Task]:
        return search.find_by_date(self._tasks, target)

    # -------------------- validation --------------------

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._tasks):
            raise IndexOutOfRange(f"Task number {index + 1} does not exist.")

    def _check_indices(self, indices: Sequence[int]) -> None:
        for index in indices:
            self._check_index(index)


@contextmanager
def _as_user_error() -> Iterator[None]:
    """Re-raise a blank description or an inverted event as a PingpongError.

    Other validation failures are programming errors and propagate unchanged.
    """
    try:
        yield
    except ValidationError as e:
        locations = {error["loc"] for error in e.errors() if error["type"] == "value_error"}
        if ("description",) in locations:
            raise MissingArgument(BLANK_DESCRIPTION_MESSAGE) from e
        if () in locations:
            raise InvalidTimeRange(TIME_RANGE_MESSAGE) from e
        raise
