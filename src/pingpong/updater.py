"""Produce modified copies of tasks.

An update never changes a task's kind or done status. Fields a kind does
not have are rejected rather than ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from pingpong.errors import InvalidTimeRange, InvalidUpdateField
from pingpong.tasks import Deadline, Event, Task, TaskKind, Todo


@dataclass(frozen=True)
class TaskUpdate:
    """Proposed new values for a task. ``None`` means leave unchanged."""

    description: str | None = None
    by: date | None = None
    start: datetime | None = None
    end: datetime | None = None

    def is_empty(self) -> bool:
        """Check whether no field is proposed."""
        return (
            self.description is None
            and self.by is None
            and self.start is None
            and self.end is None
        )


def apply_update(task: Task, update: TaskUpdate) -> Task:
    """Return a new task of the same kind with ``update`` applied.

    Raises:
        InvalidUpdateField: if ``update`` sets a field ``task`` does not have.
        InvalidTimeRange: if an event would end up starting after it ends.
    """
    if task.kind is TaskKind.TODO:
        return _update_todo(task, update)
    if task.kind is TaskKind.DEADLINE:
        return _update_deadline(task, update)
    if task.kind is TaskKind.EVENT:
        return _update_event(task, update)
    raise InvalidUpdateField(f"Tasks of kind {task.kind} cannot be updated.")


def _update_todo(task: Todo, update: TaskUpdate) -> Todo:
    if update.by is not None:
        raise InvalidUpdateField(
            "Cannot set deadline for Todo tasks. "
            "Use 'deadline' command to create a Deadline task."
        )
    if update.start is not None or update.end is not None:
        raise InvalidUpdateField(
            "Cannot set times for Todo tasks. Use 'event' command to create an Event task."
        )
    return Todo(
        description=update.description or task.description,
        done=task.done,
    )


def _update_deadline(task: Deadline, update: TaskUpdate) -> Deadline:
    if update.start is not None or update.end is not None:
        raise InvalidUpdateField(
            "Cannot set start/end times for Deadline tasks. "
            "Use 'event' command to create an Event task."
        )
    return Deadline(
        description=update.description or task.description,
        by=update.by or task.by,
        done=task.done,
    )


def _update_event(task: Event, update: TaskUpdate) -> Event:
    if update.by is not None:
        raise InvalidUpdateField(
            "Cannot set deadline for Event tasks. "
            "Use 'deadline' command to create a Deadline task."
        )
    start = update.start or task.start
    end = update.end or task.end
    if start > end:
        raise InvalidTimeRange("Event start time cannot be after end time.")
    return Event(
        description=update.description or task.description,
        start=start,
        end=end,
        done=task.done,
    )
