"""Keyword and date matching over tasks.

All functions preserve the order of the tasks they are given.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date

from pingpong.tasks import Task, TaskKind


def find_by_keyword(tasks: Iterable[Task], keyword: str) -> list[Task]:
    """Tasks whose description contains ``keyword``, ignoring case."""
    needle = keyword.lower()
    return [task for task in tasks if needle in task.description.lower()]


def find_by_keywords(tasks: Iterable[Task], keywords: Sequence[str]) -> list[Task]:
    """Tasks whose description contains any of ``keywords``, ignoring case.

    An empty keyword list matches nothing.
    """
    if not keywords:
        return []
    needles = [keyword.lower() for keyword in keywords]
    return [
        task
        for task in tasks
        if any(needle in task.description.lower() for needle in needles)
    ]


def find_by_date(tasks: Iterable[Task], target: date) -> list[Task]:
    """Deadlines due on ``target`` and events spanning it."""
    return [task for task in tasks if occurs_on(task, target)]


def occurs_on(task: Task, target: date) -> bool:
    """Check whether a task falls on a calendar date.

    Events match every day from their start date to their end date
    inclusive; time of day is ignored. Todos never match.
    """
    if task.kind is TaskKind.DEADLINE:
        return task.by == target
    if task.kind is TaskKind.EVENT:
        return task.start.date() <= target <= task.end.date()
    return False
