"""Outcomes reported after a command runs.

Commands return one of these instead of printing. A renderer (the console
display, or anything else) turns them into output, so the task engine
never depends on how results are shown.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from pingpong.tasks import Task


class OutcomeType(Enum):
    """Kinds of outcome a command can report."""

    TASK_ADDED = "task_added"
    """One or more tasks were appended to the list."""

    TASK_LIST = "task_list"
    """The whole list was requested."""

    TASK_MARKED = "task_marked"
    """One or more tasks were marked as done."""

    TASK_UNMARKED = "task_unmarked"
    """One or more tasks were marked as not done."""

    TASK_DELETED = "task_deleted"
    """One or more tasks were removed."""

    TASK_UPDATED = "task_updated"
    """One or more tasks were replaced with updated copies."""

    SEARCH_RESULTS = "search_results"
    """A keyword or date search finished."""

    ERROR = "error"
    """The input could not be parsed or executed."""

    HELP = "help"
    """The usage summary was requested."""


@dataclass
class Outcome:
    """Base outcome. Every outcome carries its type."""

    outcome_type: OutcomeType


@dataclass
class TaskAdded(Outcome):
    tasks: list[Task]
    """Tasks that were added, in the order they were appended."""

    total: int
    """Number of tasks in the list afterwards."""


@dataclass
class TaskListed(Outcome):
    tasks: list[Task]
    """Every task, in list order."""


@dataclass
class TaskMarked(Outcome):
    tasks: list[Task]


@dataclass
class TaskUnmarked(Outcome):
    tasks: list[Task]


@dataclass
class TaskDeleted(Outcome):
    tasks: list[Task]
    """Removed tasks, in the order they appeared in the list."""

    total: int
    """Number of tasks left."""


@dataclass
class TaskUpdated(Outcome):
    originals: list[Task]
    """Tasks as they were before the update."""

    updated: list[Task]
    """Replacement tasks, parallel to ``originals``."""


@dataclass
class SearchResults(Outcome):
    """Matches from a keyword, multi-keyword or date search.

    Exactly one of ``term``, ``keywords`` or ``target_date`` describes the
    search that ran.
    """

    matches: list[Task]
    term: str | None = None
    target_date: date | None = None
    keywords: list[str] = field(default_factory=list)


@dataclass
class ErrorOutcome(Outcome):
    message: str


@dataclass
class HelpOutcome(Outcome):
    text: str
