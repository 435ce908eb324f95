"""Command objects produced by the parser.

A command holds only validated arguments. ``execute`` applies it to a task
list and returns an outcome; the session runs each command once and then
drops it. Task numbers are stored as typed by the user (1-based).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import ClassVar

from pingpong.errors import NoUpdateFieldsGiven
from pingpong.outcomes import (
    HelpOutcome,
    Outcome,
    OutcomeType,
    SearchResults,
    TaskAdded,
    TaskDeleted,
    TaskListed,
    TaskMarked,
    TaskUnmarked,
    TaskUpdated,
)
from pingpong.task_list import TaskList
from pingpong.updater import TaskUpdate

NO_UPDATE_FIELDS_MESSAGE = (
    "Please specify what to update (description, deadline, or event times)."
)

HELP_TEXT = """\
============================================================
 Here are the available commands:
============================================================

1. todo DESCRIPTION
   - Adds a simple todo task
   - Example: todo Buy groceries

2. deadline DESCRIPTION /by DATE
   - Adds a task with a deadline
   - Date format: yyyy-MM-dd
   - Example: deadline Submit report /by 2025-09-15

3. event DESCRIPTION /from DATETIME /to DATETIME
   - Adds an event with start and end times
   - DateTime formats: yyyy-MM-dd HHmm OR yyyy-MM-dd HH:mm OR yyyy-MM-dd
   - Example: event Meeting /from 2025-09-10 1400 /to 2025-09-10 1600

4. list
   - Shows all tasks in your list

5. mark INDEX [INDEX2 INDEX3...]
   - Marks task(s) as completed
   - Example: mark 1 OR mark 1 3 5

6. unmark INDEX [INDEX2 INDEX3...]
   - Marks task(s) as not completed
   - Example: unmark 2 OR unmark 1 2 3

7. delete INDEX [INDEX2 INDEX3...]
   - Deletes task(s) from the list
   - Example: delete 3 OR delete 1 2 4

8. find KEYWORD/DATE
   - Finds tasks by keyword or date
   - Example: find meeting OR find 2025-09-10

9. findany KEYWORD [KEYWORD2 KEYWORD3...]
   - Finds tasks matching any of the keywords
   - Example: findany milk report

10. update INDEX [INDEX2...] [/desc DESC] [/by DATE] [/from DATETIME] [/to DATETIME]
    - Updates existing task details
    - Example: update 1 /desc New description
    - Example: update 2 3 /by 2025-09-20

11. addmultiple DESC1; DESC2; DESC3
    - Adds multiple todo tasks at once
    - Example: addmultiple Buy milk; Call mom; Read book

12. help
    - Shows this help message

13. bye
    - Exits the application

============================================================
 Tips:
============================================================
- Task indices start from 1
- Dates use format: yyyy-MM-dd (e.g., 2025-09-15)
- Times use 24-hour format: HHmm or HH:mm (e.g., 1400 or 14:00)
- Commands are case-sensitive
- mark, unmark, delete and update accept several task numbers
- A batch with any invalid task number changes nothing
============================================================"""


def _to_indices(task_numbers: tuple[int, ...]) -> list[int]:
    return [number - 1 for number in task_numbers]


@dataclass(frozen=True)
class Command:
    """Base command."""

    mutates: ClassVar[bool] = False
    """Whether running the command changes the task list."""

    def execute(self, tasks: TaskList) -> Outcome:
        raise NotImplementedError


@dataclass(frozen=True)
class ListCommand(Command):
    def execute(self, tasks: TaskList) -> Outcome:
        return TaskListed(outcome_type=OutcomeType.TASK_LIST, tasks=tasks.all())


@dataclass(frozen=True)
class HelpCommand(Command):
    def execute(self, tasks: TaskList) -> Outcome:
        return HelpOutcome(outcome_type=OutcomeType.HELP, text=HELP_TEXT)


# -------------------- adding --------------------


@dataclass(frozen=True)
class AddTodoCommand(Command):
    mutates: ClassVar[bool] = True

    description: str

    def execute(self, tasks: TaskList) -> Outcome:
        task = tasks.add_todo(self.description)
        return TaskAdded(outcome_type=OutcomeType.TASK_ADDED, tasks=[task], total=len(tasks))


@dataclass(frozen=True)
class AddDeadlineCommand(Command):
    mutates: ClassVar[bool] = True

    description: str
    by: date

    def execute(self, tasks: TaskList) -> Outcome:
        task = tasks.add_deadline(self.description, self.by)
        return TaskAdded(outcome_type=OutcomeType.TASK_ADDED, tasks=[task], total=len(tasks))


@dataclass(frozen=True)
class AddEventCommand(Command):
    mutates: ClassVar[bool] = True

    description: str
    start: datetime
    end: datetime

    def execute(self, tasks: TaskList) -> Outcome:
        task = tasks.add_event(self.description, self.start, self.end)
        return TaskAdded(outcome_type=OutcomeType.TASK_ADDED, tasks=[task], total=len(tasks))


@dataclass(frozen=True)
class AddMultipleCommand(Command):
    mutates: ClassVar[bool] = True

    descriptions: tuple[str, ...]

    def execute(self, tasks: TaskList) -> Outcome:
        added = tasks.add_multiple(self.descriptions)
        return TaskAdded(outcome_type=OutcomeType.TASK_ADDED, tasks=list(added), total=len(tasks))


# -------------------- marking --------------------


@dataclass(frozen=True)
class MarkCommand(Command):
    mutates: ClassVar[bool] = True

    task_number: int

    def execute(self, tasks: TaskList) -> Outcome:
        task = tasks.mark(self.task_number - 1)
        return TaskMarked(outcome_type=OutcomeType.TASK_MARKED, tasks=[task])


@dataclass(frozen=True)
class MarkMultipleCommand(Command):
    mutates: ClassVar[bool] = True

    task_numbers: tuple[int, ...]

    def execute(self, tasks: TaskList) -> Outcome:
        marked = tasks.mark_multiple(_to_indices(self.task_numbers))
        return TaskMarked(outcome_type=OutcomeType.TASK_MARKED, tasks=marked)


@dataclass(frozen=True)
class UnmarkCommand(Command):
    mutates: ClassVar[bool] = True

    task_number: int

    def execute(self, tasks: TaskList) -> Outcome:
        task = tasks.unmark(self.task_number - 1)
        return TaskUnmarked(outcome_type=OutcomeType.TASK_UNMARKED, tasks=[task])


@dataclass(frozen=True)
class UnmarkMultipleCommand(Command):
    mutates: ClassVar[bool] = True

    task_numbers: tuple[int, ...]

    def execute(self, tasks: TaskList) -> Outcome:
        unmarked = tasks.unmark_multiple(_to_indices(self.task_numbers))
        return TaskUnmarked(outcome_type=OutcomeType.TASK_UNMARKED, tasks=unmarked)


# -------------------- deleting --------------------


@dataclass(frozen=True)
class DeleteCommand(Command):
    mutates: ClassVar[bool] = True

    task_number: int

    def execute(self, tasks: TaskList) -> Outcome:
        task = tasks.delete(self.task_number - 1)
        return TaskDeleted(outcome_type=OutcomeType.TASK_DELETED, tasks=[task], total=len(tasks))


@dataclass(frozen=True)
class DeleteMultipleCommand(Command):
    mutates: ClassVar[bool] = True

    task_numbers: tuple[int, ...]

    def execute(self, tasks: TaskList) -> Outcome:
        removed = tasks.delete_multiple(_to_indices(self.task_numbers))
        return TaskDeleted(outcome_type=OutcomeType.TASK_DELETED, tasks=removed, total=len(tasks))


# -------------------- updating --------------------


@dataclass(frozen=True)
class UpdateCommand(Command):
    mutates: ClassVar[bool] = True

    task_number: int
    update: TaskUpdate

    def execute(self, tasks: TaskList) -> Outcome:
        if self.update.is_empty():
            raise NoUpdateFieldsGiven(NO_UPDATE_FIELDS_MESSAGE)
        index = self.task_number - 1
        original = tasks.get(index)
        updated = tasks.update_task(index, self.update)
        return TaskUpdated(
            outcome_type=OutcomeType.TASK_UPDATED, originals=[original], updated=[updated]
        )


@dataclass(frozen=True)
class UpdateMultipleCommand(Command):
    mutates: ClassVar[bool] = True

    task_numbers: tuple[int, ...]
    update: TaskUpdate

    def execute(self, tasks: TaskList) -> Outcome:
        if self.update.is_empty():
            raise NoUpdateFieldsGiven(NO_UPDATE_FIELDS_MESSAGE)
        pairs = tasks.update_multiple(_to_indices(self.task_numbers), self.update)
        return TaskUpdated(
            outcome_type=OutcomeType.TASK_UPDATED,
            originals=[original for original, _ in pairs],
            updated=[updated for _, updated in pairs],
        )


# -------------------- searching --------------------


@dataclass(frozen=True)
class FindByKeywordCommand(Command):
    keyword: str

    def execute(self, tasks: TaskList) -> Outcome:
        return SearchResults(
            outcome_type=OutcomeType.SEARCH_RESULTS,
            matches=tasks.find_by_keyword(self.keyword),
            term=self.keyword,
        )


@dataclass(frozen=True)
class FindByDateCommand(Command):
    target_date: date

    def execute(self, tasks: TaskList) -> Outcome:
        return SearchResults(
            outcome_type=OutcomeType.SEARCH_RESULTS,
            matches=tasks.find_by_date(self.target_date),
            target_date=self.target_date,
        )


@dataclass(frozen=True)
class FindByKeywordsCommand(Command):
    keywords: tuple[str, ...]

    def execute(self, tasks: TaskList) -> Outcome:
        return SearchResults(
            outcome_type=OutcomeType.SEARCH_RESULTS,
            matches=tasks.find_by_keywords(self.keywords),
            keywords=list(self.keywords),
        )
