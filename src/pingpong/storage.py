"""Plain-text persistence for the task list.

One task per line::

    T | 0 | Read book
    D | 1 | Return book | 2024-12-25
    E | 0 | Project meeting | 2024-12-25T14:00:00 | 2024-12-25T16:00:00

Kind and done status are split off from the left and dates from the right,
so a description may itself contain `` | ``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from pingpong.dates import (
    date_from_storage,
    date_to_storage,
    datetime_from_storage,
    datetime_to_storage,
)
from pingpong.tasks import Deadline, Event, Task, TaskKind, Todo

logger = logging.getLogger(__name__)

SEPARATOR = " | "
DONE_MARKER = "1"
NOT_DONE_MARKER = "0"
DEFAULT_DATA_FILE = Path("data") / "pingpong.txt"


class MalformedRecord(ValueError):
    """A stored line could not be turned back into a task."""


def format_task(task: Task) -> str:
    """Storage line for ``task``, without a trailing newline."""
    done = DONE_MARKER if task.done else NOT_DONE_MARKER
    fields = [task.kind.symbol, done, task.description]
    if task.kind is TaskKind.DEADLINE:
        fields.append(date_to_storage(task.by))
    elif task.kind is TaskKind.EVENT:
        fields.extend([datetime_to_storage(task.start), datetime_to_storage(task.end)])
    return SEPARATOR.join(fields)


def parse_task(line: str) -> Task:
    """Rebuild a task from a storage line.

    Raises:
        MalformedRecord: if the line does not describe a valid task.
    """
    parts = line.split(SEPARATOR, 2)
    if len(parts) != 3:
        raise MalformedRecord(f"expected at least 3 fields: {line!r}")
    symbol, done_text, rest = parts

    if done_text not in (DONE_MARKER, NOT_DONE_MARKER):
        raise MalformedRecord(f"unknown done marker {done_text!r}")
    done = done_text == DONE_MARKER

    try:
        kind = TaskKind(symbol)
    except ValueError:
        raise MalformedRecord(f"unknown task kind {symbol!r}") from None

    try:
        if kind is TaskKind.TODO:
            return Todo(description=rest, done=done)
        if kind is TaskKind.DEADLINE:
            description, by = _split_right(rest, 1, line)
            return Deadline(description=description, by=date_from_storage(by), done=done)
        description, start, end = _split_right(rest, 2, line)
        return Event(
            description=description,
            start=datetime_from_storage(start),
            end=datetime_from_storage(end),
            done=done,
        )
    except ValidationError as e:
        errors = e.error_count()
        raise MalformedRecord(f"invalid task fields in {line!r}: {errors} error(s)") from e
    except ValueError as e:
        raise MalformedRecord(f"invalid date in {line!r}: {e}") from e


def _split_right(text: str, count: int, line: str) -> list[str]:
    parts = text.rsplit(SEPARATOR, count)
    if len(parts) != count + 1:
        raise MalformedRecord(f"missing date fields: {line!r}")
    return parts


class Storage:
    """Reads and writes the task file at ``path``."""

    def __init__(self, path: Path | str = DEFAULT_DATA_FILE) -> None:
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> list[Task]:
        """Load all readable tasks.

        A missing or unreadable file gives an empty list. Lines that cannot
        be parsed are skipped with a warning. Windows line endings are
        accepted.
        """
        if not self.path.exists():
            logger.info("No data file at %s, starting empty", self.path)
            return []

        try:
            # Records end at "\n" only; descriptions may hold other line breaks.
            with open(self.path, encoding="utf-8", newline="") as f:
                lines = f.read().split("\n")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read %s: %s", self.path, e)
            return []

        tasks: list[Task] = []
        for number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                tasks.append(parse_task(line.removesuffix("\r")))
            except MalformedRecord as e:
                logger.warning("Skipping line %d of %s: %s", number, self.path, e)

        logger.debug("Loaded %d tasks from %s", len(tasks), self.path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> bool:
        """Overwrite the file with ``tasks``.

        Returns:
            True if the file was written. Failures are logged, not raised.
        """
        lines = [format_task(task) for task in tasks]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8", newline="") as f:
                f.writelines(f"{line}\n" for line in lines)
        except OSError as e:
            logger.error("Could not save tasks to %s: %s", self.path, e)
            return False

        logger.debug("Saved %d tasks to %s", len(lines), self.path)
        return True
