"""Task models: todos, deadlines and events.

The three kinds share a description and a done flag. ``kind`` is the
discriminant of the ``Task`` union and cannot be reassigned once a task
exists.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from pingpong.dates import format_date, format_datetime


class TaskKind(Enum):
    """Kinds of task. The value is the symbol shown in listings and files."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @property
    def symbol(self) -> str:
        return self.value


class BaseTask(BaseModel):
    """Fields and behaviour shared by every kind of task."""

    model_config = ConfigDict(validate_assignment=True)

    description: str
    done: bool = False

    @field_validator("description")
    @classmethod
    def _description_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("description cannot be empty")
        return value

    def mark_done(self) -> None:
        """Mark the task as done. Marking twice is a no-op."""
        self.done = True

    def mark_undone(self) -> None:
        """Mark the task as not done. Unmarking twice is a no-op."""
        self.done = False

    @property
    def status_symbol(self) -> str:
        return "X" if self.done else " "

    def display_suffix(self) -> str:
        """Kind-specific text appended after the description."""
        return ""

    def __str__(self) -> str:
        symbol = self.kind.symbol  # type: ignore[attr-defined]
        return f"[{symbol}][{self.status_symbol}] {self.description}{self.display_suffix()}"


class Todo(BaseTask):
    """A task with nothing but a description."""

    kind: Literal[TaskKind.TODO] = Field(default=TaskKind.TODO, frozen=True)


class Deadline(BaseTask):
    """A task due by a calendar date."""

    kind: Literal[TaskKind.DEADLINE] = Field(default=TaskKind.DEADLINE, frozen=True)
    by: date

    def display_suffix(self) -> str:
        return f" (by: {format_date(self.by)})"


class Event(BaseTask):
    """A task occupying a span of time. ``start`` may equal ``end``."""

    kind: Literal[TaskKind.EVENT] = Field(default=TaskKind.EVENT, frozen=True)
    start: datetime
    end: datetime

    @model_validator(mode="after")
    def _start_not_after_end(self) -> Event:
        if self.start > self.end:
            raise ValueError("event start time cannot be after end time")
        return self

    def display_suffix(self) -> str:
        return f" (from: {format_datetime(self.start)} to: {format_datetime(self.end)})"


Task = Annotated[Union[Todo, Deadline, Event], Field(discriminator="kind")]
