"""Demonstration tasks loaded on first run."""

from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta

from pingpong.task_list import TaskList

WELCOME_NOTE = (
    "Welcome to Pingpong! Sample tasks have been loaded to help you get started.\n"
    "Type 'help' to see all available commands."
)


def load_sample_tasks(tasks: TaskList, today: date | None = None) -> None:
    """Append the sample tasks to ``tasks``, with dates relative to ``today``."""
    if today is None:
        today = date.today()

    guide = tasks.add_todo("Read user guide (type 'help' for commands)")
    tasks.add_todo("Explore Pingpong features")
    tasks.add_deadline("Complete project proposal", today + timedelta(days=7))

    meeting_start = datetime.combine(today + timedelta(days=2), time(14, 0))
    tasks.add_event("Team meeting", meeting_start, meeting_start + timedelta(hours=2))

    guide.mark_done()

    tasks.add_todo("Buy groceries")
    tasks.add_todo("Call dentist for appointment")
    tasks.add_deadline("Pay monthly bills", _last_day_of_month(today))


def _last_day_of_month(day: date) -> date:
    return day.replace(day=calendar.monthrange(day.year, day.month)[1])
