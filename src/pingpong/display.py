"""Console rendering of outcomes.

Task text is user input, so it is never interpreted as rich markup.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console

from pingpong.dates import format_date
from pingpong.outcomes import (
    ErrorOutcome,
    HelpOutcome,
    Outcome,
    SearchResults,
    TaskAdded,
    TaskDeleted,
    TaskListed,
    TaskMarked,
    TaskUnmarked,
    TaskUpdated,
)
from pingpong.tasks import Task

DIVIDER = "_" * 60


class ConsoleDisplay:
    """Prints chat replies to a rich console."""

    def __init__(
        self,
        console: Console | None = None,
        bot_name: str = "Pingpong",
        show_dividers: bool = True,
    ) -> None:
        self.console = console or Console()
        self.bot_name = bot_name
        self.show_dividers = show_dividers

    # -------------------- low-level output --------------------

    def line(self, text: str = "", style: str | None = None) -> None:
        """Print one line verbatim."""
        self.console.print(
            text, style=style, markup=False, emoji=False, highlight=False, soft_wrap=True
        )

    def divider(self) -> None:
        if self.show_dividers:
            self.line(DIVIDER, style="dim")

    def _numbered(self, tasks: Sequence[Task], prefix: str = " ", separator: str = ".") -> None:
        for number, task in enumerate(tasks, start=1):
            self.line(f"{prefix}{number}{separator}{task}")

    # -------------------- session framing --------------------

    def welcome(self) -> None:
        self.divider()
        self.line(f" Hello! I'm {self.bot_name}", style="cyan")
        self.line(" What can I do for you?")
        self.divider()

    def goodbye(self) -> None:
        self.divider()
        self.line(" Bye. Hope to see you again soon!", style="cyan")
        self.divider()

    def info(self, message: str) -> None:
        for text in message.splitlines():
            self.line(f" {text}", style="cyan")

    def error(self, message: str) -> None:
        self.line(f" OOPS!!! {message}", style="red")

    # -------------------- outcomes --------------------

    def show(self, outcome: Outcome) -> None:
        """Render an outcome between dividers."""
        self.divider()
        self.render(outcome)
        self.divider()

    def render(self, outcome: Outcome) -> None:
        if isinstance(outcome, ErrorOutcome):
            self.error(outcome.message)
        elif isinstance(outcome, HelpOutcome):
            for text in outcome.text.splitlines():
                self.line(text)
        elif isinstance(outcome, TaskListed):
            self.line(" Here are the tasks in your list:")
            self._numbered(outcome.tasks)
        elif isinstance(outcome, TaskAdded):
            self._show_added(outcome)
        elif isinstance(outcome, TaskMarked):
            self._show_marked(outcome.tasks, "Nice! I've marked", "as done:")
        elif isinstance(outcome, TaskUnmarked):
            self._show_marked(outcome.tasks, "OK, I've marked", "as not done yet:")
        elif isinstance(outcome, TaskDeleted):
            self._show_deleted(outcome)
        elif isinstance(outcome, TaskUpdated):
            self._show_updated(outcome)
        elif isinstance(outcome, SearchResults):
            self._show_search(outcome)
        else:
            raise TypeError(f"Cannot render outcome of type {type(outcome).__name__}")

    def _show_added(self, outcome: TaskAdded) -> None:
        if len(outcome.tasks) == 1:
            self.line(" Got it. I've added this task:", style="green")
            self.line(f"   {outcome.tasks[0]}")
        else:
            self.line(f" Got it. I've added these {len(outcome.tasks)} tasks:", style="green")
            self._numbered(outcome.tasks, prefix="   ", separator=". ")
        self.line(f" Now you have {outcome.total} tasks in the list.")

    def _show_marked(self, tasks: Sequence[Task], lead: str, tail: str) -> None:
        if len(tasks) == 1:
            self.line(f" {lead} this task {tail}", style="green")
            self.line(f"  {tasks[0]}")
        else:
            self.line(f" {lead} these {len(tasks)} tasks {tail}", style="green")
            self._numbered(tasks, prefix="  ", separator=". ")

    def _show_deleted(self, outcome: TaskDeleted) -> None:
        if len(outcome.tasks) == 1:
            self.line(" Noted. I've removed this task:", style="green")
            self.line(f"   {outcome.tasks[0]}")
        else:
            self.line(f" Noted. I've removed these {len(outcome.tasks)} tasks:", style="green")
            self._numbered(outcome.tasks, prefix="   ", separator=". ")
        self.line(f" Now you have {outcome.total} tasks in the list.")

    def _show_updated(self, outcome: TaskUpdated) -> None:
        pairs = list(zip(outcome.originals, outcome.updated))
        if len(pairs) == 1:
            original, updated = pairs[0]
            self.line(" Got it. I've updated this task:", style="green")
            self.line(f"   From: {original}")
            self.line(f"   To:   {updated}")
            return
        self.line(f" Got it. I've updated these {len(pairs)} tasks:", style="green")
        for number, (original, updated) in enumerate(pairs, start=1):
            self.line(f"   {number}. From: {original}")
            self.line(f"      To:   {updated}")

    def _show_search(self, outcome: SearchResults) -> None:
        if outcome.target_date is not None:
            day = format_date(outcome.target_date)
            if not outcome.matches:
                self.line(f" No tasks found on {day}")
                return
            self.line(f" Here are the tasks on {day}:")
        elif outcome.keywords:
            if not outcome.matches:
                self.line(" No matching tasks found for any of the keywords.")
                return
            self.line(f" Here are the matching tasks for keywords: {', '.join(outcome.keywords)}")
        else:
            if not outcome.matches:
                self.line(" No matching tasks found.")
                return
            self.line(" Here are the matching tasks in your list:")
        self._numbered(outcome.matches)
