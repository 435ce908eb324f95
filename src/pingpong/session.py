"""The chat session: read a line, run it, show the result, save."""

from __future__ import annotations

import logging
from pathlib import Path

from pingpong.config import PingpongConfig
from pingpong.display import ConsoleDisplay
from pingpong.errors import PingpongError
from pingpong.outcomes import ErrorOutcome, Outcome, OutcomeType
from pingpong.parser import parse
from pingpong.samples import WELCOME_NOTE, load_sample_tasks
from pingpong.storage import Storage
from pingpong.task_list import TaskList

logger = logging.getLogger(__name__)

EXIT_COMMAND = "bye"


class Session:
    """Owns the task list for one run of the program.

    One command is parsed, executed and persisted before the next line is
    read, so the file always reflects the last successful change.
    """

    def __init__(
        self,
        config: PingpongConfig | None = None,
        storage: Storage | None = None,
        display: ConsoleDisplay | None = None,
    ) -> None:
        self.config = config or PingpongConfig()
        self.storage = storage or Storage(Path(self.config.storage.data_file))
        self.display = display or ConsoleDisplay(
            bot_name=self.config.display.bot_name,
            show_dividers=self.config.display.show_dividers,
        )
        self.tasks = TaskList()
        self.first_run = False

    def start(self) -> None:
        """Hydrate the task list, seeding sample tasks on first run."""
        if self.storage.exists():
            self.tasks = TaskList(self.storage.load())
            return

        self.tasks = TaskList()
        if self.config.storage.sample_data:
            load_sample_tasks(self.tasks)
            self.storage.save(self.tasks.all())
            self.first_run = True
            logger.info("Seeded %d sample tasks into %s", len(self.tasks), self.storage.path)

    def execute(self, line: str) -> Outcome:
        """Run one input line and return what happened.

        User errors become an error outcome; the task list is left as it was.
        """
        try:
            command = parse(line)
            outcome = command.execute(self.tasks)
        except PingpongError as e:
            logger.debug("Rejected %r: %s", line, e.message)
            return ErrorOutcome(outcome_type=OutcomeType.ERROR, message=e.message)

        if command.mutates:
            self.storage.save(self.tasks.all())
        return outcome

    def run(self) -> None:
        """Chat until the user says bye or input ends."""
        self.start()
        self.display.welcome()
        if self.first_run:
            self.display.info(WELCOME_NOTE)

        while True:
            try:
                line = self.display.console.input()
            except (EOFError, KeyboardInterrupt):
                logger.debug("Input closed, ending session")
                break
            if line.strip() == EXIT_COMMAND:
                break
            self.display.show(self.execute(line))

        self.display.goodbye()
