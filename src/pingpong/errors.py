"""User-facing errors raised while parsing and executing commands.

Every error here is recoverable: the session reports the message as a
single line and moves on to the next input.
"""

from __future__ import annotations


class PingpongError(Exception):
    """Base class for all errors shown to the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class EmptyInput(PingpongError):
    """The input line was empty or whitespace only."""


class UnknownCommand(PingpongError):
    """The first word is not a known command."""


class MissingArgument(PingpongError):
    """A command was given without a required piece."""


class InvalidTaskNumber(PingpongError):
    """A task number was not a positive integer."""


class IndexOutOfRange(PingpongError):
    """A task number does not refer to an existing task."""


class InvalidDateFormat(PingpongError):
    """A date was not given as yyyy-MM-dd."""


class InvalidDateTimeFormat(PingpongError):
    """A date-time matched none of the accepted patterns."""


class InvalidTimeRange(PingpongError):
    """An event would start after it ends."""


class InvalidUpdateField(PingpongError):
    """An update targets a field the task kind does not have."""


class NoUpdateFieldsGiven(PingpongError):
    """An update named no field to change."""


class DuplicateUpdateField(PingpongError):
    """An update named the same field more than once."""
