"""Turn a line of user input into a command.

Dispatch is on the first word and is case-sensitive. The parser keeps no
state: the same line always yields an equal command or the same error.

Grammar::

    list
    help [anything]
    todo DESCRIPTION
    deadline DESCRIPTION /by DATE
    event DESCRIPTION /from DATETIME /to DATETIME
    mark N [N ...]          unmark N [N ...]          delete N [N ...]
    update N [N ...] [/desc TEXT] [/by DATE] [/from DATETIME] [/to DATETIME]
    find KEYWORD | find DATE
    findany KEYWORD [KEYWORD ...]
    addmultiple DESCRIPTION; DESCRIPTION; ...
"""

from __future__ import annotations

import re
from collections.abc import Callable

from pingpong.commands import (
    NO_UPDATE_FIELDS_MESSAGE,
    AddDeadlineCommand,
    AddEventCommand,
    AddMultipleCommand,
    AddTodoCommand,
    Command,
    DeleteCommand,
    DeleteMultipleCommand,
    FindByDateCommand,
    FindByKeywordCommand,
    FindByKeywordsCommand,
    HelpCommand,
    ListCommand,
    MarkCommand,
    MarkMultipleCommand,
    UnmarkCommand,
    UnmarkMultipleCommand,
    UpdateCommand,
    UpdateMultipleCommand,
)
from pingpong.dates import parse_date, parse_datetime, try_parse_date
from pingpong.errors import (
    DuplicateUpdateField,
    EmptyInput,
    InvalidTaskNumber,
    InvalidTimeRange,
    MissingArgument,
    NoUpdateFieldsGiven,
    UnknownCommand,
)
from pingpong.updater import TaskUpdate

INVALID_TASK_NUMBER_MESSAGE = "Please provide valid task number(s)."
NON_POSITIVE_TASK_NUMBER_MESSAGE = "Task numbers must be positive integers."
TIME_RANGE_MESSAGE = "Event start time cannot be after end time."
DEADLINE_USAGE = "Please use format: deadline <description> /by <yyyy-MM-dd>"
EVENT_USAGE = (
    "Please use format: event <description> /from <yyyy-MM-dd HHmm> /to <yyyy-MM-dd HHmm>"
)

# Verbs that need an argument, and the message shown when it is missing.
MISSING_ARGUMENT_MESSAGES = {
    "mark": "Please specify which task(s) to mark.",
    "unmark": "Please specify which task(s) to unmark.",
    "delete": "Please specify which task(s) to delete.",
    "update": "Please specify which task(s) to update.",
    "todo": "The description of a todo cannot be empty.",
    "deadline": "The description of a deadline cannot be empty.",
    "event": "The description of an event cannot be empty.",
    "find": "Please specify a keyword or date (yyyy-MM-dd) to search for.",
    "findany": "Please specify one or more keywords to search for.",
    "addmultiple": "Please specify todo descriptions separated by semicolons.",
}

TASK_NUMBER_PATTERN = re.compile(r"[+-]?[0-9]+")
UPDATE_FLAG_PATTERN = re.compile(r"(?:^|\s)(/desc|/by|/from|/to)(?=\s|$)")


def parse(raw_input: str) -> Command:
    """Parse one line of input.

    Raises:
        PingpongError: a subclass describing what is wrong with the line.
    """
    text = raw_input.strip()
    if not text:
        raise EmptyInput("Please enter a command.")

    if text == "list":
        return ListCommand()
    if text.startswith("help"):
        return HelpCommand()

    verb, _, remainder = text.partition(" ")
    handler = _HANDLERS.get(verb)
    if handler is None:
        raise UnknownCommand("I'm sorry, but I don't know what that means :-(")

    if not remainder.strip():
        raise MissingArgument(MISSING_ARGUMENT_MESSAGES[verb])
    return handler(remainder)


# -------------------- task numbers --------------------


def parse_task_number(token: str) -> int:
    """Parse a single 1-based task number.

    Raises:
        InvalidTaskNumber: if ``token`` is not an integer or is not positive.
    """
    if not TASK_NUMBER_PATTERN.fullmatch(token):
        raise InvalidTaskNumber(INVALID_TASK_NUMBER_MESSAGE)
    try:
        number = int(token)
    except ValueError:
        # Too many digits for int().
        raise InvalidTaskNumber(INVALID_TASK_NUMBER_MESSAGE) from None
    if number <= 0:
        raise InvalidTaskNumber(NON_POSITIVE_TASK_NUMBER_MESSAGE)
    return number


def parse_task_numbers(text: str) -> tuple[int, ...]:
    """Parse whitespace-separated task numbers."""
    return tuple(parse_task_number(token) for token in text.split())


def _parse_mark(remainder: str) -> Command:
    numbers = parse_task_numbers(remainder)
    if len(numbers) == 1:
        return MarkCommand(task_number=numbers[0])
    return MarkMultipleCommand(task_numbers=numbers)


def _parse_unmark(remainder: str) -> Command:
    numbers = parse_task_numbers(remainder)
    if len(numbers) == 1:
        return UnmarkCommand(task_number=numbers[0])
    return UnmarkMultipleCommand(task_numbers=numbers)


def _parse_delete(remainder: str) -> Command:
    numbers = parse_task_numbers(remainder)
    if len(numbers) == 1:
        return DeleteCommand(task_number=numbers[0])
    return DeleteMultipleCommand(task_numbers=numbers)


# -------------------- adding --------------------


def _parse_todo(remainder: str) -> Command:
    return AddTodoCommand(description=remainder.strip())


def _parse_deadline(remainder: str) -> Command:
    parts = remainder.split(" /by ")
    if len(parts) != 2:
        raise MissingArgument(DEADLINE_USAGE)

    description, by_text = (part.strip() for part in parts)
    if not description:
        raise MissingArgument(MISSING_ARGUMENT_MESSAGES["deadline"])
    if not by_text:
        raise MissingArgument("The deadline date cannot be empty.")

    return AddDeadlineCommand(description=description, by=parse_date(by_text))


def _parse_event(remainder: str) -> Command:
    from_parts = remainder.split(" /from ")
    if len(from_parts) != 2:
        raise MissingArgument(EVENT_USAGE)
    to_parts = from_parts[1].split(" /to ")
    if len(to_parts) != 2:
        raise MissingArgument(EVENT_USAGE)

    description = from_parts[0].strip()
    start_text, end_text = (part.strip() for part in to_parts)
    if not description:
        raise MissingArgument(MISSING_ARGUMENT_MESSAGES["event"])
    if not start_text:
        raise MissingArgument("The event start time cannot be empty.")
    if not end_text:
        raise MissingArgument("The event end time cannot be empty.")

    start = parse_datetime(start_text)
    end = parse_datetime(end_text)
    if start > end:
        raise InvalidTimeRange(TIME_RANGE_MESSAGE)
    return AddEventCommand(description=description, start=start, end=end)


def _parse_add_multiple(remainder: str) -> Command:
    descriptions = tuple(part.strip() for part in remainder.split(";") if part.strip())
    if not descriptions:
        raise MissingArgument("Please provide at least one valid todo description.")
    return AddMultipleCommand(descriptions=descriptions)


# -------------------- searching --------------------


def _parse_find(remainder: str) -> Command:
    term = remainder.strip()
    target = try_parse_date(term)
    if target is not None:
        return FindByDateCommand(target_date=target)
    return FindByKeywordCommand(keyword=term)


def _parse_find_any(remainder: str) -> Command:
    return FindByKeywordsCommand(keywords=tuple(remainder.split()))


# -------------------- updating --------------------


def _parse_update(remainder: str) -> Command:
    matches = list(UPDATE_FLAG_PATTERN.finditer(remainder))
    numbers_text = remainder[: matches[0].start()] if matches else remainder
    if not numbers_text.strip():
        raise MissingArgument(MISSING_ARGUMENT_MESSAGES["update"])

    numbers = parse_task_numbers(numbers_text)
    update = parse_update_fields(remainder, matches)

    if len(numbers) == 1:
        return UpdateCommand(task_number=numbers[0], update=update)
    return UpdateMultipleCommand(task_numbers=numbers, update=update)


def parse_update_fields(text: str, matches: list[re.Match[str]] | None = None) -> TaskUpdate:
    """Collect ``/desc``, ``/by``, ``/from`` and ``/to`` values from ``text``.

    Each value runs until the next flag or the end of the text.

    Raises:
        NoUpdateFieldsGiven: if no flag is present.
        DuplicateUpdateField: if a flag appears twice.
        MissingArgument: if a flag has no value.
    """
    if matches is None:
        matches = list(UPDATE_FLAG_PATTERN.finditer(text))
    if not matches:
        raise NoUpdateFieldsGiven(NO_UPDATE_FIELDS_MESSAGE)

    values: dict[str, str] = {}
    for position, match in enumerate(matches):
        flag = match.group(1)
        if flag in values:
            raise DuplicateUpdateField(f"The field {flag} was given more than once.")
        stop = matches[position + 1].start() if position + 1 < len(matches) else len(text)
        value = text[match.end() : stop].strip()
        if not value:
            raise MissingArgument(_EMPTY_FIELD_MESSAGES[flag])
        values[flag] = value

    start = parse_datetime(values["/from"]) if "/from" in values else None
    end = parse_datetime(values["/to"]) if "/to" in values else None
    if start is not None and end is not None and start > end:
        raise InvalidTimeRange(TIME_RANGE_MESSAGE)

    return TaskUpdate(
        description=values.get("/desc"),
        by=parse_date(values["/by"]) if "/by" in values else None,
        start=start,
        end=end,
    )


_EMPTY_FIELD_MESSAGES = {
    "/desc": "Description cannot be empty.",
    "/by": "Deadline date cannot be empty.",
    "/from": "Start time cannot be empty.",
    "/to": "End time cannot be empty.",
}

_HANDLERS: dict[str, Callable[[str], Command]] = {
    "mark": _parse_mark,
    "unmark": _parse_unmark,
    "delete": _parse_delete,
    "update": _parse_update,
    "todo": _parse_todo,
    "deadline": _parse_deadline,
    "event": _parse_event,
    "find": _parse_find,
    "findany": _parse_find_any,
    "addmultiple": _parse_add_multiple,
}
