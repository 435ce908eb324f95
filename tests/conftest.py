"""Shared fixtures for pingpong tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from datetime import date, datetime
from pathlib import Path

import pytest

from pingpong.task_list import TaskList
from pingpong.tasks import Deadline, Event, Todo


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory and change to it."""
    original_dir = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_dir)


@pytest.fixture
def temp_pingpong_dir(temp_project: Path) -> Path:
    """Create a temporary .pingpong directory."""
    pingpong_dir = temp_project / ".pingpong"
    pingpong_dir.mkdir()
    return pingpong_dir


@pytest.fixture
def todo() -> Todo:
    return Todo(description="Read book")


@pytest.fixture
def deadline() -> Deadline:
    return Deadline(description="Return book", by=date(2024, 12, 25))


@pytest.fixture
def event() -> Event:
    return Event(
        description="Project meeting",
        start=datetime(2024, 12, 25, 14, 0),
        end=datetime(2024, 12, 25, 16, 0),
    )


@pytest.fixture
def sample_tasks(todo: Todo, deadline: Deadline, event: Event) -> TaskList:
    """A list holding one task of each kind: todo, deadline, event."""
    return TaskList([todo, deadline, event])


@pytest.fixture
def sample_data_file(tmp_path: Path) -> Path:
    """A task file with one task of each kind, the deadline done."""
    path = tmp_path / "data" / "pingpong.txt"
    path.parent.mkdir()
    path.write_text(
        "T | 0 | Read book\n"
        "D | 1 | Return book | 2024-12-25\n"
        "E | 0 | Project meeting | 2024-12-25T14:00:00 | 2024-12-25T16:00:00\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def reset_logging() -> Generator[None, None, None]:
    """Remove handlers installed by setup_logging once the test is done."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_pingpong_handler", False):
            root.removeHandler(handler)
            handler.close()
    logging.captureWarnings(False)
