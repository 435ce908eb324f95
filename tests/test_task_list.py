"""Tests for pingpong.task_list module."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from pingpong.errors import IndexOutOfRange, InvalidTimeRange, InvalidUpdateField, MissingArgument
from pingpong.task_list import TaskList
from pingpong.tasks import Deadline, Event, Todo
from pingpong.updater import TaskUpdate


class TestBasics:
    """Tests for adding, reading and sizing."""

    def test_empty(self) -> None:
        """Test a new list is empty."""
        tasks = TaskList()
        assert len(tasks) == 0
        assert tasks.size() == 0
        assert tasks.all() == []

    def test_add_kinds(self) -> None:
        """Test the typed add helpers append in order."""
        tasks = TaskList()
        todo = tasks.add_todo("Read book")
        deadline = tasks.add_deadline("Return book", date(2024, 12, 25))
        event = tasks.add_event(
            "Meeting", datetime(2024, 12, 25, 14), datetime(2024, 12, 25, 16)
        )
        assert tasks.all() == [todo, deadline, event]
        assert isinstance(deadline, Deadline)
        assert isinstance(event, Event)

    def test_all_is_snapshot(self, sample_tasks: TaskList) -> None:
        """Test that a snapshot does not follow later changes."""
        snapshot = sample_tasks.all()
        sample_tasks.delete(0)
        assert len(snapshot) == 3
        assert len(sample_tasks) == 2

    def test_iteration(self, sample_tasks: TaskList, todo: Todo) -> None:
        """Test iterating yields tasks in order."""
        assert list(sample_tasks)[0] is todo

    @pytest.mark.parametrize("index", [-1, 3, 100])
    def test_get_out_of_range(self, sample_tasks: TaskList, index: int) -> None:
        """Test positions outside the list are rejected."""
        with pytest.raises(IndexOutOfRange):
            sample_tasks.get(index)

    def test_blank_description(self) -> None:
        """Test the add helpers reject blank descriptions as user errors."""
        tasks = TaskList()
        with pytest.raises(MissingArgument, match="Description cannot be empty"):
            tasks.add_todo("   ")
        with pytest.raises(MissingArgument):
            tasks.add_deadline("", date(2024, 12, 25))
        with pytest.raises(MissingArgument):
            tasks.add_event(" ", datetime(2024, 12, 25, 14), datetime(2024, 12, 25, 16))
        assert len(tasks) == 0

    def test_inverted_event(self) -> None:
        """Test an event ending before it starts is a user error."""
        tasks = TaskList()
        with pytest.raises(InvalidTimeRange, match="start time cannot be after end time"):
            tasks.add_event("Meeting", datetime(2024, 12, 25, 16), datetime(2024, 12, 25, 14))
        assert len(tasks) == 0


class TestSingleOperations:
    """Tests for operations on one position."""

    def test_mark_and_unmark(self, sample_tasks: TaskList) -> None:
        """Test marking returns the task in its new state."""
        assert sample_tasks.mark(1).done is True
        assert sample_tasks.unmark(1).done is False

    def test_delete_shifts_later_tasks(self, sample_tasks: TaskList, event: Event) -> None:
        """Test that later tasks move up after a delete."""
        sample_tasks.delete(1)
        assert sample_tasks.get(1) is event

    def test_delete_message_uses_user_number(self, sample_tasks: TaskList) -> None:
        """Test the error names the 1-based number."""
        with pytest.raises(IndexOutOfRange, match="Task number 4 does not exist"):
            sample_tasks.delete(3)

    def test_update_replaces_in_place(self, sample_tasks: TaskList) -> None:
        """Test that the updated copy takes the original's position."""
        updated = sample_tasks.update_task(0, TaskUpdate(description="Read two books"))
        assert sample_tasks.get(0) is updated
        assert len(sample_tasks) == 3


class TestBatchOperations:
    """Tests for operations on several positions."""

    def test_add_multiple(self) -> None:
        """Test several todos are appended in order."""
        tasks = TaskList()
        added = tasks.add_multiple(["Buy milk", "Call mom"])
        assert [t.description for t in added] == ["Buy milk", "Call mom"]
        assert len(tasks) == 2

    def test_add_multiple_blank_adds_nothing(self) -> None:
        """Test one blank description leaves the list unchanged."""
        tasks = TaskList()
        with pytest.raises(MissingArgument):
            tasks.add_multiple(["Buy milk", " "])
        assert len(tasks) == 0

    def test_mark_multiple(self, sample_tasks: TaskList) -> None:
        """Test marking several tasks."""
        marked = sample_tasks.mark_multiple([0, 2])
        assert [t.done for t in sample_tasks] == [True, False, True]
        assert len(marked) == 2

    def test_mark_multiple_is_atomic(self, sample_tasks: TaskList) -> None:
        """Test that one bad position leaves every task unchanged."""
        with pytest.raises(IndexOutOfRange):
            sample_tasks.mark_multiple([0, 9])
        assert [t.done for t in sample_tasks] == [False, False, False]

    def test_unmark_multiple(self, sample_tasks: TaskList) -> None:
        """Test unmarking several tasks."""
        sample_tasks.mark_multiple([0, 1, 2])
        sample_tasks.unmark_multiple([1, 2])
        assert [t.done for t in sample_tasks] == [True, False, False]

    def test_delete_multiple_any_order(
        self, sample_tasks: TaskList, todo: Todo, deadline: Deadline, event: Event
    ) -> None:
        """Test positions refer to the list before deletion, whatever their order."""
        removed = sample_tasks.delete_multiple([2, 0])
        assert removed == [todo, event]
        assert sample_tasks.all() == [deadline]

    def test_delete_multiple_duplicates(self, sample_tasks: TaskList) -> None:
        """Test a repeated position deletes one task."""
        removed = sample_tasks.delete_multiple([1, 1])
        assert len(removed) == 1
        assert len(sample_tasks) == 2

    def test_delete_multiple_is_atomic(self, sample_tasks: TaskList) -> None:
        """Test nothing is deleted when a position is invalid."""
        with pytest.raises(IndexOutOfRange):
            sample_tasks.delete_multiple([0, 5])
        assert len(sample_tasks) == 3

    def test_update_multiple(self, sample_tasks: TaskList) -> None:
        """Test the same update applied to several tasks."""
        pairs = sample_tasks.update_multiple([0, 1], TaskUpdate(description="Renamed"))
        assert [updated.description for _, updated in pairs] == ["Renamed", "Renamed"]
        assert [original.description for original, _ in pairs] == ["Read book", "Return book"]
        assert sample_tasks.get(1).description == "Renamed"

    def test_update_multiple_is_atomic(self, sample_tasks: TaskList) -> None:
        """Test a kind mismatch on a later task leaves earlier tasks unchanged."""
        with pytest.raises(InvalidUpdateField):
            sample_tasks.update_multiple([1, 0], TaskUpdate(by=date(2025, 1, 1)))
        assert sample_tasks.get(1).by == date(2024, 12, 25)

    def test_update_multiple_blank_description(self, sample_tasks: TaskList) -> None:
        """Test a blank new description is a user error and changes nothing."""
        with pytest.raises(MissingArgument):
            sample_tasks.update_multiple([0, 1], TaskUpdate(description="  "))
        assert sample_tasks.get(0).description == "Read book"


class TestSearchDelegation:
    """Tests for the search helpers on the list."""

    def test_keyword(self, sample_tasks: TaskList) -> None:
        """Test keyword search over the list."""
        assert len(sample_tasks.find_by_keyword("book")) == 2

    def test_keywords(self, sample_tasks: TaskList) -> None:
        """Test multi-keyword search over the list."""
        assert len(sample_tasks.find_by_keywords(["meeting", "return"])) == 2

    def test_date(self, sample_tasks: TaskList) -> None:
        """Test date search over the list."""
        assert len(sample_tasks.find_by_date(date(2024, 12, 25))) == 2
