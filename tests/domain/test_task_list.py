"""Tests for the ordered TaskList collection."""

import pytest

from taskctl.domain.task_list import TaskList
from taskctl.domain.tasks import Todo


def _todos(*names: str) -> TaskList:
    return TaskList(Todo(description=n) for n in names)


class TestTaskList:
    def test_starts_empty(self) -> None:
        tasks = TaskList()
        assert tasks.count() == 0
        assert list(tasks) == []

    def test_add_appends_at_end(self) -> None:
        tasks = _todos("a", "b")
        tasks.add(Todo(description="c"))
        assert [t.description for t in tasks] == ["a", "b", "c"]
        assert tasks.count() == 3
        assert len(tasks) == 3

    def test_get_is_one_based(self) -> None:
        tasks = _todos("a", "b")
        assert tasks.get(1).description == "a"
        assert tasks.get(2).description == "b"

    @pytest.mark.parametrize("index", [0, 3, -1])
    def test_get_out_of_range(self, index: int) -> None:
        with pytest.raises(IndexError):
            _todos("a", "b").get(index)

    def test_remove_shifts_later_tasks(self) -> None:
        tasks = _todos("a", "b", "c")
        removed = tasks.remove(2)
        assert removed.description == "b"
        assert tasks.get(2).description == "c"
        assert tasks.count() == 2

    def test_find_is_case_insensitive_and_keeps_numbers(self) -> None:
        tasks = _todos("Read BOOK", "buy milk", "return book")
        matches = tasks.find("book")
        assert [(i, t.description) for i, t in matches] == [
            (1, "Read BOOK"),
            (3, "return book"),
        ]

    def test_find_no_match(self) -> None:
        assert _todos("a").find("zzz") == []

    def test_numbered(self) -> None:
        assert [i for i, _ in _todos("a", "b").numbered()] == [1, 2]
