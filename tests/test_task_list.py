# tests/test_task_list.py

from __future__ import annotations

from datetime import date

import pytest

from meow.tasks.task_list import TaskList
from meow.tasks.task_models import Task


def _sample() -> TaskList:
    return TaskList(
        [
            Task.deadline("pay rent", date(2024, 3, 1)),
            Task.todo("Buy milk"),
            Task.event("trip", date(2024, 2, 1), date(2024, 2, 10)),
            Task.todo("apply for visa"),
            Task.deadline("buy gift", date(2024, 2, 1)),
        ]
    )


def test_add_get_delete_keep_indices_dense() -> None:
    tasks = _sample()
    assert len(tasks) == tasks.count == 5

    removed = tasks.delete(1)
    assert removed.description == "Buy milk"
    assert [t.description for t in tasks] == ["pay rent", "trip", "apply for visa", "buy gift"]
    assert tasks.get(1).description == "trip"

    tasks.add(Task.todo("new"))
    assert tasks.get(4).description == "new"


@pytest.mark.parametrize("index", [-1, 5, 100])
def test_bounds_checked(index: int) -> None:
    tasks = _sample()
    with pytest.raises(IndexError):
        tasks.get(index)
    with pytest.raises(IndexError):
        tasks.delete(index)
    assert tasks.count == 5


def test_render_is_one_based() -> None:
    tasks = TaskList([Task.todo("a"), Task.todo("b")])
    assert tasks.render() == "1.[T][ ] a\n2.[T][ ] b"
    assert TaskList().render() == ""


def test_find_is_case_insensitive_and_returns_new_list() -> None:
    tasks = _sample()
    found = tasks.find("BUY")
    assert [t.description for t in found] == ["Buy milk", "buy gift"]
    assert found is not tasks
    assert tasks.find("nothing").count == 0


def test_sort_undated_first_then_date_then_description() -> None:
    tasks = _sample()
    ordered = tasks.sort()
    assert [t.description for t in ordered] == [
        "apply for visa",
        "Buy milk",
        "buy gift",
        "trip",
        "pay rent",
    ]
    # original order untouched
    assert tasks.get(0).description == "pay rent"
