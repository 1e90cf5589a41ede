import pytest

from tinyapps.todo import Task, TodoList


def test_empty_list_status():
    todo = TodoList()
    assert todo.status_text() == "Status: 0 todo / 0 completed"
    assert len(todo) == 0


def test_add_task_returns_task_with_name():
    todo = TodoList()
    task = todo.add_task("Buy milk")
    assert task.name == "Buy milk"
    assert task.completed is False
    assert list(todo) == [task]


def test_add_task_rejects_empty_name():
    todo = TodoList()
    with pytest.raises(ValueError):
        todo.add_task("")
    assert len(todo) == 0


def test_counts_follow_completion():
    todo = TodoList()
    first = todo.add_task("one")
    todo.add_task("two")
    first.set_completed(True)
    assert todo.completed_count() == 1
    assert todo.todo_count() == 1
    assert todo.status_text() == "Status: 1 todo / 1 completed"
    first.set_completed(False)
    assert todo.completed_count() == 0
    assert todo.todo_count() == len(todo)


def test_counts_sum_to_length():
    todo = TodoList()
    tasks = [todo.add_task(f"task {n}") for n in range(5)]
    for task in tasks[::2]:
        task.set_completed(True)
    assert todo.completed_count() + todo.todo_count() == len(todo)


def test_remove_task():
    todo = TodoList()
    keep = todo.add_task("keep")
    drop = todo.add_task("drop")
    todo.remove_task(drop)
    assert todo.tasks == (keep,)


def test_remove_unknown_task_raises():
    todo = TodoList()
    todo.add_task("a")
    with pytest.raises(ValueError):
        todo.remove_task(Task("elsewhere"))


def test_removing_completed_task_updates_status():
    todo = TodoList()
    task = todo.add_task("done")
    task.set_completed(True)
    todo.remove_task(task)
    assert todo.completed_count() == 0


def test_rename():
    task = Task("old")
    task.rename("new")
    assert task.name == "new"


def test_rename_to_empty_keeps_name():
    task = Task("old")
    with pytest.raises(ValueError):
        task.rename("")
    assert task.name == "old"


def test_tasks_with_same_name_are_distinct():
    todo = TodoList()
    a = todo.add_task("same")
    b = todo.add_task("same")
    todo.remove_task(b)
    assert todo.tasks == (a,)