# tests/test_menu.py

from __future__ import annotations

from task_tracker.cli.menu import INVALID_CHOICE, INVALID_ID, MenuRegistry, registry
from task_tracker.tasks.task_models import TaskStatus


def _scripted(*answers: str):
    """Prompt stub that records prompts and replays answers in order."""
    it = iter(answers)
    prompts: list[str] = []

    def ask(prompt: str) -> str:
        prompts.append(prompt)
        return next(it)

    return ask, prompts


def test_menu_registry_routes_and_rejects(state) -> None:
    reg = MenuRegistry()
    called = {"n": 0}

    def handler(state, ask):
        called["n"] += 1
        return "ok"

    reg.register(1, handler, "One")
    ask, _ = _scripted()

    assert reg.handle(state, " 1 ", ask) == "ok"
    assert reg.handle(state, "2", ask) == INVALID_CHOICE
    assert reg.handle(state, "one", ask) == INVALID_CHOICE
    assert reg.handle(state, "", ask) == INVALID_CHOICE
    assert called["n"] == 1


def test_build_menu_lists_actions_in_order() -> None:
    assert registry.build_menu().splitlines() == [
        "Task Manager",
        "1. Add Task",
        "2. List Tasks",
        "3. Mark Task as Completed",
        "4. Mark Task as Deleted",
        "5. Delete Task",
        "6. Exit",
    ]


def test_add_trims_input(state) -> None:
    ask, prompts = _scripted("  Buy milk \n", " 2% ")

    assert registry.handle(state, "1", ask) is None

    assert prompts == ["Enter task title:", "Enter task description:"]
    task = state.task_store.get(1)
    assert task is not None
    assert (task.title, task.description) == ("Buy milk", "2%")


def test_list_is_none_when_empty(state) -> None:
    ask, _ = _scripted()
    assert registry.handle(state, "2", ask) is None


def test_complete_soft_delete_and_delete(state) -> None:
    task_id = state.task_store.create("t", "d")

    ask, prompts = _scripted(str(task_id))
    assert registry.handle(state, "3", ask) is None
    assert prompts == ["Enter task ID to mark as completed:"]
    assert state.task_store.get(task_id).status is TaskStatus.COMPLETED

    ask, prompts = _scripted(str(task_id))
    assert registry.handle(state, "4", ask) is None
    assert prompts == ["Enter task ID to mark as deleted:"]
    assert state.task_store.get(task_id).status is TaskStatus.DELETED

    ask, prompts = _scripted(str(task_id))
    assert registry.handle(state, "5", ask) is None
    assert prompts == ["Enter task ID to delete:"]
    assert state.task_store.get(task_id) is None


def test_invalid_id_abandons_action_without_saving(state) -> None:
    state.task_store.create("t", "d")
    path = state.task_store.path
    before = path.read_bytes()

    for choice in ("3", "4", "5"):
        ask, _ = _scripted("not-a-number")
        assert registry.handle(state, choice, ask) == INVALID_ID

    assert path.read_bytes() == before
    assert state.task_store.get(1).status is TaskStatus.PENDING


def test_unknown_id_reports_not_found(state) -> None:
    ask, _ = _scripted("42")
    assert registry.handle(state, "3", ask) == "Task with ID 42 not found."


def test_signed_selector_and_id_are_accepted(state) -> None:
    task_id = state.task_store.create("t", "d")

    ask, _ = _scripted(f" +{task_id} ")
    assert registry.handle(state, "+3", ask) is None

    assert state.task_store.get(task_id).status is TaskStatus.COMPLETED
