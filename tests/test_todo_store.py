from concurrent.futures import ThreadPoolExecutor

import pytest

from todo_api.app.core.errors import DuplicateTitleError, NotFoundError
from todo_api.app.schemas.todo import Todo
from todo_api.app.services.todo_store import TodoStore


def _todo(title: str, completed: bool = False) -> Todo:
    return Todo(title=title, completed=completed)


def test_new_store_is_empty(store) -> None:
    assert store.list() == []
    assert len(store) == 0


def test_create_appends_at_end(store) -> None:
    store.create(_todo("a"))
    created = store.create(_todo("b", True))
    assert created == _todo("b", True)
    assert store.list() == [_todo("a"), _todo("b", True)]


def test_list_returns_snapshot(store) -> None:
    store.create(_todo("a"))
    snapshot = store.list()
    store.create(_todo("b"))
    assert snapshot == [_todo("a")]
    snapshot.clear()
    assert len(store) == 2


def test_create_allows_duplicate_titles_by_default(store) -> None:
    store.create(_todo("a"))
    store.create(_todo("a", True))
    assert len(store) == 2


def test_create_rejects_duplicates_with_unique_titles() -> None:
    store = TodoStore(unique_titles=True)
    store.create(_todo("a"))
    with pytest.raises(DuplicateTitleError) as excinfo:
        store.create(_todo("a", True))
    assert excinfo.value.status_code == 409
    assert store.list() == [_todo("a")]


def test_update_replaces_in_place(store) -> None:
    for title in ("a", "b", "c"):
        store.create(_todo(title))
    updated = store.update(_todo("b", True))
    assert updated == _todo("b", True)
    assert store.list() == [_todo("a"), _todo("b", True), _todo("c")]


def test_update_only_touches_first_match(store) -> None:
    store.create(_todo("a"))
    store.create(_todo("a"))
    store.update(_todo("a", True))
    assert store.list() == [_todo("a", True), _todo("a")]


def test_update_missing_raises_not_found(store) -> None:
    store.create(_todo("a"))
    with pytest.raises(NotFoundError):
        store.update(_todo("ghost", True))
    assert store.list() == [_todo("a")]


def test_delete_removes_first_match_only(store) -> None:
    store.create(_todo("a"))
    store.create(_todo("b"))
    store.create(_todo("a", True))
    store.delete(_todo("a", True))
    assert store.list() == [_todo("b"), _todo("a", True)]


def test_delete_ignores_completed_flag(store) -> None:
    store.create(_todo("a", False))
    store.delete(_todo("a", True))
    assert len(store) == 0


def test_delete_missing_raises_not_found(store) -> None:
    store.create(_todo("a"))
    with pytest.raises(NotFoundError) as excinfo:
        store.delete(_todo("b"))
    assert excinfo.value.status_code == 404
    assert store.list() == [_todo("a")]


def test_concurrent_creates_are_not_lost(store) -> None:
    titles = [f"todo-{i}" for i in range(200)]
    with ThreadPoolExecutor(max_workers=16) as pool:
        list(pool.map(lambda title: store.create(_todo(title)), titles))
    stored = store.list()
    assert len(stored) == len(titles)
    assert sorted(todo.title for todo in stored) == sorted(titles)


def test_concurrent_mixed_operations_keep_store_consistent(store) -> None:
    for i in range(100):
        store.create(_todo(f"keep-{i}"))

    def work(i: int) -> None:
        store.create(_todo(f"new-{i}"))
        store.update(_todo(f"keep-{i}", True))
        store.delete(_todo(f"new-{i}"))

    with ThreadPoolExecutor(max_workers=16) as pool:
        list(pool.map(work, range(100)))

    stored = store.list()
    assert [todo.title for todo in stored] == [f"keep-{i}" for i in range(100)]
    assert all(todo.completed for todo in stored)
