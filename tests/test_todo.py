import json

import pytest

from toyapps.todo import (
    Entry,
    Filter,
    TodoState,
    load_entries,
    save_entries,
)


def _state(*descriptions):
    state = TodoState()
    for d in descriptions:
        state = state.add(d)
    return state


def test_add_assigns_increasing_ids_from_one():
    state = _state("a", "b", "c")
    assert [e.id for e in state.entries] == [1, 2, 3]
    assert all(not e.completed for e in state.entries)


def test_add_uses_last_id():
    state = _state("a", "b").remove(1).add("c")
    assert [e.id for e in state.entries] == [2, 3]


def test_actions_do_not_mutate_original():
    state = _state("a")
    toggled = state.toggle(1)
    assert state.entries[0].completed is False
    assert toggled.entries[0].completed is True


def test_remove():
    state = _state("a", "b").remove(1)
    assert [e.description for e in state.entries] == ["b"]


def test_toggle_unknown_id_keeps_entries():
    state = _state("a")
    assert state.toggle(99).entries == state.entries


def test_edit_changes_description():
    state = _state("a", "b").edit(2, "bee")
    assert [e.description for e in state.entries] == ["a", "bee"]


def test_edit_empty_removes():
    state = _state("a", "b").edit(1, "")
    assert [e.id for e in state.entries] == [2]


def test_toggle_all_respects_filter():
    state = _state("a", "b").toggle(1).set_filter(Filter.ACTIVE).toggle_all()
    assert [e.completed for e in state.entries] == [True, True]
    state = state.set_filter(Filter.ALL).toggle_all()
    assert [e.completed for e in state.entries] == [False, False]


def test_clear_completed():
    state = _state("a", "b", "c").toggle(2).clear_completed()
    assert [e.id for e in state.entries] == [1, 3]


def test_filter_fits():
    done = Entry(1, "x", True)
    todo = Entry(2, "y", False)
    assert Filter.ALL.fits(done) and Filter.ALL.fits(todo)
    assert Filter.ACTIVE.fits(todo) and not Filter.ACTIVE.fits(done)
    assert Filter.COMPLETED.fits(done) and not Filter.COMPLETED.fits(todo)


def test_filter_href_and_display():
    assert Filter.ALL.as_href() == "#/"
    assert Filter.ACTIVE.as_href() == "#/active"
    assert Filter.COMPLETED.as_href() == "#/completed"
    assert [str(f) for f in Filter] == ["All", "Active", "Completed"]


def test_visible_entries_and_completed_count():
    state = _state("a", "b", "c").toggle(3)
    assert state.completed_count() == 1
    completed = state.set_filter(Filter.COMPLETED)
    assert [e.id for e in completed.visible_entries()] == [3]
    active = state.set_filter(Filter.ACTIVE)
    assert [e.id for e in active.visible_entries()] == [1, 2]


def test_all_completed():
    assert TodoState().all_completed() is True
    state = _state("a", "b").toggle(1)
    assert state.all_completed() is False
    assert state.toggle(2).all_completed() is True
    assert state.toggle(2).set_filter(Filter.ACTIVE).all_completed() is False


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "todo.json"
    state = _state("a", "b").toggle(2)
    save_entries(state.entries, path)
    assert load_entries(path) == list(state.entries)


def test_saved_format(tmp_path):
    path = tmp_path / "todo.json"
    save_entries([Entry(1, "a", False)], path)
    assert json.loads(path.read_text()) == [{"id": 1, "description": "a", "completed": False}]


def test_load_missing_file(tmp_path):
    assert load_entries(tmp_path / "nope.json") == []


@pytest.mark.parametrize(
    "content",
    ["not json", "{}", '[{"id": 1}]', '[{"id": "1", "description": "a", "completed": false}]'],
)
def test_load_invalid_content(tmp_path, content):
    path = tmp_path / "todo.json"
    path.write_text(content)
    assert load_entries(path) == []


def test_save_to_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        save_entries([Entry(1, "a")], tmp_path / "missing" / "todo.json")