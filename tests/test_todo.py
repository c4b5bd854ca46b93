import pytest

from storedux.dispatch import Dispatch
from storedux.todo import Entry, Filter, TodoState


def _state(*flags, filter=Filter.ALL):
    entries = [Entry(f"task {i}", completed=flag) for i, flag in enumerate(flags)]
    return TodoState(entries=entries, filter=filter)


def test_filter_fits():
    done = Entry("a", completed=True)
    open_ = Entry("b")
    assert Filter.ALL.fits(done) and Filter.ALL.fits(open_)
    assert Filter.ACTIVE.fits(open_) and not Filter.ACTIVE.fits(done)
    assert Filter.COMPLETED.fits(done) and not Filter.COMPLETED.fits(open_)


def test_filter_hrefs_and_names():
    assert Filter.ALL.as_href() == "#/"
    assert Filter.ACTIVE.as_href() == "#/active"
    assert Filter.COMPLETED.as_href() == "#/completed"
    assert [str(f) for f in Filter] == ["All", "Active", "Completed"]


def test_new_is_empty_default():
    state = TodoState.new()
    assert state == TodoState()
    assert state.filter is Filter.ALL
    assert state.total() == 0


def test_should_notify_compares_values():
    assert _state(True).should_notify(_state(False))
    assert not _state(True).should_notify(_state(True))


def test_totals():
    state = _state(True, False, True)
    assert state.total() == 3
    assert state.total_completed() == 2


def test_is_all_completed():
    assert not TodoState().is_all_completed()
    assert _state(True, True).is_all_completed()
    assert not _state(True, False).is_all_completed()
    assert not _state(True, True, filter=Filter.ACTIVE).is_all_completed()


def test_clear_completed_keeps_active_entries():
    state = _state(True, False, True)
    state.clear_completed()
    assert state.entries == [Entry("task 1")]


def test_toggle_counts_visible_entries():
    state = _state(True, False, False, filter=Filter.ACTIVE)
    state.toggle(0)
    assert [e.completed for e in state.entries] == [True, True, False]


def test_toggle_out_of_range_raises():
    state = _state(True, filter=Filter.ACTIVE)
    with pytest.raises(IndexError):
        state.toggle(0)


def test_toggle_all_only_touches_visible():
    state = _state(True, False, filter=Filter.COMPLETED)
    state.toggle_all(False)
    assert [e.completed for e in state.entries] == [False, False]
    state = _state(True, False)
    state.toggle_all(True)
    assert all(e.completed for e in state.entries)


def test_toggle_edit_and_clear_all_edit():
    state = _state(False, False)
    state.toggle_edit(1)
    assert [e.editing for e in state.entries] == [False, True]
    state.clear_all_edit()
    assert not any(e.editing for e in state.entries)


def test_complete_edit_sets_description():
    state = _state(False)
    state.toggle_edit(0)
    state.complete_edit(0, "renamed")
    assert state.entries == [Entry("renamed")]


def test_complete_edit_with_empty_value_removes():
    state = _state(False, False)
    state.complete_edit(0, "")
    assert state.entries == [Entry("task 1")]


def test_remove_uses_visible_index():
    state = _state(False, True, False, filter=Filter.COMPLETED)
    state.remove(0)
    assert state.entries == [Entry("task 0"), Entry("task 2")]


def test_remove_out_of_range_raises():
    with pytest.raises(IndexError):
        TodoState().remove(0)


def test_state_works_as_store():
    dispatch = Dispatch(TodoState)
    before = dispatch.get().total()
    dispatch.reduce_mut(lambda s: s.entries.append(Entry("write tests")))
    after = dispatch.get()
    assert after.total() == before + 1
    assert after.entries[-1] == Entry("write tests")