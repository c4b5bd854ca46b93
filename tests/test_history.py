from dataclasses import dataclass

import pytest

from storedux import actions
from storedux.history import (
    HistoryAction,
    HistoryListener,
    HistoryMessage,
    HistoryStore,
    history_store,
)
from storedux.listener import init_listener
from storedux.store import Store


def _counter_type():
    @dataclass
    class Counter(Store):
        count: int = 0

        @classmethod
        def new(cls):
            init_listener(HistoryListener(cls))
            return cls()

    return Counter


def _change(counter, value):
    def change(state):
        state.count = value

    actions.reduce_mut(counter, change)


def _setup(*values):
    counter = _counter_type()
    history = history_store(counter)
    actions.get(history)
    for value in values:
        _change(counter, value)
    return counter, history


def _apply_all(history, messages):
    for message in messages:
        actions.reduce(history, message)


def test_history_records_changes():
    counter, history = _setup(1, 2)
    recorded = actions.get(history)
    assert recorded.states() == (counter(0), counter(1), counter(2))
    assert recorded.index() == 2
    assert recorded.current() == counter(2)


def test_equal_state_is_not_recorded():
    counter, history = _setup(1)
    actions.set(counter, counter(1))
    assert actions.get(history).states() == (counter(0), counter(1))


@pytest.mark.parametrize(
    "values, messages, expected_count, expected_index",
    [
        ((1, 2), [HistoryMessage.undo()], 1, 1),
        ((), [HistoryMessage.undo()], 0, 0),
        ((1, 2), [HistoryMessage.undo(), HistoryMessage.redo()], 2, 2),
        ((1,), [HistoryMessage.redo()], 1, 1),
        ((1, 2), [HistoryMessage.jump_to(0)], 0, 0),
        ((1,), [HistoryMessage.jump_to(9)], 1, 1),
    ],
    ids=["undo", "undo-at-start", "redo", "redo-at-end", "jump", "jump-out-of-range"],
)
def test_navigation(values, messages, expected_count, expected_index):
    counter, history = _setup(*values)
    _apply_all(history, messages)
    recorded = actions.get(history)
    assert actions.get(counter) == counter(expected_count)
    assert recorded.index() == expected_index
    assert recorded.states() == tuple(counter(v) for v in (0, *values))


def test_change_after_undo_drops_redo_states():
    counter, history = _setup(1, 2)
    actions.reduce(history, HistoryMessage.undo())
    _change(counter, 5)
    recorded = actions.get(history)
    assert recorded.states() == (counter(0), counter(1), counter(5))
    assert recorded.index() == 2


def test_clear_keeps_only_current_state():
    counter, history = _setup(1, 2)
    _apply_all(history, [HistoryMessage.undo(), HistoryMessage.clear()])
    recorded = actions.get(history)
    assert recorded.states() == (counter(1),)
    assert recorded.index() == 0
    assert actions.get(counter) == counter(1)


@pytest.mark.parametrize(
    "states, index, message, expected",
    [
        (("a", "b", "c"), 1, HistoryMessage.undo(), True),
        (("a", "b", "c"), 1, HistoryMessage.redo(), True),
        (("a", "b", "c"), 1, HistoryMessage.clear(), True),
        (("a", "b", "c"), 1, HistoryMessage.jump_to(0), True),
        (("a", "b", "c"), 1, HistoryMessage.jump_to(1), False),
        (("a", "b", "c"), 1, HistoryMessage.jump_to(3), False),
        (("a",), 0, HistoryMessage.clear(), False),
        (("a",), 0, HistoryMessage.redo(), False),
        (("a",), 0, HistoryMessage.undo(), False),
    ],
)
def test_can_apply(states, index, message, expected):
    assert HistoryStore(states, index).can_apply(message) is expected


def test_message_constructors():
    assert HistoryMessage.undo().action is HistoryAction.UNDO
    assert HistoryMessage.jump_to(2) == HistoryMessage(HistoryAction.JUMP_TO, 2)


def test_history_store_class_is_cached():
    counter = _counter_type()
    assert history_store(counter) is history_store(counter)
    assert history_store(counter).store_type is counter


@pytest.mark.parametrize(
    "build, error",
    [
        (lambda: HistoryMessage.jump_to(-1), ValueError),
        (HistoryStore.new, TypeError),
        (lambda: HistoryStore(()), ValueError),
        (lambda: HistoryStore(("a",), 1), ValueError),
    ],
    ids=["negative-jump", "base-as-store", "empty", "index-outside"],
)
def test_invalid_construction_raises(build, error):
    with pytest.raises(error):
        build()