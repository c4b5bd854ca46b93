from dataclasses import dataclass

import pytest

from storedux import actions
from storedux.listener import Listener, init_listener
from storedux.store import Store
from storedux.subscriber import subscribers_for


def make_state():
    @dataclass
    class Observed(Store):
        value: int = 0

    return Observed


class RecordingListener(Listener):
    def __init__(self, store):
        self.store = store
        self.value = 0

    def on_change(self, state):
        self.value = state.value


class OtherRecordingListener(RecordingListener):
    pass


def set_value(state_type, value):
    def change(state):
        state.value = value

    actions.reduce_mut(state_type, change)


def test_listener_is_called():
    state_type = make_state()
    listener = RecordingListener(state_type)
    init_listener(listener)
    set_value(state_type, 1)
    assert listener.value == 1


@pytest.mark.parametrize(
    "second_type, first_after, subscriber_count",
    [(RecordingListener, 1, 1), (OtherRecordingListener, 2, 2)],
    ids=["same-type-replaced", "other-type-kept"],
)
def test_second_listener(second_type, first_after, subscriber_count):
    state_type = make_state()
    first = RecordingListener(state_type)
    second = second_type(state_type)

    init_listener(first)
    set_value(state_type, 1)
    assert first.value == 1

    init_listener(second)
    set_value(state_type, 2)
    assert (first.value, second.value) == (first_after, 2)
    assert len(subscribers_for(state_type)) == subscriber_count


def test_listener_on_other_store_is_not_replaced():
    stores = (make_state(), make_state())
    listeners = [RecordingListener(store) for store in stores]
    for listener in listeners:
        init_listener(listener)
    for value, store in zip((3, 4), stores):
        set_value(store, value)
    assert [listener.value for listener in listeners] == [3, 4]


def test_can_init_listener_from_store():
    calls = []

    class AppendingListener(Listener):
        def __init__(self, store):
            self.store = store

        def on_change(self, state):
            calls.append(state)

    @dataclass
    class SelfListening(Store):
        value: int = 0

        @classmethod
        def new(cls):
            init_listener(AppendingListener(cls))
            return cls()

    assert actions.get(SelfListening) == SelfListening(0)
    actions.set(SelfListening, SelfListening(7))
    assert calls == [SelfListening(7)]


def test_listener_without_store_is_rejected():
    class Storeless(Listener):
        def on_change(self, state):
            pass

    with pytest.raises(TypeError):
        init_listener(Storeless())