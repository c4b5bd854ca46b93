# storedux

storedux keeps application-wide shared state in a Python program. Each
store type has one shared state, which is created the first time the store
is used. You change the state through reducers. Subscribers are told about
every change that the store thinks matters.

The package has no dependencies outside the standard library.

## Defining a store

A store is any class that has a `new()` class method, which builds the
initial state, and a `should_notify(old)` method, which says whether
subscribers should hear about a change. There are three ways to get these:

- Subclass `storedux.store.Store`. Its `new()` calls the class with no
  arguments. Its `should_notify` returns `self != old`.
- Decorate the class with `storedux.derive.store`, which adds the same two
  methods.
- Write the two methods yourself.

```python
from dataclasses import dataclass
from storedux.derive import store

@store
@dataclass
class Counter:
    count: int = 0
```

`store(listeners=[...])` starts each given listener every time the store is
created. An entry in the list is either a `Listener` or a callable that
returns one.

If a class has neither method, it is still accepted. It is called with no
arguments to build the state, and `!=` decides whether to notify.

## Reading and changing state

`storedux.dispatch.Dispatch` is the main handle to a store:

```python
from storedux.dispatch import Dispatch

dispatch = Dispatch(Counter)
dispatch.reduce_mut(lambda state: setattr(state, "count", state.count + 1))
assert dispatch.get().count == 1

dispatch.set(Counter(count=10))
dispatch.reduce(lambda state: Counter(count=state.count * 2))
assert dispatch.get().count == 20
```

The change methods differ in what they pass and what they expect back:

- `reduce(f)` replaces the state with `f(state)`.
- `reduce_mut(f)` deep-copies the state, lets `f` change the copy in place,
  and stores the copy. This keeps the old state intact, so the change can be
  detected.
- `apply(reducer)` takes a `storedux.store.Reducer` or a plain function of
  the state.
- `set(value)` replaces the state with `value`.

Every change method also has a callback form. Each of these returns a
function that you can pass to an event source:

- `apply_callback(f)` builds a reducer from the event with `f(event)` and
  applies it.
- `set_callback(f)` sets the state to `f(event)`.
- `reduce_callback(f)` and `reduce_mut_callback(f)` ignore the event.
- `reduce_callback_with(f)` and `reduce_mut_callback_with(f)` call
  `f(state, event)`.

The same operations exist as plain functions in `storedux.actions`, which
take the store type as their first argument: `reduce`, `reduce_mut`, `set`,
`get`, `subscribe`, `subscribe_silent` and `notify_subscribers`.

### Async

These coroutine methods await the reducer or function before storing the
result:

- `apply_future(reducer)` takes a `storedux.store.AsyncReducer` or a
  function returning an awaitable.
- `reduce_future(f)`.
- `reduce_mut_future(f)`.

These callback forms schedule the change as an `asyncio` task on the
running event loop and return the task:

- `apply_future_callback`
- `reduce_future_callback`
- `reduce_future_callback_with`
- `reduce_mut_future_callback`
- `reduce_mut_future_callback_with`

They must be called while an event loop is running.

## Subscribing

```python
seen = []
watching = Dispatch.subscribe(Counter, seen.append)       # current state now, then every change
quiet = Dispatch.subscribe_silent(Counter, seen.append)   # only later changes
```

Subscribers are called only when the new state's `should_notify(old)` is
true.

A subscription lasts as long as its dispatch or its copies (made with
`copy.copy`) are alive. It also ends when the dispatch leaves a `with`
block. Two dispatches compare equal only when they share the same
subscription.

`storedux.actions.subscribe` returns a `storedux.subscriber.SubscriberId`
directly:

- `unsubscribe()` ends the subscription.
- `leak()` keeps it for the life of the thread.

## Listeners

A `storedux.listener.Listener` names its store in a `store` attribute and
implements `on_change(state)`. `init_listener(listener)` subscribes the
listener to later changes. If a listener of the same class was already
started for the same store, it is replaced. Listeners of different classes
run side by side.

## Selectors

`storedux.selector.select(store_type, selector, on_change=None)` follows a
derived part of a store:

- The current part is available from `value()`.
- `on_change` is called only when a new value compares unequal to the
  previous one.

`select_with_deps` passes an extra `deps` argument to the selector. The
`Selector` class also accepts a custom `eq` function.

A selector stops following the store after `close()`, when it leaves a
`with` block, or when it is garbage collected.

## Undo and redo

`storedux.history` records the states that a store passes through:

```python
from storedux.history import HistoryListener, HistoryMessage, history_store
from storedux.listener import init_listener

@store(listeners=[lambda: HistoryListener(Counter)])
@dataclass
class Counter:
    count: int = 0

history = Dispatch(history_store(Counter))
Dispatch(Counter).reduce_mut(lambda s: setattr(s, "count", 1))
history.apply(HistoryMessage.undo())
assert Dispatch(Counter).get().count == 0
```

`history_store(store_type)` returns the `HistoryStore` class for that store.
A `HistoryStore` offers:

- `states()`: all recorded states.
- `index()`: the position of the current one.
- `current()`: the current state.
- `can_apply(message)`: whether a message would do anything.

The available messages are:

- `HistoryMessage.undo()` and `HistoryMessage.redo()` move one step back or
  forward.
- `HistoryMessage.jump_to(index)` moves to a given position.
- `HistoryMessage.clear()` keeps only the current state.

Undo, redo and jump also set the watched store to the selected state. A new
change made after an undo drops the states that came after it.

## Mutable shared values

`storedux.mrc.Mrc` wraps a value that is costly to copy. Copies share the
inner value, and deep copies do too. Each of these marks the handle as
changed:

- `borrow_mut()`
- `with_mut(f)`
- `set(value)`

A changed handle no longer compares equal to its earlier copies, so
subscribers are notified. `borrow()` reads the value without marking a
change.

## A to-do list state

`storedux.todo` has a ready-made store for a to-do list:

- `TodoState` holds `Entry` items, a `Filter` (`ALL`, `ACTIVE`,
  `COMPLETED`) and an edit buffer.
- It has methods to toggle, edit, remove and clear completed entries.
- Indexes passed to these methods count only the entries visible under the
  current filter. An index with no visible entry raises `IndexError`.

## Lower-level pieces

- `storedux.context.get_or_init(key, factory=None)` returns the `Context`
  that holds a store's state.
- `storedux.subscriber.subscribers_for(store_type)` returns its
  `Subscribers` list.

## What it does not do

- State lives in memory only, and separately in each thread. Nothing is
  saved to disk or synchronised between processes.
- There are no user-interface components or hooks. Callbacks are plain
  functions for you to connect to whatever produces your events.