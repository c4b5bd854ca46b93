"""Class decorator that turns a plain class into a store."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional, Union

from .listener import Listener, init_listener

ListenerSource = Union[Listener, Callable[[], Listener]]


def _make_listener(source: ListenerSource) -> Listener:
    if isinstance(source, Listener):
        return source
    if callable(source):
        return source()
    raise TypeError(f"{source!r} is neither a listener nor a listener factory")


def store(cls: Optional[type] = None, *, listeners: Iterable[ListenerSource] = ()) -> Any:
    """Give ``cls`` the store protocol.

    The store is created by calling the class without arguments, after every
    entry of ``listeners`` has been started. An entry is a listener or a
    callable that builds one; callables are called each time the store is
    created. Subscribers are notified whenever the new state compares unequal
    to the old one. Usable bare (``@store``) or with options
    (``@store(listeners=[...])``).
    """
    sources = tuple(listeners)

    def decorate(target: type) -> type:
        def new(klass: type) -> Any:
            for source in sources:
                init_listener(_make_listener(source))
            return klass()

        def should_notify(self: Any, old: Any) -> bool:
            return self != old

        target.new = classmethod(new)
        target.should_notify = should_notify
        return target

    if cls is None:
        return decorate
    return decorate(cls)