"""Application-wide shared state: stores, reducers, dispatch, subscribers, listeners, selectors and undo history."""

__version__ = "0.1.0"