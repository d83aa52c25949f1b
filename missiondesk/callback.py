"""A single-slot callback that a controller fires and a view subscribes to."""

from __future__ import annotations

from typing import Any, Callable, Optional


class Callback:
    """Holds at most one handler; invoking it returns the handler's result.

    When no handler is set, or when the callback is invoked again from inside
    its own handler, ``invoke`` returns the configured default instead.
    """

    def __init__(self, default: Any = None) -> None:
        self._default = default
        self._handler: Optional[Callable[..., Any]] = None

    def on(self, handler: Callable[..., Any]) -> None:
        """Replace the current handler with ``handler``."""
        self._handler = handler

    def invoke(self, *args: Any) -> Any:
        """Call the handler with ``args`` and return its result."""
        handler = self._handler
        if handler is None:
            return self._default
        # The handler is taken out while it runs, so re-entrant calls see none.
        self._handler = None
        try:
            return handler(*args)
        finally:
            self._handler = handler