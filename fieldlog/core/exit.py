"""
Exit handlers run before a FATAL entry terminates the process
"""

import os
import sys
import threading
from typing import Callable, List

_handlers: List[Callable[[], None]] = []
_lock = threading.Lock()


def register_exit_handler(handler: Callable[[], None]) -> None:
    """
    Register a function to run before a FATAL entry exits the process.

    Handlers run in registration order. Typical uses are flushing or
    closing sinks the application owns.

    Args:
        handler: Callable taking no arguments
    """
    if not callable(handler):
        raise TypeError("handler must be callable")
    with _lock:
        _handlers.append(handler)


def unregister_exit_handler(handler: Callable[[], None]) -> None:
    """Remove a previously registered handler, if present."""
    with _lock:
        if handler in _handlers:
            _handlers.remove(handler)


def clear_exit_handlers() -> None:
    """Remove all handlers. Useful for testing."""
    with _lock:
        _handlers.clear()


def run_exit_handlers() -> None:
    """Run every handler; a failing handler is reported and skipped."""
    with _lock:
        handlers = list(_handlers)

    for handler in handlers:
        try:
            handler()
        except Exception as e:
            print(f"Error running exit handler: {e}", file=sys.stderr)


def exit_process(code: int) -> None:
    """
    Flush standard streams and exit with code.

    On the main thread this raises SystemExit. A worker thread cannot end
    the process that way, so there the process is ended with os._exit.
    """
    for stream in (sys.stdout, sys.stderr):
        try:
            stream.flush()
        except (OSError, ValueError, AttributeError):
            pass  # Closed or replaced stream
    if threading.current_thread() is not threading.main_thread():
        os._exit(code)
    sys.exit(code)
