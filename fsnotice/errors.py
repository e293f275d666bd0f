"""Watch actions, error codes and the process-wide last error log."""

from __future__ import annotations

import threading
from enum import IntEnum

__all__ = [
    "Action",
    "ErrorCode",
    "WatchError",
    "create_last_error",
    "get_last_error_log",
    "action_name",
]


class Action(IntEnum):
    """File actions reported to listeners.

    A rename is reported as a deletion of the old name followed by an
    addition of the new one, unless the backend can report a move.
    """

    ADD = 1
    DELETE = 2
    MODIFIED = 3
    MOVED = 4


class ErrorCode(IntEnum):
    """Error codes returned in place of a watch id."""

    FILE_NOT_FOUND = -1
    FILE_REPEATED = -2
    FILE_OUT_OF_SCOPE = -3
    FILE_NOT_READABLE = -4
    # Directory lives on a remote file system; a generic watcher is needed.
    FILE_REMOTE = -5
    UNSPECIFIED = -6


class WatchError(Exception):
    """Raised when a watch cannot be added or handled."""

    def __init__(self, code: ErrorCode, log: str = "") -> None:
        self.code = ErrorCode(code)
        self.log = log
        super().__init__(f"{self.code.name}: {log}" if log else self.code.name)


_ACTION_NAMES = {
    Action.ADD: "Add",
    Action.MODIFIED: "Modified",
    Action.DELETE: "Delete",
    Action.MOVED: "Moved",
}

_last_error_lock = threading.Lock()
_last_error_log = ""


def create_last_error(err: ErrorCode | int, log: str) -> ErrorCode:
    """Record *log* as the last error and return *err* as an ErrorCode."""
    global _last_error_log
    code = ErrorCode(err)
    with _last_error_lock:
        _last_error_log = log
    return code


def get_last_error_log() -> str:
    """Return the message recorded by the most recent error."""
    with _last_error_lock:
        return _last_error_log


def action_name(action: Action | int) -> str:
    """Return a readable name for *action*, or "Bad Action" if unknown."""
    try:
        return _ACTION_NAMES[Action(action)]
    except (ValueError, KeyError):
        return "Bad Action"