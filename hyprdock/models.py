"""Common types: lid events, monitor state, errors and exit codes."""

from dataclasses import dataclass
from enum import IntEnum, StrEnum

__all__ = [
    "DecodedEvent",
    "ExitCode",
    "HyprDockError",
    "LidEvent",
    "MonitorState",
]


class HyprDockError(BaseException):
    """Used for fatal errors which already triggered logging."""


class LidEvent(StrEnum):
    """Kind of a record read from the acpid socket."""

    CLOSE = "close"
    OPEN = "open"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class DecodedEvent:
    """A lid event along with the raw record it was decoded from."""

    kind: LidEvent
    text: str = ""


@dataclass(frozen=True)
class MonitorState:
    """Live classification of the monitor listing."""

    internal_active: bool
    external_present: bool


class ExitCode(IntEnum):
    """Process exit codes."""

    SUCCESS = 0
    USAGE_ERROR = 1  # unknown command line flag
    FATAL_ERROR = 2  # configuration, spawn, socket or decoding failure
