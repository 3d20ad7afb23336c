"""Command execution.

CommandRunner:
    The narrow interface used by the probe, the actuator and the controller.

ProcessRunner:
    Spawns configured command lines with asyncio. Detached commands are not
    waited for by the caller; they are reaped in the background.
"""

from __future__ import annotations

__all__ = ["CommandRunner", "ProcessRunner", "split_command"]

import asyncio
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .logging_setup import get_logger
from .models import HyprDockError

if TYPE_CHECKING:
    import logging


def split_command(command_line: str) -> list[str]:
    """Split a command line on whitespace. No quoting support."""
    return command_line.split()


@runtime_checkable
class CommandRunner(Protocol):
    """Runs configured command lines."""

    async def run(self, command_line: str) -> None:
        """Spawn `command_line` without waiting for it to complete."""
        ...

    async def run_capture(self, command_line: str) -> bytes:
        """Run `command_line` until it exits and return its standard output."""
        ...


class ProcessRunner:
    """CommandRunner spawning real processes.

    Any spawn failure is fatal: a misconfigured command can't be recovered
    from in the middle of a layout switch.

    Detached processes are reaped by background tasks. A one-shot command
    line run (eg: `hyprdock -su`) exits while some of them are still
    running: the children keep running, but Python may emit a
    `ResourceWarning: unclosed transport` for each of them at shutdown.
    """

    def __init__(self, log: logging.Logger | None = None) -> None:
        self.log = log or get_logger("runner")
        self._reapers: set[asyncio.Task] = set()

    async def run(self, command_line: str) -> None:
        """Spawn `command_line` and return immediately.

        Empty command lines are ignored.

        Raises:
            HyprDockError: if the process can't be spawned
        """
        argv = split_command(command_line)
        if not argv:
            return
        self.log.debug("run: %s", argv)
        try:
            proc = await asyncio.create_subprocess_exec(*argv)
        except OSError as e:
            self.log.critical("Could not run `%s`, please check your configuration: %s", command_line, e)
            raise HyprDockError from e
        reaper = asyncio.create_task(proc.wait())
        self._reapers.add(reaper)
        reaper.add_done_callback(self._reapers.discard)

    async def run_capture(self, command_line: str) -> bytes:
        """Run `command_line` to completion and return its stdout.

        Empty command lines return `b""` without spawning anything.

        Raises:
            HyprDockError: if the process can't be spawned or waited for
        """
        argv = split_command(command_line)
        if not argv:
            return b""
        self.log.debug("capture: %s", argv)
        try:
            proc = await asyncio.create_subprocess_exec(*argv, stdout=asyncio.subprocess.PIPE)
            stdout, _ = await proc.communicate()
        except OSError as e:
            self.log.critical("Could not run `%s`, please check your configuration: %s", command_line, e)
            raise HyprDockError from e
        return stdout
