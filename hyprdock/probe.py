"""Monitor topology queries.

The listing command is re-run on every query: docking is a physical event the
daemon can't observe otherwise, so decisions are always based on live output.
Matching is a plain substring test on the raw listing text, a name that
appears elsewhere in the output (or as a prefix of another connector) yields
a false positive.
"""

from __future__ import annotations

__all__ = ["MonitorProbe"]

from typing import TYPE_CHECKING

from .constants import EXTERNAL_MONITOR_MARKER
from .logging_setup import get_logger
from .models import HyprDockError, MonitorState

if TYPE_CHECKING:
    import logging

    from .config import MonitorConfiguration
    from .runner import CommandRunner


class MonitorProbe:
    """Classifies the output of the configured monitor listing command."""

    def __init__(self, config: MonitorConfiguration, runner: CommandRunner, log: logging.Logger | None = None) -> None:
        self.config = config
        self.runner = runner
        self.log = log or get_logger("probe")

    async def get_listing(self) -> str:
        """Run the listing command and return its output as text."""
        output = await self.runner.run_capture(self.config.get_monitors_command)
        try:
            return output.decode("utf-8")
        except UnicodeDecodeError as e:
            self.log.critical("`%s` returned invalid text: %s", self.config.get_monitors_command, e)
            raise HyprDockError from e

    async def is_internal_active(self) -> bool:
        """Return True if the internal monitor name shows up in the listing."""
        active = self.config.monitor_name in await self.get_listing()
        self.log.debug("internal monitor %s active: %s", self.config.monitor_name, active)
        return active

    async def has_external_monitor(self) -> bool:
        """Return True if a second display is enumerated."""
        present = EXTERNAL_MONITOR_MARKER in await self.get_listing()
        self.log.debug("external monitor present: %s", present)
        return present

    async def get_state(self) -> MonitorState:
        """Return both classifications from a single listing."""
        listing = await self.get_listing()
        return MonitorState(
            internal_active=self.config.monitor_name in listing,
            external_present=EXTERNAL_MONITOR_MARKER in listing,
        )
