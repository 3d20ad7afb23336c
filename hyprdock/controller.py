"""Lid event state machine.

No state is stored: every decision re-reads the live monitor listing, so the
outcome only depends on the event and on what the probe reports right now.
"""

from __future__ import annotations

__all__ = ["DockingController"]

import asyncio
from typing import TYPE_CHECKING

from .actuator import DisplayActuator
from .logging_setup import get_logger
from .models import DecodedEvent, LidEvent
from .probe import MonitorProbe

if TYPE_CHECKING:
    import logging

    from .config import MonitorConfiguration
    from .runner import CommandRunner


class DockingController:
    """Reacts to lid events by driving the display actuator."""

    def __init__(self, config: MonitorConfiguration, runner: CommandRunner, log: logging.Logger | None = None) -> None:
        self.config = config
        self.runner = runner
        self.log = log or get_logger("controller")
        self.probe = MonitorProbe(config, runner)
        self.actuator = DisplayActuator(config, runner, self.probe)

    async def handle_event(self, event: DecodedEvent) -> None:
        """Dispatch a decoded lid event."""
        match event.kind:
            case LidEvent.CLOSE:
                self.log.info("lid closed")
                await self.handle_close()
            case LidEvent.OPEN:
                self.log.info("lid opened")
                await self.handle_open()
            case _:
                self.log.debug("ignoring event %r", event.text)

    async def handle_close(self) -> None:
        """Lid closed: move to the external monitor, or lock & suspend."""
        if await self.probe.has_external_monitor():
            await self.actuator.enable_external_only(refresh=False)
            # let the compositor finish the mode switch
            await asyncio.sleep(self.config.settle_delay)
            await self.actuator.restart_wallpaper()
            await self.actuator.restart_bar()
        else:
            await self.stop_media()
            await self.lock_and_suspend()

    async def handle_open(self) -> None:
        """Lid opened: bring the internal monitor back."""
        if await self.probe.is_internal_active():
            return
        if not await self.probe.has_external_monitor():
            await self.actuator.enable_internal_only(refresh=False)
        else:
            await self.actuator.extend()
        await self.actuator.restart_wallpaper()
        await self.actuator.restart_bar()
        await self.actuator.fix_bar()

    async def lock_and_suspend(self) -> None:
        """Lock the session then suspend, without waiting for the lock screen."""
        self.log.info("locking and suspending")
        await self.runner.run(self.config.lock_command)
        await self.runner.run(self.config.suspend_command)

    async def stop_media(self) -> None:
        """Pause media players."""
        await self.runner.run(self.config.utility_command)
