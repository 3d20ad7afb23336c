"""The application object: one `run_*` method per command line flag."""

from __future__ import annotations

__all__ = ["HyprDock"]

from typing import TYPE_CHECKING, Self

from .config_loader import ConfigLoader
from .controller import DockingController
from .events import EventSource
from .logging_setup import get_logger
from .runner import CommandRunner, ProcessRunner

if TYPE_CHECKING:
    from .config import MonitorConfiguration


class HyprDock:
    """Main app object."""

    def __init__(self, config: MonitorConfiguration, runner: CommandRunner | None = None) -> None:
        self.config = config
        self.log = get_logger()
        self.runner = runner or ProcessRunner()
        self.controller = DockingController(config, self.runner)
        self.actuator = self.controller.actuator
        self.probe = self.controller.probe

    @classmethod
    async def create(cls, config_filename: str = "", runner: CommandRunner | None = None) -> Self:
        """Load the configuration and build the app."""
        config = await ConfigLoader(get_logger("config")).load(config_filename)
        return cls(config, runner)

    async def run_internal(self) -> None:
        """Switch to internal monitor only."""
        await self.actuator.enable_internal_only()

    async def run_external(self) -> None:
        """Switch to external monitor only."""
        await self.actuator.enable_external_only()

    async def run_extend(self) -> None:
        """Extend monitors."""
        await self.actuator.extend()

    async def run_mirror(self) -> None:
        """Mirror monitors."""
        await self.actuator.mirror()

    async def run_suspend(self) -> None:
        """Lock the session and suspend."""
        await self.controller.lock_and_suspend()

    async def run_open(self) -> None:
        """Act as if the lid was opened."""
        await self.controller.handle_open()

    async def run_close(self) -> None:
        """Act as if the lid was closed."""
        await self.controller.handle_close()

    async def run_wallpaper(self) -> None:
        """Restart the wallpaper."""
        await self.actuator.restart_wallpaper()

    async def run_bar(self) -> None:
        """Restart the bar."""
        await self.actuator.restart_bar()

    async def run_fix_bar(self) -> None:
        """Reload the bar."""
        await self.actuator.fix_bar()

    async def run_status(self) -> None:
        """Show the current monitor state."""
        state = await self.probe.get_state()
        print(f"internal monitor ({self.config.monitor_name}): {'active' if state.internal_active else 'inactive'}")
        print(f"external monitor: {'present' if state.external_present else 'absent'}")

    async def run_server(self) -> None:
        """Daemon mode, automatically handles actions on laptop lid close and open."""
        source = EventSource(self.config.event_socket)
        await source.connect()
        self.log.debug("[ initialized ]".center(80, "="))
        try:
            await source.serve(self.controller.handle_event)
        finally:
            await source.close()

