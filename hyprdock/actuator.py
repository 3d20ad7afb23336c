"""Monitor layout switching.

Every operation can be repeated safely. The bar and the wallpaper are drawn
relative to the monitor geometry, so they are only restarted when the layout
actually changes.
"""

from __future__ import annotations

__all__ = ["DisplayActuator"]

from typing import TYPE_CHECKING

from .logging_setup import get_logger

if TYPE_CHECKING:
    import logging

    from .config import MonitorConfiguration
    from .probe import MonitorProbe
    from .runner import CommandRunner


class DisplayActuator:
    """Runs the layout, bar and wallpaper commands."""

    def __init__(
        self,
        config: MonitorConfiguration,
        runner: CommandRunner,
        probe: MonitorProbe,
        log: logging.Logger | None = None,
    ) -> None:
        self.config = config
        self.runner = runner
        self.probe = probe
        self.log = log or get_logger("actuator")

    async def enable_internal_only(self, refresh: bool = True) -> None:
        """Switch to the internal monitor only.

        Args:
            refresh: restart bar & wallpaper if the internal monitor was off.
                Callers running their own refresh sequence pass False.
        """
        needs_restart = refresh and not await self.probe.is_internal_active()
        self.log.info("switching to internal monitor")
        await self.runner.run(self.config.enable_internal_monitor_command)
        await self.runner.run(self.config.disable_external_monitor_command)
        if needs_restart:
            await self.restart_bar()
            await self.restart_wallpaper()

    async def enable_external_only(self, refresh: bool = True) -> None:
        """Switch to the external monitor only, if one is plugged.

        Args:
            refresh: restart bar & wallpaper if the internal monitor was on
        """
        if not await self.probe.has_external_monitor():
            self.log.info("no external monitor, keeping the current layout")
            return
        needs_restart = refresh and await self.probe.is_internal_active()
        self.log.info("switching to external monitor")
        await self.runner.run(self.config.disable_internal_monitor_command)
        await self.runner.run(self.config.enable_external_monitor_command)
        if needs_restart:
            await self.restart_bar()
            await self.restart_wallpaper()

    async def restart_internal(self) -> None:
        """Enable the internal monitor and fully refresh bar & wallpaper."""
        await self.runner.run(self.config.enable_internal_monitor_command)
        await self.restart_wallpaper()
        await self.restart_bar()
        await self.fix_bar()

    async def extend(self) -> None:
        """Extend the desktop over both monitors."""
        if not await self.probe.is_internal_active():
            await self.restart_internal()
        self.log.info("extending monitors")
        await self.runner.run(self.config.extend_command)

    async def mirror(self) -> None:
        """Show the same desktop on both monitors."""
        if not await self.probe.is_internal_active():
            await self.restart_internal()
        self.log.info("mirroring monitors")
        await self.runner.run(self.config.mirror_command)

    async def restart_wallpaper(self) -> None:
        await self.runner.run(self.config.wallpaper_command)

    async def restart_bar(self) -> None:
        """Close then re-open the bar, avoiding duplicated instances."""
        await self.runner.run(self.config.close_bar_command)
        await self.runner.run(self.config.open_bar_command)

    async def fix_bar(self) -> None:
        """Reload the bar, which can keep a stale layout after open/close cycles."""
        await self.runner.run(self.config.reload_bar_command)
