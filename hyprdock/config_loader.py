"""Configuration file loading.

Reads the per-user TOML file, layering it over the built-in defaults.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

import aiofiles
import aiofiles.os

from .config import DEFAULT_CONFIG, MonitorConfiguration
from .constants import CONFIG_FILE
from .models import HyprDockError

if TYPE_CHECKING:
    import logging

__all__ = ["ConfigLoader"]


class ConfigLoader:
    """Loads a `MonitorConfiguration` from a TOML file.

    A missing file is not an error: the built-in defaults are used.
    Keys present in the file override the defaults one by one.
    """

    def __init__(self, log: logging.Logger) -> None:
        """Initialize the config loader.

        Args:
            log: Logger instance for status and error messages
        """
        self.log = log

    async def load(self, config_filename: str = "") -> MonitorConfiguration:
        """Load the configuration.

        Args:
            config_filename: Optional path to the config file.
                           If empty, uses the default CONFIG_FILE location.

        Raises:
            HyprDockError: If the file has syntax errors or invalid values.
        """
        fname = Path(os.path.expandvars(config_filename)).expanduser() if config_filename else CONFIG_FILE
        data = self._parse(DEFAULT_CONFIG, "<defaults>")
        data.update(await self._load_config_file(fname))
        return MonitorConfiguration.from_dict(data, self.log)

    async def _load_config_file(self, fname: Path) -> dict[str, Any]:
        """Load a single configuration file, returns an empty dict if missing."""
        if not await aiofiles.os.path.exists(fname):
            self.log.info("%s not found, using default configuration", fname)
            return {}
        self.log.info("Loading %s", fname)
        try:
            async with aiofiles.open(fname, encoding="utf-8") as f:
                contents = await f.read()
        except (OSError, UnicodeDecodeError) as e:
            self.log.critical("Unable to read %s: %s", fname, e)
            raise HyprDockError from e
        return self._parse(contents, str(fname))

    def _parse(self, contents: str, origin: str) -> dict[str, Any]:
        try:
            return tomllib.loads(contents)
        except tomllib.TOMLDecodeError as e:
            self.log.critical("Unable to load data from `%s`: %s", origin, e)
            raise HyprDockError from e
