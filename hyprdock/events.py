"""acpid event stream.

Each read off the socket is treated as one complete, newline terminated
record; no reassembly across reads is done.
"""

from __future__ import annotations

__all__ = ["EventSource", "decode_event"]

import asyncio
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

from .constants import EVENT_READ_SIZE, LID_CLOSE_RECORD, LID_OPEN_RECORD
from .logging_setup import get_logger
from .models import DecodedEvent, HyprDockError, LidEvent

if TYPE_CHECKING:
    import logging

EventHandler = Callable[[DecodedEvent], Awaitable[None]]


def decode_event(record: str) -> DecodedEvent:
    """Map a raw acpid record to a lid event."""
    if record == LID_CLOSE_RECORD:
        return DecodedEvent(LidEvent.CLOSE, record)
    if record == LID_OPEN_RECORD:
        return DecodedEvent(LidEvent.OPEN, record)
    return DecodedEvent(LidEvent.UNRECOGNIZED, record)


class EventSource:
    """Reads lid events from the acpid socket and hands them over one by one."""

    reader: asyncio.StreamReader
    writer: asyncio.StreamWriter

    def __init__(self, path: str, log: logging.Logger | None = None) -> None:
        self.path = path
        self.log = log or get_logger("events")

    async def connect(self) -> None:
        """Open the socket connection, once.

        Raises:
            HyprDockError: if the socket can't be opened
        """
        try:
            self.reader, self.writer = await asyncio.open_unix_connection(self.path)
        except OSError as e:
            self.log.critical("Failed to connect to %s: %s", self.path, e)
            raise HyprDockError from e
        self.log.info("Listening to %s", self.path)

    async def read_event(self) -> DecodedEvent:
        """Read and decode the next record.

        Raises:
            HyprDockError: on read or decoding failure, or if the stream ended
        """
        try:
            data = await self.reader.read(EVENT_READ_SIZE)
        except OSError as e:
            self.log.critical("Failed to read from %s: %s", self.path, e)
            raise HyprDockError from e
        if not data:
            self.log.critical("%s closed the connection", self.path)
            raise HyprDockError
        try:
            record = data.decode("utf-8")
        except UnicodeDecodeError as e:
            self.log.critical("Invalid unicode while reading events: %s", e)
            raise HyprDockError from e
        return decode_event(record)

    async def serve(self, handler: EventHandler) -> None:
        """Feed every event to `handler`, waiting for each to be fully handled."""
        while True:
            await handler(await self.read_event())

    async def close(self) -> None:
        self.writer.close()
        await self.writer.wait_closed()
