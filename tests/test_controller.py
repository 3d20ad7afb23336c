from dataclasses import replace

import pytest

from hyprdock.controller import DockingController
from hyprdock.events import decode_event
from hyprdock.models import DecodedEvent, LidEvent

from .conftest import BOTH_MONS, EXTERNAL_MON, INTERNAL_MON
from .testtools import FakeRunner


@pytest.fixture
def controller_for(config, mocker):
    "Build a controller over a given listing, recording sleeps with the commands"

    def _make(listing):
        runner = FakeRunner(listing)

        async def fake_sleep(delay):
            runner.calls.append(f"sleep {delay}")

        mocker.patch("hyprdock.controller.asyncio.sleep", side_effect=fake_sleep)
        return DockingController(config, runner), runner

    return _make


@pytest.mark.asyncio
async def test_open_internal_active(controller_for):
    controller, runner = controller_for(BOTH_MONS)
    await controller.handle_open()
    assert runner.calls == []


@pytest.mark.asyncio
async def test_open_no_external(controller_for):
    controller, runner = controller_for("")
    await controller.handle_open()
    assert runner.calls == ["enable-internal", "disable-external", "wallpaper", "close-bar", "open-bar", "reload-bar"]


@pytest.mark.asyncio
async def test_open_with_external(controller_for):
    controller, runner = controller_for(EXTERNAL_MON)
    await controller.handle_open()
    assert runner.calls.count("extend") == 1
    assert runner.calls.index("enable-internal") < runner.calls.index("extend")
    assert "mirror" not in runner.calls
    assert runner.calls == [
        "enable-internal",
        "wallpaper",
        "close-bar",
        "open-bar",
        "reload-bar",
        "extend",
        "wallpaper",
        "close-bar",
        "open-bar",
        "reload-bar",
    ]


@pytest.mark.asyncio
async def test_close_with_external(controller_for):
    controller, runner = controller_for(BOTH_MONS)
    await controller.handle_close()
    assert runner.calls == ["disable-internal", "enable-external", "sleep 1.0", "wallpaper", "close-bar", "open-bar"]


@pytest.mark.asyncio
async def test_close_settle_delay_is_configurable(config, mocker):
    sleep = mocker.patch("hyprdock.controller.asyncio.sleep")
    runner = FakeRunner(EXTERNAL_MON)
    controller = DockingController(replace(config, settle_delay_ms=250), runner)
    await controller.handle_close()
    sleep.assert_awaited_once_with(0.25)


@pytest.mark.asyncio
async def test_close_without_external(controller_for):
    controller, runner = controller_for(INTERNAL_MON)
    await controller.handle_close()
    assert runner.calls == ["pause-media", "lock", "suspend"]


@pytest.mark.asyncio
async def test_lock_and_suspend(controller_for):
    controller, runner = controller_for("")
    await controller.lock_and_suspend()
    assert runner.calls == ["lock", "suspend"]
    assert runner.captures == []


@pytest.mark.asyncio
async def test_handle_event_dispatch(controller_for):
    controller, runner = controller_for("")
    await controller.handle_event(decode_event("button/lid LID close\n"))
    assert runner.calls == ["pause-media", "lock", "suspend"]

    runner.calls.clear()
    runner.listing = INTERNAL_MON
    await controller.handle_event(decode_event("button/lid LID open\n"))
    assert runner.calls == []
    assert len(runner.captures) == 2


@pytest.mark.asyncio
async def test_unrecognized_event(controller_for):
    controller, runner = controller_for(BOTH_MONS)
    await controller.handle_event(DecodedEvent(LidEvent.UNRECOGNIZED, "button/power PBTN 00000080 00000000\n"))
    assert runner.calls == []
    assert runner.captures == []
