import asyncio
from typing import List

import pytest

from utils.banner_timer import BannerTimer


async def test_fires_once_after_timeout() -> None:
    fired: List[str] = []
    timer = BannerTimer(timeout=0.01)

    timer.start(lambda: fired.append("hide"))
    assert timer.pending

    await asyncio.sleep(0.05)
    assert fired == ["hide"]
    assert not timer.pending


async def test_cancel_prevents_callback() -> None:
    fired: List[str] = []
    timer = BannerTimer(timeout=0.01)
    timer.start(lambda: fired.append("hide"))

    assert timer.cancel() is True
    assert timer.cancel() is False

    await asyncio.sleep(0.05)
    assert fired == []


async def test_restart_replaces_pending_callback() -> None:
    fired: List[str] = []
    timer = BannerTimer(timeout=0.02)

    timer.start(lambda: fired.append("first"))
    timer.start(lambda: fired.append("second"))

    await asyncio.sleep(0.08)
    assert fired == ["second"]


def test_negative_timeout_is_rejected() -> None:
    with pytest.raises(ValueError):
        BannerTimer(timeout=-0.1)
