from __future__ import annotations

import pytest

from voice_relay.handlers.connections import ConnectionManager


class _Socket:
    pass


@pytest.mark.asyncio
async def test_connection_manager_caps_admissions() -> None:
    manager = ConnectionManager(max_connections=2)
    first, second, third = _Socket(), _Socket(), _Socket()

    assert await manager.connect(first)
    assert await manager.connect(second)
    assert not await manager.connect(third)
    assert await manager.connect(first)
    assert manager.get_connection_count() == 2

    assert await manager.disconnect(first) >= 0.0
    assert await manager.connect(third)


@pytest.mark.asyncio
async def test_disconnect_without_slot_reports_zero() -> None:
    manager = ConnectionManager(max_connections=1)
    assert await manager.disconnect(_Socket()) == 0.0
    assert manager.get_connection_count() == 0
