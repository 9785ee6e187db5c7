"""Keyed Locks — serialization per key, independence across keys, cleanup."""

import asyncio

from app.infrastructure.keyed_locks import KeyedLocks


async def test_same_key_is_serialized():
    locks = KeyedLocks()
    order = []

    async def worker(tag):
        async with locks.hold("a@example.com"):
            order.append(f"{tag}-in")
            await asyncio.sleep(0.01)
            order.append(f"{tag}-out")

    await asyncio.gather(worker("1"), worker("2"))
    assert order in (
        ["1-in", "1-out", "2-in", "2-out"],
        ["2-in", "2-out", "1-in", "1-out"],
    )


async def test_different_keys_do_not_block():
    locks = KeyedLocks()
    async with locks.hold("a@example.com"):
        async with locks.hold("b@example.com"):
            assert locks.is_locked("a@example.com")
            assert locks.is_locked("b@example.com")


async def test_entries_dropped_after_release():
    locks = KeyedLocks()
    async with locks.hold("a@example.com"):
        assert len(locks) == 1
    assert len(locks) == 0
    assert not locks.is_locked("a@example.com")


async def test_release_on_exception():
    locks = KeyedLocks()
    try:
        async with locks.hold("a@example.com"):
            raise ValueError("boom")
    except ValueError:
        pass
    assert len(locks) == 0
