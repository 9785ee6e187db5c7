"""Keyed Locks — per-key asyncio.Lock registry for serializing work on one aggregate.

Invariants:
    - At most one holder per key at a time; different keys never block each other
    - A key's entry is dropped once no holder or waiter remains (registry does not grow unbounded)
    - Only valid within a single event loop / process; cross-process safety comes
      from the optimistic version columns on the ORM models
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator


class KeyedLocks:
    """Registry of asyncio locks keyed by string (user email for carts)."""

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}
        self._users: dict[str, int] = {}

    @asynccontextmanager
    async def hold(self, key: str) -> AsyncIterator[None]:
        lock = self._locks.setdefault(key, asyncio.Lock())
        self._users[key] = self._users.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._users[key] -= 1
            if self._users[key] == 0:
                del self._users[key]
                del self._locks[key]

    def is_locked(self, key: str) -> bool:
        lock = self._locks.get(key)
        return lock is not None and lock.locked()

    def __len__(self) -> int:
        return len(self._locks)


# One registry per process, shared by every request touching a user's cart or wallet
user_locks = KeyedLocks()
