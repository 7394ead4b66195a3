import asyncio
import threading
from typing import Dict


class OwnerLocks:
    """
    Registry of per-owner asyncio locks

    Serializes critical sections (subscription activation) for one owner
    while leaving other owners unblocked. Share a single instance per
    process.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: Dict[str, asyncio.Lock] = {}

    def for_owner(self, owner_id: str) -> asyncio.Lock:
        with self._guard:
            lock = self._locks.get(owner_id)
            if lock is None:
                lock = asyncio.Lock()
                self._locks[owner_id] = lock
            return lock

    def __contains__(self, owner_id: str) -> bool:
        with self._guard:
            return owner_id in self._locks
