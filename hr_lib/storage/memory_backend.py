"""Simple memory-backed persistence adapter

Keeps the last serialized snapshot in memory. Nothing survives a restart;
used by the development runner and by tests that want to observe
write-backs without touching disk or the network.
"""
from threading import RLock
from typing import List, Optional, Sequence

from hr_lib.candidates.models import Candidate
from .base import CandidateStorage
from .serializer import Serializer


class MemoryCandidateStorage(CandidateStorage):
    name = "memory"

    def __init__(self, initial: Optional[Sequence[Candidate]] = None, serializer: Optional[Serializer] = None):
        super().__init__(serializer)
        self._lock = RLock()
        self._payload: Optional[bytes] = self.serializer.dump(initial) if initial else None
        self.persist_count = 0

    @property
    def enabled(self) -> bool:
        return False

    @property
    def payload(self) -> Optional[bytes]:
        with self._lock:
            return self._payload

    def persist(self, snapshot: Sequence[Candidate]) -> None:
        data = self.serializer.dump(snapshot)
        with self._lock:
            self._payload = data
            self.persist_count += 1

    def load(self) -> List[Candidate]:
        with self._lock:
            data = self._payload
        return self.serializer.load(data) if data else []
