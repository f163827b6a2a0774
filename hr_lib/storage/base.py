"""Persistence adapter interface definitions.

Defines the CandidateStorage abstract class used by the candidate store to
write point-in-time snapshots of its collection to durable storage.
Adapters own no live state: they serialize whatever snapshot they are
handed and, where the backend supports it, load it back at startup.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Sequence

from hr_lib.candidates.models import Candidate
from hr_lib.storage.serializer import CandidateJSONSerializer, Serializer

if TYPE_CHECKING:
    from hr_lib.candidates.interfaces import CandidateSink


class CandidateStorage(ABC):
    """Abstract persistence adapter.

    `persist` is called from detached write-back threads, possibly several
    at once. Implementations must never raise from `persist`: failures are
    logged and swallowed at this boundary.
    """

    #: short name reported by health checks
    name: str = "abstract"

    def __init__(self, serializer: Serializer | None = None) -> None:
        self.serializer: Serializer = serializer or CandidateJSONSerializer()

    @property
    def enabled(self) -> bool:
        """True when persisted snapshots actually reach durable storage."""
        return True

    @abstractmethod
    def persist(self, snapshot: Sequence[Candidate]) -> None:
        """Serialize `snapshot` and overwrite the durable target with it."""

    def load(self) -> List[Candidate]:
        """Return the collection currently held by the backend.

        Adapters that hydrate asynchronously return an empty list here.
        """
        return []

    def start(self, store: "CandidateSink") -> None:
        """Hook invoked once the store exists; used for hydration."""
        return None

    def describe(self) -> dict:
        return {"backend": self.name, "durable": self.enabled}
