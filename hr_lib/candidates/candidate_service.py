"""CandidateStore: the in-memory authoritative candidate collection."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterable, List, Optional
import logging
import threading

from hr_lib.candidates.interfaces import CandidateServiceProtocol
from hr_lib.candidates.models import Candidate, email_key

if TYPE_CHECKING:
    from hr_lib.storage.base import CandidateStorage

logger = logging.getLogger(__name__)


class CandidateStore(CandidateServiceProtocol):
    """Thread-safe candidate collection with fire-and-forget write-back.

    A single lock guards the list. Reads copy under the lock and return
    after releasing it. Mutations that change state take a snapshot while
    still holding the lock, then hand it to `storage.persist` on a new
    daemon thread so the caller never waits on I/O.

    Write-backs are neither queued nor coalesced: overlapping persists race
    and the last one to finish wins. Each one writes a full snapshot, so the
    durable copy is always some consistent state of the collection. A
    mutation that returned True may still never become durable if its
    write-back fails; the adapter logs that failure.
    """

    def __init__(self, storage: Optional["CandidateStorage"] = None, candidates: Optional[Iterable[Candidate]] = None):
        """Initialize the store.

        Args:
            storage: Persistence adapter receiving write-backs. None keeps
                the store purely in memory.
            candidates: Initial collection, typically read from the file
                backend by the composition root.
        """
        self._storage = storage
        self._lock = threading.Lock()
        self._candidates: List[Candidate] = list(candidates or [])
        self._pending_lock = threading.Lock()
        self._pending: set[threading.Thread] = set()

    def __len__(self) -> int:
        with self._lock:
            return len(self._candidates)

    def _find(self, key: str) -> Optional[Candidate]:
        # caller holds self._lock
        for c in self._candidates:
            if c.email_key == key:
                return c
        return None

    def _snapshot(self) -> List[Candidate]:
        # caller holds self._lock
        return [c.model_copy(deep=True) for c in self._candidates]

    def list(self) -> List[Candidate]:
        with self._lock:
            return self._snapshot()

    def add(self, candidate: Candidate) -> bool:
        if candidate is None:
            raise ValueError("candidate is required")
        key = email_key(candidate.email)
        with self._lock:
            if self._find(key) is not None:
                return False
            self._candidates.append(candidate.model_copy(deep=True))
            snapshot = self._snapshot()
        logger.info("Added new candidate: %s (%s)", candidate.full_name, candidate.email)
        self._write_back(snapshot)
        return True

    def update(self, email: str, mutation: Callable[[Candidate], None]) -> bool:
        if email is None or not str(email).strip():
            raise ValueError("email cannot be null or empty")
        if mutation is None or not callable(mutation):
            raise ValueError("mutation is required")
        key = email_key(email)
        with self._lock:
            candidate = self._find(key)
            if candidate is None:
                return False
            mutation(candidate)
            snapshot = self._snapshot()
        logger.info("Updated candidate with email: %s", email)
        self._write_back(snapshot)
        return True

    def remove(self, email: str) -> bool:
        if email is None or not str(email).strip():
            raise ValueError("email cannot be null or empty")
        key = email_key(email)
        with self._lock:
            candidate = self._find(key)
            if candidate is None:
                return False
            self._candidates.remove(candidate)
            snapshot = self._snapshot()
        logger.info("Removed candidate with email: %s", email)
        self._write_back(snapshot)
        return True

    def search(self, term: Optional[str]) -> List[Candidate]:
        if term is None or not term.strip():
            return self.list()
        needle = term.strip().lower()
        with self._lock:
            return [c.model_copy(deep=True) for c in self._candidates if c.matches(needle)]

    def replace_all(self, candidates: Iterable[Candidate]) -> None:
        """Swap the whole collection; used by hydration, no write-back."""
        loaded = list(candidates)
        with self._lock:
            self._candidates[:] = loaded
        logger.info("Replaced candidate collection with %d entries", len(loaded))

    def _write_back(self, snapshot: List[Candidate]) -> None:
        if self._storage is None:
            logger.debug("No storage configured; %d candidates kept in memory only", len(snapshot))
            return
        t = threading.Thread(target=self._run_write_back, args=(self._storage, snapshot),
                             name="candidate-write-back", daemon=True)
        with self._pending_lock:
            self._pending.add(t)
        t.start()

    def _run_write_back(self, storage: "CandidateStorage", snapshot: List[Candidate]) -> None:
        try:
            storage.persist(snapshot)
        except Exception:
            # Adapters swallow their own failures; this guards custom ones.
            logger.exception("Write-back of %d candidates failed", len(snapshot))
        finally:
            with self._pending_lock:
                self._pending.discard(threading.current_thread())

    def flush(self, timeout: Optional[float] = None) -> bool:
        """Wait for write-backs in flight at call time.

        Returns True if all of them finished within `timeout`.
        """
        with self._pending_lock:
            pending = list(self._pending)
        for t in pending:
            t.join(timeout)
        return not any(t.is_alive() for t in pending)
