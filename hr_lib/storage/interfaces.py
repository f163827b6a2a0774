from typing import Protocol, List, Sequence, runtime_checkable

from hr_lib.candidates.models import Candidate


@runtime_checkable
class StorageProtocol(Protocol):
    """Persistence adapter protocol mirroring `hr_lib.storage.CandidateStorage`.

    Implementations should follow the semantics documented on the abstract
    base class in `hr_lib.storage.base` (persist never raises, full
    overwrite on every call, etc.).
    """

    @property
    def enabled(self) -> bool: ...

    def persist(self, snapshot: Sequence[Candidate]) -> None: ...

    def load(self) -> List[Candidate]: ...

    def start(self, store) -> None: ...

    def describe(self) -> dict: ...
