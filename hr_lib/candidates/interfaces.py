"""Protocol definitions for the candidate store."""
from typing import Callable, Iterable, List, Optional, Protocol, runtime_checkable

from hr_lib.candidates.models import Candidate


@runtime_checkable
class CandidateSink(Protocol):
    """Minimal surface a persistence adapter needs to hydrate a store."""

    def replace_all(self, candidates: Iterable[Candidate]) -> None: ...


@runtime_checkable
class CandidateServiceProtocol(Protocol):
    """Protocol for the CandidateStore public surface.

    This is the contract consumed by the HTTP routers: five operations,
    with add/update/remove reporting success as a boolean the caller turns
    into a user-facing message.
    """

    def list(self) -> List[Candidate]:
        """Return copies of all candidates in collection order."""
        ...

    def add(self, candidate: Candidate) -> bool:
        """Insert `candidate`; False if its email is already present."""
        ...

    def update(self, email: str, mutation: Callable[[Candidate], None]) -> bool:
        """Apply `mutation` in place to the candidate with `email`; False if absent."""
        ...

    def remove(self, email: str) -> bool:
        """Remove the candidate with `email`; False if absent."""
        ...

    def search(self, term: Optional[str]) -> List[Candidate]:
        """Return copies of candidates matching `term`; blank term lists all."""
        ...
