"""Candidates module: the candidate model and its in-memory store."""

from .models import Candidate, CandidateUpdate
from .interfaces import CandidateServiceProtocol, CandidateSink
from .candidate_service import CandidateStore

__all__ = [
    "Candidate",
    "CandidateUpdate",
    "CandidateServiceProtocol",
    "CandidateSink",
    "CandidateStore",
]
