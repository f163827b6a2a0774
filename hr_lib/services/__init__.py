"""Services package: DI container and cross-cutting protocols."""
from .container import ServiceContainer
from .interfaces import CandidateServiceProtocol, StorageProtocol

__all__ = [
    "ServiceContainer",
    "CandidateServiceProtocol",
    "StorageProtocol",
]
