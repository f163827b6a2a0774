"""Persistence adapters for the candidate store."""
from __future__ import annotations
import logging

from .base import CandidateStorage
from .blob_backend import BlobCandidateStorage
from .file_backend import FileCandidateStorage
from .memory_backend import MemoryCandidateStorage
from .serializer import CandidateJSONSerializer

logger = logging.getLogger(__name__)


def create_storage(settings) -> CandidateStorage:
    """Select the persistence adapter once, at startup.

    A non-blank Azure Storage connection string selects blob storage,
    otherwise the local JSON file is used. `storage_backend: memory`
    forces the non-durable in-memory adapter for development. There is
    no switching at runtime; changing backend means restarting with
    different settings.
    """
    if (settings.storage_backend or '').lower() == 'memory':
        logger.info("MEMORY MODE: candidates are not persisted")
        return MemoryCandidateStorage()
    if settings.uses_blob_storage:
        logger.info("BLOB STORAGE MODE: starting empty, candidates load from Azure Blob Storage")
        return BlobCandidateStorage(
            settings.azure_storage_connection_string,
            settings.azure_blob_container_name,
        )
    logger.info("FILE MODE: loading candidates from %s", settings.candidates_path)
    return FileCandidateStorage(settings.candidates_path)


__all__ = [
    "CandidateStorage",
    "BlobCandidateStorage",
    "FileCandidateStorage",
    "MemoryCandidateStorage",
    "CandidateJSONSerializer",
    "create_storage",
]
