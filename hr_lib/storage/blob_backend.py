"""Azure Blob Storage persistence adapter.

Writes the full candidate collection to a single well-known blob and, once
the store exists, hydrates it from that blob on a background thread.

When no connection string is configured, or the client cannot be built,
the adapter disables itself and the server keeps running purely in
memory: mutations succeed but are never made durable.

Hydration is not awaited. Until it finishes the store holds whatever it
was constructed with (normally nothing), and requests served in that
window see an empty collection. `ready` is set when the attempt ends so
tooling and tests can wait for it; request handling never does.
"""
from __future__ import annotations
from typing import Any, Optional, Sequence
import logging
import threading

from hr_lib.candidates.models import Candidate
from .base import CandidateStorage
from .serializer import Serializer

logger = logging.getLogger(__name__)

DEFAULT_CONTAINER_NAME = "candidates-data"
BLOB_NAME = "candidates.json"


class BlobCandidateStorage(CandidateStorage):
    name = "azure_blob"

    def __init__(
        self,
        connection_string: Optional[str],
        container_name: Optional[str] = None,
        *,
        serializer: Serializer | None = None,
        client: Any = None,
    ) -> None:
        """Create the adapter.

        Args:
            connection_string: Azure Storage connection string. Blank
                disables blob persistence.
            container_name: Container holding the blob; defaults to
                `candidates-data`.
            client: Pre-built `BlobServiceClient` (or compatible object),
                bypassing construction from the connection string.
        """
        super().__init__(serializer)
        self.container_name = container_name or DEFAULT_CONTAINER_NAME
        self.blob_name = BLOB_NAME
        self.ready = threading.Event()
        self._client = client
        self._enabled = client is not None

        logger.info("Blob storage adapter created; connection string configured: %s", bool(connection_string))
        logger.info("Container name: %s", self.container_name)

        if self._client is None:
            if not connection_string or not connection_string.strip():
                logger.warning("Azure Storage connection string is not configured, falling back to in-memory storage")
            else:
                self._client = self._create_client(connection_string)
                self._enabled = self._client is not None
        if not self._enabled:
            self.ready.set()

    @staticmethod
    def _create_client(connection_string: str) -> Any:
        try:
            from azure.storage.blob import BlobServiceClient
            client = BlobServiceClient.from_connection_string(connection_string)
        except Exception:
            logger.exception("Failed to create blob service client, falling back to in-memory storage")
            return None
        logger.info("BlobServiceClient created successfully, blob storage enabled")
        return client

    @property
    def enabled(self) -> bool:
        return self._enabled

    def _container(self):
        return self._client.get_container_client(self.container_name)

    def _blob(self):
        return self._container().get_blob_client(self.blob_name)

    def start(self, store) -> None:
        if not self._enabled:
            return
        t = threading.Thread(target=self._initialize, args=(store,), name="candidate-blob-hydrate", daemon=True)
        t.start()

    def _initialize(self, store) -> None:
        try:
            self._ensure_container()
            self._hydrate(store)
        except Exception:
            logger.exception("Failed to initialize blob storage, continuing with in-memory data")
        finally:
            self.ready.set()

    def _ensure_container(self) -> None:
        from azure.core.exceptions import ResourceExistsError
        try:
            self._container().create_container()
            logger.info("Created blob container %s", self.container_name)
        except ResourceExistsError:
            logger.debug("Blob container %s already exists", self.container_name)

    def _hydrate(self, store) -> None:
        blob = self._blob()
        if not blob.exists():
            logger.info("Blob %s does not exist, starting with empty candidate list", self.blob_name)
            return
        data = blob.download_blob().readall()
        candidates = self.serializer.load(data)
        store.replace_all(candidates)
        logger.info("Successfully loaded %d candidates from blob %s/%s", len(candidates), self.container_name, self.blob_name)

    def wait_until_ready(self, timeout: Optional[float] = None) -> bool:
        return self.ready.wait(timeout)

    def persist(self, snapshot: Sequence[Candidate]) -> None:
        if not self._enabled:
            logger.debug("Blob storage not enabled; %d candidates kept in memory only", len(snapshot))
            return
        try:
            payload = self.serializer.dump(snapshot)
            self._blob().upload_blob(payload, overwrite=True)
            logger.info("Successfully saved %d candidates to blob %s/%s", len(snapshot), self.container_name, self.blob_name)
        except Exception:
            logger.exception("Failed to save candidates to blob storage")

    def describe(self) -> dict:
        out = super().describe()
        out["container"] = self.container_name
        out["blob"] = self.blob_name
        return out
