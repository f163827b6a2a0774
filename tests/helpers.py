from typing import Any, Dict, Optional
from starlette.testclient import TestClient
from hr_lib.candidates.models import Candidate
from hr_lib.services.container import ServiceContainer


def register_service_on_client(client: TestClient, name: str, instance: Any) -> None:
    """Register a service instance into the app's DI container for tests.

    Usage in tests:
        from tests.helpers import register_service_on_client
        register_service_on_client(client, 'candidate_store', fake_store)
    """
    container = getattr(client.app.state, 'container', None)
    if container is None:
        container = ServiceContainer()
        client.app.state.container = container

    container.register_singleton(name, instance)


def make_candidate(first: str, last: str, email: Optional[str] = None, role: str = 'Engineer',
                   skills=None, languages=None, **extra) -> Candidate:
    return Candidate(
        first_name=first,
        last_name=last,
        email=email or f"{first.lower()}.{last.lower()}@example.com",
        current_role=role,
        skills=list(skills or []),
        spoken_languages=list(languages or []),
        **extra,
    )


class FakeDownload:
    def __init__(self, data: bytes):
        self._data = data

    def readall(self) -> bytes:
        return self._data


class FakeBlobClient:
    def __init__(self, container: 'FakeContainerClient', name: str):
        self.container = container
        self.name = name

    def exists(self) -> bool:
        return self.name in self.container.blobs

    def download_blob(self) -> FakeDownload:
        return FakeDownload(self.container.blobs[self.name])

    def upload_blob(self, data, overwrite: bool = False) -> None:
        if self.container.fail_uploads:
            raise ConnectionError("storage unreachable")
        if not overwrite and self.name in self.container.blobs:
            raise RuntimeError("blob exists")
        self.container.uploads.append((self.name, overwrite))
        self.container.blobs[self.name] = bytes(data)


class FakeContainerClient:
    def __init__(self, name: str, exists: bool = False):
        self.name = name
        self.exists = exists
        self.blobs: Dict[str, bytes] = {}
        self.uploads: list = []
        self.fail_uploads = False

    def create_container(self) -> None:
        from azure.core.exceptions import ResourceExistsError
        if self.exists:
            raise ResourceExistsError("The specified container already exists.")
        self.exists = True

    def get_blob_client(self, name: str) -> FakeBlobClient:
        return FakeBlobClient(self, name)


class FakeBlobServiceClient:
    """Stand-in for `azure.storage.blob.BlobServiceClient` used by adapter tests."""

    def __init__(self, container_exists: bool = False):
        self.containers: Dict[str, FakeContainerClient] = {}
        self._container_exists = container_exists

    def get_container_client(self, name: str) -> FakeContainerClient:
        if name not in self.containers:
            self.containers[name] = FakeContainerClient(name, exists=self._container_exists)
        return self.containers[name]
