from hr_lib.config.config import Settings
from hr_lib.storage import (
    BlobCandidateStorage,
    FileCandidateStorage,
    MemoryCandidateStorage,
    create_storage,
)


def test_no_connection_string_selects_file(tmp_path):
    s = create_storage(Settings(candidates_path=str(tmp_path / 'c.json')))
    assert isinstance(s, FileCandidateStorage)
    assert s.file_path == tmp_path / 'c.json'
    assert s.enabled is True


def test_blank_connection_string_selects_file():
    s = create_storage(Settings(azure_storage_connection_string='  '))
    assert isinstance(s, FileCandidateStorage)


def test_connection_string_selects_blob_even_if_unusable():
    s = create_storage(Settings(azure_storage_connection_string='garbage', azure_blob_container_name='hr'))
    assert isinstance(s, BlobCandidateStorage)
    assert s.container_name == 'hr'
    # construction failed, so the adapter runs in memory-only mode
    assert s.enabled is False


def test_memory_backend_is_explicit():
    s = create_storage(Settings(storage_backend='memory', azure_storage_connection_string='garbage'))
    assert isinstance(s, MemoryCandidateStorage)
    assert s.describe() == {'backend': 'memory', 'durable': False}


def test_all_adapters_satisfy_storage_protocol(tmp_path):
    from hr_lib.services import StorageProtocol
    for s in (FileCandidateStorage(tmp_path / 'c.json'), BlobCandidateStorage(None), MemoryCandidateStorage()):
        assert isinstance(s, StorageProtocol)
