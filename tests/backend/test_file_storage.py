import json

from hr_lib.candidates import CandidateStore
from hr_lib.storage import FileCandidateStorage
from hr_lib.storage.file_backend import DEFAULT_CANDIDATES_PATH
from tests.helpers import make_candidate


def test_default_path():
    assert str(FileCandidateStorage().file_path) == DEFAULT_CANDIDATES_PATH


def test_persist_creates_parent_dirs_and_overwrites(tmp_path):
    target = tmp_path / 'nested' / 'dir' / 'candidates.json'
    b = FileCandidateStorage(target)

    b.persist([make_candidate('Jane', 'Doe'), make_candidate('Lars', 'Jensen')])
    assert target.exists()
    assert [c['first_name'] for c in json.loads(target.read_text('utf-8'))] == ['Jane', 'Lars']

    b.persist([make_candidate('Ana', 'Lopez')])
    assert [c['first_name'] for c in json.loads(target.read_text('utf-8'))] == ['Ana']
    # no temp files left behind
    assert [p.name for p in target.parent.iterdir()] == ['candidates.json']


def test_load_round_trip(tmp_path):
    b = FileCandidateStorage(tmp_path / 'candidates.json')
    original = [make_candidate('Jane', 'Doe', skills=['Python'], languages=['English', 'Danish'])]
    b.persist(original)
    assert b.load() == original


def test_load_missing_or_malformed_file_is_empty(tmp_path):
    target = tmp_path / 'candidates.json'
    b = FileCandidateStorage(target)
    assert b.load() == []
    target.write_text('', encoding='utf-8')
    assert b.load() == []
    target.write_text('{broken', encoding='utf-8')
    assert b.load() == []


def test_persist_failure_is_logged_not_raised(tmp_path, caplog):
    # target path is an existing directory, so the final rename fails
    target = tmp_path / 'candidates.json'
    target.mkdir()
    b = FileCandidateStorage(target)
    b.persist([make_candidate('Jane', 'Doe')])
    assert 'Failed to save candidates to file' in caplog.text
    assert list(target.iterdir()) == []
    assert [p.name for p in tmp_path.iterdir()] == ['candidates.json']


def test_store_write_back_reaches_file(tmp_path):
    target = tmp_path / 'candidates.json'
    store = CandidateStore(storage=FileCandidateStorage(target))
    store.add(make_candidate('Jane', 'Doe'))
    store.update('jane.doe@example.com', lambda c: c.skills.append('Azure'))
    assert store.flush(5)
    saved = json.loads(target.read_text('utf-8'))
    assert saved[0]['email'] == 'jane.doe@example.com'
    assert saved[0]['full_name'] == 'Jane Doe'


def test_null_fields_in_file_do_not_lose_records(tmp_path):
    target = tmp_path / 'candidates.json'
    target.write_text(json.dumps([
        {'email': 'jane.doe@example.com', 'first_name': 'Jane', 'current_role': None},
        {'email': 'lars.jensen@example.com', 'first_name': 'Lars', 'last_name': 'Jensen'},
    ]), encoding='utf-8')
    storage = FileCandidateStorage(target)
    loaded = storage.load()
    assert [c.email for c in loaded] == ['jane.doe@example.com', 'lars.jensen@example.com']

    store = CandidateStore(storage=storage, candidates=loaded)
    store.add(make_candidate('New', 'Person'))
    assert store.flush(5)
    saved = json.loads(target.read_text('utf-8'))
    assert [c['email'] for c in saved] == [
        'jane.doe@example.com', 'lars.jensen@example.com', 'new.person@example.com',
    ]
