"""Bootstrap helpers for the candidate server startup.

This module contains small helpers for one-time bootstrapping operations:
ensuring `server_config.yml` exists and reading the initial candidate
collection for the file backend. Factoring this out keeps `hr_lib.main`
focused on composing services and building the FastAPI application.
"""
from pathlib import Path
from typing import List, Optional
import logging

import yaml

from hr_lib.candidates.models import Candidate
from hr_lib.config.config import DEFAULT_CANDIDATES_PATH, DEFAULT_CONFIG_PATH, DEFAULT_CONTAINER_NAME
from hr_lib.storage import CandidateStorage, FileCandidateStorage

DEFAULT_SERVER_CONFIG = {
    'schema_version': 1,
    'log_level': 'INFO',
    'candidates_path': DEFAULT_CANDIDATES_PATH,
    'azure': {
        'storage_connection_string': None,
        'blob_container_name': DEFAULT_CONTAINER_NAME,
    },
}


def bootstrap_server(logger: logging.Logger, config_path: Optional[Path] = None) -> Path:
    """Ensure the server config file exists and return its path.

    A missing file is created from `DEFAULT_SERVER_CONFIG`. Failure to
    write it is logged and startup continues on defaults.
    """
    path = Path(config_path or DEFAULT_CONFIG_PATH)
    if path.exists():
        return path
    logger.info("server_config missing; creating default %s", path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open('w', encoding='utf-8') as f:
            yaml.safe_dump(DEFAULT_SERVER_CONFIG, f, sort_keys=False)
    except OSError:
        logger.exception('Failed to create server_config; using defaults')
    return path


def candidate_file_locations(configured: str) -> List[Path]:
    """Paths tried, in order, when reading the initial candidate file."""
    package_root = Path(__file__).resolve().parents[1]
    out: List[Path] = []
    for p in (Path(configured), Path.cwd() / 'data' / 'candidates.json', package_root / 'data' / 'candidates.json'):
        if p not in out:
            out.append(p)
    return out


def load_initial_candidates(storage: CandidateStorage, logger: logging.Logger) -> List[Candidate]:
    """Read the starting collection for the selected backend.

    Only the file backend is read here. Blob storage starts empty and
    hydrates itself in the background; the memory backend starts empty.
    When the configured file is missing the fallback locations are tried,
    and a file found there is still written back to the configured path.
    """
    if not isinstance(storage, FileCandidateStorage):
        return []
    for path in candidate_file_locations(str(storage.file_path)):
        if path.exists():
            candidates = FileCandidateStorage(path, storage.serializer).load()
            logger.info("Loaded %d candidates from JSON file: %s", len(candidates), path)
            return candidates
    logger.info("Candidates file not found in any of: %s. Using empty candidate list.",
                ", ".join(str(p) for p in candidate_file_locations(str(storage.file_path))))
    return []
