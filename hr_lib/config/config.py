"""Server settings for the candidate server.

Settings are read from `data/config/server_config.yml` and may be
overridden through environment variables, which is how deployments pass
the Azure Storage connection string without writing it to disk.
"""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional
import logging
import os

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path('data/config/server_config.yml')
DEFAULT_CANDIDATES_PATH = 'data/candidates.json'
DEFAULT_CONTAINER_NAME = 'candidates-data'

ENV_OVERRIDES = {
    'HR_CANDIDATES_PATH': 'candidates_path',
    'AZURE_STORAGE_CONNECTION_STRING': 'azure_storage_connection_string',
    'AZURE_BLOB_CONTAINER_NAME': 'azure_blob_container_name',
    'HR_STORAGE_BACKEND': 'storage_backend',
    'HR_LOG_LEVEL': 'log_level',
}


@dataclass(frozen=True)
class Settings:
    candidates_path: str = DEFAULT_CANDIDATES_PATH
    azure_storage_connection_string: Optional[str] = None
    azure_blob_container_name: str = DEFAULT_CONTAINER_NAME
    # '' lets the connection string decide; 'memory' forces the dev backend
    storage_backend: str = ''
    log_level: str = 'WARNING'

    @property
    def uses_blob_storage(self) -> bool:
        return bool((self.azure_storage_connection_string or '').strip())


def _read_yaml(path: Path) -> dict:
    if not path.exists():
        return {}
    try:
        with path.open('r', encoding='utf-8') as f:
            cfg = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError):
        logger.exception('Failed to read server configuration %s; using defaults', path)
        return {}
    if not isinstance(cfg, dict):
        logger.warning('Server configuration %s is not a mapping; using defaults', path)
        return {}
    return cfg


def load_settings(config_path: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build `Settings` from the YAML config file and the environment.

    The YAML file may nest the Azure keys under an `azure` mapping:

        candidates_path: data/candidates.json
        azure:
          storage_connection_string: ...
          blob_container_name: candidates-data
    """
    env = os.environ if environ is None else environ
    cfg = _read_yaml(config_path or DEFAULT_CONFIG_PATH)

    values: dict = {}
    for key in ('candidates_path', 'storage_backend', 'log_level',
                'azure_storage_connection_string', 'azure_blob_container_name'):
        if cfg.get(key) is not None:
            values[key] = cfg[key]
    azure = cfg.get('azure') or {}
    if isinstance(azure, dict):
        if azure.get('storage_connection_string') is not None:
            values['azure_storage_connection_string'] = azure['storage_connection_string']
        if azure.get('blob_container_name') is not None:
            values['azure_blob_container_name'] = azure['blob_container_name']

    for var, field in ENV_OVERRIDES.items():
        val = env.get(var)
        if val:
            values[field] = val

    # Empty strings in the file mean "unset" so defaults still apply.
    if not values.get('candidates_path'):
        values.pop('candidates_path', None)
    if not values.get('azure_blob_container_name'):
        values.pop('azure_blob_container_name', None)

    settings = Settings(**{k: str(v) for k, v in values.items()})
    logger.debug('Loaded settings: candidates_path=%s blob=%s container=%s',
                 settings.candidates_path, settings.uses_blob_storage, settings.azure_blob_container_name)
    return settings
