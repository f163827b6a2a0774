"""Persistence adapter that writes the candidate collection to one JSON file.

Every persist overwrites the whole file. Writes go to a unique temporary
file in the target directory which is then renamed over the target, so
concurrent write-backs never interleave bytes and a reader never sees a
partial document.
"""
from __future__ import annotations
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Sequence

from hr_lib.candidates.models import Candidate
from .base import CandidateStorage
from .serializer import Serializer

logger = logging.getLogger(__name__)

DEFAULT_CANDIDATES_PATH = "data/candidates.json"


class FileCandidateStorage(CandidateStorage):
    """Adapter targeting a single on-disk file.

    Parameters
    - file_path: path to the JSON file used for all reads/writes. Parent
      directories are created on demand by `persist`.
    """

    name = "file"

    def __init__(self, file_path: str | Path | None = None, serializer: Serializer | None = None) -> None:
        super().__init__(serializer)
        self.file_path = Path(file_path or DEFAULT_CANDIDATES_PATH)

    def persist(self, snapshot: Sequence[Candidate]) -> None:
        path = self.file_path
        try:
            payload = self.serializer.dump(snapshot)
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
            try:
                with open(fd, "wb") as f:
                    f.write(payload)
                    f.flush()
                    os.fsync(f.fileno())
                Path(tmp).replace(path)
            except Exception:
                try:
                    Path(tmp).unlink()
                except OSError:
                    pass
                raise
            logger.info("Successfully saved %d candidates to %s", len(snapshot), path)
        except Exception:
            logger.exception("Failed to save candidates to file: %s", path)

    def load(self) -> List[Candidate]:
        path = self.file_path
        if not path.exists():
            logger.info("Candidates file %s not found; starting with an empty list", path)
            return []
        try:
            with open(path, "rb") as f:
                data = f.read()
            logger.debug("FileCandidateStorage loaded %s (%d bytes)", path, len(data))
            return self.serializer.load(data)
        except Exception:
            logger.exception("Error loading candidates from %s; using empty candidate list", path)
            return []

    def describe(self) -> dict:
        out = super().describe()
        out["path"] = str(self.file_path)
        return out
