from typing import Any, List, Protocol, Sequence
import json

from hr_lib.candidates.models import Candidate


class Serializer(Protocol):
    """Serialize/deserialize candidate collections for backends that store bytes.

    Implementations should be symmetric: `dump` -> bytes, `load` <- bytes.
    """

    def dump(self, value: Sequence[Candidate]) -> bytes: ...

    def load(self, data: bytes) -> List[Candidate]: ...


class CandidateJSONSerializer:
    """Pretty-printed JSON array with snake_case keys.

    Fields whose value is None are omitted on dump. On load, empty input,
    `null` and `[]` all yield an empty list; key casing is not significant.
    """

    indent = 2

    def dump(self, value: Sequence[Candidate]) -> bytes:
        payload = [c.model_dump(exclude_none=True) for c in value]
        return json.dumps(payload, indent=self.indent, ensure_ascii=False).encode("utf-8")

    def load(self, data: bytes | str) -> List[Candidate]:
        if isinstance(data, (bytes, bytearray)):
            data = bytes(data).decode("utf-8-sig")
        if not data or not data.strip():
            return []
        raw: Any = json.loads(data)
        if raw is None:
            return []
        if not isinstance(raw, list):
            raise ValueError(f"expected a JSON array of candidates, got {type(raw).__name__}")
        return [Candidate.model_validate(item) for item in raw if item is not None]
