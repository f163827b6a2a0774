"""Candidate data model.

`Candidate` is the only entity held by the store. Field names follow the
persisted snake_case layout; `_normalize_keys` lets loaders accept the
same fields written in camelCase, PascalCase or upper case.
"""
from __future__ import annotations
import re
import uuid
from typing import Any, Callable, List, Optional

from pydantic import BaseModel, Field, computed_field, model_validator

_CAMEL_BOUNDARY = re.compile(r'(?<=[a-z0-9])(?=[A-Z])')


def normalize_key(key: str) -> str:
    """Map `FirstName`, `firstName` or `FIRST_NAME` to `first_name`."""
    key = str(key).strip()
    if key.isupper():
        return key.lower()
    return _CAMEL_BOUNDARY.sub('_', key).lower()


def email_key(email: Optional[str]) -> str:
    """Canonical comparison key for the email business key."""
    return (email or '').strip().lower()


class Candidate(BaseModel):
    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    first_name: str = ''
    last_name: str = ''
    email: str
    current_role: str = ''
    skills: List[str] = Field(default_factory=list)
    spoken_languages: List[str] = Field(default_factory=list)

    @model_validator(mode='before')
    @classmethod
    def _normalize_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        out = {}
        for k, v in data.items():
            nk = normalize_key(k)
            # Derived on dump; never read back.
            if nk == 'full_name':
                continue
            # null loads as absent so field defaults apply
            if v is None:
                continue
            out[nk] = v
        return out

    @computed_field  # type: ignore[prop-decorator]
    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def email_key(self) -> str:
        return email_key(self.email)

    def matches(self, term: str) -> bool:
        """Return True if lowercased `term` is a substring of any searchable field."""
        if term in self.first_name.lower():
            return True
        if term in self.last_name.lower():
            return True
        if term in self.email.lower():
            return True
        if term in self.current_role.lower():
            return True
        if any(term in s.lower() for s in self.skills):
            return True
        return any(term in lang.lower() for lang in self.spoken_languages)


class CandidateUpdate(BaseModel):
    """Field-level changes applied by an update call.

    Only fields explicitly provided are applied; the email is the locator
    and cannot be changed here.
    """

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    current_role: Optional[str] = None
    skills: Optional[List[str]] = None
    spoken_languages: Optional[List[str]] = None

    def as_mutation(self) -> Callable[[Candidate], None]:
        changes = self.model_dump(exclude_unset=True, exclude_none=True)

        def _apply(candidate: Candidate) -> None:
            for field, value in changes.items():
                setattr(candidate, field, list(value) if isinstance(value, list) else value)

        return _apply
