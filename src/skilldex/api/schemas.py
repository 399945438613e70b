"""Pydantic schemas for API request/response models."""

from pathlib import Path

from pydantic import BaseModel

from skilldex.core.document import SkillDocument


class SkillSummary(BaseModel):
    """Lightweight skill info for listings."""

    identifier: str
    description: str
    path: Path

    @classmethod
    def from_document(cls, document: SkillDocument) -> "SkillSummary":
        return cls(
            identifier=document.identifier,
            description=document.description,
            path=document.path,
        )


class ReloadResult(BaseModel):
    """Response body for a successful reload."""

    count: int
    source: Path
