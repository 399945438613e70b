"""Skill document models."""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Header keys with a meaning to the registry; anything else lands in extras.
RECOGNIZED_KEYS = ("name", "description")


class HeaderRecord(BaseModel):
    """Validated header block of a skill document."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str | None = None
    description: str = ""
    extras: dict[str, Any] = Field(default_factory=dict)

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str | None) -> str | None:
        if v is not None:
            v = v.strip()
            if not v:
                raise ValueError("name must not be blank")
        return v

    @field_validator("description", mode="before")
    @classmethod
    def null_description_is_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "HeaderRecord":
        """Split a raw header mapping into recognized fields and extras."""
        fields = {key: data[key] for key in RECOGNIZED_KEYS if key in data}
        extras = {
            str(key): value for key, value in data.items() if key not in RECOGNIZED_KEYS
        }
        return cls.model_validate({**fields, "extras": extras})


class SkillDocument(BaseModel):
    """A loaded skill document."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    identifier: str
    description: str = ""
    body: str
    path: Path
    metadata: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def build(
        cls, header: HeaderRecord | None, body: str, path: Path, fallback_id: str
    ) -> "SkillDocument":
        """
        Build a document from a parsed header and body.

        Args:
            header: Parsed header, or None when the file has no header block
            body: Text following the header
            path: Source file
            fallback_id: Identifier to use when the header has no name

        Returns:
            SkillDocument
        """
        if header is None:
            header = HeaderRecord()
        return cls(
            identifier=header.name or fallback_id,
            description=header.description.strip(),
            body=body.strip(),
            path=path,
            metadata=dict(header.extras),
        )
