"""skilldex: a read-only registry of markdown skill documents."""

from skilldex.core.document import SkillDocument
from skilldex.core.exceptions import (
    DuplicateIdentifierError,
    MalformedHeaderError,
    NotFoundError,
    SkillRegistryError,
)
from skilldex.core.registry import SkillRegistry

__version__ = "0.1.0"

__all__ = [
    "SkillDocument",
    "SkillRegistry",
    "SkillRegistryError",
    "MalformedHeaderError",
    "DuplicateIdentifierError",
    "NotFoundError",
]
