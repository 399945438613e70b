"""Core skill registry functionality."""

from .context import SharedContext
from .document import HeaderRecord, SkillDocument
from .exceptions import (
    DuplicateIdentifierError,
    LoadCancelledError,
    MalformedHeaderError,
    NotFoundError,
    RegistryNotLoadedError,
    SkillRegistryError,
    SourceDirectoryError,
    UnreadableDocumentError,
)
from .header import ParsedDocument, parse_document
from .registry import RegistrySnapshot, SkillListing, SkillRegistry
from .render import render_index, render_prompt_section
from .scanner import DocumentSource, scan_directory

__all__ = [
    "SharedContext",
    "HeaderRecord",
    "SkillDocument",
    "SkillRegistryError",
    "MalformedHeaderError",
    "DuplicateIdentifierError",
    "NotFoundError",
    "SourceDirectoryError",
    "LoadCancelledError",
    "RegistryNotLoadedError",
    "UnreadableDocumentError",
    "ParsedDocument",
    "parse_document",
    "RegistrySnapshot",
    "SkillListing",
    "SkillRegistry",
    "render_index",
    "render_prompt_section",
    "DocumentSource",
    "scan_directory",
]
