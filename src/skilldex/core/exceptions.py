"""Custom exceptions for skilldex."""

from pathlib import Path


class SkillRegistryError(Exception):
    """Base class for every error raised while loading or querying skills."""


class MalformedHeaderError(SkillRegistryError):
    """Header block is present but not well-formed."""

    def __init__(self, path: Path | None, reason: str):
        where = str(path) if path is not None else "<text>"
        super().__init__(f"Malformed header in {where}: {reason}")
        self.path = path
        self.reason = reason


class DuplicateIdentifierError(SkillRegistryError):
    """Two documents resolved to the same identifier."""

    def __init__(self, identifier: str, first_path: Path, second_path: Path):
        super().__init__(
            f"Duplicate skill identifier '{identifier}': "
            f"{first_path} and {second_path}"
        )
        self.identifier = identifier
        self.first_path = first_path
        self.second_path = second_path


class NotFoundError(SkillRegistryError):
    """No document is registered under the identifier."""

    def __init__(self, identifier: str):
        super().__init__(f"Skill not found: {identifier}")
        self.identifier = identifier


class SourceDirectoryError(SkillRegistryError):
    """Source directory is missing or not a directory."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot load skills from {path}: {reason}")
        self.path = path
        self.reason = reason


class LoadCancelledError(SkillRegistryError):
    """Load was cancelled by the caller before it completed."""

    def __init__(self, path: Path):
        super().__init__(f"Loading skills from {path} was cancelled")
        self.path = path


class UnreadableDocumentError(SkillRegistryError):
    """Document file could not be read or is not valid UTF-8 text."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path
        self.reason = reason


class RegistryNotLoadedError(SkillRegistryError):
    """Operation needs a loaded registry."""

    def __init__(self):
        super().__init__("Registry has not been loaded")
