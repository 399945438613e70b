"""Skill registry for loading and querying skill documents."""

import logging
import threading
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from skilldex.constants import (
    DEFAULT_IGNORE,
    DEFAULT_SKILL_FILENAME,
    DEFAULT_SUFFIXES,
)
from skilldex.core.document import SkillDocument
from skilldex.core.exceptions import (
    DuplicateIdentifierError,
    LoadCancelledError,
    NotFoundError,
    RegistryNotLoadedError,
    SourceDirectoryError,
    UnreadableDocumentError,
)
from skilldex.core.header import parse_document
from skilldex.core.scanner import scan_directory

if TYPE_CHECKING:
    from skilldex.utils.config import Config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistrySnapshot:
    """One fully validated load result. Never mutated after construction."""

    source: Path | None
    documents: tuple[SkillDocument, ...] = ()
    index: Mapping[str, SkillDocument] = field(
        default_factory=lambda: MappingProxyType({})
    )


class SkillListing:
    """Restartable view over the documents of a single snapshot."""

    def __init__(self, snapshot: RegistrySnapshot):
        self._snapshot = snapshot

    def __iter__(self) -> Iterator[SkillDocument]:
        yield from self._snapshot.documents

    def __len__(self) -> int:
        return len(self._snapshot.documents)

    def __repr__(self) -> str:
        return f"SkillListing(count={len(self)}, source={self._snapshot.source})"


class SkillRegistry:
    """
    Read-only, validated view over a directory of skill documents.

    The registry holds a reference to an immutable snapshot. `load` builds a
    complete new snapshot and swaps the reference only when every file parsed
    and validated, so readers never see a partially loaded registry and a
    failed load leaves the previous contents in place.
    """

    @staticmethod
    def from_config(config: "Config") -> "SkillRegistry":
        """Create SkillRegistry from config."""
        return SkillRegistry(
            suffixes=config.suffixes,
            ignore=config.ignore,
            skill_filename=config.skill_filename,
        )

    def __init__(
        self,
        suffixes: Iterable[str] = DEFAULT_SUFFIXES,
        ignore: Iterable[str] = DEFAULT_IGNORE,
        skill_filename: str = DEFAULT_SKILL_FILENAME,
    ):
        self.suffixes = tuple(suffixes)
        self.ignore = tuple(ignore)
        self.skill_filename = skill_filename
        self._snapshot: RegistrySnapshot | None = None
        self._load_lock = threading.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._snapshot is not None

    @property
    def source(self) -> Path | None:
        """Directory of the current snapshot, or None when unloaded."""
        snapshot = self._snapshot
        return snapshot.source if snapshot is not None else None

    def _current(self) -> RegistrySnapshot:
        snapshot = self._snapshot
        if snapshot is None:
            return RegistrySnapshot(source=None)
        return snapshot

    def _build_snapshot(
        self, source: Path, cancel: threading.Event | None
    ) -> RegistrySnapshot:
        documents: list[SkillDocument] = []
        index: dict[str, SkillDocument] = {}

        for doc_source in scan_directory(
            source, self.suffixes, self.ignore, self.skill_filename
        ):
            if cancel is not None and cancel.is_set():
                raise LoadCancelledError(source)

            try:
                text = doc_source.path.read_text(encoding="utf-8")
            except UnicodeDecodeError as e:
                raise UnreadableDocumentError(
                    doc_source.path, f"not valid UTF-8 (byte {e.start})"
                ) from e
            except OSError as e:
                raise UnreadableDocumentError(
                    doc_source.path, e.strerror or str(e)
                ) from e

            parsed = parse_document(text, doc_source.path)
            document = SkillDocument.build(
                parsed.header, parsed.body, doc_source.path, doc_source.fallback_id
            )

            existing = index.get(document.identifier)
            if existing is not None:
                raise DuplicateIdentifierError(
                    document.identifier, existing.path, document.path
                )

            index[document.identifier] = document
            documents.append(document)

        return RegistrySnapshot(
            source=source,
            documents=tuple(documents),
            index=MappingProxyType(index),
        )

    def load(self, source: Path | str, cancel: threading.Event | None = None) -> int:
        """
        Load every document in a directory, replacing current contents.

        Args:
            source: Directory containing skill documents
            cancel: Optional event polled before each file read

        Returns:
            Number of documents loaded

        Raises:
            SourceDirectoryError: If source is missing or not a directory
            MalformedHeaderError: If any document has a malformed header
            DuplicateIdentifierError: If two documents share an identifier
            UnreadableDocumentError: If a document cannot be read as UTF-8 text
            LoadCancelledError: If cancel was set before the load finished
        """
        source = Path(source)
        if not source.exists():
            raise SourceDirectoryError(source, "directory does not exist")
        if not source.is_dir():
            raise SourceDirectoryError(source, "not a directory")

        with self._load_lock:
            try:
                snapshot = self._build_snapshot(source, cancel)
            except Exception as e:
                logger.warning(f"Failed to load skills from {source}: {e}")
                raise
            self._snapshot = snapshot

        logger.info(f"Loaded {len(snapshot.documents)} skills from {source}")
        return len(snapshot.documents)

    def reload(self, cancel: threading.Event | None = None) -> int:
        """
        Load the current source directory again.

        Raises:
            RegistryNotLoadedError: If the registry has never been loaded
        """
        source = self.source
        if source is None:
            raise RegistryNotLoadedError()
        return self.load(source, cancel)

    def get(self, identifier: str) -> SkillDocument:
        """
        Get a document by identifier.

        Raises:
            NotFoundError: If no document has that identifier
        """
        document = self._current().index.get(identifier)
        if document is None:
            raise NotFoundError(identifier)
        return document

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._current().index

    def __len__(self) -> int:
        return len(self._current().documents)

    def list(self) -> SkillListing:
        """
        List documents of the current snapshot in scan order.

        The returned listing can be iterated any number of times and keeps
        pointing at the same snapshot even if the registry is reloaded.
        """
        return SkillListing(self._current())
