"""Directory scanning for skill document files."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from fnmatch import fnmatch
from pathlib import Path

from skilldex.constants import (
    DEFAULT_IGNORE,
    DEFAULT_SKILL_FILENAME,
    DEFAULT_SUFFIXES,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocumentSource:
    """A document file found by the scanner, with its fallback identifier."""

    path: Path
    fallback_id: str


def _is_ignored(name: str, ignore: Iterable[str]) -> bool:
    return any(fnmatch(name, pattern) for pattern in ignore)


def _has_suffix(path: Path, suffixes: Iterable[str]) -> bool:
    return path.suffix.lower() in {s.lower() for s in suffixes}


def _document_in_subdir(
    subdir: Path,
    suffixes: Iterable[str],
    ignore: Iterable[str],
    skill_filename: str,
) -> Path | None:
    skill_file = subdir / skill_filename
    if skill_file.is_file():
        return skill_file

    candidates = [
        entry
        for entry in sorted(subdir.iterdir())
        if entry.is_file()
        and not _is_ignored(entry.name, ignore)
        and _has_suffix(entry, suffixes)
    ]
    if len(candidates) == 1:
        return candidates[0]

    if not candidates:
        logger.warning(f"No {skill_filename} or document found in {subdir.name}")
    else:
        logger.warning(
            f"Skipping {subdir.name}: {len(candidates)} documents and no {skill_filename}"
        )
    return None


def scan_directory(
    source: Path,
    suffixes: Iterable[str] = DEFAULT_SUFFIXES,
    ignore: Iterable[str] = DEFAULT_IGNORE,
    skill_filename: str = DEFAULT_SKILL_FILENAME,
) -> list[DocumentSource]:
    """
    Find document files in a skills directory.

    Both layouts are accepted: flat files (`skills/review.md`) and one level
    of per-skill subdirectories (`skills/review/SKILL.md`). Entries are visited
    in sorted name order so the result is deterministic.

    Args:
        source: Directory to scan (must exist)
        suffixes: File suffixes that count as documents
        ignore: fnmatch patterns for entry names to skip
        skill_filename: Preferred document name inside a subdirectory

    Returns:
        List of DocumentSource in scan order
    """
    suffixes = tuple(suffixes)
    ignore = tuple(ignore)

    results = []
    for entry in sorted(source.iterdir()):
        if _is_ignored(entry.name, ignore):
            continue

        if entry.is_dir():
            doc_file = _document_in_subdir(entry, suffixes, ignore, skill_filename)
            if doc_file is not None:
                results.append(DocumentSource(path=doc_file, fallback_id=entry.name))
        elif entry.is_file() and _has_suffix(entry, suffixes):
            results.append(DocumentSource(path=entry, fallback_id=entry.stem))

    return results
