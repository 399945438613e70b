"""Header block parsing for skill documents."""

from dataclasses import dataclass
from pathlib import Path

import yaml
from pydantic import ValidationError

from skilldex.constants import HEADER_MARKER
from skilldex.core.document import HeaderRecord
from skilldex.core.exceptions import MalformedHeaderError


@dataclass(frozen=True)
class ParsedDocument:
    """Result of splitting a document into header and body."""

    header: HeaderRecord | None
    body: str


def _is_marker(line: str) -> bool:
    return line.strip() == HEADER_MARKER


def split_header(text: str, path: Path | None = None) -> tuple[str | None, str]:
    """
    Split raw text into header text and body.

    Args:
        text: Raw file content
        path: Source path, used in error messages

    Returns:
        (header_text, body). header_text is None when no header block is present.

    Raises:
        MalformedHeaderError: If the opening marker is never closed
    """
    text = text.removeprefix("\ufeff")
    lines = text.splitlines(keepends=True)
    if not lines or not _is_marker(lines[0]):
        return None, text

    for i in range(1, len(lines)):
        if _is_marker(lines[i]):
            header_text = "".join(lines[1:i])
            body = "".join(lines[i + 1 :])
            return header_text, body

    raise MalformedHeaderError(path, "header block is not closed")


def parse_header(header_text: str, path: Path | None = None) -> HeaderRecord:
    """
    Validate header text into a HeaderRecord.

    Raises:
        MalformedHeaderError: If the text is not a mapping of key: value pairs,
            or recognized keys have the wrong type
    """
    try:
        raw = yaml.safe_load(header_text)
    except yaml.YAMLError as e:
        reason = str(e).splitlines()[0] if str(e) else "invalid YAML"
        raise MalformedHeaderError(path, f"not valid key: value pairs ({reason})")

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise MalformedHeaderError(path, "header must contain key: value pairs")

    try:
        return HeaderRecord.from_mapping(raw)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise MalformedHeaderError(path, problems)


def parse_document(text: str, path: Path | None = None) -> ParsedDocument:
    """
    Parse a document's optional header block and body.

    A header block starts on the first line with a `---` marker and ends at
    the next `---` marker line. Markers later in the body are left alone.

    Args:
        text: Raw file content
        path: Source path, used in error messages

    Returns:
        ParsedDocument with a validated header (or None) and the body text

    Raises:
        MalformedHeaderError: If the header is unclosed or not well-formed
    """
    header_text, body = split_header(text, path)
    if header_text is None:
        return ParsedDocument(header=None, body=body)
    return ParsedDocument(header=parse_header(header_text, path), body=body)
