"""Render loaded skills as markdown."""

from collections.abc import Iterable

from skilldex.core.document import SkillDocument


def render_index(documents: Iterable[SkillDocument]) -> str:
    """Render a markdown table of contents, one line per document."""
    lines = []
    for doc in documents:
        if doc.description:
            lines.append(f"- **{doc.identifier}**: {doc.description}")
        else:
            lines.append(f"- **{doc.identifier}**")
    return "\n".join(lines)


def render_prompt_section(documents: Iterable[SkillDocument]) -> str | None:
    """Render available skills as a system prompt section.

    Args:
        documents: Loaded skill documents.

    Returns:
        Formatted markdown section, or None if no skills available.
    """
    documents = list(documents)
    if not documents:
        return None

    lines: list[str] = []
    lines.append("## Skills")
    lines.append(
        "Each entry below is a set of local instructions stored in a markdown file. "
        "Open the file to read the full instructions before using a skill."
    )
    for doc in documents:
        path_str = str(doc.path).replace("\\", "/")
        description = doc.description or "(no description)"
        lines.append(f"- {doc.identifier}: {description} (file: {path_str})")

    return "\n".join(lines)
