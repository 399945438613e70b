"""Defaults shared by the scanner and the configuration layer."""

HEADER_MARKER = "---"
DEFAULT_SUFFIXES = (".md", ".markdown")
DEFAULT_IGNORE = ("README.md", ".*", "_*")
DEFAULT_SKILL_FILENAME = "SKILL.md"
