"""Shared test fixtures for skilldex test suite."""

from pathlib import Path

import pytest

from skilldex.core.context import SharedContext
from skilldex.utils.config import Config


@pytest.fixture
def test_config(tmp_path: Path) -> Config:
    """Config with workspace pointing to tmp_path."""
    return Config(workspace=tmp_path)


@pytest.fixture
def test_context(test_config: Config) -> SharedContext:
    """SharedContext with test config."""
    return SharedContext(config=test_config)


@pytest.fixture
def skills_dir(test_config: Config) -> Path:
    """Empty skills directory inside the test workspace."""
    test_config.skills_path.mkdir(parents=True)
    return test_config.skills_path


@pytest.fixture
def sample_skills(skills_dir: Path) -> Path:
    """Skills directory with one headed flat file, one bare file and one nested skill."""
    (skills_dir / "a.md").write_text("---\nname: alpha\ndescription: First\n---\nhello\n")
    (skills_dir / "b.md").write_text("Just a body.\n")
    nested = skills_dir / "code-review"
    nested.mkdir()
    (nested / "SKILL.md").write_text(
        "---\ndescription: Review code\nversion: 2\n---\n\n# Review\n"
    )
    return skills_dir
