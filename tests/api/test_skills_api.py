"""Tests for skills API router."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from skilldex.api import create_app
from skilldex.core.context import SharedContext


@pytest.fixture
def client(test_config, sample_skills):
    """Create test client over a loaded sample registry."""
    context = SharedContext(test_config)
    context.load()
    app = create_app(context)

    with TestClient(app) as client:
        yield client


class TestListSkills:
    def test_list_skills_returns_empty_list_when_no_skills(self, test_config, skills_dir):
        """GET /skills returns empty list when no skills exist."""
        context = SharedContext(test_config)
        context.load()
        app = create_app(context)

        with TestClient(app) as client:
            response = client.get("/skills")

        assert response.status_code == 200
        assert response.json() == []

    def test_list_skills_returns_summaries(self, client, sample_skills: Path):
        """GET /skills returns summaries in scan order."""
        response = client.get("/skills")

        assert response.status_code == 200
        skills = response.json()
        assert [s["identifier"] for s in skills] == ["alpha", "b", "code-review"]
        assert skills[0]["description"] == "First"
        assert skills[0]["path"] == str(sample_skills / "a.md")
        assert "body" not in skills[0]


class TestGetSkill:
    def test_get_skill_returns_document(self, client):
        """GET /skills/{id} returns the full document."""
        response = client.get("/skills/code-review")

        assert response.status_code == 200
        skill = response.json()
        assert skill["identifier"] == "code-review"
        assert skill["description"] == "Review code"
        assert skill["body"] == "# Review"
        assert skill["metadata"] == {"version": 2}

    def test_get_skill_not_found(self, client):
        """GET /skills/{id} returns 404 for unknown identifier."""
        response = client.get("/skills/nonexistent")

        assert response.status_code == 404
        assert response.json()["detail"] == "Skill not found: nonexistent"


class TestReloadSkills:
    def test_reload_picks_up_new_skill(self, client, sample_skills: Path):
        (sample_skills / "gamma.md").write_text("---\nname: gamma\n---\nNew")

        response = client.post("/skills/reload")

        assert response.status_code == 200
        assert response.json()["count"] == 4
        assert client.get("/skills/gamma").status_code == 200

    def test_failed_reload_keeps_previous_skills(self, client, sample_skills: Path):
        (sample_skills / "broken.md").write_text("---\nname: broken\n")

        response = client.post("/skills/reload")

        assert response.status_code == 422
        assert "not closed" in response.json()["detail"]
        assert len(client.get("/skills").json()) == 3

    def test_reload_with_undecodable_file_returns_422(self, client, sample_skills: Path):
        (sample_skills / "binary.md").write_bytes(b"\xff\xfe")

        response = client.post("/skills/reload")

        assert response.status_code == 422
        assert "not valid UTF-8" in response.json()["detail"]
        assert len(client.get("/skills").json()) == 3


class TestSlashedIdentifier:
    def test_get_skill_with_slash_in_name(self, client, sample_skills: Path):
        (sample_skills / "team-review.md").write_text(
            "---\nname: team/review\ndescription: Team review\n---\nBody"
        )
        assert client.post("/skills/reload").status_code == 200

        response = client.get("/skills/team/review")

        assert response.status_code == 200
        assert response.json()["identifier"] == "team/review"
        assert response.json()["description"] == "Team review"

    def test_reload_route_still_reachable(self, client):
        response = client.post("/skills/reload")

        assert response.status_code == 200
        assert response.json()["count"] == 3
