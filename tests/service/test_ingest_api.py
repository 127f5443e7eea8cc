"""
Service-level tests for the ingest API.

Runs the FastAPI app in-process against real files in a temporary tree and
checks the observable HTTP responses, including how loader errors are
reported.
"""

import pytest
from fastapi.testclient import TestClient

from app.api import health
from app.main import app
from app.utils.config import Settings


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def test_ingest_directory(client, make_tree):
    root = make_tree({"a.md": "alpha", "sub/b.md": "beta", "c.txt": "gamma"})

    response = client.post("/ingest/", json={"paths": [f"{root}/**/*.md"]})

    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 2
    assert sorted(doc["page_content"] for doc in body["documents"]) == ["alpha", "beta"]


def test_list_files(client, make_tree):
    root = make_tree({"a.md": "alpha", "c.txt": "gamma"})

    response = client.post("/ingest/files", json={"paths": [f"{root}/**/*.txt"]})

    assert response.status_code == 200
    assert response.json() == {"count": 1, "files": [str(root / "c.txt")]}


def test_missing_path_is_404(client, tmp_path):
    response = client.post("/ingest/", json={"paths": [str(tmp_path / "missing")]})

    assert response.status_code == 404
    assert response.json()["error"] == "PathNotFound"


def test_invalid_pattern_is_400(client, tmp_path):
    pattern = f"{tmp_path}/**/*.md}}"

    response = client.post("/ingest/", json={"paths": [pattern]})

    assert response.status_code == 400
    assert response.json()["error"] == "InvalidPattern"
    assert pattern in response.json()["detail"]


def test_empty_path_list_is_rejected(client):
    response = client.post("/ingest/", json={"paths": []})

    assert response.status_code == 422


def test_health_reports_tools(client, monkeypatch):
    monkeypatch.setattr(health, "tool_exists", lambda command: command == "pandoc")

    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "degraded"
    assert {tool["name"]: tool["available"] for tool in body["tools"]} == {
        "pandoc": True,
        "pdftotext": False,
    }


def test_cross_origin_requests_get_no_cors_grant(client, tmp_path):
    key = tmp_path / "id_rsa"
    key.write_text("PRIVATE KEY")

    response = client.post(
        "/ingest/",
        json={"paths": [str(key)]},
        headers={"Origin": "http://evil.example"},
    )

    assert "access-control-allow-origin" not in response.headers
    assert "access-control-allow-credentials" not in response.headers


def test_server_defaults_to_loopback_without_cors(monkeypatch):
    monkeypatch.delenv("API_HOST", raising=False)
    monkeypatch.delenv("CORS_ORIGINS", raising=False)

    settings = Settings(_env_file=None)

    assert settings.api_host == "127.0.0.1"
    assert settings.get_cors_origins() == []
    assert Settings(_env_file=None, cors_origins="http://a.test, http://b.test").get_cors_origins() == [
        "http://a.test",
        "http://b.test",
    ]
