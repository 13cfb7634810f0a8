from __future__ import annotations

from typing import Any

from fastapi.testclient import TestClient

from apps.backend.app.main import app


client = TestClient(app)


def test_health() -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_convert_draft_to_tree_endpoint(rich_content: dict[str, Any]) -> None:
    response = client.post("/convert/draft-to-tree", json=rich_content)

    assert response.status_code == 200
    payload = response.json()
    assert payload["doc"]["type"] == "doc"
    assert payload["doc"]["content"][0] == {
        "type": "heading",
        "attrs": {"level": 1},
        "content": [{"type": "text", "text": "Title"}],
    }
    assert payload["unmatched"] == {"blocks": [], "entities": {}, "inlineStyles": []}


def test_invalid_content_returns_400() -> None:
    response = client.post("/convert/draft-to-tree", json={"blocks": []})

    assert response.status_code == 400
    assert "entityMap" in response.json()["detail"]


def test_strict_rejects_unmatched_content() -> None:
    body = {"blocks": [{"type": "mystery", "text": "?"}], "entityMap": {}}

    lenient = client.post("/convert/draft-to-tree", json=body)
    strict = client.post("/convert/draft-to-tree", params={"strict": "true"}, json=body)

    assert lenient.status_code == 200
    assert strict.status_code == 422
    assert [block["type"] for block in strict.json()["unmatched"]["blocks"]] == ["mystery"]


def test_prefixed_openapi_lists_conversion_route() -> None:
    response = client.get("/api/openapi.json")

    assert response.status_code == 200
    assert "/convert/draft-to-tree" in response.json()["paths"]
