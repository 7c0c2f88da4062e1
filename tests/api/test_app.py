"""
Tests for the FastAPI application and GraphQL HTTP endpoint
"""

import pytest
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from librarygraph import __version__
from librarygraph.api.app import create_app
from librarygraph.middleware import REQUEST_ID_HEADER


@pytest.fixture
def client(catalog):
    with TestClient(create_app(catalog)) as test_client:
        yield test_client


def test_health(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy", "version": __version__}


def test_graphql_post(client):
    resp = client.post("/graphql", json={"query": "{ books { title } }"})

    assert resp.status_code == 200, resp.text
    assert resp.json() == {
        "data": {"books": [{"title": "The Awakening"}, {"title": "City of Glass"}]}
    }


def test_graphql_get(client):
    resp = client.get("/graphql", params={"query": "{ libraries { branch } }"})

    assert resp.status_code == 200, resp.text
    assert resp.json()["data"] == {
        "libraries": [{"branch": "downtown"}, {"branch": "riverside"}]
    }


def test_graphql_invalid_field_reports_error(client):
    resp = client.post("/graphql", json={"query": "{ books { isbn } }"})

    body = resp.json()
    assert body["data"] is None
    assert "isbn" in body["errors"][0]["message"]


def test_request_id_header_is_generated(client):
    resp = client.get("/health")

    assert resp.headers[REQUEST_ID_HEADER]


def test_request_id_header_is_echoed(client):
    resp = client.get("/health", headers={REQUEST_ID_HEADER: "req-123"})

    assert resp.headers[REQUEST_ID_HEADER] == "req-123"


def test_serves_injected_catalog(larger_catalog):
    with TestClient(create_app(larger_catalog)) as client:
        resp = client.post(
            "/graphql",
            json={
                "query": "query Downtown { libraries { branch books { title } } }",
                "operationName": "Downtown",
            },
        )

    libraries = resp.json()["data"]["libraries"]
    assert [library["branch"] for library in libraries] == ["downtown", "riverside", "hillcrest"]
    assert [book["title"] for book in libraries[0]["books"]] == [
        "City of Glass",
        "Ghosts",
        "The Locked Room",
    ]
    assert libraries[2]["books"] == []


@pytest.mark.integration
@pytest.mark.asyncio
async def test_graphql_author_query_async(catalog):
    app = create_app(catalog)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        first = await client.post("/graphql", json={"query": "{ books { author { name } } }"})
        second = await client.post("/graphql", json={"query": "{ books { author { name } } }"})

    assert first.status_code == 200
    assert first.json() == {
        "data": {
            "books": [
                {"author": {"name": "Kate Chopin"}},
                {"author": {"name": "Paul Auster"}},
            ]
        }
    }
    assert second.json() == first.json()
