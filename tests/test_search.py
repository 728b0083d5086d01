import pytest
from fastapi.testclient import TestClient
from app.main import app

client = TestClient(app)

MISSING_QUERY = {"error": "Query parameter 'q' is required"}


def test_search_with_defaults():
    response = client.get("/search", params={"q": "foo"})

    assert response.status_code == 200
    assert response.json() == {"query": "foo", "limit": "10", "page": "1", "results": []}


def test_search_body_is_exact():
    response = client.get("/search?q=foo")

    assert response.content == b'{"query":"foo","limit":"10","page":"1","results":[]}'


def test_search_with_paging():
    response = client.get("/search?q=foo&limit=5&page=2")

    assert response.status_code == 200
    assert response.json() == {"query": "foo", "limit": "5", "page": "2", "results": []}


def test_search_paging_stays_string():
    """Non-numeric paging values are echoed, not rejected."""
    response = client.get("/search?q=foo&limit=many&page=last")

    assert response.status_code == 200
    data = response.json()
    assert data["limit"] == "many"
    assert data["page"] == "last"


def test_search_empty_paging_uses_defaults():
    response = client.get("/search?q=foo&limit=&page=")

    data = response.json()
    assert data["limit"] == "10"
    assert data["page"] == "1"


@pytest.mark.parametrize("url", ["/search", "/search?q=", "/search?limit=5&page=2"])
def test_search_requires_query(url):
    response = client.get(url)

    assert response.status_code == 400
    assert response.json() == MISSING_QUERY


def test_search_missing_query_body_is_exact():
    response = client.get("/search")

    assert response.content == b'{"error":"Query parameter \'q\' is required"}'


def test_search_query_with_spaces():
    response = client.get("/search", params={"q": "hello world"})

    assert response.json()["query"] == "hello world"


def test_search_parameters_documented():
    response = client.get("/openapi.json")

    parameters = {
        parameter["name"]: parameter
        for parameter in response.json()["paths"]["/search"]["get"]["parameters"]
    }
    assert parameters["q"]["required"] is True
    assert parameters["limit"]["schema"]["default"] == "10"
    assert parameters["page"]["schema"]["default"] == "1"
