from fastapi.testclient import TestClient

from app.core.cors import CORS_HEADERS
from app.core.exceptions import LabAPIException, MissingQueryParameterError
from app.main import app, create_app

client = TestClient(app)


def test_unknown_route_returns_json_error():
    response = client.get("/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_wrong_method_returns_json_error():
    response = client.post("/ping")

    assert response.status_code == 405
    assert response.json() == {"error": "Method Not Allowed"}
    assert "GET" in response.headers["allow"]


def test_missing_query_parameter_error():
    error = MissingQueryParameterError("q")

    assert error.status_code == 400
    assert error.message == "Query parameter 'q' is required"
    assert error.to_dict() == {"error": "Query parameter 'q' is required"}
    assert isinstance(error, LabAPIException)


def test_unexpected_exception_returns_500():
    broken_app = create_app()

    @broken_app.get("/boom")
    async def boom():
        raise RuntimeError("kaboom")

    broken_client = TestClient(broken_app, raise_server_exceptions=False)
    response = broken_client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal Server Error"}
    for name, value in CORS_HEADERS.items():
        assert response.headers[name] == value


def test_custom_application_error_status():
    custom_app = create_app()

    @custom_app.get("/teapot")
    async def teapot():
        raise LabAPIException("short and stout", error_code="TEAPOT", status_code=418)

    response = TestClient(custom_app).get("/teapot")

    assert response.status_code == 418
    assert response.json() == {"error": "short and stout"}


def test_application_error_body_comes_from_to_dict():
    class DetailedError(LabAPIException):
        def to_dict(self):
            return {"error": self.message, "parameter": "q"}

    custom_app = create_app()

    @custom_app.get("/detailed")
    async def detailed():
        raise DetailedError("needs more", error_code="DETAILED", status_code=400)

    response = TestClient(custom_app).get("/detailed")

    assert response.status_code == 400
    assert response.json() == {"error": "needs more", "parameter": "q"}
