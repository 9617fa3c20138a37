"""Integration tests for HTML pages, health and routing errors."""

import pytest
from fastapi.testclient import TestClient

from sendly_verify.core.app_factory import create_app
from sendly_verify.views import PageRenderer


def test_index_page(test_client):
    response = test_client.get("/")

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "Verify your phone" in response.text


def test_verify_page(test_client):
    response = test_client.get("/verify")

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "Enter your code" in response.text


def test_missing_page_is_plain_text_500(mock_settings, mock_provider):
    app = create_app(
        settings=mock_settings,
        provider=mock_provider,
        page_source=PageRenderer.from_mapping({"index.html": "<p>index</p>"}),
    )

    with TestClient(app) as client:
        assert client.get("/").status_code == 200

        response = client.get("/verify")

    assert response.status_code == 500
    assert response.text == "Error loading page"
    assert "text/plain" in response.headers["content-type"]


def test_unknown_path_not_found(test_client):
    for path in ("/nope", "/verify/extra", "/send-otp/", "/docs", "/redoc", "/openapi.json"):
        response = test_client.get(path)

        assert response.status_code == 404
        assert response.text == "404 page not found"


def test_health(test_client):
    response = test_client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert "version" in response.json()


@pytest.mark.parametrize("method", ["POST", "PUT", "DELETE"])
@pytest.mark.parametrize(("path", "marker"), [("/", "Verify your phone"), ("/verify", "Enter your code")])
def test_pages_served_for_any_method(test_client, method, path, marker):
    response = test_client.request(method, path)

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert marker in response.text


def test_head_page(test_client):
    response = test_client.head("/verify")

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
