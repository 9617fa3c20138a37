"""Integration tests for the /send-otp and /verify-otp routes."""

import httpx
import pytest
from fastapi.testclient import TestClient

from sendly_verify.core.app_factory import create_app
from sendly_verify.exceptions import UpstreamFailure
from sendly_verify.models.sendly import Verification, VerificationCheck
from sendly_verify.views import PageRenderer


class TestSendOTP:
    """Tests for POST /send-otp."""

    def test_success(self, test_client, mock_provider):
        mock_provider.send.return_value = Verification(id="ver_123")

        response = test_client.post("/send-otp", json={"phone": "+15551234567"})

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert response.json() == {"verificationId": "ver_123", "success": True}
        mock_provider.send.assert_awaited_once_with("+15551234567")

    def test_empty_phone(self, test_client, mock_provider):
        response = test_client.post("/send-otp", json={"phone": ""})

        assert response.status_code == 400
        assert response.json() == {"verificationId": "", "success": False, "error": "Phone number is required"}
        mock_provider.send.assert_not_called()

    def test_missing_phone(self, test_client, mock_provider):
        response = test_client.post("/send-otp", json={})

        assert response.status_code == 400
        assert response.json()["error"] == "Phone number is required"
        mock_provider.send.assert_not_called()

    @pytest.mark.parametrize("body", [b'{"phone": null}', b"null"])
    def test_null_phone(self, test_client, mock_provider, body):
        response = test_client.post("/send-otp", content=body, headers={"Content-Type": "application/json"})

        assert response.status_code == 400
        assert response.json()["error"] == "Phone number is required"
        mock_provider.send.assert_not_called()

    @pytest.mark.parametrize("body", [b"{not json", b"", b"[1, 2]", b'{"phone": 42}'])
    def test_malformed_body(self, test_client, mock_provider, body):
        response = test_client.post("/send-otp", content=body, headers={"Content-Type": "application/json"})

        assert response.status_code == 400
        assert response.json() == {"verificationId": "", "success": False, "error": "Invalid request body"}
        mock_provider.send.assert_not_called()

    def test_provider_failure(self, test_client, mock_provider):
        mock_provider.send.side_effect = UpstreamFailure("Sendly API error (HTTP 401): Invalid API key")

        response = test_client.post("/send-otp", json={"phone": "+15551234567"})

        assert response.status_code == 500
        data = response.json()
        assert data["success"] is False
        assert data["error"] == "Failed to send OTP: Sendly API error (HTTP 401): Invalid API key"

    def test_unexpected_provider_error(self, test_client, mock_provider):
        mock_provider.send.side_effect = RuntimeError("bug")

        response = test_client.post("/send-otp", json={"phone": "+15551234567"})

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Internal server error"}

    def test_get_not_allowed(self, test_client, mock_provider):
        response = test_client.get("/send-otp")

        assert response.status_code == 405
        assert response.text == "Method not allowed"
        assert "POST" in response.headers["allow"]
        mock_provider.send.assert_not_called()


class TestVerifyOTP:
    """Tests for POST /verify-otp."""

    def test_verified(self, test_client, mock_provider):
        response = test_client.post("/verify-otp", json={"verificationId": "ver_123", "code": "123456"})

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["status"] == "verified"
        assert data["message"]
        assert "error" not in data
        mock_provider.check.assert_awaited_once_with("ver_123", "123456")

    def test_failed_status(self, test_client, mock_provider):
        mock_provider.check.return_value = VerificationCheck(id="ver_123", status="failed")

        response = test_client.post("/verify-otp", json={"verificationId": "ver_123", "code": "000000"})

        assert response.status_code == 200
        assert response.json() == {"success": False, "status": "failed", "error": "Invalid verification code"}

    @pytest.mark.parametrize("status", ["pending", "expired", "canceled", "max_attempts_exceeded"])
    def test_other_statuses_echoed(self, test_client, mock_provider, status):
        mock_provider.check.return_value = VerificationCheck(status=status)

        response = test_client.post("/verify-otp", json={"verificationId": "ver_123", "code": "000000"})

        assert response.status_code == 200
        assert response.json()["success"] is False
        assert response.json()["status"] == status

    @pytest.mark.parametrize(
        "body",
        [
            {"verificationId": "ver_123"},
            {"code": "123456"},
            {"verificationId": "", "code": ""},
            {},
            {"verificationId": None, "code": None},
        ],
    )
    def test_missing_fields(self, test_client, mock_provider, body):
        response = test_client.post("/verify-otp", json=body)

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Verification ID and code are required"}
        mock_provider.check.assert_not_called()

    def test_malformed_body(self, test_client, mock_provider):
        response = test_client.post("/verify-otp", content=b'{"verificationId": ', headers={"Content-Type": "application/json"})

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Invalid request body"}
        mock_provider.check.assert_not_called()

    def test_provider_failure(self, test_client, mock_provider):
        mock_provider.check.side_effect = UpstreamFailure("Sendly API request failed: timed out")

        response = test_client.post("/verify-otp", json={"verificationId": "ver_123", "code": "123456"})

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": "Failed to verify OTP: Sendly API request failed: timed out",
        }

    @pytest.mark.parametrize("verification_id", [".", ".."])
    def test_dot_segment_id_rejected(self, mock_settings, make_sendly_client, verification_id):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200, json={"status": "verified"})

        app = create_app(
            settings=mock_settings,
            provider=make_sendly_client(handler),
            page_source=PageRenderer.from_mapping({}),
        )
        with TestClient(app) as client:
            response = client.post("/verify-otp", json={"verificationId": verification_id, "code": "123456"})

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Invalid verification ID"}
        assert calls == []

    def test_get_not_allowed(self, test_client):
        response = test_client.get("/verify-otp")

        assert response.status_code == 405
        assert response.text == "Method not allowed"


def test_send_then_verify_flow(test_client, mock_provider):
    """Test the id from /send-otp is what /verify-otp checks."""
    mock_provider.send.return_value = Verification(id="ver_abc")

    verification_id = test_client.post("/send-otp", json={"phone": "+15551234567"}).json()["verificationId"]
    response = test_client.post("/verify-otp", json={"verificationId": verification_id, "code": "424242"})

    assert response.json()["success"] is True
    mock_provider.check.assert_awaited_once_with("ver_abc", "424242")
