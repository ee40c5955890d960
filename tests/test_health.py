"""
Health endpoint tests
"""
from unittest.mock import patch

from application.email_service import EmailSenderService
from emailservice import create_app
from tests.config import TestConfig
from tests.helpers.email_sender import RecordingEmailSender


class TestHealthEndpoints:
    """Health endpoint tests"""

    def test_health_live_success(self, client):
        """Test /health/live endpoint returns 200 OK"""
        response = client.get("/health/live")
        assert response.status_code == 200

        data = response.get_json()
        assert data["status"] == "ok"

    def test_health_ready_with_valid_sender(self, client):
        response = client.get("/health/ready")

        assert response.status_code == 200
        assert response.get_json() == {"status": "ok", "sender": "ok"}

    def test_health_ready_with_invalid_sender(self):
        service = EmailSenderService(sender=RecordingEmailSender(configured=False))
        app = create_app(TestConfig, email_service=service)

        response = app.test_client().get("/health/ready")

        assert response.status_code == 503
        assert response.get_json() == {"status": "error", "sender": "error"}

    def test_health_ready_when_check_raises(self, client):
        with patch.object(RecordingEmailSender, "validate_config", side_effect=RuntimeError("boom")):
            response = client.get("/health/ready")

        assert response.status_code == 503
        assert response.get_json()["sender"] == "error"
