"""
Email endpoint tests with the SMTP connection mocked out.
"""

import smtplib
from unittest.mock import MagicMock

import pytest


@pytest.fixture
def smtp(monkeypatch):
    """Replace smtplib.SMTP; yields the server object used inside the `with` block."""
    smtp_class = MagicMock()
    monkeypatch.setattr("infiniti_cms.services.email_service.smtplib.SMTP", smtp_class)
    return smtp_class.return_value.__enter__.return_value


async def test_send_email(test_client, smtp):
    response = await test_client.post(
        "/api/v1/email/send",
        json={"to": "finance@client.com", "subject": "Invoice INV-1", "message": "Hello,\nPlease pay."},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message_id"]

    smtp.send_message.assert_called_once()
    sent = smtp.send_message.call_args.args[0]
    assert sent["To"] == "finance@client.com"
    assert sent["Subject"] == "Invoice INV-1"


async def test_smtp_authentication_failure_is_401(test_client, smtp):
    smtp.send_message.side_effect = smtplib.SMTPAuthenticationError(535, b"bad credentials")

    response = await test_client.post(
        "/api/v1/email/send",
        json={"to": "finance@client.com", "subject": "Hi", "message": "Hi"},
    )

    assert response.status_code == 401
    assert response.json()["error"]["message"] == (
        "SMTP authentication failed. Please check your email credentials."
    )


async def test_unreachable_server_is_503(test_client, smtp):
    smtp.send_message.side_effect = smtplib.SMTPServerDisconnected("gone")

    response = await test_client.post(
        "/api/v1/email/send",
        json={"to": "finance@client.com", "subject": "Hi", "message": "Hi"},
    )

    assert response.status_code == 503


async def test_invalid_recipient_is_422(test_client):
    response = await test_client.post(
        "/api/v1/email/send",
        json={"to": "not-an-address", "subject": "Hi", "message": "Hi"},
    )

    assert response.status_code == 422
