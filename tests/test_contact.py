from unittest.mock import MagicMock, patch

import pytest

from crud.contact import send_contact_message
from exceptions import AuthError, NotificationError, ValidationError
from schemas.contact import ContactMessage
from utils.email_service import EmailService


def _message(**overrides):
    data = {"name": "Ana", "email": "ana@example.com", "message": "The 3D printer is jammed."}
    data.update(overrides)
    return ContactMessage(**data)


class TestSendContactMessage:
    def test_relays_to_configured_address(self, user, mailer):
        send_contact_message(user, _message(), mailer)

        assert len(mailer.sent) == 1
        sent = mailer.sent[0]
        assert sent["to"] == "lab@example.com"
        assert "Ana" in sent["subject"]
        assert "ana@example.com" in sent["body"]
        assert "3D printer" in sent["body"]

    def test_blank_message(self, user, mailer):
        with pytest.raises(ValidationError):
            send_contact_message(user, _message(message="  "), mailer)
        assert mailer.sent == []

    def test_mailer_failure(self, user, mailer):
        mailer.result = False
        with pytest.raises(NotificationError):
            send_contact_message(user, _message(), mailer)

    def test_requires_login(self, mailer):
        with pytest.raises(AuthError):
            send_contact_message(None, _message(), mailer)


class TestEmailService:
    def test_send_uses_starttls(self):
        with patch("utils.email_service.smtplib.SMTP") as smtp:
            server = MagicMock()
            smtp.return_value.__enter__.return_value = server
            sent = EmailService("smtp.example.com", 587, "user", "pw").send_email(
                "from@example.com", "to@example.com", "Hi", "Body"
            )

        assert sent is True
        server.starttls.assert_called_once()
        server.login.assert_called_once_with("user", "pw")
        server.send_message.assert_called_once()

    def test_send_failure_returns_false(self):
        with patch("utils.email_service.smtplib.SMTP", side_effect=OSError("unreachable")):
            sent = EmailService("smtp.example.com", 587, "user", "pw").send_email(
                "from@example.com", "to@example.com", "Hi", "Body"
            )
        assert sent is False
