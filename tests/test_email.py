"""Tests for email templates and the send guard"""

import asyncio

import pytest

from daycare import email_service
from daycare.email_service import EmailServiceError, send_email
from daycare.email_templates import (
    email_verification_template,
    role_accepted_template,
    role_rejected_template,
)


class TestEmailTemplates:
    def test_verification_template_contains_link(self):
        mjml = email_verification_template("https://app.test/auth/new-verification?token=abc")

        assert mjml.strip().startswith("<mjml>")
        assert 'href="https://app.test/auth/new-verification?token=abc"' in mjml

    def test_role_templates_mention_role(self):
        assert "<strong>ADMIN</strong>" in role_accepted_template("ADMIN")
        assert "rejected" in role_rejected_template("DEMO")


class TestSendEmail:
    def test_missing_api_key_raises(self, monkeypatch):
        monkeypatch.setattr(email_service, "RESEND_API_KEY", None)

        with pytest.raises(EmailServiceError, match="not configured"):
            asyncio.run(send_email("kim@example.com", "Hello", role_accepted_template("USER")))

    def test_sends_compiled_html_through_resend(self, monkeypatch):
        captured = {}

        def fake_send(params):
            captured.update(params)
            return {"id": "email-1"}

        monkeypatch.setattr(email_service, "RESEND_API_KEY", "re_test")
        monkeypatch.setattr(email_service, "compile_mjml_to_html", lambda mjml: "<html>ok</html>")
        monkeypatch.setattr(email_service.resend.Emails, "send", fake_send)

        result = asyncio.run(send_email("kim@example.com", "Hello", role_accepted_template("USER")))

        assert result == {"id": "email-1"}
        assert captured["to"] == ["kim@example.com"]
        assert captured["html"] == "<html>ok</html>"
        assert captured["subject"] == "Hello"
