"""
Email Service using Resend
Templates are written in MJML and compiled to HTML before sending
"""

import logging
from typing import Union

import resend
from mjml import mjml_to_html

from .config import BASE_URL, EMAIL_FROM_ADDRESS, RESEND_API_KEY
from .email_templates import (
    email_verification_template,
    role_accepted_template,
    role_rejected_template,
)

logger = logging.getLogger(__name__)

resend.api_key = RESEND_API_KEY


class EmailServiceError(Exception):
    """Raised when an email cannot be compiled or sent"""


def compile_mjml_to_html(mjml_content: str) -> str:
    """Compile MJML template to production-ready HTML"""
    try:
        result = mjml_to_html(mjml_content)
        if isinstance(result, dict):
            if result.get("errors"):
                logger.warning(f"MJML compilation warnings: {result['errors']}")
            return result.get("html", "")
        return str(getattr(result, "html", result))
    except Exception as e:
        logger.error(f"MJML compilation error: {e}")
        raise EmailServiceError(f"Failed to compile MJML template: {str(e)}") from e


async def send_email(to: Union[str, list[str]], subject: str, mjml_content: str) -> dict:
    """
    Send an email through Resend

    Args:
        to: Recipient email(s)
        subject: Email subject line
        mjml_content: MJML template content (will be compiled to HTML)

    Returns:
        Resend response dict
    """
    if not RESEND_API_KEY:
        logger.error("❌ No email service configured - RESEND_API_KEY missing")
        raise EmailServiceError("Email service not configured")

    html_content = compile_mjml_to_html(mjml_content)
    recipients = [to] if isinstance(to, str) else to

    try:
        logger.info(f"📧 Sending email via Resend to: {recipients}")
        response = resend.Emails.send(
            {
                "from": EMAIL_FROM_ADDRESS,
                "to": recipients,
                "subject": subject,
                "html": html_content,
            }
        )
        logger.info(f"✅ Email sent successfully via Resend: {response}")
        return response
    except Exception as e:
        logger.error(f"❌ Email send error to {recipients}: {e}")
        raise EmailServiceError(f"Failed to send email: {str(e)}") from e


async def send_verification_email(to: str, token: str) -> dict:
    confirm_link = f"{BASE_URL}/auth/new-verification?token={token}"
    return await send_email(
        to=to,
        subject="Verify your email address",
        mjml_content=email_verification_template(confirm_link),
    )


async def send_role_accepted_email(to: str, role: str) -> dict:
    return await send_email(
        to=to,
        subject="Role request approved",
        mjml_content=role_accepted_template(role),
    )


async def send_role_rejected_email(to: str, role: str) -> dict:
    return await send_email(
        to=to,
        subject="Role request rejected",
        mjml_content=role_rejected_template(role),
    )
