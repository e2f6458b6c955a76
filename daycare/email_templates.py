"""
MJML Email Templates
Responsive templates for account and role-request emails
"""

from typing import Optional

THEME = {
    "primary": "#7c3aed",
    "background": "#f8fafc",
    "text_primary": "#0f172a",
    "text_secondary": "#334155",
    "text_muted": "#64748b",
}


def get_base_template(
    title: str,
    preview_text: str,
    content_sections: str,
    cta_url: Optional[str] = None,
    cta_label: Optional[str] = None,
) -> str:
    """Base MJML template wrapper for all emails"""

    cta_section = ""
    if cta_url and cta_label:
        cta_section = f"""
        <mj-section padding="20px 0">
          <mj-column>
            <mj-button
              href="{cta_url}"
              background-color="{THEME['primary']}"
              color="#ffffff"
              font-weight="600"
              border-radius="8px"
              padding="18px 40px"
              font-size="16px">
              {cta_label}
            </mj-button>
          </mj-column>
        </mj-section>
        """

    return f"""
    <mjml>
      <mj-head>
        <mj-title>{title}</mj-title>
        <mj-preview>{preview_text}</mj-preview>
        <mj-attributes>
          <mj-all font-family="-apple-system, BlinkMacSystemFont, 'Segoe UI', 'Helvetica Neue', Arial, sans-serif" />
          <mj-text font-size="16px" line-height="1.6" color="{THEME['text_secondary']}" />
        </mj-attributes>
      </mj-head>
      <mj-body background-color="{THEME['background']}">
        <mj-section background-color="#ffffff" padding="32px 20px">
          <mj-column>
            <mj-text font-size="22px" font-weight="700" color="{THEME['text_primary']}">
              {title}
            </mj-text>
            {content_sections}
          </mj-column>
        </mj-section>
        {cta_section}
        <mj-section padding="12px 0">
          <mj-column>
            <mj-text align="center" font-size="12px" color="{THEME['text_muted']}">
              Do not reply to this email.
            </mj-text>
          </mj-column>
        </mj-section>
      </mj-body>
    </mjml>
    """


def email_verification_template(confirm_link: str) -> str:
    content = """
    <mj-text>Click the button below to verify your email address.</mj-text>
    """
    return get_base_template(
        title="Verify your email address",
        preview_text="Confirm your email to finish signing up",
        content_sections=content,
        cta_url=confirm_link,
        cta_label="Verify email",
    )


def role_accepted_template(role: str) -> str:
    content = f"""
    <mj-text>Your request for the <strong>{role}</strong> role has been approved.</mj-text>
    """
    return get_base_template(
        title="Role request approved",
        preview_text=f"You now have the {role} role",
        content_sections=content,
    )


def role_rejected_template(role: str) -> str:
    content = f"""
    <mj-text>Your request for the <strong>{role}</strong> role has been rejected.</mj-text>
    <mj-text>You can contact an admin for more information.</mj-text>
    """
    return get_base_template(
        title="Role request rejected",
        preview_text=f"Your {role} role request was not approved",
        content_sections=content,
    )
