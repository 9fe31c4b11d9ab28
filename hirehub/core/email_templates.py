"""
HTML bodies for outgoing email.

Every interpolated value is escaped; callers pass plain text.
"""
from datetime import datetime
from html import escape
from typing import Optional

_BODY_STYLE = "font-family: Arial, sans-serif; color:#222;"
_HEADING_STYLE = "color:#1b6ec2;"
_BUTTON_STYLE = (
    "background:#1b6ec2;color:#fff;padding:8px 12px;"
    "border-radius:6px;text-decoration:none;"
)


def _page(heading: str, paragraphs: list[str]) -> str:
    body = "\n".join(f"  {p}" for p in paragraphs)
    return (
        "<html>\n"
        f'<body style="{_BODY_STYLE}">\n'
        f'  <h2 style="{_HEADING_STYLE}">{heading}</h2>\n'
        f"{body}\n"
        "</body>\n"
        "</html>"
    )


def plain_message(message: str) -> str:
    """A free-text notification wrapped in a paragraph, newlines kept."""
    return f"<p>{escape(message or '').replace(chr(10), '<br/>')}</p>"


def password_reset(full_name: str, reset_link: str, expires_hours: int) -> str:
    link = escape(reset_link, quote=True)
    return _page(
        "Reset your password",
        [
            f"<p>Hi {escape(full_name or 'there')},</p>",
            "<p>We received a request to reset your HireHub password.</p>",
            f'<p><a href="{link}" style="{_BUTTON_STYLE}">Reset password</a></p>',
            f"<p>This link expires in {expires_hours} hours. "
            "If you did not ask for a reset you can ignore this email.</p>",
            "<p>Best regards,<br/>HireHub Team</p>",
        ],
    )


def shortlisted(
    candidate_name: str,
    job_title: str,
    company_name: str,
    details_url: Optional[str] = None,
) -> str:
    job_title = escape(job_title)
    company_name = escape(company_name)
    paragraphs = [
        f"<p>Hi {escape(candidate_name)},</p>",
        f"<p>Congratulations, you have been shortlisted for <strong>{job_title}</strong> "
        f"at <strong>{company_name}</strong>.</p>",
        "<p>Please check your application dashboard for next steps.</p>",
    ]
    if details_url:
        paragraphs.append(
            f'<p><a href="{escape(details_url, quote=True)}" style="{_BUTTON_STYLE}">View application</a></p>'
        )
    paragraphs.append("<p>Best regards,<br/>HireHub Team</p>")
    return _page(f"You are shortlisted for {job_title}", paragraphs)


def interview_scheduled(
    candidate_name: str,
    job_title: str,
    company_name: str,
    interview_at: Optional[datetime] = None,
    location_or_link: Optional[str] = None,
) -> str:
    job_title = escape(job_title)
    company_name = escape(company_name)
    paragraphs = [
        f"<p>Hi {escape(candidate_name)},</p>",
        f"<p>Your interview for <strong>{job_title}</strong> at <strong>{company_name}</strong> "
        "has been scheduled.</p>",
    ]
    if interview_at is not None:
        paragraphs.append(f"<p><strong>Date &amp; time:</strong> {format_interview_time(interview_at)}</p>")
    if location_or_link:
        paragraphs.append(f"<p><strong>Details:</strong> {escape(location_or_link)}</p>")
    paragraphs.append("<p>Please reply if you need to reschedule.</p>")
    paragraphs.append(f"<p>Best regards,<br/>{company_name} / HireHub</p>")
    return _page(f"Interview scheduled for {job_title}", paragraphs)


def format_interview_time(value: datetime) -> str:
    """e.g. 'Monday, 03 March 2025 14:30 UTC'"""
    return value.strftime("%A, %d %B %Y %H:%M %Z").strip()
