import html
import os

import httpx

from app.schemas.contact import ContactIn

RESEND_API_URL = "https://api.resend.com/emails"


def _config() -> tuple[str, str, str]:
    api_key = os.getenv("RESEND_API_KEY", "").strip()
    sender = os.getenv("RESEND_FROM", "Turnitaround Website <no-reply@turnitaroundbusiness.com>").strip()
    inbox = os.getenv("CONTACT_INBOX", "info@turnitaroundbusiness.com").strip()
    return api_key, sender, inbox


async def send_email(to: str, subject: str, html_body: str, reply_to: str | None = None):
    api_key, sender, _ = _config()
    if not api_key:
        raise RuntimeError("RESEND_API_KEY not set")

    payload = {"from": sender, "to": [to], "subject": subject, "html": html_body}
    if reply_to:
        payload["reply_to"] = reply_to

    async with httpx.AsyncClient(timeout=20) as client:
        r = await client.post(
            RESEND_API_URL,
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
            json=payload,
        )
        r.raise_for_status()
        return r.json()


def contact_email_html(msg: ContactIn) -> str:
    rows = [
        ("Name", msg.name),
        ("Email", msg.email),
        ("Phone", msg.phone or "-"),
        ("Subject", msg.subject or "-"),
    ]
    table = "".join(
        f"<tr><td style='padding:4px 12px 4px 0;color:#666'>{label}</td><td>{html.escape(value)}</td></tr>"
        for label, value in rows
    )
    body = html.escape(msg.message).replace("\n", "<br>")
    return (
        "<div style='font-family:Arial,sans-serif;line-height:1.5'>"
        "<h2>New website enquiry</h2>"
        f"<table>{table}</table>"
        f"<p>{body}</p>"
        "</div>"
    )


async def send_contact_message(msg: ContactIn):
    _, _, inbox = _config()
    subject = f"Website enquiry: {msg.subject}" if msg.subject else f"Website enquiry from {msg.name}"
    return await send_email(to=inbox, subject=subject, html_body=contact_email_html(msg), reply_to=str(msg.email))
