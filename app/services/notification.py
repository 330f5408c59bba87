"""
Email notifications sent through the Resend HTTP API.

Delivery is best-effort: failures are logged and never raised to the caller,
so a mail outage cannot fail the request that triggered it.
"""

from html import escape
from typing import Optional
import logging

from httpx import AsyncClient, HTTPError

from app.config import get_settings
from app.models.enquiry import Enquiry
from app.models.property import Property
from app.models.user import User

settings = get_settings()
logger = logging.getLogger(__name__)


class NotificationService:
    """Sends transactional email. Without an API key every send is skipped."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        from_email: Optional[str] = None,
        timeout: Optional[float] = None
    ):
        self.api_key = api_key if api_key is not None else settings.resend_api_key
        self.api_url = api_url or settings.resend_api_url
        self.from_email = from_email or settings.notification_from_email
        self.timeout = timeout or settings.notification_timeout_seconds

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    async def send_email(self, to: str, subject: str, html: str) -> bool:
        """
        Post one message to the mail API.

        Returns:
            True if the API accepted the message, False otherwise
        """
        if not self.enabled:
            logger.info(f"Email notifications disabled, skipping '{subject}' to {to}")
            return False

        payload = {
            "from": self.from_email,
            "to": [to],
            "subject": subject,
            "html": html,
        }
        headers = {"Authorization": f"Bearer {self.api_key}"}

        try:
            async with AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.api_url, json=payload, headers=headers)
        except HTTPError as e:
            logger.error(f"Failed to send email '{subject}' to {to}: {e}")
            return False

        if not response.is_success:
            logger.warning(
                f"Mail API rejected '{subject}' to {to}: {response.status_code} {response.text[:200]}"
            )
            return False

        logger.info(f"Sent email '{subject}' to {to}")
        return True

    async def notify_enquiry(self, enquiry: Enquiry, property_obj: Property, owner: User, sender: User) -> bool:
        """
        Tell a listing owner about a new enquiry. Never raises.
        """
        try:
            subject = f'New enquiry for "{property_obj.title}"'
            html = render_enquiry_email(enquiry, property_obj, owner, sender)
            return await self.send_email(owner.email, subject, html)
        except Exception as e:
            logger.exception(f"Enquiry notification for {enquiry.id} failed: {e}")
            return False


def render_enquiry_email(enquiry: Enquiry, property_obj: Property, owner: User, sender: User) -> str:
    listing_url = f"{settings.site_url.rstrip('/')}/properties/{property_obj.id}"
    rows = [
        ("From", sender.full_name),
        ("Phone", enquiry.phone or "Not provided"),
        ("Preferred date", enquiry.preferred_date.isoformat() if enquiry.preferred_date else "Not specified"),
    ]
    details = "".join(
        f"<tr><td><strong>{escape(label)}</strong></td><td>{escape(value)}</td></tr>"
        for label, value in rows
    )
    return (
        f"<h2>New Enquiry Received</h2>"
        f"<p>Hi {escape(owner.full_name)}, someone is interested in "
        f"<strong>{escape(property_obj.title)}</strong>.</p>"
        f"<table>{details}</table>"
        f"<blockquote>{escape(enquiry.message)}</blockquote>"
        f'<p><a href="{escape(listing_url)}">View listing</a></p>'
    )
