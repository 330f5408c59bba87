"""
Tests for enquiry email notifications.
The mail API is never contacted: `httpx.AsyncClient.post` is replaced per test.
"""

from datetime import date
from types import SimpleNamespace

import httpx
import pytest

from app.schemas.enquiry import EnquiryCreate
from app.services.enquiry import EnquiryService
from app.services.notification import NotificationService, render_enquiry_email
from tests.factories import PropertyFactory

MAIL_URL = "https://mail.test/emails"


@pytest.fixture
def sent(monkeypatch):
    """Capture outgoing mail API calls and answer 200."""
    calls = []

    async def fake_post(self, url, json=None, headers=None, **kwargs):
        calls.append({"url": url, "json": json, "headers": headers})
        return httpx.Response(200, json={"id": "msg_1"}, request=httpx.Request("POST", url))

    monkeypatch.setattr(httpx.AsyncClient, "post", fake_post)
    return calls


def live_notifier() -> NotificationService:
    return NotificationService(api_key="re_test", api_url=MAIL_URL, from_email="NestFind <noreply@nestfind.test>")


class TestNotificationService:
    """Test best-effort email delivery."""

    @pytest.mark.asyncio
    async def test_disabled_without_api_key(self, sent):
        notifier = NotificationService(api_key="")

        assert not notifier.enabled
        assert await notifier.send_email("owner@example.com", "Hello", "<p>Hi</p>") is False
        assert sent == []

    @pytest.mark.asyncio
    async def test_send_email(self, sent):
        assert await live_notifier().send_email("owner@example.com", "Hello", "<p>Hi</p>") is True

        assert len(sent) == 1
        call = sent[0]
        assert call["url"] == MAIL_URL
        assert call["json"] == {
            "from": "NestFind <noreply@nestfind.test>",
            "to": ["owner@example.com"],
            "subject": "Hello",
            "html": "<p>Hi</p>",
        }
        assert call["headers"] == {"Authorization": "Bearer re_test"}

    @pytest.mark.asyncio
    async def test_transport_error_returns_false(self, monkeypatch):
        async def failing_post(self, url, **kwargs):
            raise httpx.ConnectError("connection refused", request=httpx.Request("POST", url))

        monkeypatch.setattr(httpx.AsyncClient, "post", failing_post)

        assert await live_notifier().send_email("owner@example.com", "Hello", "<p>Hi</p>") is False

    @pytest.mark.asyncio
    async def test_rejected_message_returns_false(self, monkeypatch):
        async def rejecting_post(self, url, **kwargs):
            return httpx.Response(422, json={"message": "invalid from"}, request=httpx.Request("POST", url))

        monkeypatch.setattr(httpx.AsyncClient, "post", rejecting_post)

        assert await live_notifier().send_email("owner@example.com", "Hello", "<p>Hi</p>") is False


class TestEnquiryNotifications:
    """Test the owner email sent when an enquiry arrives."""

    @pytest.mark.asyncio
    async def test_owner_is_emailed(self, db_session, sent, property_repository, test_owner, test_buyer):
        property_obj = await PropertyFactory.create_property(
            property_repository, test_owner.id, title="Loft on Bank"
        )
        service = EnquiryService(db_session, notifier=live_notifier())

        await service.create_enquiry(
            EnquiryCreate(property_id=property_obj.id, message="Can I view it Saturday?"), test_buyer
        )

        assert len(sent) == 1
        payload = sent[0]["json"]
        assert payload["to"] == [test_owner.email]
        assert payload["subject"] == 'New enquiry for "Loft on Bank"'
        assert "Can I view it Saturday?" in payload["html"]
        assert "Test Buyer" in payload["html"]

    @pytest.mark.asyncio
    async def test_enquiry_survives_mail_failure(self, db_session, monkeypatch, property_repository, test_owner, test_buyer):
        async def failing_post(self, url, **kwargs):
            raise httpx.ReadTimeout("timed out", request=httpx.Request("POST", url))

        monkeypatch.setattr(httpx.AsyncClient, "post", failing_post)
        property_obj = await PropertyFactory.create_property(property_repository, test_owner.id)
        service = EnquiryService(db_session, notifier=live_notifier())

        enquiry = await service.create_enquiry(
            EnquiryCreate(property_id=property_obj.id, message="Still available?"), test_buyer
        )

        assert enquiry.id is not None
        assert enquiry.message == "Still available?"

    @pytest.mark.asyncio
    async def test_render_failure_is_swallowed(self, sent):
        broken_enquiry = SimpleNamespace(id="e1", phone=None, preferred_date=None, message=None)
        property_obj = SimpleNamespace(id="p1", title="Loft")
        owner = SimpleNamespace(email="owner@example.com", full_name="Owner")
        sender = SimpleNamespace(full_name="Buyer")

        assert await live_notifier().notify_enquiry(broken_enquiry, property_obj, owner, sender) is False
        assert sent == []


class TestRenderEnquiryEmail:
    """Test the enquiry email body."""

    def test_escapes_user_content(self):
        enquiry = SimpleNamespace(
            message="<script>alert(1)</script>", phone="613-555-0100", preferred_date=date(2026, 11, 7)
        )
        property_obj = SimpleNamespace(id="abc", title="Tom & Jerry's <House>")
        owner = SimpleNamespace(full_name="Olivia Owner")
        sender = SimpleNamespace(full_name="Bob <b>Buyer</b>")

        html = render_enquiry_email(enquiry, property_obj, owner, sender)

        assert "<script>" not in html
        assert "&lt;script&gt;" in html
        assert "Tom &amp; Jerry&#x27;s &lt;House&gt;" in html
        assert "Bob &lt;b&gt;Buyer&lt;/b&gt;" in html
        assert "613-555-0100" in html
        assert "2026-11-07" in html
        assert "/properties/abc" in html

    def test_missing_optional_fields(self):
        enquiry = SimpleNamespace(message="Hi", phone=None, preferred_date=None)
        property_obj = SimpleNamespace(id="abc", title="Loft")
        owner = SimpleNamespace(full_name="Owner")
        sender = SimpleNamespace(full_name="Buyer")

        html = render_enquiry_email(enquiry, property_obj, owner, sender)

        assert "Not provided" in html
        assert "Not specified" in html
