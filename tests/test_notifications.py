"""Tests for consultancy.notifications — TelegramNotifier and message helpers."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from consultancy.notifications import (
    MAX_MESSAGE_LENGTH,
    TelegramNotifier,
    format_contact_message,
    is_valid_contact,
    sanitize_text,
    truncate_message,
)

CONTACT = {
    "name": "Ravi Kumar",
    "email": "ravi@example.com",
    "phone": "+91 98765 43210",
    "subject": "GST filing",
    "message": "Please call me back about GST returns.",
}


def _mock_response(status: int = 200) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status
    resp.json.return_value = {"ok": status < 400}
    resp.raise_for_status = MagicMock(
        side_effect=None if status < 400 else httpx.HTTPStatusError(
            "", request=MagicMock(), response=resp
        )
    )
    return resp


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class TestHelpers:
    def test_sanitize_strips_control_characters(self) -> None:
        assert sanitize_text("  hi\x00 there\x07 ") == "hi there"

    def test_sanitize_missing_values(self) -> None:
        assert sanitize_text(None) == "N/A"
        assert sanitize_text("") == "N/A"

    def test_sanitize_caps_length(self) -> None:
        assert len(sanitize_text("x" * 1000)) == 500

    def test_truncate_short_message_unchanged(self) -> None:
        assert truncate_message("hello") == "hello"

    def test_truncate_long_message(self) -> None:
        result = truncate_message("x" * 5000)
        assert len(result) <= MAX_MESSAGE_LENGTH
        assert result.endswith("[Message truncated due to length limit]")

    def test_valid_contact_needs_name_and_email_or_subject(self) -> None:
        assert is_valid_contact(CONTACT)
        assert is_valid_contact({"name": "A", "subject": "B"})
        assert not is_valid_contact({"name": "A"})
        assert not is_valid_contact({"email": "a@example.com", "subject": "B"})
        assert not is_valid_contact({"name": "  ", "email": "a@example.com"})

    def test_format_contact_message(self) -> None:
        text = format_contact_message(CONTACT, site_url="https://bhumiconsultancy.in/")
        assert "Name: Ravi Kumar" in text
        assert "Phone: +91 98765 43210" in text
        assert "Please call me back about GST returns." in text
        assert "Admin panel: https://bhumiconsultancy.in/admin" in text

    def test_format_contact_message_without_phone(self) -> None:
        contact = {k: v for k, v in CONTACT.items() if k != "phone"}
        assert "Phone:" not in format_contact_message(contact)


# ---------------------------------------------------------------------------
# TelegramNotifier
# ---------------------------------------------------------------------------

class TestTelegramNotifier:
    @pytest.fixture
    def notifier(self) -> TelegramNotifier:
        return TelegramNotifier(bot_token="123:abc", chat_id="42", retry_delay=0, min_interval=0)

    def test_disabled_without_credentials(self) -> None:
        assert TelegramNotifier().enabled is False
        assert TelegramNotifier(bot_token="your_telegram_bot_token_here", chat_id="42").enabled is False

    def test_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "123:abc")
        monkeypatch.setenv("TELEGRAM_CHAT_ID", "42")
        assert TelegramNotifier.from_env().enabled is True

    async def test_disabled_reports_reason(self) -> None:
        result = await TelegramNotifier().send_contact_notification(CONTACT)
        assert result == {"success": False, "reason": "disabled"}

    async def test_happy_path(self, notifier: TelegramNotifier) -> None:
        mock_post = AsyncMock(return_value=_mock_response())
        with patch("httpx.AsyncClient.post", mock_post):
            result = await notifier.send_contact_notification(CONTACT)
        assert result == {"success": True}
        url = mock_post.call_args[0][0]
        assert url == "https://api.telegram.org/bot123:abc/sendMessage"
        body = mock_post.call_args[1]["json"]
        assert body["chat_id"] == "42"
        assert "Ravi Kumar" in body["text"]
        assert notifier.status()["last_notification_time"] is not None

    async def test_invalid_contact_not_sent(self, notifier: TelegramNotifier) -> None:
        mock_post = AsyncMock(return_value=_mock_response())
        with patch("httpx.AsyncClient.post", mock_post):
            result = await notifier.send_contact_notification({"name": "A"})
        assert result["reason"] == "invalid_data"
        mock_post.assert_not_called()

    async def test_retries_then_succeeds(self, notifier: TelegramNotifier) -> None:
        mock_post = AsyncMock(side_effect=[_mock_response(500), _mock_response()])
        with patch("httpx.AsyncClient.post", mock_post):
            result = await notifier.send_contact_notification(CONTACT)
        assert result["success"] is True
        assert mock_post.call_count == 2

    async def test_gives_up_after_max_retries(self, notifier: TelegramNotifier) -> None:
        mock_post = AsyncMock(return_value=_mock_response(502))
        with patch("httpx.AsyncClient.post", mock_post):
            result = await notifier.send_contact_notification(CONTACT)
        assert result["success"] is False
        assert result["reason"] == "send_failed"
        assert "502" in result["error"]
        assert mock_post.call_count == 3

    async def test_auth_failure_not_retried(self, notifier: TelegramNotifier) -> None:
        mock_post = AsyncMock(return_value=_mock_response(401))
        with patch("httpx.AsyncClient.post", mock_post):
            result = await notifier.send_contact_notification(CONTACT)
        assert result["reason"] == "send_failed"
        assert mock_post.call_count == 1

    async def test_connection_error(self, notifier: TelegramNotifier) -> None:
        mock_post = AsyncMock(side_effect=httpx.ConnectError("refused"))
        with patch("httpx.AsyncClient.post", mock_post):
            result = await notifier.send_contact_notification(CONTACT)
        assert result["reason"] == "send_failed"
        assert result["error"] == "Cannot reach Telegram servers"

    async def test_rate_limited(self) -> None:
        notifier = TelegramNotifier(bot_token="123:abc", chat_id="42", min_interval=60)
        mock_post = AsyncMock(return_value=_mock_response())
        with patch("httpx.AsyncClient.post", mock_post):
            first = await notifier.send_contact_notification(CONTACT)
            second = await notifier.send_contact_notification(CONTACT)
        assert first["success"] is True
        assert second == {"success": False, "reason": "rate_limited"}
        assert mock_post.call_count == 1

    async def test_send_test_message(self, notifier: TelegramNotifier) -> None:
        mock_post = AsyncMock(return_value=_mock_response())
        with patch("httpx.AsyncClient.post", mock_post):
            result = await notifier.send_test_message()
        assert result["success"] is True
        assert result["enabled"] is True
