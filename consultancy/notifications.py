"""Telegram notifications for new contact form submissions.

Configured from the environment:

    TELEGRAM_BOT_TOKEN   Bot API token
    TELEGRAM_CHAT_ID     Chat that receives the alerts

Empty or placeholder values disable sending; the submission is then only
logged. Sending never raises into the caller: every outcome is reported as
{"success": bool, "reason": ...} so the contact form keeps working when
Telegram is down.
"""

from __future__ import annotations

import asyncio
import logging
import os
import re
import time
from datetime import datetime, timezone
from typing import Any

import httpx

logger = logging.getLogger(__name__)

API_BASE = "https://api.telegram.org"
MAX_MESSAGE_LENGTH = 4096
MAX_FIELD_LENGTH = 500
MAX_RETRIES = 3
RETRY_DELAY = 1.0
MIN_INTERVAL = 2.0

_PLACEHOLDERS = {"your_telegram_bot_token_here", "your_telegram_chat_id_here"}
_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")


def sanitize_text(value: Any) -> str:
    """Trim, drop control characters, and cap length. Missing values become "N/A"."""
    if value is None or value == "":
        return "N/A"
    return _CONTROL_RE.sub("", str(value).strip())[:MAX_FIELD_LENGTH]


def truncate_message(message: str) -> str:
    if len(message) <= MAX_MESSAGE_LENGTH:
        return message
    return message[: MAX_MESSAGE_LENGTH - 100] + "\n\n... [Message truncated due to length limit]"


def is_valid_contact(contact: dict[str, Any]) -> bool:
    """A name plus either an email or a subject is the minimum worth alerting on."""
    def present(key: str) -> bool:
        return bool(str(contact.get(key) or "").strip())

    return present("name") and (present("email") or present("subject"))


def format_contact_message(contact: dict[str, Any], site_url: str = "") -> str:
    lines = [
        "NEW CONTACT FORM SUBMISSION",
        "",
        f"Name: {sanitize_text(contact.get('name'))}",
        f"Email: {sanitize_text(contact.get('email'))}",
    ]
    if contact.get("phone"):
        lines.append(f"Phone: {sanitize_text(contact['phone'])}")
    lines += [
        f"Subject: {sanitize_text(contact.get('subject'))}",
        "",
        "Message:",
        sanitize_text(contact.get("message")),
        "",
        f"Time: {datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M UTC')}",
    ]
    if site_url:
        lines.append(f"Admin panel: {site_url.rstrip('/')}/admin")
    return truncate_message("\n".join(lines))


class NotificationError(RuntimeError):
    """Raised by TelegramNotifier.send_message when the Bot API call fails."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TelegramNotifier:
    """Async Telegram Bot API client with retry and a minimum send interval.

    Args:
        bot_token:     Bot API token, or empty to disable.
        chat_id:       Destination chat id, or empty to disable.
        timeout:       HTTP timeout in seconds.
        max_retries:   Attempts per message. 401/403 are never retried.
        retry_delay:   Initial backoff in seconds, doubled after each failure.
        min_interval:  Minimum seconds between two successful contact alerts.
    """

    def __init__(
        self,
        bot_token: str = "",
        chat_id: str = "",
        timeout: float = 10.0,
        max_retries: int = MAX_RETRIES,
        retry_delay: float = RETRY_DELAY,
        min_interval: float = MIN_INTERVAL,
    ) -> None:
        self._token = bot_token.strip()
        self._chat_id = chat_id.strip()
        self._timeout = timeout
        self._max_retries = max_retries
        self._retry_delay = retry_delay
        self._min_interval = min_interval
        self._last_sent: float | None = None
        self._last_sent_at: str | None = None

    @classmethod
    def from_env(cls) -> TelegramNotifier:
        return cls(
            bot_token=os.getenv("TELEGRAM_BOT_TOKEN", ""),
            chat_id=os.getenv("TELEGRAM_CHAT_ID", ""),
        )

    @property
    def token_configured(self) -> bool:
        return bool(self._token) and self._token not in _PLACEHOLDERS

    @property
    def chat_configured(self) -> bool:
        return bool(self._chat_id) and self._chat_id not in _PLACEHOLDERS

    @property
    def enabled(self) -> bool:
        return self.token_configured and self.chat_configured

    def status(self) -> dict[str, Any]:
        return {
            "enabled": self.enabled,
            "token_configured": self.token_configured,
            "chat_id_configured": self.chat_configured,
            "last_notification_time": self._last_sent_at,
        }

    async def _post_once(self, text: str) -> None:
        url = f"{API_BASE}/bot{self._token}/sendMessage"
        body = {"chat_id": self._chat_id, "text": text, "disable_web_page_preview": True}
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                resp = await client.post(url, json=body)
                resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise NotificationError(
                f"Telegram API returned HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.TimeoutException as e:
            raise NotificationError(f"Telegram API timed out after {self._timeout}s") from e
        except httpx.TransportError as e:
            raise NotificationError("Cannot reach Telegram servers") from e

    async def send_message(self, text: str) -> None:
        """Send text to the configured chat, retrying with exponential backoff."""
        delay = self._retry_delay
        for attempt in range(1, self._max_retries + 1):
            try:
                await self._post_once(text)
                return
            except NotificationError as e:
                if e.status_code in (401, 403) or attempt == self._max_retries:
                    raise
                logger.info(f"Telegram attempt {attempt} failed ({e}), retrying in {delay}s")
                await asyncio.sleep(delay)
                delay *= 2

    async def send_contact_notification(
        self, contact: dict[str, Any], site_url: str = ""
    ) -> dict[str, Any]:
        """Alert the configured chat about a contact submission. Never raises."""
        now = time.monotonic()
        if self._last_sent is not None and now - self._last_sent < self._min_interval:
            logger.info("Skipping contact notification: rate limited")
            return {"success": False, "reason": "rate_limited"}
        if not is_valid_contact(contact):
            logger.warning("Skipping contact notification: invalid contact data")
            return {"success": False, "reason": "invalid_data"}
        if not self.enabled:
            logger.info(
                f"Telegram not configured; contact from {sanitize_text(contact.get('name'))} "
                f"<{sanitize_text(contact.get('email'))}> logged only"
            )
            return {"success": False, "reason": "disabled"}

        try:
            await self.send_message(format_contact_message(contact, site_url))
        except NotificationError as e:
            logger.warning(f"Failed to send Telegram notification: {e}")
            return {"success": False, "reason": "send_failed", "error": str(e)}

        self._last_sent = now
        self._last_sent_at = datetime.now(timezone.utc).isoformat()
        return {"success": True}

    async def send_test_message(self) -> dict[str, Any]:
        if not self.enabled:
            return {"success": False, "reason": "disabled", **self.status()}
        try:
            await self.send_message("Test message: contact notifications are working.")
        except NotificationError as e:
            return {"success": False, "reason": "send_failed", "error": str(e), **self.status()}
        return {"success": True, **self.status()}


_notifier: TelegramNotifier | None = None


def get_notifier() -> TelegramNotifier:
    """Process-wide notifier built from the environment on first use."""
    global _notifier
    if _notifier is None:
        _notifier = TelegramNotifier.from_env()
    return _notifier


def reset_notifier(notifier: TelegramNotifier | None = None) -> None:
    global _notifier
    _notifier = notifier
