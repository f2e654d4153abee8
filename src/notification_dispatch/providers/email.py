"""Email delivery providers (dev stubs)."""

import logging
import threading

from notification_dispatch.enums import Channel
from notification_dispatch.models import EmailData, NotificationData

from notification_dispatch.providers.base import DeliveryProvider, DeliveryResult

logger = logging.getLogger(__name__)


def _subject(notification: NotificationData) -> str:
    if isinstance(notification, EmailData) and notification.subject:
        return notification.subject
    return "(no subject)"


class MailgunEmailProvider(DeliveryProvider):
    """Stub Mailgun provider that logs instead of sending.

    Replace the send() body with calls to the Mailgun messages API.
    """

    def __init__(self, api_key: str = "") -> None:
        self._api_key = api_key

    @property
    def name(self) -> str:
        return "Mailgun"

    def supports(self, channel: Channel) -> bool:
        return channel == Channel.EMAIL

    def send(self, notification: NotificationData) -> DeliveryResult:
        subject = _subject(notification)
        logger.info(
            "Email sent (stub)",
            extra={
                "provider": self.name,
                "recipient": notification.recipient,
                "subject": subject,
            },
        )
        return DeliveryResult.ok(f"Email delivered: {subject}")


class UnstableEmailProvider(DeliveryProvider):
    """Email stub that fails its first *failures* sends, then succeeds.

    Useful for watching the retry policy work end to end.
    """

    def __init__(self, failures: int = 2) -> None:
        self._failures = failures
        self._calls = 0
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return "UnstableEmailProvider"

    @property
    def calls(self) -> int:
        return self._calls

    def supports(self, channel: Channel) -> bool:
        return channel == Channel.EMAIL

    def send(self, notification: NotificationData) -> DeliveryResult:
        with self._lock:
            self._calls += 1
            call = self._calls

        if call <= self._failures:
            logger.warning(
                "Simulated send failure",
                extra={"provider": self.name, "recipient": notification.recipient, "call": call},
            )
            return DeliveryResult.failed("Temporary network error (simulated)")

        logger.info(
            "Email sent (stub)",
            extra={"provider": self.name, "recipient": notification.recipient, "call": call},
        )
        return DeliveryResult.ok(f"Email delivered on call {call}")
