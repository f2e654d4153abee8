"""SMS delivery provider (dev stub)."""

import logging

from notification_dispatch.enums import Channel
from notification_dispatch.models import NotificationData

from notification_dispatch.providers.base import DeliveryProvider, DeliveryResult

logger = logging.getLogger(__name__)


class TwilioSmsProvider(DeliveryProvider):
    """Stub Twilio provider that logs instead of sending.

    Needs an account SID and auth token once wired to the real API.
    """

    def __init__(self, api_key: str = "") -> None:
        self._api_key = api_key

    @property
    def name(self) -> str:
        return "TwilioSmsProvider"

    def supports(self, channel: Channel) -> bool:
        return channel == Channel.SMS

    def send(self, notification: NotificationData) -> DeliveryResult:
        preview = notification.body[:50] if notification.body else "(empty)"
        logger.info(
            "SMS sent (stub)",
            extra={
                "provider": self.name,
                "recipient": notification.recipient,
                "body_preview": preview,
            },
        )
        return DeliveryResult.ok(f"SMS delivered: {preview}")
