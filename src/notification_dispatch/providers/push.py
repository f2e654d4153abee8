"""Push notification delivery provider (dev stub)."""

import logging

from notification_dispatch.enums import Channel
from notification_dispatch.models import NotificationData

from notification_dispatch.providers.base import DeliveryProvider, DeliveryResult

logger = logging.getLogger(__name__)


class PushNotificationProvider(DeliveryProvider):
    """Stub push provider that logs instead of sending (FCM/APNs later)."""

    def __init__(self, api_key: str = "") -> None:
        self._api_key = api_key

    @property
    def name(self) -> str:
        return "PushNotificationProvider"

    def supports(self, channel: Channel) -> bool:
        return channel == Channel.PUSH_NOTIFICATION

    def send(self, notification: NotificationData) -> DeliveryResult:
        preview = notification.body[:50] if notification.body else "(empty)"
        logger.info(
            "Push sent (stub)",
            extra={
                "provider": self.name,
                "recipient": notification.recipient,
                "body_preview": preview,
            },
        )
        return DeliveryResult.ok(f"Push delivered: {preview}")
