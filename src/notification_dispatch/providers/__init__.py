"""Provider registry for capability-based delivery dispatch."""

import threading

from notification_dispatch.config import ProviderConfig
from notification_dispatch.enums import Channel

from notification_dispatch.providers.base import DeliveryProvider, DeliveryResult
from notification_dispatch.providers.email import MailgunEmailProvider, UnstableEmailProvider
from notification_dispatch.providers.push import PushNotificationProvider
from notification_dispatch.providers.sms import TwilioSmsProvider

__all__ = [
    "DeliveryProvider",
    "DeliveryResult",
    "MailgunEmailProvider",
    "ProviderRegistry",
    "PushNotificationProvider",
    "TwilioSmsProvider",
    "UnstableEmailProvider",
    "create_default_registry",
]


class ProviderRegistry:
    """Ordered, append-only list of delivery providers.

    Writers serialize on a lock and publish a fresh tuple; readers grab
    whatever tuple is current and iterate it without locking, so a
    lookup always sees a complete list.
    """

    def __init__(self) -> None:
        self._providers: tuple[DeliveryProvider, ...] = ()
        self._lock = threading.Lock()

    def register(self, provider: DeliveryProvider) -> None:
        with self._lock:
            self._providers = (*self._providers, provider)

    def resolve(self, channel: Channel) -> DeliveryProvider | None:
        """Return the first registered provider supporting *channel*.

        Returns None when no provider matches.
        """
        for provider in self._providers:
            if provider.supports(channel):
                return provider
        return None

    @property
    def providers(self) -> tuple[DeliveryProvider, ...]:
        return self._providers

    def __len__(self) -> int:
        return len(self._providers)


def create_default_registry(config: ProviderConfig | None = None) -> ProviderRegistry:
    """Create a registry with the built-in email, SMS and push providers."""
    config = config or ProviderConfig()
    registry = ProviderRegistry()
    registry.register(MailgunEmailProvider(config.email_api_key))
    registry.register(TwilioSmsProvider(config.sms_api_key))
    registry.register(PushNotificationProvider(config.push_api_key))
    return registry
