"""Abstract delivery provider interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Self

from notification_dispatch.enums import Channel
from notification_dispatch.models import NotificationData


@dataclass(frozen=True, slots=True)
class DeliveryResult:
    """Outcome of a single send attempt."""

    success: bool
    details: str

    @classmethod
    def ok(cls, details: str = "") -> Self:
        return cls(success=True, details=details)

    @classmethod
    def failed(cls, reason: str) -> Self:
        return cls(success=False, details=reason)


class DeliveryProvider(ABC):
    """Base class for all delivery backends."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Stable identifier, used only in diagnostics."""

    @abstractmethod
    def supports(self, channel: Channel) -> bool:
        """Return True if this provider can deliver on *channel*."""

    @abstractmethod
    def send(self, notification: NotificationData) -> DeliveryResult:
        """Attempt to deliver a notification.

        Implementations should return DeliveryResult.failed(...) rather
        than raise. A raised exception is still counted as a failed
        attempt by the retry loop.
        """
