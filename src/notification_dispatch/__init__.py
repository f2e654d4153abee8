from notification_dispatch.config import DispatchConfig, ProviderConfig, RetryConfig
from notification_dispatch.dispatcher import DispatchEngine, PendingDelivery
from notification_dispatch.enums import Channel, DeliveryState, Priority
from notification_dispatch.errors import NotificationValidationError
from notification_dispatch.models import (
    AnyNotification,
    EmailData,
    NotificationData,
    PushData,
    SmsData,
    parse_notification,
)
from notification_dispatch.providers import (
    DeliveryProvider,
    DeliveryResult,
    ProviderRegistry,
    create_default_registry,
)
from notification_dispatch.retry import DeliveryOutcome, RetryExecutor, get_backoff

__all__ = [
    "AnyNotification",
    "Channel",
    "DeliveryOutcome",
    "DeliveryProvider",
    "DeliveryResult",
    "DeliveryState",
    "DispatchConfig",
    "DispatchEngine",
    "EmailData",
    "NotificationData",
    "NotificationValidationError",
    "PendingDelivery",
    "Priority",
    "ProviderConfig",
    "ProviderRegistry",
    "PushData",
    "RetryConfig",
    "RetryExecutor",
    "SmsData",
    "create_default_registry",
    "get_backoff",
]
