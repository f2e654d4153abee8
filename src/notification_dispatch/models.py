from datetime import datetime, timezone
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from notification_dispatch.enums import Priority
from notification_dispatch.errors import NotificationValidationError


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class NotificationData(BaseModel):
    """Fields shared by every notification variant."""

    model_config = ConfigDict(frozen=True)

    sender: str
    recipient: str
    body: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    priority: Priority | None = None

    def validate_all(self, context: str = "") -> None:
        """Run the shared checks, then the variant-specific ones.

        Raises NotificationValidationError on the first failing field.
        """
        if _is_blank(self.sender):
            raise NotificationValidationError("sender", context)
        if _is_blank(self.recipient):
            raise NotificationValidationError("recipient", context)
        if _is_blank(self.body):
            raise NotificationValidationError("body", context)
        if self.priority is None:
            raise NotificationValidationError("priority", context)
        self.validate_specifics(context)

    def validate_specifics(self, context: str = "") -> None:
        """Hook for per-variant checks."""


class EmailData(NotificationData):
    kind: Literal["email"] = "email"
    subject: str | None = None

    def validate_specifics(self, context: str = "") -> None:
        if _is_blank(self.subject):
            raise NotificationValidationError("subject", context)


class SmsData(NotificationData):
    kind: Literal["sms"] = "sms"


class PushData(NotificationData):
    kind: Literal["push"] = "push"


AnyNotification = Annotated[EmailData | SmsData | PushData, Field(discriminator="kind")]

_NOTIFICATION_ADAPTER: TypeAdapter[EmailData | SmsData | PushData] = TypeAdapter(
    AnyNotification
)

_KINDS: frozenset[str] = frozenset({"email", "sms", "push"})


def parse_notification(raw: dict[str, Any]) -> EmailData | SmsData | PushData:
    """Deserialize a raw dict into the matching notification variant.

    Raises ValueError if ``kind`` is missing or unknown.
    """
    try:
        kind = raw["kind"]
    except (KeyError, TypeError) as exc:
        raise ValueError("Missing kind in raw notification") from exc

    if kind not in _KINDS:
        raise ValueError(f"Unknown notification kind: {kind!r}")

    return _NOTIFICATION_ADAPTER.validate_python(raw)
