from enum import StrEnum


class Channel(StrEnum):
    EMAIL = "email"
    SMS = "sms"
    PUSH_NOTIFICATION = "push"


class Priority(StrEnum):
    URGENT = "urgent"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def weight(self) -> int:
        """Ordering weight, lower is more urgent."""
        return _PRIORITY_WEIGHTS[self]

    @property
    def bypass_throttling(self) -> bool:
        return self in _BYPASS_THROTTLING


_PRIORITY_WEIGHTS: dict[str, int] = {
    Priority.URGENT: 0,
    Priority.HIGH: 1,
    Priority.MEDIUM: 2,
    Priority.LOW: 3,
}

_BYPASS_THROTTLING: frozenset[str] = frozenset({Priority.URGENT, Priority.HIGH})


class DeliveryState(StrEnum):
    DELIVERED = "delivered"
    EXHAUSTED = "exhausted"
    ABORTED = "aborted"
    UNROUTABLE = "unroutable"
