"""Bounded retry with exponential backoff against a single provider."""

import logging
import threading
from dataclasses import dataclass

from notification_dispatch.config import RetryConfig
from notification_dispatch.enums import DeliveryState
from notification_dispatch.models import NotificationData
from notification_dispatch.providers.base import DeliveryProvider, DeliveryResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DeliveryOutcome:
    """Terminal result of one dispatch unit."""

    state: DeliveryState
    attempts: int
    recipient: str
    provider_name: str | None = None
    reason: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.state == DeliveryState.DELIVERED


def get_backoff(attempt: int, base_delay_ms: float) -> float:
    """Return backoff seconds after failed attempt *attempt* (1-based).

    The wait doubles with every failure: 1x, 2x, 4x, 8x the base delay.
    """
    return base_delay_ms * (1 << (attempt - 1)) / 1000


class RetryExecutor:
    """Drives up to ``max_attempts`` sends of one notification.

    Failed attempts are followed by a backoff wait on a cancellation
    event. Setting the event aborts the loop at once; the event is left
    set so the caller can still see the signal.
    """

    def __init__(self, config: RetryConfig) -> None:
        self._config = config

    @property
    def config(self) -> RetryConfig:
        return self._config

    def run(
        self,
        provider: DeliveryProvider,
        notification: NotificationData,
        cancelled: threading.Event,
    ) -> DeliveryOutcome:
        max_attempts = self._config.max_attempts
        log_ctx: dict[str, object] = {
            "provider": provider.name,
            "recipient": notification.recipient,
            "max_attempts": max_attempts,
        }
        attempts = 0
        reason: str | None = None

        while attempts < max_attempts:
            attempts += 1
            result = self._attempt(provider, notification)

            if result.success:
                logger.info(
                    "Delivery succeeded",
                    extra={**log_ctx, "attempt": attempts, "result": result.details},
                )
                return DeliveryOutcome(
                    state=DeliveryState.DELIVERED,
                    attempts=attempts,
                    recipient=notification.recipient,
                    provider_name=provider.name,
                )

            reason = result.details
            logger.warning(
                "Delivery attempt failed",
                extra={**log_ctx, "attempt": attempts, "reason": reason},
            )
            if attempts >= max_attempts:
                break

            backoff = get_backoff(attempts, self._config.base_delay_ms)
            logger.debug(
                "Backing off before next attempt",
                extra={**log_ctx, "attempt": attempts, "backoff_seconds": backoff},
            )
            if cancelled.wait(backoff):
                logger.warning(
                    "Delivery aborted during backoff",
                    extra={**log_ctx, "attempt": attempts, "reason": reason},
                )
                return DeliveryOutcome(
                    state=DeliveryState.ABORTED,
                    attempts=attempts,
                    recipient=notification.recipient,
                    provider_name=provider.name,
                    reason=reason,
                )

        logger.error(
            "Delivery retries exhausted",
            extra={**log_ctx, "attempt": attempts, "reason": reason},
        )
        return DeliveryOutcome(
            state=DeliveryState.EXHAUSTED,
            attempts=attempts,
            recipient=notification.recipient,
            provider_name=provider.name,
            reason=reason,
        )

    @staticmethod
    def _attempt(provider: DeliveryProvider, notification: NotificationData) -> DeliveryResult:
        try:
            return provider.send(notification)
        except Exception as exc:
            logger.exception("Provider error", extra={"provider": provider.name})
            return DeliveryResult.failed(str(exc) or type(exc).__name__)
