"""Dispatch engine: provider lookup plus fire-and-forget delivery."""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Self

from notification_dispatch.config import DispatchConfig, RetryConfig
from notification_dispatch.enums import Channel, DeliveryState
from notification_dispatch.log import setup_logging
from notification_dispatch.models import NotificationData
from notification_dispatch.providers import DeliveryProvider, ProviderRegistry
from notification_dispatch.retry import DeliveryOutcome, RetryExecutor

logger = logging.getLogger(__name__)


class PendingDelivery:
    """Optional handle on a scheduled delivery.

    Callers that only want fire-and-forget can drop it.
    """

    def __init__(self, future: Future[DeliveryOutcome], cancelled: threading.Event) -> None:
        self._future = future
        self._cancelled = cancelled

    def done(self) -> bool:
        return self._future.done()

    def result(self, timeout: float | None = None) -> DeliveryOutcome:
        """Block until the delivery reaches a terminal state."""
        return self._future.result(timeout)

    def cancel(self) -> None:
        """Ask the delivery to stop.

        A queued delivery finishes ABORTED without sending; a running one
        aborts at its current or next backoff wait.
        """
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()


class DispatchEngine:
    """Resolves a provider per channel and delivers in the background.

    Every ``dispatch`` call becomes one unit of work on a thread pool.
    The caller never waits on provider I/O or backoff; outcomes are
    reported through logging (and, optionally, the returned handle).
    """

    def __init__(
        self,
        retry_config: RetryConfig | None = None,
        registry: ProviderRegistry | None = None,
        max_workers: int | None = None,
    ) -> None:
        self._retry = RetryExecutor(retry_config or RetryConfig.default_policy())
        self._registry = registry if registry is not None else ProviderRegistry()
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="dispatch"
        )
        self._inflight: set[threading.Event] = set()
        self._inflight_lock = threading.Lock()
        self._closed = False

    @classmethod
    def from_config(
        cls, config: DispatchConfig, registry: ProviderRegistry | None = None
    ) -> Self:
        """Build an engine from settings, installing JSON logging if enabled."""
        if config.json_logs:
            setup_logging(config)
        return cls(
            retry_config=config.retry_config(),
            registry=registry,
            max_workers=config.max_workers,
        )

    @property
    def registry(self) -> ProviderRegistry:
        return self._registry

    @property
    def retry_config(self) -> RetryConfig:
        return self._retry.config

    def register_provider(self, provider: DeliveryProvider) -> None:
        self._registry.register(provider)
        logger.debug("Provider registered", extra={"provider": provider.name})

    def dispatch(
        self,
        channel: Channel,
        notification: NotificationData,
        validate: bool = False,
    ) -> PendingDelivery | None:
        """Schedule delivery of *notification* on *channel* and return at once.

        The notification is delivered as given. Pass ``validate=True`` to
        run ``validate_all`` first, raising NotificationValidationError.
        Returns None when the engine no longer accepts work.
        """
        if validate:
            notification.validate_all(context=str(channel))

        cancelled = threading.Event()
        with self._inflight_lock:
            closed = self._closed
            if not closed:
                self._inflight.add(cancelled)
        if closed:
            logger.critical(
                "Dispatch executor is shut down, notification dropped",
                extra={"channel": str(channel), "recipient": notification.recipient},
            )
            return None

        try:
            future = self._executor.submit(self._deliver, channel, notification, cancelled)
        except RuntimeError:
            self._forget(cancelled)
            logger.critical(
                "Dispatch executor is shut down, notification dropped",
                extra={"channel": str(channel), "recipient": notification.recipient},
            )
            return None

        future.add_done_callback(lambda _: self._forget(cancelled))
        return PendingDelivery(future, cancelled)

    def shutdown(self, wait: bool = True, cancel_inflight: bool = False) -> None:
        """Stop accepting work.

        With *cancel_inflight* every running delivery aborts at its
        current or next backoff wait, and queued ones finish ABORTED
        without sending.
        """
        with self._inflight_lock:
            self._closed = True
            pending = list(self._inflight) if cancel_inflight else []
        for event in pending:
            event.set()
        self._executor.shutdown(wait=wait)
        logger.info("Dispatch engine shut down", extra={"cancel_inflight": cancel_inflight})

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *_exc: object) -> None:
        self.shutdown(wait=True)

    def _deliver(
        self,
        channel: Channel,
        notification: NotificationData,
        cancelled: threading.Event,
    ) -> DeliveryOutcome:
        log_ctx = {"channel": str(channel), "recipient": notification.recipient}
        if cancelled.is_set():
            logger.warning("Delivery cancelled before start", extra=log_ctx)
            return DeliveryOutcome(
                state=DeliveryState.ABORTED,
                attempts=0,
                recipient=notification.recipient,
            )

        try:
            provider = self._registry.resolve(channel)
        except Exception:
            logger.exception("Provider lookup failed", extra=log_ctx)
            raise

        if provider is None:
            logger.error("No provider for channel", extra=log_ctx)
            return DeliveryOutcome(
                state=DeliveryState.UNROUTABLE,
                attempts=0,
                recipient=notification.recipient,
            )

        return self._retry.run(provider, notification, cancelled)

    def _forget(self, cancelled: threading.Event) -> None:
        with self._inflight_lock:
            self._inflight.discard(cancelled)
