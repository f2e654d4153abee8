"""Shared fixtures for notification_dispatch tests."""

from collections.abc import Generator
from unittest.mock import MagicMock

import pytest

from notification_dispatch.config import RetryConfig
from notification_dispatch.dispatcher import DispatchEngine
from notification_dispatch.enums import Priority
from notification_dispatch.models import EmailData, SmsData
from notification_dispatch.providers import DeliveryProvider, DeliveryResult


@pytest.fixture()
def retry_config() -> RetryConfig:
    """Fast policy: 3 attempts, 10 ms base delay."""
    return RetryConfig(max_attempts=3, base_delay_ms=10)


@pytest.fixture()
def engine(retry_config: RetryConfig) -> Generator[DispatchEngine, None, None]:
    engine = DispatchEngine(retry_config)
    yield engine
    engine.shutdown(wait=True, cancel_inflight=True)


@pytest.fixture()
def mock_provider() -> MagicMock:
    """Provider supporting every channel and always succeeding."""
    provider = MagicMock(spec=DeliveryProvider)
    provider.name = "MockProvider"
    provider.supports.return_value = True
    provider.send.return_value = DeliveryResult.ok("ok")
    return provider


@pytest.fixture()
def sample_email() -> EmailData:
    return EmailData(
        sender="test@pinapp.com",
        recipient="dest@pinapp.com",
        subject="Hello",
        body="Test content",
        priority=Priority.HIGH,
    )


@pytest.fixture()
def sample_sms() -> SmsData:
    return SmsData(
        sender="22113",
        recipient="221331",
        body="Hello",
        priority=Priority.MEDIUM,
    )
