from typing import Self

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RetryConfig(BaseModel):
    """Immutable retry policy: attempt budget and base backoff delay."""

    model_config = ConfigDict(frozen=True)

    max_attempts: int = Field(default=3, ge=1)
    base_delay_ms: float = Field(default=1000, ge=0)

    @classmethod
    def default_policy(cls) -> Self:
        """3 attempts, 1000 ms base delay."""
        return cls(max_attempts=3, base_delay_ms=1000)

    @property
    def base_delay_seconds(self) -> float:
        return self.base_delay_ms / 1000


class DispatchConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="DISPATCH_")

    log_level: str = "INFO"
    json_logs: bool = False
    max_attempts: int = 3
    base_delay_ms: float = 1000
    max_workers: int | None = None

    def retry_config(self) -> RetryConfig:
        return RetryConfig(
            max_attempts=self.max_attempts,
            base_delay_ms=self.base_delay_ms,
        )


class ProviderConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PROVIDER_")

    email_api_key: str = ""
    sms_api_key: str = ""
    push_api_key: str = ""
