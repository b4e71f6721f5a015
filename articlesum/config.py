"""
Configuration for the articlesum worker and admin API.

Provides environment-based configuration with Pydantic settings. Nested groups are
read from ``GROUP__FIELD`` variables (e.g. ``DATABASE__URL``,
``SUMMARIZATION__API_KEY``, ``QUEUE__MAX_ATTEMPTS``).
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional
from urllib.parse import quote_plus

from pydantic import AliasChoices, BaseModel, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseModel):
    """Database connection settings."""

    url: Optional[str] = Field(
        default=None,
        description="Full SQLAlchemy URL; overrides the individual fields",
    )
    host: str = "localhost"
    port: int = 5432
    name: str = "articlesum"
    user: str = "postgres"
    password: SecretStr = SecretStr("")
    pool_size: int = 5
    max_overflow: int = 10

    def sqlalchemy_url(self) -> str:
        """Build SQLAlchemy database URL."""
        if self.url:
            return self.url

        user = quote_plus(self.user)
        pwd = quote_plus(self.password.get_secret_value())
        return f"postgresql+psycopg://{user}:{pwd}@{self.host}:{self.port}/{self.name}"


class RedisSettings(BaseModel):
    """Redis connection settings."""

    host: str = "localhost"
    port: int = 6379
    db: int = 0
    password: Optional[str] = None

    def url(self) -> str:
        """Build Redis URL."""
        if self.password:
            return f"redis://:{self.password}@{self.host}:{self.port}/{self.db}"
        return f"redis://{self.host}:{self.port}/{self.db}"


class SummarizationSettings(BaseModel):
    """Generative provider settings."""

    provider: str = Field(
        default="openai",
        description="Provider name: 'openai' or 'huggingface'",
    )
    api_base: Optional[str] = None
    api_key: Optional[SecretStr] = None
    model: str = "gpt-4o-mini"
    temperature: float = 0.3
    max_tokens: int = 400
    timeout: float = 60.0

    @field_validator("provider", mode="before")
    @classmethod
    def normalize_provider(cls, v):
        if isinstance(v, str):
            return v.strip().lower() or "openai"
        return v or "openai"

    def api_key_value(self) -> Optional[str]:
        return self.api_key.get_secret_value() if self.api_key else None


class QueueSettings(BaseModel):
    """Job transport settings: attempts, delay, pool size and start rate."""

    name: str = "summarization"
    max_attempts: int = Field(
        default=3,
        ge=1,
    )
    retry_delay: float = Field(
        default=10.0,
        ge=0,
        description="Fixed delay in seconds between attempts",
    )
    concurrency: int = Field(
        default=5,
        ge=1,
    )
    rate_limit: str = Field(
        default="10/s",
        description="Celery rate limit string for job starts, e.g. '10/s'",
    )


class Settings(BaseSettings):
    """Root configuration for all articlesum processes."""

    service_name: str = Field(
        default="articlesum",
        validation_alias=AliasChoices("SERVICE_NAME"),
    )
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("ENVIRONMENT", "ENV"),
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        validation_alias=AliasChoices("LOG_LEVEL"),
    )
    log_format: str = Field(
        default="json",
        validation_alias=AliasChoices("LOG_FORMAT"),
        description="Log format: 'json' or 'text'",
    )

    api_port: int = Field(
        default=3000,
        validation_alias=AliasChoices("PORT", "API_PORT"),
    )

    # Nested settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    redis: RedisSettings = Field(default_factory=RedisSettings)
    summarization: SummarizationSettings = Field(default_factory=SummarizationSettings)
    queue: QueueSettings = Field(default_factory=QueueSettings)

    # Celery configuration
    celery_broker_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("CELERY_BROKER_URL"),
    )
    celery_result_backend: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("CELERY_RESULT_BACKEND"),
    )

    @property
    def effective_celery_broker_url(self) -> str:
        """Get Celery broker URL, defaulting to Redis."""
        return self.celery_broker_url or self.redis.url()

    @property
    def effective_celery_result_backend(self) -> str:
        """Get Celery result backend URL, defaulting to Redis."""
        return self.celery_result_backend or self.redis.url()

    @property
    def database_url(self) -> str:
        """Get database connection string."""
        return self.database.sqlalchemy_url()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
        populate_by_name=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# LogRecord attributes that are not user-supplied ``extra`` context
_RESERVED_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None)).keys()
) | {"message", "asctime"}


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure logging based on settings.

    Args:
        settings: Optional settings instance, uses cached settings if not provided
    """
    import sys

    if settings is None:
        settings = get_settings()

    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)

    if settings.log_format == "json":
        import json

        class JSONFormatter(logging.Formatter):
            def format(self, record):
                log_record = {
                    "timestamp": self.formatTime(record),
                    "level": record.levelname,
                    "logger": record.name,
                    "message": record.getMessage(),
                    "service": settings.service_name,
                }
                if record.exc_info:
                    log_record["exception"] = self.formatException(record.exc_info)
                for key, value in record.__dict__.items():
                    if key not in _RESERVED_RECORD_ATTRS and key not in log_record:
                        log_record[key] = value
                return json.dumps(log_record, default=str)

        handler.setFormatter(JSONFormatter())
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)

    root_logger.addHandler(handler)

    # Set third-party loggers to WARNING to reduce noise
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
