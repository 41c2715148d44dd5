"""
Name: Feedback API Settings

Responsibilities:
  - One typed object for every environment variable the service reads
  - Fail at startup on missing or inconsistent values
  - Provide defaults for pool, events, limits and logging

Collaborators:
  - api/main.py: reads settings for CORS, pool init and startup logs
  - container.py: chooses adapters (in-memory vs Postgres/Redis)
  - interfaces/api/http/schemas: reads request validation limits

Constraints:
  - Imported by api, container and infrastructure only; domain stays unaware
  - No business logic, pure configuration

Notes:
  - Singleton via lru_cache
  - Validation limits mirror the database column sizes
"""

from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Environment-driven settings (case-insensitive names, optional .env file).

    Attributes:
        database_url: PostgreSQL connection string
        app_env: Application environment (development/test/production)
        allowed_origins: Comma-separated CORS origins ("*" for any)
        cors_allow_credentials: Allow cookies cross-origin (default: True)
        db_pool_min_size / db_pool_max_size: Connection pool bounds
        db_statement_timeout_ms: statement_timeout applied per connection
        redis_url: Redis connection string for the event stream
        events_backend: redis|memory (default: redis)
        events_stream_prefix: Prefix for per-topic Redis streams
        events_stream_maxlen: Approximate cap per stream (0 = unbounded)
        max_body_bytes: Max request body size (default: 1MB)
        log_level: Root log level (default: INFO)
        log_json: Emit JSON logs (default: True)
        max_name_chars / max_email_chars / max_comment_chars: field limits
    """

    # Required (no defaults)
    database_url: str

    # Environment
    app_env: str = "development"

    # CORS configuration
    allowed_origins: str = "*"
    cors_allow_credentials: bool = True

    # Database - Connection Pool
    db_pool_min_size: int = 1
    db_pool_max_size: int = 10
    db_statement_timeout_ms: int = 30000  # 30 seconds

    # Events (Redis Streams)
    redis_url: str = "redis://localhost:6379/0"
    events_backend: str = "redis"
    events_stream_prefix: str = "feedback:"
    events_stream_maxlen: int = 10_000

    # Security - Hardening
    max_body_bytes: int = 1024 * 1024  # 1MB

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # API limits
    max_name_chars: int = 255
    max_email_chars: int = 255
    max_comment_chars: int = 1000

    @field_validator("events_backend")
    @classmethod
    def events_backend_valid(cls, v: str) -> str:
        backend = (v or "redis").strip().lower()
        if backend not in {"redis", "memory"}:
            raise ValueError("events_backend must be redis or memory")
        return backend

    @field_validator("db_pool_min_size", "db_pool_max_size")
    @classmethod
    def pool_size_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("pool sizes must be greater than 0")
        return v

    @field_validator("events_stream_maxlen", "db_statement_timeout_ms")
    @classmethod
    def must_be_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("value must be >= 0")
        return v

    @field_validator("max_name_chars", "max_email_chars", "max_comment_chars")
    @classmethod
    def limits_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("field limits must be greater than 0")
        return v

    @model_validator(mode="after")
    def validate_pool_bounds(self):
        if self.db_pool_min_size > self.db_pool_max_size:
            raise ValueError(
                f"db_pool_min_size ({self.db_pool_min_size}) must be <= "
                f"db_pool_max_size ({self.db_pool_max_size})"
            )
        return self

    @model_validator(mode="after")
    def validate_events_requirements(self):
        if self.events_backend == "redis" and not self.redis_url.strip():
            raise ValueError("REDIS_URL is required when EVENTS_BACKEND=redis")
        return self

    def get_allowed_origins_list(self) -> list[str]:
        """ALLOWED_ORIGINS split on commas, blanks dropped."""
        return [
            origin.strip()
            for origin in self.allowed_origins.split(",")
            if origin.strip()
        ]

    def is_production(self) -> bool:
        return self.app_env.strip().lower() == "production"

    def is_test(self) -> bool:
        return self.app_env.strip().lower() in {"test", "testing", "ci"}

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Process-wide Settings; raises ValidationError when DATABASE_URL is missing."""
    return Settings()
