# Fichier: lexdrill/core/config.py
from pydantic_settings import BaseSettings
from typing import List
from pydantic import ValidationError, field_validator
import sys

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./lexdrill.db"
    ENVIRONMENT: str = "development"

    BACKEND_CORS_ORIGINS: List[str] = [
        "http://localhost:8081",
        "http://localhost:19006",
        "http://127.0.0.1:8081",
    ]

    # --- Drill queue ---
    DRILL_DEFAULT_LIMIT: int = 20
    DRILL_UPCOMING_WINDOW_HOURS: float = 12

    # --- SM-2 scheduling ---
    SRS_MIN_INTERVAL_HOURS: int = 24
    LEARNED_STREAK_THRESHOLD: int = 3

    # Single local learner owning the vocabulary bank
    LEARNER_ID: str = "local-learner"

    # Performance instrumentation
    SQLALCHEMY_SLOW_QUERY_THRESHOLD_MS: int = 300

    class Config:
        env_file = ".env"

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def _normalize_database_url(cls, value: str) -> str:
        """Upgrade the legacy ``postgres://`` scheme.

        Managed Postgres providers still hand out ``postgres://`` URLs, an
        alias SQLAlchemy no longer ships. SQLite and explicit driver URLs are
        left untouched.
        """

        if not isinstance(value, str):
            return value

        if value.startswith("postgres://"):
            return "postgresql://" + value[len("postgres://") :]

        return value

    @field_validator("DRILL_UPCOMING_WINDOW_HOURS")
    @classmethod
    def _check_upcoming_window(cls, value: float) -> float:
        if value < 0:
            raise ValueError("DRILL_UPCOMING_WINDOW_HOURS must be >= 0")
        return value

    @field_validator("DRILL_DEFAULT_LIMIT", "SRS_MIN_INTERVAL_HOURS", "LEARNED_STREAK_THRESHOLD")
    @classmethod
    def _check_positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("value must be a positive integer")
        return value

def _log_settings_validation_error(exc: ValidationError) -> None:
    """Pretty-print missing or invalid environment variables.

    The exception bubbles up during module import, which makes it hard to
    spot which variable is responsible. The structured error payload is
    written to stderr before the exception is re-raised.
    """

    header = "Configuration error while loading environment variables:"
    print(header, file=sys.stderr)

    details = exc.errors()
    if details:
        for error in details:
            location = ".".join(str(part) for part in error.get("loc", ()))
            message = error.get("msg", "Unknown validation error")
            type_name = error.get("type")
            hint_parts = [message]
            if type_name:
                hint_parts.append(f"(type={type_name})")
            hint = " ".join(hint_parts)
            print(f"  - {location}: {hint}", file=sys.stderr)
    else:
        print(exc, file=sys.stderr)


try:
    settings = Settings()
except ValidationError as exc:  # pragma: no cover - exercised at runtime
    _log_settings_validation_error(exc)
    raise
