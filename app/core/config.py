import os
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):
    """Application settings loaded from environment: template version, transcript minimum length, and the simulated latency / timeout windows for generate, regenerate and email send.
    Why available: Single source of configuration so the API, the UI limits endpoint and scripts agree on the same numbers."""

    # env-derived defaults must pass the validators as well
    model_config = ConfigDict(validate_default=True)

    template_version: str = os.getenv("TEMPLATE_VERSION", "v1")
    min_transcript_chars: int = int(os.getenv("MIN_TRANSCRIPT_CHARS", "50"))
    simulate_latency: bool = _env_bool("SIMULATE_LATENCY", "true")
    processing_delay_min_seconds: float = float(os.getenv("PROCESSING_DELAY_MIN_SECONDS", "2.0"))
    processing_delay_max_seconds: float = float(os.getenv("PROCESSING_DELAY_MAX_SECONDS", "4.0"))
    processing_timeout_seconds: float = float(os.getenv("PROCESSING_TIMEOUT_SECONDS", "8"))
    regenerate_delay_min_seconds: float = float(os.getenv("REGENERATE_DELAY_MIN_SECONDS", "1.0"))
    regenerate_delay_max_seconds: float = float(os.getenv("REGENERATE_DELAY_MAX_SECONDS", "2.0"))
    regenerate_timeout_seconds: float = float(os.getenv("REGENERATE_TIMEOUT_SECONDS", "5"))
    email_delay_min_seconds: float = float(os.getenv("EMAIL_DELAY_MIN_SECONDS", "1.0"))
    email_delay_max_seconds: float = float(os.getenv("EMAIL_DELAY_MAX_SECONDS", "1.5"))

    @field_validator("min_transcript_chars", "processing_timeout_seconds", "regenerate_timeout_seconds")
    @classmethod
    def must_be_positive(cls, v):
        """Ensure the transcript minimum and both timeouts are positive. Prevents invalid config from env."""
        if v <= 0:
            raise ValueError("must be > 0")
        return v

    @field_validator(
        "processing_delay_min_seconds",
        "processing_delay_max_seconds",
        "regenerate_delay_min_seconds",
        "regenerate_delay_max_seconds",
        "email_delay_min_seconds",
        "email_delay_max_seconds",
    )
    @classmethod
    def must_not_be_negative(cls, v):
        if v < 0:
            raise ValueError("must be >= 0")
        return v


settings = Settings()
