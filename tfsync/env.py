import math
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_ADDRESS = "https://app.terraform.io"
DEFAULT_HTTP_TIMEOUT = 15.0
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_env() -> None:
    """Load .env from the working directory if present.
    Variables already set in the environment take precedence.
    """
    env_path = Path.cwd() / ".env"
    if not env_path.exists():
        return
    load_dotenv(dotenv_path=env_path, override=False)


@dataclass(frozen=True)
class Settings:
    address: str = DEFAULT_ADDRESS
    log_level: str = "INFO"
    log_dir: Path = Path("logs")
    http_timeout: float = DEFAULT_HTTP_TIMEOUT


def get_settings() -> Settings:
    """Build settings from environment variables, falling back to defaults.

    Raises:
        ValueError: If TFSYNC_LOG_LEVEL or TFSYNC_HTTP_TIMEOUT is invalid
    """
    raw_timeout = os.getenv("TFSYNC_HTTP_TIMEOUT", str(DEFAULT_HTTP_TIMEOUT))
    try:
        http_timeout = float(raw_timeout)
    except ValueError:
        raise ValueError(f"TFSYNC_HTTP_TIMEOUT must be a number of seconds, got {raw_timeout!r}")
    if not (math.isfinite(http_timeout) and http_timeout > 0):
        raise ValueError(f"TFSYNC_HTTP_TIMEOUT must be a positive finite number, got {raw_timeout!r}")

    log_level = os.getenv("TFSYNC_LOG_LEVEL", "INFO").strip().upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(
            f"TFSYNC_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}"
        )

    return Settings(
        address=os.getenv("TFE_ADDRESS", DEFAULT_ADDRESS).rstrip("/"),
        log_level=log_level,
        log_dir=Path(os.getenv("TFSYNC_LOG_DIR", "logs")),
        http_timeout=http_timeout,
    )
