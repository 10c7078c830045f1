from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import os


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str) -> Optional[Path]:
    raw = os.getenv(name)
    if not raw:
        return None
    return Path(raw).resolve()


@dataclass
class Settings:
    """Application settings with simple env overrides.

    Values are read when the instance is created, so tests can tweak the
    environment and call :func:`get_settings` again.
    """

    repositories_url: str = field(
        default_factory=lambda: os.getenv(
            "SHOWCASE_REPOSITORIES_URL",
            "https://portfolio-repositories-backend.onrender.com/repositories",
        )
    )
    # 该仓库永远不会出现在列表、语言目录与计数中。
    excluded_repository: str = field(
        default_factory=lambda: os.getenv("SHOWCASE_EXCLUDED_REPOSITORY", "SoaresCRF")
    )
    fetch_timeout: float = field(default_factory=lambda: _env_float("SHOWCASE_FETCH_TIMEOUT", 10.0))
    date_format: str = field(default_factory=lambda: os.getenv("SHOWCASE_DATE_FORMAT", "%d/%m/%Y"))
    max_sessions: int = field(default_factory=lambda: max(1, _env_int("SHOWCASE_MAX_SESSIONS", 256)))
    secret_key: str = field(
        default_factory=lambda: os.getenv("SHOWCASE_SECRET_KEY", "showcase-dev-secret")
    )
    languages_file: Optional[Path] = field(default_factory=lambda: _env_path("SHOWCASE_LANGUAGES_FILE"))
    use_sample_data: bool = field(
        default_factory=lambda: os.getenv("SHOWCASE_SAMPLE_DATA", "").strip().lower() in ("1", "true", "yes")
    )
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))


def get_settings() -> Settings:
    """Return a Settings instance.

    Separated into a function so it can be wired into dependency
    injection frameworks if needed.
    """

    return Settings()
