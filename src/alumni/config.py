from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from alumni.data.io.paths import resolve

# Loads a local .env file (if present); real environment variables win.
load_dotenv()


def get_secret(key, default=None):
    """Read a setting from the environment (.env or real env vars)."""
    return os.getenv(key, default)


def _int(key: str, default: int) -> int:
    raw = get_secret(key)
    if raw is None or not str(raw).strip():
        return default
    try:
        return int(str(raw).strip())
    except ValueError as e:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from e


def _float(key: str, default: float) -> float:
    raw = get_secret(key)
    if raw is None or not str(raw).strip():
        return default
    try:
        return float(str(raw).strip())
    except ValueError as e:
        raise ValueError(f"{key} must be a number, got {raw!r}") from e


@dataclass(frozen=True)
class Settings:
    dataset: str = "data/alumni.csv"
    page_size: int = 10
    assets_prefix: str = "assets/images"
    default_image: str = "boy"
    image_ext: str = ".png"
    scroll_threshold: int = 300
    fetch_timeout: float = 10.0
    out_dir: str = "artifacts/site"
    log_path: str = "logs/alumni.log"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.page_size <= 0:
            raise ValueError(f"page_size must be > 0, got {self.page_size}")
        if self.scroll_threshold < 0:
            raise ValueError(f"scroll_threshold must be >= 0, got {self.scroll_threshold}")
        if self.fetch_timeout <= 0:
            raise ValueError(f"fetch_timeout must be > 0, got {self.fetch_timeout}")

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            dataset=get_secret("ALUMNI_DATASET", cls.dataset),
            page_size=_int("ALUMNI_PAGE_SIZE", cls.page_size),
            assets_prefix=get_secret("ALUMNI_ASSETS_PREFIX", cls.assets_prefix).rstrip("/"),
            default_image=get_secret("ALUMNI_DEFAULT_IMAGE", cls.default_image),
            scroll_threshold=_int("ALUMNI_SCROLL_THRESHOLD", cls.scroll_threshold),
            fetch_timeout=_float("ALUMNI_FETCH_TIMEOUT", cls.fetch_timeout),
            out_dir=get_secret("ALUMNI_OUT_DIR", cls.out_dir),
            log_path=get_secret("ALUMNI_LOG_PATH", cls.log_path),
            log_level=get_secret("ALUMNI_LOG_LEVEL", cls.log_level),
        )

    @property
    def default_photo_url(self) -> str:
        return f"{self.assets_prefix}/{self.default_image}{self.image_ext}"

    def out_path(self) -> Path:
        return resolve(self.out_dir)

    def log_file(self) -> Path:
        return resolve(self.log_path)
