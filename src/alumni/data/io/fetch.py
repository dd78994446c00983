from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import requests

from alumni.data.io.paths import resolve
from alumni.data.io.rows import parse_table
from alumni.data.schema.record import Record

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Error loading alumni data. Please check the logs for details."


class DatasetFetchError(RuntimeError):
    """The dataset resource could not be read (missing file, HTTP error, network)."""


@dataclass(frozen=True)
class LoadResult:
    header: list[str] = field(default_factory=list)
    records: list[Record] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def fetch_text(source: str | Path, *, timeout: float = 10.0) -> str:
    """Fetch the raw dataset text from a local path or an http(s) URL."""
    src = str(source)
    if _is_url(src):
        try:
            r = requests.get(src, timeout=timeout)
        except requests.RequestException as e:
            raise DatasetFetchError(f"request failed: {src}: {e}") from e
        if not r.ok:
            raise DatasetFetchError(f"HTTP error! status: {r.status_code} ({src})")
        # requests guesses ISO-8859-1 for text/* without a charset; the dataset is UTF-8
        try:
            return r.content.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise DatasetFetchError(f"dataset is not valid UTF-8: {src}: {e}") from e

    p = resolve(src)
    try:
        return p.read_text(encoding="utf-8-sig")  # BOM-safe
    except (OSError, UnicodeDecodeError) as e:
        raise DatasetFetchError(f"cannot read dataset {p}: {e}") from e


def load_dataset(source: str | Path, *, timeout: float = 10.0) -> LoadResult:
    """Fetch and parse the dataset once.

    A fetch failure is recovered locally: the result is empty and carries
    the placeholder message for the page.
    """
    try:
        text = fetch_text(source, timeout=timeout)
    except DatasetFetchError as e:
        logger.error("Error fetching alumni dataset: %s", e)
        return LoadResult(error=LOAD_ERROR_MESSAGE)

    header, records = parse_table(text)
    return LoadResult(header=header, records=records)
