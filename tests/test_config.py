from __future__ import annotations

import pytest

from alumni.config import Settings


def test_defaults() -> None:
    s = Settings()
    assert s.page_size == 10
    assert s.scroll_threshold == 300
    assert s.default_photo_url == "assets/images/boy.png"


def test_from_env(monkeypatch) -> None:
    monkeypatch.setenv("ALUMNI_DATASET", "https://example.org/alumni.csv")
    monkeypatch.setenv("ALUMNI_PAGE_SIZE", "6")
    monkeypatch.setenv("ALUMNI_ASSETS_PREFIX", "static/img/")
    monkeypatch.setenv("ALUMNI_FETCH_TIMEOUT", "2.5")
    s = Settings.from_env()
    assert s.dataset == "https://example.org/alumni.csv"
    assert s.page_size == 6
    assert s.assets_prefix == "static/img"
    assert s.fetch_timeout == 2.5


def test_invalid_values_fail_fast(monkeypatch) -> None:
    monkeypatch.setenv("ALUMNI_PAGE_SIZE", "ten")
    with pytest.raises(ValueError):
        Settings.from_env()
    with pytest.raises(ValueError):
        Settings(page_size=0)
    with pytest.raises(ValueError):
        Settings(scroll_threshold=-5)
