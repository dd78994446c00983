from __future__ import annotations

from pathlib import Path

from streamlit.testing.v1 import AppTest

from conftest import make_csv

APP = str(Path(__file__).resolve().parents[1] / "src" / "alumni" / "ui" / "app.py")


def _markdown(at: AppTest) -> str:
    return "\n".join(m.value for m in at.markdown)


def test_app_paginates_and_filters(tmp_path, monkeypatch) -> None:
    csv = tmp_path / "alumni.csv"
    csv.write_text(make_csv(12) + "Lawyer,Law,1999\n", encoding="utf-8")
    monkeypatch.setenv("ALUMNI_DATASET", str(csv))
    monkeypatch.setenv("ALUMNI_LOG_PATH", str(tmp_path / "alumni.log"))

    at = AppTest.from_file(APP, default_timeout=30).run()
    assert not at.exception
    assert _markdown(at).count('class="alumni-card"') == 10

    at.button(key="show_more").click().run()
    assert _markdown(at).count('class="alumni-card"') == 13
    assert not any(b.key == "show_more" for b in at.button)

    at.button(key="cat_LAW").click().run()
    text = _markdown(at)
    assert text.count('class="alumni-card"') == 1
    assert "<h4>Lawyer</h4>" in text


def test_app_shows_load_error(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("ALUMNI_DATASET", str(tmp_path / "missing.csv"))
    monkeypatch.setenv("ALUMNI_LOG_PATH", str(tmp_path / "alumni.log"))
    at = AppTest.from_file(APP, default_timeout=30).run()
    assert not at.exception
    assert "Error loading alumni data" in at.error[0].value
