"""Static site generator.

Creates two self-contained HTML files:
- index.html: alumni showcase with department filter buttons, paginated
  cards ("Show More") and a "Back to Top" control
- registration.html: registration form (submission is simulated in the
  browser, nothing is sent or stored)

Cards are rendered in Python (escaped) and embedded once in "All" order;
each category view is a list of indices into that list, so the page script
only appends pre-built fragments.

Run
---
  python -m alumni.ui.generator --dataset data/alumni.csv

Output
------
  artifacts/site/index.html
  artifacts/site/registration.html
"""

from __future__ import annotations

import argparse
import html
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Sequence

from alumni._version import __version__, __build__
from alumni.categories.apply import departments_for, filter_records
from alumni.categories.table import ALL, CATEGORY_TABLE, button_label, departments, filter_choices
from alumni.config import Settings
from alumni.data.io.fetch import load_dataset
from alumni.data.io.paths import resolve
from alumni.data.schema.record import Record
from alumni.ui.cards import card_html, project
from alumni.view.controller import NO_RESULTS_MESSAGE, ShowcaseController
from alumni.view.scroll import ScrollObserver

logger = logging.getLogger(__name__)


def _json_for_script(obj: Any) -> str:
    # "</" would end the <script> element early
    return json.dumps(obj, ensure_ascii=False).replace("</", "<\\/")


def build_views(records: Sequence[Record], settings: Settings) -> dict[str, Any]:
    """Card fragments in "All" order plus per-category index lists."""
    ordered = filter_records(records, ALL)
    views: dict[str, list[int]] = {ALL: list(range(len(ordered)))}
    # "ordered" is already year-sorted and the sort is stable, so each
    # category view is the "All" order restricted to its departments
    for cat in CATEGORY_TABLE:
        wanted = departments_for(cat)
        views[cat] = [i for i, r in enumerate(ordered) if r.department in wanted]
    return {
        "cards": [card_html(project(r, settings)) for r in ordered],
        "views": views,
    }


def _render_filter_buttons(active: str = ALL) -> str:
    out = []
    for cat in filter_choices():
        cls = "filter-btn active" if cat == active else "filter-btn"
        out.append(
            f'<button type="button" class="{cls}" data-department="{html.escape(cat)}">'
            f"{html.escape(button_label(cat))}</button>"
        )
    return "\n        ".join(out)


def _render_fallback_grid(controller: ShowcaseController) -> tuple[str, bool]:
    """Server-side first page so the page isn't blank without scripts."""
    update = controller.select(ALL)
    if update.message:
        return f'<p class="no-results-message">{html.escape(update.message)}</p>', False
    return "".join(card_html(c) for c in update.cards), update.show_more


def build_site(
    records: Sequence[Record],
    settings: Settings,
    out_dir: str | Path | None = None,
    *,
    load_error: str | None = None,
) -> Path:
    """Write index.html + registration.html; returns the index path."""
    out = resolve(out_dir) if out_dir is not None else settings.out_path()
    out.mkdir(parents=True, exist_ok=True)

    controller = ShowcaseController(records, settings, load_error=load_error)
    fallback_grid, show_more = _render_fallback_grid(controller)

    payload = build_views([] if load_error else records, settings)
    payload.update(
        {
            "pageSize": settings.page_size,
            "scrollThreshold": ScrollObserver(settings.scroll_threshold).threshold,
            "noResults": NO_RESULTS_MESSAGE,
            "loadError": load_error,
        }
    )

    year = datetime.now().year
    index_path = out / "index.html"
    index_path.write_text(
        _render_index_html(
            payload=payload,
            fallback_grid=fallback_grid,
            show_more=show_more,
            year=year,
        ),
        encoding="utf-8",
    )
    (out / "registration.html").write_text(_render_registration_html(year=year), encoding="utf-8")

    logger.info("Site written to %s (%d cards)", out, len(payload["cards"]))
    return index_path


_STYLE = """
    :root {
      --bg: #f5f7fb;
      --card: #ffffff;
      --text: #1f2937;
      --muted: #6b7280;
      --accent: #1d4ed8;
      --border: #e5e7eb;
      --shadow: 0 6px 18px rgba(15,23,42,.08);
      --sans: ui-sans-serif, system-ui, -apple-system, Segoe UI, Roboto, Helvetica, Arial;
    }
    * { box-sizing: border-box; }
    body { margin: 0; font-family: var(--sans); background: var(--bg); color: var(--text); }
    header { padding: 16px 18px; border-bottom: 1px solid var(--border); background: var(--card); display:flex; align-items: baseline; gap: 14px; flex-wrap: wrap; }
    header h1 { margin: 0; font-size: 20px; }
    header nav a { color: var(--accent); text-decoration: none; margin-right: 12px; }
    .meta { color: var(--muted); font-size: 12px; }
    .wrap { max-width: 1200px; margin: 0 auto; padding: 18px; }

    .filters { display:flex; gap: 8px; flex-wrap: wrap; margin-bottom: 16px; }
    .filter-btn { background: var(--card); border: 1px solid var(--border); color: var(--text); padding: 6px 12px; border-radius: 999px; cursor: pointer; }
    .filter-btn.active { border-color: var(--accent); color: var(--accent); }

    .grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(260px, 1fr)); gap: 16px; }
    .alumni-card { background: var(--card); border: 1px solid var(--border); border-radius: 14px; box-shadow: var(--shadow); padding: 14px; }
    .card-header { display:flex; gap: 12px; align-items: center; }
    .alumni-photo { width: 64px; height: 64px; border-radius: 50%; object-fit: cover; }
    .alumni-info h4 { margin: 0 0 4px 0; }
    .alumni-info p { margin: 0; color: var(--muted); font-size: 13px; }
    .card-body { margin-top: 10px; font-size: 14px; }
    .placement-detail { margin: 4px 0; }
    .package-badge { background: #dcfce7; color: #166534; padding: 1px 8px; border-radius: 999px; font-size: 12px; }
    .alumni-feedback { margin-top: 10px; font-style: italic; color: var(--muted); white-space: pre-wrap; }
    .no-results-message { grid-column: 1 / -1; text-align: center; color: var(--muted); }

    .actions { text-align: center; margin: 20px 0; }
    .show-more-btn, .submit-btn { background: var(--accent); color: #fff; border: 0; padding: 10px 18px; border-radius: 10px; cursor: pointer; }
    .hidden { display: none !important; }
    #back-to-top-btn { position: fixed; right: 20px; bottom: 20px; display: none; background: var(--accent); color: #fff; border: 0; border-radius: 50%; width: 44px; height: 44px; cursor: pointer; }

    form { background: var(--card); border: 1px solid var(--border); border-radius: 14px; padding: 18px; max-width: 720px; }
    .form-group { margin-bottom: 12px; }
    .form-group label { display:block; font-size: 13px; color: var(--muted); margin-bottom: 4px; }
    .form-group input, .form-group select, .form-group textarea { width: 100%; padding: 8px 10px; border: 1px solid var(--border); border-radius: 8px; font: inherit; }
    .notice { margin: 12px 0; padding: 10px 14px; border-radius: 10px; background: #dcfce7; color: #166534; }
    footer { text-align: center; color: var(--muted); font-size: 12px; padding: 20px; }
"""


def _render_index_html(*, payload: dict[str, Any], fallback_grid: str, show_more: bool, year: int) -> str:
    # Plain token replacement: the embedded CSS/JS is full of curly braces.
    template = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8"/>
  <meta name="viewport" content="width=device-width, initial-scale=1"/>
  <title>Alumni Showcase</title>
  <style>__STYLE__</style>
</head>
<body>
  <header>
    <h1>Alumni Showcase</h1>
    <nav><a href="index.html">Showcase</a><a href="registration.html">Register</a></nav>
    <span class="meta">v__VERSION__ (build __BUILD__)</span>
  </header>
  <main class="wrap">
    <div class="filters" id="department-filters">
        __FILTER_BUTTONS__
    </div>
    <div class="grid" id="alumni-cards-grid">__FALLBACK_GRID__</div>
    <div class="actions">
      <button type="button" id="show-more-btn" class="show-more-btn__SHOW_MORE_CLASS__">Show More</button>
    </div>
  </main>
  <button type="button" id="back-to-top-btn" title="Back to top">&uarr;</button>
  <footer>&copy; <span id="current-year">__YEAR__</span> Alumni Association</footer>

  <script id="alumni-data" type="application/json">__DATA__</script>
  <script>
  (function () {
    const DATA = JSON.parse(document.getElementById('alumni-data').textContent);
    const grid = document.getElementById('alumni-cards-grid');
    const filters = document.getElementById('department-filters');
    const showMoreBtn = document.getElementById('show-more-btn');
    const backToTopBtn = document.getElementById('back-to-top-btn');

    let current = [];
    let shown = 0;

    function message(text) {
      const p = document.createElement('p');
      p.className = 'no-results-message';
      p.textContent = text;
      grid.replaceChildren(p);
      showMoreBtn.classList.add('hidden');
    }

    function revealNext() {
      if (shown >= current.length) {
        showMoreBtn.classList.add('hidden');
        return;
      }
      const end = Math.min(shown + DATA.pageSize, current.length);
      const html = current.slice(shown, end).map(i => DATA.cards[i]).join('');
      grid.insertAdjacentHTML('beforeend', html);
      shown = end;
      showMoreBtn.classList.toggle('hidden', shown >= current.length);
    }

    function select(category) {
      if (DATA.loadError) { message(DATA.loadError); return; }
      current = DATA.views[category] || [];
      shown = 0;
      grid.replaceChildren();
      if (current.length === 0) { message(DATA.noResults); return; }
      revealNext();
    }

    filters.addEventListener('click', (event) => {
      const target = event.target;
      if (!target.classList.contains('filter-btn')) return;
      filters.querySelectorAll('.filter-btn').forEach(btn => btn.classList.remove('active'));
      target.classList.add('active');
      select(target.getAttribute('data-department'));
    });

    showMoreBtn.addEventListener('click', revealNext);

    backToTopBtn.addEventListener('click', () => {
      window.scrollTo({ top: 0, behavior: 'smooth' });
    });

    window.addEventListener('scroll', () => {
      const offset = window.scrollY || document.documentElement.scrollTop || document.body.scrollTop;
      backToTopBtn.style.display = offset > DATA.scrollThreshold ? 'block' : 'none';
    });

    document.getElementById('current-year').textContent = new Date().getFullYear();
    select('__ALL__');
  })();
  </script>
</body>
</html>
"""
    return (
        template.replace("__STYLE__", _STYLE)
        .replace("__VERSION__", html.escape(__version__))
        .replace("__BUILD__", html.escape(__build__))
        .replace("__FILTER_BUTTONS__", _render_filter_buttons())
        .replace("__SHOW_MORE_CLASS__", "" if show_more else " hidden")
        .replace("__YEAR__", str(year))
        .replace("__ALL__", ALL)
        .replace("__FALLBACK_GRID__", fallback_grid)
        .replace("__DATA__", _json_for_script(payload))
    )


def _render_registration_html(*, year: int) -> str:
    options = "\n".join(
        f'          <option value="{html.escape(d)}">{html.escape(d)}</option>' for d in departments()
    )
    template = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8"/>
  <meta name="viewport" content="width=device-width, initial-scale=1"/>
  <title>Alumni Registration</title>
  <style>__STYLE__</style>
</head>
<body>
  <header>
    <h1>Alumni Registration</h1>
    <nav><a href="index.html">Showcase</a><a href="registration.html">Register</a></nav>
  </header>
  <main class="wrap">
    <div id="submit-notice" class="notice hidden">Thank you! Your registration has been submitted successfully.</div>
    <form id="alumniRegistrationForm">
      <div class="form-group"><label for="name">Full Name</label><input id="name" name="Student_Name" type="text"></div>
      <div class="form-group"><label for="email">Email</label><input id="email" name="Email" type="email"></div>
      <div class="form-group">
        <label for="department">Department</label>
        <select id="department" name="Department">
          <option value="">Select department</option>
__OPTIONS__
          <option value="Other">Other</option>
        </select>
      </div>
      <div class="form-group hidden" id="customDepartmentField">
        <label for="customDepartment">Your Department</label><input id="customDepartment" name="Custom_Department" type="text">
      </div>
      <div class="form-group"><label for="passingYear">Passing Year</label><input id="passingYear" name="Passing_Year" type="number"></div>
      <div class="form-group"><label for="address">Current Address</label><input id="address" name="Current_Address" type="text"></div>
      <div class="form-group"><label for="designation">Designation</label><input id="designation" name="Designation" type="text"></div>
      <div class="form-group"><label for="company">Company / Business</label><input id="company" name="Company_or_Business" type="text"></div>
      <div class="form-group"><label for="package">Current Package</label><input id="package" name="Current_Package" type="text"></div>
      <div class="form-group"><label for="feedback">Feedback</label><textarea id="feedback" name="Feedback" rows="4"></textarea></div>
      <div class="form-group"><label for="photo">Profile Photo</label><input id="photo" name="photo" type="file" accept="image/*"></div>
      <button type="submit" class="submit-btn">Submit Registration</button>
    </form>
  </main>
  <footer>&copy; <span id="current-year">__YEAR__</span> Alumni Association</footer>
  <script>
  (function () {
    const form = document.getElementById('alumniRegistrationForm');
    const notice = document.getElementById('submit-notice');
    const customField = document.getElementById('customDepartmentField');

    document.getElementById('department').addEventListener('change', (e) => {
      customField.classList.toggle('hidden', e.target.value !== 'Other');
    });

    // Simulated submission: nothing leaves the browser.
    form.addEventListener('submit', (e) => {
      e.preventDefault();
      notice.classList.remove('hidden');
      form.reset();
      customField.classList.add('hidden');
    });

    document.getElementById('current-year').textContent = new Date().getFullYear();
  })();
  </script>
</body>
</html>
"""
    return (
        template.replace("__STYLE__", _STYLE)
        .replace("__OPTIONS__", options)
        .replace("__YEAR__", str(year))
    )


def main() -> int:
    settings = Settings.from_env()
    ap = argparse.ArgumentParser()
    ap.add_argument("--dataset", default=settings.dataset)
    ap.add_argument("--out", default=settings.out_dir)
    args = ap.parse_args()

    result = load_dataset(args.dataset, timeout=settings.fetch_timeout)
    out = build_site(result.records, settings, args.out, load_error=result.error)
    print(f"✅ Site wrote: {out.as_posix()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
