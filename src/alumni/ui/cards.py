"""Alumni card projection.

project() turns one Record into a CardModel (pure, no markup); card_html()
writes the CardModel as an HTML fragment. Every value is HTML-escaped,
feedback included.
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass

from alumni.config import Settings
from alumni.data.schema.record import Record

_WS_RE = re.compile(r"\s+")
_STEM_RE = re.compile(r"[^a-z0-9_]")


def photo_stem(name: str) -> str:
    """'John O'Neil' -> 'john_oneil' (may return '')."""
    s = _WS_RE.sub("_", (name or "").lower())
    return _STEM_RE.sub("", s)


def photo_url(name: str, settings: Settings) -> str:
    if not (name or "").strip():
        return settings.default_photo_url
    stem = photo_stem(name)
    if not stem:
        return settings.default_photo_url
    return f"{settings.assets_prefix}/{stem}{settings.image_ext}"


def department_year(department: str, year: str) -> str:
    """Card sub-header; '' when both parts are missing."""
    if department and year:
        return f"{department} ({year})"
    if department:
        return department
    if year:
        return f"({year})"
    return ""


@dataclass(frozen=True)
class Detail:
    label: str
    value: str
    badge: bool = False


@dataclass(frozen=True)
class CardModel:
    name: str
    department: str
    department_year: str
    photo_url: str
    fallback_photo_url: str
    details: tuple[Detail, ...]
    feedback: str

    @property
    def photo_alt(self) -> str:
        return f"Photo of {self.name}"


def project(record: Record, settings: Settings) -> CardModel:
    details = []
    if record.designation:
        details.append(Detail("Designation", record.designation))
    if record.company:
        details.append(Detail("Company/Business", record.company))
    if record.package:
        details.append(Detail("Current Package", record.package, badge=True))

    return CardModel(
        name=record.name,
        department=record.department,
        department_year=department_year(record.department, record.passing_year),
        photo_url=photo_url(record.name, settings),
        fallback_photo_url=settings.default_photo_url,
        details=tuple(details),
        feedback=record.feedback,
    )


def card_html(card: CardModel) -> str:
    esc = html.escape
    fallback = esc(card.fallback_photo_url)

    info: list[str] = []
    if card.name:
        info.append(f"<h4>{esc(card.name)}</h4>")
    if card.department_year:
        info.append(f"<p>{esc(card.department_year)}</p>")

    body: list[str] = []
    for d in card.details:
        value = f'<span class="package-badge">{esc(d.value)}</span>' if d.badge else esc(d.value)
        body.append(f'<div class="placement-detail"><strong>{esc(d.label)}:</strong> {value}</div>')

    feedback = f'<div class="alumni-feedback">{esc(card.feedback)}</div>' if card.feedback else ""

    return (
        f'<div class="alumni-card" data-department="{esc(card.department)}">'
        '<div class="card-header">'
        f'<img src="{esc(card.photo_url)}" alt="{esc(card.photo_alt)}" class="alumni-photo" '
        f"onerror=\"this.onerror=null;this.src='{fallback}';\">"
        f'<div class="alumni-info">{"".join(info)}</div>'
        "</div>"
        f'<div class="card-body">{"".join(body)}</div>'
        f"{feedback}"
        "</div>"
    )


def render(record: Record, settings: Settings) -> str:
    """Record -> card HTML in one step."""
    return card_html(project(record, settings))
