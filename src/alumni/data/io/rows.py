"""Row parser for the alumni dataset (comma-delimited text, header first).

The dataset is line oriented: a quoted field may contain commas but never
a newline. Each data line is tokenized by a small state machine:

  FIELD_START --'"'--> QUOTED --'"'--> QUOTE_IN_QUOTED --'"'--> QUOTED  (escaped quote)
       |                                      |
       +--other--> UNQUOTED                   +--','--> FIELD_START
       +--','----> FIELD_START (empty field)  +--other--> UNQUOTED (text after closing quote)

An unterminated quoted field runs to the end of the line. A quote inside an
unquoted field is kept literally.
"""

from __future__ import annotations

import logging

from alumni.data.schema.record import DEPARTMENT, NAME, Record

logger = logging.getLogger(__name__)

_FIELD_START = 0
_UNQUOTED = 1
_QUOTED = 2
_QUOTE_IN_QUOTED = 3


def tokenize_line(line: str) -> list[str]:
    """Split one dataset line into trimmed field values.

    Returns [] for a blank line.
    """
    if not line.strip():
        return []

    values: list[str] = []
    buf: list[str] = []
    state = _FIELD_START

    for ch in line:
        if state == _FIELD_START:
            if ch == '"':
                state = _QUOTED
            elif ch == ",":
                values.append("")
            elif ch.isspace():
                # leading blanks before an opening quote are not part of the value
                continue
            else:
                buf.append(ch)
                state = _UNQUOTED
        elif state == _UNQUOTED:
            if ch == ",":
                values.append("".join(buf).strip())
                buf = []
                state = _FIELD_START
            else:
                buf.append(ch)
        elif state == _QUOTED:
            if ch == '"':
                state = _QUOTE_IN_QUOTED
            else:
                buf.append(ch)
        else:  # _QUOTE_IN_QUOTED
            if ch == '"':
                buf.append('"')
                state = _QUOTED
            elif ch == ",":
                values.append("".join(buf).strip())
                buf = []
                state = _FIELD_START
            else:
                buf.append(ch)
                state = _UNQUOTED

    values.append("".join(buf).strip())
    return values


def _has_essential_data(rec: Record) -> bool:
    return bool(rec.name.strip()) or bool(rec.department.strip())


def parse_table(raw_text: str) -> tuple[list[str], list[Record]]:
    """Parse dataset text into (header, records).

    - first line is the header (names trimmed)
    - blank lines are skipped
    - short rows are padded with "", surplus values are ignored
    - rows without both name and department are dropped
    """
    text = (raw_text or "").strip()
    if not text:
        return [], []

    lines = [ln[:-1] if ln.endswith("\r") else ln for ln in text.split("\n")]
    header = [h.strip() for h in tokenize_line(lines[0])]

    records: list[Record] = []
    dropped = 0
    for lineno, line in enumerate(lines[1:], start=2):
        values = tokenize_line(line)
        if not values:
            continue

        entry = {h: (values[j] if j < len(values) else "") for j, h in enumerate(header)}
        rec = Record(entry)
        if not _has_essential_data(rec):
            dropped += 1
            logger.debug("line %d dropped: neither %s nor %s set", lineno, NAME, DEPARTMENT)
            continue
        records.append(rec)

    if dropped:
        logger.info("Parsed %d records (%d rows without name/department dropped)", len(records), dropped)
    else:
        logger.info("Parsed %d records", len(records))
    return header, records


def parse(raw_text: str) -> list[Record]:
    """Parse dataset text into records, in input line order."""
    return parse_table(raw_text)[1]
