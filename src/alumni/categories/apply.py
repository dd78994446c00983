from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

import pandas as pd

from alumni.categories.table import ALL, CATEGORY_TABLE
from alumni.data.schema.record import DEPARTMENT, PASSING_YEAR, Record, records_frame

logger = logging.getLogger(__name__)


def departments_for(category: str, table: Mapping[str, Sequence[str]] = CATEGORY_TABLE) -> tuple[str, ...] | None:
    """Departments selected by a category; None means "no restriction" (All).

    A category that is not a table key is taken as a literal department.
    """
    if category == ALL:
        return None
    subs = table.get(category)
    if subs is not None:
        return tuple(subs)
    return (category,)


def year_sort_key(years: pd.Series) -> pd.Series:
    """Sort key for descending passing year.

    Negated numeric year, so an ascending stable sort gives latest first;
    missing or non-numeric years become NaN and go last.
    """
    n = pd.to_numeric(years.astype(str).str.strip(), errors="coerce").astype(float)
    return -n


def filter_records(
    records: Sequence[Record],
    category: str,
    table: Mapping[str, Sequence[str]] = CATEGORY_TABLE,
) -> list[Record]:
    """Records for a category, ordered by passing year (latest first).

    Ties keep their input order. The input sequence is never modified.
    """
    if not records:
        return []

    df = records_frame(records, columns=[DEPARTMENT, PASSING_YEAR])
    mask = pd.Series(True, index=df.index)

    wanted = departments_for(category, table)
    if wanted is not None:
        mask &= df[DEPARTMENT].isin(wanted)

    out = df.loc[mask].copy()
    out["_year_key"] = year_sort_key(out[PASSING_YEAR])
    out = out.sort_values("_year_key", ascending=True, na_position="last", kind="mergesort")

    result = [records[i] for i in out.index]
    logger.debug("filter %r -> %d of %d records", category, len(result), len(records))
    return result
