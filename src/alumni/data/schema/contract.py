from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

import pandas as pd

from alumni.data.schema.record import NAME, Record, records_frame


@dataclass
class ContractResult:
    ok: bool
    errors: list[str]
    warnings: list[str]

    def summary(self) -> str:
        if self.ok:
            w = f" (warnings={len(self.warnings)})" if self.warnings else ""
            return f"OK{w}"
        return f"FAIL (errors={len(self.errors)}, warnings={len(self.warnings)})"


def load_contract(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(str(p))
    return json.loads(p.read_text(encoding="utf-8"))


def _sample_ids(df: pd.DataFrame, mask: pd.Series, limit: int = 5) -> list[str]:
    if mask is None or not mask.any():
        return []
    if NAME not in df.columns:
        # 1-based data line numbers are easier to find in the file than row positions
        return [str(i + 2) for i in df.index[mask].tolist()[:limit]]
    return df.loc[mask, NAME].astype(str).head(limit).tolist()


def _validate_string(df: pd.DataFrame, col: str, spec: dict[str, Any], *, required: bool) -> tuple[list[str], list[str]]:
    errors: list[str] = []
    warnings: list[str] = []

    allow_null = bool(spec.get("allow_null", False))
    min_len = int(spec.get("min_len", 0) or 0)
    allowed = spec.get("allowed")

    s = df[col].astype("string")
    if not allow_null:
        is_bad = s.isna() | s.str.strip().eq("")
        if is_bad.any():
            msg = f"{col}: {is_bad.sum()} empty values (sample: {_sample_ids(df, is_bad)})"
            (errors if required else warnings).append(msg)

    if min_len > 0:
        lens = s.fillna("").str.strip().str.len()
        # empties are reported above
        is_bad = (lens < min_len) & lens.gt(0)
        if is_bad.any():
            msg = f"{col}: {is_bad.sum()} values shorter than {min_len} (sample: {_sample_ids(df, is_bad)})"
            (errors if required else warnings).append(msg)

    if allowed is not None:
        allowed_set = set(map(str, allowed))
        vals = s.fillna("").astype(str)
        is_bad = ~vals.isin(allowed_set)
        is_bad &= vals.str.strip().ne("")
        if is_bad.any():
            msg = f"{col}: {is_bad.sum()} values not in allowed set (sample: {df.loc[is_bad, col].astype(str).head(5).tolist()})"
            (errors if required else warnings).append(msg)

    return errors, warnings


def _validate_number(df: pd.DataFrame, col: str, spec: dict[str, Any], *, required: bool) -> tuple[list[str], list[str]]:
    errors: list[str] = []
    warnings: list[str] = []

    allow_null = bool(spec.get("allow_null", False))
    min_v = spec.get("min", None)
    max_v = spec.get("max", None)

    raw = df[col].astype("string").fillna("").str.strip()
    n = pd.to_numeric(raw.astype(str), errors="coerce").astype(float)
    is_empty = raw.eq("")
    is_na = n.isna()

    if not allow_null and is_empty.any():
        msg = f"{col}: {is_empty.sum()} empty values (sample: {_sample_ids(df, is_empty)})"
        (errors if required else warnings).append(msg)

    # Non-numeric text is always reported: it cannot take part in year ordering
    not_numeric = is_na & ~is_empty
    if not_numeric.any():
        msg = f"{col}: {not_numeric.sum()} non-numeric values (sample: {df.loc[not_numeric, col].astype(str).head(5).tolist()})"
        (errors if required else warnings).append(msg)

    if min_v is not None:
        is_bad = (~is_na) & (n < float(min_v))
        if is_bad.any():
            msg = f"{col}: {is_bad.sum()} values < {min_v} (sample: {_sample_ids(df, is_bad)})"
            (errors if required else warnings).append(msg)

    if max_v is not None:
        is_bad = (~is_na) & (n > float(max_v))
        if is_bad.any():
            msg = f"{col}: {is_bad.sum()} values > {max_v} (sample: {_sample_ids(df, is_bad)})"
            (errors if required else warnings).append(msg)

    return errors, warnings


def validate_df_against_contract(
    df: pd.DataFrame,
    contract: dict[str, Any],
    *,
    strict_optional: bool = False,
) -> ContractResult:
    errors: list[str] = []
    warnings: list[str] = []

    req: dict[str, Any] = contract.get("required_columns", {}) or {}
    opt: dict[str, Any] = contract.get("optional_columns", {}) or {}

    for col in req:
        if col not in df.columns:
            errors.append(f"missing required column: {col}")

    for col in opt:
        if col not in df.columns:
            (errors if strict_optional else warnings).append(f"missing optional column: {col}")

    def validate_cols(columns: dict[str, Any], required_flag: bool):
        for col, spec in columns.items():
            if col not in df.columns:
                continue
            t = str(spec.get("type", "")).lower().strip()
            if t == "string":
                e, w = _validate_string(df, col, spec, required=required_flag)
            elif t == "number":
                e, w = _validate_number(df, col, spec, required=required_flag)
            else:
                e, w = ([f"{col}: unknown type '{t}' in contract"], [])
            errors.extend(e)
            warnings.extend(w)

    validate_cols(req, True)
    validate_cols(opt, strict_optional)

    known = set(req) | set(opt)
    extra = [c for c in df.columns if c not in known]
    if extra:
        warnings.append(f"columns not in contract (kept as-is): {extra}")

    ok = len(errors) == 0
    return ContractResult(ok=ok, errors=errors, warnings=warnings)


def validate_records(
    header: Iterable[str],
    records: Iterable[Record],
    contract_path: str | Path,
    *,
    strict_optional: bool = False,
) -> ContractResult:
    p_contract = Path(contract_path)
    if not p_contract.exists():
        return ContractResult(False, [f"missing contract: {p_contract}"], [])

    contract = load_contract(p_contract)
    df = records_frame(records, columns=header)
    return validate_df_against_contract(df, contract, strict_optional=strict_optional)
