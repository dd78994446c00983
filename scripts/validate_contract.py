"""Validate the alumni dataset against its contract.

A lightweight gate that shows column/type drift in the dataset before the
site is built.

Usage
-----
  python scripts/validate_contract.py
  python scripts/validate_contract.py --dataset https://example.org/alumni.csv

Options
-------
  --dataset   Path or URL of the dataset (default: ALUMNI_DATASET or data/alumni.csv)
  --contract  Which contract JSON to use (default: configs/alumni_contract.json)
  --strict-optional  Treat missing optional columns as errors

Exit codes
----------
0 = OK
1 = FAIL
2 = Not configured (dataset or contract missing)
"""

from __future__ import annotations

import argparse
from pathlib import Path

from alumni.config import Settings
from alumni.data.io.fetch import load_dataset
from alumni.data.io.paths import resolve
from alumni.data.schema.contract import validate_records


def main() -> int:
    settings = Settings.from_env()
    ap = argparse.ArgumentParser()
    ap.add_argument("--dataset", default=settings.dataset)
    ap.add_argument("--contract", default=r"configs/alumni_contract.json")
    ap.add_argument("--strict-optional", action="store_true")
    args = ap.parse_args()

    result = load_dataset(args.dataset, timeout=settings.fetch_timeout)
    if not result.ok:
        print("❌ Not configured")
        print(" - dataset could not be loaded:", args.dataset)
        return 2

    res = validate_records(result.header, result.records, resolve(args.contract), strict_optional=args.strict_optional)
    if any(e.startswith("missing contract") for e in res.errors):
        print("❌ Not configured")
        for e in res.errors:
            print(" -", e)
        return 2

    if res.ok:
        print(f"✅ Contract OK: {Path(args.dataset).as_posix()} ({res.summary()})")
        for w in res.warnings:
            print("⚠️", w)
        return 0

    print(f"❌ Contract FAIL: {Path(args.dataset).as_posix()} ({res.summary()})")
    for e in res.errors:
        print(" -", e)
    for w in res.warnings:
        print("⚠️", w)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
