"""Build the alumni site (one command).

Steps:
  1) load + parse the dataset (a fetch failure still builds the site, with
     the error placeholder)
  2) check the parsed rows against configs/alumni_contract.json
  3) write index.html + registration.html

Run:
  python run.py
  python -m alumni.app.build_site --dataset https://example.org/alumni.csv

Exit codes:
  0  success
  1  contract failed with --strict
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace

from alumni._version import __version__, __build__
from alumni.common.logging_setup import setup_logging
from alumni.config import Settings
from alumni.data.io.fetch import load_dataset
from alumni.data.io.paths import resolve
from alumni.data.schema.contract import validate_records
from alumni.ui.generator import build_site

logger = logging.getLogger(__name__)


def run(settings: Settings, *, contract: str, strict: bool = False, out_dir: str | None = None):
    result = load_dataset(settings.dataset, timeout=settings.fetch_timeout)

    if result.ok:
        res = validate_records(result.header, result.records, resolve(contract))
        logger.info("Contract %s", res.summary())
        for w in res.warnings:
            logger.warning(w)
        for e in res.errors:
            logger.error(e)
        if strict and not res.ok:
            msg = "\n".join(["Contract validation failed:"] + [" - " + e for e in res.errors])
            raise RuntimeError(msg)

    return build_site(result.records, settings, out_dir, load_error=result.error)


def main() -> int:
    env = Settings.from_env()
    ap = argparse.ArgumentParser()
    ap.add_argument("--dataset", default=env.dataset)
    ap.add_argument("--out", default=env.out_dir)
    ap.add_argument("--contract", default=r"configs/alumni_contract.json")
    ap.add_argument("--strict", action="store_true", help="abort when the dataset breaks the contract")
    ap.add_argument("--log-level", default=env.log_level)
    args = ap.parse_args()

    settings = replace(env, dataset=args.dataset, out_dir=args.out, log_level=args.log_level)
    setup_logging(settings)

    print(f"Alumni showcase {__version__} (build {__build__})")
    try:
        out = run(settings, contract=args.contract, strict=args.strict)
    except RuntimeError as e:
        logger.error(str(e))
        print("❌ Build aborted: dataset contract failed")
        return 1

    print(f"✅ Site wrote: {out.as_posix()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
