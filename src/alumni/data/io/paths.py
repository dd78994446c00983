from __future__ import annotations
from pathlib import Path


def project_root() -> Path:
    """
    Find the project root by looking for a marker.
    Marker: run.py + src/
    Works regardless of the current working directory.
    """
    here = Path(__file__).resolve()
    for p in [here] + list(here.parents):
        if (p / "run.py").exists() and (p / "src").is_dir():
            return p
    # Fallback: the parent of src/
    return here.parents[4]


def resolve(path: str | Path) -> Path:
    """Resolve a possibly relative path against the project root."""
    p = Path(path)
    return p if p.is_absolute() else project_root() / p

