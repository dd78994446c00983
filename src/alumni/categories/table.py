from __future__ import annotations

from types import MappingProxyType

ALL = "All"

# category code -> department labels (must equal the dataset's Department values)
CATEGORY_TABLE = MappingProxyType({
    "SOET": (
        "Computer Science",
        "Information Technology",
        "Electronics & Communication",
        "Mechanical Engineering",
        "Civil Engineering",
        "Electrical Engineering",
        "Electronics Engineering",
    ),
    "LAW": ("Law", "LLB", "LLM", "Legal Studies", "Judiciary"),
    "SOPS": ("Pharmacy", "Pharmaceutical Sciences", "Pharm.D"),
    "SASH": ("MBBS", "BDS", "Nursing", "Physiotherapy", "Medical", "Healthcare"),
    "SBMC": ("MBA", "Management Studies", "Business Administration", "Marketing", "Finance", "HR"),
    "SOSAH": ("Agriculture", "Horticulture", "Agricultural Engineering", "Food Technology"),
    "SOA": ("Architecture", "Interior Design", "Planning", "Building Technology"),
})

def button_label(category: str) -> str:
    return "All Departments" if category == ALL else category


def filter_choices() -> list[str]:
    """Filter buttons, in display order: All first, then the table's keys."""
    return [ALL] + list(CATEGORY_TABLE)


def departments() -> list[str]:
    """Every department label in the table (registration dropdown order)."""
    return [d for subs in CATEGORY_TABLE.values() for d in subs]
