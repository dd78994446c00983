from __future__ import annotations

import pytest

from alumni.config import Settings

SAMPLE = (
    "Student_Name,Department,Passing_Year\n"
    "A,Computer Science,2020\n"
    "B,Law,2021\n"
)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(page_size=10, out_dir=str(tmp_path / "site"), log_path=str(tmp_path / "logs" / "alumni.log"))


def make_csv(n: int, department: str = "Computer Science", start_year: int = 2000) -> str:
    lines = ["Student_Name,Department,Passing_Year"]
    for i in range(n):
        lines.append(f"Alumnus {i},{department},{start_year + i}")
    return "\n".join(lines) + "\n"
