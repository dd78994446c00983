from __future__ import annotations

from alumni.categories.apply import departments_for, filter_records
from alumni.categories.table import ALL, CATEGORY_TABLE, departments, filter_choices
from alumni.data.io.rows import parse
from alumni.data.schema.record import Record

from conftest import SAMPLE


def _rec(name: str, dept: str, year: str) -> Record:
    return Record({"Student_Name": name, "Department": dept, "Passing_Year": year})


def test_category_example() -> None:
    records = parse(SAMPLE)
    assert [r.name for r in filter_records(records, "SOET")] == ["A"]
    assert [(r.name, r.passing_year) for r in filter_records(records, ALL)] == [("B", "2021"), ("A", "2020")]


def test_all_keeps_every_record_sorted_latest_first() -> None:
    records = [_rec("a", "Law", "2019"), _rec("b", "MBA", "2023"), _rec("c", "HR", "2021")]
    out = filter_records(records, ALL)
    assert len(out) == len(records)
    assert [r.name for r in out] == ["b", "c", "a"]
    # input untouched
    assert [r.name for r in records] == ["a", "b", "c"]


def test_category_key_selects_only_its_departments() -> None:
    records = [
        _rec("a", "Law", "2019"),
        _rec("b", "LLB", "2020"),
        _rec("c", "Computer Science", "2021"),
        _rec("d", "law", "2022"),
    ]
    out = filter_records(records, "LAW")
    assert [r.name for r in out] == ["b", "a"]
    assert all(r.department in CATEGORY_TABLE["LAW"] for r in out)


def test_unknown_category_is_a_literal_department() -> None:
    records = [_rec("a", "Physics", "2019"), _rec("b", "Law", "2020")]
    assert [r.name for r in filter_records(records, "Physics")] == ["a"]
    assert filter_records(records, "Chemistry") == []


def test_sort_is_stable_and_non_numeric_years_go_last() -> None:
    records = [
        _rec("x", "Law", ""),
        _rec("a", "Law", "2020"),
        _rec("y", "Law", "n/a"),
        _rec("b", "Law", "2020"),
        _rec("c", "Law", "2022"),
    ]
    assert [r.name for r in filter_records(records, "Law")] == ["c", "a", "b", "x", "y"]


def test_records_missing_department_column() -> None:
    records = [Record({"Student_Name": "a"}), _rec("b", "Law", "2020")]
    assert [r.name for r in filter_records(records, ALL)] == ["b", "a"]
    assert [r.name for r in filter_records(records, "LAW")] == ["b"]


def test_empty_input() -> None:
    assert filter_records([], ALL) == []
    assert filter_records([], "SOET") == []


def test_departments_for() -> None:
    assert departments_for(ALL) is None
    assert departments_for("SOPS") == ("Pharmacy", "Pharmaceutical Sciences", "Pharm.D")
    assert departments_for("Finance") == ("Finance",)


def test_filter_choices_and_departments() -> None:
    assert filter_choices()[0] == ALL
    assert filter_choices()[1:] == list(CATEGORY_TABLE)
    assert "Computer Science" in departments()
    assert len(departments()) == sum(len(v) for v in CATEGORY_TABLE.values())
