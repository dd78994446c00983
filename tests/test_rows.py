from __future__ import annotations

from alumni.data.io.rows import parse, parse_table, tokenize_line

from conftest import SAMPLE


def test_tokenize_quoted_field_keeps_comma() -> None:
    assert tokenize_line('Rohit,"Maruti Suzuki, Ltd.",2020') == ["Rohit", "Maruti Suzuki, Ltd.", "2020"]


def test_tokenize_escaped_quote_and_empty_fields() -> None:
    assert tokenize_line('"He said ""hi""",,x') == ['He said "hi"', "", "x"]
    assert tokenize_line("a,,") == ["a", "", ""]


def test_tokenize_trims_and_skips_blank() -> None:
    assert tokenize_line("  a ,  \"b\" , c  ") == ["a", "b", "c"]
    assert tokenize_line("   ") == []
    assert tokenize_line("") == []


def test_tokenize_unterminated_quote_runs_to_end_of_line() -> None:
    assert tokenize_line('a,"open, still open') == ["a", "open, still open"]


def test_tokenize_quote_inside_unquoted_field_is_literal() -> None:
    assert tokenize_line('5" screen,b') == ['5" screen', "b"]


def test_parse_example_rows_in_input_order() -> None:
    header, records = parse_table(SAMPLE)
    assert header == ["Student_Name", "Department", "Passing_Year"]
    assert [r.name for r in records] == ["A", "B"]
    assert records[0].department == "Computer Science"
    assert records[1].passing_year == "2021"


def test_parse_pads_short_rows_and_ignores_surplus_values() -> None:
    text = "Student_Name,Department,Passing_Year,Designation\nA,Law\nB,Law,2020,Clerk,extra\n"
    a, b = parse(text)
    assert a["Passing_Year"] == "" and a.designation == ""
    assert b.designation == "Clerk"
    assert len(b) == 4


def test_parse_drops_rows_without_name_and_department() -> None:
    text = "Student_Name,Department,Passing_Year\n,,2020\n ,  ,\nC,,\n,Law,\n\n"
    records = parse(text)
    assert [(r.name, r.department) for r in records] == [("C", ""), ("", "Law")]
    assert all(r.name.strip() or r.department.strip() for r in records)


def test_parse_handles_crlf_and_blank_lines() -> None:
    text = "Student_Name,Department\r\nA,Law\r\n\r\nB,MBA\r\n"
    assert [r.department for r in parse(text)] == ["Law", "MBA"]


def test_parse_header_only_and_empty_text() -> None:
    assert parse("Student_Name,Department,Passing_Year\n") == []
    assert parse_table("") == ([], [])
    assert parse("   \n  ") == []


def test_parse_is_idempotent() -> None:
    text = 'Student_Name,Department,Company_or_Business\nA,Law,"X, Y"\nA,Law,"X, Y"\n'
    first, second = parse(text), parse(text)
    assert first == second
    # duplicates are kept
    assert len(first) == 2


def test_records_are_immutable() -> None:
    rec = parse(SAMPLE)[0]
    try:
        rec.name = "Z"  # type: ignore[misc]
    except AttributeError:
        pass
    else:
        raise AssertionError("Record accepted attribute assignment")
    assert rec.name == "A"
    assert rec.field("Feedback") == ""
