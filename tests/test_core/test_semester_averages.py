"""Tests of report card marks and semester averages."""

import pytest

import coursegrades
from coursegrades import GradingOptions, ReportCardMarks, SemesterAverages


# tests: parse_and_round_mark ==========================================================


@pytest.mark.parametrize(
    "mark, expected",
    [
        ("90", 90),
        (90, 90),
        ("87.5", 88),
        ("86.5", 87),
        (92.4, 92),
        ("  79.6 ", 80),
        ("0", 0),
    ],
)
def test_parse_and_round_mark_rounds_to_whole_number(mark, expected):
    assert coursegrades.parse_and_round_mark(mark) == expected


@pytest.mark.parametrize("mark", [None, "", "   ", "P", "X", "abc", "inf", float("nan")])
def test_parse_and_round_mark_gives_none_for_absent_or_non_numeric(mark):
    assert coursegrades.parse_and_round_mark(mark) is None


def test_parse_and_round_mark_returns_int():
    assert isinstance(coursegrades.parse_and_round_mark("87.5"), int)


def test_non_numeric_marks_are_configurable():
    # given
    options = GradingOptions(non_numeric_marks=frozenset({"EX"}))

    # then
    assert coursegrades.parse_and_round_mark("EX", options) is None
    # "P" is no longer a sentinel, but it still doesn't parse
    assert coursegrades.parse_and_round_mark("P", options) is None
    assert coursegrades.parse_and_round_mark("85", options) == 85


# tests: combine_marks =================================================================


def test_combine_marks_takes_unrounded_mean_of_two_marks():
    assert coursegrades.combine_marks(87, 88) == 87.5


def test_combine_marks_uses_single_present_mark():
    assert coursegrades.combine_marks(91, None) == 91
    assert coursegrades.combine_marks(None, 84) == 84


def test_combine_marks_gives_none_when_both_absent():
    assert coursegrades.combine_marks(None, None) is None


def test_combine_marks_keeps_zero_distinct_from_absent():
    assert coursegrades.combine_marks(0, None) == 0
    assert coursegrades.combine_marks(0, None) is not None


# tests: compute_semester_averages =====================================================


def test_scenario_with_pass_mark_and_missing_mark():
    # when
    averages = coursegrades.compute_semester_averages("90", "95", None, "P")

    # then
    assert averages.sm1 == 92.5
    assert averages.sm2 is None


def test_marks_are_rounded_before_averaging():
    # given
    # 87.5 -> 88 and 90.4 -> 90, so the average is 89, not 88.95
    averages = coursegrades.compute_semester_averages("87.5", "90.4", 80, 85)

    # then
    assert averages.sm1 == 89
    assert averages.sm2 == 82.5


def test_all_absent_gives_no_averages():
    # when
    averages = coursegrades.compute_semester_averages(None, None, None, None)

    # then
    assert averages == SemesterAverages(sm1=None, sm2=None)


@pytest.mark.parametrize(
    "rc1, rc2, expected",
    [
        ("80", "90", 85),
        ("80", "91", 85.5),
        ("80", None, 80),
        (None, "91", 91),
        ("80", "X", 80),
        ("", "77.5", 78),
        ("abc", None, None),
        ("P", "X", None),
    ],
)
def test_first_semester_policy(rc1, rc2, expected):
    # when
    averages = coursegrades.compute_semester_averages(rc1, rc2, None, None)

    # then
    assert averages.sm1 == expected
    assert averages.sm2 is None


@pytest.mark.parametrize(
    "rc3, rc4, expected",
    [
        ("70", "75", 72.5),
        (None, "75", 75),
        ("70", "P", 70),
        (None, None, None),
    ],
)
def test_second_semester_policy(rc3, rc4, expected):
    # when
    averages = coursegrades.compute_semester_averages(None, "x", rc3, rc4)

    # then
    assert averages.sm1 is None
    assert averages.sm2 == expected


def test_semesters_are_independent():
    # when
    averages = coursegrades.compute_semester_averages("abc", "P", "88", "91")

    # then
    assert averages.sm1 is None
    assert averages.sm2 == 89.5


# tests: ReportCardMarks ===============================================================


def test_report_card_marks_from_mapping():
    # given
    record = {"rc1": "90", "rc3": "P", "name": "Algebra"}

    # when
    marks = ReportCardMarks.from_mapping(record)

    # then
    assert marks == ReportCardMarks(rc1="90", rc2=None, rc3="P", rc4=None)
    assert marks.semester_averages() == SemesterAverages(sm1=90, sm2=None)


def test_report_card_marks_from_terms_rounds_numeric_totals():
    # given
    term_totals = {
        "Q1 Grades": {"total": 89.5},
        "Q2 Grades": {"total": 92.2},
        "Q3 Grades": 77.49,
    }

    # when
    marks = coursegrades.report_card_marks_from_terms(term_totals)

    # then
    assert marks == ReportCardMarks(rc1=90, rc2=92, rc3=77, rc4=None)


def test_report_card_marks_from_terms_ignores_non_numeric_totals():
    # given
    term_totals = {
        "Q1 Grades": {"total": "90"},
        "Q2 Grades": {},
        "Q3 Grades": None,
        "Q4 Grades": {"total": True},
    }

    # when
    marks = coursegrades.report_card_marks_from_terms(term_totals)

    # then
    assert marks == ReportCardMarks()


def test_report_card_marks_from_terms_raises_if_none():
    with pytest.raises(TypeError):
        coursegrades.report_card_marks_from_terms(None)


# tests: unusual numeric marks =========================================================


@pytest.mark.parametrize(
    "mark, expected",
    [("90%", 90), ("87.5%", 88), ("92 (B+)", 92)],
)
def test_parse_and_round_mark_reads_leading_number(mark, expected):
    assert coursegrades.parse_and_round_mark(mark) == expected


@pytest.mark.parametrize("mark", ["1e30", 1e30, "-1e29", "1e300"])
def test_parse_and_round_mark_does_not_raise_on_large_marks(mark):
    assert coursegrades.parse_and_round_mark(mark) == int(float(mark))


def test_parse_and_round_mark_gives_none_when_mark_overflows():
    assert coursegrades.parse_and_round_mark("1e999") is None


def test_semester_averages_of_large_marks():
    # when
    averages = coursegrades.compute_semester_averages("1e30", "1e30", "1e28", None)

    # then
    assert averages.sm1 == 1e30
    assert averages.sm2 == 1e28
