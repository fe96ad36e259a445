from ._assignments import Assignment, AssignmentMeta, Assignments
from ._options import GradingOptions
from ._semesters import (
    ReportCardMarks,
    SemesterAverages,
    combine_marks,
    compute_semester_averages,
    parse_and_round_mark,
    report_card_marks_from_terms,
)
from ._totals import CategorySummary, GradeSummary, compute_course_total

__all__ = [
    "Assignment",
    "AssignmentMeta",
    "Assignments",
    "GradingOptions",
    "ReportCardMarks",
    "SemesterAverages",
    "combine_marks",
    "compute_semester_averages",
    "parse_and_round_mark",
    "report_card_marks_from_terms",
    "CategorySummary",
    "GradeSummary",
    "compute_course_total",
]
