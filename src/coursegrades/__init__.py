"""A package for computing course grades from assignments and report cards."""

from .core import (
    Assignment,
    AssignmentMeta,
    Assignments,
    GradingOptions,
    CategorySummary,
    GradeSummary,
    ReportCardMarks,
    SemesterAverages,
    compute_course_total,
    compute_semester_averages,
    parse_and_round_mark,
    combine_marks,
    report_card_marks_from_terms,
)

from . import courses
from . import gpa
from . import preprocessing
from .summarize import CourseSummary, summarize_course

__all__ = [
    "Assignment",
    "AssignmentMeta",
    "Assignments",
    "GradingOptions",
    "CategorySummary",
    "GradeSummary",
    "ReportCardMarks",
    "SemesterAverages",
    "compute_course_total",
    "compute_semester_averages",
    "parse_and_round_mark",
    "combine_marks",
    "report_card_marks_from_terms",
    "CourseSummary",
    "summarize_course",
    "courses",
    "gpa",
    "preprocessing",
]
