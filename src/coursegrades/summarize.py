"""Summarize a course's grades for a term or semester view."""

import dataclasses
import logging
from collections.abc import Iterable, Mapping
from typing import Optional

from .core import (
    Assignment,
    GradeSummary,
    GradingOptions,
    ReportCardMarks,
    SemesterAverages,
    compute_course_total,
    report_card_marks_from_terms,
)

logger = logging.getLogger(__name__)

#: views whose displayed total is a semester average, and the average each one uses
SEMESTER_VIEWS = {
    "SM1": "sm1",
    "SM1 Grade": "sm1",
    "SM2": "sm2",
    "SM2 Grades": "sm2",
}


@dataclasses.dataclass(frozen=True)
class CourseSummary:
    """Everything shown for a course in a given view.

    Attributes
    ----------
    grades : GradeSummary
        Category averages and the weighted course total.
    marks : ReportCardMarks
        Report card marks derived from the term totals, if any were given.
    semesters : SemesterAverages
        Semester averages of ``marks``.
    course_total : float
        The total to display. In a semester view, this is the semester
        average when there is one; otherwise it is the weighted total.
    from_semester_average : bool
        Whether ``course_total`` is a semester average.

    """

    grades: GradeSummary
    marks: ReportCardMarks
    semesters: SemesterAverages
    course_total: float
    from_semester_average: bool = False


def summarize_course(
    assignments: Iterable[Assignment],
    weights: Mapping[str, float],
    term_totals: Optional[Mapping] = None,
    view: Optional[str] = None,
    options: Optional[GradingOptions] = None,
) -> CourseSummary:
    """Summarize a course.

    Parameters
    ----------
    assignments : Iterable[Assignment]
        The course's assignments in the selected view.
    weights : Mapping[str, float]
        Category weights; see :func:`coursegrades.compute_course_total`.
    term_totals : Optional[Mapping]
        Per-term totals reported by the grade portal, keyed by labels
        ``"Q1 Grades"`` through ``"Q4 Grades"``; see
        :func:`coursegrades.report_card_marks_from_terms`. If not provided,
        all marks are absent.
    view : Optional[str]
        The selected view. ``"SM1"`` (or the portal label ``"SM1 Grade"``)
        selects the first semester, and ``"SM2"`` (or ``"SM2 Grades"``) the
        second. Any other value, such as a quarter label, or ``None`` selects
        the weighted total.
    options : Optional[GradingOptions]
        Default options are used if not provided.

    Returns
    -------
    CourseSummary

    """
    grades = compute_course_total(assignments, weights, options=options)

    if term_totals is not None:
        marks = report_card_marks_from_terms(term_totals)
    else:
        marks = ReportCardMarks()

    semesters = marks.semester_averages(options)

    semester_average = None
    if view in SEMESTER_VIEWS:
        semester_average = getattr(semesters, SEMESTER_VIEWS[view])

    if semester_average is not None:
        logger.debug("Using %s semester average as the course total.", view)
        return CourseSummary(
            grades=grades,
            marks=marks,
            semesters=semesters,
            course_total=semester_average,
            from_semester_average=True,
        )

    return CourseSummary(
        grades=grades,
        marks=marks,
        semesters=semesters,
        course_total=grades.course_total,
    )
