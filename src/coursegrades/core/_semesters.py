"""Semester averages from report card marks."""

import dataclasses
import logging
import math
from collections.abc import Mapping
from numbers import Real
from typing import Optional, Union

from .._util import parse_mark, round_half_up
from ._options import GradingOptions, resolve_options

logger = logging.getLogger(__name__)

#: a raw report card mark: absent, a sentinel such as "P", or a (textual) number
Mark = Union[str, float, int, None]

RC_KEYS = ("rc1", "rc2", "rc3", "rc4")

#: the term labels whose totals become report card marks rc1 through rc4
TERM_LABELS = ("Q1 Grades", "Q2 Grades", "Q3 Grades", "Q4 Grades")


# public classes =======================================================================


@dataclasses.dataclass(frozen=True)
class SemesterAverages:
    """Two semester averages, each ``None`` if there were no marks to average.

    ``None`` means "not yet graded" and is distinct from an average of zero.

    """

    sm1: Optional[float] = None
    sm2: Optional[float] = None


@dataclasses.dataclass(frozen=True)
class ReportCardMarks:
    """The four report card marks of a course.

    Each mark may be ``None``, a non-numeric sentinel (such as ``"P"`` for
    pass), or a number, possibly given as text.

    """

    rc1: Mark = None
    rc2: Mark = None
    rc3: Mark = None
    rc4: Mark = None

    @classmethod
    def from_mapping(cls, record: Mapping) -> "ReportCardMarks":
        """Read ``rc1`` through ``rc4`` from a mapping; missing keys are ``None``."""
        return cls(*(record.get(key) for key in RC_KEYS))

    def semester_averages(self, options: Optional[GradingOptions] = None):
        """Compute the semester averages of these marks.

        See :func:`compute_semester_averages`.

        """
        return compute_semester_averages(
            self.rc1, self.rc2, self.rc3, self.rc4, options=options
        )


# public functions =====================================================================


def parse_and_round_mark(
    mark: Mark, options: Optional[GradingOptions] = None
) -> Optional[int]:
    """Normalize a single report card mark.

    Parameters
    ----------
    mark : str, float, int or None
        The raw mark.
    options : Optional[GradingOptions]
        Supplies the set of non-numeric sentinel marks. Default options are
        used if not provided.

    Returns
    -------
    Optional[int]
        ``None`` if the mark is absent, blank, a non-numeric sentinel, does
        not parse as a number, or is not finite. Otherwise the mark rounded
        half away from zero to a whole number.

    Example
    -------
    >>> parse_and_round_mark("87.5")
    88
    >>> parse_and_round_mark("P") is None
    True

    """
    options = resolve_options(options)

    if mark is None:
        return None

    if isinstance(mark, str) and mark.strip() in options.non_numeric_marks:
        return None

    value = parse_mark(mark)
    if not math.isfinite(value):
        return None

    return int(round_half_up(value))


def combine_marks(a: Optional[int], b: Optional[int]) -> Optional[float]:
    """Combine two normalized marks into a semester average.

    If both are present, the result is their mean, which is not rounded
    further and so may be a half-integer. If only one is present, it is the
    result. If neither is present, the result is ``None``.

    """
    if a is not None and b is not None:
        return (a + b) / 2
    if a is not None:
        return float(a)
    if b is not None:
        return float(b)
    return None


def compute_semester_averages(
    rc1: Mark,
    rc2: Mark,
    rc3: Mark,
    rc4: Mark,
    options: Optional[GradingOptions] = None,
) -> SemesterAverages:
    """Compute the two semester averages from four report card marks.

    Each mark is first normalized with :func:`parse_and_round_mark`. The
    first semester average combines ``rc1`` and ``rc2``, and the second
    combines ``rc3`` and ``rc4``, using :func:`combine_marks`. The two
    semesters are independent of one another.

    Parameters
    ----------
    rc1, rc2, rc3, rc4 : str, float, int or None
        The raw report card marks.
    options : Optional[GradingOptions]
        Default options are used if not provided.

    Returns
    -------
    SemesterAverages

    Example
    -------
    >>> compute_semester_averages("90", "95", None, "P")
    SemesterAverages(sm1=92.5, sm2=None)

    """
    options = resolve_options(options)
    r1, r2, r3, r4 = (parse_and_round_mark(m, options) for m in (rc1, rc2, rc3, rc4))

    averages = SemesterAverages(sm1=combine_marks(r1, r2), sm2=combine_marks(r3, r4))
    logger.debug("Marks %s give %s", (r1, r2, r3, r4), averages)
    return averages


def report_card_marks_from_terms(term_totals: Mapping) -> ReportCardMarks:
    """Derive report card marks from per-term grade totals.

    The grade portal reports a running total for each quarter under the labels
    ``"Q1 Grades"`` through ``"Q4 Grades"``. Each total becomes the
    corresponding report card mark, rounded to a whole number.

    Parameters
    ----------
    term_totals : Mapping
        A mapping from term labels to either a number, or a mapping with a
        numeric ``"total"`` entry. Labels that are missing, or whose total is
        not a number, give an absent mark.

    Returns
    -------
    ReportCardMarks

    """
    if term_totals is None:
        raise TypeError("Term totals must be a mapping, not None.")

    def _total(label):
        data = term_totals.get(label)
        if isinstance(data, Mapping):
            data = data.get("total")
        if isinstance(data, bool) or not isinstance(data, Real):
            return None
        if not math.isfinite(data):
            return None
        return int(round_half_up(data))

    return ReportCardMarks(*(_total(label) for label in TERM_LABELS))
