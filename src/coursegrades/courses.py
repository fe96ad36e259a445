"""Recompute the semester averages of a collection of course records.

A course record is anything carrying report card marks ``rc1`` through
``rc4``: a mapping, a dataclass instance with those fields, or a row of a
table. The functions here never modify their input; they return new records
in which ``sm1`` and ``sm2`` have been replaced and every other field is the
same object as before.

"""

import dataclasses
from collections.abc import Iterable, Mapping
from typing import Optional

import numpy as np
import pandas as pd

from .core import GradingOptions, ReportCardMarks
from .core._semesters import RC_KEYS


def update_course(course, options: Optional[GradingOptions] = None):
    """Return a copy of a course record with its semester averages recomputed.

    Parameters
    ----------
    course : Mapping or dataclass instance
        The course record. Missing marks are treated as absent. Not modified.
    options : Optional[GradingOptions]
        Default options are used if not provided.

    Returns
    -------
    dict or dataclass instance
        For a mapping, a new ``dict`` with the same items except ``sm1`` and
        ``sm2``. For a dataclass instance, a new instance created with
        :func:`dataclasses.replace`. An absent average is ``None``.

    Raises
    ------
    TypeError
        If the course is neither a mapping nor a dataclass instance.

    """
    if isinstance(course, Mapping):
        averages = ReportCardMarks.from_mapping(course).semester_averages(options)
        return {**course, "sm1": averages.sm1, "sm2": averages.sm2}

    if dataclasses.is_dataclass(course) and not isinstance(course, type):
        marks = ReportCardMarks(*(getattr(course, key, None) for key in RC_KEYS))
        averages = marks.semester_averages(options)
        return dataclasses.replace(course, sm1=averages.sm1, sm2=averages.sm2)

    raise TypeError(
        f"Expected a mapping or a dataclass instance, got {type(course).__name__}."
    )


def update_courses(
    courses: Iterable, options: Optional[GradingOptions] = None
) -> list:
    """Apply :func:`update_course` to every record in a collection.

    The result has one record per input record, in the same order.

    """
    if courses is None:
        raise TypeError("Courses must be an iterable, not None.")
    return [update_course(course, options) for course in courses]


def update_course_table(
    table: pd.DataFrame, options: Optional[GradingOptions] = None
) -> pd.DataFrame:
    """Recompute semester averages for a table of courses.

    Parameters
    ----------
    table : pandas.DataFrame
        One row per course. Columns ``rc1`` through ``rc4`` hold the raw
        marks; missing columns are treated as entirely absent.
    options : Optional[GradingOptions]
        Default options are used if not provided.

    Returns
    -------
    pandas.DataFrame
        A copy of the table with float columns ``sm1`` and ``sm2`` set. An
        absent average is `NaN`.

    """
    if not isinstance(table, pd.DataFrame):
        raise TypeError(f"Expected a DataFrame, got {type(table).__name__}.")

    result = table.copy()
    marks = result.reindex(columns=list(RC_KEYS)).astype(object)
    averages = [
        ReportCardMarks(*row).semester_averages(options)
        for row in marks.itertuples(index=False, name=None)
    ]

    def _column(attr):
        values = [getattr(a, attr) for a in averages]
        return pd.Series(
            [np.nan if v is None else v for v in values],
            index=result.index,
            dtype=float,
        )

    result["sm1"] = _column("sm1")
    result["sm2"] = _column("sm2")
    return result
