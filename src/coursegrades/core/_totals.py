"""Category averages and the weighted course total."""

import dataclasses
import logging
from collections.abc import Iterable, Mapping
from typing import Optional

import numpy as np
import pandas as pd

from .._util import ensure_df, round_half_up, to_number
from ._assignments import Assignment
from ._options import GradingOptions, resolve_options

logger = logging.getLogger(__name__)


# public classes =======================================================================


@dataclasses.dataclass(frozen=True)
class CategorySummary:
    """The tally for a single grading category.

    Attributes
    ----------
    average : float
        ``raw_points / raw_possible * 100``, rounded. Zero if ``raw_possible``
        is not positive. May be `NaN` if a malformed value was propagated.
    weight : float
        The category's weight, or zero if the weight mapping has no entry.
    raw_points : float
        Sum of points earned in the category.
    raw_possible : float
        Sum of points possible in the category.

    """

    average: float
    weight: float
    raw_points: float
    raw_possible: float


@dataclasses.dataclass(frozen=True)
class GradeSummary:
    """The result of :func:`compute_course_total`.

    Attributes
    ----------
    course_total : float
        The weighted average of the category averages, rounded.
    categories : dict[str, CategorySummary]
        One entry per category seen among the assignments, in the order first
        seen.

    """

    course_total: float
    categories: dict = dataclasses.field(default_factory=dict)

    def to_frame(self) -> pd.DataFrame:
        """The category tallies as a table.

        Returns
        -------
        pandas.DataFrame
            One row per category, indexed by category name, with columns
            ``average``, ``weight``, ``raw_points`` and ``raw_possible``.

        """
        columns = [f.name for f in dataclasses.fields(CategorySummary)]
        return pd.DataFrame(
            [dataclasses.asdict(s) for s in self.categories.values()],
            index=pd.Index(list(self.categories), name="category", dtype=object),
            columns=columns,
            dtype=float,
        )


# private helpers ======================================================================


def _assignment_table(assignments: Iterable[Assignment], options: GradingOptions):
    """Tabulate countable assignments with their points coerced to floats."""
    countable = [a for a in assignments if a.counts]
    table = pd.DataFrame(
        {
            "category": [a.category for a in countable],
            "points_earned": [to_number(a.points_earned) for a in countable],
            "points_possible": [to_number(a.points_possible) for a in countable],
        },
        columns=["category", "points_earned", "points_possible"],
    )

    if options.malformed_points == "exclude":
        parsed = table[["points_earned", "points_possible"]].notna().all(axis=1)
        if not parsed.all():
            logger.debug("Excluding %d malformed assignment(s).", (~parsed).sum())
        table = table[parsed]

    return table


def _tally(table: pd.DataFrame) -> pd.DataFrame:
    """Sum points per category, keeping categories in the order first seen.

    `NaN` values are not skipped: a single malformed value makes the whole
    sum `NaN`.

    """
    return ensure_df(
        table.groupby("category", sort=False)[["points_earned", "points_possible"]].agg(
            lambda s: s.sum(skipna=False)
        )
    )


# public functions =====================================================================


def compute_course_total(
    assignments: Iterable[Assignment],
    weights: Mapping[str, float],
    options: Optional[GradingOptions] = None,
) -> GradeSummary:
    """Compute category averages and the weighted course total.

    Assignments are grouped by category. Within a category, the points earned
    and points possible are summed, and the average is the ratio of the two
    as a percentage (zero if the points possible do not sum to a positive
    number). The course total is the average of the category averages,
    weighted by ``weights``. A category without an entry in ``weights`` has
    weight zero: it is tallied, but does not contribute to the total. If the
    weights of the categories present sum to zero, the course total is zero.

    Assignments flagged as "noCount" are left out. Averages and the course
    total are rounded half away from zero to ``options.digits`` places; the
    course total is computed from the unrounded averages.

    Malformed points (text which does not parse as a number) do not raise.
    By default they become `NaN` and propagate into the category and the
    course total; see :class:`GradingOptions` to exclude them instead.

    Parameters
    ----------
    assignments : Iterable[Assignment]
        The assignments. Not modified.
    weights : Mapping[str, float]
        A mapping from category names to non-negative, relative weights.
        Categories in the mapping without any assignments do not appear in
        the result.
    options : Optional[GradingOptions]
        Options controlling the computation. Default options are used if not
        provided.

    Returns
    -------
    GradeSummary

    Raises
    ------
    TypeError
        If ``assignments`` or ``weights`` is ``None``.

    Example
    -------
    >>> summary = compute_course_total(
    ...     [
    ...         Assignment("test 01", "Test", 90, 100),
    ...         Assignment("test 02", "Test", 80, 100),
    ...         Assignment("hw 01", "HW", 10, 10),
    ...     ],
    ...     {"Test": 0.6, "HW": 0.4},
    ... )
    >>> summary.course_total
    91.0

    """
    if assignments is None:
        raise TypeError("Assignments must be an iterable, not None.")
    if weights is None:
        raise TypeError("Weights must be a mapping, not None.")

    options = resolve_options(options)
    table = _assignment_table(assignments, options)

    if table.empty:
        return GradeSummary(course_total=0.0, categories={})

    tallies = _tally(table)
    raw_points = tallies["points_earned"]
    raw_possible = tallies["points_possible"]

    # a NaN in the possible points fails the comparison, and so gives zero
    average = (raw_points / raw_possible * 100).where(raw_possible > 0, 0.0)

    weight = pd.Series(
        [float(weights.get(category, 0)) for category in tallies.index],
        index=tallies.index,
        dtype=float,
    )

    total_weight = weight.sum()
    if total_weight == 0:
        course_total = 0.0
    else:
        course_total = (average * weight).sum(skipna=False) / total_weight

    if np.isnan(course_total):
        logger.warning(
            "Course total is NaN; malformed points in categories %s.",
            list(average.index[average.isna()]),
        )

    categories = {
        category: CategorySummary(
            average=round_half_up(average[category], options.digits),
            weight=float(weight[category]),
            raw_points=float(raw_points[category]),
            raw_possible=float(raw_possible[category]),
        )
        for category in tallies.index
    }

    logger.debug(
        "Weighted sum over %d categories with total weight %s: %s",
        len(categories),
        total_weight,
        course_total,
    )

    return GradeSummary(
        course_total=round_half_up(course_total, options.digits),
        categories=categories,
    )

