"""Prepare assignments and weights before computing a course total."""

from collections.abc import Iterable, Mapping

from .core import Assignment, Assignments


def drop_ungraded(
    assignments: Iterable[Assignment], marker: str = "*"
) -> Assignments:
    """Remove assignments which have not been graded yet.

    The grade portal reports an ungraded assignment with a marker in place of
    the points earned.

    Parameters
    ----------
    assignments : Iterable[Assignment]
        The assignments.
    marker : str
        The value of ``points_earned`` denoting an ungraded assignment.
        Default: ``"*"``.

    Returns
    -------
    Assignments
        The graded assignments, in their original order.

    """
    return Assignments(a for a in assignments if a.points_earned != marker)


def overlay_artificial(
    real: Iterable[Assignment], artificial: Iterable[Assignment]
) -> Assignments:
    """Combine real assignments with hypothetical ("what-if") ones.

    An artificial assignment replaces any real assignment with the same name.
    The artificial assignments come first, followed by the real assignments
    that were not replaced.

    """
    artificial = list(artificial)
    replaced = {a.name for a in artificial}
    return Assignments(artificial + [a for a in real if a.name not in replaced])


def normalize_weights(
    weights: Mapping[str, float], assignments: Iterable[Assignment]
) -> dict[str, float]:
    """Rescale category weights over the categories that have assignments.

    Categories without any assignments are removed, and the remaining weights
    are scaled so that they sum to 100. If they sum to zero, they are all
    returned as zero.

    Parameters
    ----------
    weights : Mapping[str, float]
        A mapping from category names to weights.
    assignments : Iterable[Assignment]
        The assignments whose categories are kept.

    Returns
    -------
    dict[str, float]

    Example
    -------
    >>> normalize_weights(
    ...     {"Test": 30, "HW": 10, "Quiz": 60},
    ...     [Assignment("test 01", "Test", 90, 100), Assignment("hw 01", "HW", 9, 10)],
    ... )
    {'Test': 75.0, 'HW': 25.0}

    """
    present = {a.category for a in assignments}
    kept = {name: float(w) for name, w in weights.items() if name in present}

    total = sum(kept.values())
    if total == 0:
        return {name: 0.0 for name in kept}

    return {name: w / total * 100 for name, w in kept.items()}
