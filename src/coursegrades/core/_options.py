"""Options controlling grade computations."""

import dataclasses
from typing import FrozenSet


MALFORMED_POINTS_POLICIES = ("propagate", "exclude")


@dataclasses.dataclass
class GradingOptions:
    """Configures the behavior of the grade computations.

    Every public computation accepts an optional ``options`` argument. If it
    is not provided, a default instance of this class is used.

    Attributes
    ----------
    malformed_points : str
        What to do with an assignment whose earned or possible points do not
        parse as a number. If ``"propagate"``, the value is treated as `NaN`
        and contaminates its category's sums, average, and the course total.
        If ``"exclude"``, the assignment is skipped, in the same way that a
        malformed report card mark is treated as missing. Default:
        ``"propagate"``.
    non_numeric_marks : FrozenSet[str]
        Report card marks that are not grades, such as pass or exempt
        markers. These are treated as missing. Default: ``{"P", "X"}``.
    digits : int
        Number of decimal places that category averages and the course total
        are rounded to. Default: 2.

    """

    malformed_points: str = "propagate"
    non_numeric_marks: FrozenSet[str] = frozenset({"P", "X"})
    digits: int = 2

    def __post_init__(self):
        self.validate()

    def validate(self):
        """Validate the options.

        Raises
        ------
        ValueError
            If ``malformed_points`` is not a known policy, or if ``digits`` is
            negative.

        """
        if self.malformed_points not in MALFORMED_POINTS_POLICIES:
            raise ValueError(
                f'Unknown malformed points policy "{self.malformed_points}". '
                f"Must be one of {MALFORMED_POINTS_POLICIES}."
            )

        if self.digits < 0:
            raise ValueError("Number of digits must be non-negative.")


def resolve_options(options) -> GradingOptions:
    """Return the given options, or the defaults if ``None``."""
    if options is None:
        return GradingOptions()
    if not isinstance(options, GradingOptions):
        raise TypeError(f"Expected GradingOptions, got {type(options).__name__}.")
    options.validate()
    return options
