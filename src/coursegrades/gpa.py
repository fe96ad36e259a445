"""GPA results.

Converting course grades to a GPA scale is not implemented. The result type
is declared so that callers can depend on its shape.

"""

import dataclasses


@dataclasses.dataclass(frozen=True)
class GpaResult:
    """Unweighted and weighted grade point averages."""

    unweighted: float
    weighted: float


def compute_gpa(*args, **kwargs) -> GpaResult:
    """Not implemented.

    Raises
    ------
    NotImplementedError
        Always.

    """
    raise NotImplementedError("GPA conversion is not implemented.")
