"""Private helper utilities."""

import decimal
import math
import re
from numbers import Real

import numpy as np
import pandas as pd


def to_number(value) -> float:
    """Coerce an assignment-level value to a float.

    Numbers pass through. Text is stripped and parsed; blank text counts as
    zero, matching the grade portal's own coercion. Anything that does not
    parse (including ``None``) becomes `NaN` instead of raising.

    """
    if value is None:
        return math.nan
    if isinstance(value, Real):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        try:
            return float(text)
        except ValueError:
            return math.nan
    return math.nan


_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_mark(value) -> float:
    """Coerce a report card mark to a float.

    Unlike :func:`to_number`, text is read up to the end of its leading
    number, so that ``"90%"`` is 90, and blank text is missing (`NaN`) rather
    than zero. Text that does not start with a number is `NaN`.

    """
    if isinstance(value, str):
        match = _LEADING_NUMBER.match(value.strip())
        if match is None:
            return math.nan
        return float(match.group())
    return to_number(value)


def round_half_up(value: float, digits: int = 0) -> float:
    """Round half away from zero to the given number of decimal places.

    Rounding is done on the shortest decimal representation of the float, so
    that ``1.005`` becomes ``1.01`` as it would on paper. `NaN` and infinities
    are returned unchanged.

    """
    value = float(value)
    if not np.isfinite(value):
        return value
    exact = decimal.Decimal(str(value))
    quantum = decimal.Decimal(1).scaleb(-digits)

    # the quantized result needs one digit per place above the quantum
    with decimal.localcontext() as ctx:
        ctx.prec = max(28, exact.adjusted() + digits + 2)
        rounded = exact.quantize(quantum, rounding=decimal.ROUND_HALF_UP)

    return float(rounded)


def ensure_df(x) -> pd.DataFrame:
    """Helps convince the type checker that a variable is a DataFrame."""
    assert isinstance(x, pd.DataFrame)
    return x

