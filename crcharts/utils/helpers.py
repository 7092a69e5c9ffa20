"""
Helper functions and utilities.
"""

import math
import numpy as np
import pandas as pd
from typing import Any, Iterable, List

__all__ = ['to_numeric', 'is_number', 'number_to_str', 'px', 'translate']


def to_numeric(values: Iterable[Any]) -> List[float]:
    """
    Coerce values to floats the way the page scripts do.

    None and blank strings count as 0; anything else that does not parse
    becomes NaN.

    Parameters
    ----------
    values : iterable
        Raw values (numbers, numeric strings, None, ...)

    Returns
    -------
    list of float
        Coerced values
    """
    values = [0 if _is_blank(v) else v for v in values]
    series = pd.Series(values, dtype=object)
    return pd.to_numeric(series, errors='coerce').astype(float).tolist()


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def is_number(value: Any) -> bool:
    """True for real numbers, numpy scalars included, but not bools."""
    return isinstance(value, (int, float, np.number)) and not isinstance(value, (bool, np.bool_))


def number_to_str(value: Any) -> str:
    """
    Format a number the way it is displayed in the page.

    Integral floats lose their decimal point (``42.0`` -> ``'42'``),
    NaN is ``'NaN'`` and infinities are ``'Infinity'``/``'-Infinity'``.
    Anything that is not a number is passed through ``str``.

    Parameters
    ----------
    value : Any
        Value to format

    Returns
    -------
    str
        Display string
    """
    if not is_number(value):
        return str(value)

    number = float(value)
    if math.isnan(number):
        return 'NaN'
    if math.isinf(number):
        return 'Infinity' if number > 0 else '-Infinity'
    if number.is_integer() and abs(number) < 1e21:
        return str(int(number))
    return repr(number)


def px(value: Any) -> str:
    """CSS pixel length for a number, e.g. ``px(12.0) == '12px'``."""
    return number_to_str(value) + 'px'


def translate(x: Any, y: Any) -> str:
    """SVG translate transform."""
    return f"translate({number_to_str(x)},{number_to_str(y)})"
