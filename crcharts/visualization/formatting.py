"""
Value display and data ordering helpers.
"""

from collections.abc import Mapping
from typing import Any, Callable, Optional

from crcharts.utils.helpers import number_to_str

PERCENT_FORMATS = ('percentage', 'scaled-percentage')


def format_value(value: Any, value_format: str = 'number') -> str:
    """
    Format a data value for display.

    Parameters
    ----------
    value : Any
        Value to display
    value_format : str
        ``'number'``, ``'percentage'`` or ``'scaled-percentage'``

    Returns
    -------
    str
        The value, with a trailing ``%`` for percentage formats

    Examples
    --------
    >>> format_value(42, 'percentage')
    '42%'
    >>> format_value(42.0)
    '42'
    """
    text = number_to_str(value)
    if value_format in PERCENT_FORMATS:
        text += '%'
    return text


def _field(item: Any, name: str) -> Any:
    if isinstance(item, Mapping):
        return item[name]
    return getattr(item, name)


def sort_data_by(field: str, key: Optional[Callable[[Any], Any]] = None) -> Callable[[Any, Any], int]:
    """
    Build a three-way comparator on one field of the items being sorted.

    Parameters
    ----------
    field : str
        Field or attribute name; a leading ``-`` sorts descending
    key : callable, optional
        Applied to the field value before comparing

    Returns
    -------
    callable
        ``cmp(a, b)`` returning -1, 0 or 1, for ``functools.cmp_to_key``

    Notes
    -----
    Values that do not compare (NaN) are treated as equal, so a stable
    sort leaves them where they were.
    """
    order = 1
    if field.startswith('-'):
        order = -1
        field = field[1:]

    if key is None:
        get = lambda item: _field(item, field)
    else:
        get = lambda item: key(_field(item, field))

    def compare(a: Any, b: Any) -> int:
        A, B = get(a), get(b)
        if A < B:
            return -1 * order
        if A > B:
            return 1 * order
        return 0

    return compare
