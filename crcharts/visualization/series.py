"""
Normalization of chart data into ordered name/value entries.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, List, Tuple

import pandas as pd

from crcharts.utils.helpers import to_numeric

MISSING = float('nan')


@dataclass(eq=False)
class SeriesEntry:
    """One category of a chart's data."""
    name: Any
    value: float


def _row(row: Any) -> Tuple[Any, Any]:
    """Pull name and raw value out of one input row."""
    if isinstance(row, Mapping):
        if 'value' in row:
            return row.get('name'), row['value']
        # Census table rows keep the estimate under values.this
        values = row.get('values')
        if isinstance(values, Mapping):
            return row.get('name'), values.get('this', MISSING)
        return row.get('name'), MISSING
    if isinstance(row, (tuple, list)) and len(row) == 2:
        return row[0], row[1]
    return getattr(row, 'name', None), getattr(row, 'value', MISSING)


def normalize_series(data: Any) -> List[SeriesEntry]:
    """
    Turn chart data into ``SeriesEntry`` objects with numeric values.

    Parameters
    ----------
    data : Any
        One of:

        - sequence of ``{'name': ..., 'value': ...}`` rows
        - sequence of census rows ``{'name': ..., 'values': {'this': ...}}``
        - mapping of keys to such rows (in mapping order)
        - mapping of names to plain values
        - ``pd.Series`` indexed by name
        - ``pd.DataFrame`` with ``name`` and ``value`` columns

    Returns
    -------
    list of SeriesEntry
        Entries in input order. Null or blank values count as 0;
        missing or unparseable values become NaN
    """
    if data is None:
        return []

    if isinstance(data, pd.DataFrame):
        if {'name', 'value'} <= set(data.columns):
            pairs = list(zip(data['name'], data['value']))
        else:
            pairs = list(zip(data.index, data.iloc[:, 0])) if len(data.columns) else []
    elif isinstance(data, pd.Series):
        pairs = list(data.items())
    elif isinstance(data, Mapping):
        rows = list(data.values())
        if rows and all(isinstance(r, Mapping) for r in rows):
            pairs = [_row(r) for r in rows]
        else:
            pairs = list(data.items())
    else:
        pairs = [_row(r) for r in data]

    names = [name for name, _ in pairs]
    values = to_numeric(value for _, value in pairs)
    return [SeriesEntry(name=n, value=v) for n, v in zip(names, values)]
