"""
Ordinal, band and linear scales.

All arithmetic goes through numpy so that empty domains and NaN values
produce NaN/inf geometry instead of raising.
"""

import numpy as np
from typing import Any, Hashable, Iterable, List, Sequence, Tuple


def js_round(value: float) -> float:
    """Round half up, NaN-safe."""
    return float(np.floor(np.float64(value) + 0.5))


class OrdinalScale:
    """
    Map category keys onto an output range by first-seen position.

    Keys repeat their first position, and positions past the end of the
    range wrap around, so a palette shorter than the domain cycles.
    Unknown keys are appended to the domain on first use.

    Parameters
    ----------
    domain : iterable
        Category keys
    range_ : sequence
        Output values
    """

    def __init__(self, domain: Iterable[Hashable] = (), range_: Sequence[Any] = ()):
        self._index = {}
        for key in domain:
            self._add(key)
        self.range = list(range_)

    def _add(self, key: Hashable) -> int:
        if key not in self._index:
            self._index[key] = len(self._index)
        return self._index[key]

    @property
    def domain(self) -> List[Hashable]:
        return list(self._index)

    def __call__(self, key: Hashable) -> Any:
        position = self._add(key)
        if not self.range:
            return None
        return self.range[position % len(self.range)]


class BandScale(OrdinalScale):
    """
    Ordinal scale dividing a pixel extent into rounded bands.

    Parameters
    ----------
    domain : iterable
        Category keys
    extent : tuple
        ``(start, stop)`` pixel extent
    padding : float
        Fraction of each step left empty between bands
    outer_padding : float
        Fraction of a step left empty before the first and after the last band
    """

    def __init__(
        self,
        domain: Iterable[Hashable],
        extent: Tuple[float, float],
        padding: float = 0.0,
        outer_padding: float = 0.0
    ):
        super().__init__(domain)
        self.extent = extent
        self.padding = padding
        self.outer_padding = outer_padding

        start, stop = (np.float64(v) for v in extent)
        n = len(self.domain)

        with np.errstate(divide='ignore', invalid='ignore'):
            step = np.floor((stop - start) / (n - padding + 2 * outer_padding))
            offset = start + js_round((stop - start - (n - padding) * step) / 2)

        self.step = float(step)
        self.range = [float(offset + step * i) for i in range(n)]
        self._band_width = js_round(step * (1 - padding))

    @property
    def band_width(self) -> float:
        return self._band_width

    def center(self, key: Hashable) -> float:
        return self(key) + self._band_width / 2


class LinearScale:
    """
    Linear map from a numeric domain onto a numeric range.

    A zero-width domain maps everything to the start of the range.
    """

    def __init__(self, domain: Tuple[float, float] = (0.0, 1.0), range_: Tuple[float, float] = (0.0, 1.0)):
        self.domain = tuple(float(v) for v in domain)
        self.range = tuple(float(v) for v in range_)

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        span = d1 - d0
        t = (float(value) - d0) / span if span else 0.0
        return r0 + (r1 - r0) * t


def tick_range(start: float, stop: float, step: float = 1.0) -> List[float]:
    """
    Evenly spaced values from ``start`` up to (excluding) ``stop``.

    Parameters
    ----------
    start, stop, step : float
        Range bounds and increment

    Returns
    -------
    list of float
        Tick values; ``[start]`` for a zero step, empty when any bound is NaN
    """
    values = np.array([start, stop, step], dtype=float)
    if np.isnan(values).any():
        return []
    if step == 0 or not np.isfinite(values).all():
        return [float(start)] if np.isfinite(start) else []
    return [float(v) for v in np.arange(start, stop, step)]
