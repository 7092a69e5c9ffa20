"""
Left-oriented value axis.
"""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, List, Optional

from crcharts.dom import Element
from crcharts.layout.scales import LinearScale
from crcharts.utils.helpers import number_to_str, translate


def tick_precision(domain, count: int = 10) -> Optional[int]:
    """
    Decimal places needed to label ``count`` nice ticks across ``domain``.

    Returns None when the domain is empty or not finite.
    """
    span = abs(domain[1] - domain[0])
    if not math.isfinite(span) or span == 0:
        return None

    step = 10 ** math.floor(math.log10(span / count))
    err = count / span * step
    if err <= .15:
        step *= 10
    elif err <= .35:
        step *= 5
    elif err <= .75:
        step *= 2
    return max(0, -math.floor(math.log10(step) + .01))


def default_tick_format(scale: LinearScale) -> Callable[[float], str]:
    precision = tick_precision(scale.domain)
    if precision is None:
        return number_to_str
    quantum = Decimal(1).scaleb(-precision)

    def fmt(value: float) -> str:
        # halves round away from zero, on the exact binary value
        rounded = Decimal(float(value)).quantize(quantum, rounding=ROUND_HALF_UP)
        return f"{rounded:,f}"
    return fmt


class LeftAxis:
    """
    Draws tick marks, grid lines and labels to the left of a plot.

    Parameters
    ----------
    scale : LinearScale
        Value scale; its range is the axis's vertical extent
    tick_values : list of float
        Values to mark
    tick_size : float
        Tick length; negative values extend ticks rightwards across the
        plot as grid lines
    tick_padding : float
        Gap between tick and label
    tick_format : callable, optional
        Label formatter (precision inferred from the domain by default)
    """

    def __init__(
        self,
        scale: LinearScale,
        tick_values: List[float],
        tick_size: float = 6,
        tick_padding: float = 3,
        tick_format: Optional[Callable[[float], str]] = None
    ):
        self.scale = scale
        self.tick_values = list(tick_values)
        self.tick_size = tick_size
        self.tick_padding = tick_padding
        self.tick_format = tick_format or default_tick_format(scale)

    def __call__(self, group: Element) -> Element:
        """Draw the axis into ``group`` and return it."""
        for value in self.tick_values:
            tick = group.append('g').classed('tick').style('opacity', 1)
            tick.attr('transform', translate(0, self.scale(value)))
            tick.datum = value
            tick.append('line').attr('x2', -self.tick_size).attr('y2', 0)
            (tick.append('text')
                .attr('x', -(max(self.tick_size, 0) + self.tick_padding))
                .attr('y', 0)
                .attr('dy', '.32em')
                .style('text-anchor', 'end')
                .text(self.tick_format(value)))

        r0, r1 = self.scale.range
        outer = number_to_str(-self.tick_size)
        group.append('path').classed('domain').attr(
            'd', f"M{outer},{number_to_str(r0)}H0V{number_to_str(r1)}H{outer}"
        )
        return group
