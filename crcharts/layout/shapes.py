"""
Pie layout and arc path generation.
"""

import math
import numpy as np
from dataclasses import dataclass
from typing import Any, Callable, List, Sequence, Tuple

from crcharts.utils.helpers import number_to_str

TAU = 2 * math.pi
ARC_EPSILON = 1e-6


@dataclass(eq=False)
class Arc:
    """
    One wedge of a pie layout.

    Compared by identity so that wedges with equal values stay distinct
    when matching hovered wedges to legend rows.
    """
    data: Any
    value: float
    start_angle: float
    end_angle: float
    index: int

    @property
    def span(self) -> float:
        """Angular size in radians."""
        return self.end_angle - self.start_angle


def pie_layout(
    data: Sequence[Any],
    value: Callable[[Any], float] = lambda d: d['value'],
    start_angle: float = 0.0,
    end_angle: float = TAU
) -> List[Arc]:
    """
    Compute wedge angles for a sequence of data items.

    Parameters
    ----------
    data : sequence
        Items to lay out
    value : callable
        Extracts the numeric size of an item
    start_angle, end_angle : float
        Angular extent in radians, clockwise from twelve o'clock

    Returns
    -------
    list of Arc
        One arc per item, in input order

    Notes
    -----
    The total skips NaN values, but a NaN wedge still poisons the angles
    of every wedge laid out after it. A zero total gives NaN angles.
    """
    values = np.array([value(d) for d in data], dtype=float)
    total = np.nansum(values)

    with np.errstate(divide='ignore', invalid='ignore'):
        k = np.float64(end_angle - start_angle) / total
        spans = values * k

    ends = start_angle + np.cumsum(spans)
    starts = np.concatenate(([start_angle], ends[:-1]))

    return [
        Arc(
            data=d,
            value=float(values[i]),
            start_angle=float(starts[i]),
            end_angle=float(ends[i]),
            index=i,
        )
        for i, d in enumerate(data)
    ]


class ArcGenerator:
    """
    Build SVG path data for pie wedges and rings.

    Parameters
    ----------
    inner_radius : float
        Radius of the hole; 0 draws a solid wedge
    outer_radius : float
        Outer radius
    """

    def __init__(self, inner_radius: float = 0.0, outer_radius: float = 1.0):
        self.inner_radius = float(inner_radius)
        self.outer_radius = float(outer_radius)

    def radii(self) -> Tuple[float, float]:
        r0, r1 = self.inner_radius, self.outer_radius
        if r1 < r0:
            r0, r1 = r1, r0
        return r0, r1

    def __call__(self, arc: Arc) -> str:
        r0, r1 = self.radii()
        a0 = arc.start_angle - math.pi / 2
        a1 = arc.end_angle - math.pi / 2
        if a1 < a0:
            a0, a1 = a1, a0
        da = a1 - a0
        n = number_to_str

        if da >= TAU - ARC_EPSILON:
            # Full circle: two half arcs per ring edge
            outer = (f"M0,{n(r1)}A{n(r1)},{n(r1)} 0 1,1 0,{n(-r1)}"
                     f"A{n(r1)},{n(r1)} 0 1,1 0,{n(r1)}")
            if r0:
                return (outer + f"M0,{n(r0)}A{n(r0)},{n(r0)} 0 1,0 0,{n(-r0)}"
                        f"A{n(r0)},{n(r0)} 0 1,0 0,{n(r0)}Z")
            return outer + "Z"

        large_arc = '0' if da < math.pi else '1'
        c0, s0 = math.cos(a0), math.sin(a0)
        c1, s1 = math.cos(a1), math.sin(a1)

        path = (f"M{n(r1 * c0)},{n(r1 * s0)}"
                f"A{n(r1)},{n(r1)} 0 {large_arc},1 {n(r1 * c1)},{n(r1 * s1)}")
        if r0:
            path += (f"L{n(r0 * c1)},{n(r0 * s1)}"
                     f"A{n(r0)},{n(r0)} 0 {large_arc},0 {n(r0 * c0)},{n(r0 * s0)}Z")
        else:
            path += "L0,0Z"
        return path
