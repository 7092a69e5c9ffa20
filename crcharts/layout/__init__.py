"""
Scales, axes and pie geometry used by the chart builders.
"""

from .scales import OrdinalScale, BandScale, LinearScale, tick_range
from .shapes import Arc, ArcGenerator, pie_layout, TAU
from .axis import LeftAxis

__all__ = [
    'OrdinalScale',
    'BandScale',
    'LinearScale',
    'tick_range',
    'Arc',
    'ArcGenerator',
    'pie_layout',
    'TAU',
    'LeftAxis',
]
