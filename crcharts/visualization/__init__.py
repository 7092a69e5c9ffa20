"""
Chart builders.
"""

from .builder import Chart, ChartBuilder, ChartConfig, CHART_TYPES
from .base import BaseChart
from .column import ColumnChart, HistogramChart
from .pie import PieChart
from .formatting import format_value, sort_data_by
from .palettes import get_palette, register_palette
from .settings import ChartDefaults, Settings, Margin

__all__ = [
    'Chart',
    'ChartBuilder',
    'ChartConfig',
    'CHART_TYPES',
    'BaseChart',
    'ColumnChart',
    'HistogramChart',
    'PieChart',
    'format_value',
    'sort_data_by',
    'get_palette',
    'register_palette',
    'ChartDefaults',
    'Settings',
    'Margin',
]
