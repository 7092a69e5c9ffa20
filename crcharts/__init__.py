"""
Census Reporter Charts

Pie, column and histogram charts drawn into an in-memory page model,
with two-way hover highlighting between pie wedges and their legend.
"""

__version__ = "1.0.0"
__author__ = "Census Reporter Team"

from crcharts.visualization.builder import Chart, ChartBuilder, ChartConfig

__all__ = ['Chart', 'ChartBuilder', 'ChartConfig']
