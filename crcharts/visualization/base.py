"""
Base class for the per-kind chart builders.
"""

from abc import ABC, abstractmethod
from typing import List

from crcharts.dom import Element
from crcharts.visualization.formatting import format_value
from crcharts.visualization.series import SeriesEntry
from crcharts.visualization.settings import ChartDefaults, Settings
from crcharts.utils.logger import LoggerMixin


class BaseChart(ABC, LoggerMixin):
    """
    Abstract base class for chart builders.

    A builder draws one kind of chart into a container that already has
    its height applied. Subclasses implement ``build``.
    """

    chart_type: str = "base"
    container_class: str = ""

    def __init__(
        self,
        container: Element,
        settings: Settings,
        series: List[SeriesEntry],
        palette: List[str],
        value_format: str = "number",
        defaults: ChartDefaults = None
    ):
        """
        Initialize chart builder.

        Parameters
        ----------
        container : Element
            Element the chart is drawn into
        settings : Settings
            Width and resolved height of the chart
        series : list of SeriesEntry
            Normalized data
        palette : list of str
            Colours to draw with
        value_format : str
            ``'number'``, ``'percentage'`` or ``'scaled-percentage'``
        defaults : ChartDefaults, optional
            Layout constants
        """
        self.container = container
        self.settings = settings
        self.series = series
        self.palette = palette
        self.value_format = value_format
        self.defaults = defaults or ChartDefaults()

    def pct_fmt(self, value) -> str:
        """Display string for a value in this chart's format."""
        return format_value(value, self.value_format)

    @abstractmethod
    def build(self) -> Settings:
        """
        Draw the chart into the container.

        Returns
        -------
        Settings
            The settings with every key this chart kind adds
        """
        pass
