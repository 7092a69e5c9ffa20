"""
Chart construction entry point.

Pass in a configuration that includes data, get back a drawn chart::

    chart = Chart({
        'container': 'chart-1',          # ID of the element to draw into
        'kind': 'pie',                   # 'pie', 'column' or 'histogram'
        'value_format': 'percentage',    # adds '%' to displayed values
        'height': 240,                   # defaults to parent height or 180
        'palette': 'Set2',               # name from the palette registry
        'series': [{'name': 'Owner', 'value': 64}, ...],
    }, document=page)
"""

import math
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional, Type, Union

from crcharts.dom import Document, Element
from crcharts.exceptions import ContainerNotFoundError, UnsupportedChartKindError
from crcharts.utils.helpers import px, to_numeric
from crcharts.utils.logger import LoggerMixin
from crcharts.visualization.base import BaseChart
from crcharts.visualization.column import ColumnChart, HistogramChart
from crcharts.visualization.formatting import format_value
from crcharts.visualization.palettes import get_palette
from crcharts.visualization.pie import PieChart
from crcharts.visualization.series import normalize_series
from crcharts.visualization.settings import ChartDefaults, Settings

CHART_TYPES: Dict[str, Type[BaseChart]] = {
    'pie': PieChart,
    'column': ColumnChart,
    'histogram': HistogramChart,
}

# Option names used by the page scripts
OPTION_ALIASES = {
    'chartContainer': 'container',
    'chartType': 'kind',
    'chartStatType': 'value_format',
    'chartHeight': 'height',
    'chartColorScale': 'palette',
    'chartData': 'series',
}


@dataclass
class ChartConfig:
    """
    Configuration for one chart.
    """
    container: Union[str, Element]
    kind: Optional[str] = None  # pie, column, histogram
    series: Any = None
    value_format: Optional[str] = None  # number, percentage, scaled-percentage
    height: Optional[float] = None
    palette: Optional[str] = None
    strict: bool = False  # raise on unsupported kinds instead of drawing nothing

    @classmethod
    def from_dict(cls, options: Dict[str, Any]) -> 'ChartConfig':
        """
        Build a config from a mapping using either option naming.

        Unknown keys are ignored.
        """
        known = {f.name for f in fields(cls)}
        config = {}
        for key, value in options.items():
            key = OPTION_ALIASES.get(key, key)
            if key in known:
                config[key] = value
        return cls(**config)

    def to_dict(self) -> Dict:
        """Convert to dictionary (excluding the data)."""
        return {
            'container': self.container if isinstance(self.container, str) else self.container.id,
            'kind': self.kind,
            'value_format': self.value_format,
            'height': self.height,
            'palette': self.palette,
            'strict': self.strict,
        }


class ChartBuilder(LoggerMixin):
    """
    Builds one chart from a ChartConfig.

    The builder resolves defaults, applies the chart height to the
    container and hands off to the builder registered for the chart kind.
    A chart is never redrawn in place; build a new one instead.
    """

    def __init__(
        self,
        config: ChartConfig,
        document: Optional[Document] = None,
        defaults: Optional[ChartDefaults] = None
    ):
        """
        Initialize chart builder.

        Parameters
        ----------
        config : ChartConfig
            Chart configuration
        document : Document, optional
            Page used to resolve a container given by ID
        defaults : ChartDefaults, optional
            Layout constants and fallback options
        """
        self.config = config
        self.document = document
        self.defaults = defaults or ChartDefaults()

        self.container: Optional[Element] = None
        self.settings: Optional[Settings] = None
        self.view: Optional[BaseChart] = None

    def init(self) -> 'ChartBuilder':
        """Resolve defaults, size the container and draw the chart."""
        config = self.config

        self.container = self.resolve_container()
        self.parent_height = self.get_parent_height()
        self.kind = config.kind
        self.value_format = config.value_format or self.defaults.value_format
        self.height = self.resolve_height()
        self.palette_name = config.palette or self.defaults.palette
        self.series = normalize_series(config.series)

        # set height on container for continuity
        self.container.style('height', px(self.height))
        self.settings = Settings(width=self.container.measure_width(), height=self.height)

        self.draw()
        return self

    def draw(self) -> 'ChartBuilder':
        """Hand off to the builder for the chart kind."""
        chart_class = CHART_TYPES.get(self.kind)
        if chart_class is None:
            if self.config.strict:
                raise UnsupportedChartKindError(self.kind)
            self.logger.warning(f"Unsupported chart kind {self.kind!r}, nothing drawn")
            return self

        palette = get_palette(self.palette_name, size=len(self.series))
        self.view = chart_class(
            self.container,
            self.settings,
            self.series,
            palette,
            value_format=self.value_format,
            defaults=self.defaults
        )
        self.settings = self.view.build()

        self.logger.info(
            f"Drew {self.kind} chart with {len(self.series)} entries "
            f"into #{self.container.id} ({self.settings.width:g}x{self.settings.height:g})"
        )
        return self

    def resolve_container(self) -> Element:
        container = self.config.container
        if isinstance(container, Element):
            return container

        element = self.document.get_element_by_id(container) if self.document else None
        if element is None:
            raise ContainerNotFoundError(container)
        return element

    def get_parent_height(self) -> float:
        parent = self.container.parent
        return parent.measure_height() if parent is not None else float('nan')

    def resolve_height(self) -> float:
        """
        Explicit height if it is a positive number, else the parent's
        height with a floor of ``defaults.min_height``.
        """
        explicit = self.config.height
        if explicit is not None:
            height = to_numeric([explicit])[0]
            if height > 0:
                return height
            self.logger.warning(f"Ignoring chart height {explicit!r}")

        floor = float(self.defaults.min_height)
        if math.isnan(self.parent_height) or self.parent_height < floor:
            return floor
        return self.parent_height

    def pct_fmt(self, value) -> str:
        return format_value(value, self.value_format)

    def to_html(self) -> str:
        """Markup of the container and everything drawn into it."""
        return self.container.to_html()


def Chart(
    options: Union[ChartConfig, Dict[str, Any], None] = None,
    document: Optional[Document] = None,
    defaults: Optional[ChartDefaults] = None,
    **kwargs: Any
) -> ChartBuilder:
    """
    Build a chart and return it fully drawn.

    Parameters
    ----------
    options : ChartConfig or dict, optional
        Chart configuration; dict keys may use either option naming
    document : Document, optional
        Page holding the container when it is given by ID
    defaults : ChartDefaults, optional
        Layout constants and fallback options
    **kwargs
        Configuration fields overriding ``options``

    Returns
    -------
    ChartBuilder
        The drawn chart
    """
    if isinstance(options, ChartConfig):
        config = replace(options, **kwargs) if kwargs else options
    else:
        config = ChartConfig.from_dict({**(options or {}), **kwargs})

    return ChartBuilder(config, document=document, defaults=defaults).init()
