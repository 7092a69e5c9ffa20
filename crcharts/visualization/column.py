"""
Column and histogram charts.

Bars are drawn as absolutely positioned ``a.column`` elements in a
``div.column-group`` overlay so they can be styled and linked like
ordinary page elements; the SVG underneath carries the axes, grid lines
and value labels.
"""

import numpy as np
from typing import List, Tuple

from crcharts.layout import BandScale, LinearScale, LeftAxis, tick_range
from crcharts.utils.helpers import px, translate
from crcharts.visualization.base import BaseChart
from crcharts.visualization.settings import Settings


class ColumnChart(BaseChart):
    """
    One vertical bar per category with value labels above the bars.
    """

    chart_type = "column"
    container_class = "column-chart"

    @property
    def column_padding(self) -> float:
        return self.defaults.column_padding

    def value_domain(self) -> Tuple[Tuple[float, float], List[float]]:
        """
        Domain and tick values of the value axis.

        Percentages always run 0-100 in steps of 25; anything else runs
        from 0 to the largest value with four intervals.
        """
        if self.value_format == 'percentage':
            return (0.0, 100.0), tick_range(0, 101, 25)

        values = np.array([entry.value for entry in self.series], dtype=float)
        values = values[~np.isnan(values)]
        # NaN when no value is a number; the axis then has no ticks
        top = float(values.max()) if values.size else float('nan')
        return (0.0, top), tick_range(0, top + 1, top / 4)

    def build(self) -> Settings:
        d = self.defaults
        self.container.classed(self.container_class)

        s = self.settings.merge(
            margin=d.column_margin,
            tick_padding=d.tick_padding,
            outer_column_padding=d.outer_column_padding
        )
        s = s.merge(
            display_width=s.width - s.margin.left - s.margin.right,
            display_height=s.height - s.margin.top - s.margin.bottom,
            column_padding=self.column_padding
        )
        self.settings = s

        # primary svg container
        self.svg = (self.container.append('svg')
                    .attr('class', 'svg-chart')
                    .attr('width', s.width)
                    .attr('height', s.height))
        self.base = self.svg.append('g').attr('transform', translate(s.margin.left, s.margin.top))

        # x scale, axis and labels
        self.x = BandScale(
            [entry.name for entry in self.series],
            (0, s.display_width),
            s.column_padding,
            s.outer_column_padding
        )

        self.x_axis = (self.base.append('g')
                       .attr('class', 'x axis')
                       .attr('transform', translate(0, s.display_height + s.tick_padding)))
        self.x_labels = []
        for entry in self.series:
            tick = (self.x_axis.append('g')
                    .classed('tick major')
                    .style('opacity', 1)
                    .attr('transform', translate(self.x.center(entry.name), 0)))
            tick.datum = entry
            label = (tick.append('text')
                     .text(entry.name)
                     .attr('x', 0)
                     .attr('dy', '.71em')
                     .style('text-anchor', 'middle'))
            self.x_labels.append(label)

        # y scale and axis
        domain, ticks = self.value_domain()
        self.y = LinearScale(domain, (s.display_height, 0))
        self.y_axis = LeftAxis(
            self.y,
            ticks,
            tick_size=-s.display_width,
            tick_padding=s.tick_padding
        )
        self.y_axis_base = self.y_axis(self.base.append('g').attr('class', 'y axis'))

        # columns as <a> elements
        self.column_group = self.container.append('div').attr('class', 'column-group')
        self.columns = []
        for entry in self.series:
            column = (self.column_group.append('a')
                      .attr('class', 'column')
                      .style('background-color', self.palette[0])
                      .style('width', px(self.x.band_width))
                      .style('bottom', px(s.margin.bottom + s.tick_padding - 1))
                      .style('left', px(self.x(entry.name) + s.margin.left))
                      .style('height', px(self.column_height(entry.value))))
            column.datum = entry
            self.columns.append(column)

        # label columns with values
        self.label_group = self.base.append('g').attr('class', 'column-group')
        self.labels = []
        for entry in self.series:
            label = (self.label_group.append('text')
                     .text(self.pct_fmt(entry.value))
                     .attr('text-anchor', 'middle')
                     .attr('x', self.x.center(entry.name))
                     .attr('y', self.y(entry.value) - d.label_offset))
            label.datum = entry
            self.labels.append(label)

        self.logger.debug(
            f"Column layout: band={self.x.band_width}, step={self.x.step}, domain={domain}"
        )
        return s

    def column_height(self, value: float) -> float:
        """Pixel height of the bar for a value."""
        return self.settings.display_height - self.y(value)


class HistogramChart(ColumnChart):
    """
    Column chart with bars nearly touching.
    """

    chart_type = "histogram"

    @property
    def column_padding(self) -> float:
        return self.defaults.histogram_padding
