"""
Pie (ring) charts with a legend and a centre readout.
"""

import functools
from typing import List, Optional

import numpy as np

from crcharts.dom import Element
from crcharts.layout import Arc, ArcGenerator, OrdinalScale, pie_layout
from crcharts.utils.helpers import px, translate
from crcharts.visualization.base import BaseChart
from crcharts.visualization.formatting import sort_data_by
from crcharts.visualization.settings import Settings


class PieChart(BaseChart):
    """
    Ring chart of category shares.

    Hovering a wedge or its legend row highlights both and shows that
    category in the centre of the ring; leaving either restores the
    readout to the largest category.
    """

    chart_type = "pie"
    container_class = "pie-chart"

    def build(self) -> Settings:
        d = self.defaults
        self.container.classed(self.container_class)

        # make sure chart has enough room for the legend
        legend_width = self.settings.width / 3
        s = self.settings.merge(
            legend_width=legend_width,
            radius=float(np.minimum(self.settings.width - legend_width, self.settings.height)) / 1.5
        )
        self.settings = s

        self.categories = [entry.name for entry in self.series]
        self.color = OrdinalScale(self.categories, self.palette)

        self.arc = ArcGenerator(
            inner_radius=s.radius / d.inner_radius_ratio,
            outer_radius=s.radius - d.ring_inset
        )
        self.pie_data: List[Arc] = pie_layout(self.series, value=lambda entry: entry.value)

        # largest wedge labels the chart until something is hovered
        ordered = sorted(self.pie_data, key=functools.cmp_to_key(sort_data_by('-value')))
        self.max_data: Optional[Arc] = ordered[0] if ordered else None
        self.active: Optional[Arc] = None

        # primary svg container
        self.container.style('height', px(s.height))
        self.svg = (self.container.append('svg')
                    .attr('class', 'svg-chart')
                    .attr('width', s.width)
                    .attr('height', s.height))

        center = translate(s.width / 2 - s.legend_width / 2, s.height / 2)
        self.arc_group = self.svg.append('g').attr('class', 'arc-group').attr('transform', center)
        self.center_group = self.svg.append('g').attr('class', 'center-group').attr('transform', center)

        self.center_label = (self.center_group.append('text')
                             .attr('class', 'label-name')
                             .attr('dy', -8)
                             .attr('text-anchor', 'middle'))
        self.center_value = (self.center_group.append('text')
                             .attr('class', 'label-value')
                             .attr('dy', 14)
                             .attr('text-anchor', 'middle'))

        self.arcs: List[Element] = []
        for arc in self.pie_data:
            path = (self.arc_group.append('path')
                    .classed('arc')
                    .attr('d', self.arc(arc))
                    .style('fill', self.color(arc.data.name)))
            path.datum = arc
            path.on('mouseover', self.arc_hover).on('mouseout', self.arc_reset)
            self.arcs.append(path)

        self.legend = (self.svg.append('g')
                       .attr('class', 'legend')
                       .attr('transform', translate(s.width / 2 + s.legend_width / 2, d.legend_top)))
        self.legend_items: List[Element] = []
        for i, arc in enumerate(self.pie_data):
            item = self.legend.append('g').attr('class', 'legend-item')
            item.datum = arc
            (item.append('rect')
                .attr('y', i * d.legend_row_height)
                .attr('width', d.swatch_size)
                .attr('height', d.swatch_size)
                .style('fill', self.color(arc.data.name)))
            (item.append('text')
                .attr('x', d.swatch_size + 5)
                .attr('y', i * d.legend_row_height + 9)
                .attr('height', 30)
                .text(arc.data.name))
            item.on('mouseover', self.arc_hover).on('mouseout', self.arc_reset)
            self.legend_items.append(item)

        self.arc_reset()

        self.logger.debug(
            f"Pie layout: radius={s.radius}, wedges={len(self.pie_data)}, "
            f"largest={self.max_data.data.name if self.max_data else None}"
        )
        return s

    def arc_hover(self, data: Arc) -> None:
        """Highlight a wedge and its legend row and show it in the centre."""
        for element in self.arcs + self.legend_items:
            if element.datum is data:
                element.classed('hovered', True)

        self.active = data
        self.center_label.text(data.data.name)
        self.center_value.text(self.pct_fmt(data.data.value))

    def arc_reset(self, data: Optional[Arc] = None) -> None:
        """Clear highlights and show the largest category in the centre."""
        for element in self.arcs + self.legend_items:
            element.classed('hovered', False)

        self.active = None
        if self.max_data is None:
            return
        self.center_label.text(self.max_data.data.name)
        self.center_value.text(self.pct_fmt(self.max_data.data.value))

    def hovered(self) -> List[Element]:
        """Elements currently marked as hovered."""
        return [e for e in self.arcs + self.legend_items if e.has_class('hovered')]
