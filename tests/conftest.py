"""
Shared fixtures: a page with a sized wrapper around the chart container.
"""

import pytest

from crcharts.dom import Document
from crcharts.visualization.builder import Chart

SERIES = [
    {'name': 'A', 'value': 10},
    {'name': 'B', 'value': 50},
    {'name': 'C', 'value': 5},
]


def make_page(width=600, parent_height=250, container_id='chart'):
    page = Document()
    style = {'width': f"{width}px"}
    if parent_height is not None:
        style['height'] = f"{parent_height}px"
    wrapper = page.create_element('div', id='wrapper', style=style)
    page.create_element('div', id=container_id, parent=wrapper)
    return page


@pytest.fixture
def page():
    return make_page()


@pytest.fixture
def series():
    return [dict(row) for row in SERIES]


@pytest.fixture
def draw(page):
    """Draw a chart into the fixture page's ``#chart`` container."""
    def _draw(**options):
        options.setdefault('container', 'chart')
        return Chart(options, document=page)
    return _draw


def px_value(element, name):
    """Numeric value of a ``...px`` inline style."""
    return float(element.style(name)[:-2])
