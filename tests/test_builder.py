import logging

import pytest

from crcharts.dom import Element
from crcharts.exceptions import ContainerNotFoundError, UnsupportedChartKindError
from crcharts.visualization.builder import CHART_TYPES, Chart, ChartBuilder, ChartConfig
from crcharts.visualization.settings import ChartDefaults, Settings

from tests.conftest import SERIES, make_page


class TestHeightResolution:
    def test_uses_parent_height(self):
        chart = Chart(container='chart', kind='pie', series=SERIES, document=make_page(parent_height=250))
        assert chart.height == 250

    def test_floors_at_180(self):
        chart = Chart(container='chart', kind='pie', series=SERIES, document=make_page(parent_height=100))
        assert chart.height == 180

    def test_unsized_parent_gets_floor(self):
        chart = Chart(container='chart', kind='column', series=SERIES, document=make_page(parent_height=None))
        assert chart.height == 180

    def test_explicit_height_wins(self):
        chart = Chart(container='chart', kind='pie', height=320, series=SERIES, document=make_page(parent_height=100))
        assert chart.height == 320
        assert chart.settings.height == 320

    @pytest.mark.parametrize('height', [0, -5, 'tall'])
    def test_unusable_explicit_height_is_ignored(self, height, caplog):
        with caplog.at_level(logging.WARNING):
            chart = Chart(container='chart', kind='pie', height=height, series=SERIES,
                          document=make_page(parent_height=250))
        assert chart.height == 250
        assert 'Ignoring chart height' in caplog.text

    def test_height_applied_to_container(self):
        chart = Chart(container='chart', kind='donut', series=SERIES, document=make_page(parent_height=210))
        assert chart.container.style('height') == '210px'

    def test_configurable_floor(self):
        chart = Chart(container='chart', kind='pie', series=SERIES,
                      document=make_page(parent_height=100), defaults=ChartDefaults(min_height=90))
        assert chart.height == 100


class TestDefaults:
    def test_resolved_defaults(self, page):
        chart = Chart(container='chart', kind='pie', series=SERIES, document=page)
        assert chart.value_format == 'number'
        assert chart.palette_name == 'Set2'
        assert chart.pct_fmt(3) == '3'

    def test_initial_settings(self, page):
        builder = ChartBuilder(ChartConfig(container='chart', kind='none', series=SERIES), document=page)
        builder.init()
        assert builder.settings == Settings(width=600, height=250)
        assert builder.settings.to_dict() == {'width': 600, 'height': 250}


class TestDispatch:
    def test_registry(self):
        assert set(CHART_TYPES) == {'pie', 'column', 'histogram'}

    def test_unknown_kind_draws_nothing(self, page, caplog):
        with caplog.at_level(logging.WARNING):
            chart = Chart(container='chart', kind='donut', series=SERIES, document=page)
        assert chart.view is None
        assert chart.container.children == []
        assert "Unsupported chart kind 'donut'" in caplog.text

    def test_unknown_kind_raises_in_strict_mode(self, page):
        with pytest.raises(UnsupportedChartKindError) as excinfo:
            Chart(container='chart', kind='donut', series=SERIES, strict=True, document=page)
        assert excinfo.value.kind == 'donut'

    def test_logs_drawn_chart(self, page, caplog):
        with caplog.at_level(logging.INFO, logger='crcharts'):
            Chart(container='chart', kind='column', series=SERIES, document=page)
        assert 'Drew column chart with 3 entries into #chart' in caplog.text


class TestContainer:
    def test_element_container(self):
        wrapper = Element('div').style('width', '300px').style('height', '200px')
        container = wrapper.append('div')
        chart = Chart(container=container, kind='pie', series=SERIES)
        assert chart.container is container
        assert chart.settings.width == 300

    def test_missing_container(self, page):
        with pytest.raises(ContainerNotFoundError, match='#nowhere'):
            Chart(container='nowhere', kind='pie', series=SERIES, document=page)

    def test_id_without_document(self):
        with pytest.raises(ContainerNotFoundError):
            Chart(container='chart', kind='pie', series=SERIES)


class TestConfig:
    def test_page_option_names(self, page):
        chart = Chart({
            'chartContainer': 'chart',
            'chartType': 'pie',
            'chartStatType': 'percentage',
            'chartHeight': 300,
            'chartColorScale': 'Accent',
            'chartData': {
                'b1': {'name': 'Owner', 'values': {'this': 64}},
                'b2': {'name': 'Renter', 'values': {'this': 36}},
            },
            'unused': True,
        }, document=page)
        assert chart.config.kind == 'pie'
        assert chart.height == 300
        assert chart.palette_name == 'Accent'
        assert chart.view.center_value.text() == '64%'

    def test_keyword_overrides(self, page):
        config = ChartConfig(container='chart', kind='pie', series=SERIES)
        chart = Chart(config, document=page, kind='column')
        assert chart.config.kind == 'column'
        assert config.kind == 'pie'

    def test_empty_value_format_falls_back(self, page):
        chart = Chart(container='chart', kind='pie', value_format='', series=SERIES, document=page)
        assert chart.value_format == 'number'

    def test_to_dict(self):
        config = ChartConfig(container='chart', kind='pie', height=200)
        assert config.to_dict() == {
            'container': 'chart', 'kind': 'pie', 'value_format': None,
            'height': 200, 'palette': None, 'strict': False,
        }


def test_to_html(page):
    chart = Chart(container='chart', kind='pie', series=SERIES, document=page)
    html = chart.to_html()
    assert html.startswith('<div id="chart" class="pie-chart" style="height: 250px">')
    assert html.count('class="arc"') == 3
    assert '<text dy="-8" text-anchor="middle" class="label-name">B</text>' in html


def test_document_serializes_whole_page():
    page = make_page()
    Chart(container='chart', kind='column', series=SERIES, document=page)
    html = page.to_html(title='Columns')
    assert 'class="column-chart"' in html
    assert html.count('class="column"') == 3


def test_missing_kind_draws_nothing(page):
    chart = Chart({'container': 'chart', 'series': SERIES}, document=page)
    assert chart.view is None
