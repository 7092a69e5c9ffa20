import math

import pytest

from crcharts.layout.axis import default_tick_format
from crcharts.layout.scales import BandScale, LinearScale, OrdinalScale, js_round, tick_range


def test_js_round_rounds_half_up():
    assert js_round(44.5) == 45
    assert js_round(-0.5) == 0
    assert math.isnan(js_round(float('nan')))


class TestOrdinalScale:
    def test_maps_by_first_position(self):
        scale = OrdinalScale(['a', 'b', 'a', 'c'], ['red', 'green', 'blue'])
        assert scale.domain == ['a', 'b', 'c']
        assert [scale(k) for k in 'abc'] == ['red', 'green', 'blue']

    def test_range_cycles(self):
        scale = OrdinalScale(list('abcde'), ['red', 'green'])
        assert [scale(k) for k in 'abcde'] == ['red', 'green', 'red', 'green', 'red']

    def test_unknown_key_extends_domain(self):
        scale = OrdinalScale(['a'], ['red', 'green'])
        assert scale('z') == 'green'
        assert scale.domain == ['a', 'z']

    def test_empty_range(self):
        assert OrdinalScale(['a'])('a') is None


class TestBandScale:
    def test_round_bands(self):
        x = BandScale(['A', 'B', 'C'], (0, 570), padding=.2, outer_padding=.25)
        assert x.step == 172
        assert x.range == [44, 216, 388]
        assert x.band_width == 138
        assert x('B') == 216
        assert x.center('B') == 216 + 69

    def test_tighter_padding_gives_smaller_gaps(self):
        column = BandScale(['A', 'B', 'C'], (0, 570), padding=.2, outer_padding=.25)
        histogram = BandScale(['A', 'B', 'C'], (0, 570), padding=.025, outer_padding=.25)
        assert histogram.step - histogram.band_width < column.step - column.band_width
        assert histogram.band_width > column.band_width

    def test_empty_domain(self):
        x = BandScale([], (0, 570), padding=.2, outer_padding=.25)
        assert x.range == []
        assert x.domain == []

    def test_nan_extent_does_not_raise(self):
        x = BandScale(['A'], (0, float('nan')), padding=.2, outer_padding=.25)
        assert math.isnan(x.band_width)


class TestLinearScale:
    def test_inverted_range(self):
        y = LinearScale((0, 50), (200, 0))
        assert y(0) == 200
        assert y(50) == 0
        assert y(10) == pytest.approx(160)

    def test_zero_width_domain_maps_to_range_start(self):
        assert LinearScale((0, 0), (200, 0))(0) == 200

    def test_nan_propagates(self):
        assert math.isnan(LinearScale((0, 50), (200, 0))(float('nan')))


class TestTickRange:
    def test_percentage_ticks(self):
        assert tick_range(0, 101, 25) == [0, 25, 50, 75, 100]

    def test_four_intervals_to_max(self):
        assert tick_range(0, 51, 12.5) == [0, 12.5, 25, 37.5, 50]

    def test_zero_step(self):
        assert tick_range(0, 1, 0) == [0]

    def test_nan_bounds(self):
        assert tick_range(0, float('nan'), float('nan')) == []


class TestTickFormat:

    def test_halves_round_up(self):
        fmt = default_tick_format(LinearScale(domain=(0, 50), range_=(200, 0)))
        assert [fmt(v) for v in [0, 12.5, 25, 37.5, 50]] == ['0', '13', '25', '38', '50']

    def test_fractional_domain_keeps_decimals(self):
        fmt = default_tick_format(LinearScale(domain=(0, 1), range_=(200, 0)))
        assert fmt(0.25) == '0.3'
        assert fmt(0.75) == '0.8'

    def test_thousands_separator(self):
        fmt = default_tick_format(LinearScale(domain=(0, 40000), range_=(200, 0)))
        assert fmt(12500) == '12,500'
