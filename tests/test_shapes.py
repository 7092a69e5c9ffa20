import math

import pytest

from crcharts.layout.shapes import TAU, Arc, ArcGenerator, pie_layout

ROWS = [{'name': 'A', 'value': 10}, {'name': 'B', 'value': 50}, {'name': 'C', 'value': 5}]


class TestPieLayout:
    def test_spans_sum_to_full_turn(self):
        arcs = pie_layout(ROWS)
        assert sum(a.span for a in arcs) == pytest.approx(TAU)
        assert arcs[-1].end_angle == pytest.approx(TAU)

    def test_spans_proportional_to_share(self):
        arcs = pie_layout(ROWS)
        for arc, row in zip(arcs, ROWS):
            assert arc.span / TAU == pytest.approx(row['value'] / 65)

    def test_keeps_input_order(self):
        arcs = pie_layout(ROWS)
        assert [a.data['name'] for a in arcs] == ['A', 'B', 'C']
        assert arcs[0].start_angle == 0
        assert arcs[1].start_angle == pytest.approx(arcs[0].end_angle)

    def test_custom_value_accessor(self):
        arcs = pie_layout([(1, 'x'), (3, 'y')], value=lambda d: d[0])
        assert arcs[1].span == pytest.approx(TAU * .75)

    def test_empty(self):
        assert pie_layout([]) == []

    def test_zero_total_gives_nan_angles(self):
        arcs = pie_layout([{'value': 0}, {'value': 0}])
        assert all(math.isnan(a.end_angle) for a in arcs)

    def test_nan_value_poisons_later_wedges(self):
        arcs = pie_layout([{'value': 1}, {'value': float('nan')}, {'value': 1}])
        assert arcs[0].span == pytest.approx(math.pi)
        assert math.isnan(arcs[1].end_angle)
        assert math.isnan(arcs[2].end_angle)

    def test_arcs_compare_by_identity(self):
        a, b = pie_layout([{'value': 1}, {'value': 1}])
        assert a != b


class TestArcGenerator:
    def test_ring_wedge_path(self):
        arc = ArcGenerator(inner_radius=50, outer_radius=100)
        path = arc(Arc(data=None, value=1, start_angle=0, end_angle=math.pi / 2, index=0))
        assert path.startswith('M')
        assert 'A100,100 0 0,1 100,0' in path
        assert 'A50,50 0 0,0 ' in path
        assert path.endswith('Z')

    def test_large_arc_flag(self):
        arc = ArcGenerator(inner_radius=50, outer_radius=100)
        path = arc(Arc(data=None, value=1, start_angle=0, end_angle=1.5 * math.pi, index=0))
        assert 'A100,100 0 1,1 ' in path

    def test_solid_wedge_closes_at_centre(self):
        arc = ArcGenerator(outer_radius=100)
        path = arc(Arc(data=None, value=1, start_angle=0, end_angle=1, index=0))
        assert path.endswith('L0,0Z')

    def test_full_ring(self):
        arc = ArcGenerator(inner_radius=40, outer_radius=80)
        path = arc(Arc(data=None, value=1, start_angle=0, end_angle=TAU, index=0))
        assert path == (
            'M0,80A80,80 0 1,1 0,-80A80,80 0 1,1 0,80'
            'M0,40A40,40 0 1,0 0,-40A40,40 0 1,0 0,40Z'
        )

    def test_radii_are_swapped_when_inverted(self):
        assert ArcGenerator(inner_radius=100, outer_radius=10).radii() == (10, 100)

    def test_nan_angles_do_not_raise(self):
        arc = ArcGenerator(inner_radius=40, outer_radius=80)
        path = arc(Arc(data=None, value=0, start_angle=math.nan, end_angle=math.nan, index=0))
        assert 'NaN' in path
