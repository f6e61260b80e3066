"""多邊形面積與點在多邊形內測試"""

from decimal import Decimal

import pytest

from geodatum import Coordinate, GeoArgumentError, KarneyGeodesic, area, contains
from geodatum.core.geometry import make_context
from geodatum.core.geometry.polygon import is_point_on_segment, spherical_triangle_area


class TestArea:

    def test_equator_square(self, equator_square):
        square_meters = area(equator_square)
        assert isinstance(square_meters, Decimal)
        assert 1e8 < square_meters < 1.35e8

    def test_orientation_independent(self, equator_square):
        forward = area(equator_square)
        backward = area(list(reversed(equator_square)))
        assert float(backward) == pytest.approx(float(forward), rel=1e-4)

    def test_start_vertex_independent(self, equator_square):
        rotated = equator_square[2:] + equator_square[:2]
        assert float(area(rotated)) == pytest.approx(float(area(equator_square)), rel=1e-4)

    def test_closed_and_open_rings_match(self, equator_square):
        closed = equator_square + [equator_square[0]]
        assert area(closed) == area(equator_square)

    def test_nulls_are_skipped(self, equator_square):
        with_nulls = equator_square[:2] + [None] + equator_square[2:]
        assert area(with_nulls) == area(equator_square)

    def test_degenerate_ring_has_no_area(self):
        spike = [Coordinate(0, 0), Coordinate(0, 0.1), Coordinate(0, 0)]
        assert area(spike) == 0

    def test_larger_polygon_has_larger_area(self, equator_square, unit_square):
        assert area(unit_square) > area(equator_square)

    def test_too_few_points(self):
        with pytest.raises(GeoArgumentError):
            area([Coordinate(0, 0), None, Coordinate(1, 1)])

    def test_none_raises(self):
        with pytest.raises(GeoArgumentError):
            area(None)

    def test_context_precision(self, unit_square):
        result = area(unit_square, context=make_context(8))
        assert len(result.as_tuple().digits) <= 8


class TestSphericalTriangle:

    def test_degenerate_triangle(self):
        calc = KarneyGeodesic()
        a = Coordinate(0, 0)
        assert spherical_triangle_area(a, a, Coordinate(0, 1), calc) == 0.0

    def test_right_triangle_is_half_square(self, equator_square):
        calc = KarneyGeodesic()
        a, b, c, _ = equator_square
        triangle = spherical_triangle_area(a, b, c, calc)
        assert triangle == pytest.approx(float(area(equator_square)) / 2, rel=1e-3)


class TestPointOnSegment:

    def test_midpoint(self):
        assert is_point_on_segment(0.5, 0.5, 0, 0, 1, 1)

    def test_endpoint(self):
        assert is_point_on_segment(1, 1, 0, 0, 1, 1)

    def test_off_line(self):
        assert not is_point_on_segment(0.5, 0.6, 0, 0, 1, 1)

    def test_beyond_segment(self):
        assert not is_point_on_segment(2, 2, 0, 0, 1, 1)

    def test_degenerate_segment(self):
        assert is_point_on_segment(1, 1, 1, 1, 1, 1)
        assert not is_point_on_segment(1, 1.001, 1, 1, 1, 1)


class TestContains:

    def test_inside(self, unit_square):
        assert contains(Coordinate(0.5, 0.5), unit_square)

    def test_outside(self, unit_square):
        assert not contains(Coordinate(1.5, 0.5), unit_square)
        assert not contains(Coordinate(-0.5, 0.5), unit_square)

    def test_on_edge(self, unit_square):
        assert contains(Coordinate(0, 0.5), unit_square)
        assert contains(Coordinate(0.5, 1), unit_square)

    def test_on_vertex(self, unit_square):
        assert contains(Coordinate(1, 1), unit_square)

    def test_closed_ring(self, unit_square):
        closed = unit_square + [unit_square[0]]
        assert contains(Coordinate(0.5, 0.5), closed)
        assert not contains(Coordinate(2, 2), closed)

    def test_concave(self):
        # L 形：右上角缺一塊
        polygon = [
            Coordinate(0, 0), Coordinate(0, 2), Coordinate(1, 2),
            Coordinate(1, 1), Coordinate(2, 1), Coordinate(2, 0),
        ]
        assert contains(Coordinate(0.5, 1.5), polygon)
        assert contains(Coordinate(1.5, 0.5), polygon)
        assert not contains(Coordinate(1.5, 1.5), polygon)

    def test_across_antimeridian(self):
        polygon = [
            Coordinate(-1, 179), Coordinate(-1, -179),
            Coordinate(1, -179), Coordinate(1, 179),
        ]
        assert contains(Coordinate(0, 180), polygon)
        assert contains(Coordinate(0, -180), polygon)
        assert contains(Coordinate(0, -179.5), polygon)
        assert contains(Coordinate(0, 179.5), polygon)
        assert not contains(Coordinate(0, 0), polygon)
        assert not contains(Coordinate(0, 178), polygon)

    def test_nulls_are_skipped(self, unit_square):
        assert contains(Coordinate(0.5, 0.5), [None] + unit_square)

    def test_none_point_raises(self, unit_square):
        with pytest.raises(GeoArgumentError):
            contains(None, unit_square)

    def test_too_few_vertices(self):
        with pytest.raises(GeoArgumentError):
            contains(Coordinate(0, 0), [Coordinate(0, 0), Coordinate(1, 1)])


class TestSquareScenario:

    def test_area_about_one_degree_squared(self, unit_square):
        assert float(area(unit_square)) == pytest.approx(1.23e10, rel=0.01)

    def test_every_vertex_and_midpoint_inside(self, unit_square):
        ring = unit_square + [unit_square[0]]
        for a, b in zip(ring, ring[1:]):
            midpoint = Coordinate((a.latitude + b.latitude) / 2, (a.longitude + b.longitude) / 2)
            assert contains(a, unit_square)
            assert contains(midpoint, unit_square)

    def test_triangle_winding(self):
        a, b, c = Coordinate(10, 10), Coordinate(10, 11), Coordinate(11, 10.5)
        assert float(area([a, b, c])) == pytest.approx(float(area([a, c, b])), rel=1e-9)
