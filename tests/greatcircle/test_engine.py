#!/usr/bin/env python3
"""Test suite for the great-circle engine functions"""

import math
import unittest

import numpy as np

from pygreatcircle.core.constants import EARTH_RADIUS_KM, KM_TO_NM, LEGACY_COINCIDENT_THRESHOLD
from pygreatcircle.core.data_structures import Coordinate
from pygreatcircle.greatcircle.engine import (
    along_track_distance_to, bearing, cross_track_distance, crossing_parallels,
    destination, distance, distance_in_nm, final_bearing, intermediate,
    intersection, max_latitude, midpoint
)

# Radius used by the published Movable Type worked examples
MOVABLE_TYPE_RADIUS_KM = 6371.0


class GreatCircleTestCase(unittest.TestCase):

    def setUp(self):
        self.ist = Coordinate(41.28111111, 28.75333333)  # Istanbul Airport
        self.jfk = Coordinate(40.63980103, -73.77890015)  # New York JFK
        self.fco = Coordinate(41.8002778, 12.2388889)     # Roma Fiumicino
        self.tokyo = Coordinate(35.6762, 139.6503)
        self.sydney = Coordinate(-33.8688, 151.2093)
        self.pairs = [
            (self.ist, self.jfk),
            (self.ist, self.fco),
            (self.tokyo, self.sydney),
            (self.jfk, self.tokyo),
            (Coordinate(0.0, 0.0), Coordinate(0.0, 90.0)),
        ]

    def assertCoordinateAlmostEqual(self, actual, expected, places=7):
        self.assertIsNotNone(actual)
        self.assertAlmostEqual(actual.lat, expected.lat, places=places)
        self.assertAlmostEqual(actual.lon, expected.lon, places=places)


class TestDistance(GreatCircleTestCase):

    def test_istanbul_jfk(self):
        d = distance(self.ist, self.jfk)
        self.assertGreater(d, 8024.0)
        self.assertLess(d, 8030.0)

    def test_same_point_is_exactly_zero(self):
        self.assertEqual(distance(self.ist, self.ist), 0.0)
        self.assertEqual(distance(self.jfk, Coordinate(40.63980103, -73.77890015)), 0.0)

    def test_symmetric(self):
        for a, b in self.pairs:
            self.assertAlmostEqual(distance(a, b), distance(b, a), places=9)

    def test_quarter_equator(self):
        d = distance(Coordinate(0.0, 0.0), Coordinate(0.0, 90.0))
        self.assertAlmostEqual(d, EARTH_RADIUS_KM * np.pi / 2, places=6)

    def test_antipodes(self):
        d = distance(Coordinate(45.0, 0.0), Coordinate(-45.0, 180.0))
        self.assertAlmostEqual(d, EARTH_RADIUS_KM * np.pi, places=6)

    def test_radius_scales_result(self):
        d = distance(self.ist, self.jfk, radius=1.0)
        self.assertAlmostEqual(d * EARTH_RADIUS_KM, distance(self.ist, self.jfk), places=6)

    def test_nautical_miles(self):
        self.assertAlmostEqual(distance_in_nm(self.ist, self.jfk),
                               distance(self.ist, self.jfk) * 0.539956803, places=9)
        self.assertEqual(KM_TO_NM, 0.539956803)


class TestBearing(GreatCircleTestCase):

    def test_istanbul_jfk_heads_northwest(self):
        b = bearing(self.ist, self.jfk)
        self.assertGreater(b, 305.0)
        self.assertLess(b, 312.0)

    def test_same_point_is_zero(self):
        self.assertEqual(bearing(self.ist, self.ist), 0.0)

    def test_cardinal_directions(self):
        origin = Coordinate(0.0, 0.0)
        self.assertAlmostEqual(bearing(origin, Coordinate(10.0, 0.0)), 0.0, places=9)
        self.assertAlmostEqual(bearing(origin, Coordinate(0.0, 10.0)), 90.0, places=9)
        self.assertAlmostEqual(bearing(origin, Coordinate(-10.0, 0.0)), 180.0, places=9)
        self.assertAlmostEqual(bearing(origin, Coordinate(0.0, -10.0)), 270.0, places=9)

    def test_range(self):
        for a, b in self.pairs:
            for value in (bearing(a, b), bearing(b, a)):
                self.assertGreaterEqual(value, 0.0)
                self.assertLess(value, 360.0)

    def test_final_bearing_differs_by_180(self):
        for a, b in self.pairs:
            diff = (final_bearing(a, b) - bearing(a, b)) % 360.0
            self.assertAlmostEqual(diff, 180.0, places=9)

    def test_final_bearing_same_point(self):
        self.assertEqual(final_bearing(self.ist, self.ist), 180.0)


class TestMidpointAndIntermediate(GreatCircleTestCase):

    def test_midpoint_on_equator(self):
        mid = midpoint(Coordinate(0.0, 10.0), Coordinate(0.0, 20.0))
        self.assertCoordinateAlmostEqual(mid, Coordinate(0.0, 15.0), places=9)

    def test_midpoint_is_equidistant(self):
        for a, b in self.pairs:
            mid = midpoint(a, b)
            self.assertAlmostEqual(distance(a, mid), distance(mid, b), places=6)
            self.assertAlmostEqual(distance(a, mid), distance(a, b) / 2, places=6)

    def test_midpoint_across_antimeridian(self):
        mid = midpoint(Coordinate(0.0, 170.0), Coordinate(0.0, -170.0))
        self.assertAlmostEqual(mid.lat, 0.0, places=9)
        self.assertAlmostEqual(abs(mid.lon), 180.0, places=9)

    def test_legacy_midpoint_uses_raw_degrees(self):
        start, end = Coordinate(0.0, 10.0), Coordinate(0.0, 20.0)
        mid = midpoint(start, end, legacy=True)
        # degree values fed straight to sin/cos
        expected_lon = 10.0 + math.atan2(math.sin(10.0), 1.0 + math.cos(10.0))
        self.assertAlmostEqual(mid.lat, 0.0, places=12)
        self.assertAlmostEqual(mid.lon, expected_lon, places=12)
        self.assertNotAlmostEqual(mid.lon, midpoint(start, end).lon, places=3)

    def test_legacy_midpoint_same_point(self):
        mid = midpoint(Coordinate(0.0, 10.0), Coordinate(0.0, 10.0), legacy=True)
        self.assertCoordinateAlmostEqual(mid, Coordinate(0.0, 10.0), places=12)

    def test_intermediate_endpoints(self):
        for a, b in self.pairs:
            self.assertCoordinateAlmostEqual(intermediate(a, b, 0.0), a, places=9)
            self.assertCoordinateAlmostEqual(intermediate(a, b, 1.0), b, places=9)

    def test_intermediate_half_matches_midpoint(self):
        for a, b in self.pairs:
            self.assertCoordinateAlmostEqual(intermediate(a, b, 0.5), midpoint(a, b), places=9)

    def test_intermediate_fraction_of_distance(self):
        point = intermediate(self.ist, self.jfk, 0.25)
        total = distance(self.ist, self.jfk)
        self.assertAlmostEqual(distance(self.ist, point), total * 0.25, places=6)
        self.assertAlmostEqual(cross_track_distance(point, self.ist, self.jfk), 0.0, places=6)

    def test_intermediate_same_point_returns_start(self):
        self.assertIs(intermediate(self.ist, self.ist, 0.3), self.ist)

    def test_intermediate_same_position_different_longitude(self):
        start = Coordinate(10.0, 20.0)
        point = intermediate(start, Coordinate(10.0, 380.0), 0.5)
        self.assertCoordinateAlmostEqual(point, start, places=9)


class TestIntersection(GreatCircleTestCase):

    def test_movable_type_example(self):
        # 51.8853 N, 0.2545 E on 108.547 and 49.0034 N, 2.5735 E on 32.435
        p = intersection(Coordinate(51.8853, 0.2545), 108.547,
                         Coordinate(49.0034, 2.5735), 32.435)
        self.assertIsNotNone(p)
        self.assertAlmostEqual(p.lat, 50.9078, delta=1e-3)
        self.assertAlmostEqual(p.lon, 4.5084, delta=1e-3)

    def test_equator_and_meridian(self):
        p = intersection(Coordinate(0.0, 0.0), 90.0, Coordinate(-10.0, 20.0), 0.0)
        self.assertCoordinateAlmostEqual(p, Coordinate(0.0, 20.0), places=6)

    def test_intersection_lies_on_both_paths(self):
        p1, brg1 = Coordinate(51.8853, 0.2545), 108.547
        p2, brg2 = Coordinate(49.0034, 2.5735), 32.435
        p = intersection(p1, brg1, p2, brg2)
        self.assertAlmostEqual(bearing(p1, p), brg1, places=6)
        self.assertAlmostEqual(bearing(p2, p), brg2, places=6)

    def test_diverging_paths(self):
        # Istanbul heading west passes south of Rome while Rome heads north-east
        with self.assertLogs('pygreatcircle.greatcircle.engine', level='DEBUG'):
            p = intersection(self.ist, 270.0, self.fco, 45.0)
        self.assertIsNone(p)

    def test_coincident_points_return_first_point(self):
        p1 = Coordinate(10.0, 10.0)
        self.assertIs(intersection(p1, 45.0, Coordinate(10.0, 10.0), 90.0), p1)

    def test_legacy_threshold(self):
        # Istanbul and Rome are far closer than e radians apart
        p = intersection(self.ist, 270.0, self.fco, 45.0,
                         threshold=LEGACY_COINCIDENT_THRESHOLD)
        self.assertIs(p, self.ist)


class TestDestination(GreatCircleTestCase):

    def test_movable_type_example(self):
        start = Coordinate(53.3206, -1.7297)
        dest = destination(start, 124.8, 96.0217, radius=MOVABLE_TYPE_RADIUS_KM)
        self.assertAlmostEqual(dest.lat, 53.1883, delta=1e-3)
        self.assertAlmostEqual(dest.lon, 0.1333, delta=1e-3)

    def test_round_trip_with_distance_and_bearing(self):
        for a, b in self.pairs:
            dest = destination(a, distance(a, b), bearing(a, b)).wrapped()
            self.assertCoordinateAlmostEqual(dest, b, places=6)

    def test_zero_distance(self):
        dest = destination(self.ist, 0.0, 123.0)
        self.assertCoordinateAlmostEqual(dest, self.ist, places=9)

    def test_due_north_along_meridian(self):
        dest = destination(Coordinate(0.0, 30.0), EARTH_RADIUS_KM * np.pi / 4, 0.0)
        self.assertCoordinateAlmostEqual(dest, Coordinate(45.0, 30.0), places=9)

    def test_longitude_not_wrapped(self):
        dest = destination(Coordinate(0.0, 179.0), EARTH_RADIUS_KM * np.radians(2.0), 90.0)
        self.assertAlmostEqual(dest.lon, 181.0, places=6)
        self.assertAlmostEqual(dest.wrapped().lon, -179.0, places=6)


class TestTrackDistances(GreatCircleTestCase):

    def setUp(self):
        super().setUp()
        self.path_start = Coordinate(0.0, 0.0)
        self.path_end = Coordinate(0.0, 10.0)
        self.one_degree_km = EARTH_RADIUS_KM * np.pi / 180

    def test_cross_track_sign(self):
        left = cross_track_distance(Coordinate(1.0, 5.0), self.path_start, self.path_end)
        right = cross_track_distance(Coordinate(-1.0, 5.0), self.path_start, self.path_end)
        self.assertAlmostEqual(left, -self.one_degree_km, places=6)
        self.assertAlmostEqual(right, self.one_degree_km, places=6)

    def test_cross_track_movable_type_example(self):
        d = cross_track_distance(Coordinate(53.2611, -0.7972),
                                 Coordinate(53.3206, -1.7297), Coordinate(53.1887, 0.1334),
                                 radius=MOVABLE_TYPE_RADIUS_KM)
        self.assertAlmostEqual(d, -0.3075, delta=1e-3)

    def test_cross_track_same_point(self):
        self.assertEqual(cross_track_distance(self.ist, self.ist, self.jfk), 0.0)

    def test_along_track(self):
        ahead = along_track_distance_to(Coordinate(1.0, 5.0), self.path_start, self.path_end)
        behind = along_track_distance_to(Coordinate(1.0, -5.0), self.path_start, self.path_end)
        self.assertAlmostEqual(ahead, 5 * self.one_degree_km, places=6)
        self.assertAlmostEqual(behind, -5 * self.one_degree_km, places=6)

    def test_along_track_movable_type_example(self):
        d = along_track_distance_to(Coordinate(53.2611, -0.7972),
                                    Coordinate(53.3206, -1.7297), Coordinate(53.1887, 0.1334),
                                    radius=MOVABLE_TYPE_RADIUS_KM)
        self.assertAlmostEqual(d, 62.331, delta=1e-2)

    def test_along_track_same_point(self):
        self.assertEqual(along_track_distance_to(self.ist, self.ist, self.jfk), 0.0)

    def test_point_on_path(self):
        point = intermediate(self.ist, self.jfk, 0.4)
        self.assertAlmostEqual(along_track_distance_to(point, self.ist, self.jfk),
                               0.4 * distance(self.ist, self.jfk), places=5)


class TestLatitudeEnvelope(GreatCircleTestCase):

    def test_max_latitude(self):
        self.assertAlmostEqual(max_latitude(Coordinate(0.0, 0.0), 0.0), 90.0, places=9)
        self.assertAlmostEqual(max_latitude(Coordinate(0.0, 0.0), 90.0), 0.0, places=6)
        self.assertAlmostEqual(max_latitude(Coordinate(45.0, 10.0), 90.0), 45.0, places=9)
        self.assertAlmostEqual(max_latitude(Coordinate(0.0, 0.0), 30.0), 60.0, places=9)

    def test_max_latitude_bounds_intermediate_points(self):
        peak = max_latitude(self.ist, bearing(self.ist, self.jfk))
        for f in np.linspace(0.0, 1.0, 21):
            self.assertLessEqual(intermediate(self.ist, self.jfk, f).lat, peak + 1e-9)

    def test_crossing_equator(self):
        lons = crossing_parallels(Coordinate(0.0, 0.0), Coordinate(60.0, 90.0), 0.0)
        self.assertIsNotNone(lons)
        self.assertAlmostEqual(lons[0], 0.0, places=9)
        self.assertAlmostEqual(lons[1], 180.0, places=9)

    def test_crossings_lie_on_great_circle(self):
        start, end = Coordinate(0.0, 0.0), Coordinate(60.0, 90.0)
        lons = crossing_parallels(start, end, 30.0)
        self.assertIsNotNone(lons)
        for lon in lons:
            self.assertGreater(lon, -180.0)
            self.assertLessEqual(lon, 180.0)
            d = cross_track_distance(Coordinate(30.0, lon), start, end)
            self.assertAlmostEqual(d, 0.0, places=6)

    def test_no_crossing_above_max_latitude(self):
        start, end = Coordinate(0.0, 0.0), Coordinate(60.0, 90.0)
        peak = max_latitude(start, bearing(start, end))
        self.assertAlmostEqual(peak, 60.0, places=9)
        self.assertIsNone(crossing_parallels(start, end, peak + 1.0))
        self.assertIsNone(crossing_parallels(start, end, -(peak + 1.0)))
        self.assertIsNotNone(crossing_parallels(start, end, peak - 1.0))

    def test_istanbul_jfk_envelope(self):
        peak = max_latitude(self.ist, bearing(self.ist, self.jfk))
        self.assertIsNone(crossing_parallels(self.ist, self.jfk, peak + 0.5))
        self.assertIsNotNone(crossing_parallels(self.ist, self.jfk, peak - 0.5))

    def test_degenerate_circles(self):
        # equator through two equator points: never another parallel, no unique crossing on itself
        self.assertIsNone(crossing_parallels(Coordinate(0.0, 0.0), Coordinate(0.0, 30.0), 10.0))
        self.assertIsNone(crossing_parallels(Coordinate(0.0, 0.0), Coordinate(0.0, 30.0), 0.0))
        self.assertIsNone(crossing_parallels(self.ist, self.ist, 30.0))


if __name__ == '__main__':
    unittest.main()
