# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Great-circle computations on a spherical Earth

Every function here is a pure function of its arguments. Coordinates are in
degrees, bearings in degrees clockwise from true north, distances in
kilometers unless stated otherwise. Distance-based functions take the sphere
radius as a keyword so a configured radius can flow through; the default is
the mean Earth radius.

Latitudes outside [-90, 90] are not checked here and are fed to the formulas
as given. Use ``pygreatcircle.GreatCircle`` with a ``LatitudePolicy`` to clamp
or reject them.

The formulas follow Chris Veness' "Movable Type" geodesy collection.
"""

import logging
from typing import Optional

import numpy as np

from ..core.angles import clamp_unit, wrap180, wrap360
from ..core.constants import COINCIDENT_THRESHOLD, EARTH_RADIUS_KM, KM_TO_NM
from ..core.data_structures import Coordinate

logger = logging.getLogger(__name__)


def distance(start: Coordinate, end: Coordinate,
             radius: float = EARTH_RADIUS_KM) -> float:
    """
    Great-circle distance using the haversine formula

    Parameters:
    -----------
    start : Coordinate
        Initial point
    end : Coordinate
        Final point
    radius : float
        Sphere radius (km)

    Returns:
    --------
    float
        Distance (km)

    Examples:
    ---------
    >>> ist = Coordinate(41.28111111, 28.75333333)  # Istanbul Airport
    >>> jfk = Coordinate(40.63980103, -73.77890015)  # New York JFK
    >>> 8024.0 < distance(ist, jfk) < 8030.0
    True
    """
    dlat = np.radians(end.lat - start.lat)
    dlon = np.radians(end.lon - start.lon)

    a = np.sin(dlat / 2)**2 + \
        np.sin(dlon / 2)**2 * np.cos(start.lat_rad) * np.cos(end.lat_rad)
    c = 2 * np.arcsin(np.sqrt(np.clip(a, 0.0, 1.0)))

    return float(radius * c)


def distance_in_nm(start: Coordinate, end: Coordinate,
                   radius: float = EARTH_RADIUS_KM) -> float:
    """Great-circle distance in nautical miles"""
    return distance(start, end, radius) * KM_TO_NM


def bearing(start: Coordinate, end: Coordinate) -> float:
    """
    Initial bearing (forward azimuth) from start to end

    Following this bearing along the great-circle arc leads from start to end.

    Parameters:
    -----------
    start : Coordinate
        Initial point
    end : Coordinate
        Final point

    Returns:
    --------
    float
        Bearing from north in [0, 360) (deg); 0 when the points are equal
    """
    if start == end:
        return 0.0

    lat1, lat2 = start.lat_rad, end.lat_rad
    dlon = end.lon_rad - start.lon_rad

    y = np.sin(dlon) * np.cos(lat2)
    x = np.cos(lat1) * np.sin(lat2) - np.sin(lat1) * np.cos(lat2) * np.cos(dlon)
    theta = np.arctan2(y, x)

    return wrap360(float(np.degrees(theta)))


def final_bearing(start: Coordinate, end: Coordinate) -> float:
    """
    Bearing on arrival at end when travelling from start

    Parameters:
    -----------
    start : Coordinate
        Initial point
    end : Coordinate
        Final point

    Returns:
    --------
    float
        Bearing from north in [0, 360) (deg)
    """
    return wrap360(bearing(start, end) + 180.0)


def midpoint(start: Coordinate, end: Coordinate, legacy: bool = False) -> Coordinate:
    """
    Halfway point along the great circle between two points

    Parameters:
    -----------
    start : Coordinate
        Initial point
    end : Coordinate
        Final point
    legacy : bool
        Reproduce the historical behaviour that feeds degree values straight
        into the trigonometric functions. The result is then not a
        geographic midpoint; only use it to match old outputs.

    Returns:
    --------
    Coordinate
        Midpoint, longitude in (-180, 180]
    """
    if legacy:
        return _legacy_midpoint(start, end)

    lat1, lon1 = start.lat_rad, start.lon_rad
    lat2 = end.lat_rad
    dlon = np.radians(end.lon - start.lon)

    bx = np.cos(lat2) * np.cos(dlon)
    by = np.cos(lat2) * np.sin(dlon)

    lat = np.arctan2(np.sin(lat1) + np.sin(lat2),
                     np.sqrt((np.cos(lat1) + bx)**2 + by**2))
    lon = lon1 + np.arctan2(by, np.cos(lat1) + bx)

    return Coordinate(float(np.degrees(lat)), wrap180(float(np.degrees(lon))))


def _legacy_midpoint(start: Coordinate, end: Coordinate) -> Coordinate:
    dlon = end.lon - start.lon

    bx = np.cos(end.lat) * np.cos(dlon)
    by = np.cos(end.lat) * np.sin(dlon)

    lat = np.arctan2(np.sin(start.lat) + np.sin(end.lat),
                     np.sqrt((np.cos(start.lat) + bx)**2 + by**2))
    lon = start.lon + np.arctan2(by, np.cos(start.lat) + bx)

    return Coordinate(float(lat), float(lon))


def intermediate(start: Coordinate, end: Coordinate, fraction: float) -> Coordinate:
    """
    Point at a given fraction of the way from start to end

    Parameters:
    -----------
    start : Coordinate
        Initial point
    end : Coordinate
        Final point
    fraction : float
        0 gives start, 1 gives end

    Returns:
    --------
    Coordinate
        Intermediate point, longitude in (-180, 180]; ``start`` itself when
        the points are equal
    """
    if start == end:
        return start

    lat1, lon1 = start.lat_rad, start.lon_rad
    lat2, lon2 = end.lat_rad, end.lon_rad

    dlat = lat2 - lat1
    dlon = lon2 - lon1
    a = np.sin(dlat / 2)**2 + np.cos(lat1) * np.cos(lat2) * np.sin(dlon / 2)**2
    a = np.clip(a, 0.0, 1.0)
    delta = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))

    sin_delta = np.sin(delta)
    if sin_delta == 0.0:
        # Points too close together to interpolate between
        return start

    A = np.sin((1 - fraction) * delta) / sin_delta
    B = np.sin(fraction * delta) / sin_delta

    x = A * np.cos(lat1) * np.cos(lon1) + B * np.cos(lat2) * np.cos(lon2)
    y = A * np.cos(lat1) * np.sin(lon1) + B * np.cos(lat2) * np.sin(lon2)
    z = A * np.sin(lat1) + B * np.sin(lat2)

    lat = np.arctan2(z, np.sqrt(x**2 + y**2))
    lon = np.arctan2(y, x)

    return Coordinate.from_radians(lat, lon)


def intersection(first_point: Coordinate, first_bearing: float,
                 second_point: Coordinate, second_bearing: float,
                 threshold: float = COINCIDENT_THRESHOLD) -> Optional[Coordinate]:
    """
    Intersection of two paths given by start points and initial bearings

    Parameters:
    -----------
    first_point : Coordinate
        Start of the first path
    first_bearing : float
        Initial bearing of the first path (deg)
    second_point : Coordinate
        Start of the second path
    second_bearing : float
        Initial bearing of the second path (deg)
    threshold : float
        Angular distance between the start points (rad) under which they are
        treated as coincident and ``first_point`` is returned

    Returns:
    --------
    Optional[Coordinate]
        Intersection point with longitude in (-180, 180], or None when the
        paths never meet ahead of both start points
    """
    lat1, lon1 = first_point.lat_rad, first_point.lon_rad
    lat2, lon2 = second_point.lat_rad, second_point.lon_rad
    theta13 = np.radians(first_bearing)
    theta23 = np.radians(second_bearing)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    # angular distance p1-p2
    a = np.sin(dlat / 2)**2 + np.cos(lat1) * np.cos(lat2) * np.sin(dlon / 2)**2
    delta12 = 2 * np.arcsin(np.sqrt(np.clip(a, 0.0, 1.0)))
    if abs(delta12) < threshold:
        return first_point

    # initial/final bearings between points
    cos_theta_a = (np.sin(lat2) - np.sin(lat1) * np.cos(delta12)) / (np.sin(delta12) * np.cos(lat1))
    cos_theta_b = (np.sin(lat1) - np.sin(lat2) * np.cos(delta12)) / (np.sin(delta12) * np.cos(lat2))
    theta_a = np.arccos(clamp_unit(cos_theta_a))
    theta_b = np.arccos(clamp_unit(cos_theta_b))

    if np.sin(lon2 - lon1) > 0:
        theta12 = theta_a
        theta21 = 2 * np.pi - theta_b
    else:
        theta12 = 2 * np.pi - theta_a
        theta21 = theta_b

    # angles p2-p1-p3 and p1-p2-p3
    alpha1 = theta13 - theta12
    alpha2 = theta21 - theta23

    if np.sin(alpha1) == 0 and np.sin(alpha2) == 0:
        logger.debug("Paths lie on the same great circle, no unique intersection")
        return None
    if np.sin(alpha1) * np.sin(alpha2) < 0:
        logger.debug("Paths diverge, no intersection ahead of both start points")
        return None

    cos_alpha3 = -np.cos(alpha1) * np.cos(alpha2) + \
        np.sin(alpha1) * np.sin(alpha2) * np.cos(delta12)

    delta13 = np.arctan2(np.sin(delta12) * np.sin(alpha1) * np.sin(alpha2),
                         np.cos(alpha2) + np.cos(alpha1) * cos_alpha3)

    lat3 = np.arcsin(clamp_unit(np.sin(lat1) * np.cos(delta13) +
                                np.cos(lat1) * np.sin(delta13) * np.cos(theta13)))

    dlon13 = np.arctan2(np.sin(theta13) * np.sin(delta13) * np.cos(lat1),
                        np.cos(delta13) - np.sin(lat1) * np.sin(lat3))
    lon3 = lon1 + dlon13

    return Coordinate(float(np.degrees(lat3)), wrap180(float(np.degrees(lon3))))


def destination(start: Coordinate, distance_km: float, bearing_deg: float,
                radius: float = EARTH_RADIUS_KM) -> Coordinate:
    """
    Destination reached from start after travelling a distance on a bearing

    Parameters:
    -----------
    start : Coordinate
        Initial point
    distance_km : float
        Distance along the great circle (km)
    bearing_deg : float
        Initial bearing (deg)
    radius : float
        Sphere radius (km)

    Returns:
    --------
    Coordinate
        Destination point. Longitude is not wrapped; call
        ``Coordinate.wrapped`` when the canonical range is needed.
    """
    lat1, lon1 = start.lat_rad, start.lon_rad
    delta = distance_km / radius  # angular distance
    theta = np.radians(bearing_deg)

    sin_lat2 = np.sin(lat1) * np.cos(delta) + np.cos(lat1) * np.sin(delta) * np.cos(theta)
    lat2 = np.arcsin(clamp_unit(sin_lat2))

    y = np.sin(theta) * np.sin(delta) * np.cos(lat1)
    x = np.cos(delta) - np.sin(lat1) * sin_lat2
    lon2 = lon1 + np.arctan2(y, x)

    return Coordinate.from_radians(lat2, lon2)


def cross_track_distance(current: Coordinate, start: Coordinate, end: Coordinate,
                         radius: float = EARTH_RADIUS_KM) -> float:
    """
    Signed distance from a point to the great-circle path start->end

    Parameters:
    -----------
    current : Coordinate
        Point whose offset from the path is wanted
    start : Coordinate
        Start of the path
    end : Coordinate
        End of the path
    radius : float
        Sphere radius (km)

    Returns:
    --------
    float
        Distance (km); positive right of the path, negative left
    """
    if current == start:
        return 0.0

    delta13 = distance(start, current, radius) / radius
    theta13 = np.radians(bearing(start, current))
    theta12 = np.radians(bearing(start, end))

    delta_xt = np.arcsin(clamp_unit(np.sin(delta13) * np.sin(theta13 - theta12)))

    return float(delta_xt * radius)


def along_track_distance_to(current: Coordinate, start: Coordinate, end: Coordinate,
                            radius: float = EARTH_RADIUS_KM) -> float:
    """
    Distance along the path start->end to the point abeam of current

    If a perpendicular is dropped from ``current`` onto the path, this is the
    distance from ``start`` to its foot.

    Parameters:
    -----------
    current : Coordinate
        Off-path point
    start : Coordinate
        Start of the path
    end : Coordinate
        End of the path
    radius : float
        Sphere radius (km)

    Returns:
    --------
    float
        Distance (km); negative when the foot lies behind start
    """
    if current == start:
        return 0.0

    delta13 = distance(start, current, radius) / radius
    theta13 = np.radians(bearing(start, current))
    theta12 = np.radians(bearing(start, end))

    delta_xt = np.arcsin(clamp_unit(np.sin(delta13) * np.sin(theta13 - theta12)))
    delta_at = np.arccos(clamp_unit(np.cos(delta13) / abs(np.cos(delta_xt))))

    return float(delta_at * np.sign(np.cos(theta12 - theta13)) * radius)


def max_latitude(start: Coordinate, bearing_deg: float) -> float:
    """
    Maximum latitude reached on a great circle (Clairaut's formula)

    Negate the result for the minimum latitude in the southern hemisphere.
    The value does not depend on longitude.

    Parameters:
    -----------
    start : Coordinate
        Any point on the great circle
    bearing_deg : float
        Bearing at that point (deg)

    Returns:
    --------
    float
        Maximum latitude (deg)
    """
    theta = np.radians(bearing_deg)
    max_lat = np.arccos(clamp_unit(abs(np.sin(theta) * np.cos(start.lat_rad))))
    return float(np.degrees(max_lat))


def crossing_parallels(start: Coordinate, end: Coordinate,
                       latitude: float) -> Optional[tuple[float, float]]:
    """
    Longitudes where the great circle through two points crosses a parallel

    Parameters:
    -----------
    start : Coordinate
        First point on the great circle
    end : Coordinate
        Second point on the great circle
    latitude : float
        Latitude of the parallel (deg)

    Returns:
    --------
    Optional[tuple[float, float]]
        ``(lon1, lon2)`` in (-180, 180] (deg), or None if the great circle
        does not reach the latitude or is not defined by the two points
    """
    lat = np.radians(latitude)
    lat1, lon1 = start.lat_rad, start.lon_rad
    lat2 = end.lat_rad
    dlon = end.lon_rad - lon1

    x = np.sin(lat1) * np.cos(lat2) * np.cos(lat) * np.sin(dlon)
    y = np.sin(lat1) * np.cos(lat2) * np.cos(lat) * np.cos(dlon) - \
        np.cos(lat1) * np.sin(lat2) * np.cos(lat)
    z = np.cos(lat1) * np.cos(lat2) * np.sin(lat) * np.sin(dlon)

    xy2 = x * x + y * y
    if z * z > xy2:
        logger.debug(f"Great circle does not reach latitude {latitude}")
        return None
    if xy2 == 0.0:
        logger.debug("Great circle is degenerate, crossing longitudes undefined")
        return None

    lon_m = np.arctan2(-y, x)  # longitude at maximum latitude
    dlon_i = np.arccos(clamp_unit(z / np.sqrt(xy2)))

    lon_i1 = lon1 + lon_m - dlon_i
    lon_i2 = lon1 + lon_m + dlon_i

    return (wrap180(float(np.degrees(lon_i1))),
            wrap180(float(np.degrees(lon_i2))))


__all__ = [
    'distance', 'distance_in_nm', 'bearing', 'final_bearing',
    'midpoint', 'intermediate', 'intersection', 'destination',
    'cross_track_distance', 'along_track_distance_to',
    'max_latitude', 'crossing_parallels',
]
