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

"""Route sampling and leg tables for great-circle tracks"""

import logging
from collections.abc import Sequence
from typing import Optional

import numpy as np
import pandas as pd

from .core.constants import DEFAULT_ROUTE_POINTS, EARTH_RADIUS_KM, KM_TO_NM
from .core.data_structures import Coordinate
from .greatcircle.engine import bearing, distance, final_bearing, intermediate

logger = logging.getLogger(__name__)

ROUTE_COLUMNS = ['lat', 'lon', 'leg_km', 'leg_nm', 'cumulative_km',
                 'initial_bearing', 'final_bearing']


def sample_route(start: Coordinate, end: Coordinate,
                 num_points: int = DEFAULT_ROUTE_POINTS,
                 spacing_km: Optional[float] = None,
                 radius: float = EARTH_RADIUS_KM) -> list[Coordinate]:
    """
    Sample points along the great circle from start to end

    Parameters:
    -----------
    start : Coordinate
        Departure point
    end : Coordinate
        Arrival point
    num_points : int
        Number of points including both ends (ignored if spacing_km is set)
    spacing_km : Optional[float]
        Maximum spacing between consecutive points (km)
    radius : float
        Sphere radius (km)

    Returns:
    --------
    list[Coordinate]
        Evenly spaced points; the first is ``start`` and the last is ``end``

    Raises:
    -------
    ValueError
        If num_points < 2 or spacing_km is not positive
    """
    if spacing_km is not None:
        if not spacing_km > 0:
            raise ValueError(f"spacing_km must be positive, got {spacing_km}")
        total_km = distance(start, end, radius)
        num_points = max(2, int(np.ceil(total_km / spacing_km)) + 1)
    elif num_points < 2:
        raise ValueError(f"num_points must be at least 2, got {num_points}")

    fractions = np.linspace(0.0, 1.0, num_points)
    points = [intermediate(start, end, float(f)) for f in fractions[1:-1]]
    logger.debug(f"Sampled {num_points} points from {start} to {end}")

    return [start] + points + [end]


def route_table(waypoints: Sequence[Coordinate],
                radius: float = EARTH_RADIUS_KM) -> pd.DataFrame:
    """
    Build a leg-by-leg table for a sequence of waypoints

    Parameters:
    -----------
    waypoints : Sequence[Coordinate]
        Route waypoints in order of travel
    radius : float
        Sphere radius (km)

    Returns:
    --------
    pd.DataFrame
        One row per waypoint with columns ``lat``, ``lon``, ``leg_km``,
        ``leg_nm``, ``cumulative_km``, ``initial_bearing`` and
        ``final_bearing``. Leg values describe the leg arriving at the row's
        waypoint; the first row has zero distance and NaN bearings.

    Raises:
    -------
    ValueError
        If no waypoints are given
    """
    if len(waypoints) == 0:
        raise ValueError("Route needs at least one waypoint")

    n = len(waypoints)
    leg_km = np.zeros(n)
    initial = np.full(n, np.nan)
    final = np.full(n, np.nan)

    for i in range(1, n):
        prev, curr = waypoints[i - 1], waypoints[i]
        leg_km[i] = distance(prev, curr, radius)
        initial[i] = bearing(prev, curr)
        final[i] = final_bearing(prev, curr)

    return pd.DataFrame({
        'lat': [wp.lat for wp in waypoints],
        'lon': [wp.lon for wp in waypoints],
        'leg_km': leg_km,
        'leg_nm': leg_km * KM_TO_NM,
        'cumulative_km': np.cumsum(leg_km),
        'initial_bearing': initial,
        'final_bearing': final,
    }, columns=ROUTE_COLUMNS)


def route_summary(waypoints: Sequence[Coordinate],
                  radius: float = EARTH_RADIUS_KM) -> dict:
    """
    Total length and leg count of a route

    Returns:
    --------
    dict
        ``{'total_km': float, 'total_nm': float, 'legs': int}``
    """
    table = route_table(waypoints, radius)
    total_km = float(table['leg_km'].sum())
    return {
        'total_km': total_km,
        'total_nm': total_km * KM_TO_NM,
        'legs': len(table) - 1,
    }


__all__ = ['ROUTE_COLUMNS', 'sample_route', 'route_table', 'route_summary']
