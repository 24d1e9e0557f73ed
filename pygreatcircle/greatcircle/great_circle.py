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

"""Configured great-circle engine"""

from typing import Optional

from ..config import GreatCircleConfig
from ..core.data_structures import Coordinate, apply_latitude_policy
from . import engine


class GreatCircle:
    """Great-circle computations bound to a configuration

    The object keeps no state besides its immutable configuration, so a single
    instance can be shared freely. Each method checks its coordinate inputs
    against the configured latitude policy, then delegates to
    ``pygreatcircle.greatcircle.engine`` with the configured radius,
    intersection threshold and midpoint convention.

    Examples
    --------
    >>> gc = GreatCircle()
    >>> ist = Coordinate(41.28111111, 28.75333333)
    >>> jfk = Coordinate(40.63980103, -73.77890015)
    >>> 300.0 < gc.bearing(ist, jfk) < 320.0
    True
    """

    def __init__(self, config: Optional[GreatCircleConfig] = None):
        """Initialize the engine

        Parameters:
        -----------
        config : GreatCircleConfig, optional
            Engine configuration (defaults when omitted)
        """
        self._config = config if config is not None else GreatCircleConfig()

    @property
    def config(self) -> GreatCircleConfig:
        """Engine configuration"""
        return self._config

    @property
    def radius(self) -> float:
        """Sphere radius (km)"""
        return self._config.earth_radius_km

    def _check(self, *coords: Coordinate) -> list[Coordinate]:
        return [apply_latitude_policy(c, self._config.latitude_policy) for c in coords]

    def distance(self, start: Coordinate, end: Coordinate) -> float:
        """Great-circle distance (km)"""
        start, end = self._check(start, end)
        return engine.distance(start, end, self.radius)

    def distance_in_nm(self, start: Coordinate, end: Coordinate) -> float:
        """Great-circle distance (nm)"""
        start, end = self._check(start, end)
        return engine.distance_in_nm(start, end, self.radius)

    def bearing(self, start: Coordinate, end: Coordinate) -> float:
        """Initial bearing in [0, 360) (deg)"""
        start, end = self._check(start, end)
        return engine.bearing(start, end)

    def final_bearing(self, start: Coordinate, end: Coordinate) -> float:
        """Final bearing in [0, 360) (deg)"""
        start, end = self._check(start, end)
        return engine.final_bearing(start, end)

    def midpoint(self, start: Coordinate, end: Coordinate) -> Coordinate:
        """Midpoint, using the configured convention"""
        start, end = self._check(start, end)
        return engine.midpoint(start, end, legacy=self._config.legacy_midpoint)

    def intermediate(self, start: Coordinate, end: Coordinate, fraction: float) -> Coordinate:
        """Point at ``fraction`` of the way from start to end"""
        start, end = self._check(start, end)
        return engine.intermediate(start, end, fraction)

    def intersection(self, first_point: Coordinate, first_bearing: float,
                     second_point: Coordinate, second_bearing: float) -> Optional[Coordinate]:
        """Intersection of two paths, or None"""
        first_point, second_point = self._check(first_point, second_point)
        return engine.intersection(first_point, first_bearing, second_point, second_bearing,
                                   threshold=self._config.coincident_threshold)

    def destination(self, start: Coordinate, distance_km: float, bearing_deg: float) -> Coordinate:
        """Destination after ``distance_km`` on ``bearing_deg``"""
        start, = self._check(start)
        return engine.destination(start, distance_km, bearing_deg, self.radius)

    def cross_track_distance(self, current: Coordinate, start: Coordinate,
                             end: Coordinate) -> float:
        """Signed cross-track distance (km), positive right of the path"""
        current, start, end = self._check(current, start, end)
        return engine.cross_track_distance(current, start, end, self.radius)

    def along_track_distance_to(self, current: Coordinate, start: Coordinate,
                                end: Coordinate) -> float:
        """Signed along-track distance (km)"""
        current, start, end = self._check(current, start, end)
        return engine.along_track_distance_to(current, start, end, self.radius)

    def max_latitude(self, start: Coordinate, bearing_deg: float) -> float:
        """Maximum latitude on the great circle (deg)"""
        start, = self._check(start)
        return engine.max_latitude(start, bearing_deg)

    def crossing_parallels(self, start: Coordinate, end: Coordinate,
                           latitude: float) -> Optional[tuple[float, float]]:
        """Longitudes where the great circle crosses ``latitude``, or None"""
        start, end = self._check(start, end)
        return engine.crossing_parallels(start, end, latitude)

    def __repr__(self) -> str:
        return f"GreatCircle({self._config!r})"
