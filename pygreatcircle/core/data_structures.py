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

"""Core data structures for great-circle navigation"""

import logging
from dataclasses import dataclass, replace
from enum import Enum

import numpy as np

from .angles import wrap180
from .constants import MAX_LATITUDE, MIN_LATITUDE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Coordinate:
    """Geographic position on a spherical Earth.

    Attributes
    ----------
    lat : float
        Latitude in degrees, expected in [-90, 90]
    lon : float
        Longitude in degrees, canonically (-180, 180] but not enforced

    Notes
    -----
    Equality is exact floating-point equality on ``(lat, lon)``; there is no
    tolerance. Engine functions rely on this for their same-point branches.

    Examples
    --------
    >>> ist = Coordinate(41.28111111, 28.75333333)  # Istanbul Airport
    >>> ist == Coordinate(41.28111111, 28.75333333)
    True
    """
    lat: float
    lon: float

    @property
    def lat_rad(self) -> float:
        """Latitude in radians"""
        return float(np.radians(self.lat))

    @property
    def lon_rad(self) -> float:
        """Longitude in radians"""
        return float(np.radians(self.lon))

    @classmethod
    def from_radians(cls, lat: float, lon: float) -> 'Coordinate':
        """Create a coordinate from latitude/longitude in radians"""
        return cls(float(np.degrees(lat)), float(np.degrees(lon)))

    @classmethod
    def from_array(cls, arr: np.ndarray) -> 'Coordinate':
        """Create a coordinate from ``[lat, lon]`` in degrees.

        Parameters
        ----------
        arr : np.ndarray
            Array-like with at least two elements (deg)

        Raises
        ------
        ValueError
            If fewer than two values are given
        """
        values = np.asarray(arr, dtype=float).ravel()
        if values.size < 2:
            raise ValueError(f"Coordinate needs [lat, lon], got {values.size} value(s)")
        return cls(float(values[0]), float(values[1]))

    def to_array(self) -> np.ndarray:
        """Return ``[lat, lon]`` in degrees"""
        return np.array([self.lat, self.lon])

    def wrapped(self) -> 'Coordinate':
        """Return the same position with longitude wrapped into (-180, 180]"""
        lon = wrap180(self.lon)
        if lon == self.lon:
            return self
        return replace(self, lon=lon)

    def is_valid_latitude(self) -> bool:
        """Check that latitude lies in [-90, 90]"""
        return MIN_LATITUDE <= self.lat <= MAX_LATITUDE


class LatitudePolicy(Enum):
    """Handling of latitudes outside [-90, 90]

    Attributes
    ----------
    PROPAGATE : str
        Use the value as given; formulas produce whatever they produce
    CLAMP : str
        Clamp latitude into [-90, 90]
    REJECT : str
        Raise ValueError
    """
    PROPAGATE = "propagate"
    CLAMP = "clamp"
    REJECT = "reject"


def apply_latitude_policy(coord: Coordinate,
                          policy: LatitudePolicy = LatitudePolicy.PROPAGATE) -> Coordinate:
    """
    Apply a latitude policy to a coordinate

    Parameters:
    -----------
    coord : Coordinate
        Input coordinate
    policy : LatitudePolicy
        How to treat an out-of-range latitude

    Returns:
    --------
    Coordinate
        ``coord`` itself when in range or when propagating, otherwise the
        clamped coordinate

    Raises:
    -------
    ValueError
        If latitude is out of range (or NaN) and policy is REJECT
    """
    if policy is LatitudePolicy.PROPAGATE or coord.is_valid_latitude():
        return coord

    if policy is LatitudePolicy.REJECT:
        raise ValueError(f"Latitude {coord.lat} outside [{MIN_LATITUDE}, {MAX_LATITUDE}]")

    lat = float(np.clip(coord.lat, MIN_LATITUDE, MAX_LATITUDE))
    logger.warning(f"Clamping latitude {coord.lat} to {lat}")
    return replace(coord, lat=lat)


__all__ = ['Coordinate', 'LatitudePolicy', 'apply_latitude_policy']
