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

"""Angle normalization helpers

Bearings live in [0, 360) and longitudes in (-180, 180]. Both wrap functions
return in-range values untouched so repeated wrapping never accumulates
floating-point error.
"""

import numpy as np


def wrap360(degrees: float) -> float:
    """
    Wrap an angle into the bearing range [0, 360)

    Parameters:
    -----------
    degrees : float
        Angle (deg)

    Returns:
    --------
    float
        Equivalent angle in [0, 360) (deg)

    Examples:
    ---------
    >>> wrap360(370.0)
    10.0
    >>> wrap360(-10.0)
    350.0
    """
    if 0.0 <= degrees < 360.0:
        return degrees
    # sawtooth wave, period 360, amplitude 360
    return float((degrees % 360.0 + 360.0) % 360.0)


def wrap180(degrees: float) -> float:
    """
    Wrap an angle into the longitude range (-180, 180]

    Parameters:
    -----------
    degrees : float
        Angle (deg)

    Returns:
    --------
    float
        Equivalent angle in (-180, 180] (deg)

    Examples:
    ---------
    >>> wrap180(190.0)
    -170.0
    >>> wrap180(180.0)
    180.0
    """
    if -180.0 < degrees <= 180.0:
        return degrees
    # sawtooth wave, period 360, amplitude 180
    wrapped = float((degrees + 540.0) % 360.0 - 180.0)
    # -180 is outside the half-open range
    return 180.0 if wrapped == -180.0 else wrapped


def clamp_unit(value: float) -> float:
    """Clamp a value into [-1, 1] ahead of an inverse trigonometric call"""
    return float(np.clip(value, -1.0, 1.0))


__all__ = ['wrap360', 'wrap180', 'clamp_unit']
