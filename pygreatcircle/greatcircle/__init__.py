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

"""
Great-circle navigation on a spherical Earth.

Functions
---------
distance, distance_in_nm : function
    Haversine distance in kilometers / nautical miles
bearing, final_bearing : function
    Initial and final bearing between two points
midpoint, intermediate : function
    Points along the great circle between two points
intersection : function
    Crossing point of two paths given by start points and bearings
destination : function
    Point reached from a start point on a bearing after a distance
cross_track_distance, along_track_distance_to : function
    Position of a point relative to a path
max_latitude, crossing_parallels : function
    Latitude envelope of a great circle and where it crosses a parallel

Classes
-------
GreatCircle : class
    The same operations bound to a ``GreatCircleConfig``

Examples
--------
>>> from pygreatcircle.core import Coordinate
>>> from pygreatcircle.greatcircle import destination
>>> ist = Coordinate(41.28111111, 28.75333333)
>>> point = destination(ist, 168.0, 270.0)  # roughly 90 nm west
"""

from .engine import *
from .great_circle import GreatCircle
from .engine import __all__ as _engine_all

__all__ = list(_engine_all) + ['GreatCircle']
