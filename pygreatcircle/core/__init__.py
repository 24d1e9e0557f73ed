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

"""Core module.

Provides the building blocks shared by every great-circle computation:

- **Constants**: mean Earth radius, unit conversions and default thresholds
- **Angles**: bearing/longitude wrapping and inverse-trig argument clamping
- **Data Structures**: the immutable ``Coordinate`` value type and the
  latitude validation policy

Example Usage:
    >>> from pygreatcircle.core import *
    >>> Coordinate(40.0, 190.0).wrapped()
    Coordinate(lat=40.0, lon=-170.0)
"""

from .angles import *
from .constants import *
from .data_structures import *
