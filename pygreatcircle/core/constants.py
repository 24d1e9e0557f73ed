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

"""Great-circle navigation constants"""

import math

# Earth model
EARTH_RADIUS_KM = 6372.8  # mean Earth radius (km)

# Unit conversions
KM_TO_NM = 0.539956803    # kilometers to nautical miles
NM_TO_KM = 1.0 / KM_TO_NM  # nautical miles to kilometers

# Angular limits (deg)
MAX_LATITUDE = 90.0
MIN_LATITUDE = -90.0

# Angular distance (rad) under which two intersection start points are
# treated as coincident
COINCIDENT_THRESHOLD = 1e-9
LEGACY_COINCIDENT_THRESHOLD = math.e

# Route sampling
DEFAULT_ROUTE_POINTS = 50

__all__ = [
    'EARTH_RADIUS_KM', 'KM_TO_NM', 'NM_TO_KM',
    'MAX_LATITUDE', 'MIN_LATITUDE',
    'COINCIDENT_THRESHOLD', 'LEGACY_COINCIDENT_THRESHOLD',
    'DEFAULT_ROUTE_POINTS',
]
