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
pygreatcircle - Great-circle navigation on a spherical Earth

Distance, bearing, midpoint, intermediate points, path intersection,
destination projection, cross-track/along-track distance, maximum latitude
and parallel crossings for aviation and maritime navigation.
"""

__version__ = "1.0.0"
__author__ = "pygreatcircle Development Team"
__title__ = "pygreatcircle"
__description__ = "Great-circle navigation calculations on a spherical Earth"

from .config import GreatCircleConfig
from .core import *
from .greatcircle import *
# pygreatcircle.route (pandas) and pygreatcircle.plot (matplotlib) are imported explicitly
