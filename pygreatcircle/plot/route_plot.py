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

"""Route plotting for great-circle tracks"""

from collections.abc import Sequence
from typing import Optional

import numpy as np
from matplotlib.figure import Figure

from ..core.data_structures import Coordinate


def unwrap_longitudes(lon: np.ndarray) -> np.ndarray:
    """Remove 360 deg jumps so a track crossing the antimeridian draws continuously"""
    return np.degrees(np.unwrap(np.radians(np.asarray(lon, dtype=float))))


class RoutePlot:
    """Plot great-circle routes on a plain longitude/latitude chart"""

    def __init__(self):
        self._colors = [
            '#1f77b4',
            '#ff7f0e',
            '#2ca02c',
            '#d62728',
            '#9467bd',
            '#8c564b',
            '#e377c2',
            '#7f7f7f',
            '#bcbd22',
            '#17becf'
        ]
        self._title = ''
        self._groups = []

    @property
    def group_count(self) -> int:
        """Number of routes and point sets added so far"""
        return len(self._groups)

    def set_title(self, title: str):
        """
        Set the figure title

        Parameters:
        -----------
        title : str
            Desired title
        """
        self._title = title

    def add_route(self, waypoints: Sequence[Coordinate],
                  label: Optional[str] = None,
                  color: Optional[str] = None):
        """
        Add a route drawn as a line through its waypoints

        Parameters:
        -----------
        waypoints : Sequence[Coordinate]
            Route points, typically from ``pygreatcircle.route.sample_route``
        label : str, optional
            Label for legend
        color : str, optional
            Line color as hex code

        Raises:
        -------
        ValueError
            If fewer than two waypoints are given
        """
        if len(waypoints) < 2:
            raise ValueError(f"A route needs at least 2 waypoints, got {len(waypoints)}")
        self._add_group(waypoints, label, color, style='line')

    def add_points(self, points: Sequence[Coordinate],
                   label: Optional[str] = None,
                   color: Optional[str] = None):
        """
        Add individual points drawn as markers

        Raises:
        -------
        ValueError
            If no points are given
        """
        if len(points) == 0:
            raise ValueError("No points to add")
        self._add_group(points, label, color, style='marker')

    def _add_group(self, coords, label, color, style):
        index = len(self._groups)
        self._groups.append({
            'lat': np.array([c.lat for c in coords], dtype=np.float64),
            'lon': np.array([c.lon for c in coords], dtype=np.float64),
            'label': label if label is not None else f'group{index}',
            'color': color if color is not None else self._colors[index % len(self._colors)],
            'style': style,
        })

    def render(self) -> Figure:
        """Draw every group on a new figure and return it"""
        fig = Figure(figsize=(10, 6))
        ax = fig.add_subplot(1, 1, 1)

        for group in self._groups:
            if group['style'] == 'line':
                ax.plot(unwrap_longitudes(group['lon']), group['lat'],
                        color=group['color'], label=group['label'])
            else:
                ax.scatter(group['lon'], group['lat'],
                           color=group['color'], label=group['label'], zorder=3)

        ax.set_xlabel('Longitude [deg]')
        ax.set_ylabel('Latitude [deg]')
        ax.grid(True, linestyle=':')
        if self._title:
            ax.set_title(self._title)
        if self._groups:
            ax.legend()

        return fig

    def save(self, path: str, dpi: int = 150):
        """Render and write the figure to ``path``"""
        fig = self.render()
        fig.savefig(path, dpi=dpi)
