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

"""Engine configuration"""

from dataclasses import asdict, dataclass, fields
from typing import Any

from .core.constants import COINCIDENT_THRESHOLD, EARTH_RADIUS_KM, LEGACY_COINCIDENT_THRESHOLD
from .core.data_structures import LatitudePolicy


@dataclass(frozen=True)
class GreatCircleConfig:
    """Parameters for a configured ``GreatCircle`` engine.

    Attributes
    ----------
    earth_radius_km : float
        Sphere radius used by every distance-based computation (km)
    coincident_threshold : float
        Angular distance (rad) under which intersection start points are
        treated as the same point
    legacy_midpoint : bool
        Use the historical degree-valued midpoint formula
    latitude_policy : LatitudePolicy
        Treatment of input latitudes outside [-90, 90]

    Examples
    --------
    >>> config = GreatCircleConfig.from_dict({'latitude_policy': 'reject'})
    >>> config.latitude_policy
    <LatitudePolicy.REJECT: 'reject'>
    """
    earth_radius_km: float = EARTH_RADIUS_KM
    coincident_threshold: float = COINCIDENT_THRESHOLD
    legacy_midpoint: bool = False
    latitude_policy: LatitudePolicy = LatitudePolicy.PROPAGATE

    def __post_init__(self):
        if not self.earth_radius_km > 0:
            raise ValueError(f"earth_radius_km must be positive, got {self.earth_radius_km}")
        if self.coincident_threshold < 0:
            raise ValueError(f"coincident_threshold must be non-negative, got {self.coincident_threshold}")
        if not isinstance(self.latitude_policy, LatitudePolicy):
            # frozen dataclass, bypass __setattr__
            object.__setattr__(self, 'latitude_policy', _parse_policy(self.latitude_policy))

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> 'GreatCircleConfig':
        """Build a configuration from a dictionary

        Example config:
        {
            'earth_radius_km': 6371.0,
            'coincident_threshold': 1e-9,
            'legacy_midpoint': False,
            'latitude_policy': 'clamp'
        }

        Raises
        ------
        ValueError
            On unknown keys or invalid values
        """
        known = {f.name for f in fields(cls)}
        unknown = set(config) - known
        if unknown:
            raise ValueError(f"Unknown configuration keys: {sorted(unknown)}")
        return cls(**config)

    @classmethod
    def legacy(cls) -> 'GreatCircleConfig':
        """Configuration reproducing historical midpoint and intersection results"""
        return cls(coincident_threshold=LEGACY_COINCIDENT_THRESHOLD, legacy_midpoint=True)

    def to_dict(self) -> dict[str, Any]:
        """Export as a plain dictionary (policy as its string value)"""
        data = asdict(self)
        data['latitude_policy'] = self.latitude_policy.value
        return data


def _parse_policy(value) -> LatitudePolicy:
    try:
        return LatitudePolicy(str(value).lower())
    except ValueError:
        choices = [p.value for p in LatitudePolicy]
        raise ValueError(f"Unknown latitude policy: {value!r} (expected one of {choices})") from None


__all__ = ['GreatCircleConfig']
