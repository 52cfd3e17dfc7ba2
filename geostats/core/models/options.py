"""
Distance computation options.

This module defines the configuration used by the ``distance`` dispatcher:
which great-circle formula to use and which unit the result is expressed in.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .units import validate_earth_radius

logger = logging.getLogger(__name__)


class DistanceMethod(Enum):
    """
    Great-circle distance formulas.

    Supported methods:
    - HAVERSINE: half-angle formula, stable for short distances
    - VINCENTY: atan2 formula on a sphere, stable up to antipodal points
    """
    HAVERSINE = "haversine"
    VINCENTY = "vincenty"


@dataclass
class DistanceOptions:
    """
    Configuration options for great-circle distances.

    Attributes:
        method: Distance formula (default: haversine)
        unit: Unit name looked up in the earth radius table (default: "m")
        earth_radius: Explicit radius; when None it is resolved from ``unit``.
            Results are expressed in the unit of this radius.
    """

    method: DistanceMethod = DistanceMethod.HAVERSINE
    unit: str = "m"
    earth_radius: Optional[float] = None

    def __post_init__(self):
        """Validate options after initialization."""
        if isinstance(self.method, str):
            try:
                self.method = DistanceMethod(self.method.lower())
            except ValueError:
                raise ValueError(f"Unknown distance method: {self.method}") from None

        if self.earth_radius is None:
            self.earth_radius = validate_earth_radius(self.unit)
            logger.debug("DistanceOptions resolved radius %s from unit %r", self.earth_radius, self.unit)
        elif self.earth_radius <= 0:
            raise ValueError("earth_radius must be positive")
        else:
            self.earth_radius = float(self.earth_radius)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize options to dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {
            "method": self.method.value,
            "unit": self.unit,
            "earth_radius": self.earth_radius,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DistanceOptions":
        """
        Create options from a dictionary.

        Missing keys fall back to the defaults.
        """
        return cls(
            method=data.get("method", DistanceMethod.HAVERSINE.value),
            unit=data.get("unit", "m"),
            earth_radius=data.get("earth_radius"),
        )
