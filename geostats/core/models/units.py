"""
Earth radius lookup by distance unit.

The radius table gives the mean Earth radius expressed in each unit, so a
great-circle distance computed with that radius comes out in the same unit.
"""

import logging
from typing import Dict

logger = logging.getLogger(__name__)


EARTH_RADII: Dict[str, float] = {
    "m": 6_371_008.7714,
    "meters": 6_371_008.7714,
    "metres": 6_371_008.7714,
    "km": 6_371.009,
    "kilometers": 6_371.009,
    "kilometres": 6_371.009,
    "mi": 3_958.761,
    "miles": 3_958.761,
    "nm": 3_440.070,
    "nauticalmiles": 3_440.070,
    "nuaticalmiles": 3_440.070,  # legacy misspelling still seen in stored configs
    "yd": 6_967_420.0,
    "yards": 6_967_420.0,
    "ft": 20_902_260.0,
    "feets": 20_902_260.0,
}


class UnknownUnitError(ValueError):
    """Raised when a distance unit name is not in ``EARTH_RADII``."""

    def __init__(self, unit: str):
        self.unit = unit
        super().__init__(f"Not a valid unit: {unit}")


def validate_earth_radius(unit: str) -> float:
    """
    Look up the Earth radius for a distance unit.

    Args:
        unit: Unit name, case-insensitive (e.g. "km", "Miles", "NM")

    Returns:
        Mean Earth radius expressed in that unit

    Raises:
        UnknownUnitError: If the unit is not recognized
    """
    key = str(unit).lower()
    if key not in EARTH_RADII:
        raise UnknownUnitError(unit)
    radius = EARTH_RADII[key]
    logger.debug("Resolved unit %r to earth radius %s", unit, radius)
    return radius
