"""
Reference constants for the Earth (and a few other bodies).

WGS84 values are those of the World Geodetic System 1984. The ellipsoid table
holds semi-major axis ``a``, semi-minor axis ``b`` (both meters) and
flattening ``f = (a - b) / a``.
"""

from dataclasses import dataclass
from typing import Dict


WGS84_MEAN_RADIUS = 6_371_000.0             # meters, used by haversine / web mercator
WGS84_RADIUS_MAJOR = 6_378_137.0            # equatorial radius (meters)
WGS84_RADIUS_MINOR = 6_356_752.314245       # polar radius (meters)
WGS84_FLATTENING = 1 / 298.257223563
WGS84_ECC_SQUARED = WGS84_FLATTENING * (2 - WGS84_FLATTENING)  # first eccentricity squared
WGS84_EQUATORIAL_CIRCUMFERENCE = 40_075_016.68557
WGS84_RADIUS_FACTOR = (
    WGS84_RADIUS_MAJOR ** 2 - WGS84_RADIUS_MINOR ** 2
) / WGS84_RADIUS_MINOR ** 2

# Mean radii used by other map tools, kilometers
GOOGLE_MEAN_RADIUS_KM = 6_371.0710
TURFJS_MEAN_RADIUS_KM = 6_371.0088
NASA_MEAN_RADIUS_KM = 6_371.0087714


@dataclass(frozen=True)
class Ellipsoid:
    """
    Reference ellipsoid.

    Attributes:
        name: Ellipsoid name
        a: Semi-major axis (meters)
        b: Semi-minor axis (meters)
        f: Flattening
    """

    name: str
    a: float
    b: float
    f: float

    @property
    def mean_radius(self) -> float:
        """IUGG mean radius (2a + b) / 3."""
        return (2.0 * self.a + self.b) / 3.0

    @property
    def eccentricity_squared(self) -> float:
        """First eccentricity squared, (a^2 - b^2) / a^2."""
        return (self.a ** 2 - self.b ** 2) / self.a ** 2


ELLIPSOIDS: Dict[str, Ellipsoid] = {
    "WGS84": Ellipsoid("WGS84", WGS84_RADIUS_MAJOR, WGS84_RADIUS_MINOR, WGS84_FLATTENING),
    "Sphere": Ellipsoid("Sphere", 6_378_137.0, 6_378_137.0, 0.0),
    "Airy1830": Ellipsoid("Airy1830", 6_377_563.396, 6_356_256.909, 1 / 299.3249646),
    "AiryModified": Ellipsoid("AiryModified", 6_377_340.189, 6_356_034.448, 1 / 299.3249646),
    "Mars": Ellipsoid("Mars", 6_792_400.0, 6_752_400.0, 1 / 170.0),
    "Moon": Ellipsoid("Moon", 1_737_400.0, 1_737_400.0, 0.0),
    "Sun": Ellipsoid("Sun", WGS84_RADIUS_MAJOR * 109, WGS84_RADIUS_MAJOR * 109, 0.0),
}
