"""
geostats - descriptive statistics and spherical geodesy helpers

Small, stateless numeric routines: summary statistics, z-score / p-value
conversion, order statistics, great-circle distances and point-in-region
tests.

Conventions:
- Coordinates: (longitude, latitude) in decimal degrees, GeoJSON order
- Distance: same unit as the Earth radius supplied (meters by default)
- Samples: 1-D sequences of finite floats; inputs are never modified
- Degenerate samples give NaN/inf rather than raising
"""

__version__ = "1.0.0"

from .core.models import GeoPoint, BoundingBox, DistanceOptions, DistanceMethod
from .core.models import UnknownUnitError, validate_earth_radius, WGS84_MEAN_RADIUS
from .core.statistics import (
    mean,
    variance,
    standard_deviation,
    sample_covariance,
    sample_correlation,
    z_score_to_p_value,
    p_value_to_z_score,
    percentile,
    quantile,
)
from .core.geodesy import haversine_distance, vincenty_distance, distance
from .core.geometry import point_in_bounding_box, point_in_polygon

__all__ = [
    # Version
    "__version__",

    # Models
    "GeoPoint",
    "BoundingBox",
    "DistanceOptions",
    "DistanceMethod",
    "UnknownUnitError",
    "validate_earth_radius",
    "WGS84_MEAN_RADIUS",

    # Statistics
    "mean",
    "variance",
    "standard_deviation",
    "sample_covariance",
    "sample_correlation",
    "z_score_to_p_value",
    "p_value_to_z_score",
    "percentile",
    "quantile",

    # Geodesy / geometry
    "haversine_distance",
    "vincenty_distance",
    "distance",
    "point_in_bounding_box",
    "point_in_polygon",
]
