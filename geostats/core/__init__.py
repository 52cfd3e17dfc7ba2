"""
Core module for geostats.

This module contains pure Python implementations (numpy only). Every function
is stateless: it reads its arguments and returns a new value.
"""

from .models import (
    GeoPoint,
    BoundingBox,
    EARTH_RADII,
    UnknownUnitError,
    validate_earth_radius,
    Ellipsoid,
    ELLIPSOIDS,
    WGS84_MEAN_RADIUS,
    DistanceOptions,
    DistanceMethod,
)

from .statistics import (
    sum_values,
    mean,
    variance,
    standard_deviation,
    median,
    mode,
    weighted_average,
    sample_covariance,
    sample_correlation,
    z_score,
    z_scores,
    z_score_to_p_value,
    p_value_to_z_score,
    percentile,
    quantile,
    quartile25,
    quartile50,
    quartile75,
    interquartile_range,
)

from .geodesy import (
    haversine_distance,
    vincenty_distance,
    vincenty_distance_km,
    distance,
    coords_from,
)

from .geometry import (
    point_in_bounding_box,
    point_in_polygon,
    point_in_polygon_winding_number,
    point_in_polygon_ray_cast,
)

__all__ = [
    # Models
    "GeoPoint",
    "BoundingBox",
    "EARTH_RADII",
    "UnknownUnitError",
    "validate_earth_radius",
    "Ellipsoid",
    "ELLIPSOIDS",
    "WGS84_MEAN_RADIUS",
    "DistanceOptions",
    "DistanceMethod",

    # Statistics
    "sum_values",
    "mean",
    "variance",
    "standard_deviation",
    "median",
    "mode",
    "weighted_average",
    "sample_covariance",
    "sample_correlation",
    "z_score",
    "z_scores",
    "z_score_to_p_value",
    "p_value_to_z_score",
    "percentile",
    "quantile",
    "quartile25",
    "quartile50",
    "quartile75",
    "interquartile_range",

    # Geodesy
    "haversine_distance",
    "vincenty_distance",
    "vincenty_distance_km",
    "distance",
    "coords_from",

    # Geometry
    "point_in_bounding_box",
    "point_in_polygon",
    "point_in_polygon_winding_number",
    "point_in_polygon_ray_cast",
]
