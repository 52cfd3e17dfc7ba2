"""Normalise assorted coordinate representations to (lon, lat).

Coordinates arrive from many sources with different key names and axis
orders. ``coords_from`` takes the value plus a short format string describing
it and returns a GeoJSON-ordered ``(lon, lat)`` tuple:

    >>> coords_from({"latitude": 51.05, "longitude": 34.4}, "{latitude, longitude}")
    (34.4, 51.05)
"""

from __future__ import annotations

from typing import Any, Mapping

_LAT_FIRST_SEQUENCE = {"[latitude,longitude]", "[lat,lng]", "[lat,lon]", "[lat,long]"}
_LON_FIRST_SEQUENCE = {"[longitude,latitude]", "[lng,lat]", "[lon,lat]", "[long,lat]"}

_MAPPING_KEYS = {
    "{longitude,latitude}": ("longitude", "latitude"),
    "{latitude,longitude}": ("longitude", "latitude"),
    "{lon,lat}": ("lon", "lat"),
    "{lat,lon}": ("lon", "lat"),
    "{lat,lng}": ("lng", "lat"),
    "{lng,lat}": ("lng", "lat"),
    "{long,lat}": ("long", "lat"),
    "{lat,long}": ("long", "lat"),
}


def _normalise_format(fmt: str) -> str:
    return "".join(fmt.split()).lower()


def coords_from(coords: Any, fmt: str = "[lat,lng]") -> Any:
    """Convert ``coords`` described by ``fmt`` to a ``(lon, lat)`` tuple.

    Recognised formats (spaces and case are ignored):
      - ``[lat,lng]`` and its spellings: a lat-first sequence
      - ``[lng,lat]`` and its spellings: a lon-first sequence
      - ``{latitude,longitude}``, ``{lat,lon}``, ``{lat,lng}``, ``{lat,long}``
        (either key order): a mapping
      - ``geojson``: a Point feature, read from ``geometry.coordinates``

    Unrecognised formats return ``coords`` unchanged.
    """
    key = _normalise_format(fmt)
    if key in _LAT_FIRST_SEQUENCE:
        return (float(coords[1]), float(coords[0]))
    if key in _LON_FIRST_SEQUENCE:
        return (float(coords[0]), float(coords[1]))
    if key in _MAPPING_KEYS:
        lon_key, lat_key = _MAPPING_KEYS[key]
        mapping: Mapping[str, Any] = coords
        return (float(mapping[lon_key]), float(mapping[lat_key]))
    if key == "geojson":
        xy = coords["geometry"]["coordinates"]
        return (float(xy[0]), float(xy[1]))
    return coords
