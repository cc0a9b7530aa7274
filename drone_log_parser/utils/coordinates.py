"""
Geospatial calculations on GPS points.

Distances use the haversine formula on a spherical Earth and are returned in
feet. Points may be NormalizedPoint objects or (lat, lng) tuples.
"""

import logging
from typing import Sequence, Tuple, Union, Any

import numpy as np

logger = logging.getLogger(__name__)

EARTH_RADIUS_FEET = 20902231.0


def is_valid_coordinate(lat: Any, lng: Any) -> bool:
    """
    Check whether a coordinate pair is a usable GPS fix.

    Args:
        lat: Latitude in degrees
        lng: Longitude in degrees

    Returns:
        True when both values are finite numbers within bounds and the pair is
        not exactly (0, 0)
    """
    if isinstance(lat, bool) or isinstance(lng, bool):
        return False
    if not isinstance(lat, (int, float, np.number)) or not isinstance(lng, (int, float, np.number)):
        return False
    if not (np.isfinite(lat) and np.isfinite(lng)):
        return False
    if not (-90 <= lat <= 90 and -180 <= lng <= 180):
        return False
    # Null island
    return not (lat == 0 and lng == 0)


def haversine_distance_feet(lat1, lng1, lat2, lng2):
    """
    Great-circle distance between two coordinates.

    Accepts scalars or numpy arrays.

    Args:
        lat1: Start latitude in degrees
        lng1: Start longitude in degrees
        lat2: End latitude in degrees
        lng2: End longitude in degrees

    Returns:
        Distance in feet
    """
    phi1 = np.radians(lat1)
    phi2 = np.radians(lat2)
    delta_phi = np.radians(np.subtract(lat2, lat1))
    delta_lambda = np.radians(np.subtract(lng2, lng1))

    a = (np.sin(delta_phi / 2) ** 2 +
         np.cos(phi1) * np.cos(phi2) * np.sin(delta_lambda / 2) ** 2)
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))

    distance = EARTH_RADIUS_FEET * c
    if np.ndim(distance) == 0:
        return float(distance)
    return distance


def _as_pair(point: Union[Tuple[float, float], Any]) -> Tuple[Any, Any]:
    if isinstance(point, (tuple, list)):
        return point[0], point[1]
    return point.latitude, point.longitude


def _to_arrays(points: Sequence[Any]) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    pairs = [_as_pair(point) for point in points]
    valid = np.array([is_valid_coordinate(lat, lng) for lat, lng in pairs], dtype=bool)
    lats = np.array([lat if ok else np.nan for (lat, _), ok in zip(pairs, valid)], dtype=float)
    lngs = np.array([lng if ok else np.nan for (_, lng), ok in zip(pairs, valid)], dtype=float)
    return lats, lngs, valid


def calculate_total_distance(points: Sequence[Any]) -> float:
    """
    Sum of distances between consecutive points.

    Pairs where either point is invalid are skipped.

    Args:
        points: Ordered GPS points

    Returns:
        Total distance in feet
    """
    if len(points) < 2:
        return 0.0

    lats, lngs, valid = _to_arrays(points)
    pair_valid = valid[:-1] & valid[1:]
    if not pair_valid.any():
        return 0.0

    segments = haversine_distance_feet(lats[:-1][pair_valid], lngs[:-1][pair_valid],
                                       lats[1:][pair_valid], lngs[1:][pair_valid])
    return float(np.sum(segments))


def calculate_max_distance_from_home(points: Sequence[Any]) -> float:
    """
    Largest distance from the home point (first valid point).

    Args:
        points: Ordered GPS points

    Returns:
        Maximum distance in feet, 0 when fewer than two valid points exist
    """
    if len(points) < 2:
        return 0.0

    lats, lngs, valid = _to_arrays(points)
    if valid.sum() < 2:
        return 0.0

    home_index = int(np.argmax(valid))
    rest = valid.copy()
    rest[:home_index + 1] = False

    distances = haversine_distance_feet(lats[home_index], lngs[home_index],
                                        lats[rest], lngs[rest])
    return float(np.max(distances))
