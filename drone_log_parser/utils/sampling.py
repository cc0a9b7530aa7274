"""
Flight path downsampling.
"""

import math
from typing import List, Sequence, TypeVar

T = TypeVar('T')

DEFAULT_MAX_POINTS = 500


def sample_flight_path(points: Sequence[T], max_points: int = DEFAULT_MAX_POINTS) -> List[T]:
    """
    Reduce a point list to roughly ``max_points`` evenly strided points.

    The first and last points are always kept, so the result holds at most
    ``max_points + 1`` points.

    Args:
        points: Ordered flight points
        max_points: Target maximum number of points

    Returns:
        Sampled list of points
    """
    if max_points <= 0:
        raise ValueError("max_points must be positive")

    if len(points) <= max_points:
        return list(points)

    step = math.ceil(len(points) / max_points)
    sampled = list(points[::step])

    if (len(points) - 1) % step != 0:
        sampled.append(points[-1])

    return sampled
