"""Time-to-collision from range points in the ego lane."""

from __future__ import annotations

import math
from typing import Iterable, List

from contracts import RangePoint
from exceptions import InvalidParameterError
from log_config.logger import get_logger

logger = get_logger(__name__)

DEFAULT_LANE_HALF_WIDTH_M = 2.0


def frame_interval(frame_rate: float) -> float:
    if frame_rate <= 0:
        raise InvalidParameterError(f"Frame rate must be positive, got {frame_rate}")
    return 1.0 / frame_rate


def _in_lane_x(points: Iterable[RangePoint], lane_half_width: float) -> List[float]:
    return [p.x for p in points if abs(p.y) <= lane_half_width]


def compute_ttc_range(
    points_prev: Iterable[RangePoint],
    points_curr: Iterable[RangePoint],
    frame_rate: float,
    lane_half_width: float = DEFAULT_LANE_HALF_WIDTH_M,
) -> float:
    """Constant-velocity TTC from the mean forward distance of in-lane points.

    The mean (not the closest point) is used so a single stray return cannot
    dominate the estimate.

    Returns:
        TTC in seconds, ``math.inf`` when the mean distance did not change,
        or ``math.nan`` when either frame has no in-lane points.
    """
    dt = frame_interval(frame_rate)

    prev_x = _in_lane_x(points_prev, lane_half_width)
    curr_x = _in_lane_x(points_curr, lane_half_width)
    if not prev_x or not curr_x:
        logger.debug(
            f"No in-lane range points (prev={len(prev_x)}, curr={len(curr_x)})"
        )
        return math.nan

    mean_prev = sum(prev_x) / len(prev_x)
    mean_curr = sum(curr_x) / len(curr_x)
    closing = mean_prev - mean_curr
    if closing == 0.0:
        return math.inf

    ttc = mean_curr * dt / closing
    logger.debug(
        f"Range TTC {ttc:.3f}s from mean x {mean_prev:.3f}m -> {mean_curr:.3f}m"
    )
    return ttc
