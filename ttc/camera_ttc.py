"""Time-to-collision from keypoint scale change between frames."""

from __future__ import annotations

import math
import sys
from itertools import combinations
from typing import Any, List, Optional, Sequence

from contracts import Correspondence, Keypoint, keypoint_at
from log_config.logger import get_logger
from ttc.range_ttc import frame_interval
from ttc.robust import median

logger = get_logger(__name__)

DEFAULT_MIN_PIXEL_DISTANCE = 100.0


def distance_ratios(
    kpts_prev: Sequence[Keypoint],
    kpts_curr: Sequence[Keypoint],
    kpt_matches: Sequence[Correspondence],
    min_dist: float = DEFAULT_MIN_PIXEL_DISTANCE,
) -> List[float]:
    """Current/previous pixel distance ratio for every unordered match pair."""
    pairs = [
        (keypoint_at(kpts_prev, m.prev_index), keypoint_at(kpts_curr, m.curr_index))
        for m in kpt_matches
    ]
    ratios: List[float] = []
    for (outer_prev, outer_curr), (inner_prev, inner_curr) in combinations(pairs, 2):
        dist_curr = math.hypot(outer_curr.x - inner_curr.x, outer_curr.y - inner_curr.y)
        dist_prev = math.hypot(outer_prev.x - inner_prev.x, outer_prev.y - inner_prev.y)
        # skip near-coincident pairs
        if dist_prev > sys.float_info.epsilon and dist_curr >= min_dist:
            ratios.append(dist_curr / dist_prev)
    return ratios


def compute_ttc_camera(
    kpts_prev: Sequence[Keypoint],
    kpts_curr: Sequence[Keypoint],
    kpt_matches: Sequence[Correspondence],
    frame_rate: float,
    min_dist: float = DEFAULT_MIN_PIXEL_DISTANCE,
    vis_img: Optional[Any] = None,
) -> float:
    """Constant-velocity TTC from the median keypoint distance ratio.

    Args:
        kpts_prev: Keypoints of the previous frame
        kpts_curr: Keypoints of the current frame
        kpt_matches: Correspondences clustered into one bounding box
        frame_rate: Sensor frame rate in Hz
        min_dist: Minimum current-frame pixel distance for a pair to count
        vis_img: Optional visualization sink, accepted and not drawn on

    Returns:
        TTC in seconds, ``math.inf`` when the median ratio is exactly 1,
        or ``math.nan`` when there are no matches or no usable pairs.
    """
    dt = frame_interval(frame_rate)
    if not kpt_matches:
        return math.nan

    ratios = distance_ratios(kpts_prev, kpts_curr, kpt_matches, min_dist)
    if not ratios:
        logger.debug(f"No distance ratios from {len(kpt_matches)} matches")
        return math.nan

    median_ratio = median(ratios)
    if median_ratio == 1.0:
        return math.inf

    ttc = -dt / (1.0 - median_ratio)
    logger.debug(
        f"Camera TTC {ttc:.3f}s from median ratio {median_ratio:.4f} over {len(ratios)} pairs"
    )
    return ttc
