"""Associate keypoint correspondences with a bounding box."""

from __future__ import annotations

from typing import List, Sequence

from contracts import BoundingBox, Correspondence, Keypoint, keypoint_at
from log_config.logger import get_logger

logger = get_logger(__name__)

DEFAULT_MEAN_MULTIPLIER = 0.8


def cluster_kpt_matches_with_roi(
    bounding_box: BoundingBox,
    kpts_prev: Sequence[Keypoint],
    kpts_curr: Sequence[Keypoint],
    kpt_matches: Sequence[Correspondence],
    mean_multiplier: float = DEFAULT_MEAN_MULTIPLIER,
) -> List[Correspondence]:
    """Replace ``bounding_box.kpt_matches`` with its inlier correspondences.

    A correspondence is kept when its current keypoint lies inside the box
    and its descriptor distance is below ``mean_multiplier`` times the mean
    distance of all correspondences inside the box.
    """
    in_roi = [
        match
        for match in kpt_matches
        if bounding_box.roi.contains(keypoint_at(kpts_curr, match.curr_index).pt)
    ]
    logger.debug(f"Found {len(in_roi)} matches within box {bounding_box.box_id} ROI")

    if not in_roi:
        bounding_box.kpt_matches = []
        return bounding_box.kpt_matches

    mean_dist = sum(match.distance for match in in_roi) / len(in_roi)
    threshold = mean_multiplier * mean_dist
    bounding_box.kpt_matches = [match for match in in_roi if match.distance < threshold]
    logger.debug(
        f"After thresholding {len(bounding_box.kpt_matches)} matches remained in box "
        f"{bounding_box.box_id} ROI (threshold {threshold:.3f})"
    )
    return bounding_box.kpt_matches
