"""Camera/range fusion: projection, association, and box matching."""

from .box_matching import BoxMatcher, match_bounding_boxes
from .keypoint_association import cluster_kpt_matches_with_roi
from .projection import Projector
from .range_association import cluster_range_points_with_roi

__all__ = [
    "BoxMatcher",
    "Projector",
    "cluster_kpt_matches_with_roi",
    "cluster_range_points_with_roi",
    "match_bounding_boxes",
]
