"""Per-frame-pair orchestration of association, box matching, and TTC."""

from __future__ import annotations

import time
from typing import List, Optional, Sequence

from configs.settings import AppConfig, default_config
from contracts import CalibrationTriple, Correspondence, DataFrame, RangePoint, TtcEstimate
from fusion.box_matching import BoxMatcher
from fusion.keypoint_association import cluster_kpt_matches_with_roi
from fusion.range_association import cluster_range_points_with_roi
from log_config.logger import get_logger, log_performance
from ttc.camera_ttc import compute_ttc_camera
from ttc.range_ttc import compute_ttc_range

logger = get_logger(__name__)


class TtcPipeline:
    """Runs the fusion steps for two consecutive frames.

    Frames are prepared once when they arrive (range points attached to
    boxes); ``process`` then matches boxes against the previous frame and
    estimates both TTCs for every matched pair. No state is kept between
    calls.
    """

    def __init__(
        self,
        calibration: CalibrationTriple,
        config: Optional[AppConfig] = None,
    ) -> None:
        self._calibration = calibration
        self._config = config or default_config()
        self._matcher = BoxMatcher()

    @property
    def config(self) -> AppConfig:
        return self._config

    def prepare_frame(self, frame: DataFrame, range_points: Sequence[RangePoint]) -> int:
        return cluster_range_points_with_roi(
            frame.bounding_boxes,
            range_points,
            self._config.association.shrink_factor,
            self._calibration,
        )

    def process(
        self,
        prev_frame: DataFrame,
        curr_frame: DataFrame,
        kpt_matches: Sequence[Correspondence],
    ) -> List[TtcEstimate]:
        start = time.perf_counter()
        ttc_cfg = self._config.ttc

        votes = self._matcher.count_votes(kpt_matches, prev_frame, curr_frame)
        best = self._matcher.best_matches(votes)

        estimates: List[TtcEstimate] = []
        if not curr_frame.bounding_boxes:
            logger.debug("Current frame has no bounding boxes; nothing to estimate")
            return estimates

        for prev_idx, curr_idx in best.items():
            prev_box = prev_frame.bounding_boxes[prev_idx]
            curr_box = curr_frame.bounding_boxes[curr_idx]
            n_votes = int(votes[prev_idx, curr_idx])

            ttc_range = compute_ttc_range(
                prev_box.range_points,
                curr_box.range_points,
                ttc_cfg.frame_rate_hz,
                ttc_cfg.lane_half_width_m,
            )
            cluster_kpt_matches_with_roi(
                curr_box,
                prev_frame.keypoints,
                curr_frame.keypoints,
                kpt_matches,
                self._config.association.outlier_mean_multiplier,
            )
            ttc_camera = compute_ttc_camera(
                prev_frame.keypoints,
                curr_frame.keypoints,
                curr_box.kpt_matches,
                ttc_cfg.frame_rate_hz,
                ttc_cfg.min_pixel_distance,
            )
            if n_votes == 0:
                logger.debug(f"Box {prev_box.box_id} defaulted to box {curr_box.box_id} without votes")
            estimates.append(
                TtcEstimate(
                    prev_box_id=prev_box.box_id,
                    curr_box_id=curr_box.box_id,
                    votes=n_votes,
                    ttc_range=ttc_range,
                    ttc_camera=ttc_camera,
                )
            )

        log_performance("ttc frame pair", (time.perf_counter() - start) * 1000.0)
        return estimates
