"""Match bounding boxes between consecutive frames by correspondence voting."""

from __future__ import annotations

from typing import Dict, List, Sequence

import numpy as np

from contracts import BoundingBox, Correspondence, DataFrame, Point, keypoint_at
from log_config.logger import get_logger

logger = get_logger(__name__)


def _enclosing_boxes(boxes: Sequence[BoundingBox], point: Point) -> List[int]:
    return [i for i, box in enumerate(boxes) if box.roi.contains(point)]


class BoxMatcher:
    """Votes for (previous box, current box) pairs that share correspondences."""

    def count_votes(
        self,
        kpt_matches: Sequence[Correspondence],
        prev_frame: DataFrame,
        curr_frame: DataFrame,
    ) -> np.ndarray:
        """Return a ``(n_prev, n_curr)`` vote matrix.

        A correspondence enclosed by several boxes on either side votes for
        every combination of them.
        """
        prev_boxes = prev_frame.bounding_boxes
        curr_boxes = curr_frame.bounding_boxes
        votes = np.zeros((len(prev_boxes), len(curr_boxes)), dtype=int)
        if votes.size == 0:
            return votes

        for match in kpt_matches:
            prev_pt = keypoint_at(prev_frame.keypoints, match.prev_index).pt
            curr_pt = keypoint_at(curr_frame.keypoints, match.curr_index).pt
            prev_ids = _enclosing_boxes(prev_boxes, prev_pt)
            if not prev_ids:
                continue
            curr_ids = _enclosing_boxes(curr_boxes, curr_pt)
            if not curr_ids:
                continue
            votes[np.ix_(prev_ids, curr_ids)] += 1
        return votes

    def best_matches(self, votes: np.ndarray) -> Dict[int, int]:
        """Pick the current box with the most votes for each previous box.

        Ties go to the lowest current index. A previous box without any votes,
        or with no current boxes at all, maps to index 0.
        """
        n_prev = votes.shape[0]
        if votes.shape[1] == 0:
            return {i: 0 for i in range(n_prev)}
        # argmax returns the first maximum, and 0 for an all-zero row
        best = np.argmax(votes, axis=1)
        return {i: int(best[i]) for i in range(n_prev)}

    def match(
        self,
        kpt_matches: Sequence[Correspondence],
        prev_frame: DataFrame,
        curr_frame: DataFrame,
    ) -> Dict[int, int]:
        votes = self.count_votes(kpt_matches, prev_frame, curr_frame)
        best = self.best_matches(votes)
        for prev_id, curr_id in best.items():
            logger.debug(f"Box {prev_id} matches box {curr_id}")
        return best


def match_bounding_boxes(
    kpt_matches: Sequence[Correspondence],
    prev_frame: DataFrame,
    curr_frame: DataFrame,
) -> Dict[int, int]:
    return BoxMatcher().match(kpt_matches, prev_frame, curr_frame)
