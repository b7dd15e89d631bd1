"""Tests for bounding box matching between frames."""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

from contracts import BoundingBox, Correspondence, DataFrame, Keypoint, Roi
from fusion.box_matching import BoxMatcher, match_bounding_boxes


def _frame(rois: List[Tuple[float, float, float, float]], points: List[Tuple[float, float]]) -> DataFrame:
    return DataFrame(
        keypoints=[Keypoint(x=u, y=v) for u, v in points],
        bounding_boxes=[BoundingBox(box_id=i, roi=Roi(*roi)) for i, roi in enumerate(rois)],
    )


LEFT = (0.0, 0.0, 100.0, 100.0)
RIGHT = (200.0, 0.0, 100.0, 100.0)


def test_unanimous_votes_pick_matching_box() -> None:
    prev_frame = _frame([LEFT, RIGHT], [(50.0, 50.0), (60.0, 40.0), (250.0, 50.0)])
    curr_frame = _frame([LEFT, RIGHT], [(250.0, 50.0), (260.0, 40.0), (50.0, 50.0)])
    matches = [
        Correspondence(prev_index=0, curr_index=0, distance=1.0),
        Correspondence(prev_index=1, curr_index=1, distance=1.0),
        Correspondence(prev_index=2, curr_index=2, distance=1.0),
    ]

    best = match_bounding_boxes(matches, prev_frame, curr_frame)

    assert best == {0: 1, 1: 0}


def test_no_correspondences_default_to_first_box() -> None:
    prev_frame = _frame([LEFT, RIGHT, LEFT], [])
    curr_frame = _frame([RIGHT, LEFT], [])

    assert match_bounding_boxes([], prev_frame, curr_frame) == {0: 0, 1: 0, 2: 0}


def test_ties_resolve_to_lowest_index() -> None:
    votes = np.array([[0, 3, 3], [2, 0, 2]])

    assert BoxMatcher().best_matches(votes) == {0: 1, 1: 0}


def test_overlapping_boxes_share_the_vote() -> None:
    prev_frame = _frame([LEFT, (50.0, 0.0, 100.0, 100.0)], [(75.0, 50.0)])
    curr_frame = _frame([LEFT, RIGHT], [(10.0, 10.0)])
    matches = [Correspondence(prev_index=0, curr_index=0, distance=1.0)]

    votes = BoxMatcher().count_votes(matches, prev_frame, curr_frame)

    np.testing.assert_array_equal(votes, [[1, 0], [1, 0]])


def test_correspondence_outside_all_boxes_casts_no_vote() -> None:
    prev_frame = _frame([LEFT], [(500.0, 500.0)])
    curr_frame = _frame([LEFT], [(50.0, 50.0)])
    matches = [Correspondence(prev_index=0, curr_index=0, distance=1.0)]

    votes = BoxMatcher().count_votes(matches, prev_frame, curr_frame)

    assert votes.sum() == 0


def test_more_current_boxes_than_previous() -> None:
    third = (400.0, 0.0, 100.0, 100.0)
    prev_frame = _frame([LEFT], [(50.0, 50.0)])
    curr_frame = _frame([LEFT, RIGHT, third], [(450.0, 50.0)])
    matches = [Correspondence(prev_index=0, curr_index=0, distance=1.0)]

    matcher = BoxMatcher()
    votes = matcher.count_votes(matches, prev_frame, curr_frame)

    assert votes.shape == (1, 3)
    assert matcher.best_matches(votes) == {0: 2}


def test_more_previous_boxes_than_current() -> None:
    third = (400.0, 0.0, 100.0, 100.0)
    prev_frame = _frame([LEFT, RIGHT, third], [(450.0, 50.0)])
    curr_frame = _frame([LEFT], [(50.0, 50.0)])
    matches = [Correspondence(prev_index=0, curr_index=0, distance=1.0)]

    votes = BoxMatcher().count_votes(matches, prev_frame, curr_frame)

    assert votes.shape == (3, 1)
    np.testing.assert_array_equal(votes[:, 0], [0, 0, 1])


def test_no_current_boxes_still_assigns_zero() -> None:
    prev_frame = _frame([LEFT, RIGHT], [(50.0, 50.0)])
    curr_frame = _frame([], [(50.0, 50.0)])
    matches = [Correspondence(prev_index=0, curr_index=0, distance=1.0)]

    assert match_bounding_boxes(matches, prev_frame, curr_frame) == {0: 0, 1: 0}


def test_no_previous_boxes_yields_empty_mapping() -> None:
    prev_frame = _frame([], [(50.0, 50.0)])
    curr_frame = _frame([LEFT], [(50.0, 50.0)])

    assert match_bounding_boxes([], prev_frame, curr_frame) == {}
