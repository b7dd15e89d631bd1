"""Core data contracts for range points, keypoints, boxes, frames, and TTC output."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

import numpy as np

from exceptions import CalibrationError, KeypointIndexError

Point = Tuple[float, float]


@dataclass(frozen=True)
class RangePoint:
    x: float  # forward, meters
    y: float  # left, meters
    z: float  # up, meters
    intensity: float = 0.0


@dataclass(frozen=True)
class Roi:
    """Axis-aligned pixel rectangle with half-open containment."""

    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> Point:
        return (self.x + self.width / 2.0, self.y + self.height / 2.0)

    def contains(self, point: Point) -> bool:
        px, py = point
        return (
            self.x <= px < self.x + self.width
            and self.y <= py < self.y + self.height
        )

    def shrink(self, factor: float) -> "Roi":
        """Scale the rectangle by ``1 - factor`` about its center."""
        return Roi(
            x=self.x + factor * self.width / 2.0,
            y=self.y + factor * self.height / 2.0,
            width=self.width * (1.0 - factor),
            height=self.height * (1.0 - factor),
        )


@dataclass(frozen=True)
class Keypoint:
    x: float
    y: float

    @property
    def pt(self) -> Point:
        return (self.x, self.y)


def keypoint_at(keypoints: Sequence[Keypoint], index: int) -> Keypoint:
    """Index lookup that rejects negative and out-of-range indices."""
    if not 0 <= index < len(keypoints):
        raise KeypointIndexError(
            f"Keypoint index {index} outside sequence of {len(keypoints)}",
            index=index,
        )
    return keypoints[index]


@dataclass(frozen=True)
class Correspondence:
    prev_index: int
    curr_index: int
    distance: float


@dataclass
class BoundingBox:
    box_id: int
    roi: Roi
    range_points: List[RangePoint] = field(default_factory=list)
    kpt_matches: List[Correspondence] = field(default_factory=list)
    class_id: int = -1
    confidence: float = 0.0


@dataclass
class DataFrame:
    keypoints: List[Keypoint] = field(default_factory=list)
    bounding_boxes: List[BoundingBox] = field(default_factory=list)


@dataclass(frozen=True)
class CalibrationTriple:
    """Projection (3x4), rectification (3x3 or 4x4) and extrinsic (4x4 or 3x4)."""

    projection: np.ndarray
    rectification: np.ndarray
    extrinsic: np.ndarray

    def __post_init__(self) -> None:
        projection = np.asarray(self.projection, dtype=float)
        if projection.shape != (3, 4):
            raise CalibrationError(
                f"Projection matrix must be 3x4, got {projection.shape}",
                matrix_name="projection",
            )
        object.__setattr__(self, "projection", projection)
        object.__setattr__(
            self, "rectification", _embed_4x4(self.rectification, "rectification")
        )
        object.__setattr__(self, "extrinsic", _embed_4x4(self.extrinsic, "extrinsic"))

    @property
    def combined(self) -> np.ndarray:
        """3x4 matrix applying extrinsic, then rectification, then projection."""
        return self.projection @ self.rectification @ self.extrinsic


def _embed_4x4(matrix, name: str) -> np.ndarray:
    m = np.asarray(matrix, dtype=float)
    if m.shape == (4, 4):
        return m
    out = np.eye(4, dtype=float)
    if m.shape == (3, 3):
        out[:3, :3] = m
        return out
    if m.shape == (3, 4):
        out[:3, :] = m
        return out
    raise CalibrationError(f"{name} matrix must be 3x3, 3x4 or 4x4, got {m.shape}", matrix_name=name)


@dataclass(frozen=True)
class TtcEstimate:
    prev_box_id: int
    curr_box_id: int
    votes: int
    ttc_range: float
    ttc_camera: float

    @property
    def reliable_match(self) -> bool:
        return self.votes > 0

    def to_dict(self) -> dict:
        return {
            "prev_box_id": self.prev_box_id,
            "curr_box_id": self.curr_box_id,
            "votes": self.votes,
            "ttc_range": self.ttc_range,
            "ttc_camera": self.ttc_camera,
        }
