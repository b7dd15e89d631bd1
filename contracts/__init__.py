"""Shared data contracts for camera/range fusion."""

from .types import (
    BoundingBox,
    CalibrationTriple,
    Correspondence,
    DataFrame,
    Keypoint,
    RangePoint,
    Roi,
    Point,
    TtcEstimate,
    keypoint_at,
)

__all__ = [
    "BoundingBox",
    "CalibrationTriple",
    "Correspondence",
    "DataFrame",
    "Keypoint",
    "RangePoint",
    "Roi",
    "Point",
    "TtcEstimate",
    "keypoint_at",
]
