"""Projection of range points into the camera image."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Tuple

import numpy as np

from contracts import CalibrationTriple, RangePoint


class Projector:
    def __init__(self, calibration: CalibrationTriple) -> None:
        self._calibration = calibration
        self._matrix = calibration.combined

    @property
    def calibration(self) -> CalibrationTriple:
        return self._calibration

    def project(self, point: RangePoint) -> Optional[Tuple[float, float]]:
        """Return the pixel for ``point`` or None if the homogeneous scale vanishes."""
        X = np.array([point.x, point.y, point.z, 1.0], dtype=float)
        u, v, w = self._matrix @ X
        if abs(w) <= sys.float_info.epsilon:
            return None
        return float(u / w), float(v / w)

    def project_points(self, points: Iterable[RangePoint]) -> np.ndarray:
        """Vectorized projection; degenerate points come back as NaN rows."""
        X = np.array([[p.x, p.y, p.z, 1.0] for p in points], dtype=float).reshape(-1, 4)
        Y = X @ self._matrix.T
        w = Y[:, 2]
        valid = np.abs(w) > sys.float_info.epsilon
        pixels = np.full((X.shape[0], 2), np.nan, dtype=float)
        pixels[valid] = Y[valid, :2] / w[valid, None]
        return pixels
