"""Group range points whose projection falls into the same bounding box."""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from contracts import BoundingBox, CalibrationTriple, RangePoint
from exceptions import InvalidParameterError
from fusion.projection import Projector
from log_config.logger import get_logger

logger = get_logger(__name__)


def cluster_range_points_with_roi(
    bounding_boxes: Sequence[BoundingBox],
    range_points: Sequence[RangePoint],
    shrink_factor: float,
    calibration: CalibrationTriple,
) -> int:
    """Attach each range point to the single box whose shrunk roi encloses it.

    Every box's ``range_points`` is cleared first, so calling this twice with
    the same inputs leaves the boxes in the same state. Points that project
    into no box, into overlapping boxes, or onto a degenerate pixel are
    dropped.

    Returns:
        Number of points attached to a box.
    """
    if not 0.0 <= shrink_factor < 1.0:
        raise InvalidParameterError(f"Shrink factor must be in [0, 1), got {shrink_factor}")

    for box in bounding_boxes:
        box.range_points = []
    if not range_points:
        return 0

    # shrink boxes to cut edge outliers
    smaller = [box.roi.shrink(shrink_factor) for box in bounding_boxes]
    pixels = Projector(calibration).project_points(range_points)

    attached = 0
    degenerate = 0
    ambiguous = 0
    for point, (u, v) in zip(range_points, pixels):
        if np.isnan(u):
            degenerate += 1
            continue
        enclosing: List[int] = [i for i, roi in enumerate(smaller) if roi.contains((u, v))]
        if len(enclosing) == 1:
            bounding_boxes[enclosing[0]].range_points.append(point)
            attached += 1
        elif len(enclosing) > 1:
            ambiguous += 1

    logger.debug(
        f"Attached {attached}/{len(range_points)} range points to {len(bounding_boxes)} boxes "
        f"({ambiguous} ambiguous, {degenerate} degenerate)"
    )
    return attached
