"""Synthetic time-to-collision demo: a vehicle ahead closing at 5 m/s."""

from __future__ import annotations

import json
from typing import List, Tuple

import numpy as np

from configs.settings import default_config
from contracts import (
    BoundingBox,
    CalibrationTriple,
    Correspondence,
    DataFrame,
    Keypoint,
    RangePoint,
    Roi,
)
from fusion.pipeline import TtcPipeline
from fusion.projection import Projector

# Lidar x forward, y left, z up -> camera x right, y down, z forward
LIDAR_TO_CAMERA = np.array(
    [
        [0.0, -1.0, 0.0, 0.0],
        [0.0, 0.0, -1.0, 0.0],
        [1.0, 0.0, 0.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ]
)
PROJECTION = np.array(
    [
        [1000.0, 0.0, 620.0, 0.0],
        [0.0, 1000.0, 190.0, 0.0],
        [0.0, 0.0, 1.0, 0.0],
    ]
)

REAR_FEATURES: List[Tuple[float, float]] = [
    (y, z) for y in (-0.75, -0.25, 0.25, 0.75) for z in (-0.4, 0.0, 0.4)
]


def rear_points(distance_m: float) -> List[RangePoint]:
    return [
        RangePoint(x=distance_m, y=float(y), z=float(z), intensity=0.5)
        for y in np.linspace(-0.8, 0.8, 9)
        for z in np.linspace(-0.5, 0.5, 5)
    ]


def build_frame(projector: Projector, distance_m: float) -> DataFrame:
    corners = [
        projector.project(RangePoint(x=distance_m, y=y, z=z))
        for y in (-1.0, 1.0)
        for z in (-0.7, 0.7)
    ]
    us = [c[0] for c in corners]
    vs = [c[1] for c in corners]
    box = BoundingBox(
        box_id=0,
        roi=Roi(x=min(us), y=min(vs), width=max(us) - min(us), height=max(vs) - min(vs)),
        class_id=2,
        confidence=0.9,
    )
    keypoints = []
    for y, z in REAR_FEATURES:
        u, v = projector.project(RangePoint(x=distance_m, y=y, z=z))
        keypoints.append(Keypoint(x=u, y=v))
    return DataFrame(keypoints=keypoints, bounding_boxes=[box])


def main() -> None:
    calibration = CalibrationTriple(
        projection=PROJECTION,
        rectification=np.eye(3),
        extrinsic=LIDAR_TO_CAMERA,
    )
    projector = Projector(calibration)
    pipeline = TtcPipeline(calibration, default_config())

    prev_frame = build_frame(projector, 10.0)
    curr_frame = build_frame(projector, 9.5)
    pipeline.prepare_frame(prev_frame, rear_points(10.0))
    pipeline.prepare_frame(curr_frame, rear_points(9.5))

    # features on the middle row carry poor descriptor scores
    kpt_matches = [
        Correspondence(prev_index=i, curr_index=i, distance=100.0 if i % 3 == 1 else 20.0)
        for i in range(len(REAR_FEATURES))
    ]
    estimates = pipeline.process(prev_frame, curr_frame, kpt_matches)
    print(json.dumps([estimate.to_dict() for estimate in estimates], indent=2))


if __name__ == "__main__":
    main()
