"""Time-to-collision estimators."""

from .camera_ttc import compute_ttc_camera
from .range_ttc import compute_ttc_range
from .robust import median

__all__ = ["compute_ttc_camera", "compute_ttc_range", "median"]
