"""Custom exception classes for the TTC fusion core."""

from __future__ import annotations

from typing import Optional


class FusionError(Exception):
    """Base exception for all fusion errors."""

    pass


class CalibrationError(FusionError):
    """Raised when calibration matrices have an unusable shape."""

    def __init__(self, message: str, matrix_name: Optional[str] = None):
        self.matrix_name = matrix_name
        super().__init__(message)


class InvalidParameterError(FusionError, ValueError):
    """Raised when a scalar algorithm parameter is out of range."""

    pass


class AssociationError(FusionError):
    """Base exception for association errors."""

    pass


class KeypointIndexError(AssociationError, IndexError):
    """Raised when a correspondence references a keypoint that does not exist."""

    def __init__(self, message: str, index: Optional[int] = None):
        self.index = index
        super().__init__(message)


class ConfigError(FusionError):
    """Base exception for configuration errors."""

    pass


class InvalidConfigError(ConfigError):
    """Raised when configuration file is invalid or corrupted."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when configuration fails schema validation."""

    def __init__(self, message: str, validation_errors: Optional[list] = None):
        self.validation_errors = validation_errors or []
        super().__init__(message)
