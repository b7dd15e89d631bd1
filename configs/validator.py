"""Configuration validation using JSON Schema."""

from __future__ import annotations

from typing import Any, Dict

import jsonschema
from jsonschema import Draft7Validator, validators

from exceptions import ConfigValidationError
from log_config.logger import get_logger

logger = get_logger(__name__)

# JSON Schema for default.yaml configuration
CONFIG_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": ["association", "ttc"],
    "properties": {
        "association": {
            "type": "object",
            "properties": {
                "shrink_factor": {
                    "type": "number",
                    "minimum": 0.0,
                    "exclusiveMaximum": 1.0,
                    "default": 0.10,
                },
                "outlier_mean_multiplier": {
                    "type": "number",
                    "exclusiveMinimum": 0.0,
                    "maximum": 10.0,
                    "default": 0.8,
                },
            },
            "additionalProperties": False,
        },
        "ttc": {
            "type": "object",
            "required": ["frame_rate_hz"],
            "properties": {
                "frame_rate_hz": {"type": "number", "exclusiveMinimum": 0.0, "maximum": 1000.0},
                "lane_half_width_m": {
                    "type": "number",
                    "exclusiveMinimum": 0.0,
                    "maximum": 50.0,
                    "default": 2.0,
                },
                "min_pixel_distance": {
                    "type": "number",
                    "minimum": 0.0,
                    "maximum": 10000.0,
                    "default": 100.0,
                },
            },
            "additionalProperties": False,
        },
    },
}


def _with_defaults(validator_class):
    """Validator class that fills in ``default`` values while checking properties."""
    check_properties = validator_class.VALIDATORS["properties"]

    def fill_defaults(validator, properties, instance, schema):
        if isinstance(instance, dict):
            for prop, subschema in properties.items():
                if "default" in subschema:
                    instance.setdefault(prop, subschema["default"])
        yield from check_properties(validator, properties, instance, schema)

    return validators.extend(validator_class, {"properties": fill_defaults})


Draft7Validator.check_schema(CONFIG_SCHEMA)
DefaultingValidator = _with_defaults(Draft7Validator)


def _format_error(error: jsonschema.exceptions.ValidationError) -> str:
    location = ".".join(str(p) for p in error.absolute_path) or "root"
    return f"{location}: {error.message}"


def validate_config(config: Dict[str, Any]) -> None:
    """Validate configuration against the schema, filling in defaults in place.

    Args:
        config: Configuration dictionary

    Raises:
        ConfigValidationError: If configuration is invalid
    """
    errors = sorted(
        DefaultingValidator(CONFIG_SCHEMA).iter_errors(config),
        key=lambda e: list(map(str, e.absolute_path)),
    )
    if not errors:
        logger.debug("Configuration validation passed")
        return

    messages = [_format_error(error) for error in errors]
    for msg in messages:
        logger.error(f"Invalid configuration: {msg}")
    raise ConfigValidationError(
        f"Configuration validation failed with {len(messages)} error(s): {'; '.join(messages)}",
        validation_errors=messages,
    )


__all__ = ["validate_config", "CONFIG_SCHEMA"]
