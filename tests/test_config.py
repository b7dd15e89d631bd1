from pathlib import Path

import pytest

from configs.settings import default_config, load_config
from exceptions import ConfigError, ConfigValidationError, InvalidConfigError

DEFAULT_CONFIG = Path(__file__).resolve().parent.parent / "configs" / "default.yaml"


def test_load_config() -> None:
    config = load_config(DEFAULT_CONFIG)

    assert config.association.shrink_factor == pytest.approx(0.10)
    assert config.association.outlier_mean_multiplier == pytest.approx(0.8)
    assert config.ttc.frame_rate_hz == pytest.approx(10.0)
    assert config.ttc.lane_half_width_m == pytest.approx(2.0)
    assert config.ttc.min_pixel_distance == pytest.approx(100.0)


def test_default_config_matches_default_file() -> None:
    assert load_config(DEFAULT_CONFIG) == default_config()


def test_missing_optional_values_are_filled(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("association: {}\nttc:\n  frame_rate_hz: 20\n")

    config = load_config(path)

    assert config.ttc.frame_rate_hz == 20
    assert config.ttc.lane_half_width_m == 2.0
    assert config.association.shrink_factor == 0.10


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(InvalidConfigError):
        load_config(tmp_path / "absent.yaml")


def test_malformed_yaml_raises(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("association: [unclosed\n")

    with pytest.raises(InvalidConfigError):
        load_config(path)


def test_out_of_range_shrink_factor_fails_validation(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("association:\n  shrink_factor: 1.0\nttc:\n  frame_rate_hz: 10\n")

    with pytest.raises(ConfigValidationError) as excinfo:
        load_config(path)

    assert any("shrink_factor" in msg for msg in excinfo.value.validation_errors)


def test_missing_frame_rate_fails_validation(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("association: {}\nttc: {}\n")

    with pytest.raises(ConfigError):
        load_config(path)


def test_unknown_key_fails_validation(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("association:\n  shrink: 0.2\nttc:\n  frame_rate_hz: 10\n")

    with pytest.raises(ConfigValidationError):
        load_config(path)
