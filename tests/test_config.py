import math

import pytest

from airink.core.config import DEFAULT_CONFIG, ConfigError, InkConfig, InkSettings


def test_defaults():
    assert DEFAULT_CONFIG.history_size == 5
    assert DEFAULT_CONFIG.smoothing_factor == 0.08
    assert DEFAULT_CONFIG.draw_start_delay == 3
    assert DEFAULT_CONFIG.min_point_distance == 15.0
    assert DEFAULT_CONFIG.corner_angle_threshold == pytest.approx(math.pi / 4)
    assert DEFAULT_CONFIG.mirror is True
    assert DEFAULT_CONFIG.validate() is DEFAULT_CONFIG


def test_settings_defaults():
    settings = InkSettings()
    assert not settings.straight_line_mode
    assert settings.shape_recognition
    assert settings.style.color == (0, 0, 255)
    assert settings.style.opacity == 1.0


def test_with_overrides_returns_a_new_config():
    tuned = DEFAULT_CONFIG.with_overrides(min_point_distance=8, mirror=False)
    assert tuned.min_point_distance == 8
    assert not tuned.mirror
    assert DEFAULT_CONFIG.min_point_distance == 15.0


@pytest.mark.parametrize("overrides", [
    {"history_size": 0},
    {"min_point_distance": -1},
    {"screen_width": 0},
    {"draw_start_delay": -1},
    {"smoothing_factor": 0},
    {"smoothing_factor": 1.5},
])
def test_invalid_values_are_rejected(overrides):
    with pytest.raises(ConfigError):
        DEFAULT_CONFIG.with_overrides(**overrides)


def test_zero_start_delay_is_allowed():
    assert DEFAULT_CONFIG.with_overrides(draw_start_delay=0).draw_start_delay == 0


def test_from_env_reads_prefixed_variables():
    env = {
        "AIRINK_HISTORY_SIZE": "7",
        "AIRINK_SMOOTHING_FACTOR": " 0.25 ",
        "AIRINK_MIRROR": "off",
        "UNRELATED": "1",
    }
    config = InkConfig.from_env(environ=env)
    assert config.history_size == 7
    assert config.smoothing_factor == 0.25
    assert config.mirror is False
    assert config.min_point_distance == 15.0


@pytest.mark.parametrize("raw, expected", [
    ("1", True), ("TRUE", True), ("yes", True), ("on", True),
    ("0", False), ("False", False), ("no", False), ("OFF", False),
])
def test_from_env_bools(raw, expected):
    assert InkConfig.from_env(environ={"AIRINK_MIRROR": raw}).mirror is expected


def test_from_env_custom_prefix():
    config = InkConfig.from_env(prefix="INK_", environ={"INK_PINCH_THRESHOLD": "0.1"})
    assert config.pinch_threshold == 0.1


@pytest.mark.parametrize("env", [
    {"AIRINK_HISTORY_SIZE": "five"},
    {"AIRINK_HISTORY_SIZE": "2.5"},
    {"AIRINK_MIRROR": "maybe"},
    {"AIRINK_SIMPLIFY_TOLERANCE": ""},
])
def test_from_env_parse_errors(env):
    with pytest.raises(ConfigError):
        InkConfig.from_env(environ=env)


def test_from_env_validates():
    with pytest.raises(ConfigError, match="screen_height"):
        InkConfig.from_env(environ={"AIRINK_SCREEN_HEIGHT": "0"})


def test_config_error_is_a_value_error():
    assert issubclass(ConfigError, ValueError)
