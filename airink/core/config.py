import math
import os
from dataclasses import dataclass, field, fields, replace

from airink.core.models import StrokeStyle


class ConfigError(ValueError):
    """Raised when a tuning value makes the pipeline meaningless."""


_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class InkConfig:
    """
    Every tuning constant of the ink pipeline in one place.

    Distances are in canvas units, angles in radians. Corner detection
    (corner_window and its 2*window spacing rule) was tuned against the
    sampling density produced by min_point_distance, so change them together.
    """

    # smoothing
    history_size: int = 5               # frames in the moving average
    smoothing_factor: float = 0.08      # EMA factor on top of the average

    # drawing
    draw_start_delay: int = 3           # DRAW frames swallowed at gesture start
    min_point_distance: float = 15.0    # admission distance between ink points
    default_pressure: float = 0.5

    # gestures
    pinch_threshold: float = 0.05       # thumb-index distance, normalized

    # shape recognition
    min_shape_size: float = 20.0
    closure_threshold: float = 30.0
    circle_variance_threshold: float = 0.15
    circle_min_points: int = 8
    corner_window: int = 3
    corner_angle_threshold: float = math.pi / 4
    rectangle_angle_tolerance: float = 0.25  # ~14 degrees around 90
    line_straightness_ratio: float = 1.2
    circle_segments: int = 36

    # fallback snapping / simplification
    snap_angle_threshold: float = 0.2
    snap_deviation_ratio: float = 0.05
    snap_min_length: float = 20.0
    simplify_tolerance: float = 5.0

    # frame -> screen mapping for the cursor
    screen_width: int = 1280
    screen_height: int = 720
    mirror: bool = True

    def validate(self):
        positive = [
            "history_size", "min_point_distance", "min_shape_size",
            "closure_threshold", "circle_min_points", "corner_window",
            "circle_segments", "simplify_tolerance", "screen_width",
            "screen_height", "pinch_threshold",
        ]
        for name in positive:
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)!r}")
        if self.draw_start_delay < 0:
            raise ConfigError(f"draw_start_delay must be >= 0, got {self.draw_start_delay!r}")
        if not 0.0 < self.smoothing_factor <= 1.0:
            raise ConfigError(f"smoothing_factor must be in (0, 1], got {self.smoothing_factor!r}")
        return self

    def with_overrides(self, **overrides):
        return replace(self, **overrides).validate()

    @classmethod
    def from_env(cls, prefix="AIRINK_", environ=None):
        """Build a config where AIRINK_<FIELD> variables override defaults."""
        environ = os.environ if environ is None else environ
        overrides = {}
        for f in fields(cls):
            raw = environ.get(prefix + f.name.upper())
            if raw is None:
                continue
            overrides[f.name] = _parse(f.name, f.type, raw)
        return cls(**overrides).validate()


def _parse(name, kind, raw):
    # dataclass field types may be strings under postponed annotations
    kind = kind if isinstance(kind, str) else kind.__name__
    value = raw.strip()
    try:
        if kind == "bool":
            lowered = value.lower()
            if lowered in _TRUE:
                return True
            if lowered in _FALSE:
                return False
            raise ValueError(value)
        if kind == "int":
            return int(value)
        return float(value)
    except ValueError:
        raise ConfigError(f"cannot parse {name}={raw!r} as {kind}") from None


@dataclass
class InkSettings:
    """Per-session toggles the host flips from its UI."""
    straight_line_mode: bool = False
    shape_recognition: bool = True
    style: StrokeStyle = field(default_factory=StrokeStyle)


DEFAULT_CONFIG = InkConfig()
