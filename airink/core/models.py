from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Optional, Tuple


class Gesture(Enum):
    DRAW = "draw"
    MOVE = "move"
    ERASE = "erase"
    STOP = "stop"


class StrokeKind(Enum):
    PEN = "pen"
    LINE = "line"
    RECTANGLE = "rectangle"
    ELLIPSE = "ellipse"
    ARROW = "arrow"  # declared for sinks, never produced by the recognizer


class Landmark(NamedTuple):
    """One hand landmark in normalized frame space (y grows downward)."""
    x: float
    y: float
    z: float = 0.0


class SmoothedPosition(NamedTuple):
    x: float
    y: float
    raw_x: float
    raw_y: float


class InkPoint(NamedTuple):
    x: float
    y: float
    pressure: float = 0.5


@dataclass(frozen=True)
class StrokeStyle:
    color: Tuple[int, int, int] = (0, 0, 255)  # BGR, red
    width: float = 6.0
    opacity: float = 1.0


@dataclass(frozen=True)
class FinishedStroke:
    """A classified stroke handed over to the drawing layer."""
    id: str
    kind: StrokeKind
    points: Tuple[InkPoint, ...]
    color: Tuple[int, int, int]
    width: float
    opacity: float
    timestamp: int  # ms since epoch

    @property
    def is_closed(self):
        return len(self.points) > 2 and self.points[0][:2] == self.points[-1][:2]

    def to_dict(self):
        return {
            "id": self.id,
            "type": self.kind.value,
            "points": [{"x": p.x, "y": p.y, "pressure": p.pressure} for p in self.points],
            "color": list(self.color),
            "width": self.width,
            "opacity": self.opacity,
            "timestamp": self.timestamp,
        }


@dataclass
class FrameResult:
    """What one call to the pipeline produced."""
    gesture: Optional[Gesture] = None   # None when no hand was seen
    cursor: Optional[Tuple[float, float]] = None
    is_drawing: bool = False
    stroke: Optional[FinishedStroke] = None
    admitted: int = field(default=0)    # ink points appended this frame (0 or 1)
