"""Path segment types produced by arc detection.

A simplified stroke is partitioned into a sequence of straight line runs and
circular arcs. Both segment kinds keep the stroke points they cover, so
polyline-only outputs can reproduce the stroke exactly while motion-code
output uses the arc parameters.
"""

from dataclasses import dataclass
from typing import Any, Union

from strokefont.domain.stroke import Point


@dataclass
class LineSegment:
    """A straight polyline run.

    Attributes:
        points: Points visited in order
    """

    points: list[Point]

    @property
    def start(self) -> Point:
        return self.points[0]

    @property
    def end(self) -> Point:
        return self.points[-1]

    def to_dict(self) -> dict[str, Any]:
        return {"type": "line", "points": [p.to_dict() for p in self.points]}


@dataclass
class ArcSegment:
    """A circular arc fitted to a run of stroke points.

    Attributes:
        start: First point of the arc
        end: Last point of the arc
        center: Fitted circle center
        radius: Fitted circle radius
        clockwise: Winding in the coordinate system of the points
        points: Source points the arc was fitted to (start and end included)
    """

    start: Point
    end: Point
    center: Point
    radius: float
    clockwise: bool
    points: list[Point]

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "arc",
            "start": self.start.to_dict(),
            "end": self.end.to_dict(),
            "center": self.center.to_dict(),
            "radius": self.radius,
            "clockwise": self.clockwise,
        }


PathSegment = Union[LineSegment, ArcSegment]


def segments_to_polyline(segments: list[PathSegment]) -> list[Point]:
    """Join consecutive segments back into one polyline.

    Adjacent segments share their joint point, which is kept once.

    Args:
        segments: Segments in stroke order

    Returns:
        Points of the joined polyline
    """
    points: list[Point] = []
    for segment in segments:
        if points and segment.points and segment.points[0] == points[-1]:
            points.extend(segment.points[1:])
        else:
            points.extend(segment.points)
    return points
