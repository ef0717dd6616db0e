"""Core geometric types for stroke representation.

This module defines the fundamental geometric types used throughout strokefont:
- Point: A 2D point in design units
- BBox: An axis-aligned bounding box
- Stroke: An open polyline drawn in a single pen-down gesture

Design coordinates follow the drawing canvas: origin at the top-left corner of
the em square, x to the right, y pointing down.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D design space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate in design units
        y: Y coordinate in design units (pointing down)
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))


@dataclass(frozen=True, slots=True)
class BBox:
    """Axis-aligned bounding box.

    An empty box (no points) is represented with all coordinates at zero.
    """

    min_x: float = 0.0
    min_y: float = 0.0
    max_x: float = 0.0
    max_y: float = 0.0

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> "BBox":
        """Compute the bounding box of a set of points.

        Args:
            points: Points to enclose

        Returns:
            Bounding box, or the empty box if there are no points
        """
        xs: list[float] = []
        ys: list[float] = []
        for p in points:
            xs.append(p.x)
            ys.append(p.y)

        if not xs:
            return cls()

        return cls(min(xs), min(ys), max(xs), max(ys))

    def to_dict(self) -> dict[str, float]:
        return {
            "min_x": self.min_x,
            "min_y": self.min_y,
            "max_x": self.max_x,
            "max_y": self.max_y,
            "width": self.width,
            "height": self.height,
        }


@dataclass
class Stroke:
    """An open polyline drawn in one pen-down gesture.

    A stroke grows by `append` while the gesture continues and is replaced
    wholesale by its simplified form when the gesture ends.

    Attributes:
        points: Ordered points of the stroke
    """

    points: list[Point] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, index: int) -> Point:
        return self.points[index]

    def append(self, point: Point) -> None:
        """Add a sampled point to the end of the stroke."""
        self.points.append(point)

    def replace(self, points: list[Point]) -> None:
        """Replace all points (after simplification or undo)."""
        self.points = list(points)

    def bounding_box(self) -> BBox:
        """Calculate bounding box of the stroke.

        Returns:
            Bounding box of all points
        """
        return BBox.from_points(self.points)

    def copy(self) -> "Stroke":
        """Return an independent copy of this stroke."""
        return Stroke(points=list(self.points))

    def to_dict(self) -> list[dict[str, Any]]:
        """Serialize to a list of point dictionaries."""
        return [p.to_dict() for p in self.points]

    @classmethod
    def from_dict(cls, data: list[dict[str, Any]]) -> "Stroke":
        """Deserialize from a list of point dictionaries."""
        return cls(points=[Point.from_dict(p) for p in data])
