"""Internal Bezier curve flattening.

Helper for geometry.bezier_flatten. Not intended for public use.
"""

from strokefont.domain import Point

# Subdivision depth limit; 2**12 pieces is far below any sensible tolerance
_MAX_DEPTH = 12


def _lerp(a: Point, b: Point, t: float) -> Point:
    return Point(a.x + (b.x - a.x) * t, a.y + (b.y - a.y) * t)


def _split(points: list[Point]) -> tuple[list[Point], list[Point]]:
    """Split a Bezier curve of any degree at t=0.5 (De Casteljau)."""
    left = [points[0]]
    right = [points[-1]]
    level = points
    while len(level) > 1:
        level = [_lerp(level[k], level[k + 1], 0.5) for k in range(len(level) - 1)]
        left.append(level[0])
        right.append(level[-1])
    right.reverse()
    return left, right


def _flatness(points: list[Point]) -> float:
    """Largest distance of an inner control point from the chord.

    The curve lies inside the control polygon, so this bounds the flattening
    error.
    """
    p0, pn = points[0], points[-1]
    dx = pn.x - p0.x
    dy = pn.y - p0.y
    chord_sq = dx * dx + dy * dy

    worst = 0.0
    for p in points[1:-1]:
        if chord_sq == 0.0:
            d = ((p.x - p0.x) ** 2 + (p.y - p0.y) ** 2) ** 0.5
        else:
            d = abs(dy * (p.x - p0.x) - dx * (p.y - p0.y)) / chord_sq**0.5
        worst = max(worst, d)
    return worst


def flatten_curve(points: list[Point], tolerance: float, depth: int = 0) -> list[Point]:
    """Flatten a quadratic or cubic Bezier curve using recursive subdivision.

    Args:
        points: Control points [p0, ..., pn]
        tolerance: Maximum distance from true curve
        depth: Current recursion depth

    Returns:
        List of points approximating the curve
    """
    if depth >= _MAX_DEPTH or _flatness(points) <= tolerance:
        return [points[0], points[-1]]

    left, right = _split(points)

    # Combine, avoiding duplicate midpoint
    return flatten_curve(left, tolerance, depth + 1)[:-1] + flatten_curve(right, tolerance, depth + 1)
