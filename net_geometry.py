import math
from typing import Tuple

Point = Tuple[float, float]


# --- Расстояния на плоскости ---
def sqr(v: float) -> float:
    return v * v


def dist2(p: Point, q: Point) -> float:
    """Квадрат евклидова расстояния между точками."""
    return sqr(p[0] - q[0]) + sqr(p[1] - q[1])


def distance(p: Point, q: Point) -> float:
    return math.sqrt(dist2(p, q))


def distance_to_segment_squared(p: Point, a: Point, b: Point) -> float:
    """
    Квадрат расстояния от точки p до ближайшей точки отрезка [a, b].
    Проекция ограничивается отрезком, а не бесконечной прямой.
    """
    l2 = dist2(a, b)
    if l2 == 0:
        return dist2(p, a)
    t = ((p[0] - a[0]) * (b[0] - a[0]) + (p[1] - a[1]) * (b[1] - a[1])) / l2
    t = max(0.0, min(1.0, t))
    return dist2(p, (a[0] + t * (b[0] - a[0]), a[1] + t * (b[1] - a[1])))


def distance_to_segment(p: Point, a: Point, b: Point) -> float:
    return math.sqrt(distance_to_segment_squared(p, a, b))
