"""Voronoi Game utilities
=========================

Clipping of polygons and segments against the axis aligned field rectangle,
and polygon area.
"""

__all__ = ('clip_polygon_to_rect', 'clip_segment_to_rect', 'polygon_area',
           'check_rect')

import numpy as np

from voronoigame.geometry import Point


def check_rect(rect):
    """Returns ``rect`` as a ``(x_min, y_min, x_max, y_max)`` tuple of floats,
    raising a :class:`ValueError` if it's empty.
    """
    x_min, y_min, x_max, y_max = map(float, rect)
    if x_min >= x_max or y_min >= y_max:
        raise ValueError('Invalid rectangle {}'.format(rect))
    return x_min, y_min, x_max, y_max


def _x_crossing(s, p, x):
    return Point(x, s.y + (p.y - s.y) * (x - s.x) / (p.x - s.x))


def _y_crossing(s, p, y):
    return Point(s.x + (p.x - s.x) * (y - s.y) / (p.y - s.y), y)


def clip_polygon_to_rect(polygon, rect):
    '''Clips a convex polygon to a rectangle.

    The polygon is clipped successively against the left, right, bottom and
    top half-planes of ``rect``. In each pass every polygon edge ``s -> p``
    emits the crossing point when it crosses the boundary, followed by ``p``
    when ``p`` is inside.

    :param polygon: List of points (anything with ``x`` and ``y``).
    :param rect: ``(x_min, y_min, x_max, y_max)``.
    :returns: The list of :class:`~voronoigame.geometry.Point` of the clipped
        polygon. Fewer than 3 points means nothing of the polygon is visible,
        and an empty list is returned as soon as a pass leaves fewer than 3.
    '''
    x_min, y_min, x_max, y_max = check_rect(rect)
    # (inside test, crossing point) per half-plane
    planes = [
        (lambda p: p.x >= x_min, lambda s, p: _x_crossing(s, p, x_min)),
        (lambda p: p.x <= x_max, lambda s, p: _x_crossing(s, p, x_max)),
        (lambda p: p.y >= y_min, lambda s, p: _y_crossing(s, p, y_min)),
        (lambda p: p.y <= y_max, lambda s, p: _y_crossing(s, p, y_max)),
    ]

    output = [Point(p.x, p.y) for p in polygon]
    for inside, crossing in planes:
        if len(output) < 3:
            return []

        vertices = output
        output = []
        s = vertices[-1]
        for p in vertices:
            if inside(p):
                if not inside(s):
                    output.append(crossing(s, p))
                output.append(p)
            elif inside(s):
                output.append(crossing(s, p))
            s = p

    return output if len(output) >= 3 else []


def clip_segment_to_rect(p1, p2, rect):
    """Clips the segment ``p1 -> p2`` to ``rect`` (Liang-Barsky).

    :returns: The clipped ``(q1, q2)`` points, or None if the segment lies
        outside the rectangle.
    """
    x_min, y_min, x_max, y_max = check_rect(rect)
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    t0, t1 = 0., 1.

    if dx:
        t_left = (x_min - p1.x) / dx
        t_right = (x_max - p1.x) / dx
        t0 = max(t0, min(t_left, t_right))
        t1 = min(t1, max(t_left, t_right))
    elif p1.x < x_min or p1.x > x_max:
        return None

    if dy:
        t_bottom = (y_min - p1.y) / dy
        t_top = (y_max - p1.y) / dy
        t0 = max(t0, min(t_bottom, t_top))
        t1 = min(t1, max(t_bottom, t_top))
    elif p1.y < y_min or p1.y > y_max:
        return None

    if t0 > t1:
        return None
    return (Point(p1.x + t0 * dx, p1.y + t0 * dy),
            Point(p1.x + t1 * dx, p1.y + t1 * dy))


def polygon_area(vertices):
    """Area of the closed polygon using the shoelace formula. It's zero for
    fewer than 3 vertices.
    """
    if len(vertices) < 3:
        return 0.

    xy = np.array([(p[0], p[1]) for p in vertices], dtype=np.float64)
    x, y = xy[:, 0], xy[:, 1]
    return float(abs(np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y)) / 2.)
