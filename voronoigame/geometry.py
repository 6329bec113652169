"""
Geometry
=========

The planar primitives everything else is built on: points, player owned
sites and the orientation, in-circle and circumcenter predicates.
"""
import math
from collections import namedtuple

__all__ = ('TOLERANCE', 'Point', 'Site', 'orientation', 'point_in_triangle',
           'incircle_determinant', 'in_circumcircle', 'circumcenter')

TOLERANCE = 1e-10
"""Absolute tolerance used for point equality, degenerate triangles and the
in-circle test.
"""


class Point(namedtuple('Point', ['x', 'y'])):
    """An immutable ``(x, y)`` pair of floats.

    Tuple equality (``==``) is exact. Use :meth:`isclose` for the tolerance
    based equality used by the triangulation.
    """

    __slots__ = ()

    def __new__(cls, x, y):
        return super(Point, cls).__new__(cls, float(x), float(y))

    def isclose(self, other, tolerance=TOLERANCE):
        """Whether both coordinates differ from ``other`` by less than
        ``tolerance``.
        """
        return (abs(self.x - other.x) < tolerance and
                abs(self.y - other.y) < tolerance)

    def distance(self, other):
        return math.hypot(self.x - other.x, self.y - other.y)


class Site(namedtuple('Site', ['x', 'y', 'owner'])):
    """A point placed by a player. ``owner`` is the player label.
    """

    __slots__ = ()

    def __new__(cls, x, y, owner):
        return super(Site, cls).__new__(cls, float(x), float(y), owner)

    @property
    def point(self):
        return Point(self.x, self.y)


def orientation(a, b, c):
    """Signed doubled area ``(b - a) x (c - a)``.

    Positive when ``a, b, c`` turn counter-clockwise, negative when they turn
    clockwise and zero when they are collinear.
    """
    return (b.x - a.x) * (c.y - a.y) - (c.x - a.x) * (b.y - a.y)


def point_in_triangle(p, a, b, c):
    """Whether ``p`` lies inside or on the boundary of triangle ``a, b, c``,
    for either winding of the triangle.
    """
    o1 = orientation(a, b, p)
    o2 = orientation(b, c, p)
    o3 = orientation(c, a, p)
    return (o1 >= 0 and o2 >= 0 and o3 >= 0) or \
        (o1 <= 0 and o2 <= 0 and o3 <= 0)


def incircle_determinant(a, b, c, d):
    """The determinant of the lifted 4x4 matrix with rows
    ``[x, y, x ** 2 + y ** 2, 1]`` for ``a, b, c, d``.

    It is expanded after translating every point by ``-d``, which leaves the
    value unchanged but keeps it exact for integer coordinates of moderate
    size. For counter-clockwise ``a, b, c`` it is positive exactly when ``d``
    lies inside their circumcircle.
    """
    adx, ady = a.x - d.x, a.y - d.y
    bdx, bdy = b.x - d.x, b.y - d.y
    cdx, cdy = c.x - d.x, c.y - d.y

    alift = adx * adx + ady * ady
    blift = bdx * bdx + bdy * bdy
    clift = cdx * cdx + cdy * cdy

    return (adx * (bdy * clift - cdy * blift) -
            ady * (bdx * clift - cdx * blift) +
            alift * (bdx * cdy - cdx * bdy))


def in_circumcircle(a, b, c, d, tolerance=TOLERANCE):
    """Whether ``d`` lies strictly inside the circumcircle of the
    counter-clockwise triangle ``a, b, c``.

    Points on the circle, or inside it by no more than ``tolerance``, are
    reported as outside, so an edge is only considered illegal when this
    returns True.
    """
    return incircle_determinant(a, b, c, d) > tolerance


def circumcenter(a, b, c, tolerance=TOLERANCE):
    """The center of the circle through ``a, b, c``, or None when the
    triangle is degenerate (coincident or collinear vertices).
    """
    if a.isclose(b, tolerance) or b.isclose(c, tolerance) or \
            c.isclose(a, tolerance):
        return None

    d = 2 * (a.x * (b.y - c.y) + b.x * (c.y - a.y) + c.x * (a.y - b.y))
    if abs(d) < tolerance:
        return None

    a2 = a.x * a.x + a.y * a.y
    b2 = b.x * b.x + b.y * b.y
    c2 = c.x * c.x + c.y * c.y
    ux = a2 * (b.y - c.y) + b2 * (c.y - a.y) + c2 * (a.y - b.y)
    uy = a2 * (c.x - b.x) + b2 * (a.x - c.x) + c2 * (b.x - a.x)
    return Point(ux / d, uy / d)
