"""
Geometry API
=============

Plain functions over the triangulation, regions and polygons, used by the
game front-ends and by tests.
"""

from voronoigame.mapping.delaunay import Triangulation
from voronoigame.mapping.voronoi import build_voronoi
from voronoigame.utils import clip_polygon_to_rect, polygon_area

__all__ = ('bootstrap', 'insert', 'triangles', 'build_voronoi', 'clip',
           'area')


def bootstrap(a, b, c, **kwargs):
    """Creates a :class:`~voronoigame.mapping.delaunay.Triangulation` inside
    the bounding triangle ``a, b, c``.

    :raises ValueError: if the three points are collinear.
    """
    return Triangulation.bootstrap(a, b, c, **kwargs)


def insert(point, triangulation):
    """Inserts ``point`` into ``triangulation``. Duplicate points and points
    outside the triangulation are ignored.
    """
    triangulation.insert(point)


def triangles(triangulation):
    """The current triangles as 3-tuples of points.
    """
    return triangulation.triangles()


def clip(polygon, rect):
    """``polygon`` clipped to ``rect``, given as
    ``(x_min, y_min, x_max, y_max)``.
    """
    return clip_polygon_to_rect(polygon, rect)


def area(polygon):
    return polygon_area(polygon)
