"""
Delaunay Triangulation
=======================

:class:`Triangulation` maintains the Delaunay triangulation of a growing
point set. It starts from a single bounding triangle enclosing the whole
field; every inserted point splits the triangle containing it and the
affected edges are then legalized by edge flips.
"""
import logging

import numpy as np

from voronoigame.geometry import TOLERANCE, Point, orientation, \
    in_circumcircle
from voronoigame.mesh import HalfEdgeMesh

__all__ = ('Triangulation', 'bounding_triangle')


def bounding_triangle(field_size=100., margin_factor=3.):
    """The default bounding triangle for a square field of ``field_size``,
    extending ``field_size * margin_factor`` beyond it on every side.
    """
    margin = field_size * margin_factor
    return (Point(-margin, -margin), Point(field_size + margin, -margin),
            Point(field_size / 2., field_size + margin))


class Triangulation(object):
    """An incrementally built Delaunay triangulation.
    """

    mesh = None
    """The :class:`~voronoigame.mesh.HalfEdgeMesh` holding the triangles.
    Vertices ``0, 1, 2`` are the :attr:`bounding` vertices.
    """

    bounding = ()
    """The three :class:`~voronoigame.geometry.Point` of the bounding triangle
    in counter-clockwise order.
    """

    tolerance = TOLERANCE
    """Tolerance of duplicate detection and of the in-circle test.
    """

    validate = False
    """When True, the mesh invariants are asserted after every insertion and
    flip.
    """

    max_flips_factor = 4
    """A single legalization stops after
    ``max_flips_factor * (len(self) + 1) ** 2`` flips.
    """

    flip_count = 0
    """Number of flips performed since creation.
    """

    def __init__(self, bounding, tolerance=TOLERANCE, validate=False,
                 **kwargs):
        super(Triangulation, self).__init__(**kwargs)
        self.tolerance = tolerance
        self.validate = validate
        self.flip_count = 0

        a, b, c = (Point(p[0], p[1]) for p in bounding)
        area = orientation(a, b, c)
        if abs(area) < tolerance:
            raise ValueError(
                'The bounding triangle {} is degenerate'.format((a, b, c)))
        if area < 0:
            b, c = c, b

        self.bounding = a, b, c
        self.mesh = mesh = HalfEdgeMesh()
        mesh.make_triangle(*[mesh.add_vertex(p) for p in (a, b, c)])

    @classmethod
    def bootstrap(cls, a, b, c, **kwargs):
        """Creates a triangulation from the three bounding points.

        :raises ValueError: if the points are collinear.
        """
        return cls((a, b, c), **kwargs)

    def __len__(self):
        return len(self.mesh)

    @property
    def points(self):
        """The inserted points, in insertion order.
        """
        return self.mesh.vertices[3:]

    def is_bounding_vertex(self, v):
        return v < 3

    def _check_mesh(self):
        if self.validate:
            self.mesh.validate()

    def insert(self, point):
        """Inserts ``point`` into the triangulation.

        A point equal (within :attr:`tolerance`) to an existing vertex, or
        outside the bounding triangle, is ignored.

        :returns: The vertex index of the new point, or None if it was
            ignored.
        """
        p = Point(point[0], point[1])
        mesh = self.mesh
        if mesh.find_vertex(p, self.tolerance) is not None:
            logging.debug('Ignoring duplicate point %s', p)
            return None

        t = mesh.locate_triangle(p)
        if t is None:
            logging.warning('Ignoring point %s outside the triangulation', p)
            return None

        a, b, c = mesh.triangle_vertices(t)
        v = mesh.add_vertex(p)
        mesh.remove_triangle(t)
        triangles = (
            mesh.make_triangle(a, b, v), mesh.make_triangle(b, c, v),
            mesh.make_triangle(c, a, v))
        mesh.reconcile_twins()
        self._check_mesh()
        logging.debug('Inserted %s as vertex %d, splitting triangle %d',
                      p, v, t)

        self.legalize([(a, b), (b, c), (c, a)], triangles)
        return v

    def find_edge(self, u, v, triangles=()):
        """Returns a live half-edge between vertices ``u`` and ``v``, or None.

        Both directions are tried in ``triangles`` before the whole mesh is
        searched.
        """
        find = self.mesh.find_edge
        for search in ((triangles, None) if triangles else (None, )):
            for edge in ((u, v), (v, u)):
                e = find(edge[0], edge[1], search)
                if e is not None:
                    return e
        return None

    def is_legal(self, e):
        """Whether half-edge ``e`` satisfies the Delaunay condition.

        Boundary edges and edges between two bounding vertices are always
        legal. Otherwise, the opposite vertex of the twin triangle must not
        be strictly inside the circumcircle of the triangle of ``e``.
        """
        mesh = self.mesh
        d = mesh.opposite_vertex(e)
        if d is None:
            return True

        a, b = mesh.origin[e], mesh.destination(e)
        if self.is_bounding_vertex(a) and self.is_bounding_vertex(b):
            return True

        c = mesh.origin[mesh.prev[e]]
        vertices = mesh.vertices
        return not in_circumcircle(
            vertices[a], vertices[b], vertices[c], vertices[d],
            self.tolerance)

    def flip(self, e):
        """Replaces the edge ``a -> b`` of ``e`` shared by triangles
        ``(a, b, c)`` and ``(b, a, d)`` with the edge ``c - d``.

        :returns: ``(a, b, c, d, new_triangles)``, or None if ``e`` has no
            usable twin triangle.
        """
        mesh = self.mesh
        d = mesh.opposite_vertex(e)
        if d is None:
            logging.debug('Skipping flip of boundary half-edge %d', e)
            return None

        a, b = mesh.origin[e], mesh.destination(e)
        c = mesh.origin[mesh.prev[e]]

        mesh.remove_triangle(mesh.face[e])
        mesh.remove_triangle(mesh.face[mesh.twin[e]])
        triangles = mesh.make_triangle(a, c, d), mesh.make_triangle(b, d, c)
        mesh.reconcile_twins()
        self._check_mesh()

        self.flip_count += 1
        logging.debug('Flipped edge %d-%d to %d-%d', a, b, c, d)
        return a, b, c, d, triangles

    def legalize(self, edges, triangles=()):
        """Restores the Delaunay condition starting from ``edges``.

        Edges are processed from a stack. Each illegal edge is flipped and
        the edges of the resulting quadrilateral are pushed in turn, until
        the stack is empty.

        :param edges: List of ``(u, v)`` vertex index pairs.
        :param triangles: The triangles in which the edges are looked up
            first.
        :returns: The number of flips performed.
        """
        stack = [(u, v, tuple(triangles)) for u, v in reversed(edges)]
        max_flips = self.max_flips_factor * (len(self) + 1) ** 2
        flips = 0

        while stack:
            u, v, near = stack.pop()
            e = self.find_edge(u, v, near)
            if e is None or self.is_legal(e):
                continue

            if flips >= max_flips:
                logging.warning(
                    'Stopped legalization after %d flips, the triangulation '
                    'may not be Delaunay', flips)
                break

            flipped = self.flip(e)
            if flipped is None:
                continue
            flips += 1

            a, b, c, d, new_triangles = flipped
            for edge in reversed(((a, c), (b, d), (c, d), (a, d), (c, b))):
                stack.append(edge + (new_triangles, ))

        return flips

    def is_delaunay(self):
        """Whether every interior edge satisfies the Delaunay condition.
        """
        mesh = self.mesh
        for t in mesh.triangles():
            for e in mesh.edges(t):
                if not self.is_legal(e):
                    return False
        return True

    def triangles(self, include_bounding=True):
        """Snapshot of the triangles as a list of 3-tuples of
        :class:`~voronoigame.geometry.Point`.

        :param include_bounding: If False, triangles touching a bounding
            vertex are left out.
        """
        mesh = self.mesh
        return [
            mesh.triangle_points(t) for t in mesh.triangles()
            if include_bounding or not any(
                self.is_bounding_vertex(v)
                for v in mesh.triangle_vertices(t))]

    def triangles_array(self, include_bounding=True):
        """Like :meth:`triangles`, but as a ``(n, 3, 2)`` float array.
        """
        return np.array(
            self.triangles(include_bounding),
            dtype=np.float64).reshape((-1, 3, 2))

    def vertex_triangles(self):
        """Maps every vertex index to the list of live triangles using it.
        """
        mesh = self.mesh
        incident = {v: [] for v in range(len(mesh.vertices))}
        for t in mesh.triangles():
            for v in mesh.triangle_vertices(t):
                incident[v].append(t)
        return incident
