"""
Half-Edge Mesh
===============

:class:`HalfEdgeMesh` is the doubly connected edge list storing the
triangles of a triangulation.

Vertices, half-edges and triangles live in flat lists and refer to each
other by integer index. A triangle owns the three consecutive half-edges
``3 * t``, ``3 * t + 1`` and ``3 * t + 2``. Removing a triangle only marks it
dead; its indices are never reused, so an index held by a caller keeps
pointing at the same (possibly dead) record.
"""

from voronoigame.geometry import TOLERANCE, orientation, point_in_triangle

__all__ = ('HalfEdgeMesh', 'NO_EDGE')

NO_EDGE = -1
"""Index stored in :attr:`HalfEdgeMesh.twin` for a half-edge on the boundary.
"""


class HalfEdgeMesh(object):
    """A triangle mesh as a half-edge arena.
    """

    vertices = []
    """List of :class:`~voronoigame.geometry.Point`, indexed by vertex id.
    """

    origin = []
    """Vertex index of the origin of each half-edge.
    """

    twin = []
    """Index of the opposite half-edge in the adjacent triangle, or
    :data:`NO_EDGE`. Only set by :meth:`reconcile_twins`.
    """

    next = []
    """Index of the next half-edge (counter-clockwise) of the same triangle.
    """

    prev = []
    """Index of the previous half-edge of the same triangle.
    """

    face = []
    """Index of the triangle owning each half-edge.
    """

    alive = []
    """For each triangle index, whether it's still part of the mesh.
    """

    _num_alive = 0

    def __init__(self, **kwargs):
        super(HalfEdgeMesh, self).__init__(**kwargs)
        self.vertices = []
        self.origin = []
        self.twin = []
        self.next = []
        self.prev = []
        self.face = []
        self.alive = []
        self._num_alive = 0

    def __len__(self):
        return self._num_alive

    def add_vertex(self, point):
        """Adds the point and returns its vertex index.
        """
        self.vertices.append(point)
        return len(self.vertices) - 1

    def find_vertex(self, point, tolerance=TOLERANCE):
        """Returns the index of the first vertex within ``tolerance`` of
        ``point``, or None.
        """
        for i, vertex in enumerate(self.vertices):
            if vertex.isclose(point, tolerance):
                return i
        return None

    def triangles(self):
        """Iterates over the indices of the live triangles.
        """
        return (t for t, alive in enumerate(self.alive) if alive)

    def edges(self, t):
        """The three half-edges of triangle ``t``, starting at its
        representative half-edge.
        """
        e = 3 * t
        return e, self.next[e], self.next[self.next[e]]

    def destination(self, e):
        return self.origin[self.next[e]]

    def triangle_vertices(self, t):
        """The vertex indices of triangle ``t`` in counter-clockwise order.
        """
        return tuple(self.origin[e] for e in self.edges(t))

    def triangle_points(self, t):
        vertices = self.vertices
        return tuple(vertices[v] for v in self.triangle_vertices(t))

    def make_triangle(self, a, b, c):
        """Creates a triangle from the vertex indices ``a, b, c``.

        The vertices are reordered counter-clockwise if needed. The three new
        half-edges are linked in a closed ``next``/``prev`` cycle; their twins
        are left unset until :meth:`reconcile_twins`.

        :returns: The index of the new triangle.
        """
        vertices = self.vertices
        if orientation(vertices[a], vertices[b], vertices[c]) < 0:
            b, c = c, b

        t = len(self.alive)
        e = 3 * t
        self.origin.extend((a, b, c))
        self.twin.extend((NO_EDGE, NO_EDGE, NO_EDGE))
        self.next.extend((e + 1, e + 2, e))
        self.prev.extend((e + 2, e, e + 1))
        self.face.extend((t, t, t))
        self.alive.append(True)
        self._num_alive += 1
        return t

    def remove_triangle(self, t):
        """Removes triangle ``t`` from the mesh. Twins referring to it are
        cleared by the next :meth:`reconcile_twins`.
        """
        if self.alive[t]:
            self.alive[t] = False
            self._num_alive -= 1

    def is_alive(self, t):
        return 0 <= t < len(self.alive) and self.alive[t]

    def reconcile_twins(self):
        """Recomputes all twin references.

        Every half-edge ``u -> v`` of a live triangle is matched with the
        half-edge ``v -> u``, if any.
        """
        twin = self.twin
        origin = self.origin
        seen = {}

        for t in self.triangles():
            for e in self.edges(t):
                twin[e] = NO_EDGE

        for t in self.triangles():
            for e in self.edges(t):
                key = origin[e], self.destination(e)
                other = seen.get((key[1], key[0]))
                if other is not None:
                    twin[e] = other
                    twin[other] = e
                else:
                    seen[key] = e

    def locate_triangle(self, point):
        """Returns the first live triangle containing ``point`` (boundary
        included), or None if it lies outside the mesh.
        """
        for t in self.triangles():
            a, b, c = self.triangle_points(t)
            if point_in_triangle(point, a, b, c):
                return t
        return None

    def find_edge(self, u, v, triangles=None):
        """Returns the half-edge ``u -> v`` of a live triangle, or None.

        :param triangles: If given, only these triangles are searched.
        """
        if triangles is None:
            triangles = self.triangles()

        origin = self.origin
        for t in triangles:
            if not self.is_alive(t):
                continue
            for e in self.edges(t):
                if origin[e] == u and self.destination(e) == v:
                    return e
        return None

    def opposite_vertex(self, e):
        """Vertex index of the twin triangle of ``e`` that is not on ``e``, or
        None when ``e`` has no twin or the twin triangle is degenerate.
        """
        twin = self.twin[e]
        if twin == NO_EDGE or not self.is_alive(self.face[twin]):
            return None

        u, v = self.origin[e], self.destination(e)
        for w in self.triangle_vertices(self.face[twin]):
            if w != u and w != v:
                return w
        return None

    def validate(self):
        """Asserts the structural invariants of every live triangle: closed
        3-cycles, face references, twin symmetry and counter-clockwise
        orientation.
        """
        vertices = self.vertices
        for t in self.triangles():
            edges = self.edges(t)
            for e in edges:
                assert self.next[self.next[self.next[e]]] == e
                assert self.prev[self.prev[self.prev[e]]] == e
                assert self.prev[self.next[e]] == e
                assert self.face[e] == t

                twin = self.twin[e]
                if twin != NO_EDGE:
                    assert self.alive[self.face[twin]]
                    assert self.twin[twin] == e
                    assert self.origin[twin] == self.destination(e)

            a, b, c = (vertices[self.origin[e]] for e in edges)
            assert orientation(a, b, c) >= 0
