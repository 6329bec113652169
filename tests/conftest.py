import matplotlib
matplotlib.use('Agg')

import numpy as np
import pytest

from voronoigame.geometry import Point, orientation, in_circumcircle
from voronoigame.mapping.delaunay import Triangulation, bounding_triangle


def random_points(n, seed, size=100.):
    rng = np.random.default_rng(seed)
    return [Point(x, y) for x, y in rng.uniform(0, size, (n, 2))]


def assert_delaunay(triangulation):
    """Checks every interior edge directly with the in-circle test."""
    mesh = triangulation.mesh
    vertices = mesh.vertices
    for t in mesh.triangles():
        for e in mesh.edges(t):
            d = mesh.opposite_vertex(e)
            if d is None:
                continue
            a, b = mesh.origin[e], mesh.destination(e)
            if a < 3 and b < 3:
                continue
            c = mesh.origin[mesh.prev[e]]
            assert not in_circumcircle(
                vertices[a], vertices[b], vertices[c], vertices[d])


def is_convex_quad(a, b, c, d):
    """Whether diagonal a-b and c-d cross, i.e. the quad a, c, b, d is
    strictly convex."""
    return orientation(a, b, c) * orientation(a, b, d) < 0 and \
        orientation(c, d, a) * orientation(c, d, b) < 0


@pytest.fixture
def triangulation():
    return Triangulation(bounding_triangle(100., 3.), validate=True)


@pytest.fixture
def filled_triangulation():
    t = Triangulation(bounding_triangle(100., 3.), validate=True)
    for p in random_points(30, seed=42):
        t.insert(p)
    return t
