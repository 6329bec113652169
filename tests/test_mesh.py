"""Tests for the half-edge mesh."""

import pytest

from voronoigame.geometry import Point, orientation
from voronoigame.mesh import HalfEdgeMesh, NO_EDGE


def make_mesh(*points):
    mesh = HalfEdgeMesh()
    for p in points:
        mesh.add_vertex(Point(*p))
    return mesh


class TestMakeTriangle:
    """Test triangle construction."""

    def test_closed_cycles(self):
        mesh = make_mesh((0, 0), (1, 0), (0.5, 1))
        t = mesh.make_triangle(0, 1, 2)

        for e in mesh.edges(t):
            assert mesh.next[mesh.next[mesh.next[e]]] == e
            assert mesh.prev[mesh.prev[mesh.prev[e]]] == e
            assert mesh.face[e] == t

    def test_twins_unset(self):
        mesh = make_mesh((0, 0), (1, 0), (0.5, 1))
        t = mesh.make_triangle(0, 1, 2)
        assert all(mesh.twin[e] == NO_EDGE for e in mesh.edges(t))

    def test_counter_clockwise_kept(self):
        mesh = make_mesh((0, 0), (1, 0), (0.5, 1))
        t = mesh.make_triangle(0, 1, 2)
        assert mesh.triangle_vertices(t) == (0, 1, 2)

    def test_clockwise_reordered(self):
        mesh = make_mesh((0, 0), (1, 0), (0.5, 1))
        t = mesh.make_triangle(0, 2, 1)

        assert mesh.triangle_vertices(t) == (0, 1, 2)
        assert orientation(*mesh.triangle_points(t)) > 0

    def test_count(self):
        mesh = make_mesh((0, 0), (1, 0), (0.5, 1), (1, 1))
        assert len(mesh) == 0
        mesh.make_triangle(0, 1, 2)
        t = mesh.make_triangle(1, 3, 2)
        assert len(mesh) == 2

        mesh.remove_triangle(t)
        mesh.remove_triangle(t)
        assert len(mesh) == 1
        assert list(mesh.triangles()) == [0]
        assert not mesh.is_alive(t)


class TestTwins:
    """Test twin reconciliation."""

    def two_triangles(self):
        mesh = make_mesh((0, 0), (1, 0), (1, 1), (0, 1))
        t1 = mesh.make_triangle(0, 1, 2)
        t2 = mesh.make_triangle(0, 2, 3)
        mesh.reconcile_twins()
        return mesh, t1, t2

    def test_shared_edge(self):
        mesh, t1, t2 = self.two_triangles()

        e1 = mesh.find_edge(2, 0)
        e2 = mesh.find_edge(0, 2)
        assert mesh.face[e1] == t1
        assert mesh.face[e2] == t2
        assert mesh.twin[e1] == e2
        assert mesh.twin[e2] == e1

    def test_boundary_edges(self):
        mesh, t1, t2 = self.two_triangles()
        boundary = [
            e for t in (t1, t2) for e in mesh.edges(t)
            if mesh.twin[e] == NO_EDGE]
        assert len(boundary) == 4

    def test_symmetry(self):
        mesh, t1, t2 = self.two_triangles()
        for t in (t1, t2):
            for e in mesh.edges(t):
                if mesh.twin[e] != NO_EDGE:
                    assert mesh.twin[mesh.twin[e]] == e

    def test_removed_triangle_cleared(self):
        mesh, t1, t2 = self.two_triangles()
        mesh.remove_triangle(t2)
        mesh.reconcile_twins()

        assert all(mesh.twin[e] == NO_EDGE for e in mesh.edges(t1))
        assert mesh.find_edge(0, 2) is None

    def test_opposite_vertex(self):
        mesh, t1, t2 = self.two_triangles()
        assert mesh.opposite_vertex(mesh.find_edge(2, 0)) == 3
        assert mesh.opposite_vertex(mesh.find_edge(0, 2)) == 1
        assert mesh.opposite_vertex(mesh.find_edge(0, 1)) is None


class TestLookup:
    """Test vertex, edge and triangle lookup."""

    def test_find_vertex(self):
        mesh = make_mesh((0, 0), (1, 0), (0.5, 1))
        assert mesh.find_vertex(Point(1, 0)) == 1
        assert mesh.find_vertex(Point(1 + 1e-12, 0)) == 1
        assert mesh.find_vertex(Point(1, 1)) is None

    def test_locate_triangle(self):
        mesh = make_mesh((-1, -1), (2, -1), (0.5, 2))
        t = mesh.make_triangle(0, 1, 2)

        assert mesh.locate_triangle(Point(0.5, 0.5)) == t
        assert mesh.locate_triangle(Point(10, 10)) is None

    def test_locate_skips_removed(self):
        mesh = make_mesh((-1, -1), (2, -1), (0.5, 2))
        t = mesh.make_triangle(0, 1, 2)
        mesh.remove_triangle(t)
        assert mesh.locate_triangle(Point(0.5, 0.5)) is None

    def test_find_edge_in_triangles(self):
        mesh = make_mesh((0, 0), (1, 0), (1, 1), (0, 1))
        t1 = mesh.make_triangle(0, 1, 2)
        t2 = mesh.make_triangle(0, 2, 3)

        assert mesh.find_edge(0, 1, [t1]) is not None
        assert mesh.find_edge(0, 1, [t2]) is None
        assert mesh.find_edge(1, 0) is None


class TestValidate:
    """Test the invariant checks."""

    def test_valid(self):
        mesh = make_mesh((0, 0), (1, 0), (1, 1), (0, 1))
        mesh.make_triangle(0, 1, 2)
        mesh.make_triangle(0, 2, 3)
        mesh.reconcile_twins()
        mesh.validate()

    def test_broken_twin(self):
        mesh = make_mesh((0, 0), (1, 0), (1, 1), (0, 1))
        t1 = mesh.make_triangle(0, 1, 2)
        mesh.make_triangle(0, 2, 3)
        mesh.reconcile_twins()

        e = mesh.find_edge(2, 0)
        mesh.twin[e] = mesh.edges(t1)[0]
        with pytest.raises(AssertionError):
            mesh.validate()

    def test_broken_face(self):
        mesh = make_mesh((0, 0), (1, 0), (1, 1))
        t = mesh.make_triangle(0, 1, 2)
        mesh.face[mesh.edges(t)[1]] = t + 1
        with pytest.raises(AssertionError):
            mesh.validate()
