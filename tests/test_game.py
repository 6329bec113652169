"""Tests for the game state."""

import pytest

from voronoigame.app.game import GameState
from voronoigame.geometry import Site


class TestPlacePoint:
    """Test placing sites."""

    def test_initial_state(self):
        game = GameState()
        assert game.current_player == 1
        assert len(game.sites) == 0
        assert game.field_rect == (0., 0., 100., 100.)

    def test_place_switches_player(self):
        game = GameState()
        assert game.place_point(50., 50.)
        assert game.sites == [Site(50, 50, 1)]
        assert game.current_player == 2

        assert game.place_point(20., 20.)
        assert game.sites[-1].owner == 2
        assert game.current_player == 1

    def test_too_close(self):
        game = GameState()
        assert game.place_point(50., 50.)
        assert not game.place_point(50.5, 50.5)
        assert len(game.sites) == 1
        assert game.current_player == 2

    def test_outside_field(self):
        game = GameState()
        assert not game.place_point(-1., 50.)
        assert not game.place_point(50., 100.5)
        assert game.sites == []

    def test_max_points(self):
        game = GameState(max_points_per_player=2)
        for x in (10., 20., 30., 40.):
            assert game.place_point(x, 50.)
        assert game.is_finished()
        assert not game.place_point(60., 50.)
        assert game.count(1) == game.count(2) == 2


class TestAreas:
    """Test the area shares."""

    def test_empty_game(self):
        areas = GameState().player_areas()
        assert areas[1] == 50.0
        assert areas[2] == 50.0

    def test_two_points(self):
        game = GameState()
        game.place_point(25.0, 50.0)
        game.place_point(75.0, 50.0)

        areas = game.player_areas()
        assert areas[1] + areas[2] == pytest.approx(100.0)
        assert areas[1] == pytest.approx(50.0)

    def test_voronoi(self):
        game = GameState()
        game.place_point(25.0, 50.0)
        game.place_point(75.0, 50.0)
        assert [region.owner for region in game.voronoi()] == [1, 2]


class TestTriangles:
    """Test the triangulation of the game."""

    def test_triangulation(self):
        game = GameState()
        game.place_point(25.0, 50.0)
        game.place_point(75.0, 50.0)
        assert len(game.triangulation()) == 5

    def test_visible_triangles(self):
        game = GameState()
        assert game.visible_triangles() == []

        game.place_point(50.0, 50.0)
        visible = game.visible_triangles()
        assert len(visible) == 3
        assert all(
            any(0 <= p.x <= 100 and 0 <= p.y <= 100 for p in triangle)
            for triangle in visible)

    def test_custom_bounding(self):
        game = GameState(
            field_size=10., bounding=((-100, -100), (100, -100), (0, 100)))
        assert game.mapping.bounding[2] == (0., 100.)
        with pytest.raises(ValueError):
            GameState(field_size=10., margin_factor=0.)
