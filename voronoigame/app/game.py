"""
Game State
===========

The two player game: players alternately place sites on the field and
each controls the area of the Voronoi regions of their sites.
"""
import logging

from voronoigame.geometry import Site
from voronoigame.mapping.voronoi import VoronoiMapping
from voronoigame.metrics import PlayerAreaMetric

__all__ = ('GameState', )


class GameState(object):
    """The sites placed so far and whose turn it is.
    """

    sites = []
    """List of :class:`~voronoigame.geometry.Site` in placement order.
    """

    players = (1, 2)
    """The players, in turn order.
    """

    current_player = 1
    """The player placing the next site.
    """

    field_size = 100.

    max_points_per_player = 10

    min_distance = 2.
    """A new site must be at least this far from every existing site.
    """

    mapping = None
    """The :class:`~voronoigame.mapping.voronoi.VoronoiMapping` computing the
    regions of the field.
    """

    def __init__(self, field_size=100., max_points_per_player=10,
                 min_distance=2., players=(1, 2), **kwargs):
        mapping_kwargs = {
            key: kwargs.pop(key) for key in ('margin_factor', 'bounding')
            if key in kwargs}
        super(GameState, self).__init__(**kwargs)
        self.field_size = float(field_size)
        self.max_points_per_player = max_points_per_player
        self.min_distance = min_distance
        self.players = tuple(players)
        self.current_player = self.players[0]
        self.sites = []
        self.mapping = VoronoiMapping(
            field_size=self.field_size, **mapping_kwargs)

    @property
    def field_rect(self):
        return self.mapping.field_rect

    def count(self, player):
        """Number of sites placed by ``player``.
        """
        return sum(1 for site in self.sites if site.owner == player)

    def is_finished(self):
        return all(
            self.count(player) >= self.max_points_per_player
            for player in self.players)

    def place_point(self, x, y):
        """Places a site of the current player at ``(x, y)`` and passes the
        turn to the next player.

        :returns: False, without changing anything, if the player has no
            sites left or the location is outside the field or too close to
            an existing site. True otherwise.
        """
        player = self.current_player
        if self.count(player) >= self.max_points_per_player:
            logging.debug('Player %s has no sites left', player)
            return False

        if not (0 <= x <= self.field_size and 0 <= y <= self.field_size):
            logging.debug('Site (%s, %s) is outside the field', x, y)
            return False

        site = Site(x, y, player)
        for existing in self.sites:
            if existing.point.distance(site.point) < self.min_distance:
                logging.debug('Site %s is too close to %s', site, existing)
                return False

        self.sites.append(site)
        i = self.players.index(player)
        self.current_player = self.players[(i + 1) % len(self.players)]
        return True

    def triangulation(self):
        """A fresh triangulation of all the sites.
        """
        return self.mapping.create_triangulation(self.sites)

    def voronoi(self):
        """The current list of :class:`~voronoigame.region.Region`.
        """
        return self.mapping.compute_regions(self.sites)

    def player_areas(self):
        """Maps each player to the percentage of the field they control.
        """
        metric = PlayerAreaMetric(
            self.voronoi(), self.field_rect, players=self.players)
        return metric.compute()

    def visible_triangles(self):
        """The triangles with at least one vertex inside the field.
        """
        s = self.field_size
        return [
            triangle for triangle in self.triangulation().triangles()
            if any(0 <= p.x <= s and 0 <= p.y <= s for p in triangle)]
