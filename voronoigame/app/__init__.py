"""Voronoi Game Application
============================

Plots a game with matplotlib.
"""

from itertools import cycle

import numpy as np
import matplotlib.pyplot as plt

from voronoigame.utils import clip_segment_to_rect

__all__ = ('plot_game', )


def plot_game(game, ax=None, show_triangulation=True, show_voronoi=True,
              colors=('r', 'b', 'g', 'y')):
    """Draws the regions, the triangulation and the sites of ``game``.

    :param game: A :class:`~voronoigame.app.game.GameState`.
    :returns: The matplotlib axes drawn into.
    """
    if ax is None:
        ax = plt.gca()

    rect = game.field_rect
    player_colors = dict(zip(game.players, cycle(colors)))

    if show_voronoi:
        for region in game.voronoi():
            polygon = np.asarray(region.clip(rect))
            if len(polygon) < 3:
                continue
            ax.fill(polygon[:, 0], polygon[:, 1],
                    player_colors.get(region.owner, 'k'), alpha=.3,
                    edgecolor='k')

    if show_triangulation:
        for triangle in game.triangulation().triangles():
            for p1, p2 in zip(triangle, triangle[1:] + triangle[:1]):
                clipped = clip_segment_to_rect(p1, p2, rect)
                if clipped is None:
                    continue
                (x1, y1), (x2, y2) = clipped
                ax.plot([x1, x2], [y1, y2], color='0.5', linewidth=.5)

    for player in game.players:
        sites = np.array(
            [(s.x, s.y) for s in game.sites if s.owner == player],
            dtype=np.float64).reshape((-1, 2))
        ax.scatter(sites[:, 0], sites[:, 1], color=player_colors[player],
                   label='Player {}'.format(player))

    ax.set_xlim(rect[0], rect[2])
    ax.set_ylim(rect[1], rect[3])
    ax.set_aspect('equal')
    return ax


if __name__ == '__main__':
    from voronoigame.app.game import GameState

    game = GameState()
    rng = np.random.default_rng(0)
    while not game.is_finished():
        game.place_point(*rng.uniform(0, game.field_size, 2))

    plot_game(game)
    plt.title(', '.join(
        'Player {}: {:0.1f}%'.format(player, percent)
        for player, percent in sorted(game.player_areas().items())))
    plt.show()
