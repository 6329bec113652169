"""
Voronoi Game
=============

Incremental Delaunay triangulation of the players' sites and the dual
Voronoi regions partitioning the field between the players.
"""

__version__ = '0.1.0'
