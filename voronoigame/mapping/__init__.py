"""
Mapping
========

The Delaunay triangulation of the sites and the Voronoi regions derived
from it.
"""
