"""
Voronoi Mapping
===============

Computes the Voronoi region of every site as the dual of the Delaunay
triangulation of the sites.
"""
import logging

import numpy as np

from voronoigame.geometry import Point, Site, circumcenter, orientation
from voronoigame.mapping.delaunay import Triangulation, bounding_triangle
from voronoigame.region import Region

__all__ = ('VoronoiMapping', 'build_voronoi')


class VoronoiMapping(object):
    """Uses the Voronoi diagram to assign the field to the players' sites.
    """

    sites = []
    """A list of :class:`~voronoigame.geometry.Site` placed by the players.
    """

    regions = []
    """A list of the current :class:`~voronoigame.region.Region` instances,
    as computed by :meth:`compute_regions`.
    """

    triangulation = None
    """The :class:`~voronoigame.mapping.delaunay.Triangulation` the
    :attr:`regions` were computed from.
    """

    field_size = 100.
    """The size of the square field, which spans ``(0, 0)`` to
    ``(field_size, field_size)``.
    """

    margin_factor = 3.
    """How far the default :attr:`bounding` triangle extends beyond the
    field, as a multiple of :attr:`field_size`.
    """

    bounding = None
    """The three points of the bounding triangle that bootstraps every
    triangulation. It must strictly enclose the field.
    """

    def __init__(self, field_size=100., margin_factor=3., bounding=None,
                 **kwargs):
        super(VoronoiMapping, self).__init__(**kwargs)
        self.field_size = float(field_size)
        self.margin_factor = float(margin_factor)
        self.sites = []
        self.regions = []

        if bounding is None:
            bounding = bounding_triangle(self.field_size, self.margin_factor)
        self.bounding = tuple(Point(p[0], p[1]) for p in bounding)
        self.check_bounding()

    @property
    def field_rect(self):
        return 0., 0., self.field_size, self.field_size

    def check_bounding(self):
        """Raises a :class:`ValueError` unless :attr:`bounding` strictly
        encloses the field.
        """
        a, b, c = self.bounding
        if orientation(a, b, c) < 0:
            b, c = c, b

        s = self.field_size
        for corner in (Point(0, 0), Point(s, 0), Point(s, s), Point(0, s)):
            if orientation(a, b, corner) <= 0 or \
                    orientation(b, c, corner) <= 0 or \
                    orientation(c, a, corner) <= 0:
                raise ValueError(
                    'The bounding triangle {} does not enclose the field of '
                    'size {}'.format(self.bounding, s))

    def add_site(self, location, owner):
        """Adds a new site at ``location``, clamped to the field.

        :param location: The site location ``(x, y)``.
        :param owner: The player owning the site.
        :return: The new :class:`~voronoigame.geometry.Site`.
        """
        x, y = location
        s = self.field_size
        x = min(max(x, 0), s)
        y = min(max(y, 0), s)

        site = Site(x, y, owner)
        self.sites.append(site)
        return site

    def create_triangulation(self, sites=None):
        """Returns a new triangulation of ``sites`` (defaults to
        :attr:`sites`) inside :attr:`bounding`.
        """
        if sites is None:
            sites = self.sites

        triangulation = Triangulation(self.bounding)
        for site in sites:
            triangulation.insert(site)
        return triangulation

    def compute_regions(self, sites=None):
        """Computes the Voronoi regions of ``sites`` (defaults to
        :attr:`sites`) from a fresh triangulation.

        :param sites: List of :class:`~voronoigame.geometry.Site` or
            ``(x, y, owner)`` tuples.
        :returns: The list of :class:`~voronoigame.region.Region`.
        """
        if sites is None:
            sites = self.sites
        sites = [Site(*site) for site in sites]

        self.triangulation = triangulation = self.create_triangulation(sites)
        self.regions = regions = self.regions_from_triangulation(
            triangulation, sites)
        return regions

    def get_pos_region(self, pos):
        """The region containing ``pos``, i.e. the region of the closest
        site, or None if there are no regions.
        """
        p = Point(pos[0], pos[1])
        if not self.regions:
            return None
        return min(self.regions, key=lambda region: region.site.distance(p))

    @staticmethod
    def regions_from_triangulation(triangulation, sites):
        """Builds the Voronoi regions of ``sites`` from ``triangulation``,
        which is not modified.

        The vertices of the region of a site are the circumcenters of the
        triangles incident to it, sorted by angle around the site. Sites
        not in the triangulation, or without any finite circumcenter, get
        no region. Sites at the same location share a single region owned
        by the last of them.
        """
        mesh = triangulation.mesh
        tolerance = triangulation.tolerance

        centers = {}
        for t in mesh.triangles():
            center = circumcenter(
                *mesh.triangle_points(t), tolerance=tolerance)
            if center is not None:
                centers[t] = center

        # vertex index to owner, in the order sites first appear
        owners = {}
        for site in sites:
            v = mesh.find_vertex(site.point, tolerance)
            if v is None or triangulation.is_bounding_vertex(v):
                logging.debug('Site %s is not in the triangulation', site)
                continue
            owners[v] = site.owner

        incident = triangulation.vertex_triangles()
        regions = []
        for v, owner in owners.items():
            vertices = [centers[t] for t in incident[v] if t in centers]
            if not vertices:
                continue

            site = mesh.vertices[v]
            xy = np.asarray(vertices)
            angles = np.arctan2(xy[:, 1] - site.y, xy[:, 0] - site.x)
            vertices = [vertices[i] for i in np.argsort(angles, kind='stable')]
            regions.append(Region(site=site, vertices=vertices, owner=owner))

        return regions


def build_voronoi(sites, field_size=100., margin_factor=3., bounding=None):
    """Computes the Voronoi regions of ``sites`` in a new triangulation.

    :param sites: List of :class:`~voronoigame.geometry.Site` or
        ``(x, y, owner)`` tuples.
    :returns: The list of :class:`~voronoigame.region.Region`.
    """
    mapping = VoronoiMapping(
        field_size=field_size, margin_factor=margin_factor, bounding=bounding)
    return mapping.compute_regions(sites)
