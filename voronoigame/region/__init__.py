"""
Region
=======

:class:`Region` is the Voronoi region controlled by a single site.
"""

from voronoigame.utils import clip_polygon_to_rect, polygon_area

__all__ = ('Region', )


class Region(object):
    """
    Describes the Voronoi region of a site, the polygon of points closer to
    the site than to any other site.
    """

    site = None
    """The :class:`~voronoigame.geometry.Point` of the site.
    """

    vertices = []
    """The :class:`~voronoigame.geometry.Point` vertices of the region, ordered
    by angle around :attr:`site`. They are the circumcenters of the triangles
    incident to the site.
    """

    owner = None
    """The player owning the site.
    """

    metrics = {}
    """A mapping from :attr:`~voronoigame.region.metrics.RegionMetric.name`
    to the :class:`~voronoigame.region.metrics.RegionMetric` instance that
    contains the metric data for this region.
    """

    def __init__(self, site=None, vertices=None, owner=None, **kwargs):
        super(Region, self).__init__(**kwargs)
        if vertices is None:
            vertices = []
        self.site = site
        self.vertices = vertices
        self.owner = owner
        self.metrics = {}

    def __iter__(self):
        return iter((self.site, self.vertices, self.owner))

    def __repr__(self):
        return 'Region(site={}, owner={}, {} vertices)'.format(
            self.site, self.owner, len(self.vertices))

    def clip(self, rect):
        """The region polygon clipped to ``rect``, see
        :func:`~voronoigame.utils.clip_polygon_to_rect`.
        """
        return clip_polygon_to_rect(self.vertices, rect)

    def area(self, rect=None):
        """The area of the region, of its part within ``rect`` if given.
        """
        if rect is None:
            return polygon_area(self.vertices)
        return polygon_area(self.clip(rect))

    def compute_metrics(self):
        for metric in self.metrics.values():
            metric.compute()
