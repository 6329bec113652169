"""
Region Metrics
=================

Defines metrics that are specific to a :class:`~voronoigame.region.Region`.
"""

from voronoigame.utils import polygon_area

__all__ = ('RegionMetric', 'RegionAreaMetric')


class RegionMetric(object):
    """Metrics used with :class:`voronoigame.region.Region`.
    """

    name = ''
    """A globally unique metric name that describes the metric.
    """

    region = None

    scalar_value = 0

    scalar_label = ''

    def __init__(self, name, region, scalar_label='', **kwargs):
        super(RegionMetric, self).__init__(**kwargs)
        self.name = name
        self.region = region
        self.scalar_label = scalar_label

    def compute(self):
        raise NotImplementedError

    def get_data(self):
        return {
            "name": self.name, "scalar_value": self.scalar_value,
            "scalar_label": self.scalar_label}


class RegionAreaMetric(RegionMetric):
    """The area of the region visible within :attr:`rect`.
    """

    rect = None
    """``(x_min, y_min, x_max, y_max)`` of the field.
    """

    polygon = []
    """The clipped polygon the area was computed from.
    """

    def __init__(self, rect, name='area', scalar_label='area', **kwargs):
        super(RegionAreaMetric, self).__init__(
            name=name, scalar_label=scalar_label, **kwargs)
        self.rect = rect
        self.polygon = []

    def compute(self):
        self.polygon = self.region.clip(self.rect)
        self.scalar_value = polygon_area(self.polygon)
