"""
Field Metrics
=================

Defines metrics that summarize the state of the field based on the regions.
"""
from voronoigame.region.metrics import RegionAreaMetric

__all__ = ('StateMetric', 'PlayerAreaMetric')


class StateMetric(object):
    """Metrics used across :class:`voronoigame.region.Region`.
    """

    name = ''
    """A globally unique metric name that describes the metric.
    """

    regions = []

    def __init__(self, name, regions, **kwargs):
        super(StateMetric, self).__init__(**kwargs)
        self.name = name
        self.regions = regions

    def compute(self):
        raise NotImplementedError


class PlayerAreaMetric(StateMetric):
    """The share of the field, in percent, controlled by each player.

    Every region is clipped to :attr:`rect` and its area added to its owner.
    When nothing of any region is visible, the players split the field
    equally.
    """

    rect = None
    """``(x_min, y_min, x_max, y_max)`` of the field.
    """

    players = (1, 2)
    """The players that always get an entry in :attr:`percentages`.
    """

    areas = {}
    """Maps each player to its visible area.
    """

    percentages = {}
    """Maps each player to its share of the total visible area, in percent.
    """

    def __init__(self, regions, rect, players=(1, 2), name='player_area',
                 **kwargs):
        super(PlayerAreaMetric, self).__init__(
            name=name, regions=regions, **kwargs)
        self.rect = rect
        self.players = tuple(players)
        self.areas = {}
        self.percentages = {}

    def compute(self):
        areas = {player: 0. for player in self.players}
        for region in self.regions:
            metric = region.metrics.get('area')
            if metric is None:
                metric = region.metrics['area'] = RegionAreaMetric(
                    rect=self.rect, region=region)
            metric.rect = self.rect
            metric.compute()
            areas[region.owner] = areas.get(region.owner, 0.) + \
                metric.scalar_value

        total = sum(areas.values())
        if total > 0:
            percentages = {
                player: area / total * 100. for player, area in areas.items()}
        else:
            share = 100. / len(areas) if areas else 0.
            percentages = {player: share for player in areas}

        self.areas = areas
        self.percentages = percentages
        return percentages

    def get_data(self):
        return {
            "name": self.name, "areas": self.areas,
            "percentages": self.percentages}
