import logging
from dataclasses import dataclass

from .geometry import bounding_box, intersects

logger = logging.getLogger(__name__)


@dataclass
class ObstaclePair:
    """An upper and a lower block sharing one x, separated by a gap."""

    x: int
    gap_top: int
    width: int
    gap_height: int
    world_height: int
    scored: bool = False

    @property
    def upper(self):
        return bounding_box(self.x, 0, self.width, self.gap_top)

    @property
    def lower(self):
        top = self.gap_top + self.gap_height
        return bounding_box(self.x, top, self.width, self.world_height - top)

    @property
    def trailing_edge(self):
        return self.x + self.width


class ObstacleTrack:
    """
    Ordered obstacle pairs, leftmost first.

    Pairs are appended at the right edge of the world and removed from the
    front once fully off-screen, one for one, so the track length stays
    constant after the first spawn. Gap positions come from the injected
    numpy Generator.
    """

    def __init__(self, config, rng):
        self.config = config
        self.rng = rng
        self._pairs = []

    def __len__(self):
        return len(self._pairs)

    def __iter__(self):
        return iter(self._pairs)

    @property
    def pairs(self):
        return tuple(self._pairs)

    def clear(self):
        self._pairs.clear()

    def spawn_pair(self):
        cfg = self.config
        gap_top = int(self.rng.integers(cfg.gap_top_min, cfg.gap_top_max))
        pair = ObstaclePair(
            x=cfg.world_width,
            gap_top=gap_top,
            width=cfg.obstacle_width,
            gap_height=cfg.gap_height,
            world_height=cfg.world_height,
        )
        self._pairs.append(pair)
        logger.debug("Spawned obstacle pair at x=%d with gap_top=%d", pair.x, gap_top)
        return pair

    def advance(self, speed):
        for pair in self._pairs:
            pair.x -= speed

    def check_scoring(self, avatar_x):
        scored = 0
        for pair in self._pairs:
            if not pair.scored and pair.trailing_edge < avatar_x:
                pair.scored = True
                scored += 1
        return scored

    def check_collision(self, avatar_box):
        for pair in self._pairs:
            if intersects(pair.upper, avatar_box) or intersects(pair.lower, avatar_box):
                return True
        return False

    def recycle_if_needed(self):
        if not self._pairs or self._pairs[0].trailing_edge >= 0:
            return False
        expired = self._pairs.pop(0)
        logger.debug("Recycled obstacle pair that left at x=%d", expired.x)
        self.spawn_pair()
        return True
