"""
Fixed-tick game session: the avatar, the obstacle track, the score and the
Running/GameOver state machine.

The session never renders and never reads devices. A host calls `tick()` on
its timer, forwards jump presses through `on_jump_input()` (same thread) or
`post_jump()` (any thread), and draws from `snapshot()`.
"""

import enum
import logging
import queue
from dataclasses import dataclass

import numpy as np

from .avatar import Avatar
from .config import GameConfig
from .geometry import as_tuple
from .track import ObstacleTrack

logger = logging.getLogger(__name__)


class GameState(enum.Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class AvatarView:
    x: int
    y: int
    size: int
    velocity: int


@dataclass(frozen=True)
class ObstacleView:
    x: int
    upper: tuple  # (x, y, w, h)
    lower: tuple
    scored: bool


@dataclass(frozen=True)
class Snapshot:
    avatar: AvatarView
    obstacles: tuple
    score: int
    state: GameState
    ticks: int


class GameSession:
    def __init__(self, config=None, rng=None, seed=None):
        if rng is not None and seed is not None:
            raise ValueError("pass either rng or seed, not both")
        self.config = config or GameConfig()
        self.rng = rng if rng is not None else np.random.default_rng(seed)

        cfg = self.config
        self.avatar = Avatar(
            x=cfg.avatar_x,
            y=cfg.initial_y,
            size=cfg.avatar_size,
            gravity=cfg.gravity,
            jump_velocity=cfg.jump_velocity,
        )
        self.track = ObstacleTrack(cfg, self.rng)
        self._pending_jumps = queue.SimpleQueue()

        self.state = GameState.RUNNING
        self.score = 0
        self.ticks = 0
        self.reset()

    @property
    def is_running(self):
        return self.state is GameState.RUNNING

    @property
    def is_game_over(self):
        return self.state is GameState.GAME_OVER

    def reset(self, rng=None):
        if rng is not None:
            self.rng = rng
            self.track.rng = rng

        self._drain_pending()
        self.track.clear()
        self.track.spawn_pair()
        self.avatar.reset(self.config.initial_y)
        self.score = 0
        self.ticks = 0
        self.state = GameState.RUNNING
        logger.info("Session reset")

    def on_jump_input(self):
        if self.is_running:
            self.avatar.jump()

    def post_jump(self):
        """Queue a jump from another thread; applied at the start of the next tick."""
        self._pending_jumps.put(None)

    def tick(self):
        if not self.is_running:
            return

        for _ in range(self._drain_pending()):
            self.on_jump_input()

        avatar = self.avatar
        avatar.apply_gravity()
        self.track.advance(self.config.obstacle_speed)
        self.score += self.track.check_scoring(avatar.x)

        lost = self.track.check_collision(avatar.bounding_box())
        # Only the world boundary counts; scenery drawn near the edges does not.
        if avatar.y < 0 or avatar.y + avatar.size > self.config.world_height:
            lost = True

        self.track.recycle_if_needed()
        self.ticks += 1

        if lost:
            self.state = GameState.GAME_OVER
            logger.info("Game over after %d ticks with score %d", self.ticks, self.score)

    def snapshot(self):
        avatar = self.avatar
        return Snapshot(
            avatar=AvatarView(x=avatar.x, y=avatar.y, size=avatar.size, velocity=avatar.velocity),
            obstacles=tuple(
                ObstacleView(
                    x=pair.x,
                    upper=as_tuple(pair.upper),
                    lower=as_tuple(pair.lower),
                    scored=pair.scored,
                )
                for pair in self.track
            ),
            score=self.score,
            state=self.state,
            ticks=self.ticks,
        )

    def _drain_pending(self):
        count = 0
        while True:
            try:
                self._pending_jumps.get_nowait()
            except queue.Empty:
                return count
            count += 1
