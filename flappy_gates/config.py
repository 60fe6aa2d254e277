from dataclasses import dataclass, fields, replace


class ConfigError(ValueError):
    """Raised when a GameConfig cannot describe a playable world."""


@dataclass(frozen=True)
class GameConfig:
    """
    Construction-time constants of a game session.

    All values are in pixels, pixels per tick or milliseconds. The defaults
    reproduce the calm 400x600 layout with a 25 ms tick.
    """

    # --- World ---
    world_width: int = 400
    world_height: int = 600

    # --- Avatar ---
    avatar_x: int = 80
    avatar_size: int = 45
    gravity: int = 1
    jump_velocity: int = -9

    # --- Obstacles ---
    obstacle_width: int = 60
    gap_height: int = 190
    gap_top_min: int = 140
    gap_top_max: int = 320  # exclusive
    obstacle_speed: int = 1

    # --- Timing ---
    tick_interval_ms: int = 25

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{f.name} must be an integer, got {value!r}")

        for name in ("world_width", "world_height", "avatar_size", "obstacle_width",
                     "gap_height", "obstacle_speed", "tick_interval_ms"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be > 0")

        if self.gravity < 0:
            raise ConfigError("gravity must be >= 0")
        if self.jump_velocity >= 0:
            raise ConfigError("jump_velocity must be negative (upwards)")

        if self.gap_top_min < 0 or self.gap_top_min >= self.gap_top_max:
            raise ConfigError("gap_top_min must satisfy 0 <= gap_top_min < gap_top_max")
        if self.gap_top_max - 1 + self.gap_height > self.world_height:
            raise ConfigError("largest gap does not fit inside world_height")

        if self.avatar_x < 0 or self.avatar_x + self.avatar_size > self.world_width:
            raise ConfigError("avatar does not fit inside world_width")
        if self.initial_y + self.avatar_size > self.world_height:
            raise ConfigError("avatar does not fit inside world_height")

        # At most one pair may expire per tick.
        if self.obstacle_speed > self.obstacle_width:
            raise ConfigError("obstacle_speed must not exceed obstacle_width")

    @property
    def initial_y(self):
        return self.world_height // 2

    @property
    def tick_rate(self):
        """Ticks per second implied by tick_interval_ms."""
        return 1000.0 / self.tick_interval_ms

    def with_overrides(self, **overrides):
        """Return a copy with the given non-None fields replaced."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)
