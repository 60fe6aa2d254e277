from .geometry import bounding_box


class Avatar:
    """The falling square the player keeps airborne. Its x never changes."""

    def __init__(self, x, y, size, gravity, jump_velocity):
        self._x = x
        self.size = size
        self.gravity = gravity
        self.jump_velocity = jump_velocity
        self.y = y
        self.velocity = 0

    @property
    def x(self):
        return self._x

    def reset(self, y):
        self.y = y
        self.velocity = 0

    def apply_gravity(self):
        # Out-of-bounds positions are left for the session to detect.
        self.velocity += self.gravity
        self.y += self.velocity

    def jump(self):
        self.velocity = self.jump_velocity

    def bounding_box(self):
        return bounding_box(self._x, self.y, self.size, self.size)
