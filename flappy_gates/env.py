import gymnasium as gym
from gymnasium.spaces import MultiDiscrete
import numpy as np
import pygame
import os

from .config import GameConfig
from .rendering import PygameRenderer
from .session import GameSession


# Set Pygame to run in a headless mode, which is required for Gymnasium environments
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


class GameEnv(gym.Env):
    """
    Guide a falling bird through gaps between scrolling pillars.
    Every pillar pair passed scores a point; touching a pillar or leaving the
    screen ends the run.
    """
    metadata = {"render_modes": ["rgb_array"]}

    user_guide = (
        "Controls: Press space (or hold ↑) to flap. Fly through the gaps between the pillars."
    )

    game_description = (
        "Calm side-scroller. Flap to stay airborne and slip through each gap; one point per pillar pair passed."
    )

    # Gravity and scrolling advance every frame.
    auto_advance = True

    MAX_STEPS = 10000

    # --- Rewards ---
    REWARD_SURVIVE = 0.1
    REWARD_PASS = 1.0
    REWARD_CRASH = -10.0

    def __init__(self, render_mode="rgb_array", config=None):
        super().__init__()
        self.render_mode = render_mode
        self.config = config or GameConfig()
        cfg = self.config

        # --- Gymnasium Spaces ---
        self.observation_space = gym.spaces.Box(
            low=0, high=255, shape=(cfg.world_height, cfg.world_width, 3), dtype=np.uint8
        )
        self.action_space = MultiDiscrete([5, 2, 2])

        # --- Pygame Setup ---
        pygame.init()
        pygame.font.init()
        self.screen = pygame.Surface((cfg.world_width, cfg.world_height))
        self.renderer = PygameRenderer(cfg.world_width, cfg.world_height)

        # --- State Variables ---
        self.session = GameSession(cfg, rng=self.np_random)
        self.steps = 0
        self.prev_space_held = False

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)

        self.session.reset(rng=self.np_random)
        self.steps = 0
        self.prev_space_held = False

        return self._get_observation(), self._get_info()

    def step(self, action):
        if self.session.is_game_over:
            truncated = self.steps >= self.MAX_STEPS
            return self._get_observation(), 0, True, truncated, self._get_info()

        movement, space_held = int(action[0]), action[1] == 1
        space_pressed = space_held and not self.prev_space_held
        self.prev_space_held = space_held

        if movement == 1 or space_pressed:
            self.session.on_jump_input()

        score_before = self.session.score
        self.session.tick()
        self.steps += 1

        reward = self.REWARD_SURVIVE
        reward += (self.session.score - score_before) * self.REWARD_PASS

        terminated = self.session.is_game_over
        if terminated:
            reward = self.REWARD_CRASH
        truncated = self.steps >= self.MAX_STEPS

        return self._get_observation(), reward, terminated, truncated, self._get_info()

    def render(self):
        return self._get_observation()

    def _get_observation(self):
        self.renderer.render(self.screen, self.session.snapshot())
        arr = pygame.surfarray.array3d(self.screen)
        return np.transpose(arr, (1, 0, 2)).astype(np.uint8)

    def _get_info(self):
        return {
            "score": self.session.score,
            "steps": self.steps,
            "state": self.session.state.value,
        }

    def close(self):
        pygame.quit()

    def validate_implementation(self):
        cfg = self.config
        shape = (cfg.world_height, cfg.world_width, 3)

        # Test action space
        assert self.action_space.shape == (3,)
        assert self.action_space.nvec.tolist() == [5, 2, 2]

        # Test observation space
        test_obs = self._get_observation()
        assert test_obs.shape == shape
        assert test_obs.dtype == np.uint8

        # Test reset
        obs, info = self.reset()
        assert obs.shape == shape
        assert isinstance(info, dict)

        # Test step
        test_action = self.action_space.sample()
        obs, reward, term, trunc, info = self.step(test_action)
        assert obs.shape == shape
        assert isinstance(reward, (int, float))
        assert isinstance(term, bool)
        assert trunc == False
        assert isinstance(info, dict)

        print("✓ Implementation validated successfully")
