import pygame
import pygame.gfxdraw

from .session import GameState


class PygameRenderer:
    """
    Draws a Snapshot onto a pygame Surface.

    Scenery (clouds, skyline, grass, trees) is decoration only and is derived
    from the snapshot's tick counter, so the renderer holds no game state.
    """

    # --- Colors ---
    COLOR_SKY_TOP = (135, 205, 255)
    COLOR_SKY_BOTTOM = (240, 250, 255)
    COLOR_CLOUD = (255, 255, 255, 200)
    COLOR_BUILDING = (75, 85, 105)
    COLOR_WINDOW = (255, 220, 160, 180)
    COLOR_BALCONY = (120, 120, 135)
    COLOR_GROUND = (95, 175, 95)
    COLOR_GRASS = (70, 145, 70)
    COLOR_TRUNK = (120, 75, 45)
    COLOR_LEAVES = (65, 150, 80)
    COLOR_FLOWER_A = (255, 175, 175)
    COLOR_FLOWER_B = (255, 255, 0)
    COLOR_OBSTACLE = (70, 170, 100)
    COLOR_AVATAR = (255, 205, 60)
    COLOR_AVATAR_OUTLINE = (200, 140, 30)
    COLOR_EYE = (255, 255, 255)
    COLOR_PUPIL = (20, 20, 20)
    COLOR_BEAK = (255, 120, 40)
    COLOR_TEXT = (255, 255, 255)
    COLOR_GAME_OVER = (255, 0, 0)
    COLOR_BUTTON_FILL = (255, 255, 255, 90)
    COLOR_BUTTON_EDGE = (255, 255, 255, 160)

    # (start x, y, respawn x); clouds drift one pixel per tick.
    CLOUDS = ((60, 90, 0), (220, 150, 120), (360, 60, 240))
    CLOUD_EXIT_X = -150

    BUILDING_SPACING = 60
    TREE_SPACING = 90
    GRASS_SPACING = 10

    def __init__(self, width, height, ground_y=None):
        self.width = width
        self.height = height
        self.ground_y = ground_y if ground_y is not None else height * 5 // 6

        pygame.font.init()
        self.font_score = pygame.font.SysFont("segoeui", 22, bold=True)
        self.font_game_over = pygame.font.SysFont("segoeui", 34, bold=True)
        self.font_button = pygame.font.SysFont("segoeui", 16, bold=True)

        self.restart_button = pygame.Rect(width // 2 - 60, height // 2, 120, 42)
        self._sky = self._create_sky()

    def render(self, surface, snapshot):
        surface.blit(self._sky, (0, 0))
        self._render_clouds(surface, snapshot.ticks)
        self._render_buildings(surface)
        self._render_ground(surface, snapshot.ticks)
        self._render_obstacles(surface, snapshot.obstacles)
        self._render_avatar(surface, snapshot.avatar)
        self._render_ui(surface, snapshot)

    def cloud_positions(self, ticks):
        """x of every cloud after the given number of ticks."""
        positions = []
        for start_x, y, respawn_offset in self.CLOUDS:
            x = start_x - ticks
            if x < self.CLOUD_EXIT_X:
                respawn_x = self.width + respawn_offset
                span = respawn_x - self.CLOUD_EXIT_X + 1
                since_exit = ticks - (start_x - self.CLOUD_EXIT_X + 1)
                x = respawn_x - since_exit % span
            positions.append((x, y))
        return positions

    def _create_sky(self):
        sky = pygame.Surface((self.width, self.height))
        top, bottom = self.COLOR_SKY_TOP, self.COLOR_SKY_BOTTOM
        for y in range(self.height):
            interp = y / self.height
            color = tuple(int(top[i] * (1 - interp) + bottom[i] * interp) for i in range(3))
            pygame.draw.line(sky, color, (0, y), (self.width, y))
        return sky

    def _render_clouds(self, surface, ticks):
        layer = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        for x, y in self.cloud_positions(ticks):
            pygame.draw.ellipse(layer, self.COLOR_CLOUD, (x, y, 70, 40))
            pygame.draw.ellipse(layer, self.COLOR_CLOUD, (x + 25, y - 18, 70, 50))
            pygame.draw.ellipse(layer, self.COLOR_CLOUD, (x + 50, y, 70, 40))
        surface.blit(layer, (0, 0))

    def _render_buildings(self, surface):
        layer = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        for i in range(0, self.width, self.BUILDING_SPACING):
            h = 90 + (i % 3) * 35
            x, y, w = i, self.ground_y - h, 55
            pygame.draw.rect(layer, self.COLOR_BUILDING, (x, y, w, h))
            for wy in range(y + 12, y + h - 20, 22):
                pygame.draw.rect(layer, self.COLOR_WINDOW, (x + 10, wy, 10, 10))
                pygame.draw.rect(layer, self.COLOR_WINDOW, (x + 30, wy, 10, 10))
            pygame.draw.rect(layer, self.COLOR_BALCONY, (x + 5, y + h // 2, w - 10, 6))
        surface.blit(layer, (0, 0))

    def _render_ground(self, surface, ticks):
        gy = self.ground_y
        pygame.draw.rect(surface, self.COLOR_GROUND, (0, gy, self.width, self.height - gy))

        offset = ticks % self.GRASS_SPACING
        for i in range(-offset, self.width, self.GRASS_SPACING):
            pygame.draw.line(surface, self.COLOR_GRASS, (i, gy), (i + 2, gy - 8))

        for i in range(0, self.width, self.TREE_SPACING):
            pygame.draw.rect(surface, self.COLOR_TRUNK, (i + 22, gy - 28, 8, 28))
            pygame.draw.ellipse(surface, self.COLOR_LEAVES, (i + 5, gy - 55, 40, 30))
            pygame.draw.ellipse(surface, self.COLOR_FLOWER_A, (i + 55, gy - 6, 6, 6))
            pygame.draw.ellipse(surface, self.COLOR_FLOWER_B, (i + 65, gy - 6, 6, 6))

    def _render_obstacles(self, surface, obstacles):
        for obstacle in obstacles:
            for rect in (obstacle.upper, obstacle.lower):
                pygame.draw.rect(surface, self.COLOR_OBSTACLE, rect, border_radius=11)

    def _render_avatar(self, surface, avatar):
        r = avatar.size // 2
        cx, cy = avatar.x + r, avatar.y + r
        pygame.gfxdraw.filled_circle(surface, cx, cy, r, self.COLOR_AVATAR)
        pygame.gfxdraw.aacircle(surface, cx, cy, r, self.COLOR_AVATAR_OUTLINE)

        eye_x, eye_y = cx + r // 3, cy - r // 3
        pygame.gfxdraw.filled_circle(surface, eye_x, eye_y, max(2, r // 4), self.COLOR_EYE)
        pygame.gfxdraw.filled_circle(surface, eye_x + 2, eye_y, max(1, r // 8), self.COLOR_PUPIL)

        beak = [(cx + r - 2, cy - 3), (cx + r + r // 2, cy + 2), (cx + r - 2, cy + 7)]
        pygame.gfxdraw.filled_polygon(surface, beak, self.COLOR_BEAK)

    def _render_ui(self, surface, snapshot):
        score_text = self.font_score.render(f"Score: {snapshot.score}", True, self.COLOR_TEXT)
        surface.blit(score_text, (20, 15))

        if snapshot.state is GameState.GAME_OVER:
            end_text = self.font_game_over.render("GAME OVER", True, self.COLOR_GAME_OVER)
            text_rect = end_text.get_rect(center=(self.width / 2, self.height / 2 - 70))
            surface.blit(end_text, text_rect)
            self._render_button(surface, "Restart")

    def _render_button(self, surface, label):
        button = self.restart_button
        layer = pygame.Surface(button.size, pygame.SRCALPHA)
        pygame.draw.rect(layer, self.COLOR_BUTTON_FILL, layer.get_rect(), border_radius=14)
        pygame.draw.rect(layer, self.COLOR_BUTTON_EDGE, layer.get_rect().inflate(-2, -2), 1, border_radius=14)
        surface.blit(layer, button.topleft)

        text = self.font_button.render(label, True, self.COLOR_TEXT)
        surface.blit(text, text.get_rect(center=button.center))
