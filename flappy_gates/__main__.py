"""Play the game in a window: `python -m flappy_gates`."""

import argparse
import logging
import os

from .config import ConfigError, GameConfig

logger = logging.getLogger("flappy_gates")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="flappy_gates",
        description="Flap through the gaps. SPACE flaps, R or Enter restarts, Esc quits.",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the gap generator")
    parser.add_argument("--world-width", type=int, default=None)
    parser.add_argument("--world-height", type=int, default=None)
    parser.add_argument("--gravity", type=int, default=None)
    parser.add_argument("--jump", type=int, default=None, help="jump velocity (negative)")
    parser.add_argument("--speed", type=int, default=None, help="obstacle speed in px/tick")
    parser.add_argument("--tick-ms", type=int, default=None, help="tick interval in milliseconds")
    parser.add_argument("--autopilot", action="store_true", help="let the heuristic policy fly")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="INFO",
    )
    return parser


def config_from_args(args):
    return GameConfig().with_overrides(
        world_width=args.world_width,
        world_height=args.world_height,
        gravity=args.gravity,
        jump_velocity=args.jump,
        obstacle_speed=args.speed,
        tick_interval_ms=args.tick_ms,
    )


def run(config, seed=None, autopilot=False):
    # Unset the dummy video driver to allow for display
    if os.environ.get("SDL_VIDEODRIVER") == "dummy":
        del os.environ["SDL_VIDEODRIVER"]

    import pygame

    from .policy import policy_for
    from .rendering import PygameRenderer
    from .session import GameSession

    pygame.init()
    try:
        screen = pygame.display.set_mode((config.world_width, config.world_height))
        pygame.display.set_caption("Flappy Gates - Calm Aesthetic")
        clock = pygame.time.Clock()

        session = GameSession(config, seed=seed)
        renderer = PygameRenderer(config.world_width, config.world_height)

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_SPACE:
                        session.on_jump_input()
                    elif event.key in (pygame.K_r, pygame.K_RETURN) and session.is_game_over:
                        session.reset()
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    if session.is_game_over and renderer.restart_button.collidepoint(event.pos):
                        session.reset()

            if autopilot and policy_for(session, config)[0] == 1:
                session.on_jump_input()

            was_running = session.is_running
            session.tick()
            if was_running and session.is_game_over:
                logger.info("Game Over! Final Score: %d", session.score)

            renderer.render(screen, session.snapshot())
            pygame.display.flip()
            clock.tick(config.tick_rate)
    finally:
        pygame.quit()


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = config_from_args(args)
    except ConfigError as e:
        parser.error(str(e))

    run(config, seed=args.seed, autopilot=args.autopilot)


if __name__ == "__main__":
    main()
