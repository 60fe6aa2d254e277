"""Tests for flappy_gates/session.py - the tick cycle and Running/GameOver state machine."""
import threading

import pytest

from flappy_gates.config import GameConfig
from flappy_gates.session import GameSession, GameState

from conftest import FixedGaps


def run_ticks(session, n):
    for _ in range(n):
        session.tick()


@pytest.mark.unit
class TestInitialState:
    def test_starts_running_with_one_pair(self, session):
        assert session.state is GameState.RUNNING
        assert session.is_running and not session.is_game_over
        assert session.score == 0
        assert session.ticks == 0
        assert len(session.track) == 1
        assert (session.avatar.x, session.avatar.y, session.avatar.velocity) == (80, 300, 0)

    def test_rng_and_seed_are_exclusive(self, rng):
        with pytest.raises(ValueError):
            GameSession(rng=rng, seed=7)

    def test_seeded_sessions_are_deterministic(self):
        a = GameSession(seed=7)
        b = GameSession(seed=7)
        run_ticks(a, 15)
        run_ticks(b, 15)
        assert a.snapshot() == b.snapshot()


@pytest.mark.unit
class TestTick:
    def test_five_ticks_without_jump(self, session):
        run_ticks(session, 5)

        assert session.avatar.velocity == 5
        assert session.avatar.y == 315
        assert session.track.pairs[0].x == 395
        assert session.ticks == 5

    def test_jump_then_tick(self, session):
        run_ticks(session, 5)
        session.on_jump_input()
        assert session.avatar.velocity == -9

        session.tick()
        assert session.avatar.velocity == -8

    def test_velocity_grows_by_gravity_unless_jumping(self, session):
        previous = session.avatar.velocity
        for i in range(15):
            jumped = i % 4 == 0
            if jumped:
                session.on_jump_input()
            session.tick()
            expected = -9 + 1 if jumped else previous + 1
            assert session.avatar.velocity == expected
            previous = session.avatar.velocity
        assert session.is_running

    def test_scores_exactly_once_per_pair(self, hovering_session):
        s = hovering_session
        run_ticks(s, 380)
        assert s.score == 0
        assert s.track.pairs[0].x == 20

        s.tick()
        assert s.score == 1
        assert s.track.pairs[0].scored

        run_ticks(s, 50)
        assert s.score == 1
        assert s.is_running

    def test_track_length_is_constant(self, hovering_session):
        s = hovering_session
        for _ in range(1000):
            s.tick()
            assert len(s.track) == 1
        assert s.is_running
        # Pairs recycle every 461 ticks and score 381 ticks after spawning
        assert s.score == 2

    def test_recycle_spawns_at_right_edge(self, hovering_session):
        s = hovering_session
        first = s.track.pairs[0]
        run_ticks(s, 461)
        assert s.track.pairs[0] is not first
        assert s.track.pairs[0].x == 400


@pytest.mark.unit
class TestGameOver:
    def test_collision_ends_the_game(self):
        # Gap 319..509 leaves the avatar (300..345) overlapping the upper block.
        s = GameSession(GameConfig(gravity=0), rng=FixedGaps(319))
        run_ticks(s, 275)
        assert s.is_running
        assert s.track.pairs[0].x == 125  # touching the avatar's right edge

        s.tick()
        assert s.state is GameState.GAME_OVER

    def test_collision_with_lower_block_ends_the_game(self):
        # Gap 140..330 leaves the avatar (300..345) overlapping the lower block.
        s = GameSession(GameConfig(gravity=0), rng=FixedGaps(140))
        run_ticks(s, 275)
        assert s.is_running

        s.tick()
        assert s.state is GameState.GAME_OVER

    def test_falling_out_of_the_bottom(self, session):
        run_ticks(session, 22)
        assert session.avatar.y == 300 + 22 * 23 // 2
        assert session.is_running

        session.tick()
        assert session.avatar.y + session.avatar.size > 600
        assert session.is_game_over

    def test_flying_out_of_the_top(self, session):
        for _ in range(37):
            session.on_jump_input()
            session.tick()
        assert session.avatar.y == 4
        assert session.is_running

        session.on_jump_input()
        session.tick()
        assert session.avatar.y < 0
        assert session.is_game_over

    @pytest.mark.parametrize("y", [0, 555])
    def test_world_edges_are_inside(self, y):
        s = GameSession(GameConfig(gravity=0), rng=FixedGaps(200))
        s.avatar.y = y
        run_ticks(s, 10)
        assert s.is_running

    def test_tick_is_a_no_op_after_game_over(self, session):
        run_ticks(session, 23)
        assert session.is_game_over

        before = session.snapshot()
        run_ticks(session, 10)
        assert session.snapshot() == before

    def test_jump_is_ignored_after_game_over(self, session):
        run_ticks(session, 23)
        velocity = session.avatar.velocity

        session.on_jump_input()
        assert session.avatar.velocity == velocity

    def test_reset_restores_initial_state(self, session):
        run_ticks(session, 23)
        assert session.is_game_over

        session.reset()
        assert session.state is GameState.RUNNING
        assert session.score == 0
        assert session.ticks == 0
        assert (session.avatar.y, session.avatar.velocity) == (300, 0)
        assert len(session.track) == 1
        assert session.track.pairs[0].x == 400

    def test_reset_after_scoring(self, hovering_session):
        s = hovering_session
        run_ticks(s, 400)
        assert s.score == 1

        s.reset()
        assert s.score == 0
        assert not s.track.pairs[0].scored


@pytest.mark.unit
class TestQueuedInput:
    def test_posted_jump_applies_on_next_tick(self, session):
        session.post_jump()
        assert session.avatar.velocity == 0

        session.tick()
        assert session.avatar.velocity == -8
        assert session.avatar.y == 292

    def test_post_jump_from_another_thread(self, session):
        worker = threading.Thread(target=session.post_jump)
        worker.start()
        worker.join()

        session.tick()
        assert session.avatar.velocity == -8

    def test_reset_discards_queued_jumps(self, session):
        session.post_jump()
        session.reset()

        session.tick()
        assert session.avatar.velocity == 1

    def test_queued_jump_ignored_after_game_over(self, session):
        run_ticks(session, 23)
        session.post_jump()
        velocity = session.avatar.velocity

        session.tick()
        assert session.avatar.velocity == velocity


@pytest.mark.unit
class TestSnapshot:
    def test_snapshot_contents(self, hovering_session):
        s = hovering_session
        run_ticks(s, 3)
        snap = s.snapshot()

        assert (snap.avatar.x, snap.avatar.y, snap.avatar.size, snap.avatar.velocity) == (80, 300, 45, 0)
        assert snap.score == 0
        assert snap.state is GameState.RUNNING
        assert snap.ticks == 3
        assert len(snap.obstacles) == 1
        obstacle = snap.obstacles[0]
        assert obstacle.x == 397
        assert obstacle.upper == (397, 0, 60, 200)
        assert obstacle.lower == (397, 390, 60, 210)
        assert obstacle.scored is False

    def test_snapshot_is_read_only(self, session):
        snap = session.snapshot()
        with pytest.raises(AttributeError):
            snap.score = 10
        session.tick()
        assert snap.ticks == 0
