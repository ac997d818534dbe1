"""Tests for gridsnake.session module."""

from __future__ import annotations

from random import Random

import pytest

from gridsnake.errors import ConfigurationError
from gridsnake.highscore import FileHighScoreStore, MemoryHighScoreStore
from gridsnake.models import Food, Lifecycle, SnakeState
from gridsnake.session import GameSession


def place(session, segments, food):
    session.state.snake = SnakeState(segments=list(segments))
    session.state.food = Food(cell=food, category="apple", emoji="🍎")


@pytest.fixture
def session() -> GameSession:
    return GameSession(store=MemoryHighScoreStore(), rng=Random(0))


class TestQueries:
    def test_defaults_before_start(self, session) -> None:
        assert session.lifecycle is Lifecycle.IDLE
        assert session.snake == []
        assert session.food is None
        assert session.score == 0
        assert session.advance(100) == 0
        assert not session.step()
        assert not session.set_heading("up")

    def test_after_start(self, session) -> None:
        session.start("classic")
        assert session.lifecycle is Lifecycle.RUNNING
        assert session.snake == [(4, 2), (3, 2), (2, 2)]
        assert session.food.cell not in session.snake
        assert session.interpolation == 0

    def test_snake_query_is_a_copy(self, session) -> None:
        session.start("classic")
        session.snake.append((0, 0))
        assert len(session.snake) == 3

    def test_bad_config_keeps_previous_run(self, session) -> None:
        state = session.start("classic")
        with pytest.raises(ConfigurationError):
            session.start("classic", speed_profile="warp")
        assert session.state is state


class TestControl:
    def test_hold_and_launch(self, session) -> None:
        session.start("maze", hold=True)
        assert session.lifecycle is Lifecycle.IDLE
        assert not session.set_heading("down")
        session.advance(0)
        assert session.advance(1000) == 0
        session.launch()
        assert session.lifecycle is Lifecycle.RUNNING

    def test_resume_resets_accumulator(self, session) -> None:
        session.start("arena")
        place(session, [(4, 2), (3, 2), (2, 2)], (0, 19))
        session.advance(0)
        session.advance(100)
        session.pause()
        assert session.lifecycle is Lifecycle.PAUSED
        session.advance(60_000)
        session.resume()
        assert session.advance(61_000) == 0
        assert session.advance(61_100) == 0
        assert session.advance(61_150) == 1

    def test_toggle_pause(self, session) -> None:
        session.start("classic")
        session.toggle_pause()
        assert session.lifecycle is Lifecycle.PAUSED
        session.toggle_pause()
        assert session.lifecycle is Lifecycle.RUNNING

    def test_stop_prevents_further_ticks(self, session) -> None:
        events = []
        session.on_game_over(events.append)
        session.start("classic")
        session.advance(0)
        session.stop()
        assert session.advance(10_000) == 0
        assert session.lifecycle is Lifecycle.IDLE
        assert events == []

    def test_launch_after_stop_keeps_snake_still(self, session) -> None:
        session.start("classic")
        place(session, [(5, 2), (4, 2), (3, 2)], (0, 19))
        session.advance(0)
        session.stop()
        session.launch()
        assert session.lifecycle is Lifecycle.IDLE
        session.advance(1000)
        assert session.advance(1150) == 0
        assert session.snake[0] == (5, 2)

    def test_new_start_after_stop_runs_again(self, session) -> None:
        session.start("classic")
        session.stop()
        session.start("classic")
        assert session.lifecycle is Lifecycle.RUNNING

    def test_new_start_replaces_run(self, session) -> None:
        first = session.start("classic")
        session.step()
        second = session.start("maze")
        assert second is not first
        assert session.score == 0
        assert session.state.map_id == "maze"


class TestGameOver:
    def test_event_fires_once_with_new_record(self, session) -> None:
        events = []
        session.on_game_over(events.append)
        session.start("classic")
        place(session, [(17, 10), (16, 10), (15, 10)], (18, 10))
        session.step()
        assert session.high_score == 10
        assert session.store.load() == 10
        session.state.food = Food(cell=(0, 0), category="apple", emoji="🍎")
        session.step()
        session.step()
        session.step()
        assert len(events) == 1
        event = events[0]
        assert event.score == 10
        assert event.length == 4
        assert event.reason == "wall"
        assert event.new_high_score
        assert event.high_score == 10

    def test_no_record_when_score_does_not_beat_store(self) -> None:
        session = GameSession(store=MemoryHighScoreStore(50), rng=Random(0))
        events = []
        session.on_game_over(events.append)
        session.start("classic")
        place(session, [(19, 10), (18, 10), (17, 10)], (0, 0))
        session.advance(0)
        session.advance(150)
        assert events[0].new_high_score is False
        assert events[0].high_score == 50
        assert session.store.load() == 50

    def test_high_score_persists_to_file(self, tmp_path) -> None:
        path = str(tmp_path / "best.txt")
        session = GameSession(store=FileHighScoreStore(path), rng=Random(0))
        session.start("classic")
        place(session, [(10, 10), (9, 10), (8, 10)], (11, 10))
        session.step()
        assert FileHighScoreStore(path).load() == 10
        assert GameSession(store=FileHighScoreStore(path)).high_score == 10


def test_sessions_are_independent() -> None:
    a = GameSession(rng=Random(1))
    b = GameSession(rng=Random(1))
    a.start("classic")
    b.start("classic")
    a.set_heading("down")
    a.step()
    b.step()
    assert a.snake[0] == (4, 3)
    assert b.snake[0] == (5, 2)
