"""Single-player game session: the surface a renderer talks to."""

import logging
import random
from typing import Callable, Optional

from . import engine
from .highscore import MemoryHighScoreStore
from .models import EngineState, GameOver, Lifecycle
from .timing import TimingLoop

logger = logging.getLogger(__name__)


class GameSession:
    """Owns one run at a time plus its timing loop and high score store.

    Every ``start`` replaces the previous run entirely. Sessions share no
    state, so any number of them can live side by side.
    """

    def __init__(self, store=None, rng: Optional[random.Random] = None):
        self.store = store or MemoryHighScoreStore()
        self.high_score = self.store.load()
        self.rng = rng or random.Random()
        self.state: Optional[EngineState] = None
        self.loop = TimingLoop()
        self.listeners: list[Callable[[GameOver], None]] = []
        self._reported = False

    # ── Inbound ──────────────────────────────────────────────────
    def start(self, map_id: str, food_category: str = "mixed", speed_profile: str = "normal",
              hold: bool = False) -> EngineState:
        state = engine.start(map_id, food_category, speed_profile,
                             high_score=self.high_score, rng=self.rng, hold=hold)
        self.state = state
        self.loop.reset()
        self._reported = False
        return state

    def launch(self):
        """End an outer countdown and let a held run begin ticking."""
        if self.state is not None:
            engine.launch(self.state)
            self.loop.reset()

    def set_heading(self, direction) -> bool:
        if self.state is None:
            return False
        return engine.set_heading(self.state, direction)

    def pause(self):
        if self.state is not None:
            engine.pause(self.state)

    def resume(self):
        if self.state is not None and self.state.lifecycle is Lifecycle.PAUSED:
            engine.resume(self.state)
            self.loop.reset()

    def toggle_pause(self):
        if self.lifecycle is Lifecycle.PAUSED:
            self.resume()
        else:
            self.pause()

    def stop(self):
        if self.state is not None:
            engine.stop(self.state)
            self.loop.reset()

    def advance(self, timestamp: float) -> int:
        """Feed one frame timestamp (ms). Returns how many ticks ran."""
        state = self.state
        if state is None:
            return 0
        try:
            return self.loop.advance(state, timestamp)
        finally:
            self._sync_high_score()
            if state.game_over is not None and not self._reported:
                self._reported = True
                self._notify(state.game_over)

    def step(self) -> bool:
        """Run a single tick outside the timing loop."""
        if self.state is None:
            return False
        try:
            return engine.step(self.state)
        finally:
            self._sync_high_score()
            if self.state.game_over is not None and not self._reported:
                self._reported = True
                self._notify(self.state.game_over)

    def on_game_over(self, listener: Callable[[GameOver], None]):
        self.listeners.append(listener)
        return listener

    # ── Outbound ─────────────────────────────────────────────────
    @property
    def lifecycle(self) -> Lifecycle:
        return self.state.lifecycle if self.state is not None else Lifecycle.IDLE

    @property
    def snake(self) -> list:
        return list(self.state.snake.segments) if self.state is not None else []

    @property
    def food(self):
        return self.state.food if self.state is not None else None

    @property
    def score(self) -> int:
        return self.state.run.score if self.state is not None else 0

    @property
    def interpolation(self) -> float:
        return self.loop.interpolation

    # ── Private helpers ──────────────────────────────────────────
    def _sync_high_score(self):
        if self.state is not None and self.state.high_score > self.high_score:
            self.high_score = self.state.high_score
            self.store.save(self.high_score)

    def _notify(self, event: GameOver):
        for listener in self.listeners:
            listener(event)
