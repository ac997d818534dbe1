"""Fixed-timestep driver decoupling logic ticks from render frames."""

import logging
from typing import Optional

from . import engine
from .models import EngineState, Lifecycle

logger = logging.getLogger(__name__)


class TimingLoop:
    """Accumulates frame time and runs whole ticks out of it.

    The loop never reads a clock. Callers pass the frame timestamp (ms) to
    ``advance`` and read ``interpolation`` afterwards to draw sub-tick motion.
    """

    def __init__(self):
        self.elapsed = 0.0
        self.last_timestamp: Optional[float] = None
        self.interpolation = 0.0

    def reset(self):
        self.elapsed = 0.0
        self.last_timestamp = None
        self.interpolation = 0.0

    def advance(self, state: EngineState, timestamp: float) -> int:
        """Consume the time since the previous frame. Returns ticks run."""
        if state.run.lifecycle is not Lifecycle.RUNNING:
            # banked time never survives a pause or a stop
            self.reset()
            return 0

        if self.last_timestamp is None:
            self.last_timestamp = timestamp
            return 0

        self.elapsed += max(0.0, timestamp - self.last_timestamp)
        self.last_timestamp = timestamp

        ticks = 0
        while self.elapsed >= state.run.tick_interval:
            interval = state.run.tick_interval
            engine.step(state)
            ticks += 1
            self.elapsed -= interval
            if state.run.lifecycle is not Lifecycle.RUNNING:
                break

        if state.run.lifecycle is Lifecycle.RUNNING:
            self.interpolation = self.elapsed / state.run.tick_interval
        else:
            self.interpolation = 0.0
        return ticks
