"""Data models."""

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .constants import FOOD_SCORE, LEVEL_THRESHOLD
from .grid import Cell
from .maps import MapConfig


class Lifecycle(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"


@dataclass
class Food:
    cell: Cell
    category: str
    emoji: str


@dataclass
class SnakeState:
    segments: list[Cell]
    heading: str = "right"
    queued_heading: str = "right"

    def head(self) -> Cell:
        return self.segments[0]

    def tail(self) -> Cell:
        return self.segments[-1]

    def __len__(self) -> int:
        return len(self.segments)


@dataclass
class RunState:
    tick_interval: int
    score: int = 0
    food_eaten: int = 0
    ticks: int = 0
    lifecycle: Lifecycle = Lifecycle.IDLE

    @property
    def level(self) -> int:
        return self.food_eaten // LEVEL_THRESHOLD + 1

    def record_food(self):
        self.food_eaten += 1
        self.score += FOOD_SCORE


@dataclass(frozen=True)
class GameOver:
    score: int
    length: int
    level: int
    high_score: int
    new_high_score: bool
    reason: str


@dataclass
class EngineState:
    """Everything owned by a single run. ``start`` builds a fresh one."""

    map_id: str
    map_config: MapConfig
    food_category: str
    speed_profile: str
    obstacles: frozenset
    snake: SnakeState
    run: RunState
    food: Optional[Food] = None
    high_score: int = 0
    start_high_score: int = 0
    game_over: Optional[GameOver] = None
    stopped: bool = False
    rng: random.Random = field(default_factory=random.Random)

    @property
    def lifecycle(self) -> Lifecycle:
        return self.run.lifecycle

    @property
    def is_running(self) -> bool:
        return self.run.lifecycle is Lifecycle.RUNNING
