"""Core run state machine: start, heading control and the per-tick step."""

import logging
import random
from typing import Optional

from .constants import DIRECTIONS, OPPOSITES, SPEED_PROFILES, SPEED_STEP, MIN_TICK_INTERVAL
from .errors import ConfigurationError, FreeCellsExhausted
from .food import check_category, spawn
from .grid import in_bounds, same_cell, step_cell, wrapped
from .maps import find_start, generate, get_map
from .models import EngineState, GameOver, Lifecycle, RunState, SnakeState

logger = logging.getLogger(__name__)


def check_speed(speed_profile: str) -> int:
    try:
        return SPEED_PROFILES[speed_profile]
    except KeyError:
        raise ConfigurationError(f"unknown speed profile {speed_profile!r}") from None


def new_run(map_id: str, food_category: str = "mixed", speed_profile: str = "normal",
            high_score: int = 0, rng: Optional[random.Random] = None) -> EngineState:
    """Build a fresh, idle run. Nothing from a previous run is reused."""
    map_config = get_map(map_id)
    check_category(food_category)
    tick_interval = check_speed(speed_profile)
    rng = rng or random.Random()

    obstacles = generate(map_id)
    segments, heading = find_start(obstacles)
    state = EngineState(
        map_id=map_id,
        map_config=map_config,
        food_category=food_category,
        speed_profile=speed_profile,
        obstacles=obstacles,
        snake=SnakeState(segments=segments, heading=heading, queued_heading=heading),
        run=RunState(tick_interval=tick_interval),
        high_score=high_score,
        start_high_score=high_score,
        rng=rng,
    )
    state.food = spawn(state.snake.segments, obstacles, map_id, food_category, rng)
    logger.info("new run on %s (%s), snake at %s", map_id, speed_profile, segments)
    return state


def launch(state: EngineState):
    if state.run.lifecycle is Lifecycle.IDLE and state.game_over is None and not state.stopped:
        state.run.lifecycle = Lifecycle.RUNNING


def start(map_id: str, food_category: str = "mixed", speed_profile: str = "normal",
          high_score: int = 0, rng: Optional[random.Random] = None, hold: bool = False) -> EngineState:
    state = new_run(map_id, food_category, speed_profile, high_score=high_score, rng=rng)
    if not hold:
        launch(state)
    return state


def pause(state: EngineState):
    if state.run.lifecycle is Lifecycle.RUNNING:
        state.run.lifecycle = Lifecycle.PAUSED
        logger.debug("paused at tick %d", state.run.ticks)


def resume(state: EngineState):
    if state.run.lifecycle is Lifecycle.PAUSED:
        state.run.lifecycle = Lifecycle.RUNNING
        logger.debug("resumed at tick %d", state.run.ticks)


def stop(state: EngineState):
    """Abandon the run for good; only a new start brings the snake back."""
    if state.run.lifecycle is not Lifecycle.OVER:
        state.run.lifecycle = Lifecycle.IDLE
        state.stopped = True


def set_heading(state: EngineState, direction) -> bool:
    """Queue ``direction`` for the next tick.

    Only the latest accepted call before a tick counts. Reversals are judged
    against the heading the snake is actually moving in, not the queued one.
    """
    if state.run.lifecycle is not Lifecycle.RUNNING:
        return False
    if not isinstance(direction, str) or direction not in DIRECTIONS:
        return False
    if OPPOSITES[direction] == state.snake.heading:
        return False
    state.snake.queued_heading = direction
    return True


def step(state: EngineState) -> bool:
    """Advance the run by one tick. Returns True if the snake moved."""
    if state.run.lifecycle is not Lifecycle.RUNNING:
        return False

    snake = state.snake
    cfg = state.map_config
    snake.heading = snake.queued_heading
    new_head = step_cell(snake.head(), snake.heading)

    if cfg.wrap:
        new_head = wrapped(new_head)
    elif not in_bounds(new_head):
        if not cfg.walls:
            raise ConfigurationError(f"map {state.map_id!r} neither wraps nor has walls")
        _finish(state, "wall")
        return False

    # the tail always vacates for this check, even on a growing tick
    if new_head in snake.segments[:-1]:
        _finish(state, "self")
        return False

    if new_head in state.obstacles:
        _finish(state, "obstacle")
        return False

    snake.segments.insert(0, new_head)
    state.run.ticks += 1

    if state.food is not None and same_cell(new_head, state.food.cell):
        _eat(state)
    else:
        snake.segments.pop()
    return True


def _eat(state: EngineState):
    run = state.run
    run.record_food()

    if state.map_config.speed_increase:
        faster = max(MIN_TICK_INTERVAL, run.tick_interval - SPEED_STEP)
        if faster != run.tick_interval:
            logger.debug("tick interval %d -> %d ms", run.tick_interval, faster)
        run.tick_interval = faster

    if run.score > state.high_score:
        state.high_score = run.score

    try:
        state.food = spawn(state.snake.segments, state.obstacles, state.map_id,
                           state.food_category, state.rng)
    except FreeCellsExhausted:
        state.food = None
        _finish(state, "exhausted")
        raise


def _finish(state: EngineState, reason: str):
    run = state.run
    run.lifecycle = Lifecycle.OVER
    state.game_over = GameOver(
        score=run.score,
        length=len(state.snake),
        level=run.level,
        high_score=state.high_score,
        new_high_score=run.score > state.start_high_score,
        reason=reason,
    )
    logger.info("game over on %s (%s): score %d, length %d, level %d",
                state.map_id, reason, run.score, len(state.snake), run.level)
