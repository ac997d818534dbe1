"""WebSocket connection management and state serialization."""

import json
from dataclasses import asdict

from fastapi import WebSocket

from .constants import GRID_SIZE
from .models import GameOver
from .session import GameSession


class ConnectionManager:
    def __init__(self):
        self.connections: dict[WebSocket, GameSession] = {}

    async def connect(self, ws: WebSocket, session: GameSession):
        await ws.accept()
        self.connections[ws] = session

    def disconnect(self, ws: WebSocket):
        session = self.connections.pop(ws, None)
        if session is not None:
            session.stop()

    async def send_personal(self, ws: WebSocket, message: str):
        await ws.send_text(message)


def cells_to_list(cells) -> list[list[int]]:
    return [[x, y] for x, y in cells]


def build_start_msg(session: GameSession) -> str:
    state = session.state
    cfg = state.map_config
    return json.dumps({
        "type": "game_start",
        "map": state.map_id,
        "grid": [GRID_SIZE, GRID_SIZE],
        "walls": cfg.walls,
        "wrap": cfg.wrap,
        "speed_increase": cfg.speed_increase,
        "obstacles": cells_to_list(sorted(state.obstacles)),
        "lifecycle": session.lifecycle.value,
    })


def build_state_msg(session: GameSession) -> str:
    state = session.state
    food = session.food
    return json.dumps({
        "type": "state",
        "snake": cells_to_list(session.snake),
        "heading": state.snake.heading if state is not None else None,
        "food": {"cell": list(food.cell), "category": food.category, "emoji": food.emoji} if food else None,
        "score": session.score,
        "high_score": session.high_score,
        "level": state.run.level if state is not None else 1,
        "tick_interval": state.run.tick_interval if state is not None else None,
        "lifecycle": session.lifecycle.value,
        "interpolation": session.interpolation,
    })


def build_game_over_msg(event: GameOver) -> str:
    return json.dumps({"type": "game_over", **asdict(event)})


def build_error_msg(message: str) -> str:
    return json.dumps({"type": "error", "message": message})
