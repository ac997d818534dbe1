"""FastAPI application — HTTP routes, WebSocket endpoint, frame loop."""

import asyncio
import json
import logging
import time

from fastapi import FastAPI, WebSocket, WebSocketDisconnect

from .config import ServerSettings
from .constants import FOODS, SPEED_LABELS, SPEED_PROFILES
from .errors import ConfigurationError, FreeCellsExhausted
from .highscore import FileHighScoreStore, MemoryHighScoreStore
from .maps import map_catalog
from .models import Lifecycle
from .session import GameSession
from .connection_manager import (
    ConnectionManager, build_error_msg, build_game_over_msg, build_start_msg, build_state_msg,
)

logger = logging.getLogger(__name__)

settings = ServerSettings.from_env()
store = FileHighScoreStore(settings.highscore_path) if settings.highscore_path else MemoryHighScoreStore()

app = FastAPI()
manager = ConnectionManager()


@app.get("/maps")
async def list_maps():
    return map_catalog()


@app.get("/options")
async def list_options():
    return {
        "foods": {name: list(emojis) for name, emojis in FOODS.items()},
        "speeds": {name: {"label": SPEED_LABELS[name], "tick_interval": ms} for name, ms in SPEED_PROFILES.items()},
    }


@app.get("/highscore")
async def read_highscore():
    return {"high_score": store.load()}


@app.websocket("/ws")
async def websocket_endpoint(ws: WebSocket):
    session = GameSession(store=store)
    finished = []
    session.on_game_over(finished.append)
    await manager.connect(ws, session)
    frames = asyncio.create_task(frame_loop(ws, session, finished))
    try:
        while True:
            raw = await ws.receive_text()
            try:
                msg = json.loads(raw)
            except ValueError:
                continue
            if isinstance(msg, dict):
                await handle_message(ws, session, msg)
    except WebSocketDisconnect:
        pass
    finally:
        frames.cancel()
        manager.disconnect(ws)


async def handle_message(ws: WebSocket, session: GameSession, msg: dict):
    kind = msg.get("type")
    if kind == "start":
        try:
            session.start(
                msg.get("map", "classic"),
                msg.get("food", "mixed"),
                msg.get("speed", "normal"),
                hold=bool(msg.get("hold", False)),
            )
        except ConfigurationError as exc:
            await manager.send_personal(ws, build_error_msg(str(exc)))
            return
        await manager.send_personal(ws, build_start_msg(session))
    elif kind == "launch":
        session.launch()
    elif kind == "input":
        session.set_heading(msg.get("direction"))
    elif kind == "pause":
        session.toggle_pause()
        await manager.send_personal(ws, build_state_msg(session))
    elif kind == "resume":
        session.resume()
    elif kind == "stop":
        session.stop()
        await manager.send_personal(ws, build_state_msg(session))


async def frame_loop(ws: WebSocket, session: GameSession, finished: list):
    period = 1 / settings.frame_rate
    while True:
        try:
            await send_frame(ws, session, finished)
        except (WebSocketDisconnect, RuntimeError):
            # socket closed under us; the endpoint cleans up the session
            logger.debug("frame loop stopped, socket closed")
            return
        await asyncio.sleep(period)


async def send_frame(ws: WebSocket, session: GameSession, finished: list):
    ticks = 0
    try:
        ticks = session.advance(time.monotonic() * 1000)
    except FreeCellsExhausted as exc:
        logger.error("run ended: %s", exc)
        await manager.send_personal(ws, build_error_msg(str(exc)))

    if ticks or finished or session.lifecycle is Lifecycle.RUNNING:
        await manager.send_personal(ws, build_state_msg(session))
    while finished:
        await manager.send_personal(ws, build_game_over_msg(finished.pop(0)))


if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.info("Snake server starting on http://%s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
