# app/main.py
from __future__ import annotations

import asyncio
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from redis.asyncio import Redis

from app.domain.controller import RoundController
from app.settings import get_settings
from app.store.redis_repo import RedisRepo
from app.transport.http import router as http_router
from app.transport.ws import router as ws_router


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title=settings.APP_NAME)
    allowed_origins = [o.strip() for o in settings.WS_ALLOWED_ORIGINS.split(",") if o.strip()]
    if "null" not in allowed_origins:
        allowed_origins.append("null")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    async def _startup() -> None:
        r = Redis.from_url(settings.REDIS_URL, decode_responses=False)
        await r.ping()
        repo = RedisRepo(r, key_prefix=settings.STATE_KEY_PREFIX, state_key=settings.STATE_KEY)
        app.state.redis = r
        app.state.repo = repo
        app.state.controller = RoundController(await repo.load_state())
        app.state.command_lock = asyncio.Lock()

    @app.on_event("shutdown")
    async def _shutdown() -> None:
        r: Redis = app.state.redis
        await r.close()

    @app.get("/health")
    async def health():
        r: Redis = app.state.redis
        pong = await r.ping()
        return {"ok": True, "redis": str(pong)}

    app.include_router(ws_router)
    app.include_router(http_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    s = get_settings()
    uvicorn.run("app.main:app", host=s.HOST, port=s.PORT, log_level=s.LOG_LEVEL.lower())
