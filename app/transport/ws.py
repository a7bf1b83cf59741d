# app/transport/ws.py
from __future__ import annotations

import ipaddress
import logging
from urllib.parse import urlparse

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from app.settings import get_settings
from app.transport.dispatcher import dispatch_message
from app.transport.protocols import OutError

logger = logging.getLogger(__name__)

router = APIRouter()


def _is_private_ip(host: str) -> bool:
    """Return True if host is a private IP (192.168.x.x, 10.x.x.x, 172.16-31.x.x)."""
    try:
        ip = ipaddress.ip_address(host)
        return ip.is_private
    except ValueError:
        return False


def origin_allowed(origin: str | None) -> bool:
    settings = get_settings()
    if origin is None:
        return True

    allowed = {o.strip() for o in settings.WS_ALLOWED_ORIGINS.split(",") if o.strip()}
    if origin in allowed:
        return True
    if settings.WS_ALLOW_LAN_ORIGINS:
        o = urlparse(origin)
        if _is_private_ip(o.hostname or "") and o.port == 5173:
            return True
    return False


@router.websocket("/ws")
async def ws_board(websocket: WebSocket):
    if not origin_allowed(websocket.headers.get("origin")):
        await websocket.close(code=1008)
        return

    await websocket.accept()

    try:
        # initial redraw
        for e in await dispatch_message(app=websocket.app, raw={"type": "snapshot"}):
            await websocket.send_json(e)

        while True:
            try:
                raw = await websocket.receive_json()
            except ValueError:
                err = OutError(code="BAD_MESSAGE", message="Message must be JSON").model_dump()
                await websocket.send_json(err)
                continue

            for e in await dispatch_message(app=websocket.app, raw=raw):
                await websocket.send_json(e)

    except WebSocketDisconnect:
        logger.debug("websocket disconnected")
