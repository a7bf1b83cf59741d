from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Request

from app.domain.view import render
from app.transport.dispatcher import dispatch_message

router = APIRouter(tags=["vote"])


@router.get("/board")
async def get_board(request: Request):
    """
    Current board view (same payload as the "board" event).
    """
    async with request.app.state.command_lock:
        return render(request.app.state.controller.state).model_dump()


@router.post("/commands")
async def post_command(payload: Dict[str, Any], request: Request):
    """
    Apply one command message. Protocol errors come back as an "error" event, not an HTTP error.
    """
    events = await dispatch_message(app=request.app, raw=payload)
    return {"events": events}
