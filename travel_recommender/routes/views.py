"""
Browser-facing routes: the preference form, the timeline page and the
live timeline socket.

- GET /            render the form and the current timeline
- POST /           submit the form (validate, recommend, store, reset)
- WS  /ws/timeline push re-rendered timeline items on every store change
"""

import logging

import anyio
from fastapi import APIRouter, Depends, Request, WebSocket, WebSocketDisconnect
from fastapi.responses import HTMLResponse

from travel_recommender.routes.dependencies import (
    get_recommend_client,
    get_record_store,
    get_timeline_store,
)
from travel_recommender.services.recommend_client import RecommendationApiClient
from travel_recommender.services.record_store import RecordStore
from travel_recommender.views.form import PreferenceForm
from travel_recommender.views.html import render_page, render_timeline_items
from travel_recommender.views.timeline import TimelineView, build_entries

logger = logging.getLogger(__name__)

router = APIRouter(tags=["views"])


@router.get("/", response_class=HTMLResponse)
async def index(store: RecordStore = Depends(get_record_store)) -> HTMLResponse:
    """Empty form plus the current timeline."""
    records = await store.list_records()
    return HTMLResponse(content=render_page(build_entries(records)))


@router.post("/", response_class=HTMLResponse)
async def submit_preferences(
    request: Request,
    store: RecordStore = Depends(get_record_store),
    api_client: RecommendationApiClient = Depends(get_recommend_client),
) -> HTMLResponse:
    """
    Handle a form post.

    The page is re-rendered either way: with per-field errors and the
    entered values on validation failure, with an alert on endpoint or
    save failure, and with an empty form after a successful save.
    """
    form_data = await request.form()

    form = PreferenceForm(api_client=api_client, store=store)
    outcome = await form.submit(dict(form_data))
    logger.info(f"Form submission finished with status={outcome.status}")

    records = await store.list_records()
    return HTMLResponse(
        content=render_page(
            build_entries(records),
            values=form.values,
            errors=form.errors,
            alert=outcome.alert,
        )
    )


@router.websocket("/ws/timeline")
async def timeline_socket(
    websocket: WebSocket,
    store: RecordStore = Depends(get_timeline_store),
) -> None:
    """
    Live timeline feed.

    Sends the rendered <li> items once on connect and after every change.
    The store subscription lives exactly as long as the socket.
    """
    await websocket.accept()

    view = TimelineView(store)
    updates = view.subscribe()

    async def _push_updates(cancel_scope: anyio.CancelScope) -> None:
        try:
            async for records in updates:
                await websocket.send_text(render_timeline_items(build_entries(records)))
        except WebSocketDisconnect:
            cancel_scope.cancel()

    async def _wait_for_disconnect(cancel_scope: anyio.CancelScope) -> None:
        # Incoming messages are ignored; receive only surfaces the disconnect
        try:
            while True:
                await websocket.receive_text()
        except WebSocketDisconnect:
            cancel_scope.cancel()

    try:
        async with anyio.create_task_group() as group:
            group.start_soon(_push_updates, group.cancel_scope)
            group.start_soon(_wait_for_disconnect, group.cancel_scope)
    except Exception as e:
        logger.exception(f"Timeline socket failed: {e}")
        raise
    finally:
        with anyio.CancelScope(shield=True):
            await updates.aclose()
        logger.info("Timeline socket closed")
