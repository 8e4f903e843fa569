"""Live gallery stream.

Clients connect to ``/designs/stream`` and receive the full gallery state
after every change. Each message is a complete snapshot; ``diff`` lists
what changed since the previous message on the same socket.
"""

import asyncio
import contextlib
from datetime import datetime
from typing import Optional

import logfire
from dishka import AsyncContainer
from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import BaseModel

from gallery.application.usecase.common import DesignItem
from gallery.domain.service import (
    DesignService,
    GalleryFeed,
    GallerySnapshot,
    SnapshotDiff,
    Subscription,
    diff_snapshots,
)

router = APIRouter(tags=["stream"])


class SnapshotMessage(BaseModel):
    """Message pushed to stream clients."""

    version: int
    designs: list[DesignItem]
    top: list[DesignItem]
    published_at: datetime
    diff: SnapshotDiff

    @classmethod
    def build(
        cls, snapshot: GallerySnapshot, previous: Optional[GallerySnapshot]
    ) -> "SnapshotMessage":
        return cls(
            version=snapshot.version,
            designs=[DesignItem.from_design(d) for d in snapshot.designs],
            top=[DesignItem.from_design(d) for d in snapshot.top],
            published_at=snapshot.published_at,
            diff=diff_snapshots(previous, snapshot),
        )


async def _ensure_snapshot(container: AsyncContainer, feed: GalleryFeed) -> None:
    """Publish an initial snapshot if nothing has been published yet."""
    if feed.latest is not None:
        return
    async with container() as request_container:
        design_service = await request_container.get(DesignService)
        await feed.publish_from(design_service.list_designs)


async def _forward(websocket: WebSocket, subscription: Subscription) -> None:
    previous: Optional[GallerySnapshot] = None
    async for snapshot in subscription:
        message = SnapshotMessage.build(snapshot, previous)
        await websocket.send_json(message.model_dump(mode="json"))
        previous = snapshot


@router.websocket("/designs/stream")
async def stream_designs(websocket: WebSocket) -> None:
    """Push gallery snapshots until the client disconnects.

    Messages sent by the client are ignored.
    """
    container: AsyncContainer = websocket.app.state.dishka_container
    feed = await container.get(GalleryFeed)

    await websocket.accept()
    await _ensure_snapshot(container, feed)

    async with feed.subscribe() as subscription:
        logfire.info("Stream client connected", subscribers=feed.subscriber_count)
        sender = asyncio.create_task(_forward(websocket, subscription))
        try:
            while True:
                await websocket.receive_text()
        except WebSocketDisconnect as e:
            logfire.info("Stream client disconnected", code=e.code)
        finally:
            sender.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await sender
