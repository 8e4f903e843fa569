"""Gallery snapshot feed.

Subscribers receive the full design collection (and the current top
designs) after every change. Each snapshot replaces the previous one, so a
slow subscriber only ever sees the newest state.
"""

import asyncio
from datetime import datetime
from typing import Awaitable, Callable, Iterable, Optional

import logfire
from pydantic import BaseModel, Field

from gallery.domain.model.design import Design
from gallery.domain.value import DesignId

from .base import Service
from .ranking import top_n


class GallerySnapshot(BaseModel):
    """Full state of the gallery at one point in time."""

    version: int
    designs: list[Design]
    top: list[Design]
    published_at: datetime = Field(default_factory=datetime.now)


class SnapshotDiff(BaseModel):
    """Designs that differ between two snapshots."""

    added: list[DesignId] = []
    removed: list[DesignId] = []
    changed: list[DesignId] = []

    @property
    def is_empty(self) -> bool:
        return not (self.added or self.removed or self.changed)


def diff_snapshots(
    previous: Optional[GallerySnapshot], current: GallerySnapshot
) -> SnapshotDiff:
    """Compare two snapshots by design ID.

    A design is changed when any of its fields differ (usually the score).
    """
    before = {d.id: d for d in previous.designs} if previous else {}
    after = {d.id: d for d in current.designs}

    return SnapshotDiff(
        added=[i for i in after if i not in before],
        removed=[i for i in before if i not in after],
        changed=[i for i in after if i in before and after[i] != before[i]],
    )


class Subscription:
    """A live subscription to the gallery feed.

    Iterate it to receive snapshots. Call close() (or leave the async with
    block) when the consumer goes away; a closed subscription receives
    nothing further.
    """

    def __init__(self, feed: "GalleryFeed") -> None:
        self._feed = feed
        # Holds at most the newest undelivered snapshot; None wakes a closed reader
        self._queue: asyncio.Queue[Optional[GallerySnapshot]] = asyncio.Queue(
            maxsize=1
        )
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def offer(self, snapshot: GallerySnapshot) -> None:
        """Replace any pending snapshot with a newer one."""
        if self._closed:
            return
        self._drain()
        self._queue.put_nowait(snapshot)

    async def get(self) -> Optional[GallerySnapshot]:
        """Wait for the next snapshot (None once closed)."""
        if self._closed:
            return None
        snapshot = await self._queue.get()
        if self._closed:
            return None
        return snapshot

    def close(self) -> None:
        """Release the subscription."""
        if self._closed:
            return
        self._closed = True
        self._feed._remove(self)
        self._drain()
        self._queue.put_nowait(None)

    def _drain(self) -> None:
        while not self._queue.empty():
            self._queue.get_nowait()

    def __aiter__(self) -> "Subscription":
        return self

    async def __anext__(self) -> GallerySnapshot:
        snapshot = await self.get()
        if snapshot is None:
            raise StopAsyncIteration
        return snapshot

    async def __aenter__(self) -> "Subscription":
        return self

    async def __aexit__(self, *exc_info) -> None:
        self.close()


class GalleryFeed(Service):
    """In-process publisher of gallery snapshots.

    Application-scoped: one feed is shared by every request and socket.
    """

    def __init__(self, top_n: int = 3) -> None:
        """Initialize feed.

        Args:
            top_n: Size of the ranking included in each snapshot
        """
        self.top_n = top_n
        self._subscriptions: list[Subscription] = []
        self._latest: Optional[GallerySnapshot] = None
        self._version = 0
        self._publish_lock = asyncio.Lock()

    @property
    def latest(self) -> Optional[GallerySnapshot]:
        """Most recently published snapshot, if any."""
        return self._latest

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def subscribe(self) -> Subscription:
        """Open a subscription; the latest snapshot is delivered first."""
        subscription = Subscription(self)
        self._subscriptions.append(subscription)
        if self._latest is not None:
            subscription.offer(self._latest)
        logfire.debug("Feed subscription opened", subscribers=self.subscriber_count)
        return subscription

    def publish(self, designs: Iterable[Design]) -> GallerySnapshot:
        """Publish the current design collection to every subscriber.

        Args:
            designs: All live designs, in display order

        Returns:
            The published snapshot
        """
        design_list = list(designs)
        self._version += 1
        snapshot = GallerySnapshot(
            version=self._version,
            designs=design_list,
            top=top_n(design_list, self.top_n),
        )
        self._latest = snapshot

        for subscription in list(self._subscriptions):
            subscription.offer(snapshot)

        logfire.info(
            "Gallery snapshot published",
            version=snapshot.version,
            designs=len(design_list),
            subscribers=self.subscriber_count,
        )
        return snapshot

    async def publish_from(
        self, load: Callable[[], Awaitable[Iterable[Design]]]
    ) -> GallerySnapshot:
        """Load the current designs and publish them as one step.

        Loads are serialized, so a snapshot never reads older state than the
        snapshot published before it.

        Args:
            load: Reads all live designs from the store, in display order
        """
        async with self._publish_lock:
            return self.publish(await load())

    def _remove(self, subscription: Subscription) -> None:
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)
            logfire.debug(
                "Feed subscription closed", subscribers=self.subscriber_count
            )
