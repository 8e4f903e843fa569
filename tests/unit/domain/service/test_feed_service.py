"""Unit tests for the gallery snapshot feed."""

import asyncio

import pytest

from gallery.domain.service import GalleryFeed, diff_snapshots
from tests.conftest import make_design


class TestGalleryFeed:
    """Tests for GalleryFeed and Subscription."""

    @pytest.mark.asyncio
    async def test_publish_builds_snapshot_with_top(self):
        feed = GalleryFeed(top_n=2)
        designs = [make_design(score=s) for s in (1, 4, 2)]

        snapshot = feed.publish(designs)

        assert snapshot.version == 1
        assert [d.id for d in snapshot.designs] == [d.id for d in designs]
        assert [d.score for d in snapshot.top] == [4, 2]
        assert feed.latest == snapshot

    @pytest.mark.asyncio
    async def test_new_subscriber_receives_latest_first(self):
        feed = GalleryFeed()
        published = feed.publish([make_design()])

        async with feed.subscribe() as subscription:
            received = await asyncio.wait_for(subscription.get(), timeout=1)

        assert received == published

    @pytest.mark.asyncio
    async def test_slow_subscriber_only_sees_newest(self):
        """Snapshots published before a read should collapse into the newest."""
        feed = GalleryFeed()
        subscription = feed.subscribe()

        feed.publish([make_design()])
        feed.publish([make_design(), make_design()])
        newest = feed.publish([])

        received = await asyncio.wait_for(subscription.get(), timeout=1)
        assert received == newest
        subscription.close()

    @pytest.mark.asyncio
    async def test_every_subscriber_receives_publish(self):
        feed = GalleryFeed()
        first = feed.subscribe()
        second = feed.subscribe()

        snapshot = feed.publish([make_design()])

        assert await asyncio.wait_for(first.get(), timeout=1) == snapshot
        assert await asyncio.wait_for(second.get(), timeout=1) == snapshot
        assert feed.subscriber_count == 2

    @pytest.mark.asyncio
    async def test_close_stops_delivery_and_unregisters(self):
        feed = GalleryFeed()
        subscription = feed.subscribe()

        subscription.close()
        feed.publish([make_design()])

        assert subscription.closed
        assert feed.subscriber_count == 0
        assert await subscription.get() is None

    @pytest.mark.asyncio
    async def test_close_wakes_waiting_reader(self):
        feed = GalleryFeed()
        subscription = feed.subscribe()
        collected = []

        async def consume():
            async for snapshot in subscription:
                collected.append(snapshot)

        task = asyncio.create_task(consume())
        await asyncio.sleep(0)
        subscription.close()
        await asyncio.wait_for(task, timeout=1)

        assert collected == []

    @pytest.mark.asyncio
    async def test_versions_increase(self):
        feed = GalleryFeed()

        versions = [feed.publish([]).version for _ in range(3)]

        assert versions == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_overlapping_loads_publish_in_order(self):
        """A load that starts later must not be overtaken by an older one."""
        feed = GalleryFeed()
        store = [make_design("First")]
        release = asyncio.Event()

        async def slow_load():
            designs = list(store)
            await release.wait()
            return designs

        async def load():
            return list(store)

        first = asyncio.create_task(feed.publish_from(slow_load))
        await asyncio.sleep(0)
        store.append(make_design("Second"))
        second = asyncio.create_task(feed.publish_from(load))
        await asyncio.sleep(0)
        release.set()
        await asyncio.gather(first, second)

        assert feed.latest.version == 2
        assert [d.title for d in feed.latest.designs] == ["First", "Second"]


class TestDiffSnapshots:
    """Tests for diff_snapshots."""

    def test_first_snapshot_is_all_added(self):
        feed = GalleryFeed()
        design = make_design()

        diff = diff_snapshots(None, feed.publish([design]))

        assert diff.added == [design.id]
        assert diff.removed == []
        assert diff.changed == []

    def test_detects_added_removed_and_changed(self):
        feed = GalleryFeed()
        kept = make_design(score=0)
        dropped = make_design()
        previous = feed.publish([kept, dropped])

        bumped = kept.model_copy(update={"score": 1})
        added = make_design()
        current = feed.publish([bumped, added])

        diff = diff_snapshots(previous, current)

        assert diff.added == [added.id]
        assert diff.removed == [dropped.id]
        assert diff.changed == [kept.id]

    def test_identical_snapshots_are_empty(self):
        feed = GalleryFeed()
        design = make_design()

        diff = diff_snapshots(feed.publish([design]), feed.publish([design]))

        assert diff.is_empty
