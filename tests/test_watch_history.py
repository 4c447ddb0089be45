"""Tests for the bounded, most-recent-first watch history."""

from datetime import datetime, timedelta, timezone
import uuid

import pytest

from videotube.shared.core.exceptions import NotFoundError
from videotube.shared.repositories.watch_history_repository import WatchHistoryRepository
from videotube.shared.services.watch_history_service import MAX_ENTRIES, WatchHistoryService
from videotube.shared.services.video_service import VideoService


@pytest.fixture
async def viewer(make_user):
    return await make_user("viewer")


async def test_most_recent_first_without_duplicates(db_session, viewer, make_video):
    first = await make_video(viewer, "One")
    second = await make_video(viewer, "Two")
    service = WatchHistoryService(db_session)

    await service.record(viewer.id, first.id)
    await service.record(viewer.id, second.id)
    history = await service.record(viewer.id, first.id)

    assert [entry.video_id for entry in history] == [first.id, second.id]


async def test_history_is_capped(db_session, viewer):
    videos = VideoService(db_session)
    service = WatchHistoryService(db_session)
    uploaded = []
    for index in range(MAX_ENTRIES + 3):
        video = await videos.publish(
            owner_id=viewer.id,
            title=f"Episode {index}",
            video_url=f"videos/{index}.mp4",
            thumbnail_url=f"thumbnails/{index}.png",
        )
        uploaded.append(video.id)
        await service.record(viewer.id, video.id)

    history = await service.list(viewer.id)

    assert len(history) == MAX_ENTRIES
    assert history[0].video_id == uploaded[-1]
    # The three oldest were evicted
    assert uploaded[0] not in {entry.video_id for entry in history}
    assert history[-1].video_id == uploaded[3]


async def test_entries_carry_their_video(db_session, viewer, make_video):
    video = await make_video(viewer, "With details")

    history = await WatchHistoryService(db_session).record(viewer.id, str(video.id))

    assert history[0].video.title == "With details"


async def test_unknown_video(db_session, viewer):
    with pytest.raises(NotFoundError):
        await WatchHistoryService(db_session).record(viewer.id, uuid.uuid4())


async def test_unpublished_video_of_another_user(db_session, viewer, make_user, make_video):
    creator = await make_user("creator")
    draft = await make_video(creator, "Draft")
    await VideoService(db_session).toggle_publish(draft.id, creator.id)

    with pytest.raises(NotFoundError):
        await WatchHistoryService(db_session).record(viewer.id, draft.id)

    # The owner can still watch their own draft
    history = await WatchHistoryService(db_session).record(creator.id, draft.id)
    assert [entry.video_id for entry in history] == [draft.id]


async def test_duplicate_insert_is_absorbed(db_session, viewer, make_video):
    first = await make_video(viewer, "One")
    second = await make_video(viewer, "Two")
    repo = WatchHistoryRepository(db_session)
    earlier = datetime.now(timezone.utc) - timedelta(minutes=5)

    assert await repo.add_or_touch(viewer.id, first.id, earlier) is True
    assert await repo.add_or_touch(viewer.id, second.id, earlier + timedelta(minutes=1)) is True
    # A racing request inserts the same pair again without removing it first
    assert await repo.add_or_touch(viewer.id, first.id, earlier + timedelta(minutes=2)) is False

    history = await repo.list_for_user(viewer.id)
    assert [entry.video_id for entry in history] == [first.id, second.id]
