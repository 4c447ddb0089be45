"""Tests for like and subscription toggles."""

import uuid

import pytest

from videotube.shared.core.exceptions import (
    InvalidIdentifierError,
    SelfReferenceDeniedError,
    TargetNotFoundError,
)
from videotube.shared.models import RelationKind, ToggleOutcome
from videotube.shared.repositories.toggle_relation_repository import ToggleRelationRepository
from videotube.shared.services.comment_service import CommentService
from videotube.shared.services.toggle_service import ToggleService
from videotube.shared.services.tweet_service import TweetService
from videotube.shared.services.video_service import VideoService


@pytest.fixture
async def viewer(make_user):
    return await make_user("viewer")


@pytest.fixture
async def creator(make_user):
    return await make_user("creator")


class TestToggle:
    async def test_like_then_unlike(self, db_session, viewer, creator, make_video):
        video = await make_video(creator)
        service = ToggleService(db_session)

        assert await service.toggle(viewer.id, video.id, RelationKind.VIDEO_LIKE) is ToggleOutcome.CREATED
        assert await service.count(video.id, RelationKind.VIDEO_LIKE) == 1

        assert await service.toggle(viewer.id, video.id, RelationKind.VIDEO_LIKE) is ToggleOutcome.DELETED
        assert await service.count(video.id, RelationKind.VIDEO_LIKE) == 0

    async def test_even_number_of_toggles_restores_state(self, db_session, viewer, creator, make_video):
        video = await make_video(creator)
        service = ToggleService(db_session)

        for _ in range(4):
            await service.toggle(viewer.id, str(video.id), RelationKind.VIDEO_LIKE)

        assert not await service.has_relation(viewer.id, video.id, RelationKind.VIDEO_LIKE)

    async def test_kinds_are_independent(self, db_session, viewer, creator, make_video):
        video = await make_video(creator)
        comment = await CommentService(db_session).add(video.id, creator.id, "Thanks for watching")
        tweet = await TweetService(db_session).create(creator.id, "New video is up")
        service = ToggleService(db_session)

        await service.toggle(viewer.id, video.id, RelationKind.VIDEO_LIKE)
        await service.toggle(viewer.id, comment.id, RelationKind.COMMENT_LIKE)
        await service.toggle(viewer.id, tweet.id, RelationKind.TWEET_LIKE)
        await service.toggle(viewer.id, creator.id, RelationKind.SUBSCRIPTION)

        assert await service.has_relation(viewer.id, comment.id, RelationKind.COMMENT_LIKE)
        assert await service.has_relation(viewer.id, tweet.id, RelationKind.TWEET_LIKE)
        assert await service.count(creator.id, RelationKind.SUBSCRIPTION) == 1
        # A like on the video is not a like on the comment
        assert not await service.has_relation(viewer.id, video.id, RelationKind.COMMENT_LIKE)

    async def test_self_subscription_denied(self, db_session, viewer):
        with pytest.raises(SelfReferenceDeniedError) as exc_info:
            await ToggleService(db_session).toggle(viewer.id, viewer.id, RelationKind.SUBSCRIPTION)

        assert exc_info.value.status_code == 400
        assert await ToggleService(db_session).count(viewer.id, RelationKind.SUBSCRIPTION) == 0

    async def test_self_like_allowed(self, db_session, creator, make_video):
        video = await make_video(creator)

        outcome = await ToggleService(db_session).toggle(creator.id, video.id, RelationKind.VIDEO_LIKE)

        assert outcome is ToggleOutcome.CREATED

    async def test_missing_target(self, db_session, viewer):
        with pytest.raises(TargetNotFoundError):
            await ToggleService(db_session).toggle(viewer.id, uuid.uuid4(), RelationKind.TWEET_LIKE)

    async def test_malformed_target(self, db_session, viewer):
        with pytest.raises(InvalidIdentifierError):
            await ToggleService(db_session).toggle(viewer.id, "42", RelationKind.VIDEO_LIKE)

    async def test_duplicate_insert_is_absorbed(self, db_session, viewer, creator, make_video):
        video = await make_video(creator)
        repo = ToggleRelationRepository(db_session)

        assert await repo.insert_if_absent(viewer.id, video.id, RelationKind.VIDEO_LIKE) is True
        assert await repo.insert_if_absent(viewer.id, video.id, RelationKind.VIDEO_LIKE) is False
        assert await repo.count_for_target(video.id, RelationKind.VIDEO_LIKE) == 1


class TestReadSide:
    async def test_liked_videos(self, db_session, viewer, creator, make_video):
        liked = await make_video(creator, "Liked")
        await make_video(creator, "Ignored")
        service = ToggleService(db_session)
        await service.toggle(viewer.id, liked.id, RelationKind.VIDEO_LIKE)

        videos = await service.liked_videos(viewer.id)

        assert [video.id for video in videos] == [liked.id]

    async def test_subscribers_and_subscriptions(self, db_session, viewer, creator):
        service = ToggleService(db_session)
        await service.toggle(viewer.id, creator.id, RelationKind.SUBSCRIPTION)

        assert [user.id for user in await service.subscribers(creator.id)] == [viewer.id]
        assert [user.id for user in await service.subscribed_channels(viewer.id)] == [creator.id]

    async def test_subscribers_of_unknown_channel(self, db_session):
        with pytest.raises(TargetNotFoundError):
            await ToggleService(db_session).subscribers(uuid.uuid4())


class TestUnpublishedTargets:
    async def test_only_the_owner_can_like_a_draft(self, db_session, viewer, creator, make_video):
        draft = await make_video(creator, "Draft")
        await VideoService(db_session).toggle_publish(draft.id, creator.id)
        service = ToggleService(db_session)

        with pytest.raises(TargetNotFoundError):
            await service.toggle(viewer.id, draft.id, RelationKind.VIDEO_LIKE)

        assert await service.toggle(creator.id, draft.id, RelationKind.VIDEO_LIKE) is ToggleOutcome.CREATED


class TestTargetDeletion:
    async def test_deleting_a_video_drops_its_likes(self, db_session, viewer, creator, make_video):
        video = await make_video(creator)
        comment = await CommentService(db_session).add(video.id, viewer.id, "First")
        service = ToggleService(db_session)
        await service.toggle(viewer.id, video.id, RelationKind.VIDEO_LIKE)
        await service.toggle(creator.id, comment.id, RelationKind.COMMENT_LIKE)

        await VideoService(db_session).delete(video.id, creator.id)

        assert await service.count(video.id, RelationKind.VIDEO_LIKE) == 0
        assert await service.count(comment.id, RelationKind.COMMENT_LIKE) == 0
        assert await service.liked_videos(viewer.id) == []

    async def test_deleting_a_tweet_drops_its_likes(self, db_session, viewer, creator):
        tweet = await TweetService(db_session).create(creator.id, "hello")
        service = ToggleService(db_session)
        await service.toggle(viewer.id, tweet.id, RelationKind.TWEET_LIKE)

        await TweetService(db_session).delete(tweet.id, creator.id)

        assert await service.count(tweet.id, RelationKind.TWEET_LIKE) == 0

    async def test_deleting_a_comment_only_drops_its_own_likes(self, db_session, viewer, creator, make_video):
        video = await make_video(creator)
        comments = CommentService(db_session)
        doomed = await comments.add(video.id, viewer.id, "Doomed")
        kept = await comments.add(video.id, viewer.id, "Kept")
        service = ToggleService(db_session)
        await service.toggle(creator.id, doomed.id, RelationKind.COMMENT_LIKE)
        await service.toggle(creator.id, kept.id, RelationKind.COMMENT_LIKE)
        await service.toggle(creator.id, video.id, RelationKind.VIDEO_LIKE)

        await comments.delete(doomed.id, viewer.id)

        assert await ToggleRelationRepository(db_session).count_for_subject(
            creator.id, RelationKind.COMMENT_LIKE
        ) == 1
        assert await service.count(video.id, RelationKind.VIDEO_LIKE) == 1
