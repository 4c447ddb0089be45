"""API tests for owned content, toggles, history and the dashboard."""

import uuid

import pytest
from httpx import AsyncClient


@pytest.fixture
async def alice(make_user):
    return await make_user("alice")


@pytest.fixture
async def bob(make_user):
    return await make_user("bob")


async def create_playlist(client: AsyncClient, name: str = "Road trip") -> dict:
    response = await client.post("/playlists", json={"name": name})
    assert response.status_code == 201
    return response.json()


class TestPlaylistOwnership:
    async def test_owner_can_rename_and_others_cannot(self, client: AsyncClient, login, alice, bob):
        await login("alice")
        playlist = await create_playlist(client)

        await login("bob")
        forbidden = await client.patch(f"/playlists/{playlist['id']}", json={"name": "Mine now"})
        assert forbidden.status_code == 403
        assert forbidden.json()["error"]["code"] == "FORBIDDEN"

        await login("alice")
        renamed = await client.patch(f"/playlists/{playlist['id']}", json={"name": "Road trip 2"})
        assert renamed.status_code == 200
        assert renamed.json()["name"] == "Road trip 2"

    async def test_default_description_and_duplicate_name(self, client: AsyncClient, login, alice):
        await login("alice")
        playlist = await create_playlist(client)

        assert playlist["description"] == "No description given"
        duplicate = await client.post("/playlists", json={"name": "Road trip"})
        assert duplicate.status_code == 409

    async def test_add_video_twice_keeps_one_entry(self, client: AsyncClient, login, alice, make_video):
        video = await make_video(alice)
        await login("alice")
        playlist = await create_playlist(client)

        path = f"/playlists/{playlist['id']}/videos/{video.id}"
        await client.post(path)
        response = await client.post(path)

        assert response.status_code == 200
        assert [item["id"] for item in response.json()["videos"]] == [str(video.id)]

        removed = await client.delete(path)
        assert removed.json()["videos"] == []

    async def test_delete_by_non_owner(self, client: AsyncClient, login, alice, bob):
        await login("alice")
        playlist = await create_playlist(client)

        await login("bob")
        response = await client.delete(f"/playlists/{playlist['id']}")
        assert response.status_code == 403

        await login("alice")
        assert (await client.get(f"/playlists/{playlist['id']}")).status_code == 200

    async def test_malformed_and_missing_ids(self, client: AsyncClient, login, alice):
        await login("alice")

        malformed = await client.patch("/playlists/not-an-id", json={"name": "x"})
        missing = await client.patch(f"/playlists/{uuid.uuid4()}", json={"name": "x"})

        assert malformed.status_code == 400
        assert malformed.json()["error"]["code"] == "INVALID_IDENTIFIER"
        assert missing.status_code == 404


class TestLikes:
    async def test_like_toggle(self, client: AsyncClient, login, alice, bob, make_video):
        video = await make_video(alice)
        await login("bob")

        liked = await client.post(f"/likes/toggle/video/{video.id}")
        assert liked.json() == {"status": "created", "likes_count": 1}

        listed = await client.get("/likes/videos")
        assert [item["id"] for item in listed.json()] == [str(video.id)]

        unliked = await client.post(f"/likes/toggle/video/{video.id}")
        assert unliked.json() == {"status": "deleted", "likes_count": 0}

    async def test_like_unknown_tweet(self, client: AsyncClient, login, bob):
        await login("bob")

        response = await client.post(f"/likes/toggle/tweet/{uuid.uuid4()}")

        assert response.status_code == 404

    async def test_like_with_malformed_id(self, client: AsyncClient, login, bob):
        await login("bob")

        response = await client.post("/likes/toggle/comment/123")

        assert response.status_code == 400

    async def test_like_requires_authentication(self, client: AsyncClient, alice, make_video):
        video = await make_video(alice)

        response = await client.post(f"/likes/toggle/video/{video.id}")

        assert response.status_code == 401


class TestSubscriptions:
    async def test_subscribe_and_profile(self, client: AsyncClient, login, alice, bob):
        await login("bob")

        subscribed = await client.post(f"/subscriptions/toggle/{alice.id}")
        assert subscribed.json() == {"status": "subscribed", "subscribers_count": 1}

        profile = await client.get("/users/channel/alice")
        assert profile.status_code == 200
        assert profile.json()["subscribers_count"] == 1
        assert profile.json()["is_subscribed"] is True

        subscribers = await client.get(f"/subscriptions/channel/{alice.id}")
        assert [item["username"] for item in subscribers.json()] == ["bob"]

        unsubscribed = await client.post(f"/subscriptions/toggle/{alice.id}")
        assert unsubscribed.json() == {"status": "unsubscribed", "subscribers_count": 0}

    async def test_self_subscription_rejected(self, client: AsyncClient, login, alice):
        await login("alice")

        response = await client.post(f"/subscriptions/toggle/{alice.id}")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "SELF_REFERENCE_DENIED"

    async def test_unknown_channel(self, client: AsyncClient, login, alice):
        await login("alice")

        response = await client.post(f"/subscriptions/toggle/{uuid.uuid4()}")

        assert response.status_code == 404


class TestVideos:
    async def test_publish_fetch_and_count_views(self, client: AsyncClient, login, alice):
        await login("alice")
        created = await client.post(
            "/videos",
            json={
                "title": "Cooking rice",
                "video_url": "videos/rice.mp4",
                "thumbnail_url": "thumbnails/rice.png",
                "duration": 93.0,
            },
        )
        assert created.status_code == 201
        video_id = created.json()["id"]

        await client.get(f"/videos/{video_id}")
        fetched = await client.get(f"/videos/{video_id}")

        assert fetched.json()["views"] == 2

    async def test_unpublished_video_hidden_from_others(self, client: AsyncClient, login, alice, bob, make_video):
        video = await make_video(alice)
        await login("alice")
        toggled = await client.patch(f"/videos/{video.id}/publish")
        assert toggled.json()["is_published"] is False

        await login("bob")
        assert (await client.get(f"/videos/{video.id}")).status_code == 404
        listed = await client.get("/videos", params={"user_id": str(alice.id)})
        assert listed.json() == []

        await login("alice")
        own = await client.get("/videos", params={"user_id": str(alice.id)})
        assert [item["id"] for item in own.json()] == [str(video.id)]

    async def test_only_owner_deletes(self, client: AsyncClient, login, alice, bob, make_video):
        video = await make_video(alice)

        await login("bob")
        assert (await client.delete(f"/videos/{video.id}")).status_code == 403

        await login("alice")
        assert (await client.delete(f"/videos/{video.id}")).status_code == 200
        assert (await client.get(f"/videos/{video.id}")).status_code == 404

    async def test_unpublished_video_cannot_be_reached_indirectly(
        self, client: AsyncClient, login, alice, bob, make_video
    ):
        video = await make_video(alice)
        await login("alice")
        await client.patch(f"/videos/{video.id}/publish")

        await login("bob")
        playlist = await create_playlist(client)
        history = await client.post(f"/users/history/{video.id}")
        like = await client.post(f"/likes/toggle/video/{video.id}")
        comment = await client.post(f"/comments/{video.id}", json={"content": "Leaked"})
        comments = await client.get(f"/comments/{video.id}")
        added = await client.post(f"/playlists/{playlist['id']}/videos/{video.id}")

        for response in (history, like, comment, comments, added):
            assert response.status_code == 404
        assert "video_url" not in history.text

        await login("alice")
        own = await client.post(f"/users/history/{video.id}")
        assert own.status_code == 200
        assert [item["video"]["id"] for item in own.json()] == [str(video.id)]


class TestTweetsAndComments:
    async def test_tweet_edit_is_owner_only(self, client: AsyncClient, login, alice, bob):
        await login("alice")
        tweet = (await client.post("/tweets", json={"content": "hello"})).json()

        await login("bob")
        assert (await client.patch(f"/tweets/{tweet['id']}", json={"content": "pwned"})).status_code == 403

        listed = await client.get(f"/tweets/user/{alice.id}")
        assert [item["content"] for item in listed.json()] == ["hello"]

    async def test_comment_lifecycle(self, client: AsyncClient, login, alice, bob, make_video):
        video = await make_video(alice)
        await login("bob")

        comment = await client.post(f"/comments/{video.id}", json={"content": "Nice one"})
        assert comment.status_code == 201
        comment_id = comment.json()["id"]

        await login("alice")
        assert (await client.delete(f"/comments/c/{comment_id}")).status_code == 403

        listed = await client.get(f"/comments/{video.id}")
        assert [item["content"] for item in listed.json()] == ["Nice one"]


class TestHistoryAndDashboard:
    async def test_watch_history(self, client: AsyncClient, login, alice, make_video):
        first = await make_video(alice, "One")
        second = await make_video(alice, "Two")
        await login("alice")

        await client.post(f"/users/history/{first.id}")
        await client.post(f"/users/history/{second.id}")
        response = await client.post(f"/users/history/{first.id}")

        assert response.status_code == 200
        assert [item["video"]["id"] for item in response.json()] == [str(first.id), str(second.id)]

    async def test_dashboard_stats(self, client: AsyncClient, login, alice, bob, make_video):
        video = await make_video(alice)
        await login("bob")
        await client.post(f"/likes/toggle/video/{video.id}")
        await client.post(f"/subscriptions/toggle/{alice.id}")

        await login("alice")
        stats = await client.get("/dashboard/stats")

        assert stats.json() == {
            "total_videos": 1,
            "total_views": 0,
            "total_subscribers": 1,
            "total_likes": 1,
        }


class TestHealth:
    async def test_health_and_liveness(self, client: AsyncClient):
        health = await client.get("/health")
        live = await client.get("/live")

        assert health.status_code == 200
        assert health.json()["status"] == "healthy"
        assert live.json() == {"status": "alive"}
