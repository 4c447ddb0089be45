"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories
and domain rules.

Service Pattern:
================
    Handler → Service → Repository → Database
                ↘ OwnershipGuard (every owned-resource mutation)

Services should:
- Contain business logic and validation
- Coordinate multiple repositories if needed
- Handle transactions (via session)
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- TokenService: Access/refresh token issue, verify, rotate, revoke
- AuthService: Registration, login, logout, password and account changes
- OwnershipGuard: Owner check in front of every mutation
- ToggleService: Likes and subscriptions
- WatchHistoryService: Bounded watch history
- VideoService, PlaylistService, TweetService, CommentService: Owned content
- ChannelService: Channel profile and dashboard stats

Usage:
======
    from videotube.shared.services import AuthService

    service = AuthService(db)
    user, pair = await service.login_user(identifier, password)
"""

from videotube.shared.services.token_service import AccessClaims, TokenPair, TokenService
from videotube.shared.services.auth_service import AuthService
from videotube.shared.services.ownership_guard import OwnershipGuard, parse_identifier
from videotube.shared.services.toggle_service import ToggleService
from videotube.shared.services.watch_history_service import WatchHistoryService
from videotube.shared.services.video_service import VideoService
from videotube.shared.services.playlist_service import PlaylistService
from videotube.shared.services.tweet_service import TweetService
from videotube.shared.services.comment_service import CommentService
from videotube.shared.services.channel_service import ChannelProfile, ChannelService, ChannelStats

__all__ = [
    "AccessClaims",
    "TokenPair",
    "TokenService",
    "AuthService",
    "OwnershipGuard",
    "parse_identifier",
    "ToggleService",
    "WatchHistoryService",
    "VideoService",
    "PlaylistService",
    "TweetService",
    "CommentService",
    "ChannelProfile",
    "ChannelService",
    "ChannelStats",
]
