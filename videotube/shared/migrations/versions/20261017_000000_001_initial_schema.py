# pylint: skip-file
# ruff: noqa
"""Initial schema - identity, owned content and toggle relations

Revision ID: 001
Revises:
Create Date: 2026-10-17 00:00:00

Tables created:
- users: Principals, with the single current refresh token
- videos, playlists, tweets, comments: Owned resources
- playlist_videos: Playlist membership (composite primary key)
- toggle_relations: Likes and subscriptions, unique per (subject, target, kind)
- watch_history: Bounded per-user history, one row per (user, video)

Enums created:
- relation_kind: VIDEO_LIKE, COMMENT_LIKE, TWEET_LIKE, SUBSCRIPTION
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


relation_kind_enum = sa.Enum(
    "VIDEO_LIKE",
    "COMMENT_LIKE",
    "TWEET_LIKE",
    "SUBSCRIPTION",
    name="relation_kind",
)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    ]


def _owner_column() -> sa.Column:
    return sa.Column(
        "owner_id",
        sa.Uuid(),
        sa.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )


def upgrade() -> None:
    """Upgrade database schema."""
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("username", sa.String(64), nullable=False, unique=True, index=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True, index=True),
        sa.Column("full_name", sa.String(255), nullable=False),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column("cover_image_url", sa.Text(), nullable=True),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("refresh_token", sa.Text(), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "videos",
        sa.Column("id", sa.Uuid(), primary_key=True),
        _owner_column(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("video_url", sa.Text(), nullable=False),
        sa.Column("thumbnail_url", sa.Text(), nullable=False),
        sa.Column("duration", sa.Float(), nullable=False),
        sa.Column("views", sa.Integer(), nullable=False),
        sa.Column("is_published", sa.Boolean(), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "playlists",
        sa.Column("id", sa.Uuid(), primary_key=True),
        _owner_column(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("owner_id", "name", name="uq_playlists_owner_name"),
    )

    op.create_table(
        "playlist_videos",
        sa.Column(
            "playlist_id",
            sa.Uuid(),
            sa.ForeignKey("playlists.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "video_id",
            sa.Uuid(),
            sa.ForeignKey("videos.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "added_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    )

    op.create_table(
        "tweets",
        sa.Column("id", sa.Uuid(), primary_key=True),
        _owner_column(),
        sa.Column("content", sa.Text(), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "comments",
        sa.Column("id", sa.Uuid(), primary_key=True),
        _owner_column(),
        sa.Column(
            "video_id",
            sa.Uuid(),
            sa.ForeignKey("videos.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("content", sa.Text(), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "toggle_relations",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "subject_id",
            sa.Uuid(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        # No foreign key: the target table depends on kind
        sa.Column("target_id", sa.Uuid(), nullable=False),
        sa.Column("kind", relation_kind_enum, nullable=False),
        *_timestamps(),
        sa.UniqueConstraint(
            "subject_id",
            "target_id",
            "kind",
            name="uq_toggle_relations_subject_target_kind",
        ),
    )
    op.create_index(
        "ix_toggle_relations_target_kind", "toggle_relations", ["target_id", "kind"]
    )

    op.create_table(
        "watch_history",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "user_id",
            sa.Uuid(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column(
            "video_id",
            sa.Uuid(),
            sa.ForeignKey("videos.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("watched_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("user_id", "video_id", name="uq_watch_history_user_video"),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    """Downgrade database schema."""
    # Drop tables in reverse order (respect foreign keys)
    op.drop_table("watch_history")
    op.drop_index("ix_toggle_relations_target_kind", table_name="toggle_relations")
    op.drop_table("toggle_relations")
    op.drop_table("comments")
    op.drop_table("tweets")
    op.drop_table("playlist_videos")
    op.drop_table("playlists")
    op.drop_table("videos")
    op.drop_table("users")

    # Postgres keeps the enum type after its table is gone
    relation_kind_enum.drop(op.get_bind(), checkfirst=True)
