"""initial_schema

Revision ID: 3f2a9c1d7b40
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql
from alembic import op

# revision identifiers, used by Alembic.
revision = "3f2a9c1d7b40"
down_revision = None
branch_labels = None
depends_on = None

JSONType = sa.JSON().with_variant(postgresql.JSONB(astext_type=sa.Text()), "postgresql")


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "articles",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("category", sa.String(50), nullable=False),
        sa.Column("image_url", sa.String(500), nullable=True),
        sa.Column("author", sa.String(100), nullable=True),
        sa.Column("date", sa.Date(), nullable=True),
        sa.Column("tags", JSONType, nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_articles_id", "articles", ["id"])
    op.create_index("ix_articles_category", "articles", ["category"])

    op.create_table(
        "video_tutorials",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("thumbnail_url", sa.String(500), nullable=True),
        sa.Column("video_url", sa.String(500), nullable=False),
        sa.Column("category", sa.String(50), nullable=False),
        sa.Column("duration", sa.String(20), nullable=True),
        sa.Column("instructor", sa.String(100), nullable=True),
        sa.Column("date", sa.Date(), nullable=True),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
    )
    op.create_index("ix_video_tutorials_id", "video_tutorials", ["id"])
    op.create_index("idx_video_category", "video_tutorials", ["category"])

    op.create_table(
        "profiles",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("username", sa.String(100), nullable=True),
        sa.Column("full_name", sa.String(255), nullable=True),
        sa.Column("avatar_url", sa.String(500), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("role", sa.String(20), nullable=False, server_default="member"),
        sa.Column("level", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("followers_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("following_count", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
    )
    op.create_index("ix_profiles_id", "profiles", ["id"])
    op.create_index("ix_profiles_username", "profiles", ["username"], unique=True)

    op.create_table(
        "user_follows",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "follower_id",
            sa.String(255),
            sa.ForeignKey("profiles.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "following_id",
            sa.String(255),
            sa.ForeignKey("profiles.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("follower_id", "following_id", name="uq_user_follow"),
    )
    op.create_index("ix_user_follows_id", "user_follows", ["id"])

    op.create_table(
        "posts",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "user_id",
            sa.String(255),
            sa.ForeignKey("profiles.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("image_url", sa.String(500), nullable=True),
        sa.Column("likes", JSONType, nullable=False),
        sa.Column("shares", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("tags", JSONType, nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_posts_id", "posts", ["id"])
    op.create_index("ix_posts_user_id", "posts", ["user_id"])

    op.create_table(
        "comments",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "post_id",
            sa.Integer(),
            sa.ForeignKey("posts.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "user_id",
            sa.String(255),
            sa.ForeignKey("profiles.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("content", sa.Text(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_comments_id", "comments", ["id"])
    op.create_index("ix_comments_post_id", "comments", ["post_id"])

    op.create_table(
        "water_zones",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("location", sa.String(100), nullable=False),
        sa.Column("sub_city", sa.String(100), nullable=True),
        sa.Column("state", sa.String(100), nullable=False),
        sa.Column("position", JSONType, nullable=True),
        sa.Column("severity", sa.String(10), nullable=False, server_default="low"),
        sa.Column("water_level", sa.Float(), nullable=True),
        sa.Column("rainfall_data", sa.Float(), nullable=True),
        sa.Column("groundwater_level", sa.Float(), nullable=True),
        sa.Column("last_updated", sa.DateTime(timezone=True), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_water_zones_id", "water_zones", ["id"])
    op.create_index("idx_zone_state", "water_zones", ["state"])
    op.create_index("idx_zone_location", "water_zones", ["location"])
    op.create_index("idx_zone_last_updated", "water_zones", ["last_updated"])


def downgrade() -> None:
    op.drop_table("water_zones")
    op.drop_table("comments")
    op.drop_table("posts")
    op.drop_table("user_follows")
    op.drop_table("profiles")
    op.drop_table("video_tutorials")
    op.drop_table("articles")
