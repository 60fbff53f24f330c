"""SQLAlchemy table definitions for Debook.

The post service and the notification service own separate databases, so
each has its own MetaData. Both match the schemas in the Alembic
migrations under ``migrations/api`` and ``migrations/notifications``.
"""

from sqlalchemy import (
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Post service schema
api_metadata = MetaData()

# Notification service schema
notification_metadata = MetaData()

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    api_metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("content", Text, nullable=False),
    Column("author_id", UUID, nullable=False),
    Column("likes_count", Integer, nullable=False, server_default="0"),
    Column("comments_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_posts_author_id", posts_table.c.author_id)
Index("idx_posts_created_at", posts_table.c.created_at.desc())

# ============================================================================
# INTERACTIONS TABLE
# ============================================================================
interactions_table = Table(
    "interactions",
    api_metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, nullable=False),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column(
        "type",
        Enum("like", "comment", name="interaction_type", create_type=False),
        nullable=False,
        server_default="like",
    ),
    Column("content", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "post_id", "type", name="uq_interactions_user_post_type"),
)

Index(
    "idx_interactions_post_type", interactions_table.c.post_id, interactions_table.c.type
)
Index("idx_interactions_created_at", interactions_table.c.created_at)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    notification_metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, nullable=False),  # Recipient (post owner)
    Column("actor_id", UUID, nullable=False),
    Column("post_id", UUID, nullable=False),
    Column(
        "type",
        Enum("like", "comment", name="notification_type", create_type=False),
        nullable=False,
    ),
    Column(
        "status",
        Enum("pending", "sent", "read", name="notification_status", create_type=False),
        nullable=False,
        server_default="pending",
    ),
    Column("message", Text, nullable=True),
    Column("metadata", JSONB, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_notifications_user_created",
    notifications_table.c.user_id,
    notifications_table.c.created_at,
)
Index(
    "idx_notifications_status_created",
    notifications_table.c.status,
    notifications_table.c.created_at,
)
Index("idx_notifications_post_id", notifications_table.c.post_id)
Index("idx_notifications_actor_id", notifications_table.c.actor_id)
Index("idx_notifications_type", notifications_table.c.type)
