"""notifications

Create the notification service schema: one row per consumed interaction
event, addressed to the owner of the post.

Revision ID: 9d4e6b1a2c57
Revises:
Create Date: 2025-01-04 10:30:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "9d4e6b1a2c57"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE notification_type AS ENUM ('like', 'comment');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE notification_status AS ENUM ('pending', 'sent', 'read');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.create_table(
        "notifications",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("actor_id", sa.UUID(), nullable=False),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column(
            "type",
            postgresql.ENUM("like", "comment", name="notification_type", create_type=False),
            nullable=False,
        ),
        sa.Column(
            "status",
            postgresql.ENUM(
                "pending", "sent", "read", name="notification_status", create_type=False
            ),
            server_default="pending",
            nullable=False,
        ),
        sa.Column("message", sa.Text(), nullable=True),
        sa.Column("metadata", postgresql.JSONB(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_index(
        "idx_notifications_user_created", "notifications", ["user_id", "created_at"]
    )
    op.create_index(
        "idx_notifications_status_created", "notifications", ["status", "created_at"]
    )
    op.create_index("idx_notifications_post_id", "notifications", ["post_id"])
    op.create_index("idx_notifications_actor_id", "notifications", ["actor_id"])
    op.create_index("idx_notifications_type", "notifications", ["type"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_notifications_type", table_name="notifications")
    op.drop_index("idx_notifications_actor_id", table_name="notifications")
    op.drop_index("idx_notifications_post_id", table_name="notifications")
    op.drop_index("idx_notifications_status_created", table_name="notifications")
    op.drop_index("idx_notifications_user_created", table_name="notifications")
    op.drop_table("notifications")

    op.execute("DROP TYPE IF EXISTS notification_status")
    op.execute("DROP TYPE IF EXISTS notification_type")
