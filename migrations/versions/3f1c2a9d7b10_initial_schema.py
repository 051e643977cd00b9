"""initial_schema

Create the foundational schema for ideabox:
- Users (password sign up, e-mail verification, roles)
- Domains (websites collecting ideas)
- Ideas (posted per domain)
- Votes (up/down, one active vote per user and idea)
- Email tokens (single-use verification and reset codes)

Every record table except email_tokens is soft-deletable: rows carry a
status ('active'/'deleted') and deleted_at, and the unique indexes only
cover active rows.

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-18 10:12:44.120381

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def _record_columns() -> list[sa.Column]:
    return [
        sa.Column(
            "status", sa.String(20), nullable=False, server_default="active"
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("deleted_at", sa.TIMESTAMP(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        _id_column(),
        sa.Column("username", sa.String(20), nullable=False),
        sa.Column("normalized_username", sa.String(20), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("normalized_email", sa.String(255), nullable=False),
        sa.Column(
            "has_verified_email", sa.Boolean(), nullable=False, server_default="false"
        ),
        sa.Column("password_hash", sa.Text(), nullable=True),
        sa.Column(
            "roles",
            postgresql.ARRAY(sa.String(20)),
            nullable=False,
            server_default="{user}",
        ),
        sa.Column("google", sa.String(255), nullable=True),
        sa.Column("facebook", sa.String(255), nullable=True),
        sa.Column("github", sa.String(255), nullable=True),
        sa.Column("tokens", postgresql.JSONB(), nullable=True),
        *_record_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "status IN ('active', 'deleted')", name="check_users_status"
        ),
    )
    op.create_index(
        "uq_users_normalized_username",
        "users",
        ["normalized_username"],
        unique=True,
        postgresql_where=sa.text("status = 'active'"),
    )
    op.create_index(
        "uq_users_normalized_email",
        "users",
        ["normalized_email"],
        unique=True,
        postgresql_where=sa.text("status = 'active'"),
    )
    for provider in ("google", "facebook", "github"):
        op.create_index(
            f"uq_users_{provider}",
            "users",
            [provider],
            unique=True,
            postgresql_where=sa.text("status = 'active'"),
        )

    # ========================================================================
    # DOMAINS table
    # ========================================================================
    op.create_table(
        "domains",
        _id_column(),
        sa.Column("name", sa.String(253), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column(
            "has_verified_dns", sa.Boolean(), nullable=False, server_default="false"
        ),
        sa.Column("last_verified_dns", sa.TIMESTAMP(timezone=True), nullable=True),
        *_record_columns(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "status IN ('active', 'deleted')", name="check_domains_status"
        ),
    )
    op.create_index(
        "uq_domains_name",
        "domains",
        ["name"],
        unique=True,
        postgresql_where=sa.text("status = 'active'"),
    )
    op.create_index("idx_domains_user_id", "domains", ["user_id"])

    # ========================================================================
    # IDEAS table
    # ========================================================================
    op.create_table(
        "ideas",
        _id_column(),
        sa.Column("headline", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("domain_id", sa.UUID(), nullable=False),
        *_record_columns(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["domain_id"], ["domains.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "status IN ('active', 'deleted')", name="check_ideas_status"
        ),
    )
    op.create_index("idx_ideas_domain_id", "ideas", ["domain_id", "status"])
    op.create_index("idx_ideas_user_id", "ideas", ["user_id"])

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        _id_column(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("idea_id", sa.UUID(), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        *_record_columns(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["idea_id"], ["ideas.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "type IN ('up', 'down', 'removed')", name="check_vote_type"
        ),
        sa.CheckConstraint(
            "status IN ('active', 'deleted')", name="check_votes_status"
        ),
    )
    # At most one active vote per user per idea; concurrent first votes race here
    op.create_index(
        "uq_votes_user_idea_active",
        "votes",
        ["user_id", "idea_id"],
        unique=True,
        postgresql_where=sa.text("status = 'active'"),
    )
    op.create_index("idx_votes_idea_id", "votes", ["idea_id", "status"])

    # ========================================================================
    # EMAIL_TOKENS table
    # ========================================================================
    op.create_table(
        "email_tokens",
        sa.Column("code", sa.String(255), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("code"),
    )
    op.create_index("idx_email_tokens_user_id", "email_tokens", ["user_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("email_tokens")
    op.drop_table("votes")
    op.drop_table("ideas")
    op.drop_table("domains")
    op.drop_table("users")
