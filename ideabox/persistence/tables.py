"""SQLAlchemy table definitions for ideabox.

These table definitions are used for classical ORM mapping.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()


def _status_column() -> Column:
    return Column("status", String(20), nullable=False, server_default="active")


def _timestamp_columns() -> list[Column]:
    return [
        Column(
            "created_at",
            TIMESTAMP(timezone=True),
            nullable=False,
            server_default="NOW()",
        ),
        Column(
            "updated_at",
            TIMESTAMP(timezone=True),
            nullable=False,
            server_default="NOW()",
        ),
        Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
    ]


# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(20), nullable=False),
    Column("normalized_username", String(20), nullable=False),
    Column("email", String(255), nullable=False),
    Column("normalized_email", String(255), nullable=False),
    Column("has_verified_email", Boolean, nullable=False, server_default="false"),
    Column("password_hash", Text, nullable=True),
    Column(
        "roles",
        postgresql.ARRAY(String(20)),
        nullable=False,
        server_default="{user}",
    ),
    # One column per OAuth provider, holding the account id at that provider
    Column("google", String(255), nullable=True),
    Column("facebook", String(255), nullable=True),
    Column("github", String(255), nullable=True),
    Column("tokens", postgresql.JSONB, nullable=True),
    _status_column(),
    *_timestamp_columns(),
    CheckConstraint("status IN ('active', 'deleted')", name="check_users_status"),
)

# Deleted accounts release their username and e-mail
Index(
    "uq_users_normalized_username",
    users_table.c.normalized_username,
    unique=True,
    postgresql_where=text("status = 'active'"),
)
Index(
    "uq_users_normalized_email",
    users_table.c.normalized_email,
    unique=True,
    postgresql_where=text("status = 'active'"),
)
for _provider in ("google", "facebook", "github"):
    Index(
        f"uq_users_{_provider}",
        users_table.c[_provider],
        unique=True,
        postgresql_where=text("status = 'active'"),
    )

# ============================================================================
# DOMAINS TABLE
# ============================================================================
domains_table = Table(
    "domains",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(253), nullable=False),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("has_verified_dns", Boolean, nullable=False, server_default="false"),
    Column("last_verified_dns", TIMESTAMP(timezone=True), nullable=True),
    _status_column(),
    *_timestamp_columns(),
    CheckConstraint("status IN ('active', 'deleted')", name="check_domains_status"),
)

Index(
    "uq_domains_name",
    domains_table.c.name,
    unique=True,
    postgresql_where=text("status = 'active'"),
)
Index("idx_domains_user_id", domains_table.c.user_id)

# ============================================================================
# IDEAS TABLE
# ============================================================================
ideas_table = Table(
    "ideas",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("headline", String(100), nullable=False),
    Column("description", Text, nullable=True),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "domain_id", UUID, ForeignKey("domains.id", ondelete="CASCADE"), nullable=False
    ),
    _status_column(),
    *_timestamp_columns(),
    CheckConstraint("status IN ('active', 'deleted')", name="check_ideas_status"),
)

Index("idx_ideas_domain_id", ideas_table.c.domain_id, ideas_table.c.status)
Index("idx_ideas_user_id", ideas_table.c.user_id)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("idea_id", UUID, ForeignKey("ideas.id", ondelete="CASCADE"), nullable=False),
    Column("type", String(20), nullable=False),
    _status_column(),
    *_timestamp_columns(),
    CheckConstraint("type IN ('up', 'down', 'removed')", name="check_vote_type"),
    CheckConstraint("status IN ('active', 'deleted')", name="check_votes_status"),
)

# At most one active vote per user per idea
Index(
    "uq_votes_user_idea_active",
    votes_table.c.user_id,
    votes_table.c.idea_id,
    unique=True,
    postgresql_where=text("status = 'active'"),
)
Index("idx_votes_idea_id", votes_table.c.idea_id, votes_table.c.status)

# ============================================================================
# EMAIL TOKENS TABLE
# ============================================================================
email_tokens_table = Table(
    "email_tokens",
    metadata,
    Column("code", String(255), primary_key=True),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_email_tokens_user_id", email_tokens_table.c.user_id)
