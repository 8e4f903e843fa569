"""SQLAlchemy table definitions for the gallery.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# DESIGNS TABLE
# ============================================================================
designs_table = Table(
    "designs",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("title", String(200), nullable=False),
    Column("image_url", Text, nullable=False),
    Column("score", Integer, nullable=False, server_default="0"),
    Column("owner_id", String(255), nullable=False),
    Column("owner_display_name", String(255), nullable=False),  # Denormalized
    Column("owner_avatar_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_designs_created_at", designs_table.c.created_at.desc())
Index("idx_designs_score", designs_table.c.score.desc())

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("user_id", String(255), nullable=False),
    Column(
        "design_id",
        UUID,
        ForeignKey("designs.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("reaction", String(10), nullable=False),
    Column(
        "voted_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # One vote per user per design
    UniqueConstraint("user_id", "design_id", name="uq_vote_user_design"),
    CheckConstraint("reaction IN ('like', 'dislike')", name="ck_vote_reaction"),
)

Index("idx_votes_design_id", votes_table.c.design_id)

# ============================================================================
# TRASHED DESIGNS TABLE (soft-delete holding area)
# ============================================================================
trashed_designs_table = Table(
    "trashed_designs",
    metadata,
    Column("design_id", UUID, primary_key=True),
    Column("design", JSONB, nullable=False),  # Design record verbatim
    Column("votes", JSONB, nullable=False, server_default=text("'[]'::jsonb")),
    Column(
        "deleted_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_by", String(255), nullable=False),
)

Index("idx_trashed_designs_deleted_at", trashed_designs_table.c.deleted_at.desc())
