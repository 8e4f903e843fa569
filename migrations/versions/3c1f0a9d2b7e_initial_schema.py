"""initial_schema

Create the gallery schema:
- Designs (user-submitted images with a signed vote score)
- Votes (one like/dislike per user per design)
- Trashed designs (admin-deleted designs kept with their votes for restore)

Revision ID: 3c1f0a9d2b7e
Revises:
Create Date: 2026-10-19 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d2b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # DESIGNS table
    # ========================================================================
    op.create_table(
        "designs",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("image_url", sa.Text(), nullable=False),
        sa.Column("score", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("owner_id", sa.String(255), nullable=False),
        sa.Column("owner_display_name", sa.String(255), nullable=False),
        sa.Column("owner_avatar_url", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_designs_created_at", "designs", [sa.text("created_at DESC")]
    )
    op.create_index("idx_designs_score", "designs", [sa.text("score DESC")])

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("design_id", sa.UUID(), nullable=False),
        sa.Column("reaction", sa.String(10), nullable=False),
        sa.Column(
            "voted_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["design_id"], ["designs.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "design_id", name="uq_vote_user_design"),
        sa.CheckConstraint(
            "reaction IN ('like', 'dislike')", name="ck_vote_reaction"
        ),
    )
    op.create_index("idx_votes_design_id", "votes", ["design_id"])

    # ========================================================================
    # TRASHED_DESIGNS table (soft-delete holding area)
    # ========================================================================
    op.create_table(
        "trashed_designs",
        sa.Column("design_id", sa.UUID(), nullable=False),
        sa.Column("design", postgresql.JSONB(), nullable=False),
        sa.Column(
            "votes",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column(
            "deleted_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("deleted_by", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("design_id"),
    )
    op.create_index(
        "idx_trashed_designs_deleted_at",
        "trashed_designs",
        [sa.text("deleted_at DESC")],
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_index("idx_trashed_designs_deleted_at", table_name="trashed_designs")
    op.drop_table("trashed_designs")
    op.drop_index("idx_votes_design_id", table_name="votes")
    op.drop_table("votes")
    op.drop_index("idx_designs_score", table_name="designs")
    op.drop_index("idx_designs_created_at", table_name="designs")
    op.drop_table("designs")
