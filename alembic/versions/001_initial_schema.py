"""Initial schema - convention, edition, collaborator, per-edition grants, history.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

_CAPABILITY_COLUMNS = (
    "can_edit_convention",
    "can_delete_convention",
    "can_manage_collaborators",
    "can_add_edition",
    "can_edit_all_editions",
    "can_delete_all_editions",
)


def upgrade() -> None:
    op.create_table(
        "convention",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("author_id", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("is_archived", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("archived_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_convention_author_id", "convention", ["author_id"])

    # Conventions with editions are archived, never hard-deleted; no cascade here.
    op.create_table(
        "edition",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("convention_id", sa.UUID(), sa.ForeignKey("convention.id"), nullable=False),
        sa.Column("creator_id", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_edition_convention_id", "edition", ["convention_id"])

    op.create_table(
        "collaborator",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column(
            "convention_id",
            sa.UUID(),
            sa.ForeignKey("convention.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("title", sa.String(255), nullable=True),
        sa.Column("added_by_id", sa.String(255), nullable=True),
        sa.Column("added_at", sa.DateTime(timezone=True), nullable=False),
        *(
            sa.Column(name, sa.Boolean(), nullable=False, server_default=sa.false())
            for name in _CAPABILITY_COLUMNS
        ),
    )
    op.create_index(
        "ix_collaborator_convention_user", "collaborator", ["convention_id", "user_id"], unique=True
    )

    op.create_table(
        "collaborator_edition_permission",
        sa.Column(
            "collaborator_id",
            sa.UUID(),
            sa.ForeignKey("collaborator.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "edition_id",
            sa.UUID(),
            sa.ForeignKey("edition.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("can_edit", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("can_delete", sa.Boolean(), nullable=False, server_default=sa.false()),
    )

    # No foreign key: history outlives a hard-deleted convention.
    op.create_table(
        "permission_history",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("convention_id", sa.UUID(), nullable=False),
        sa.Column("actor_id", sa.String(255), nullable=False),
        sa.Column("change_type", sa.String(50), nullable=False),
        sa.Column("target_user_id", sa.String(255), nullable=True),
        sa.Column("before", JSONB(), nullable=True),
        sa.Column("after", JSONB(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index(
        "ix_permission_history_convention_created",
        "permission_history",
        ["convention_id", "created_at"],
    )


def downgrade() -> None:
    op.drop_table("permission_history")
    op.drop_table("collaborator_edition_permission")
    op.drop_table("collaborator")
    op.drop_table("edition")
    op.drop_table("convention")
