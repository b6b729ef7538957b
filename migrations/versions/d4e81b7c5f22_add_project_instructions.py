"""Add project instructions

Revision ID: d4e81b7c5f22
Revises: a1f3c9e27b10
Create Date: 2026-10-20 09:30:00.000000

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "d4e81b7c5f22"
down_revision: str | None = "a1f3c9e27b10"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "project_instructions",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "project_id",
            sa.String(36),
            sa.ForeignKey("forge_projects.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("role", sa.String(20), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
    )
    op.create_index(
        "ix_project_instructions_project_id", "project_instructions", ["project_id"]
    )


def downgrade() -> None:
    op.drop_index("ix_project_instructions_project_id", table_name="project_instructions")
    op.drop_table("project_instructions")
