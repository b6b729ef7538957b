"""Create forge tables

Revision ID: a1f3c9e27b10
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "a1f3c9e27b10"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "forge_projects",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("owner_id", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("project_type", sa.String(20), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("repo_url", sa.String(512), nullable=True),
        sa.Column("preview_url", sa.String(512), nullable=True),
        sa.Column("error_message", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_forge_projects_owner_id", "forge_projects", ["owner_id"])

    op.create_table(
        "forge_logs",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "project_id",
            sa.String(36),
            sa.ForeignKey("forge_projects.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("level", sa.String(10), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_forge_logs_project_id", "forge_logs", ["project_id"])

    op.create_table(
        "generated_files",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "project_id",
            sa.String(36),
            sa.ForeignKey("forge_projects.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("file_path", sa.String(1024), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_generated_files_project_id", "generated_files", ["project_id"])


def downgrade() -> None:
    op.drop_index("ix_generated_files_project_id", table_name="generated_files")
    op.drop_table("generated_files")
    op.drop_index("ix_forge_logs_project_id", table_name="forge_logs")
    op.drop_table("forge_logs")
    op.drop_index("ix_forge_projects_owner_id", table_name="forge_projects")
    op.drop_table("forge_projects")
