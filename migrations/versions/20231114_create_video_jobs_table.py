"""create video_jobs table

Revision ID: 20231114_create_video_jobs
Revises: 20231114_create_users
Create Date: 2023-11-14 22:13:21

Requires users.user_id to exist before the foreign key is added.
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision = "20231114_create_video_jobs"
down_revision = "20231114_create_users"
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "video_jobs",
        sa.Column(
            "job_id",
            postgresql.UUID(as_uuid=True),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("filename", sa.String(255), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("video_url", sa.Text(), nullable=False),
        sa.Column("result_url", sa.Text(), nullable=True),
        sa.Column("frame_count", sa.Integer(), nullable=True),
        sa.Column("error_message", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("started_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("job_id", name="video_jobs_pkey"),
    )

    op.create_check_constraint(
        "chk_video_jobs_status",
        "video_jobs",
        "status IN ('pending', 'processing', 'completed', 'failed')",
    )
    op.create_check_constraint(
        "chk_video_jobs_frame_count",
        "video_jobs",
        "frame_count IS NULL OR frame_count >= 0",
    )

    op.create_index("idx_jobs_user_id", "video_jobs", ["user_id"])
    op.create_index("idx_jobs_status", "video_jobs", ["status"])
    op.create_index("idx_jobs_created_at", "video_jobs", ["created_at"])
    op.create_index("idx_jobs_user_status", "video_jobs", ["user_id", "status"])

    op.create_foreign_key(
        "fk_video_jobs_user",
        "video_jobs",
        "users",
        ["user_id"],
        ["user_id"],
        ondelete="CASCADE",
    )


def downgrade():
    # Foreign key goes first, then indexes and checks, then the table
    op.drop_constraint("fk_video_jobs_user", "video_jobs", type_="foreignkey")
    op.drop_index("idx_jobs_user_status", table_name="video_jobs")
    op.drop_index("idx_jobs_created_at", table_name="video_jobs")
    op.drop_index("idx_jobs_status", table_name="video_jobs")
    op.drop_index("idx_jobs_user_id", table_name="video_jobs")
    op.drop_constraint("chk_video_jobs_frame_count", "video_jobs", type_="check")
    op.drop_constraint("chk_video_jobs_status", "video_jobs", type_="check")
    op.drop_table("video_jobs")
