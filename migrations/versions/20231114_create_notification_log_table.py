"""create notification_log table

Revision ID: 20231114_create_notification_log
Revises: 20231114_create_video_jobs
Create Date: 2023-11-14 22:13:23

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision = "20231114_create_notification_log"
down_revision = "20231114_create_video_jobs"
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "notification_log",
        sa.Column(
            "notification_id",
            postgresql.UUID(as_uuid=True),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("job_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("notification_type", sa.String(20), nullable=False),
        sa.Column("recipient_email", sa.String(255), nullable=False),
        sa.Column("delivery_status", sa.String(20), nullable=False),
        sa.Column("retry_count", sa.Integer(), server_default="0", nullable=False),
        sa.Column("error_message", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("sent_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("notification_id", name="notification_log_pkey"),
    )

    op.create_check_constraint(
        "chk_notification_log_type",
        "notification_log",
        "notification_type IN ('success', 'failure')",
    )
    op.create_check_constraint(
        "chk_notification_log_status",
        "notification_log",
        "delivery_status IN ('pending', 'sent', 'failed')",
    )
    op.create_check_constraint(
        "chk_notification_log_retry_count",
        "notification_log",
        "retry_count >= 0",
    )

    op.create_index("idx_notifications_job_id", "notification_log", ["job_id"])
    op.create_index("idx_notifications_status", "notification_log", ["delivery_status"])

    op.create_foreign_key(
        "fk_notification_log_job",
        "notification_log",
        "video_jobs",
        ["job_id"],
        ["job_id"],
        ondelete="CASCADE",
    )


def downgrade():
    op.drop_constraint("fk_notification_log_job", "notification_log", type_="foreignkey")
    op.drop_index("idx_notifications_status", table_name="notification_log")
    op.drop_index("idx_notifications_job_id", table_name="notification_log")
    op.drop_constraint("chk_notification_log_retry_count", "notification_log", type_="check")
    op.drop_constraint("chk_notification_log_status", "notification_log", type_="check")
    op.drop_constraint("chk_notification_log_type", "notification_log", type_="check")
    op.drop_table("notification_log")
