import uuid
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, List

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from frameforge_contracts.models.orm.base import Base, CreatedAtMixin, in_clause, uuid_pk
from frameforge_contracts.models.validation import (
    validate_enum,
    validate_non_negative,
    validate_optional_text,
    validate_required,
)

if TYPE_CHECKING:
    from frameforge_contracts.models.orm.notification_log import NotificationLog
    from frameforge_contracts.models.orm.user import User


class JobStatus(str, Enum):
    """
    Lifecycle of a frame-extraction job.

    - PENDING: created, waiting for a worker
    - PROCESSING: picked up by a worker
    - COMPLETED: frames extracted, result archive available
    - FAILED: processing gave up, see error_message
    """

    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class VideoJob(Base, CreatedAtMixin):
    __tablename__ = "video_jobs"
    __table_args__ = (
        CheckConstraint(in_clause("status", JobStatus), name="chk_video_jobs_status"),
        CheckConstraint(
            "frame_count IS NULL OR frame_count >= 0",
            name="chk_video_jobs_frame_count",
        ),
        Index("idx_jobs_user_id", "user_id"),
        Index("idx_jobs_status", "status"),
        Index("idx_jobs_created_at", "created_at"),
        # "list a user's jobs filtered by status"
        Index("idx_jobs_user_status", "user_id", "status"),
    )

    job_id: Mapped[uuid.UUID] = uuid_pk()
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.user_id", name="fk_video_jobs_user", ondelete="CASCADE"),
        nullable=False,
    )

    filename: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=JobStatus.PENDING.value
    )
    video_url: Mapped[str] = mapped_column(Text, nullable=False)

    result_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    frame_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    error_message: Mapped[str | None] = mapped_column(Text, nullable=True)

    started_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    completed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    user: Mapped["User"] = relationship(back_populates="jobs")
    notifications: Mapped[List["NotificationLog"]] = relationship(
        back_populates="job",
        cascade="all, delete",
        passive_deletes=True,
    )

    @validates("status")
    def _validate_status(self, key, value):
        return validate_enum(value, JobStatus, key, "Invalid job status")

    @validates("filename")
    def _validate_filename(self, key, value):
        return validate_required(value, key, max_length=255)

    @validates("video_url")
    def _validate_video_url(self, key, value):
        return validate_required(value, key)

    @validates("result_url", "error_message")
    def _validate_optional_text(self, key, value):
        return validate_optional_text(value, key)

    @validates("frame_count")
    def _validate_frame_count(self, key, value):
        return validate_non_negative(value, key, nullable=True)

    @property
    def is_terminal(self) -> bool:
        return self.status in (JobStatus.COMPLETED, JobStatus.FAILED)

    def __repr__(self) -> str:
        return f"<VideoJob {self.job_id} {self.status}>"
