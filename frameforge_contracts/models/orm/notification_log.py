import uuid
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from frameforge_contracts.models.orm.base import Base, CreatedAtMixin, in_clause, uuid_pk
from frameforge_contracts.models.validation import (
    validate_email,
    validate_enum,
    validate_non_negative,
    validate_optional_text,
)

if TYPE_CHECKING:
    from frameforge_contracts.models.orm.video_job import VideoJob


class NotificationType(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"


class DeliveryStatus(str, Enum):
    PENDING = "pending"
    SENT = "sent"
    FAILED = "failed"


class NotificationLog(Base, CreatedAtMixin):
    """One delivery attempt record for a job outcome e-mail.

    Rows are written by the notification dispatcher; retry_count is bumped
    by that service on each redelivery. sent_at is only set on success.
    """

    __tablename__ = "notification_log"
    __table_args__ = (
        CheckConstraint(
            in_clause("notification_type", NotificationType),
            name="chk_notification_log_type",
        ),
        CheckConstraint(
            in_clause("delivery_status", DeliveryStatus),
            name="chk_notification_log_status",
        ),
        CheckConstraint("retry_count >= 0", name="chk_notification_log_retry_count"),
        Index("idx_notifications_job_id", "job_id"),
        Index("idx_notifications_status", "delivery_status"),
    )

    notification_id: Mapped[uuid.UUID] = uuid_pk()
    job_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("video_jobs.job_id", name="fk_notification_log_job", ondelete="CASCADE"),
        nullable=False,
    )

    notification_type: Mapped[str] = mapped_column(String(20), nullable=False)
    recipient_email: Mapped[str] = mapped_column(String(255), nullable=False)
    delivery_status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=DeliveryStatus.PENDING.value
    )
    retry_count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default="0"
    )
    error_message: Mapped[str | None] = mapped_column(Text, nullable=True)

    sent_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    job: Mapped["VideoJob"] = relationship(back_populates="notifications")

    @validates("notification_type")
    def _validate_notification_type(self, key, value):
        return validate_enum(value, NotificationType, key, "Invalid notification type")

    @validates("delivery_status")
    def _validate_delivery_status(self, key, value):
        return validate_enum(value, DeliveryStatus, key, "Invalid delivery status")

    @validates("recipient_email")
    def _validate_recipient_email(self, key, value):
        return validate_email(value, key, "Invalid recipient email address")

    @validates("retry_count")
    def _validate_retry_count(self, key, value):
        return validate_non_negative(value, key)

    @validates("error_message")
    def _validate_error_message(self, key, value):
        return validate_optional_text(value, key)

    def __repr__(self) -> str:
        return f"<NotificationLog {self.notification_id} {self.delivery_status}>"
