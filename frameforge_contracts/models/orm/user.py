import uuid
from typing import TYPE_CHECKING, List

from sqlalchemy import CheckConstraint, Index, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from frameforge_contracts.models.orm.base import Base, TimestampMixin, uuid_pk
from frameforge_contracts.models.validation import (
    USERNAME_MAX_LENGTH,
    USERNAME_MIN_LENGTH,
    validate_email,
    validate_required,
    validate_username,
)

if TYPE_CHECKING:
    from frameforge_contracts.models.orm.video_job import VideoJob


class User(Base, TimestampMixin):
    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint("username", name="uq_users_username"),
        UniqueConstraint("email", name="uq_users_email"),
        CheckConstraint(
            f"username ~ '^[A-Za-z0-9_]{{{USERNAME_MIN_LENGTH},{USERNAME_MAX_LENGTH}}}$'",
            name="chk_users_username_format",
        ),
        Index("idx_users_username", "username"),
        Index("idx_users_email", "email"),
    )

    user_id: Mapped[uuid.UUID] = uuid_pk()
    username: Mapped[str] = mapped_column(String(USERNAME_MAX_LENGTH), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    jobs: Mapped[List["VideoJob"]] = relationship(
        back_populates="user",
        cascade="all, delete",
        passive_deletes=True,
    )

    @validates("username")
    def _validate_username(self, key, value):
        return validate_username(value)

    @validates("email")
    def _validate_email(self, key, value):
        return validate_email(value)

    @validates("password_hash")
    def _validate_password_hash(self, key, value):
        return validate_required(value, key, max_length=255)

    def __repr__(self) -> str:
        return f"<User {self.user_id} {self.username!r}>"
