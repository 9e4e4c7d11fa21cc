"""Construction-time validation: malformed values never reach a session."""
import uuid

import pytest
from hypothesis import given, strategies as st

from frameforge_contracts.errors import FieldValidationError
from frameforge_contracts.models import validation
from frameforge_contracts.models.orm import (
    DeliveryStatus,
    JobStatus,
    NotificationLog,
    NotificationType,
    User,
    VideoJob,
)

from strategies import emails, usernames


def make_job(**overrides):
    fields = dict(
        user_id=uuid.uuid4(),
        filename="video.mp4",
        status=JobStatus.PENDING,
        video_url="https://frameforge-videos.s3.amazonaws.com/uploads/video.mp4",
    )
    fields.update(overrides)
    return VideoJob(**fields)


def make_notification(**overrides):
    fields = dict(
        job_id=uuid.uuid4(),
        notification_type=NotificationType.SUCCESS,
        recipient_email="a@example.com",
        delivery_status=DeliveryStatus.PENDING,
    )
    fields.update(overrides)
    return NotificationLog(**fields)


# ============================================================
# User
# ============================================================

def test_valid_user():
    user = User(username="alice_1", email="a@example.com", password_hash="hash")
    assert user.username == "alice_1"
    assert user.email == "a@example.com"


@given(username=usernames, email=emails)
def test_any_well_formed_user_is_accepted(username, email):
    user = User(username=username, email=email, password_hash="hash")
    assert user.username == username


@pytest.mark.parametrize("username", ["ab", "a" * 51, ""])
def test_username_length_bounds(username):
    with pytest.raises(FieldValidationError) as excinfo:
        User(username=username, email="a@example.com", password_hash="hash")
    assert excinfo.value.field == "username"
    assert excinfo.value.message == "Username must be between 3 and 50 characters"


@pytest.mark.parametrize("username", ["alice smith", "alice-1", "al!ce", "ålice"])
def test_username_characters(username):
    with pytest.raises(FieldValidationError) as excinfo:
        User(username=username, email="a@example.com", password_hash="hash")
    assert excinfo.value.message == "Username must contain only alphanumeric characters and underscores"


@given(
    prefix=st.from_regex(r"[a-z]{3,10}", fullmatch=True),
    bad=st.sampled_from(list(" -.!@#$%^&*()+=/")),
)
def test_any_disallowed_character_is_rejected(prefix, bad):
    with pytest.raises(FieldValidationError):
        validation.validate_username(prefix + bad)


@pytest.mark.parametrize(
    "email",
    [
        "not-an-email",
        "a@",
        "@example.com",
        "a b@example.com",
        "",
        "Alice <a@example.com>",
        "<a@example.com>",
        " a@example.com",
    ],
)
def test_invalid_email(email):
    with pytest.raises(FieldValidationError) as excinfo:
        User(username="alice_1", email=email, password_hash="hash")
    assert excinfo.value.field == "email"
    assert excinfo.value.message == "Invalid email address"


@pytest.mark.parametrize("username", [None, 123])
def test_username_must_be_a_string(username):
    with pytest.raises(FieldValidationError) as excinfo:
        validation.validate_username(username)
    assert excinfo.value.message == "Username must be a string"


def test_email_longer_than_column_is_rejected():
    with pytest.raises(FieldValidationError):
        validation.validate_email("a" * 250 + "@example.com")


def test_password_hash_must_be_present():
    with pytest.raises(FieldValidationError) as excinfo:
        User(username="alice_1", email="a@example.com", password_hash="")
    assert excinfo.value.field == "password_hash"


def test_reassignment_is_validated_too():
    user = User(username="alice_1", email="a@example.com", password_hash="hash")
    with pytest.raises(FieldValidationError):
        user.username = "x"
    assert user.username == "alice_1"


# ============================================================
# VideoJob
# ============================================================

@pytest.mark.parametrize("status", list(JobStatus) + ["pending", "completed"])
def test_valid_job_statuses(status):
    assert make_job(status=status).status in {s.value for s in JobStatus}


@pytest.mark.parametrize("status", ["PENDING", "done", "", "cancelled", None])
def test_invalid_job_status(status):
    with pytest.raises(FieldValidationError) as excinfo:
        make_job(status=status)
    assert excinfo.value.field == "status"
    assert excinfo.value.message.startswith("Invalid job status")


def test_filename_and_video_url_required():
    with pytest.raises(FieldValidationError):
        make_job(filename="")
    with pytest.raises(FieldValidationError):
        make_job(filename="x" * 256)
    with pytest.raises(FieldValidationError):
        make_job(video_url="")


@pytest.mark.parametrize("frame_count", [None, 0, 1, 36000])
def test_frame_count_accepts_non_negative(frame_count):
    assert make_job(frame_count=frame_count).frame_count == frame_count


@pytest.mark.parametrize("frame_count", [-1, "12", 1.5])
def test_frame_count_rejects_others(frame_count):
    with pytest.raises(FieldValidationError) as excinfo:
        make_job(frame_count=frame_count)
    assert excinfo.value.field == "frame_count"


def test_optional_text_fields():
    job = make_job(result_url=None, error_message="ffmpeg exited with 1")
    assert job.error_message == "ffmpeg exited with 1"
    with pytest.raises(FieldValidationError):
        make_job(result_url=42)


# ============================================================
# NotificationLog
# ============================================================

def test_valid_notification():
    notification = make_notification(retry_count=2, error_message="timeout")
    assert notification.notification_type == "success"
    assert notification.delivery_status == "pending"
    assert notification.retry_count == 2


@pytest.mark.parametrize(
    "field, value, message",
    [
        ("notification_type", "bounced", "Invalid notification type"),
        ("delivery_status", "queued", "Invalid delivery status"),
        ("recipient_email", "nobody", "Invalid recipient email address"),
        ("recipient_email", "Bob <b@example.com>", "Invalid recipient email address"),
        ("retry_count", -1, "must be a non-negative integer"),
    ],
)
def test_invalid_notification_fields(field, value, message):
    with pytest.raises(FieldValidationError) as excinfo:
        make_notification(**{field: value})
    assert excinfo.value.field == field
    assert excinfo.value.message.startswith(message)


def test_field_validation_error_is_a_value_error():
    with pytest.raises(ValueError):
        validation.validate_enum("nope", JobStatus, "status", "Invalid job status")
