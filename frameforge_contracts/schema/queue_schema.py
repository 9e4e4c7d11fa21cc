"""
Message payloads exchanged over the processing, event and notification
queues, plus the worker-side processing shapes.

The broker itself is owned by the services; these models only pin down the
field names and which of them may be absent.
"""
import uuid
from datetime import datetime
from typing import List, Literal, Optional

from frameforge_contracts.models.orm.notification_log import NotificationType
from frameforge_contracts.schema.base_schema import ContractModel


class VideoProcessingMessage(ContractModel):
    """API -> worker: a job is ready to be processed."""
    job_id: uuid.UUID
    user_id: uuid.UUID
    video_url: str
    filename: str
    timestamp: datetime


class VideoEventMessage(ContractModel):
    """Worker -> event queue: a job reached a terminal state."""
    job_id: uuid.UUID
    user_id: uuid.UUID
    event_type: Literal["completed", "failed"]
    filename: str
    result_url: Optional[str] = None
    frame_count: Optional[int] = None
    error_message: Optional[str] = None
    timestamp: datetime


class NotificationMessage(ContractModel):
    """Event consumer -> notification dispatcher."""
    job_id: uuid.UUID
    user_id: uuid.UUID
    recipient_email: str
    notification_type: NotificationType
    filename: str
    result_url: Optional[str] = None
    error_message: Optional[str] = None
    timestamp: datetime


class ProcessingContext(ContractModel):
    job_id: uuid.UUID
    user_id: uuid.UUID
    video_url: str
    filename: str
    work_dir: str


class ProcessingResult(ContractModel):
    success: bool
    frame_count: Optional[int] = None
    zip_path: Optional[str] = None
    zip_url: Optional[str] = None
    error_message: Optional[str] = None


class Resolution(ContractModel):
    width: int
    height: int


class FrameInfo(ContractModel):
    filename: str
    timestamp: float  # seconds from start of video
    size: int  # bytes


class FrameManifest(ContractModel):
    """manifest.json written next to the extracted frames"""
    video_filename: str
    total_frames: int
    fps: float
    resolution: Resolution
    frames: List[FrameInfo]
    processed_at: datetime
