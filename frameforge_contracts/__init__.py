"""Schema, migrations and wire contracts shared by the FrameForge services."""
from frameforge_contracts.models.orm import (
    Base,
    DeliveryStatus,
    JobStatus,
    NotificationLog,
    NotificationType,
    User,
    VideoJob,
)

__version__ = "1.0.0"
