from .base import Base
from .user import User
from .video_job import JobStatus, VideoJob
from .notification_log import DeliveryStatus, NotificationLog, NotificationType
