from .base_schema import ContractModel
from .auth_schema import (
    JWTPayload,
    LoginRequest,
    LoginResponse,
    LoginUser,
    RegisterRequest,
    RegisterResponse,
    ValidateRequest,
    ValidateResponse,
)
from .video_schema import (
    CreateJobRequest,
    CreateJobResponse,
    JobDetailResponse,
    JobSummary,
    ListJobsResponse,
    Pagination,
    UploadUrlRequest,
    UploadUrlResponse,
)
from .queue_schema import (
    FrameInfo,
    FrameManifest,
    NotificationMessage,
    ProcessingContext,
    ProcessingResult,
    Resolution,
    VideoEventMessage,
    VideoProcessingMessage,
)
from .cache_schema import CachedJob, CachedUser
from .error_schema import ErrorDetail, ErrorResponse
