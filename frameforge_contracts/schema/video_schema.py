import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict, Field

from frameforge_contracts.models.orm.video_job import JobStatus
from frameforge_contracts.schema.base_schema import ContractModel


class UploadUrlRequest(ContractModel):
    """Request schema for issuing a pre-signed upload URL"""
    filename: str
    content_type: str
    file_size: int = Field(ge=0)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "filename": "my_video.mp4",
                "contentType": "video/mp4",
                "fileSize": 10485760,
            }
        }
    )


class UploadUrlResponse(ContractModel):
    """Response schema for upload URL issuance"""
    upload_url: str
    video_id: str
    expires_in: int

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "uploadUrl": "https://bucket.s3.amazonaws.com/uploads/550e8400.mp4?X-Amz-Signature=...",
                "videoId": "550e8400-e29b-41d4-a716-446655440000",
                "expiresIn": 900,
            }
        }
    )


class CreateJobRequest(ContractModel):
    video_id: str
    filename: str


class CreateJobResponse(ContractModel):
    job_id: uuid.UUID
    status: JobStatus
    created_at: datetime


class JobSummary(ContractModel):
    """One row of a user's job listing"""
    job_id: uuid.UUID
    filename: str
    status: JobStatus
    created_at: datetime
    completed_at: Optional[datetime] = None
    download_url: Optional[str] = None


class Pagination(ContractModel):
    page: int
    limit: int
    total: int
    total_pages: int


class ListJobsResponse(ContractModel):
    jobs: List[JobSummary]
    pagination: Pagination


class JobDetailResponse(ContractModel):
    """Full job record as returned by the job detail endpoint"""
    job_id: uuid.UUID
    user_id: uuid.UUID
    filename: str
    status: JobStatus
    video_url: str
    result_url: Optional[str] = None
    frame_count: Optional[int] = None
    error_message: Optional[str] = None
    created_at: datetime
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
