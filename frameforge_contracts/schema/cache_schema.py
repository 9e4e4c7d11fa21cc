import uuid
from datetime import datetime
from typing import Optional

from frameforge_contracts.models.orm.video_job import JobStatus
from frameforge_contracts.schema.base_schema import ContractModel


class CachedJob(ContractModel):
    job_id: uuid.UUID
    status: JobStatus
    filename: str
    created_at: datetime
    completed_at: Optional[datetime] = None
    download_url: Optional[str] = None


class CachedUser(ContractModel):
    user_id: uuid.UUID
    username: str
    email: str
