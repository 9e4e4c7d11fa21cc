from datetime import datetime
from typing import Any, Optional

from frameforge_contracts.schema.base_schema import ContractModel


class ErrorDetail(ContractModel):
    code: str
    message: str
    details: Optional[Any] = None
    request_id: str
    timestamp: datetime


class ErrorResponse(ContractModel):
    """Envelope every service uses for non-2xx responses"""
    error: ErrorDetail
