import uuid
from datetime import datetime
from typing import Optional

from pydantic import EmailStr

from frameforge_contracts.models.validation import Username
from frameforge_contracts.schema.base_schema import ContractModel


class RegisterRequest(ContractModel):
    username: Username
    email: EmailStr
    password: str


class RegisterResponse(ContractModel):
    user_id: uuid.UUID
    username: str
    email: str
    created_at: datetime


class LoginRequest(ContractModel):
    username: str
    password: str


class LoginUser(ContractModel):
    user_id: uuid.UUID
    username: str
    email: str


class LoginResponse(ContractModel):
    token: str
    expires_in: int
    user: LoginUser


class ValidateRequest(ContractModel):
    token: str


class ValidateResponse(ContractModel):
    valid: bool
    user_id: Optional[uuid.UUID] = None
    username: Optional[str] = None


class JWTPayload(ContractModel):
    """Claims carried in the access token issued by the auth API."""
    user_id: uuid.UUID
    username: str
    iat: int
    exp: int
