from pydantic import BaseModel

from typing import List, Optional


class SignInRequest(BaseModel):
    email: str
    password: str


class UserAttributes(BaseModel):
    name: Optional[str] = None
    email: str


class UserResource(BaseModel):
    id: str
    type: str = "users"
    attributes: UserAttributes


class UserDocument(BaseModel):
    data: UserResource


class UserCollectionDocument(BaseModel):
    data: List[UserResource]


class ValidateTokenResponse(BaseModel):
    success: bool = True
    data: UserResource


class SignOutResponse(BaseModel):
    success: bool = True


class ErrorResponse(BaseModel):
    errors: List[str]
    success: Optional[bool] = None


class ServiceInfo(BaseModel):
    service: str
    version: str
    status: str


class HealthStatus(BaseModel):
    status: str
    timestamp: str
    database: Optional[str] = None
