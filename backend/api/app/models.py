from pydantic import BaseModel, Field
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

# SQLite INTEGER is signed 64-bit
INT64_MIN = -2**63
INT64_MAX = 2**63 - 1

class UserIn(BaseModel):
    name: str
    age: int = Field(ge=INT64_MIN, le=INT64_MAX)

class User(UserIn):
    id: int

class PaginationResponse(BaseModel):
    page: int
    page_size: int
    page_count: int
    total: int

class MetaResponse(BaseModel):
    pagination: PaginationResponse

class SuccessResponse(BaseModel, Generic[T]):
    data: T
    meta: Optional[MetaResponse] = None

class ErrorResponse(BaseModel):
    error: str
    developer_details: Optional[str] = None
