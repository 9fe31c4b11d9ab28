"""
Employer schemas.
"""
from typing import Optional
from uuid import UUID

from pydantic import Field

from hirehub.schemas.base import BaseSchema


class EmployerUpdate(BaseSchema):
    company_name: str = Field(..., min_length=1, max_length=200)
    contact_info: Optional[str] = Field(None, max_length=200)
    position: Optional[str] = Field(None, max_length=100)


class EmployerCreate(EmployerUpdate):
    user_id: UUID


class EmployerResponse(BaseSchema):
    id: UUID
    user_id: UUID
    company_name: str
    contact_info: Optional[str] = None
    position: Optional[str] = None
    user_full_name: str = ""
    user_email: str = ""
