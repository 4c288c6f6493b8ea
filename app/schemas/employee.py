from typing import List, Optional
from pydantic import BaseModel, EmailStr, Field, validator
from datetime import datetime
from app.models.employee import EmployeeRole


def _positive_unique(ids: List[int]) -> List[int]:
    if any(item <= 0 for item in ids):
        raise ValueError('Project IDs must be positive integers')
    return list(dict.fromkeys(ids))


class EmployeeBase(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    contact_number: Optional[str] = Field(None, max_length=30)
    designation: Optional[str] = Field(None, max_length=150)
    role: EmployeeRole = EmployeeRole.EMPLOYEE
    department_id: int = Field(..., gt=0)


class EmployeeCreate(EmployeeBase):
    """New employee, optionally placed in a team and on projects straight away"""
    team_id: Optional[int] = Field(None, gt=0)
    project_ids: List[int] = []

    @validator('project_ids')
    def validate_project_ids(cls, v):
        return _positive_unique(v)


class EmployeeUpdate(BaseModel):
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    contact_number: Optional[str] = Field(None, max_length=30)
    designation: Optional[str] = Field(None, max_length=150)
    role: Optional[EmployeeRole] = None
    department_id: Optional[int] = Field(None, gt=0)
    is_active: Optional[bool] = None
    # Explicit null removes the team membership
    team_id: Optional[int] = Field(None, gt=0)
    project_ids: Optional[List[int]] = None

    @validator('first_name', 'last_name', 'email', 'role', 'department_id', 'is_active', 'project_ids', pre=True)
    def reject_null(cls, v):
        if v is None:
            raise ValueError('may be omitted but not null')
        return v

    @validator('project_ids')
    def validate_project_ids(cls, v):
        return _positive_unique(v)


class Employee(BaseModel):
    id: int
    first_name: str
    last_name: str
    full_name: str
    email: Optional[str] = None
    contact_number: Optional[str] = None
    designation: Optional[str] = None
    role: EmployeeRole
    department_id: Optional[int] = None
    is_active: bool
    team_id: Optional[int] = None
    project_ids: List[int] = []
    created_at: datetime

    class Config:
        from_attributes = True
