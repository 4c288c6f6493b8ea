from typing import Optional
from pydantic import BaseModel, Field, validator
from datetime import datetime


class DepartmentBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    code: Optional[str] = Field(None, min_length=1, max_length=20)


class DepartmentCreate(DepartmentBase):
    pass


class DepartmentUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    code: Optional[str] = Field(None, min_length=1, max_length=20)

    @validator('name', pre=True)
    def name_not_null(cls, v):
        if v is None:
            raise ValueError('may be omitted but not null')
        return v


class Department(DepartmentBase):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True
