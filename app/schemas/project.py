from typing import Optional
from pydantic import BaseModel, Field, validator
from datetime import date, datetime


class ProjectBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=150)
    description: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class ProjectCreate(ProjectBase):

    @validator('end_date')
    def end_after_start(cls, v, values):
        start = values.get('start_date')
        if v and start and v < start:
            raise ValueError('end_date must not be before start_date')
        return v


class ProjectUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=150)
    description: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @validator('name', pre=True)
    def name_not_null(cls, v):
        if v is None:
            raise ValueError('may be omitted but not null')
        return v


class Project(ProjectBase):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True
