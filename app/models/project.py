from sqlalchemy import Column, String, Text, Date
from app.models.base import BaseModel


class Project(BaseModel):
    __tablename__ = "projects"

    name = Column(String(150), nullable=False, unique=True)
    description = Column(Text)
    start_date = Column(Date)
    end_date = Column(Date)
