from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from app.models.base import BaseModel


class Department(BaseModel):
    __tablename__ = "departments"

    name = Column(String(100), nullable=False, unique=True)
    # Named role tag (e.g. "IT", "MGMT") looked up through settings
    code = Column(String(20), nullable=True, unique=True, index=True)

    # Relationships
    # Deleting a department still referenced fails on the foreign keys
    employees = relationship("Employee", back_populates="department", passive_deletes="all")
    teams = relationship("Team", back_populates="department", passive_deletes="all")
