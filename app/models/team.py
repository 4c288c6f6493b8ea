from sqlalchemy import Column, Integer, String, ForeignKey, Enum, UniqueConstraint
from sqlalchemy.orm import relationship
from app.models.base import BaseModel
import enum


class TeamLeadStatus(enum.Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class Team(BaseModel):
    __tablename__ = "teams"

    name = Column(String(150), nullable=False)
    department_id = Column(Integer, ForeignKey("departments.id"), nullable=False, index=True)

    # Relationships
    department = relationship("Department", back_populates="teams")
    members = relationship("EmployeeTeam", back_populates="team")


class EmployeeTeam(BaseModel):
    """An employee belongs to at most one team."""
    __tablename__ = "employee_teams"

    employee_id = Column(Integer, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, unique=True)
    team_id = Column(Integer, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False, index=True)

    # Relationships
    employee = relationship("Employee", back_populates="team_membership")
    team = relationship("Team", back_populates="members")


class TeamLead(BaseModel):
    __tablename__ = "team_leads"
    __table_args__ = (
        UniqueConstraint("employee_id", "team_id", name="uq_team_leads_employee_team"),
    )

    employee_id = Column(Integer, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    team_id = Column(Integer, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False, index=True)
    status = Column(Enum(TeamLeadStatus), nullable=False, default=TeamLeadStatus.ACTIVE)

    # Relationships
    employee = relationship("Employee")
    team = relationship("Team")
