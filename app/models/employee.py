from sqlalchemy import Column, Integer, String, ForeignKey, Boolean, Enum, Table
from sqlalchemy.orm import relationship
from app.db.database import Base
from app.models.base import BaseModel
import enum


class EmployeeRole(enum.Enum):
    EMPLOYEE = "Employee"
    TEAM_LEAD = "TeamLead"
    MANAGEMENT = "Management"


employee_projects = Table(
    "employee_projects",
    Base.metadata,
    Column("employee_id", Integer, ForeignKey("employees.id", ondelete="CASCADE"), primary_key=True),
    Column("project_id", Integer, ForeignKey("projects.id", ondelete="CASCADE"), primary_key=True),
)


class Employee(BaseModel):
    __tablename__ = "employees"

    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, index=True)
    contact_number = Column(String(30))
    designation = Column(String(150))
    role = Column(Enum(EmployeeRole), nullable=False, default=EmployeeRole.EMPLOYEE)
    department_id = Column(Integer, ForeignKey("departments.id"), nullable=True, index=True)
    is_active = Column(Boolean, default=True, nullable=False)

    # Relationships
    department = relationship("Department", back_populates="employees")
    projects = relationship("Project", secondary=employee_projects)
    team_membership = relationship(
        "EmployeeTeam", back_populates="employee", uselist=False, cascade="all, delete-orphan"
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def team_id(self):
        return self.team_membership.team_id if self.team_membership else None

    @property
    def project_ids(self):
        return [project.id for project in self.projects]
