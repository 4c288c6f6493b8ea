from pydantic import BaseModel, Field, validator
from typing import List, Optional


class AssignTeamLead(BaseModel):
    employee_id: int = Field(..., gt=0)
    team_id: int = Field(..., gt=0)


class UpdateEmployeeTeam(BaseModel):
    employee_id: int = Field(..., gt=0)
    team_id: int = Field(..., gt=0)


class UpdateEmployeeProjects(BaseModel):
    employee_id: int = Field(..., gt=0)
    project_ids: List[int] = Field(..., min_length=1)

    @validator('project_ids')
    def validate_project_ids(cls, v):
        if any(project_id <= 0 for project_id in v):
            raise ValueError('Project IDs must be positive integers')
        return list(dict.fromkeys(v))


class TeamInfo(BaseModel):
    team_id: int
    team_name: str


class TeamMember(BaseModel):
    employee_id: int
    full_name: str
    designation: Optional[str] = None


class TeamLeadMembers(BaseModel):
    team: TeamInfo
    team_lead: TeamMember
    members: List[TeamMember]
