"""Team membership and Team Lead endpoints."""
from typing import Any
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.db.database import get_db
from app.schemas.asset_request import MessageResponse
from app.schemas.team import (
    AssignTeamLead,
    TeamLeadMembers,
    UpdateEmployeeProjects,
    UpdateEmployeeTeam,
)
from app.services import team_service

router = APIRouter()


@router.put("/lead", response_model=MessageResponse)
def assign_team_lead(
    *,
    db: Session = Depends(get_db),
    payload: AssignTeamLead
) -> Any:
    team_service.assign_team_lead(db, payload)
    return {
        "message": "Team lead updated. New lead moved to Management, previous lead reverted to Employee."
    }


@router.get("/lead/{lead_employee_id}/members", response_model=TeamLeadMembers)
def get_team_members_by_lead(
    lead_employee_id: int,
    db: Session = Depends(get_db),
) -> Any:
    return team_service.get_team_members_by_lead(db, lead_employee_id)


@router.put("/employee-team", response_model=MessageResponse)
def update_employee_team(
    *,
    db: Session = Depends(get_db),
    payload: UpdateEmployeeTeam
) -> Any:
    team_service.update_employee_team(db, payload)
    return {"message": "Employee team updated successfully"}


@router.put("/employee-projects", response_model=MessageResponse)
def update_employee_projects(
    *,
    db: Session = Depends(get_db),
    payload: UpdateEmployeeProjects
) -> Any:
    team_service.update_employee_projects(db, payload)
    return {"message": "Employee projects updated successfully"}
