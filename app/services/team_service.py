"""Team membership and Team Lead assignment.

These feed the approval chain: an Employee request needs the requester's
team, at least one project, and that team's active lead.
"""
import logging

from sqlalchemy.orm import Session

from app import crud
from app.core.config import settings
from app.core.errors import NotFound
from app.db.database import transaction
from app.models.employee import EmployeeRole
from app.models.team import EmployeeTeam, TeamLead, TeamLeadStatus
from app.schemas.team import (
    AssignTeamLead,
    TeamInfo,
    TeamLeadMembers,
    TeamMember,
    UpdateEmployeeProjects,
    UpdateEmployeeTeam,
)

logger = logging.getLogger(__name__)


def assign_team_lead(db: Session, payload: AssignTeamLead) -> None:
    """
    Make an employee the active lead of a team.
    - New lead moves to the Management department with role TeamLead
    - Every other lead of the team becomes Inactive
    - A previous, different lead reverts to Employee in the team's department
    """
    with transaction(db):
        employee = crud.employee.get_or_raise(db, payload.employee_id)
        team = crud.team.get_or_raise(db, payload.team_id)

        management = crud.department.get_by_code(
            db, code=settings.MANAGEMENT_DEPARTMENT_CODE
        )
        if not management:
            raise NotFound("Management department")

        current = crud.team_lead.get_active_for_team(db, team_id=team.id)
        previous_lead_id = current.employee_id if current else None

        employee.department_id = management.id
        employee.role = EmployeeRole.TEAM_LEAD
        crud.employee.set_team(db, employee_id=employee.id, team_id=team.id)

        db.query(TeamLead).filter(TeamLead.team_id == team.id).update(
            {TeamLead.status: TeamLeadStatus.INACTIVE}, synchronize_session="fetch"
        )

        lead = crud.team_lead.get_for_team_and_employee(
            db, team_id=team.id, employee_id=employee.id
        )
        if lead:
            lead.status = TeamLeadStatus.ACTIVE
        else:
            db.add(TeamLead(employee_id=employee.id, team_id=team.id, status=TeamLeadStatus.ACTIVE))

        if previous_lead_id and previous_lead_id != employee.id:
            previous = crud.employee.get_or_raise(db, previous_lead_id)
            previous.role = EmployeeRole.EMPLOYEE
            previous.department_id = team.department_id
            logger.info(f"Employee {previous_lead_id} reverted from Team Lead of team {team.id}")

    logger.info(f"Employee {payload.employee_id} is now Team Lead of team {payload.team_id}")


def update_employee_team(db: Session, payload: UpdateEmployeeTeam) -> None:
    with transaction(db):
        crud.employee.get_or_raise(db, payload.employee_id)
        crud.team.get_or_raise(db, payload.team_id)
        crud.employee.set_team(db, employee_id=payload.employee_id, team_id=payload.team_id)


def update_employee_projects(db: Session, payload: UpdateEmployeeProjects) -> None:
    """Replace the employee's project memberships"""
    with transaction(db):
        employee = crud.employee.get_or_raise(db, payload.employee_id)
        crud.employee.set_projects(db, employee=employee, project_ids=payload.project_ids)


def get_team_members_by_lead(db: Session, lead_employee_id: int) -> TeamLeadMembers:
    lead = crud.team_lead.get_active_by_employee(db, employee_id=lead_employee_id)
    if not lead:
        raise NotFound("Active Team Lead", lead_employee_id)

    members = (
        db.query(EmployeeTeam)
        .filter(EmployeeTeam.team_id == lead.team_id, EmployeeTeam.employee_id != lead.employee_id)
        .order_by(EmployeeTeam.employee_id)
        .all()
    )

    return TeamLeadMembers(
        team=TeamInfo(team_id=lead.team.id, team_name=lead.team.name),
        team_lead=TeamMember(
            employee_id=lead.employee.id,
            full_name=lead.employee.full_name,
            designation=lead.employee.designation,
        ),
        members=[
            TeamMember(
                employee_id=member.employee.id,
                full_name=member.employee.full_name,
                designation=member.employee.designation,
            )
            for member in members
        ],
    )
