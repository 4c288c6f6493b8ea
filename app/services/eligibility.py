"""Works out who has to sign off on an asset request."""
import logging
from dataclasses import dataclass
from typing import List

from sqlalchemy.orm import Session

from app import crud
from app.core.config import settings
from app.core.errors import IneligibleRequester, NoActiveApprover
from app.models.asset_request import RequestType
from app.models.asset_request_approval import ApprovalLevel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ApprovalChainEntry:
    approval_level: ApprovalLevel
    approver_id: int


def resolve_it_approver(db: Session) -> int:
    approver = crud.employee.get_canonical_approver(
        db, department_code=settings.IT_DEPARTMENT_CODE
    )
    if not approver:
        raise NoActiveApprover("No IT approver found")
    return approver.id


def resolve_approval_chain(
    db: Session, requester_id: int, request_type: RequestType
) -> List[ApprovalChainEntry]:
    """
    Ordered approval chain for a request:
    - Management: IT
    - Employee: TeamLead of the requester's team, then IT

    Read-only. Runs inside the caller's transaction so it sees the same
    team and role assignments the request is created against.
    """
    requester = crud.employee.get_or_raise(db, requester_id)
    chain: List[ApprovalChainEntry] = []

    if request_type == RequestType.EMPLOYEE:
        membership = crud.employee.get_team_membership(db, employee_id=requester.id)
        if not membership:
            raise IneligibleRequester("Employee must be assigned to a team")

        if not crud.employee.get_projects(db, employee_id=requester.id):
            raise IneligibleRequester("Employee must be assigned to a project")

        lead = crud.team_lead.get_active_for_team(db, team_id=membership.team_id)
        if not lead:
            raise NoActiveApprover("No active Team Lead found for employee")

        chain.append(ApprovalChainEntry(ApprovalLevel.TEAM_LEAD, lead.employee_id))

    chain.append(ApprovalChainEntry(ApprovalLevel.IT, resolve_it_approver(db)))

    logger.debug(
        f"Approval chain for employee {requester_id} ({request_type.value}): "
        f"{[(entry.approval_level.value, entry.approver_id) for entry in chain]}"
    )
    return chain
