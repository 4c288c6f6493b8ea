"""Final step of the asset request workflow: hand a unit to the requester."""
import logging
from datetime import date

from sqlalchemy.orm import Session

from app import crud
from app.core.errors import InsufficientStock, NotFound, RequestNotApproved
from app.db.database import transaction
from app.models.asset_issue import AssetIssue
from app.models.asset_request import AssetRequest, RequestStatus
from app.models.audit_log import AuditAction
from app.services import inventory_ledger

logger = logging.getLogger(__name__)

UNITS_PER_REQUEST = 1


def perform_issuance(db: Session, request_id: int) -> AssetIssue:
    """Issue inside the caller's transaction.

    Re-checks everything itself, so it is safe to call outside the approval
    path too. Locks the asset row before the request row.
    """
    request = db.query(AssetRequest).filter(AssetRequest.id == request_id).first()
    if not request:
        raise NotFound("Asset request", request_id)

    quantity = inventory_ledger.lock_and_read_quantity(db, request.asset_id)

    request = (
        db.query(AssetRequest)
        .filter(AssetRequest.id == request_id)
        .with_for_update()
        .populate_existing()
        .one()
    )
    if request.request_status != RequestStatus.APPROVED:
        raise RequestNotApproved(request_id)
    if quantity <= 0:
        raise InsufficientStock(request.asset_id)

    issue = AssetIssue(
        request_id=request.id,
        asset_id=request.asset_id,
        employee_id=request.requester_id,
        issue_date=date.today(),
        quantity_issued=UNITS_PER_REQUEST,
    )
    db.add(issue)

    inventory_ledger.decrement(db, request.asset_id, UNITS_PER_REQUEST)

    request.request_status = RequestStatus.ISSUED
    crud.audit_log.record(
        db,
        action_type=AuditAction.ISSUE,
        request_id=request.id,
        performed_by=request.requester_id,
    )
    db.flush()

    logger.info(
        f"Issued asset {request.asset_id} to employee {request.requester_id} "
        f"for request {request.id}"
    )
    return issue


def issue_asset(db: Session, request_id: int) -> AssetIssue:
    with transaction(db):
        return perform_issuance(db, request_id)
