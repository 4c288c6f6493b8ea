"""
Asset request workflow:
- Employee request: TeamLead -> IT -> issue
- Management request: IT -> issue

A request and its approval rows are written together and only by this module.
Every mutating operation runs in one transaction holding the asset row lock.
"""
import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import exists, or_
from sqlalchemy.orm import Session, aliased

from app import crud
from app.core.config import settings
from app.core.errors import (
    ApprovalAlreadyRecorded,
    DuplicatePendingRequest,
    NotFound,
    OutOfStock,
    RequestClosed,
)
from app.db.database import transaction
from app.models.asset import Asset
from app.models.asset_request import AssetRequest, RequestStatus, RequestType
from app.models.asset_request_approval import (
    ApprovalLevel,
    ApprovalStatus,
    AssetRequestApproval,
)
from app.models.audit_log import AuditAction
from app.models.employee import Employee
from app.schemas.asset_request import (
    ApprovalDecision,
    ApprovalGateRow,
    AssetRequestCreate,
    AssetRequestDetail,
    EmployeeAssetRow,
    PendingApprovalRow,
)
from app.services import inventory_ledger
from app.services.eligibility import resolve_approval_chain
from app.services.issuance_service import perform_issuance

logger = logging.getLogger(__name__)


def _find_pending_request(db: Session, requester_id: int, asset_id: int) -> Optional[AssetRequest]:
    return (
        db.query(AssetRequest)
        .filter(
            AssetRequest.requester_id == requester_id,
            AssetRequest.asset_id == asset_id,
            AssetRequest.request_status == RequestStatus.PENDING,
        )
        .first()
    )


def create_request(db: Session, request_in: AssetRequestCreate) -> int:
    """Create a request plus one approval row per required approver. Returns the request id."""
    with transaction(db):
        requester = crud.employee.get_or_raise(db, request_in.requester_id)
        # Every stock and duplicate check below runs under this lock
        asset = inventory_ledger.lock_asset(db, request_in.asset_id)

        chain = resolve_approval_chain(db, requester.id, request_in.request_type)

        if _find_pending_request(db, requester.id, asset.id):
            logger.warning(
                f"Duplicate pending request by employee {requester.id} for asset {asset.id}"
            )
            raise DuplicatePendingRequest(requester.id, asset.id)

        if inventory_ledger.available_quantity(db, asset) <= 0:
            logger.warning(f"Asset {asset.id} has no unclaimed stock")
            raise OutOfStock(asset.id)

        request = AssetRequest(
            requester_id=requester.id,
            asset_id=asset.id,
            request_type=request_in.request_type,
            request_status=RequestStatus.PENDING,
            request_date=datetime.utcnow(),
        )
        db.add(request)
        db.flush()

        for entry in chain:
            db.add(AssetRequestApproval(
                request_id=request.id,
                approver_id=entry.approver_id,
                approval_level=entry.approval_level,
                approval_status=ApprovalStatus.PENDING,
            ))

        crud.audit_log.record(
            db,
            action_type=AuditAction.REQUEST,
            request_id=request.id,
            performed_by=requester.id,
        )
        request_id = request.id

    logger.info(
        f"Created asset request {request_id} ({request_in.request_type.value}) "
        f"by employee {request_in.requester_id} for asset {request_in.asset_id} "
        f"with {len(chain)} approval step(s)"
    )
    return request_id


def _aggregate_status(statuses: List[ApprovalStatus]) -> RequestStatus:
    if any(status == ApprovalStatus.REJECTED for status in statuses):
        return RequestStatus.REJECTED
    if statuses and all(status == ApprovalStatus.APPROVED for status in statuses):
        return RequestStatus.APPROVED
    return RequestStatus.PENDING


def record_approval(db: Session, decision: ApprovalDecision) -> RequestStatus:
    """Record one approver's decision and move the request forward.

    Any rejection closes the request. Once every gate is approved the asset
    is issued in the same transaction.
    """
    with transaction(db):
        request = db.query(AssetRequest).filter(AssetRequest.id == decision.request_id).first()
        if not request:
            raise NotFound("Asset request", decision.request_id)

        inventory_ledger.lock_asset(db, request.asset_id)
        db.refresh(request)

        if request.request_status != RequestStatus.PENDING:
            raise RequestClosed(request.id, request.request_status.value)

        gate = (
            db.query(AssetRequestApproval)
            .filter(
                AssetRequestApproval.request_id == request.id,
                AssetRequestApproval.approver_id == decision.approver_id,
                AssetRequestApproval.approval_level == decision.approval_level,
            )
            .first()
        )
        if not gate:
            raise NotFound(
                f"{decision.approval_level.value} approval for approver "
                f"{decision.approver_id} on request {request.id}"
            )
        if gate.approval_status != ApprovalStatus.PENDING:
            raise ApprovalAlreadyRecorded(
                request.id, gate.approval_level.value, gate.approval_status.value
            )

        gate.approval_status = decision.approval_status
        gate.remarks = decision.remarks
        gate.approval_date = datetime.utcnow()

        crud.audit_log.record(
            db,
            action_type=(
                AuditAction.APPROVE
                if decision.approval_status == ApprovalStatus.APPROVED
                else AuditAction.REJECT
            ),
            request_id=request.id,
            performed_by=decision.approver_id,
        )
        db.flush()

        statuses = [
            status for (status,) in db.query(AssetRequestApproval.approval_status)
            .filter(AssetRequestApproval.request_id == request.id)
            .all()
        ]
        aggregate = _aggregate_status(statuses)
        logger.info(
            f"{decision.approval_level.value} {decision.approval_status.value} "
            f"request {request.id} by employee {decision.approver_id}; "
            f"aggregate {aggregate.value}"
        )

        if aggregate != RequestStatus.PENDING:
            request.request_status = aggregate
            db.flush()

        if aggregate == RequestStatus.APPROVED:
            perform_issuance(db, request.id)

        final_status = request.request_status

    return final_status


# ==========================================
# READ PROJECTIONS
# ==========================================

def get_pending_approvals(db: Session, approver_id: int) -> List[PendingApprovalRow]:
    """Open approval steps waiting on `approver_id`, most recent first.

    IT approvers only see Employee requests once the Team Lead has signed off;
    Management requests reach them straight away.
    """
    approver = crud.employee.get_or_raise(db, approver_id)

    query = (
        db.query(AssetRequest, AssetRequestApproval, Employee, Asset)
        .join(AssetRequestApproval, AssetRequestApproval.request_id == AssetRequest.id)
        .join(Employee, AssetRequest.requester_id == Employee.id)
        .join(Asset, AssetRequest.asset_id == Asset.id)
        .filter(
            AssetRequestApproval.approver_id == approver.id,
            AssetRequestApproval.approval_status == ApprovalStatus.PENDING,
            AssetRequest.request_status == RequestStatus.PENDING,
        )
    )

    if crud.employee.in_department(
        db, employee=approver, department_code=settings.IT_DEPARTMENT_CODE
    ):
        lead_gate = aliased(AssetRequestApproval)
        lead_outstanding = exists().where(
            lead_gate.request_id == AssetRequest.id,
            lead_gate.approval_level == ApprovalLevel.TEAM_LEAD,
            lead_gate.approval_status == ApprovalStatus.PENDING,
        )
        query = query.filter(
            or_(AssetRequest.request_type == RequestType.MANAGEMENT, ~lead_outstanding)
        )

    rows = query.order_by(AssetRequest.request_date.desc(), AssetRequest.id.desc()).all()

    return [
        PendingApprovalRow(
            **_request_fields(request),
            **_asset_fields(asset),
            requester_name=requester.full_name,
            approval_level=gate.approval_level,
        )
        for request, gate, requester, asset in rows
    ]


def list_requests(
    db: Session,
    *,
    status: Optional[RequestStatus] = None,
    requester_id: Optional[int] = None,
) -> List[AssetRequestDetail]:
    query = (
        db.query(AssetRequest, Employee, Asset)
        .join(Employee, AssetRequest.requester_id == Employee.id)
        .join(Asset, AssetRequest.asset_id == Asset.id)
    )
    if status:
        query = query.filter(AssetRequest.request_status == status)
    if requester_id:
        query = query.filter(AssetRequest.requester_id == requester_id)

    rows = query.order_by(AssetRequest.request_date.desc(), AssetRequest.id.desc()).all()
    return [
        AssetRequestDetail(
            **_request_fields(request),
            **_asset_fields(asset),
            requester_name=requester.full_name,
        )
        for request, requester, asset in rows
    ]


def get_employee_assets(
    db: Session, employee_id: int, status: Optional[RequestStatus] = None
) -> List[EmployeeAssetRow]:
    crud.employee.get_or_raise(db, employee_id)

    query = (
        db.query(AssetRequest, Asset)
        .join(Asset, AssetRequest.asset_id == Asset.id)
        .filter(AssetRequest.requester_id == employee_id)
    )
    if status:
        query = query.filter(AssetRequest.request_status == status)

    rows = query.order_by(AssetRequest.request_date.desc(), AssetRequest.id.desc()).all()
    return [
        EmployeeAssetRow(**_request_fields(request), **_asset_fields(asset))
        for request, asset in rows
    ]


def get_request_approvals(db: Session, request_id: int) -> List[ApprovalGateRow]:
    request = db.query(AssetRequest).filter(AssetRequest.id == request_id).first()
    if not request:
        raise NotFound("Asset request", request_id)

    return [
        ApprovalGateRow(
            id=gate.id,
            request_id=gate.request_id,
            approver_id=gate.approver_id,
            approver_name=gate.approver.full_name,
            approval_level=gate.approval_level,
            approval_status=gate.approval_status,
            remarks=gate.remarks,
            approval_date=gate.approval_date,
        )
        for gate in request.approvals
    ]


def _request_fields(request: AssetRequest) -> dict:
    return {
        "request_id": request.id,
        "requester_id": request.requester_id,
        "asset_id": request.asset_id,
        "request_type": request.request_type,
        "request_status": request.request_status,
        "request_date": request.request_date,
    }


def _asset_fields(asset: Asset) -> dict:
    return {
        "asset_type": asset.asset_type,
        "brand": asset.brand,
        "model": asset.model,
        "serial_number": asset.serial_number,
    }
