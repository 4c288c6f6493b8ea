"""Asset request workflow endpoints."""
import logging
from typing import Any, List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from app.db.database import get_db
from app.models.asset_request import RequestStatus
from app.schemas.asset_request import (
    ApprovalDecision,
    ApprovalGateRow,
    ApprovalRecorded,
    AssetRequestCreate,
    AssetRequestCreated,
    AssetRequestDetail,
    EmployeeAssetRow,
    MessageResponse,
    PendingApprovalRow,
)
from app.services import asset_request_service
from app.services.issuance_service import issue_asset

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/", response_model=AssetRequestCreated, status_code=status.HTTP_201_CREATED)
def create_asset_request(
    *,
    db: Session = Depends(get_db),
    request_in: AssetRequestCreate
) -> Any:
    """Submit an asset request (Employee: TeamLead -> IT, Management: IT)"""
    request_id = asset_request_service.create_request(db, request_in)
    return {"message": "Asset request created successfully", "request_id": request_id}


@router.post("/approvals", response_model=ApprovalRecorded)
def record_approval_decision(
    *,
    db: Session = Depends(get_db),
    decision: ApprovalDecision
) -> Any:
    """Record an approver's decision; issues the asset once every step is approved"""
    request_status = asset_request_service.record_approval(db, decision)
    if request_status == RequestStatus.ISSUED:
        message = "Approval updated and asset issued"
    else:
        message = "Approval updated"
    return {
        "message": message,
        "request_id": decision.request_id,
        "request_status": request_status,
    }


@router.post("/{request_id}/issue", response_model=MessageResponse)
def issue_approved_request(
    request_id: int,
    db: Session = Depends(get_db),
) -> Any:
    """Issue the asset for a fully approved request"""
    issue_asset(db, request_id)
    return {"message": "Asset issued successfully"}


@router.get("/pending-approvals", response_model=List[PendingApprovalRow])
def get_pending_approvals(
    approver_id: int = Query(..., gt=0),
    db: Session = Depends(get_db),
) -> Any:
    """Approval steps waiting on an approver"""
    return asset_request_service.get_pending_approvals(db, approver_id)


@router.get("/employee-assets", response_model=List[EmployeeAssetRow])
def get_employee_assets(
    employee_id: int = Query(..., gt=0),
    status: Optional[RequestStatus] = None,
    db: Session = Depends(get_db),
) -> Any:
    """Requests raised by one employee"""
    return asset_request_service.get_employee_assets(db, employee_id, status)


@router.get("/", response_model=List[AssetRequestDetail])
def get_all_requests(
    status: Optional[RequestStatus] = None,
    requester_id: Optional[int] = Query(None, gt=0),
    db: Session = Depends(get_db),
) -> Any:
    """All asset requests, newest first"""
    return asset_request_service.list_requests(db, status=status, requester_id=requester_id)


@router.get("/{request_id}/approvals", response_model=List[ApprovalGateRow])
def get_request_approvals(
    request_id: int,
    db: Session = Depends(get_db),
) -> Any:
    """Approval steps of a request"""
    return asset_request_service.get_request_approvals(db, request_id)
