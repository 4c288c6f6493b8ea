# File: app/schemas/asset_request.py
from pydantic import BaseModel, Field, validator
from typing import Optional
from datetime import datetime
from app.models.asset_request import RequestType, RequestStatus
from app.models.asset_request_approval import ApprovalLevel, ApprovalStatus


# ==========================================
# PAYLOADS
# ==========================================

class AssetRequestCreate(BaseModel):
    requester_id: int = Field(..., gt=0)
    asset_id: int = Field(..., gt=0)
    request_type: RequestType


class ApprovalDecision(BaseModel):
    """Decision submitted by an approver for one gate of a request"""
    request_id: int = Field(..., gt=0)
    approver_id: int = Field(..., gt=0)
    approval_level: ApprovalLevel
    approval_status: ApprovalStatus
    remarks: Optional[str] = None

    @validator('approval_status')
    def validate_decision(cls, v):
        if v == ApprovalStatus.PENDING:
            raise ValueError('approval_status must be Approved or Rejected')
        return v

    @validator('remarks')
    def blank_remarks_to_none(cls, v):
        if v is not None and not v.strip():
            return None
        return v


# ==========================================
# RESPONSES
# ==========================================

class AssetRequestCreated(BaseModel):
    message: str
    request_id: int


class ApprovalRecorded(BaseModel):
    message: str
    request_id: int
    request_status: RequestStatus


class MessageResponse(BaseModel):
    message: str


class AssetRequestRow(BaseModel):
    request_id: int
    requester_id: int
    asset_id: int
    request_type: RequestType
    request_status: RequestStatus
    request_date: datetime


class EmployeeAssetRow(AssetRequestRow):
    asset_type: str
    brand: Optional[str] = None
    model: Optional[str] = None
    serial_number: str


class AssetRequestDetail(EmployeeAssetRow):
    requester_name: str


class PendingApprovalRow(AssetRequestDetail):
    approval_level: ApprovalLevel


class ApprovalGateRow(BaseModel):
    id: int
    request_id: int
    approver_id: int
    approver_name: str
    approval_level: ApprovalLevel
    approval_status: ApprovalStatus
    remarks: Optional[str] = None
    approval_date: Optional[datetime] = None
