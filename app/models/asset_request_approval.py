"""Approval gate rows for asset requests."""
from sqlalchemy import Column, Integer, DateTime, ForeignKey, Text, Enum, UniqueConstraint
from sqlalchemy.orm import relationship
from app.models.base import BaseModel
import enum


class ApprovalLevel(enum.Enum):
    TEAM_LEAD = "TeamLead"
    IT = "IT"


class ApprovalStatus(enum.Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class AssetRequestApproval(BaseModel):
    """One required sign-off per approval level, fixed when the request is created."""
    __tablename__ = "asset_request_approvals"
    __table_args__ = (
        UniqueConstraint("request_id", "approval_level", name="uq_asset_request_approvals_level"),
    )

    request_id = Column(Integer, ForeignKey("asset_requests.id", ondelete="CASCADE"), nullable=False, index=True)
    approver_id = Column(Integer, ForeignKey("employees.id"), nullable=False, index=True)
    approval_level = Column(Enum(ApprovalLevel), nullable=False)
    approval_status = Column(Enum(ApprovalStatus), nullable=False, default=ApprovalStatus.PENDING)
    remarks = Column(Text, nullable=True)
    approval_date = Column(DateTime, nullable=True)

    # Relationships
    request = relationship("AssetRequest", back_populates="approvals")
    approver = relationship("Employee", foreign_keys=[approver_id])
