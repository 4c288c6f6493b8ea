from datetime import datetime
from sqlalchemy import Column, Integer, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship
from app.models.base import BaseModel
import enum


class RequestType(enum.Enum):
    EMPLOYEE = "Employee"
    MANAGEMENT = "Management"


class RequestStatus(enum.Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    ISSUED = "Issued"


class AssetRequest(BaseModel):
    __tablename__ = "asset_requests"

    requester_id = Column(Integer, ForeignKey("employees.id"), nullable=False, index=True)
    asset_id = Column(Integer, ForeignKey("assets.id"), nullable=False, index=True)
    request_type = Column(Enum(RequestType), nullable=False)
    request_status = Column(Enum(RequestStatus), nullable=False, default=RequestStatus.PENDING, index=True)
    request_date = Column(DateTime, nullable=False, default=datetime.utcnow)

    # Relationships
    requester = relationship("Employee")
    asset = relationship("Asset")
    approvals = relationship(
        "AssetRequestApproval",
        back_populates="request",
        cascade="all, delete-orphan",
        order_by="AssetRequestApproval.id",
    )
    issue = relationship("AssetIssue", back_populates="request", uselist=False)
