from datetime import datetime
from sqlalchemy import Column, Integer, DateTime, ForeignKey, Enum
from app.db.database import Base
import enum


class AuditAction(enum.Enum):
    REQUEST = "Request"
    APPROVE = "Approve"
    REJECT = "Reject"
    ISSUE = "Issue"


class AuditLog(Base):
    """Append-only; rows are never updated or deleted."""
    __tablename__ = "audit_logs"

    id = Column(Integer, primary_key=True, index=True)
    action_type = Column(Enum(AuditAction), nullable=False)
    request_id = Column(Integer, ForeignKey("asset_requests.id"), nullable=False, index=True)
    performed_by = Column(Integer, ForeignKey("employees.id"), nullable=False)
    timestamp = Column(DateTime, nullable=False, default=datetime.utcnow, index=True)
