from pydantic import BaseModel
from datetime import datetime
from app.models.audit_log import AuditAction


class AuditLog(BaseModel):
    id: int
    action_type: AuditAction
    request_id: int
    performed_by: int
    timestamp: datetime

    class Config:
        from_attributes = True
