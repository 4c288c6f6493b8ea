from typing import List
from sqlalchemy.orm import Session

from app.core.errors import NotFound
from app.models.audit_log import AuditLog, AuditAction


class CRUDAuditLog:
    """Append-only access to audit_logs. There is no update or delete."""

    def record(
        self, db: Session, *, action_type: AuditAction, request_id: int, performed_by: int
    ) -> AuditLog:
        # Joins the caller's transaction; committed or rolled back with it
        entry = AuditLog(
            action_type=action_type,
            request_id=request_id,
            performed_by=performed_by,
        )
        db.add(entry)
        db.flush()
        return entry

    def get(self, db: Session, id: int) -> AuditLog:
        entry = db.query(AuditLog).filter(AuditLog.id == id).first()
        if not entry:
            raise NotFound("Audit log", id)
        return entry

    def get_multi(self, db: Session) -> List[AuditLog]:
        return (
            db.query(AuditLog)
            .order_by(AuditLog.timestamp.desc(), AuditLog.id.desc())
            .all()
        )

    def get_by_request(self, db: Session, *, request_id: int) -> List[AuditLog]:
        return (
            db.query(AuditLog)
            .filter(AuditLog.request_id == request_id)
            .order_by(AuditLog.timestamp, AuditLog.id)
            .all()
        )


audit_log = CRUDAuditLog()
