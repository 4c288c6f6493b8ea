from typing import Any, List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app import crud
from app.db.database import get_db
from app.schemas.audit_log import AuditLog

router = APIRouter()


@router.get("/", response_model=List[AuditLog])
def get_audit_logs(db: Session = Depends(get_db)) -> Any:
    """Audit trail, newest first"""
    return crud.audit_log.get_multi(db)


@router.get("/request/{request_id}", response_model=List[AuditLog])
def get_request_audit_logs(request_id: int, db: Session = Depends(get_db)) -> Any:
    return crud.audit_log.get_by_request(db, request_id=request_id)


@router.get("/{log_id}", response_model=AuditLog)
def get_audit_log(log_id: int, db: Session = Depends(get_db)) -> Any:
    return crud.audit_log.get(db, log_id)
