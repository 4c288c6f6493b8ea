from typing import Any, List
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from app import crud
from app.db.database import get_db
from app.schemas.asset_request import MessageResponse
from app.schemas.department import Department, DepartmentCreate, DepartmentUpdate

router = APIRouter()


@router.post("/", response_model=Department, status_code=status.HTTP_201_CREATED)
def create_department(
    *,
    db: Session = Depends(get_db),
    department_in: DepartmentCreate
) -> Any:
    return crud.department.create(db, obj_in=department_in)


@router.get("/", response_model=List[Department])
def get_departments(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db),
) -> Any:
    return crud.department.get_multi(db, skip=skip, limit=limit)


@router.get("/{department_id}", response_model=Department)
def get_department(department_id: int, db: Session = Depends(get_db)) -> Any:
    return crud.department.get_or_raise(db, department_id)


@router.put("/{department_id}", response_model=Department)
def update_department(
    *,
    db: Session = Depends(get_db),
    department_id: int,
    department_update: DepartmentUpdate
) -> Any:
    return crud.department.update_department(
        db, department_id=department_id, obj_in=department_update
    )


@router.delete("/{department_id}", response_model=MessageResponse)
def delete_department(department_id: int, db: Session = Depends(get_db)) -> Any:
    """Refused while employees or teams still belong to the department"""
    crud.department.remove(db, id=department_id)
    return {"message": "Department deleted successfully"}
