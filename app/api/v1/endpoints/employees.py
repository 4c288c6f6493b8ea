"""Employee directory endpoints."""
from typing import Any, List
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from app import crud
from app.db.database import get_db
from app.schemas.asset_request import MessageResponse
from app.schemas.employee import Employee, EmployeeCreate, EmployeeUpdate

router = APIRouter()


@router.post("/", response_model=Employee, status_code=status.HTTP_201_CREATED)
def create_employee(
    *,
    db: Session = Depends(get_db),
    employee_in: EmployeeCreate
) -> Any:
    """Add an employee, optionally with a team and projects"""
    return crud.employee.create_employee(db, obj_in=employee_in)


@router.get("/", response_model=List[Employee])
def get_employees(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db),
) -> Any:
    return crud.employee.get_multi(db, skip=skip, limit=limit)


@router.get("/{employee_id}", response_model=Employee)
def get_employee(employee_id: int, db: Session = Depends(get_db)) -> Any:
    return crud.employee.get_or_raise(db, employee_id)


@router.put("/{employee_id}", response_model=Employee)
def update_employee(
    *,
    db: Session = Depends(get_db),
    employee_id: int,
    employee_update: EmployeeUpdate
) -> Any:
    """Partial update; `team_id: null` removes the team membership"""
    return crud.employee.update_employee(db, employee_id=employee_id, obj_in=employee_update)


@router.delete("/{employee_id}", response_model=MessageResponse)
def delete_employee(employee_id: int, db: Session = Depends(get_db)) -> Any:
    """Refused once the employee has raised or approved asset requests"""
    crud.employee.remove(db, id=employee_id)
    return {"message": "Employee deleted successfully"}
