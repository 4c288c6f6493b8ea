from typing import Any, List
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from app import crud
from app.db.database import get_db
from app.schemas.asset_request import MessageResponse
from app.schemas.project import Project, ProjectCreate, ProjectUpdate

router = APIRouter()


@router.post("/", response_model=Project, status_code=status.HTTP_201_CREATED)
def create_project(
    *,
    db: Session = Depends(get_db),
    project_in: ProjectCreate
) -> Any:
    return crud.project.create(db, obj_in=project_in)


@router.get("/", response_model=List[Project])
def get_projects(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db),
) -> Any:
    return crud.project.get_multi(db, skip=skip, limit=limit)


@router.get("/{project_id}", response_model=Project)
def get_project(project_id: int, db: Session = Depends(get_db)) -> Any:
    return crud.project.get_or_raise(db, project_id)


@router.put("/{project_id}", response_model=Project)
def update_project(
    *,
    db: Session = Depends(get_db),
    project_id: int,
    project_update: ProjectUpdate
) -> Any:
    return crud.project.update_project(db, project_id=project_id, obj_in=project_update)


@router.delete("/{project_id}", response_model=MessageResponse)
def delete_project(project_id: int, db: Session = Depends(get_db)) -> Any:
    crud.project.remove(db, id=project_id)
    return {"message": "Project deleted successfully"}
