import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from app.core.errors import DuplicateRecord, NotFound, ValidationFailed
from app.crud.base import CRUDBase
from app.models.project import Project
from app.schemas.project import ProjectCreate, ProjectUpdate

logger = logging.getLogger(__name__)


class CRUDProject(CRUDBase[Project, ProjectCreate, ProjectUpdate]):

    def get_or_raise(self, db: Session, id: int) -> Project:
        project = self.get(db, id)
        if not project:
            raise NotFound("Project", id)
        return project

    def get_by_name(self, db: Session, *, name: str, exclude_id: Optional[int] = None) -> Optional[Project]:
        query = db.query(Project).filter(Project.name == name)
        if exclude_id is not None:
            query = query.filter(Project.id != exclude_id)
        return query.first()

    def get_many_or_raise(self, db: Session, *, ids: List[int]) -> List[Project]:
        """All projects for `ids`, in the given order; any unknown id is a validation failure"""
        projects = {project.id: project for project in db.query(Project).filter(Project.id.in_(ids)).all()}
        if len(projects) != len(set(ids)):
            raise ValidationFailed("One or more project IDs are invalid")
        return [projects[project_id] for project_id in ids]

    def create(self, db: Session, *, obj_in: ProjectCreate) -> Project:
        if self.get_by_name(db, name=obj_in.name):
            raise DuplicateRecord("Project name already exists")
        project = super().create(db, obj_in=obj_in)
        logger.info(f"Created project {project.id} ({project.name})")
        return project

    def update_project(self, db: Session, *, project_id: int, obj_in: ProjectUpdate) -> Project:
        project = self.get_or_raise(db, project_id)
        if obj_in.name and self.get_by_name(db, name=obj_in.name, exclude_id=project_id):
            raise DuplicateRecord("Project name already exists")
        return self.update(db, db_obj=project, obj_in=obj_in)

    def remove(self, db: Session, *, id: int) -> Project:
        # Employee memberships go with the project (ON DELETE CASCADE)
        project = self.get_or_raise(db, id)
        super().remove(db, id=project.id)
        return project


project = CRUDProject(Project)
