import logging
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import DuplicateRecord, NotFound, RecordInUse
from app.crud.base import CRUDBase
from app.models.department import Department
from app.schemas.department import DepartmentCreate, DepartmentUpdate

logger = logging.getLogger(__name__)


class CRUDDepartment(CRUDBase[Department, DepartmentCreate, DepartmentUpdate]):

    def get_or_raise(self, db: Session, id: int) -> Department:
        department = self.get(db, id)
        if not department:
            raise NotFound("Department", id)
        return department

    def get_by_code(self, db: Session, *, code: str) -> Optional[Department]:
        return db.query(Department).filter(Department.code == code).first()

    def _check_unique(
        self, db: Session, *, name: Optional[str], code: Optional[str], exclude_id: Optional[int] = None
    ) -> None:
        query = db.query(Department)
        if exclude_id is not None:
            query = query.filter(Department.id != exclude_id)
        if name and query.filter(Department.name == name).first():
            raise DuplicateRecord("Department name already exists")
        if code and query.filter(Department.code == code).first():
            raise DuplicateRecord("Department code already exists")

    def create(self, db: Session, *, obj_in: DepartmentCreate) -> Department:
        self._check_unique(db, name=obj_in.name, code=obj_in.code)
        department = super().create(db, obj_in=obj_in)
        logger.info(f"Created department {department.id} ({department.name})")
        return department

    def update_department(self, db: Session, *, department_id: int, obj_in: DepartmentUpdate) -> Department:
        department = self.get_or_raise(db, department_id)
        self._check_unique(db, name=obj_in.name, code=obj_in.code, exclude_id=department_id)
        return self.update(db, db_obj=department, obj_in=obj_in)

    def remove(self, db: Session, *, id: int) -> Department:
        department = self.get_or_raise(db, id)
        try:
            super().remove(db, id=department.id)
        except IntegrityError:
            logger.warning(f"Refused to delete department {id}: employees or teams still assigned")
            raise RecordInUse("Department", id)
        return department


department = CRUDDepartment(Department)
