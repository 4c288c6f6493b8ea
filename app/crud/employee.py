import logging
from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import DuplicateRecord, NotFound, RecordInUse, ValidationFailed
from app.crud.base import CRUDBase
from app.crud.project import project as crud_project
from app.db.database import transaction
from app.models.department import Department
from app.models.employee import Employee
from app.models.project import Project
from app.models.team import EmployeeTeam, Team
from app.schemas.employee import EmployeeCreate, EmployeeUpdate

logger = logging.getLogger(__name__)


class CRUDEmployee(CRUDBase[Employee, EmployeeCreate, EmployeeUpdate]):

    def get_or_raise(self, db: Session, id: int) -> Employee:
        employee = self.get(db, id)
        if not employee:
            raise NotFound("Employee", id)
        return employee

    def get_by_email(self, db: Session, *, email: str, exclude_id: Optional[int] = None) -> Optional[Employee]:
        query = db.query(Employee).filter(Employee.email == email)
        if exclude_id is not None:
            query = query.filter(Employee.id != exclude_id)
        return query.first()

    def get_team_membership(self, db: Session, *, employee_id: int) -> Optional[EmployeeTeam]:
        return db.query(EmployeeTeam).filter(EmployeeTeam.employee_id == employee_id).first()

    def get_projects(self, db: Session, *, employee_id: int) -> List[Project]:
        employee = self.get_or_raise(db, employee_id)
        return list(employee.projects)

    def get_canonical_approver(self, db: Session, *, department_code: str) -> Optional[Employee]:
        """Lowest-id active employee of the department tagged with `department_code`"""
        return (
            db.query(Employee)
            .join(Department, Employee.department_id == Department.id)
            .filter(Department.code == department_code, Employee.is_active.is_(True))
            .order_by(Employee.id)
            .first()
        )

    def in_department(self, db: Session, *, employee: Employee, department_code: str) -> bool:
        if employee.department_id is None:
            return False
        department = db.get(Department, employee.department_id)
        return department is not None and department.code == department_code

    # ==========================================
    # MEMBERSHIP (callers own the transaction)
    # ==========================================

    def set_team(self, db: Session, *, employee_id: int, team_id: Optional[int]) -> None:
        """Upsert the single team membership; `None` removes it"""
        membership = self.get_team_membership(db, employee_id=employee_id)
        if team_id is None:
            if membership:
                db.delete(membership)
        elif membership:
            membership.team_id = team_id
        else:
            db.add(EmployeeTeam(employee_id=employee_id, team_id=team_id))

    def set_projects(self, db: Session, *, employee: Employee, project_ids: List[int]) -> None:
        employee.projects = crud_project.get_many_or_raise(db, ids=project_ids)

    # ==========================================
    # ADMIN
    # ==========================================

    def _check_references(
        self, db: Session, *, department_id: Optional[int], team_id: Optional[int]
    ) -> None:
        if department_id is not None and not db.get(Department, department_id):
            raise ValidationFailed("Invalid department")
        if team_id is not None and not db.get(Team, team_id):
            raise ValidationFailed("Invalid team")

    def create_employee(self, db: Session, *, obj_in: EmployeeCreate) -> Employee:
        with transaction(db):
            if self.get_by_email(db, email=obj_in.email):
                raise DuplicateRecord("Employee with this email already exists")
            self._check_references(db, department_id=obj_in.department_id, team_id=obj_in.team_id)

            employee = Employee(**obj_in.model_dump(exclude={"team_id", "project_ids"}))
            db.add(employee)
            db.flush()

            if obj_in.team_id is not None:
                self.set_team(db, employee_id=employee.id, team_id=obj_in.team_id)
            if obj_in.project_ids:
                self.set_projects(db, employee=employee, project_ids=obj_in.project_ids)

        db.refresh(employee)
        logger.info(f"Created employee {employee.id} ({employee.email})")
        return employee

    def update_employee(self, db: Session, *, employee_id: int, obj_in: EmployeeUpdate) -> Employee:
        update_data = obj_in.model_dump(exclude_unset=True)
        team_given = "team_id" in update_data
        team_id = update_data.pop("team_id", None)
        project_ids = update_data.pop("project_ids", None)

        with transaction(db):
            employee = self.get_or_raise(db, employee_id)
            if obj_in.email and self.get_by_email(db, email=obj_in.email, exclude_id=employee_id):
                raise DuplicateRecord("Employee with this email already exists")
            self._check_references(db, department_id=obj_in.department_id, team_id=team_id)

            for field, value in update_data.items():
                setattr(employee, field, value)
            if team_given:
                self.set_team(db, employee_id=employee.id, team_id=team_id)
            if project_ids is not None:
                self.set_projects(db, employee=employee, project_ids=project_ids)

        db.refresh(employee)
        return employee

    def remove(self, db: Session, *, id: int) -> Employee:
        employee = self.get_or_raise(db, id)
        try:
            super().remove(db, id=employee.id)
        except IntegrityError:
            logger.warning(f"Refused to delete employee {id}: referenced by asset requests")
            raise RecordInUse("Employee", id)
        return employee


employee = CRUDEmployee(Employee)
