# File: scripts/create_initial_data.py
"""
Script to create the departments the asset workflow depends on
Run this after `alembic upgrade head`
"""
import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from sqlalchemy.orm import Session
from app import crud
from app.core.config import settings
from app.db.database import Database
from app.models.department import Department
from app.models.employee import Employee, EmployeeRole


def ensure_department(db: Session, name: str, code: str) -> Department:
    department = crud.department.get_by_code(db, code=code)
    if department:
        print(f"Department already exists: {department.name} ({code})")
        return department
    department = Department(name=name, code=code)
    db.add(department)
    db.flush()
    print(f"Created department: {name} ({code})")
    return department


def create_initial_data(it_admin_email: str = "it.admin@example.org"):
    database = Database.from_settings(settings)
    database.open()
    db = database.session()

    try:
        it = ensure_department(db, "Information Technology", settings.IT_DEPARTMENT_CODE)
        ensure_department(db, "Management", settings.MANAGEMENT_DEPARTMENT_CODE)

        # Without an active IT employee no request can be created
        if crud.employee.get_canonical_approver(db, department_code=settings.IT_DEPARTMENT_CODE):
            print("IT approver already exists")
        else:
            db.add(Employee(
                first_name="IT",
                last_name="Administrator",
                email=it_admin_email,
                designation="IT Administrator",
                role=EmployeeRole.EMPLOYEE,
                department_id=it.id,
            ))
            print(f"Created IT approver: {it_admin_email}")

        db.commit()
        print("Initial data created successfully!")

    except Exception as e:
        print(f"Error creating initial data: {e}")
        db.rollback()
        raise
    finally:
        db.close()
        database.close()


if __name__ == "__main__":
    create_initial_data()
