"""
Pytest fixtures for the asset workflow test suite.

Provides:
- An in-memory SQLite database opened through the same Database handle the
  application uses, with foreign keys enforced
- A seeded organization: IT and Management departments, one engineering
  team with an active Team Lead, project memberships, and a few assets
- A TestClient bound to that database
"""
from datetime import date
from types import SimpleNamespace
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import event
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401
from app.db.database import Base, Database
from app.main import create_app
from app.models.asset import Asset
from app.models.department import Department
from app.models.employee import Employee, EmployeeRole
from app.models.project import Project
from app.models.team import EmployeeTeam, Team, TeamLead, TeamLeadStatus


@pytest.fixture
def database() -> Generator[Database, None, None]:
    database = Database(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    database.open()

    @event.listens_for(database.engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(database.engine)
    yield database
    Base.metadata.drop_all(database.engine)
    database.close()


@pytest.fixture
def db(database: Database) -> Generator[Session, None, None]:
    session = database.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(database: Database) -> Generator[TestClient, None, None]:
    with TestClient(create_app(database)) as test_client:
        yield test_client


def make_employee(db: Session, first_name: str, department: Department, **kwargs) -> Employee:
    employee = Employee(
        first_name=first_name,
        last_name="Tester",
        email=f"{first_name.lower()}@example.com",
        designation=kwargs.pop("designation", "Engineer"),
        department_id=department.id,
        **kwargs,
    )
    db.add(employee)
    db.flush()
    return employee


def make_asset(db: Session, serial_number: str, quantity: int, asset_type: str = "Laptop") -> Asset:
    asset = Asset(
        asset_type=asset_type,
        brand="Lenovo",
        model="T14",
        serial_number=serial_number,
        purchase_date=date(2025, 1, 15),
        quantity=quantity,
    )
    db.add(asset)
    db.flush()
    return asset


@pytest.fixture
def org(db: Session) -> SimpleNamespace:
    it = Department(name="Information Technology", code="IT")
    management = Department(name="Management", code="MGMT")
    engineering = Department(name="Engineering")
    db.add_all([it, management, engineering])
    db.flush()

    platform = Project(name="Platform")
    billing = Project(name="Billing")
    db.add_all([platform, billing])
    db.flush()

    team = Team(name="Backend", department_id=engineering.id)
    db.add(team)
    db.flush()

    it_approver = make_employee(db, "Ivan", it, designation="IT Admin")
    it_backup = make_employee(db, "Irene", it, designation="IT Admin")
    lead = make_employee(db, "Laura", management, role=EmployeeRole.TEAM_LEAD, designation="Team Lead")
    alice = make_employee(db, "Alice", engineering)
    bob = make_employee(db, "Bob", engineering)
    loner = make_employee(db, "Nina", engineering)
    manager = make_employee(db, "Mark", management, role=EmployeeRole.MANAGEMENT, designation="Director")

    for employee in (lead, alice, bob):
        db.add(EmployeeTeam(employee_id=employee.id, team_id=team.id))
    alice.projects = [platform]
    bob.projects = [platform, billing]
    db.add(TeamLead(employee_id=lead.id, team_id=team.id, status=TeamLeadStatus.ACTIVE))

    laptop = make_asset(db, "SN-LAPTOP-001", quantity=5)
    monitor = make_asset(db, "SN-MONITOR-001", quantity=1, asset_type="Monitor")
    phone = make_asset(db, "SN-PHONE-001", quantity=0, asset_type="Phone")

    db.commit()

    return SimpleNamespace(
        it=it,
        management=management,
        engineering=engineering,
        platform=platform,
        billing=billing,
        team=team,
        it_approver=it_approver,
        it_backup=it_backup,
        lead=lead,
        alice=alice,
        bob=bob,
        loner=loner,
        manager=manager,
        laptop=laptop,
        monitor=monitor,
        phone=phone,
    )
