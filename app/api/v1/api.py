# File: app/api/v1/api.py
from fastapi import APIRouter
from app.api.v1.endpoints import (
    asset_requests,
    assets,
    audit_logs,
    departments,
    employees,
    projects,
    teams,
)

# Create main API router
api_router = APIRouter()

api_router.include_router(
    asset_requests.router,
    prefix="/asset-requests",
    tags=["asset-requests"]
)

api_router.include_router(
    assets.router,
    prefix="/assets",
    tags=["assets"]
)

api_router.include_router(
    audit_logs.router,
    prefix="/audit-logs",
    tags=["audit-logs"]
)

api_router.include_router(
    departments.router,
    prefix="/departments",
    tags=["departments"]
)

api_router.include_router(
    employees.router,
    prefix="/employees",
    tags=["employees"]
)

api_router.include_router(
    projects.router,
    prefix="/projects",
    tags=["projects"]
)

api_router.include_router(
    teams.router,
    prefix="/teams",
    tags=["teams"]
)
