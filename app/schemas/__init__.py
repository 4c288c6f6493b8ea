# File: app/schemas/__init__.py
from .asset import Asset, AssetCreate, AssetUpdate
from .asset_request import (
    # Payloads
    AssetRequestCreate, ApprovalDecision,

    # Responses
    AssetRequestCreated, ApprovalRecorded, MessageResponse,
    AssetRequestRow, EmployeeAssetRow, AssetRequestDetail,
    PendingApprovalRow, ApprovalGateRow,
)
from .audit_log import AuditLog
from .team import (
    AssignTeamLead, UpdateEmployeeTeam, UpdateEmployeeProjects,
    TeamInfo, TeamMember, TeamLeadMembers,
)
from .department import Department, DepartmentCreate, DepartmentUpdate
from .employee import Employee, EmployeeCreate, EmployeeUpdate
from .project import Project, ProjectCreate, ProjectUpdate
