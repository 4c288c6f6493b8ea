from .base import BaseModel
from .department import Department
from .project import Project
from .employee import Employee, EmployeeRole, employee_projects
from .team import Team, EmployeeTeam, TeamLead, TeamLeadStatus
from .asset import Asset, AssetStatus
from .asset_request import AssetRequest, RequestType, RequestStatus
from .asset_request_approval import AssetRequestApproval, ApprovalLevel, ApprovalStatus
from .asset_issue import AssetIssue
from .audit_log import AuditLog, AuditAction

__all__ = [
    "BaseModel", "Department", "Project", "Employee", "EmployeeRole", "employee_projects",
    "Team", "EmployeeTeam", "TeamLead", "TeamLeadStatus", "Asset", "AssetStatus",
    "AssetRequest", "RequestType", "RequestStatus",
    "AssetRequestApproval", "ApprovalLevel", "ApprovalStatus",
    "AssetIssue", "AuditLog", "AuditAction",
]
