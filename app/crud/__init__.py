from .asset import asset
from .audit_log import audit_log
from .department import department
from .employee import employee
from .project import project
from .team import team, team_lead

__all__ = ["asset", "audit_log", "department", "employee", "project", "team", "team_lead"]
