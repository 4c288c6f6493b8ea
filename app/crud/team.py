from typing import Optional
from sqlalchemy.orm import Session

from app.core.errors import NotFound
from app.crud.base import CRUDBase
from app.models.team import Team, TeamLead, TeamLeadStatus


class CRUDTeam(CRUDBase[Team, dict, dict]):

    def get_or_raise(self, db: Session, id: int) -> Team:
        team = self.get(db, id)
        if not team:
            raise NotFound("Team", id)
        return team


class CRUDTeamLead(CRUDBase[TeamLead, dict, dict]):

    def get_active_for_team(self, db: Session, *, team_id: int) -> Optional[TeamLead]:
        return (
            db.query(TeamLead)
            .filter(TeamLead.team_id == team_id, TeamLead.status == TeamLeadStatus.ACTIVE)
            .order_by(TeamLead.id)
            .first()
        )

    def get_active_by_employee(self, db: Session, *, employee_id: int) -> Optional[TeamLead]:
        return (
            db.query(TeamLead)
            .filter(TeamLead.employee_id == employee_id, TeamLead.status == TeamLeadStatus.ACTIVE)
            .first()
        )

    def get_for_team_and_employee(
        self, db: Session, *, team_id: int, employee_id: int
    ) -> Optional[TeamLead]:
        return (
            db.query(TeamLead)
            .filter(TeamLead.team_id == team_id, TeamLead.employee_id == employee_id)
            .first()
        )


team = CRUDTeam(Team)
team_lead = CRUDTeamLead(TeamLead)
