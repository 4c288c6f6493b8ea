from datetime import date
from sqlalchemy import Column, Integer, Date, ForeignKey
from sqlalchemy.orm import relationship
from app.models.base import BaseModel


class AssetIssue(BaseModel):
    __tablename__ = "asset_issues"

    request_id = Column(Integer, ForeignKey("asset_requests.id"), nullable=False, unique=True)
    asset_id = Column(Integer, ForeignKey("assets.id"), nullable=False, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=False, index=True)
    issue_date = Column(Date, nullable=False, default=date.today)
    quantity_issued = Column(Integer, nullable=False, default=1)

    # Relationships
    request = relationship("AssetRequest", back_populates="issue")
    asset = relationship("Asset")
    employee = relationship("Employee")
