# File: app/models/asset.py
from sqlalchemy import Column, Integer, String, Text, Date, Enum, CheckConstraint
from app.models.base import BaseModel
import enum


class AssetStatus(enum.Enum):
    AVAILABLE = "Available"
    REQUESTED = "Requested"
    ASSIGNED = "Assigned"
    REPAIR = "Repair"
    RETIRED = "Retired"


class Asset(BaseModel):
    __tablename__ = "assets"
    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_assets_quantity_non_negative"),
    )

    asset_type = Column(String(100), nullable=False, index=True)
    brand = Column(String(100))
    model = Column(String(100))
    specifications = Column(Text)
    serial_number = Column(String(100), nullable=False, unique=True, index=True)
    purchase_date = Column(Date)
    vendor = Column(String(150))
    warranty_expiry = Column(Date)
    status = Column(Enum(AssetStatus), nullable=False, default=AssetStatus.AVAILABLE)
    quantity = Column(Integer, nullable=False, default=1)
