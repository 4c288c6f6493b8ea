# File: app/schemas/asset.py
from typing import Optional
from pydantic import BaseModel, Field, validator
from datetime import date, datetime
from app.models.asset import AssetStatus


class AssetBase(BaseModel):
    asset_type: str = Field(..., min_length=1, max_length=100)
    brand: Optional[str] = None
    model: Optional[str] = None
    specifications: Optional[str] = None
    serial_number: str = Field(..., min_length=1, max_length=100)
    purchase_date: Optional[date] = None
    vendor: Optional[str] = None
    warranty_expiry: Optional[date] = None
    status: AssetStatus = AssetStatus.AVAILABLE
    quantity: int = Field(1, ge=0)


class AssetCreate(AssetBase):
    pass


class AssetUpdate(BaseModel):
    asset_type: Optional[str] = Field(None, min_length=1, max_length=100)
    brand: Optional[str] = None
    model: Optional[str] = None
    specifications: Optional[str] = None
    serial_number: Optional[str] = Field(None, min_length=1, max_length=100)
    purchase_date: Optional[date] = None
    vendor: Optional[str] = None
    warranty_expiry: Optional[date] = None
    status: Optional[AssetStatus] = None
    quantity: Optional[int] = Field(None, ge=0)

    @validator('asset_type', 'serial_number', 'status', 'quantity', pre=True)
    def reject_null(cls, v):
        # Omit the field to keep its value; these columns are NOT NULL
        if v is None:
            raise ValueError('may be omitted but not null')
        return v


class Asset(AssetBase):
    id: int
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
