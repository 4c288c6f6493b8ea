# File: app/api/v1/endpoints/assets.py
from typing import Any, List, Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app import crud
from app.db.database import get_db
from app.models.asset import AssetStatus
from app.schemas.asset import AssetCreate, AssetUpdate, Asset as AssetSchema
from app.schemas.asset_request import MessageResponse

router = APIRouter()


@router.post("/", response_model=AssetSchema, status_code=status.HTTP_201_CREATED)
def create_asset(
    *,
    db: Session = Depends(get_db),
    asset_in: AssetCreate
) -> Any:
    """Add an asset to inventory"""
    return crud.asset.create(db, obj_in=asset_in)


@router.get("/", response_model=List[AssetSchema])
def get_assets(
    asset_type: Optional[str] = None,
    status: Optional[AssetStatus] = None,
    db: Session = Depends(get_db),
) -> Any:
    return crud.asset.get_filtered(db, asset_type=asset_type, status=status)


@router.get("/{asset_id}", response_model=AssetSchema)
def get_asset(
    asset_id: int,
    db: Session = Depends(get_db),
) -> Any:
    return crud.asset.get_or_raise(db, asset_id)


@router.put("/{asset_id}", response_model=AssetSchema)
def update_asset(
    *,
    db: Session = Depends(get_db),
    asset_id: int,
    asset_update: AssetUpdate
) -> Any:
    """Update asset details or restock"""
    return crud.asset.update_asset(db, asset_id=asset_id, obj_in=asset_update)


@router.delete("/{asset_id}", response_model=MessageResponse)
def delete_asset(
    asset_id: int,
    db: Session = Depends(get_db),
) -> Any:
    crud.asset.remove(db, id=asset_id)
    return {"message": "Asset deleted successfully"}
