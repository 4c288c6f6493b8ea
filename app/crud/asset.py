# File: app/crud/asset.py
import logging
from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import AssetInUse, DuplicateSerialNumber, NotFound
from app.crud.base import CRUDBase
from app.models.asset import Asset, AssetStatus
from app.schemas.asset import AssetCreate, AssetUpdate

logger = logging.getLogger(__name__)


class CRUDAsset(CRUDBase[Asset, AssetCreate, AssetUpdate]):

    def get_or_raise(self, db: Session, id: int) -> Asset:
        asset = self.get(db, id)
        if not asset:
            raise NotFound("Asset", id)
        return asset

    def get_by_serial_number(
        self, db: Session, *, serial_number: str, exclude_id: Optional[int] = None
    ) -> Optional[Asset]:
        query = db.query(Asset).filter(Asset.serial_number == serial_number)
        if exclude_id is not None:
            query = query.filter(Asset.id != exclude_id)
        return query.first()

    def get_filtered(
        self,
        db: Session,
        *,
        asset_type: Optional[str] = None,
        status: Optional[AssetStatus] = None,
    ) -> List[Asset]:
        query = db.query(Asset)
        if asset_type:
            query = query.filter(Asset.asset_type == asset_type)
        if status:
            query = query.filter(Asset.status == status)
        return query.order_by(Asset.id).all()

    def create(self, db: Session, *, obj_in: AssetCreate) -> Asset:
        if self.get_by_serial_number(db, serial_number=obj_in.serial_number):
            raise DuplicateSerialNumber(obj_in.serial_number)
        asset = super().create(db, obj_in=obj_in)
        logger.info(f"Created asset {asset.id} ({asset.asset_type}, serial {asset.serial_number})")
        return asset

    def update_asset(self, db: Session, *, asset_id: int, obj_in: AssetUpdate) -> Asset:
        asset = self.get_or_raise(db, asset_id)
        if obj_in.serial_number and self.get_by_serial_number(
            db, serial_number=obj_in.serial_number, exclude_id=asset_id
        ):
            raise DuplicateSerialNumber(obj_in.serial_number)
        return self.update(db, db_obj=asset, obj_in=obj_in)

    def remove(self, db: Session, *, id: int) -> Asset:
        asset = self.get_or_raise(db, id)
        try:
            super().remove(db, id=asset.id)
        except IntegrityError:
            logger.warning(f"Refused to delete asset {id}: still referenced")
            raise AssetInUse(id)
        return asset


asset = CRUDAsset(Asset)
