"""Stock bookkeeping for assets.

Sole writer of ``assets.quantity``. Every read that feeds a stock decision is
taken under an exclusive row lock held until the surrounding transaction ends,
so two requests for the last unit serialize instead of both seeing it free.
"""
import logging
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.errors import InsufficientStock, NotFound, ValidationFailed
from app.models.asset import Asset
from app.models.asset_request import AssetRequest, RequestStatus

logger = logging.getLogger(__name__)

# Requests that still hold a claim on a unit of stock
OUTSTANDING_STATUSES = (RequestStatus.PENDING, RequestStatus.APPROVED)


def lock_asset(db: Session, asset_id: int) -> Asset:
    asset = (
        db.query(Asset)
        .filter(Asset.id == asset_id)
        .with_for_update()
        .populate_existing()
        .first()
    )
    if not asset:
        raise NotFound("Asset", asset_id)
    return asset


def lock_and_read_quantity(db: Session, asset_id: int) -> int:
    return lock_asset(db, asset_id).quantity


def outstanding_request_count(db: Session, asset_id: int) -> int:
    return (
        db.query(func.count(AssetRequest.id))
        .filter(
            AssetRequest.asset_id == asset_id,
            AssetRequest.request_status.in_(OUTSTANDING_STATUSES),
        )
        .scalar()
    )


def available_quantity(db: Session, asset: Asset) -> int:
    """Units on the shelf not yet claimed by an open request.

    Call with the asset row already locked via `lock_asset`.
    """
    return asset.quantity - outstanding_request_count(db, asset.id)


def decrement(db: Session, asset_id: int, amount: int = 1) -> None:
    if amount <= 0:
        raise ValidationFailed("Decrement amount must be a positive integer")

    updated = (
        db.query(Asset)
        .filter(Asset.id == asset_id, Asset.quantity >= amount)
        .update({Asset.quantity: Asset.quantity - amount}, synchronize_session="fetch")
    )
    if updated == 0:
        logger.warning(f"Decrement of asset {asset_id} by {amount} affected no rows")
        raise InsufficientStock(asset_id)
    logger.info(f"Asset {asset_id} stock decremented by {amount}")
