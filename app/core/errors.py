"""
Typed errors raised by the asset request workflow and inventory admin.

Every error carries a machine-readable ``code`` and the HTTP status the API
layer renders it with. Handlers in ``app.main`` turn them into
``{"error": message}`` responses; nothing here knows about FastAPI.
"""


class AssetTrackerError(Exception):
    """Base class for all caller-correctable errors."""

    code: str = "ASSET_TRACKER_ERROR"
    status_code: int = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationFailed(AssetTrackerError):
    """Malformed input, rejected before any write."""

    code = "VALIDATION_FAILED"


class NotFound(AssetTrackerError):
    code = "NOT_FOUND"
    status_code = 404

    def __init__(self, entity: str, entity_id=None):
        self.entity = entity
        self.entity_id = entity_id
        if entity_id is None:
            super().__init__(f"{entity} not found")
        else:
            super().__init__(f"{entity} with id {entity_id} not found")


# Eligibility


class IneligibleRequester(AssetTrackerError):
    """Requester lacks the organizational placement the request type needs."""

    code = "INELIGIBLE_REQUESTER"


class NoActiveApprover(IneligibleRequester):
    """No one currently holds a required approval level."""

    code = "NO_ACTIVE_APPROVER"


# Request lifecycle


class DuplicatePendingRequest(AssetTrackerError):
    code = "DUPLICATE_PENDING_REQUEST"

    def __init__(self, requester_id: int, asset_id: int):
        self.requester_id = requester_id
        self.asset_id = asset_id
        super().__init__("A pending request for this asset already exists")


class RequestClosed(AssetTrackerError):
    """Decision submitted for a request that already left Pending."""

    code = "REQUEST_CLOSED"

    def __init__(self, request_id: int, status: str):
        self.request_id = request_id
        self.status = status
        super().__init__(f"Request {request_id} is already {status}")


class ApprovalAlreadyRecorded(AssetTrackerError):
    code = "APPROVAL_ALREADY_RECORDED"

    def __init__(self, request_id: int, approval_level: str, status: str):
        self.request_id = request_id
        self.approval_level = approval_level
        self.status = status
        super().__init__(
            f"{approval_level} approval for request {request_id} is already {status}"
        )


class RequestNotApproved(AssetTrackerError):
    """Issuance attempted before every approval gate cleared."""

    code = "REQUEST_NOT_APPROVED"

    def __init__(self, request_id: int):
        self.request_id = request_id
        super().__init__("Request not approved")


# Stock


class OutOfStock(AssetTrackerError):
    code = "OUT_OF_STOCK"

    def __init__(self, asset_id: int):
        self.asset_id = asset_id
        super().__init__("Asset out of stock")


class InsufficientStock(AssetTrackerError):
    code = "INSUFFICIENT_STOCK"

    def __init__(self, asset_id: int):
        self.asset_id = asset_id
        super().__init__("Insufficient asset quantity")


# Inventory admin


class DuplicateSerialNumber(AssetTrackerError):
    code = "DUPLICATE_SERIAL_NUMBER"

    def __init__(self, serial_number: str):
        self.serial_number = serial_number
        super().__init__("Serial number already exists")


class AssetInUse(AssetTrackerError):
    """Delete blocked by rows that still reference the asset."""

    code = "ASSET_IN_USE"

    def __init__(self, asset_id: int):
        self.asset_id = asset_id
        super().__init__(
            "Cannot delete asset: it is referenced by requests or issuances"
        )


# Organization admin


class DuplicateRecord(AssetTrackerError):
    """Unique name or email already taken."""

    code = "DUPLICATE_RECORD"


class RecordInUse(AssetTrackerError):
    code = "RECORD_IN_USE"

    def __init__(self, entity: str, entity_id: int):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"Cannot delete {entity.lower()}: it is still referenced")
