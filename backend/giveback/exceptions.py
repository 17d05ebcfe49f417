"""
Domain exceptions raised by the filter, repository and content layers.

None of these decide an HTTP status. The handlers registered in
``giveback.main`` translate them at the transport boundary.
"""


class GivebackError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(GivebackError):
    """Raised when a referenced user, event or entity id does not resolve"""

    def __init__(self, entity: str, key: str, message: str | None = None):
        details = {"entity": entity, "key": key}
        msg = message or f"{entity} {key} does not exist."
        super().__init__(msg, details)


class InvalidContentError(GivebackError):
    """Raised when a description is empty or over the length limit"""

    EMPTY = "empty"
    TOO_LONG = "too_long"

    def __init__(self, message: str, reason: str):
        self.reason = reason
        super().__init__(message, {"reason": reason})


class ForbiddenError(GivebackError):
    """Raised when a user modifies or deletes something they do not own"""

    def __init__(self, message: str, user_id: str | None = None):
        details = {"user_id": user_id} if user_id else {}
        super().__init__(message, details)


class PartialFailureError(GivebackError):
    """
    Raised after a cascade delete attempted every record but some failed.

    Deletions listed in ``deleted_ids`` are already committed and are not
    rolled back.
    """

    def __init__(self, foreign_key: str, deleted_ids: list[str], failed_ids: list[str]):
        self.deleted_ids = deleted_ids
        self.failed_ids = failed_ids
        details = {
            "foreign_key": foreign_key,
            "deleted_ids": deleted_ids,
            "failed_ids": failed_ids,
        }
        msg = (
            f"Cascade delete for {foreign_key} failed on {len(failed_ids)} of "
            f"{len(deleted_ids) + len(failed_ids)} record(s)."
        )
        super().__init__(msg, details)
