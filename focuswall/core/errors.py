# focuswall/core/errors.py
"""
Domain errors raised by the store. Each carries the HTTP status the
application-level exception handler answers with.
"""
from fastapi import status


class FocusWallError(Exception):
    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class NotFoundError(FocusWallError):
    """Mutation or lookup target does not exist"""
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, kind: str, item_id: str):
        super().__init__(f"{kind} not found")
        self.kind = kind
        self.item_id = item_id


class ValidationRejectedError(FocusWallError):
    status_code = status.HTTP_400_BAD_REQUEST


class CapacityExceededError(FocusWallError):
    """Today's Top 3 already holds the maximum number of tasks"""
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, capacity: int):
        super().__init__(f"Today's Top {capacity} is already full! Remove a task first.")
        self.capacity = capacity


class ActiveTasksRemainError(FocusWallError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, goal_id: str, active_count: int):
        plural = "s" if active_count != 1 else ""
        super().__init__(
            f"Cannot complete goal. There are {active_count} active task{plural} "
            f"associated with this goal."
        )
        self.goal_id = goal_id
        self.active_count = active_count


class StorageUnavailableError(FocusWallError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
