class MeetingError(Exception):
    """Base exception for meeting user-management errors"""

    def __init__(self, message: str, details: dict = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class PreconditionError(MeetingError):
    """Raised before any request is sent when caller input is unusable"""


class MissingFieldError(PreconditionError):
    """Raised when a required option is empty"""

    def __init__(self, field: str, details: dict = None) -> None:
        super().__init__(f"Missing input for argument [{field}]", details)
        self.field = field
