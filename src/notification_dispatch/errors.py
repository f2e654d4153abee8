"""Errors raised synchronously to callers of the dispatch API."""


class NotificationValidationError(ValueError):
    """A notification failed validation before it could be dispatched.

    Carries the offending field and the provider/channel context the
    check ran under, for diagnostics.
    """

    def __init__(self, field: str, context: str = "", message: str | None = None) -> None:
        self.field = field
        self.context = context
        detail = message or f"{field} is required"
        if context:
            detail = f"{detail} (context: {context})"
        super().__init__(detail)
