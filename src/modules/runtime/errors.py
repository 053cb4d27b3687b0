class PendingStepError(Exception):
    """Raised by a step definition that is not implemented yet."""

    def __init__(self, message: str = "TODO"):
        super().__init__(message)
