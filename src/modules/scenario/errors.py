class ReplayedStepError(Exception):
    """Failure recorded by an earlier run and reported again on replay."""

    def __init__(self, message: str, error_type: str = "Error"):
        self.error_type = error_type
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.error_type}: {self.args[0]}"
