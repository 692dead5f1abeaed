class StateFileError(ValueError):
    """Raised when a persisted dismissal state file cannot be read back."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path
