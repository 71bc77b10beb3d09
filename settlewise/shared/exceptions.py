class ValidationError(ValueError):
    """Raised when an engine input is malformed. `field` names the offending input."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")
