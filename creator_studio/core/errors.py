class GenerationValidationError(ValueError):
    """Raised when a generation submission is missing a required field.

    The message is returned verbatim to the caller as the `error` field.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
