"""Request validation exceptions."""


class RequestValidationFailure(Exception):
    """Raised when a request body or path parameter has the wrong shape."""

    def __init__(self, error: str, message: str):
        self.error = error
        self.message = message
        super().__init__(message)
