class TopUpError(Exception):
    """Base for every failure the top-up endpoint reports to the caller."""

    status_code: int = 500
    message: str = "Internal Server Error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_body(self) -> dict[str, str]:
        return {"message": self.message}


class AuthenticationError(TopUpError):
    status_code = 401
    message = "Unauthorized"


class NotFoundError(TopUpError):
    status_code = 404
    message = "User not found"


class ValidationError(TopUpError):
    status_code = 400
    message = "Bad Request"


class MissingContentTypeError(ValidationError):
    message = "Content-Type must be application/json"


class EmptyBodyError(ValidationError):
    message = "Request body is required"


class MalformedJsonError(ValidationError):
    message = "Invalid JSON format in request body"


class MissingAmountError(ValidationError):
    message = "Amount is required"


class InvalidAmountError(ValidationError):
    message = "Amount must be a valid number greater than 0"


class InternalError(TopUpError):
    status_code = 500
    message = "Internal Server Error"

    def __init__(self, error: str | None = None) -> None:
        super().__init__()
        self.error = error or "Unknown error"

    def to_body(self) -> dict[str, str]:
        return {"message": self.message, "error": self.error}
