"""Custom exception hierarchy.

Every error that can reach a caller carries a short ``user_message`` that is
safe to show in the UI. Diagnostic detail stays in ``str(error)`` and the logs.
"""


class AppError(Exception):
    """Base exception for application errors."""

    status_code: int = 500
    user_message: str = "An unexpected error occurred. Please try again later."

    def __init__(self, message: str, original_error: Exception = None, user_message: str = None):
        super().__init__(message)
        self.original_error = original_error
        if user_message:
            self.user_message = user_message


class ConfigurationError(AppError):
    """Raised when configuration is invalid or missing."""

    status_code = 500
    user_message = "This service is not configured correctly. Please contact support."


class APIClientError(AppError):
    """Raised when an external API call fails."""

    status_code = 503
    user_message = "Unable to connect to the data service. Please try again later."


class ProviderUnavailableError(APIClientError):
    """Raised when a provider is down or answers with an unexpected status."""

    pass


class APITimeoutError(ProviderUnavailableError):
    """Raised when an external API call times out."""

    pass


class ProviderNotFoundError(APIClientError):
    """Raised when a provider reports that the queried item does not exist."""

    status_code = 400
    user_message = "We could not find a match. Please check your details and try again."


class NoComparableDataError(AppError):
    """Raised when provider data is insufficient to determine a value."""

    status_code = 422
    user_message = "Unable to determine value. Please verify your details are correct."


class ValidationError(AppError):
    """Raised when input fails a business plausibility check."""

    status_code = 400
    user_message = "Invalid information provided. Please check all fields and try again."


class DatabaseError(AppError):
    """Raised when a database operation fails."""

    pass


class RecordNotFoundError(AppError):
    """Raised when a request or its result cannot be found."""

    status_code = 404
    user_message = "The requested report could not be found."


class DanglingAssetReferenceError(AppError):
    """Raised when a user asset points at a missing or incomplete request."""

    status_code = 404
    user_message = "This asset is no longer available."


class LocationNotPermittedError(AppError):
    """Raised when coordinates fall outside the supported counties."""

    status_code = 403
    user_message = "Property assessments are not yet available for this location."
