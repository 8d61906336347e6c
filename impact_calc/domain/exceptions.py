class ImpactCalcException(Exception):
    """
    Base exception for all impact-calculator errors.
    """


class ValidationError(ImpactCalcException, ValueError):
    """
    Raised when validation fails.
    """


class InvalidParameter(ValidationError):
    """
    Raised when an impact parameter is non-positive, non-finite or out of range.
    Propagates to the caller; there is nothing to retry.
    """


class LocationNotFound(ImpactCalcException, LookupError):
    """
    Raised when a named impact location is not in the preset catalogue.
    """


class APIException(ImpactCalcException):
    """
    Base exception for API-related errors.
    """


class RateLimitException(APIException):
    """
    Raised when API rate limit is exceeded (HTTP 429).
    Safe to retry with exponential backoff.
    """


class AuthenticationException(APIException):
    """
    Raised when API authentication fails (HTTP 401/403).
    Do NOT retry - requires user intervention.
    """


class TransientAPIException(APIException):
    """
    Raised for temporary API failures (HTTP 5xx, timeouts, network errors).
    Safe to retry with exponential backoff.
    """


class InvalidResponseException(APIException):
    """
    Raised when API returns malformed or unexpected data.
    Do NOT retry - indicates data quality issue.
    """
