class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class LocationError(DomainError):
    """Raised when a position fix cannot be acquired."""


class PermissionDeniedError(LocationError):
    """The platform refused access to the location sensor."""


class PositionUnavailableError(LocationError):
    """The sensor could not resolve a position."""


class LocationTimeoutError(LocationError):
    """No fix arrived within the requested time budget."""


class UnsupportedPlatformError(LocationError):
    """No location capability is available at all."""


class GeocodeLookupError(DomainError):
    """Reverse geocoding failed. Never propagated past PositionService."""


class UnsupportedFormatError(DomainError):
    """Raised when a report is requested in an unknown export format."""


class CheckInError(DomainError):
    """Raised when the check-in/check-out backend rejects or cannot be reached."""


class SessionError(DomainError):
    """Base for attendance session state errors."""


class InvalidTransitionError(SessionError):
    """Requested transition is not legal from the current session state."""


class SessionBusyError(SessionError):
    """Another check-in/check-out attempt is still in flight."""
