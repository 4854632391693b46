"""
Centralized error handling for location lookups, favorites and history.
Services raise these; the API layer maps them to HTTP responses in one place.
"""
from __future__ import annotations

from fastapi.responses import JSONResponse

# ---------------------------------------------------------------------------
# Constants: status codes and user-facing messages
# ---------------------------------------------------------------------------

STATUS_BAD_REQUEST = 400
STATUS_UNAUTHORIZED = 401
STATUS_NOT_FOUND = 404
STATUS_BAD_GATEWAY = 502  # geocoding provider down or returned garbage

MSG_EMPTY_QUERY = "Enter an address, city, or coordinates to search."
MSG_NOT_FOUND = "Location not found. Please try a different search term or check your spelling."
MSG_GEOCODING_FAILED = "Unable to search for location. Please try again."
MSG_SIGN_IN_FAVORITES = "Please sign in to save favorites."
MSG_SIGN_IN_HISTORY = "Please sign in to view your search history."
MSG_FAVORITE_NOT_FOUND = "Favorite not found."
MSG_INVALID_TOKEN = "Invalid or expired access token."


class LocationError(Exception):
    """Base for every error a user action can end in. Never fatal to the process."""

    status_code = 500
    code = "location_error"
    default_message = "Unexpected error."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class QueryValidationError(LocationError):
    status_code = STATUS_BAD_REQUEST
    code = "validation_error"
    default_message = MSG_EMPTY_QUERY


class LocationNotFound(LocationError):
    status_code = STATUS_NOT_FOUND
    code = "not_found"
    default_message = MSG_NOT_FOUND


class GeocodingFailure(LocationError):
    status_code = STATUS_BAD_GATEWAY
    code = "network_failure"
    default_message = MSG_GEOCODING_FAILED


class AuthRequired(LocationError):
    status_code = STATUS_UNAUTHORIZED
    code = "auth_required"
    default_message = MSG_SIGN_IN_FAVORITES


class InvalidToken(LocationError):
    status_code = STATUS_UNAUTHORIZED
    code = "invalid_token"
    default_message = MSG_INVALID_TOKEN


class FavoriteNotFound(LocationError):
    status_code = STATUS_NOT_FOUND
    code = "favorite_not_found"
    default_message = MSG_FAVORITE_NOT_FOUND


def location_error_response(exc: LocationError) -> JSONResponse:
    """Map a service error to a JSON response carrying the user-facing message."""
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == STATUS_UNAUTHORIZED else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "error": exc.code},
        headers=headers,
    )
