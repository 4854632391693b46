"""
Auth boundary: verify access tokens issued by the hosted identity provider.

This service never signs users up or in; it only turns a bearer token into a
CurrentUser (or None for anonymous requests).
"""
import logging
from dataclasses import dataclass

import jwt

from location_finder.config import settings
from location_finder.core.errors import InvalidToken

logger = logging.getLogger(__name__)

_ALGORITHMS = ["HS256"]


@dataclass(frozen=True)
class CurrentUser:
    id: str
    email: str | None = None


def decode_access_token(
    token: str,
    *,
    secret: str | None = None,
    audience: str | None = None,
) -> CurrentUser:
    """Validate signature, expiry and audience; return the user named by the `sub` claim."""
    secret = settings.auth_jwt_secret if secret is None else secret
    audience = settings.auth_jwt_audience if audience is None else audience
    if not secret:
        logger.warning("Bearer token received but AUTH_JWT_SECRET is not configured")
        raise InvalidToken("Authentication is not configured on this server.")
    try:
        claims = jwt.decode(
            token,
            secret,
            algorithms=_ALGORITHMS,
            audience=audience or None,
            options={"verify_aud": bool(audience)},
        )
    except jwt.PyJWTError as e:
        logger.info("Rejected access token: %s", e)
        raise InvalidToken() from e
    sub = claims.get("sub")
    if not sub:
        raise InvalidToken("Access token has no subject.")
    return CurrentUser(id=str(sub), email=claims.get("email"))


def user_from_authorization(authorization: str | None) -> CurrentUser | None:
    """
    Parse an Authorization header value.
    Missing/blank header means anonymous; anything that is not a valid bearer token is rejected.
    """
    if not authorization or not authorization.strip():
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise InvalidToken("Authorization header must be 'Bearer <token>'.")
    return decode_access_token(token.strip())
