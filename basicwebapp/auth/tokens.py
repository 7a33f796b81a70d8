"""JWT bearer token issue and validation for tier-to-tier calls."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Callable

from jose import ExpiredSignatureError, JWTError, jwt

from basicwebapp.config import JwtConfiguration
from basicwebapp.domain import JwtValidationError


def auth_create_access_token(
    jwt_configuration: JwtConfiguration,
    subject: str,
    extra_claims: dict[str, Any] | None = None,
    now_provider: Callable[[], datetime] | None = None,
) -> str:
    """Issue a signed access token.

    Args:
        jwt_configuration: Bound JWT configuration section.
        subject: Value of the `sub` claim.
        extra_claims: Optional additional claims.
        now_provider: Optional clock override returning an aware UTC datetime.

    Returns:
        str: Encoded JWT.

    Raises:
        ValueError: Raised when subject is blank.
    """

    normalized_subject = subject.strip()
    if not normalized_subject:
        raise ValueError("subject must not be blank")

    issued_at = (now_provider or (lambda: datetime.now(timezone.utc)))()
    claims: dict[str, Any] = dict(extra_claims or {})
    claims.update(
        {
            "sub": normalized_subject,
            "iss": jwt_configuration.issuer,
            "aud": jwt_configuration.audience,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + timedelta(minutes=jwt_configuration.token_lifetime_minutes)).timestamp()),
        }
    )
    return jwt.encode(claims, jwt_configuration.secret, algorithm=jwt_configuration.algorithm)


def auth_decode_access_token(jwt_configuration: JwtConfiguration, token: str) -> dict[str, Any]:
    """Validate signature, issuer, audience and lifetime of a bearer token.

    Args:
        jwt_configuration: Bound JWT configuration section.
        token: Encoded JWT.

    Returns:
        dict[str, Any]: Validated claims.

    Raises:
        JwtValidationError: Raised when the token is blank, expired or invalid.
    """

    if not token or not token.strip():
        raise JwtValidationError("bearer token is missing")

    try:
        return jwt.decode(
            token.strip(),
            jwt_configuration.secret,
            algorithms=[jwt_configuration.algorithm],
            audience=jwt_configuration.audience,
            issuer=jwt_configuration.issuer,
        )
    except ExpiredSignatureError as error:
        raise JwtValidationError("bearer token has expired") from error
    except JWTError as error:
        raise JwtValidationError("bearer token is invalid") from error
