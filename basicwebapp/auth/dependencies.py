"""FastAPI dependencies enforcing JWT bearer authentication."""

from typing import Any, Callable

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from basicwebapp.config import JwtConfiguration
from basicwebapp.domain import JwtValidationError

from .tokens import auth_decode_access_token

bearer_scheme = HTTPBearer(auto_error=False)


def auth_create_bearer_dependency(jwt_configuration: JwtConfiguration) -> Callable[..., dict[str, Any]]:
    """Create a dependency returning validated claims or answering 401.

    Args:
        jwt_configuration: Bound JWT configuration section.

    Returns:
        Callable[..., dict[str, Any]]: FastAPI dependency.

    Raises:
        ValueError: Raised when jwt_configuration is None.
    """

    if jwt_configuration is None:
        raise ValueError("jwt_configuration must not be None")

    def auth_require_bearer(
        credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    ) -> dict[str, Any]:
        if credentials is None or credentials.scheme.lower() != "bearer":
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Not authenticated",
                headers={"WWW-Authenticate": "Bearer"},
            )
        try:
            return auth_decode_access_token(jwt_configuration, credentials.credentials)
        except JwtValidationError as error:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=str(error),
                headers={"WWW-Authenticate": "Bearer"},
            ) from error

    return auth_require_bearer
