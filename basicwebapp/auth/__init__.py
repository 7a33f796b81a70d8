"""JWT bearer authentication shared by the API and web tiers."""

from .dependencies import auth_create_bearer_dependency
from .tokens import auth_create_access_token, auth_decode_access_token

__all__ = ["auth_create_access_token", "auth_create_bearer_dependency", "auth_decode_access_token"]
