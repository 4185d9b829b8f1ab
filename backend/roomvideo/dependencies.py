"""FastAPI dependencies for authentication and authorization."""
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from typing import Optional
from roomvideo.config import Settings
from roomvideo.core.exceptions import AuthenticationError, AuthorizationError
from roomvideo.models.enums import Role, ELEVATED_ROLES
from roomvideo.schemas.auth import TokenData
from roomvideo.services.auth import decode_access_token

security = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was built with."""
    return request.app.state.settings


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    settings: Settings = Depends(get_app_settings),
) -> TokenData:
    """Get the caller's identity from the bearer token.

    Verification is stateless: the token alone is trusted until it expires.
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Not authenticated")

    current_user = decode_access_token(credentials.credentials, settings)
    request.state.user = current_user
    return current_user


async def get_optional_user(
    request: Request,
    settings: Settings = Depends(get_app_settings),
) -> Optional[TokenData]:
    """Get the caller from header or query parameter (for video elements)."""
    auth_header = request.headers.get("Authorization")
    token = None

    if auth_header and auth_header.startswith("Bearer "):
        token = auth_header.split(" ", 1)[1]
    else:
        # Video elements cannot send headers
        token = request.query_params.get("token")

    if not token:
        return None

    current_user = decode_access_token(token, settings)
    request.state.user = current_user
    return current_user


def require_roles(*roles: Role):
    """Dependency factory that only lets the listed roles through."""
    async def role_checker(current_user: TokenData = Depends(get_current_user)) -> TokenData:
        if current_user.role not in roles:
            raise AuthorizationError(
                f"Insufficient permissions. Required role: {', '.join(r.value for r in roles)}"
            )
        return current_user

    return role_checker


require_admin = require_roles(*ELEVATED_ROLES)
