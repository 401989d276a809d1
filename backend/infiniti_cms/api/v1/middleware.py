"""
API middleware for authentication and common concerns.
Centralized authentication enforcement for all protected routes.
"""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from infiniti_cms.core.exceptions import PermissionDeniedError
from infiniti_cms.core.permissions import has_permission
from infiniti_cms.core.security import decode_access_token
from infiniti_cms.db.session import get_db
from infiniti_cms.db.repositories.user_repository import UserRepository
from infiniti_cms.models.user import User, UserStatus

security = HTTPBearer()


async def require_authentication(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> User:
    """
    Centralized authentication dependency.
    This should be used as a dependency on all protected routes.

    Usage:
        @router.get("/endpoint")
        async def my_endpoint(
            current_user: User = Depends(require_authentication)
        ):
            ...

    Returns:
        Current authenticated User

    Raises:
        HTTPException: If authentication fails
    """
    payload = decode_access_token(credentials.credentials)
    if not payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user_id_str = payload.get("sub")
    if not user_id_str:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token missing user ID",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        user_id = UUID(user_id_str)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid user ID in token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = await UserRepository(db).get(user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if user.status != UserStatus.ACTIVE:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"User account is not active. Status: {user.status.value}",
        )

    return user


def require_permission(permission: str):
    """
    Dependency factory: the current user must hold `permission`.

    Usage:
        current_user: User = Depends(require_permission("clients:write"))
    """
    async def check_permission(current_user: User = Depends(require_authentication)) -> User:
        if not has_permission(current_user.role, permission):
            raise PermissionDeniedError(permission)
        return current_user

    return check_permission
