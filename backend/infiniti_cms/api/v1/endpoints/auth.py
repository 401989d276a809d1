"""
Authentication API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from infiniti_cms.api.v1.middleware import require_authentication
from infiniti_cms.db.session import get_db
from infiniti_cms.controllers.auth_controller import AuthController
from infiniti_cms.models.user import User
from infiniti_cms.schemas.user import LoginRequest, LoginResponse, CurrentUserResponse

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: LoginRequest,
    db: AsyncSession = Depends(get_db),
) -> LoginResponse:
    """Issue a bearer token for an active user."""
    controller = AuthController(db)
    try:
        return await controller.login(credentials.email)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )


@router.get("/user", response_model=CurrentUserResponse)
async def get_current_user(
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> CurrentUserResponse:
    """The authenticated user with the permissions of their role."""
    controller = AuthController(db)
    return controller.current_user(current_user)
