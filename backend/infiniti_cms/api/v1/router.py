"""
API v1 router that aggregates all endpoint routers.
All routes require authentication except health and login.
"""

from fastapi import APIRouter, Depends
from infiniti_cms.api.v1.middleware import require_authentication, require_permission

from infiniti_cms.api.v1.endpoints import (
    health,
    auth,
    users,
    clients,
    services,
    agreements,
    invoices,
    cr_invoices,
    notifications,
    dashboard,
    reports,
    insights,
    email,
    imports,
)

api_router = APIRouter()

# Public routes (no authentication required)
api_router.include_router(health.router, tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["authentication"])

# Protected routes (authentication required for all endpoints)
# Authentication is enforced via dependency injection at the router level;
# role permissions are checked per endpoint
api_router.include_router(
    users.router,
    prefix="/users",
    tags=["users"],
    dependencies=[Depends(require_authentication)],
)
api_router.include_router(
    clients.router,
    prefix="/clients",
    tags=["clients"],
    dependencies=[Depends(require_authentication)],
)
api_router.include_router(
    services.router,
    prefix="/services",
    tags=["services"],
    dependencies=[Depends(require_authentication)],
)
api_router.include_router(
    agreements.router,
    prefix="/agreements",
    tags=["agreements"],
    dependencies=[Depends(require_authentication)],
)
api_router.include_router(
    invoices.router,
    prefix="/invoices",
    tags=["invoices"],
    dependencies=[Depends(require_authentication)],
)
api_router.include_router(
    cr_invoices.router,
    prefix="/cr-invoices",
    tags=["cr-invoices"],
    dependencies=[Depends(require_authentication)],
)
api_router.include_router(
    notifications.router,
    prefix="/notifications",
    tags=["notifications"],
    dependencies=[Depends(require_authentication)],
)
api_router.include_router(
    dashboard.router,
    prefix="/dashboard",
    tags=["dashboard"],
    dependencies=[Depends(require_authentication)],
)
api_router.include_router(
    reports.router,
    prefix="/reports",
    tags=["reports"],
    dependencies=[Depends(require_authentication), Depends(require_permission("reports:read"))],
)
api_router.include_router(
    insights.router,
    prefix="/insights",
    tags=["insights"],
    dependencies=[Depends(require_authentication), Depends(require_permission("insights:read"))],
)
api_router.include_router(
    email.router,
    prefix="/email",
    tags=["email"],
    dependencies=[Depends(require_authentication)],
)
api_router.include_router(
    imports.router,
    prefix="/imports",
    tags=["imports"],
    dependencies=[Depends(require_authentication)],
)
