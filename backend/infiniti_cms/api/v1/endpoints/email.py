"""
Outbound email endpoint.
"""

from fastapi import APIRouter, Request

from infiniti_cms.core.config import settings
from infiniti_cms.core.rate_limit import limiter
from infiniti_cms.deps.di_container import get_container
from infiniti_cms.schemas.email import EmailSendRequest, EmailSendResponse

router = APIRouter()


@router.post("/send", response_model=EmailSendResponse)
@limiter.limit(f"{settings.RATE_LIMIT_PER_MINUTE}/minute")
async def send_email(
    request: Request,
    email_request: EmailSendRequest,
) -> EmailSendResponse:
    """
    Send an email through the configured SMTP server.
    SMTP failures surface as 401 (bad credentials), 503 (unreachable) or 502.
    """
    container = get_container()
    return await container.email_service().send_email(email_request)
