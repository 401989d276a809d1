"""
Outbound email schemas.
"""

from pydantic import BaseModel, EmailStr, Field
from typing import Optional


class EmailSendRequest(BaseModel):
    """Plain-text email to a single recipient."""
    to: EmailStr
    subject: str = Field(..., min_length=1, max_length=255)
    message: str = Field(..., min_length=1)
    html: Optional[str] = None
    cc: Optional[EmailStr] = None
    bcc: Optional[EmailStr] = None


class EmailSendResponse(BaseModel):
    success: bool
    message: str
    message_id: Optional[str] = None
