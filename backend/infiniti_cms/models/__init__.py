"""
Database models.
Import all models here to ensure they're registered with Base.
"""

from infiniti_cms.models.user import User
from infiniti_cms.models.client import Client
from infiniti_cms.models.service import Service
from infiniti_cms.models.agreement import Agreement
from infiniti_cms.models.invoice import Invoice, CrInvoice
from infiniti_cms.models.notification import Notification

__all__ = [
    "User",
    "Client",
    "Service",
    "Agreement",
    "Invoice",
    "CrInvoice",
    "Notification",
]
