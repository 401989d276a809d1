"""
Base service class.
Services contain business logic and coordinate repositories.
"""

import math
from abc import ABC
from contextlib import asynccontextmanager
from typing import Dict, Iterable, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession


class BaseService(ABC):
    """Base service class for all services."""

    session: AsyncSession

    @asynccontextmanager
    async def unique_write(self, conflict_message: str):
        """
        Run writes and commit them; a unique-constraint violation rolls back
        and surfaces as ValueError(conflict_message).
        """
        try:
            yield
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            raise ValueError(conflict_message) from exc


def index_by_id(items: Iterable) -> Dict[UUID, object]:
    return {item.id: item for item in items}


def round_half_up(value) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(float(value) + 0.5))
