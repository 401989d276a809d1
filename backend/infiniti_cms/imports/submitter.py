"""
Sequential bulk import: validate, map and create one row at a time.
"""

import inspect
import logging
from typing import List, Optional

from infiniti_cms.imports.errors import BulkImportError
from infiniti_cms.imports.gateways import EntityGateway
from infiniti_cms.imports.mappers import ReferenceData
from infiniti_cms.imports.parser import Row, parse_file
from infiniti_cms.imports.registry import get_handler
from infiniti_cms.imports.session import ImportReport, ImportSession, RowResult

logger = logging.getLogger(__name__)


async def run_import(
    session: ImportSession,
    rows: List[Row],
    gateway: EntityGateway,
    refs: Optional[ReferenceData] = None,
) -> ImportReport:
    """
    Submit rows in file order, awaiting each create before the next.

    A failing row is recorded and the loop moves on; nothing is retried or
    rolled back. Reference data is loaded once, before the first row.
    """
    handler = get_handler(session.kind)
    session.begin(len(rows))

    logger.info(
        f"Importing {len(rows)} {handler.kind.value}",
        extra={"kind": handler.kind.value, "filename": session.filename, "rows": len(rows)},
    )

    if refs is None and handler.needs_references and rows:
        refs = await gateway.fetch_references()
    refs = refs or ReferenceData()

    for index, row in enumerate(rows):
        row_number = index + 2
        label = handler.label(row)

        error = handler.validate(row, rows, index)
        if error is None:
            try:
                payload = handler.map(row, refs)
                await gateway.create(handler.kind, payload)
            except BulkImportError as e:
                error = e.message

        if error:
            logger.info(
                f"Row {row_number} failed: {error}",
                extra={"kind": handler.kind.value, "row": row_number},
            )
        session.record(RowResult(row=row_number, label=label, success=error is None, error=error))

    report = session.complete()
    logger.info(
        f"Import of {handler.kind.value} finished: {report.success_count} created, {report.failure_count} failed",
        extra={
            "kind": handler.kind.value,
            "success_count": report.success_count,
            "failure_count": report.failure_count,
        },
    )

    if session.on_complete:
        outcome = session.on_complete(report)
        if inspect.isawaitable(outcome):
            await outcome
    return report


async def import_file(
    session: ImportSession,
    filename: str,
    content: bytes,
    gateway: EntityGateway,
) -> ImportReport:
    """Parse a file and import its rows; parse errors abort before any create."""
    session.filename = filename
    session.start_parsing()
    rows = parse_file(filename, content)
    return await run_import(session, rows, gateway)
