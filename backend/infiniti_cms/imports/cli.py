"""
Command line bulk import against a running Infiniti CMS API.

    python -m infiniti_cms.imports.cli clients clients.xlsx --token <jwt>
"""

import argparse
import asyncio
import logging
import os
import sys
from typing import List, Optional

from infiniti_cms.core.config import settings
from infiniti_cms.core.integrations.http.http_client import HttpClient
from infiniti_cms.core.logging import setup_logging
from infiniti_cms.imports.errors import BulkImportError
from infiniti_cms.imports.gateways import HttpGateway
from infiniti_cms.imports.registry import ImportKind, import_kinds
from infiniti_cms.imports.session import ImportReport, ImportSession
from infiniti_cms.imports.submitter import import_file

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Bulk import records from a CSV or Excel file")
    parser.add_argument("kind", choices=import_kinds(), help="Type of record in the file")
    parser.add_argument("file", help="Path to a .csv, .xlsx or .xls file")
    parser.add_argument("--base-url", default=settings.IMPORT_API_BASE_URL, help="API base URL including /api/v1")
    parser.add_argument(
        "--token",
        default=os.environ.get("INFINITI_CMS_TOKEN"),
        help="Bearer token (defaults to $INFINITI_CMS_TOKEN)",
    )
    parser.add_argument("--timeout", type=int, default=settings.IMPORT_REQUEST_TIMEOUT, help="Request timeout in seconds")
    return parser


def _print_progress(session: ImportSession) -> None:
    latest = session.results[-1]
    outcome = "ok" if latest.success else f"FAILED: {latest.error}"
    print(f"[{session.progress:3d}%] row {latest.row} {latest.label}: {outcome}")


def print_report(report: ImportReport) -> None:
    print(f"\n{report.success_count} of {report.total} {report.kind.value} imported, {report.failure_count} failed")
    for result in report.results:
        if not result.success:
            print(f"  row {result.row} ({result.label}): {result.error}")


async def run(args: argparse.Namespace) -> int:
    with open(args.file, "rb") as f:
        content = f.read()

    session = ImportSession(kind=ImportKind(args.kind), on_progress=_print_progress)
    async with HttpClient(base_url=args.base_url, token=args.token, timeout=args.timeout) as client:
        try:
            report = await import_file(session, os.path.basename(args.file), content, HttpGateway(client))
        except BulkImportError as e:
            print(f"Import aborted: {e.message}", file=sys.stderr)
            return 2

    print_report(report)
    return 1 if report.failure_count else 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(stream=sys.stderr)
    if not os.path.isfile(args.file):
        print(f"File not found: {args.file}", file=sys.stderr)
        return 2
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
