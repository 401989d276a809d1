"""
Progress and result tracking for one bulk import run.
"""

import enum
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from infiniti_cms.imports.registry import ImportKind


class ImportState(str, enum.Enum):
    IDLE = "idle"
    PARSING = "parsing"
    SUBMITTING = "submitting"
    COMPLETE = "complete"


@dataclass
class RowResult:
    """Outcome of one data row; `row` is the spreadsheet row number (header is row 1)."""
    row: int
    label: str
    success: bool
    error: Optional[str] = None


@dataclass
class ImportReport:
    kind: ImportKind
    filename: Optional[str]
    total: int
    success_count: int
    failure_count: int
    results: List[RowResult]


@dataclass
class ImportSession:
    """
    State of a single import run, owned by the caller.

    Moves idle -> parsing -> submitting -> complete. `on_progress` is called
    after every recorded row and `on_complete` once with the final report.
    """
    kind: ImportKind
    filename: Optional[str] = None
    on_progress: Optional[Callable[["ImportSession"], Any]] = None
    on_complete: Optional[Callable[[ImportReport], Any]] = None
    state: ImportState = ImportState.IDLE
    total: int = 0
    results: List[RowResult] = field(default_factory=list)

    @property
    def completed(self) -> int:
        return len(self.results)

    @property
    def progress(self) -> int:
        """Percentage of rows processed."""
        if self.total == 0:
            return 100 if self.state == ImportState.COMPLETE else 0
        return int(self.completed * 100 / self.total)

    def start_parsing(self) -> None:
        if self.state != ImportState.IDLE:
            raise RuntimeError(f"Import already {self.state.value}")
        self.state = ImportState.PARSING

    def begin(self, total: int) -> None:
        if self.state not in (ImportState.IDLE, ImportState.PARSING):
            raise RuntimeError(f"Import already {self.state.value}")
        self.state = ImportState.SUBMITTING
        self.total = total
        self.results = []

    def record(self, result: RowResult) -> None:
        if self.state != ImportState.SUBMITTING:
            raise RuntimeError("Rows can only be recorded while submitting")
        self.results.append(result)
        if self.on_progress:
            self.on_progress(self)

    def report(self) -> ImportReport:
        success_count = sum(1 for result in self.results if result.success)
        return ImportReport(
            kind=self.kind,
            filename=self.filename,
            total=self.total,
            success_count=success_count,
            failure_count=len(self.results) - success_count,
            results=list(self.results),
        )

    def complete(self) -> ImportReport:
        if self.completed != self.total:
            raise RuntimeError(f"{self.total - self.completed} rows have not been processed")
        self.state = ImportState.COMPLETE
        return self.report()
