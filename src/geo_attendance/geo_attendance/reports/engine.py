from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Sequence

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import now_local
from ..core.enums import ReportFormat
from .model import ReportArtifact, ReportOptions, ReportSummary
from .renderers.base import ReportRenderer
from .renderers.csv_renderer import CsvReportRenderer
from .renderers.text_renderer import TextReportRenderer
from .summary import summarize

logger = logging.getLogger(__name__)

_EXTENSIONS = {
    ReportFormat.CSV: "csv",
    ReportFormat.EXCEL: "xlsx",
    ReportFormat.PDF: "pdf",
}


@dataclass(frozen=True)
class _RenderPlan:
    renderer: ReportRenderer
    media_type: str


class AttendanceReportEngine:
    """Summarize attendance records and render them to an export artifact.

    Excel exports carry CSV bytes and PDF exports carry the plain-text report;
    no genuine spreadsheet or PDF encoding is produced. Output is a pure
    function of (records, options), so repeated calls are byte-identical as
    long as ``options.generated_at`` is set or the clock is fixed.
    """

    def __init__(self, *, clock: Callable[[], datetime] = now_local):
        self._csv = CsvReportRenderer()
        self._text = TextReportRenderer(clock=clock)
        self._plans = {
            ReportFormat.CSV: _RenderPlan(self._csv, "text/csv"),
            ReportFormat.EXCEL: _RenderPlan(self._csv, "text/csv"),
            ReportFormat.PDF: _RenderPlan(self._text, "text/plain"),
            ReportFormat.TEXT: _RenderPlan(self._text, "text/plain"),
        }

    def summarize(self, records: Sequence[AttendanceRecord]) -> ReportSummary:
        return summarize(records)

    def render_csv(self, records: Sequence[AttendanceRecord], options: ReportOptions) -> str:
        return self._csv.render(records, options)

    def render_text(self, records: Sequence[AttendanceRecord], options: ReportOptions) -> str:
        return self._text.render(records, options)

    def render(self, records: Sequence[AttendanceRecord], options: ReportOptions) -> ReportArtifact:
        fmt = ReportFormat.parse(options.format)
        plan = self._plans[fmt]
        content = plan.renderer.render(records, options).encode("utf-8")

        logger.info("Rendered %s attendance report: %d records, %d bytes", fmt.value, len(records), len(content))
        return ReportArtifact(content=content, filename=self.suggested_filename(options), media_type=plan.media_type)

    @staticmethod
    def suggested_filename(options: ReportOptions) -> str:
        ext = _EXTENSIONS.get(options.format, "txt")
        dr = options.date_range
        return f"attendance_report_{dr.start.isoformat()}_{dr.end.isoformat()}.{ext}"
