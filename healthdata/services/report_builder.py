"""Step-by-step construction of reports."""

import structlog

from healthdata.domain.models import Report

logger = structlog.get_logger(__name__)


class ReportBuilder:
    """
    Fluent accumulator for ``Report`` fields.

    Unset fields default to an empty string (``export_status`` to False).
    ``build()`` resets the builder, so one instance can produce a series of
    reports without state leaking from one to the next. Nothing is validated;
    a report with an empty id can be built.
    """

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> "ReportBuilder":
        self._report_id = ""
        self._date_range = ""
        self._summary = ""
        self._export_status = False
        return self

    def set_report_id(self, report_id: str) -> "ReportBuilder":
        self._report_id = report_id
        return self

    def set_date_range(self, date_range: str) -> "ReportBuilder":
        self._date_range = date_range
        return self

    def set_summary(self, summary: str) -> "ReportBuilder":
        self._summary = summary
        return self

    def set_export_status(self, export_status: bool) -> "ReportBuilder":
        self._export_status = export_status
        return self

    def build(self) -> Report:
        report = Report(
            report_id=self._report_id,
            date_range=self._date_range,
            summary=self._summary,
            export_status=self._export_status,
        )
        self.reset()
        logger.info("report_built", report_id=report.report_id)
        return report
