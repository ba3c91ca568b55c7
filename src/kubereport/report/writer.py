# SPDX-License-Identifier: MIT
"""
Pick the report views a renderer should draw for the requested format.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from ..config import (
    ALL_REPORT,
    DEFAULT_SEVERITIES,
    JSON_FORMAT,
    SUMMARY_REPORT,
    TABLE_FORMAT,
    ReportOptions,
)
from ..core.exceptions import UnknownFormatError
from .columns import column_heading
from .consolidate import consolidate
from .models import AggregateReport, ConsolidatedReport, NamedSubReport
from .partition import ErrorSink, log_scan_errors, partition


@dataclass(frozen=True)
class TableView:
    """
    A sub-report with the header row it should be rendered with.

    Severity filtering and summary mode are display concerns; they travel
    with the view and the sub-report itself stays unfiltered.
    """

    sub_report: NamedSubReport
    heading: Tuple[str, ...]
    severities: Tuple[str, ...] = DEFAULT_SEVERITIES
    summary: bool = False

    @property
    def title(self) -> str:
        return self.sub_report.title


def build_views(
    report: AggregateReport,
    options: ReportOptions,
    sink: Optional[ErrorSink] = None,
) -> Union[ConsolidatedReport, AggregateReport, List[TableView]]:
    """
    Turn a cluster report into what the renderer for `options.format` needs.

    - json + all: the consolidated report
    - json + summary: the aggregate report as-is
    - table: one TableView per partitioned sub-report, carrying the
      severities to show and whether to render in summary mode

    Raises:
        UnknownFormatError: for any other format
    """
    if options.format == JSON_FORMAT:
        log_scan_errors(report, sink)
        if options.report == ALL_REPORT:
            return consolidate(report)
        return report

    if options.format == TABLE_FORMAT:
        sub_reports = partition(report, options.scanners, options.components, sink)
        return [
            TableView(
                sub_report=sub,
                heading=tuple(column_heading(options.scanners, options.components, sub.columns)),
                severities=tuple(options.severities),
                summary=options.report == SUMMARY_REPORT,
            )
            for sub in sub_reports
        ]

    raise UnknownFormatError(options.format)
