# SPDX-License-Identifier: MIT
"""
Tests for output format dispatch.
"""
import logging

import pytest

from kubereport.config import ReportOptions
from kubereport.core.exceptions import UnknownFormatError
from kubereport.core.resources import Misconfiguration, Resource, Result
from kubereport.report import AggregateReport, ConsolidatedReport, build_views


def _report():
    misconfig = Resource(
        "default",
        "Deployment",
        "web",
        results=(Result(target="Deployment/web", misconfigurations=(Misconfiguration(id="KSV012"),)),),
        error="policy timeout",
    )
    vuln = Resource(
        "default",
        "Deployment",
        "web",
        results=(Result(target="nginx:1.25", vulnerabilities=({"VulnerabilityID": "CVE-2023-1"},)),),
    )
    return AggregateReport(cluster_name="prod", vulnerabilities=(vuln,), misconfigurations=(misconfig,))


class TestBuildViews:
    """Test format dispatch."""

    def test_json_all_is_consolidated(self, caplog):
        with caplog.at_level(logging.ERROR):
            views = build_views(_report(), ReportOptions(format="json", report="all"))

        assert isinstance(views, ConsolidatedReport)
        assert len(views.findings) == 1
        assert "Error during misconfiguration scan: policy timeout" in caplog.text

    def test_json_summary_is_aggregate(self):
        report = _report()

        assert build_views(report, ReportOptions(format="json", report="summary")) is report

    def test_table_views_have_headings(self):
        views = build_views(
            _report(),
            ReportOptions(format="table", scanners=frozenset({"vuln", "misconfig"})),
        )

        assert [v.title for v in views] == ["Workload Assessment"]
        assert views[0].heading == ("Namespace", "Resource", "Vulnerabilities", "Misconfigurations")

    def test_unknown_format(self):
        with pytest.raises(UnknownFormatError) as exc_info:
            build_views(_report(), ReportOptions(format="sarif"))

        assert exc_info.value.output_format == "sarif"
        assert 'unknown format "sarif"' in str(exc_info.value)

    def test_table_views_carry_display_options(self):
        views = build_views(
            _report(),
            ReportOptions(format="table", report="summary", severities=("CRITICAL",)),
        )

        assert [v.severities for v in views] == [("CRITICAL",)]
        assert views[0].summary is True

    def test_table_views_default_display_options(self):
        views = build_views(_report(), ReportOptions(format="table"))

        assert views[0].severities == ("UNKNOWN", "LOW", "MEDIUM", "HIGH", "CRITICAL")
        assert views[0].summary is False
