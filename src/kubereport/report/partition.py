# SPDX-License-Identifier: MIT
"""
Split a cluster report into audience-specific sub-reports.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Protocol

from ..classify.rules import Bucket, classify_resource, split_infra_and_workload
from ..core.resources import Resource
from ..core.types import Component, ScannerCategory, to_components, to_scanners
from .columns import infra_columns, rbac_columns, workload_columns
from .models import AggregateReport, NamedSubReport

logger = logging.getLogger(__name__)


class ErrorSink(Protocol):
    """Anything that accepts logging-style error entries."""

    def error(self, msg: str, *args: Any) -> None:
        ...


WORKLOAD_ASSESSMENT = "Workload Assessment"
RBAC_ASSESSMENT = "RBAC Assessment"
INFRA_ASSESSMENT = "Infra Assessment"

# Scanners whose findings can appear in the workload sub-report
_WORKLOAD_SCANNERS = frozenset(
    {
        ScannerCategory.MISCONFIGURATION,
        ScannerCategory.VULNERABILITY,
        ScannerCategory.SECRET,
    }
)


def log_scan_errors(report: AggregateReport, sink: Optional[ErrorSink] = None) -> None:
    """
    Emit one error-level entry per resource whose own scan failed.

    `sink` is any object with an `error(msg, *args)` method; the module
    logger is used when none is given.
    """
    if sink is None:
        sink = logger

    for resource in report.vulnerabilities:
        if resource.error:
            sink.error("Error during vulnerabilities scan: %s", resource.error)

    for resource in report.misconfigurations:
        if resource.error:
            sink.error("Error during misconfiguration scan: %s", resource.error)


def partition(
    report: AggregateReport,
    scanners: Iterable,
    components: Iterable,
    sink: Optional[ErrorSink] = None,
) -> List[NamedSubReport]:
    """
    Build up to three sub-reports: workload, RBAC and infra, in that order.

    Args:
        report: The cluster report to split
        scanners: Enabled scanner categories (members or names)
        components: Enabled audiences (members or names)
        sink: Optional error sink receiving per-resource scan errors

    Returns:
        Sub-reports that have something to show
    """
    scanners = to_scanners(scanners)
    components = to_components(components)

    log_scan_errors(report, sink)

    workload: List[Resource] = []
    infra: List[Resource] = []
    rbac: List[Resource] = []

    for misconfig in report.misconfigurations:
        bucket = classify_resource(misconfig, scanners)

        if bucket is Bucket.RBAC:
            rbac.append(misconfig)
        elif bucket is Bucket.INFRA:
            workload_half, infra_half = split_infra_and_workload(misconfig)

            if Component.INFRA in components:
                infra.append(infra_half)

            if Component.WORKLOAD in components:
                workload.append(workload_half)
        elif bucket is Bucket.WORKLOAD:
            if Component.WORKLOAD in components:
                workload.append(misconfig)

    reports: List[NamedSubReport] = []

    # Vulnerabilities always land in the workload view, whatever the components.
    if scanners & _WORKLOAD_SCANNERS:
        if (Component.WORKLOAD in components and workload) or report.vulnerabilities:
            reports.append(
                NamedSubReport(
                    report=AggregateReport(
                        cluster_name=report.cluster_name,
                        vulnerabilities=report.vulnerabilities,
                        misconfigurations=tuple(workload),
                        name=WORKLOAD_ASSESSMENT,
                    ),
                    columns=workload_columns(),
                )
            )

    if ScannerCategory.RBAC in scanners and rbac:
        reports.append(
            NamedSubReport(
                report=AggregateReport(
                    cluster_name=report.cluster_name,
                    misconfigurations=tuple(rbac),
                    name=RBAC_ASSESSMENT,
                ),
                columns=rbac_columns(),
            )
        )

    if (
        ScannerCategory.MISCONFIGURATION in scanners
        and Component.INFRA in components
        and infra
    ):
        reports.append(
            NamedSubReport(
                report=AggregateReport(
                    cluster_name=report.cluster_name,
                    misconfigurations=tuple(infra),
                    name=INFRA_ASSESSMENT,
                ),
                columns=infra_columns(),
            )
        )

    return reports
