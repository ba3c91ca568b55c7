# SPDX-License-Identifier: MIT
"""
Column sets used to render each sub-report.
"""
from __future__ import annotations

from typing import Iterable, List, Tuple

from ..core.types import Component, ScannerCategory, to_components, to_scanners

NAMESPACE_COLUMN = "Namespace"
RESOURCE_COLUMN = "Resource"
VULNERABILITIES_COLUMN = "Vulnerabilities"
MISCONFIGURATIONS_COLUMN = "Misconfigurations"
SECRETS_COLUMN = "Secrets"
RBAC_ASSESSMENT_COLUMN = "RBAC Assessment"
INFRA_ASSESSMENT_COLUMN = "Kubernetes Infra Assessment"


def workload_columns() -> Tuple[str, ...]:
    return (VULNERABILITIES_COLUMN, MISCONFIGURATIONS_COLUMN, SECRETS_COLUMN)


def rbac_columns() -> Tuple[str, ...]:
    return (RBAC_ASSESSMENT_COLUMN,)


def infra_columns() -> Tuple[str, ...]:
    return (INFRA_ASSESSMENT_COLUMN,)


def column_heading(
    scanners: Iterable, components: Iterable, available: Iterable[str]
) -> List[str]:
    """
    Header row for a sub-report table.

    Always starts with Namespace and Resource, then every column of
    `available` (in that order) the enabled scanners and components produce.
    """
    scanners = to_scanners(scanners)
    components = to_components(components)

    enabled = set()
    if ScannerCategory.VULNERABILITY in scanners:
        enabled.add(VULNERABILITIES_COLUMN)
    if ScannerCategory.MISCONFIGURATION in scanners:
        if Component.WORKLOAD in components:
            enabled.add(MISCONFIGURATIONS_COLUMN)
        if Component.INFRA in components:
            enabled.add(INFRA_ASSESSMENT_COLUMN)
    if ScannerCategory.SECRET in scanners:
        enabled.add(SECRETS_COLUMN)
    if ScannerCategory.RBAC in scanners:
        enabled.add(RBAC_ASSESSMENT_COLUMN)

    columns = [NAMESPACE_COLUMN, RESOURCE_COLUMN]
    columns.extend(col for col in available if col in enabled)
    return columns
