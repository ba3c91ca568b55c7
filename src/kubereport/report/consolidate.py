# SPDX-License-Identifier: MIT
"""
Merge vulnerability and misconfiguration findings per resource.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Dict

from ..core.resources import Resource
from .models import AggregateReport, ConsolidatedReport


def consolidate(report: AggregateReport) -> ConsolidatedReport:
    """
    Collapse both finding sequences into one entry per resource fullname.

    Misconfiguration resources are indexed first. A vulnerability resource
    with the same fullname replaces the indexed entry with a copy whose
    results are the misconfiguration results followed by the vulnerability
    results; identity and error stay those of the misconfiguration side.

    Inputs are never mutated. Output order is not guaranteed.
    """
    index: Dict[str, Resource] = {}

    for m in report.misconfigurations:
        index[m.fullname] = m

    for v in report.vulnerabilities:
        key = v.fullname

        existing = index.get(key)
        if existing is not None:
            index[key] = replace(existing, results=existing.results + v.results)
            continue

        index[key] = v

    return ConsolidatedReport(
        cluster_name=report.cluster_name,
        findings=tuple(index.values()),
        schema_version=report.schema_version,
    )
