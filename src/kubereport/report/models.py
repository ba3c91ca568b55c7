# SPDX-License-Identifier: MIT
"""
Cluster-level report structures.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from ..core.resources import Resource


@dataclass(frozen=True)
class AggregateReport:
    """Everything the scan orchestrator produced for one cluster."""

    cluster_name: str
    vulnerabilities: Tuple[Resource, ...] = ()
    misconfigurations: Tuple[Resource, ...] = ()
    schema_version: int = 0
    name: str = ""  # display title, set on sub-reports only

    def failed(self) -> bool:
        """Whether any resource carries a vulnerability or failing misconfiguration."""
        return any(r.failed() for r in self.vulnerabilities) or any(
            r.failed() for r in self.misconfigurations
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AggregateReport":
        return cls(
            cluster_name=data.get("ClusterName") or "",
            vulnerabilities=tuple(
                Resource.from_dict(r) for r in data.get("Vulnerabilities") or []
            ),
            misconfigurations=tuple(
                Resource.from_dict(r) for r in data.get("Misconfigurations") or []
            ),
            schema_version=int(data.get("SchemaVersion") or 0),
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        if self.schema_version:
            result["SchemaVersion"] = self.schema_version
        result["ClusterName"] = self.cluster_name
        if self.vulnerabilities:
            result["Vulnerabilities"] = [r.to_dict() for r in self.vulnerabilities]
        if self.misconfigurations:
            result["Misconfigurations"] = [r.to_dict() for r in self.misconfigurations]
        return result


@dataclass(frozen=True)
class ConsolidatedReport:
    """
    A cluster report with one entry per resource fullname.

    The order of `findings` is not part of the contract; use
    `sorted_findings()` when stable output is needed.
    """

    cluster_name: str
    findings: Tuple[Resource, ...] = ()
    schema_version: int = 0

    def sorted_findings(self) -> List[Resource]:
        return sorted(self.findings, key=lambda r: r.fullname)

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        if self.schema_version:
            result["SchemaVersion"] = self.schema_version
        result["ClusterName"] = self.cluster_name
        if self.findings:
            result["Findings"] = [r.to_dict() for r in self.findings]
        return result


@dataclass(frozen=True)
class NamedSubReport:
    """One audience view of a cluster report plus the columns it renders with."""

    report: AggregateReport
    columns: Tuple[str, ...]

    @property
    def title(self) -> str:
        return self.report.name
