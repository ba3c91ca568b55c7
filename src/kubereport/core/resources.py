# SPDX-License-Identifier: MIT
"""Scanned resource data structures for kubereport."""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Optional, Dict, Any, Iterable, Tuple

from .types import INFRA_CHECK_PREFIX

STATUS_PASS = "PASS"
STATUS_FAIL = "FAIL"

# Result type emitted for rendered kubernetes manifests
KUBERNETES_TYPE = "kubernetes"


@dataclass(frozen=True)
class Misconfiguration:
    """A single misconfiguration check outcome detected on a resource."""

    id: str  # check ID (e.g. 'KSV012', 'KCV0001')
    title: str = ""
    severity: str = ""
    status: str = STATUS_FAIL
    details: Optional[Dict[str, Any]] = None

    @property
    def is_infra(self) -> bool:
        return self.id.startswith(INFRA_CHECK_PREFIX)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Misconfiguration":
        known = {"ID", "Title", "Severity", "Status"}
        details = {k: v for k, v in data.items() if k not in known}
        return cls(
            id=data.get("ID") or "",
            title=data.get("Title") or "",
            severity=data.get("Severity") or "",
            status=data.get("Status") or STATUS_FAIL,
            details=details or None,
        )

    def to_dict(self) -> Dict[str, Any]:
        result = dict(self.details or {})
        result["ID"] = self.id
        if self.title:
            result["Title"] = self.title
        if self.severity:
            result["Severity"] = self.severity
        result["Status"] = self.status
        return result


@dataclass(frozen=True)
class Result:
    """
    Findings for one scan target of a resource.

    Vulnerabilities and secrets are carried as opaque mappings; only
    misconfigurations are inspected when a result is split.
    """

    target: str
    result_class: str = ""
    type: str = ""
    misconf_summary: Optional[Dict[str, int]] = None
    misconfigurations: Tuple[Misconfiguration, ...] = ()
    vulnerabilities: Tuple[Dict[str, Any], ...] = ()
    secrets: Tuple[Dict[str, Any], ...] = ()

    def failed(self) -> bool:
        if self.vulnerabilities or self.secrets:
            return True
        return any(m.status == STATUS_FAIL for m in self.misconfigurations)

    def with_misconfigurations(self, misconfigurations: Iterable[Misconfiguration]) -> "Result":
        """Copy target, class, type and summary onto a new result holding only `misconfigurations`."""
        return Result(
            target=self.target,
            result_class=self.result_class,
            type=self.type,
            misconf_summary=self.misconf_summary,
            misconfigurations=tuple(misconfigurations),
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Result":
        return cls(
            target=data.get("Target") or "",
            result_class=data.get("Class") or "",
            type=data.get("Type") or "",
            misconf_summary=data.get("MisconfSummary"),
            misconfigurations=tuple(
                Misconfiguration.from_dict(m) for m in data.get("Misconfigurations") or []
            ),
            vulnerabilities=tuple(data.get("Vulnerabilities") or []),
            secrets=tuple(data.get("Secrets") or []),
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"Target": self.target}
        if self.result_class:
            result["Class"] = self.result_class
        if self.type:
            result["Type"] = self.type
        if self.misconf_summary:
            result["MisconfSummary"] = dict(self.misconf_summary)
        if self.misconfigurations:
            result["Misconfigurations"] = [m.to_dict() for m in self.misconfigurations]
        if self.vulnerabilities:
            result["Vulnerabilities"] = list(self.vulnerabilities)
        if self.secrets:
            result["Secrets"] = list(self.secrets)
        return result


@dataclass(frozen=True)
class Resource:
    """
    A scanned cluster resource and everything found on it.

    `report` is the scanner's original report payload. It is passed through
    untouched and never serialized.
    """

    namespace: str
    kind: str
    name: str
    results: Tuple[Result, ...] = ()
    error: str = ""
    report: Any = field(default=None, compare=False, repr=False)

    @property
    def fullname(self) -> str:
        return fullname(self)

    def failed(self) -> bool:
        return any(r.failed() for r in self.results)

    def with_results(self, results: Iterable[Result]) -> "Resource":
        return replace(self, results=tuple(results))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Resource":
        return cls(
            namespace=data.get("Namespace") or "",
            kind=data.get("Kind") or "",
            name=data.get("Name") or "",
            results=tuple(Result.from_dict(r) for r in data.get("Results") or []),
            error=data.get("Error") or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        if self.namespace:
            result["Namespace"] = self.namespace
        result["Kind"] = self.kind
        result["Name"] = self.name
        if self.results:
            result["Results"] = [r.to_dict() for r in self.results]
        if self.error:
            result["Error"] = self.error
        return result


def fullname(resource: Resource) -> str:
    """Merge key of a resource: lowercase 'namespace/kind/name'."""
    return f"{resource.namespace or ''}/{resource.kind or ''}/{resource.name or ''}".lower()


def create_resource(
    namespace: str,
    kind: str,
    name: str,
    results: Iterable[Result] = (),
    report: Any = None,
    error: Optional[BaseException | str] = None,
) -> Resource:
    """
    Build a Resource from a finished scan.

    Kubernetes manifest results are scanned from a temporary file, so their
    target is replaced with 'kind/name'.
    """
    fixed = []
    for result in results:
        if result.type == KUBERNETES_TYPE:
            result = replace(result, target=f"{kind}/{name}")
        fixed.append(result)

    return Resource(
        namespace=namespace or "",
        kind=kind,
        name=name,
        results=tuple(fixed),
        error=str(error) if error else "",
        report=report,
    )
