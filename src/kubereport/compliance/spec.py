# SPDX-License-Identifier: MIT
"""
Compliance spec model and check-ID to scanner resolution.

A check ID names the scanner that produces it through its prefix:
- AVD-* and legacy dotted IDs (1.2.31) => misconfig
- CVE-* and DLA-* => vuln
Anything else makes the whole spec unusable.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple

from ..core.exceptions import UnrecognizedCheckIDError
from ..core.types import ScannerCategory

_MISCONFIG_PREFIXES = ("avd-",)
_VULNERABILITY_PREFIXES = ("cve-", "dla-")
_LEGACY_MISCONFIG_ID = re.compile(r"^\d+(\.\d+)+$")


@dataclass(frozen=True)
class SpecCheck:
    id: str


@dataclass(frozen=True)
class Control:
    name: str
    id: str
    description: str = ""
    checks: Tuple[SpecCheck, ...] = ()
    severity: str = ""


@dataclass(frozen=True)
class ComplianceSpec:
    """A compliance specification, read-only once loaded."""

    id: str
    title: str
    description: str = ""
    version: str = ""
    related_resources: Tuple[str, ...] = ()
    controls: Tuple[Control, ...] = ()


def scanner_for_check_id(check_id: str) -> Optional[ScannerCategory]:
    """Scanner category producing `check_id`, or None when no rule matches."""
    lowered = (check_id or "").strip().lower()

    if lowered.startswith(_MISCONFIG_PREFIXES) or _LEGACY_MISCONFIG_ID.match(lowered):
        return ScannerCategory.MISCONFIGURATION
    if lowered.startswith(_VULNERABILITY_PREFIXES):
        return ScannerCategory.VULNERABILITY
    return None


def check_ids(spec: ComplianceSpec) -> Dict[ScannerCategory, List[str]]:
    """
    Group every check ID of `spec` by the scanner that produces it.

    IDs keep their first-seen order across controls; duplicates are kept.

    Raises:
        UnrecognizedCheckIDError: on the first check ID no rule matches
    """
    grouped: Dict[ScannerCategory, List[str]] = {}

    for control in spec.controls:
        for check in control.checks:
            scanner = scanner_for_check_id(check.id)
            if scanner is None:
                raise UnrecognizedCheckIDError(check.id, control.id)
            grouped.setdefault(scanner, []).append(check.id)

    return grouped


def scanners(spec: ComplianceSpec) -> Set[ScannerCategory]:
    """Scanner categories needed to evaluate `spec`."""
    return set(check_ids(spec))
