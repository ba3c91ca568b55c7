# SPDX-License-Identifier: MIT
"""
Classification rules for scanned resources.

Predicates look only at kind and namespace; splitting looks only at the
check IDs of a resource's misconfigurations.
"""
from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Tuple

from ..core.resources import Resource, Result
from ..core.types import RBAC_KINDS, SYSTEM_NAMESPACE, ScannerCategory, to_scanners


class Bucket(Enum):
    """Where a misconfiguration resource is routed, in priority order."""

    RBAC = "rbac"
    INFRA = "infra"
    WORKLOAD = "workload"
    DROP = "drop"


def is_rbac_resource(resource: Resource) -> bool:
    return resource.kind in RBAC_KINDS


def is_infra_resource(resource: Resource) -> bool:
    return resource.kind == "Pod" and resource.namespace == SYSTEM_NAMESPACE


def classify_resource(resource: Resource, scanners: Iterable) -> Bucket:
    """
    Pick the single bucket for a misconfiguration resource.

    Rules (first match wins):
    1. RBAC scanner enabled and resource is a role or binding => RBAC
    2. Pod in the system namespace => INFRA (split later into both halves)
    3. Misconfiguration scanner enabled => WORKLOAD
    4. Otherwise => DROP
    """
    scanners = to_scanners(scanners)

    if ScannerCategory.RBAC in scanners and is_rbac_resource(resource):
        return Bucket.RBAC
    if is_infra_resource(resource):
        return Bucket.INFRA
    if ScannerCategory.MISCONFIGURATION in scanners and not is_rbac_resource(resource):
        return Bucket.WORKLOAD
    return Bucket.DROP


def split_infra_and_workload(resource: Resource) -> Tuple[Resource, Resource]:
    """
    Split a resource's misconfigurations into (workload, infra) copies.

    KCV checks go to the infra copy, all others to the workload copy. Each
    side keeps only the results that still have misconfigurations; result
    target, class, type and summary are preserved.
    """
    workload_results: List[Result] = []
    infra_results: List[Result] = []

    for result in resource.results:
        workload_misconfigs = []
        infra_misconfigs = []

        for m in result.misconfigurations:
            if m.is_infra:
                infra_misconfigs.append(m)
                continue

            workload_misconfigs.append(m)

        if workload_misconfigs:
            workload_results.append(result.with_misconfigurations(workload_misconfigs))

        if infra_misconfigs:
            infra_results.append(result.with_misconfigurations(infra_misconfigs))

    return resource.with_results(workload_results), resource.with_results(infra_results)
