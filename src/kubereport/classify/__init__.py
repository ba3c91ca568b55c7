# SPDX-License-Identifier: MIT
"""
Resource classification.

Routes misconfiguration resources into audience buckets:
- rbac: roles and role bindings
- infra: control-plane pods in the system namespace (KCV checks)
- workload: everything else the misconfiguration scanner covers
- drop: nothing enabled wants it
"""

from .rules import (
    Bucket,
    classify_resource,
    is_infra_resource,
    is_rbac_resource,
    split_infra_and_workload,
)

__all__ = [
    "Bucket",
    "classify_resource",
    "is_infra_resource",
    "is_rbac_resource",
    "split_infra_and_workload",
]
