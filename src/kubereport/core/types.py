# SPDX-License-Identifier: MIT
"""
Scanner and component vocabulary shared across kubereport.
"""
from __future__ import annotations

from enum import Enum
from typing import FrozenSet, Iterable, Type, TypeVar

from .exceptions import KubeReportConfigError


class ScannerCategory(str, Enum):
    """Kinds of security scanners a finding or check can come from."""

    VULNERABILITY = "vuln"
    MISCONFIGURATION = "misconfig"
    SECRET = "secret"
    RBAC = "rbac"


class Component(str, Enum):
    """Audiences a misconfiguration finding can be routed to."""

    WORKLOAD = "workload"
    INFRA = "infra"


SYSTEM_NAMESPACE = "kube-system"
INFRA_CHECK_PREFIX = "KCV"
RBAC_KINDS = frozenset({"Role", "RoleBinding", "ClusterRole", "ClusterRoleBinding"})

ALL_SCANNERS = frozenset(ScannerCategory)
ALL_COMPONENTS = frozenset(Component)

_E = TypeVar("_E", ScannerCategory, Component)


def _coerce(enum_cls: Type[_E], values: Iterable, section: str) -> FrozenSet[_E]:
    result = set()
    for value in values or ():
        try:
            result.add(enum_cls(value))
        except ValueError:
            allowed = ", ".join(member.value for member in enum_cls)
            raise KubeReportConfigError(
                f"unknown value {value!r}, expected one of: {allowed}",
                section=section,
            )
    return frozenset(result)


def to_scanners(values: Iterable) -> FrozenSet[ScannerCategory]:
    """Normalize scanner names or members into a set of ScannerCategory."""
    return _coerce(ScannerCategory, values, "scanners")


def to_components(values: Iterable) -> FrozenSet[Component]:
    """Normalize component names or members into a set of Component."""
    return _coerce(Component, values, "components")
