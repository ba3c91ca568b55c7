# SPDX-License-Identifier: MIT
"""
Compliance spec loading from YAML.
"""
from __future__ import annotations

import yaml
from pathlib import Path
from typing import Any, Dict

from ..core.exceptions import ComplianceSpecError
from .spec import ComplianceSpec, Control, SpecCheck


def load_compliance_spec(spec_path: str) -> ComplianceSpec:
    """
    Load a compliance spec from a YAML file.

    The document must have a top-level `spec` mapping with a `controls` list.

    Raises:
        FileNotFoundError: If the spec file doesn't exist
        ComplianceSpecError: If the file is not a valid compliance spec
    """
    path = Path(spec_path)
    if not path.exists():
        raise FileNotFoundError(f"Compliance spec file not found: {spec_path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            document = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ComplianceSpecError(f"Invalid YAML: {e}", spec_path=str(path))

    if not isinstance(document, dict):
        raise ComplianceSpecError("Compliance spec must be a dictionary", spec_path=str(path))

    return parse_compliance_spec(document, spec_path=str(path))


def parse_compliance_spec(document: Dict[str, Any], spec_path: str = None) -> ComplianceSpec:
    """Build a ComplianceSpec from an already parsed document."""
    spec = document.get("spec")
    if not isinstance(spec, dict):
        raise ComplianceSpecError("Missing required section: spec", spec_path=spec_path)

    controls = spec.get("controls")
    if not isinstance(controls, list):
        raise ComplianceSpecError("spec.controls must be a list", spec_path=spec_path)

    return ComplianceSpec(
        id=str(spec.get("id", "")),
        title=spec.get("title", ""),
        description=spec.get("description", ""),
        version=str(spec.get("version", "")),
        related_resources=tuple(spec.get("relatedResources") or []),
        controls=tuple(_parse_control(c, spec_path) for c in controls),
    )


def _parse_control(control: Dict[str, Any], spec_path: str = None) -> Control:
    if not isinstance(control, dict):
        raise ComplianceSpecError("Each control must be a dictionary", spec_path=spec_path)

    checks = []
    for check in control.get("checks") or []:
        if not isinstance(check, dict) or "id" not in check:
            raise ComplianceSpecError(
                f"Control {control.get('id')!r} has a check without an id",
                spec_path=spec_path,
            )
        checks.append(SpecCheck(id=str(check["id"])))

    return Control(
        name=control.get("name", ""),
        id=str(control.get("id", "")),
        description=control.get("description", ""),
        checks=tuple(checks),
        severity=control.get("severity", ""),
    )
