# SPDX-License-Identifier: MIT
"""
Compliance specs and the scanners needed to evaluate them.
"""

from .spec import ComplianceSpec, Control, SpecCheck, check_ids, scanner_for_check_id, scanners
from .loader import load_compliance_spec

__all__ = [
    "ComplianceSpec",
    "Control",
    "SpecCheck",
    "check_ids",
    "scanner_for_check_id",
    "scanners",
    "load_compliance_spec",
]
