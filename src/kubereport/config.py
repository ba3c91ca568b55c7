# SPDX-License-Identifier: MIT
"""
Report options loader for kubereport.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, FrozenSet, Optional, Tuple

import yaml

from .core.exceptions import KubeReportConfigError
from .core.types import ALL_COMPONENTS, ALL_SCANNERS, Component, ScannerCategory, to_components, to_scanners

logger = logging.getLogger(__name__)

TABLE_FORMAT = "table"
JSON_FORMAT = "json"

ALL_REPORT = "all"
SUMMARY_REPORT = "summary"

DEFAULT_SEVERITIES = ("UNKNOWN", "LOW", "MEDIUM", "HIGH", "CRITICAL")

CONFIG_NAMES = (".kubereport.yml", ".kubereport.yaml")


@dataclass(frozen=True)
class ReportOptions:
    """How a cluster report should be turned into views."""

    format: str = TABLE_FORMAT
    report: str = ALL_REPORT
    scanners: FrozenSet[ScannerCategory] = field(default_factory=lambda: ALL_SCANNERS)
    components: FrozenSet[Component] = field(default_factory=lambda: ALL_COMPONENTS)
    severities: Tuple[str, ...] = DEFAULT_SEVERITIES

    @classmethod
    def from_dict(cls, config: Dict[str, Any], config_path: str = None) -> "ReportOptions":
        config = _apply_option_defaults(dict(config))
        try:
            scanners = to_scanners(config["scanners"])
            components = to_components(config["components"])
        except KubeReportConfigError as e:
            raise KubeReportConfigError(str(e), config_path=config_path)

        report = config["report"]
        if report not in (ALL_REPORT, SUMMARY_REPORT):
            raise KubeReportConfigError(
                f"report must be '{ALL_REPORT}' or '{SUMMARY_REPORT}', got {report!r}",
                config_path=config_path,
                section="report",
            )

        return cls(
            format=config["format"],
            report=report,
            scanners=scanners,
            components=components,
            severities=tuple(s.upper() for s in config["severities"]),
        )


def load_report_options(config_path: Optional[str] = None, repo_root: str = ".") -> ReportOptions:
    """
    Load report options following the search order.

    Args:
        config_path: Explicit config path from --config CLI flag
        repo_root: Directory searched for .kubereport.yml/.kubereport.yaml

    Returns:
        ReportOptions with defaults applied

    Raises:
        KubeReportConfigError: If a config file is malformed or an explicit one is missing
    """
    repo_path = Path(repo_root).resolve()

    # 1. Explicit --config
    if config_path:
        config_abs_path = Path(config_path).resolve()
        if not config_abs_path.exists():
            raise KubeReportConfigError(
                f"Specified config file not found: {config_abs_path}",
                config_path=str(config_abs_path),
            )
        return _load_options_file(config_abs_path)

    # 2. .kubereport.yml or .kubereport.yaml at repo root
    for config_name in CONFIG_NAMES:
        config_file = repo_path / config_name
        if config_file.exists():
            return _load_options_file(config_file)

    # 3. Built-in defaults
    logger.debug("Using default report options")
    return ReportOptions()


def _load_options_file(config_path: Path) -> ReportOptions:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise KubeReportConfigError(
            f"Failed to parse config file: {e}",
            config_path=str(config_path),
        )

    if config is None:
        config = {}

    if not isinstance(config, dict):
        raise KubeReportConfigError("Config must be a dictionary", config_path=str(config_path))

    logger.info("Loaded config: %s", config_path)
    return ReportOptions.from_dict(config, config_path=str(config_path))


def _apply_option_defaults(config: Dict[str, Any]) -> Dict[str, Any]:
    """Apply default values to report options."""
    if "format" not in config:
        config["format"] = TABLE_FORMAT

    if "report" not in config:
        config["report"] = ALL_REPORT

    if "scanners" not in config:
        config["scanners"] = [s.value for s in ScannerCategory]

    if "components" not in config:
        config["components"] = [c.value for c in Component]

    if "severities" not in config:
        config["severities"] = list(DEFAULT_SEVERITIES)

    return config
