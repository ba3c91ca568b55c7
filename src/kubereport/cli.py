# SPDX-License-Identifier: MIT
"""
kubereport - Command Line Interface

This CLI provides:
- kubereport version
- kubereport report <report.json> --format {table,json} --report {all,summary}
  --scanners vuln,misconfig,secret,rbac --components workload,infra
- kubereport compliance <spec.yaml>

Views are printed as JSON; drawing tables is left to external renderers.
"""

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

from . import __version__
from .core.exceptions import KubeReportError


def _csv(value):
    return [v.strip() for v in value.split(",") if v.strip()]


def main(argv=None):
    argv = argv if argv is not None else sys.argv[1:]
    p = argparse.ArgumentParser(prog="kubereport", description="Kubernetes scan report consolidation")
    p.add_argument("-v", "--version", action="store_true", help="print version and exit")
    p.add_argument("--debug", action="store_true", help="enable debug logging")

    sub = p.add_subparsers(dest="cmd")
    sub.add_parser("version", help="print version")

    rp = sub.add_parser("report", help="consolidate or partition a cluster report")
    rp.add_argument("path", help="path to the aggregate report JSON")
    rp.add_argument("--config", help="path to a report options YAML file")
    rp.add_argument(
        "--format",
        choices=["table", "json"],
        help="output format (default: table)"
    )
    rp.add_argument(
        "--report",
        choices=["all", "summary"],
        help="report mode (default: all)"
    )
    rp.add_argument("--scanners", type=_csv, help="comma-separated scanners")
    rp.add_argument("--components", type=_csv, help="comma-separated components")

    cp = sub.add_parser("compliance", help="list scanners required by a compliance spec")
    cp.add_argument("spec", help="path to the compliance spec YAML")

    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    if args.version or args.cmd == "version":
        print(__version__)
        return 0

    if args.cmd == "report":
        return handle_report_command(args)

    if args.cmd == "compliance":
        return handle_compliance_command(args)

    p.print_help()
    return 0


def handle_report_command(args):
    """Handle the report subcommand."""
    from .config import load_report_options
    from .core.types import to_components, to_scanners
    from .report.models import AggregateReport
    from .report.writer import build_views

    try:
        options = load_report_options(args.config, repo_root=str(Path(args.path).parent))
        overrides = {}
        if args.format:
            overrides["format"] = args.format
        if args.report:
            overrides["report"] = args.report
        if args.scanners is not None:
            overrides["scanners"] = to_scanners(args.scanners)
        if args.components is not None:
            overrides["components"] = to_components(args.components)
        options = replace(options, **overrides)
    except KubeReportError as e:
        print(f"Error loading options: {e}", file=sys.stderr)
        return 1

    try:
        data = json.loads(Path(args.path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        print(f"Error reading report: {e}", file=sys.stderr)
        return 1

    if not isinstance(data, dict):
        print(
            f"Error reading report: expected a JSON object, got {type(data).__name__}",
            file=sys.stderr,
        )
        return 1

    report = AggregateReport.from_dict(data)

    try:
        views = build_views(report, options)
    except KubeReportError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if isinstance(views, list):
        output = [
            {
                "title": view.title,
                "columns": list(view.heading),
                "severities": list(view.severities),
                "summary": view.summary,
                "report": view.sub_report.report.to_dict(),
            }
            for view in views
        ]
    else:
        output = views.to_dict()

    print(json.dumps(output, indent=2, default=str))
    return 0


def handle_compliance_command(args):
    """Handle the compliance subcommand."""
    from .compliance import check_ids, load_compliance_spec

    try:
        spec = load_compliance_spec(args.spec)
        grouped = check_ids(spec)
    except (FileNotFoundError, KubeReportError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    output = {
        "spec": spec.id,
        "scanners": sorted(s.value for s in grouped),
        "checks": {s.value: ids for s, ids in grouped.items()},
    }
    print(json.dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
