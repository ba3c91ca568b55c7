# SPDX-License-Identifier: MIT
"""
Cluster report consolidation and partitioning.

Provides:
- consolidate: one deduplicated finding list keyed by resource fullname
- partition: workload / RBAC / infra sub-reports for human-readable views
- build_views: dispatch on the requested output format
"""

from .models import AggregateReport, ConsolidatedReport, NamedSubReport
from .consolidate import consolidate
from .partition import ErrorSink, partition, log_scan_errors
from .writer import TableView, build_views

__all__ = [
    "AggregateReport",
    "ConsolidatedReport",
    "ErrorSink",
    "NamedSubReport",
    "TableView",
    "build_views",
    "consolidate",
    "partition",
    "log_scan_errors",
]
