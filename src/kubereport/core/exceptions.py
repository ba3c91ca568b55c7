"""kubereport custom exceptions."""

from __future__ import annotations


class KubeReportError(Exception):
    """Base class for all kubereport errors."""


class KubeReportConfigError(KubeReportError):
    """Raised when configuration is missing or invalid."""

    def __init__(self, message: str, config_path: str = None, section: str = None):
        self.config_path = config_path
        self.section = section
        super().__init__(message)

    def __str__(self):
        msg = super().__str__()
        if self.config_path:
            msg += f" (config: {self.config_path})"
        if self.section:
            msg += f" (section: {self.section})"
        return msg


class UnknownFormatError(KubeReportConfigError):
    """Raised when an output format is neither 'table' nor 'json'."""

    def __init__(self, output_format: str):
        self.output_format = output_format
        super().__init__(
            f'unknown format "{output_format}". Use "json" or "table"',
            section="format",
        )


class ComplianceSpecError(KubeReportError):
    """Raised when a compliance spec document cannot be loaded."""

    def __init__(self, message: str, spec_path: str = None):
        self.spec_path = spec_path
        super().__init__(message)

    def __str__(self):
        msg = super().__str__()
        if self.spec_path:
            msg += f" (spec: {self.spec_path})"
        return msg


class UnrecognizedCheckIDError(KubeReportError):
    """Raised when a compliance check ID matches no known scanner category."""

    def __init__(self, check_id: str, control_id: str = None):
        self.check_id = check_id
        self.control_id = control_id
        message = f"unrecognized check id {check_id!r}"
        if control_id:
            message += f" in control {control_id!r}"
        super().__init__(message)
