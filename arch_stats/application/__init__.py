"""Application layer for the ArchStats report renderer.

This layer orchestrates the adapters into report generation use cases.
"""

from .report_service import (
    MAX_PAGE_SIZE,
    ReportService,
    create_report_service,
    describe_failure,
    validate_username,
)

__all__ = [
    "MAX_PAGE_SIZE",
    "ReportService",
    "create_report_service",
    "describe_failure",
    "validate_username",
]
