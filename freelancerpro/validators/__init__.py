"""Read-only integrity validation of the stored document."""

from freelancerpro.validators.integrity_validator import IntegrityValidator
from freelancerpro.validators.validation_report import (
    ValidationIssue,
    ValidationReport,
    ValidationSeverity,
)

__all__ = [
    "IntegrityValidator",
    "ValidationIssue",
    "ValidationReport",
    "ValidationSeverity",
]
