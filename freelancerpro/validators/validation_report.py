"""Validation report for collecting and formatting integrity issues."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, List, Optional


class ValidationSeverity(IntEnum):
    """Severity levels for validation issues."""

    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass
class ValidationIssue:
    """A single problem found in the stored document.

    Attributes:
        severity: The severity level of the issue
        collection: Collection the offending record lives in
        field: The field name that has the issue
        message: Human-readable description of the issue
        value: The value that caused the issue
        record_id: Id of the offending record, when there is one
    """

    severity: ValidationSeverity
    collection: str
    field: str
    message: str
    value: Any = None
    record_id: Optional[str] = None

    def __str__(self) -> str:
        location = self.collection
        if self.record_id:
            location += f"[{self.record_id}]"
        return f"[{self.severity.name}] {location}.{self.field}: {self.message}"


class ValidationReport:
    """Collects validation issues and summarises them.

    Example:
        >>> report = ValidationReport()
        >>> report.add_error("tasks", "id", "Duplicate id", "task-1")
        >>> report.is_valid()
        False
        >>> report.summary()
        '1 error(s)'
    """

    def __init__(self) -> None:
        self.issues: List[ValidationIssue] = []

    def _count(self, severity: ValidationSeverity) -> int:
        return sum(1 for issue in self.issues if issue.severity == severity)

    @property
    def error_count(self) -> int:
        return self._count(ValidationSeverity.ERROR)

    @property
    def warning_count(self) -> int:
        return self._count(ValidationSeverity.WARNING)

    @property
    def info_count(self) -> int:
        return self._count(ValidationSeverity.INFO)

    def is_valid(self) -> bool:
        """True when there are no errors; warnings do not count."""
        return self.error_count == 0

    def add(
        self,
        severity: ValidationSeverity,
        collection: str,
        field: str,
        message: str,
        value: Any = None,
        record_id: Optional[str] = None,
    ) -> None:
        self.issues.append(
            ValidationIssue(
                severity=severity,
                collection=collection,
                field=field,
                message=message,
                value=value,
                record_id=record_id,
            )
        )

    def add_error(self, collection: str, field: str, message: str, value: Any = None,
                  record_id: Optional[str] = None) -> None:
        self.add(ValidationSeverity.ERROR, collection, field, message, value, record_id)

    def add_warning(self, collection: str, field: str, message: str, value: Any = None,
                    record_id: Optional[str] = None) -> None:
        self.add(ValidationSeverity.WARNING, collection, field, message, value, record_id)

    def add_info(self, collection: str, field: str, message: str, value: Any = None,
                 record_id: Optional[str] = None) -> None:
        self.add(ValidationSeverity.INFO, collection, field, message, value, record_id)

    def filter(self, min_severity: ValidationSeverity) -> List[ValidationIssue]:
        """Issues at or above ``min_severity``, most severe first."""
        selected = [issue for issue in self.issues if issue.severity >= min_severity]
        return sorted(selected, key=lambda issue: issue.severity, reverse=True)

    def counts_by_collection(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for issue in self.issues:
            counts[issue.collection] = counts.get(issue.collection, 0) + 1
        return counts

    def summary(self) -> str:
        """Counts of errors, warnings and info messages as one line."""
        parts = []
        if self.error_count:
            parts.append(f"{self.error_count} error(s)")
        if self.warning_count:
            parts.append(f"{self.warning_count} warning(s)")
        if self.info_count:
            parts.append(f"{self.info_count} info message(s)")
        return ", ".join(parts) if parts else "No issues found"

    def format(self) -> str:
        """Multi-line report grouped by severity."""
        if not self.issues:
            return "Validation successful - no issues found"

        lines = [f"Validation Report - {self.summary()}", "=" * 60]
        for severity, heading in (
            (ValidationSeverity.ERROR, "ERRORS"),
            (ValidationSeverity.WARNING, "WARNINGS"),
            (ValidationSeverity.INFO, "INFO"),
        ):
            group = [issue for issue in self.issues if issue.severity == severity]
            if group:
                lines.append(f"\n{heading}:")
                lines.extend(f"  - {issue}" for issue in group)
        return "\n".join(lines)
