"""Integrity checks over the aggregate document.

The data store does not enforce referential integrity: deleting a client
leaves projects, quotes and contracts pointing at it. This validator reports
such anomalies without changing anything.
"""

import logging
from collections import Counter
from typing import Iterable, Optional, Set

from freelancerpro.models import AppData
from freelancerpro.validators.validation_report import ValidationReport

logger = logging.getLogger(__name__)

# (collection, field, referenced collection)
WEAK_REFERENCES = (
    ("clients", "user_id", "users"),
    ("projects", "user_id", "users"),
    ("projects", "client_id", "clients"),
    ("tasks", "user_id", "users"),
    ("tasks", "project_id", "projects"),
    ("tasks", "assignee_id", "team_members"),
    ("quotes", "user_id", "users"),
    ("quotes", "client_id", "clients"),
    ("quotes", "project_id", "projects"),
    ("contracts", "user_id", "users"),
    ("contracts", "client_id", "clients"),
    ("contracts", "project_id", "projects"),
    ("team_members", "user_id", "users"),
)


class IntegrityValidator:
    """Validate ids, timestamps and weak references of an AppData document.

    Duplicate ids, duplicate user emails and timestamps running backwards are
    errors. Dangling references and inverted project dates are warnings.
    """

    def validate(self, data: AppData) -> ValidationReport:
        report = ValidationReport()

        for collection in AppData.COLLECTIONS:
            self._check_ids(collection, getattr(data, collection), report)
            self._check_timestamps(collection, getattr(data, collection), report)

        self._check_user_emails(data, report)
        self._check_references(data, report)
        self._check_project_dates(data, report)

        logger.info(f"Integrity check finished: {report.summary()}")
        return report

    @staticmethod
    def _check_ids(collection: str, items: Iterable, report: ValidationReport) -> None:
        counts = Counter(item.id for item in items)
        for entity_id, count in counts.items():
            if count > 1:
                report.add_error(
                    collection, "id", f"Id used by {count} records", entity_id, entity_id
                )

    @staticmethod
    def _check_timestamps(collection: str, items: Iterable, report: ValidationReport) -> None:
        for item in items:
            if item.updated_at < item.created_at:
                report.add_error(
                    collection,
                    "updatedAt",
                    "Updated before it was created",
                    item.updated_at.isoformat(),
                    item.id,
                )

    @staticmethod
    def _check_user_emails(data: AppData, report: ValidationReport) -> None:
        counts = Counter(user.email for user in data.users)
        for email, count in counts.items():
            if count > 1:
                report.add_error("users", "email", f"Email used by {count} users", email)

    @staticmethod
    def _ids(data: AppData, collection: str) -> Set[str]:
        return {item.id for item in getattr(data, collection)}

    def _check_references(self, data: AppData, report: ValidationReport) -> None:
        known = {collection: self._ids(data, collection) for collection in AppData.COLLECTIONS}

        for collection, field, target in WEAK_REFERENCES:
            for item in getattr(data, collection):
                target_id: Optional[str] = getattr(item, field)
                if target_id and target_id not in known[target]:
                    report.add_warning(
                        collection,
                        field,
                        f"Points to missing {target} record",
                        target_id,
                        item.id,
                    )

    @staticmethod
    def _check_project_dates(data: AppData, report: ValidationReport) -> None:
        for project in data.projects:
            if project.start_date and project.end_date and project.end_date < project.start_date:
                report.add_warning(
                    "projects",
                    "endDate",
                    "Ends before it starts",
                    project.end_date.isoformat(),
                    project.id,
                )
