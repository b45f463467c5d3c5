from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any

from welfare.database.models import PENDING, Application, Grievance, SubmissionRecord
from welfare.submission.exceptions import InvalidRequestError
from welfare.submission.models import SubmissionRequest


def build_snapshot(
    fields: dict[str, Any],
    references: list[str],
    labels: list[str],
    submitted_at: datetime,
) -> dict[str, Any]:
    """Freeze the submitted fields together with the resolved document references."""
    return {
        **fields,
        "documents": list(references),
        "document_labels": list(labels),
        "submitted_at": submitted_at.isoformat(),
    }


class SubmissionKind(ABC):
    """What differs between submission flows: target table, bucket and row shape."""

    noun: str
    table: str
    embed: str | None = "scheme"

    def __init__(self, bucket: str) -> None:
        self.bucket = bucket

    @abstractmethod
    def check(self, request: SubmissionRequest) -> None:
        """Reject requests missing what the row needs.

        Raises:
            InvalidRequestError: if the request cannot be persisted.
        """

    @abstractmethod
    def build_row(
        self,
        request: SubmissionRequest,
        references: list[str],
        labels: list[str],
        submitted_at: datetime,
    ) -> dict[str, Any]:
        """Assemble the row inserted for a request whose documents are all stored."""

    @abstractmethod
    def from_row(self, row: dict[str, Any]) -> SubmissionRecord:
        """Map a stored row to its record type."""


class ApplicationKind(SubmissionKind):
    noun = "application"
    table = "applications"

    def check(self, request: SubmissionRequest) -> None:
        if not request.target_id:
            raise InvalidRequestError("An application requires a scheme id")

    def build_row(
        self,
        request: SubmissionRequest,
        references: list[str],
        labels: list[str],
        submitted_at: datetime,
    ) -> dict[str, Any]:
        return {
            "user_id": request.owner_id,
            "scheme_id": request.target_id,
            "status": PENDING,
            "document_ids": list(references),
            "submitted_data": build_snapshot(request.fields, references, labels, submitted_at),
        }

    def from_row(self, row: dict[str, Any]) -> Application:
        return Application.from_row(row)


class GrievanceKind(SubmissionKind):
    noun = "grievance"
    table = "grievances"

    REQUIRED_FIELDS = ("issue_type", "description")

    def check(self, request: SubmissionRequest) -> None:
        for name in self.REQUIRED_FIELDS:
            value = request.fields.get(name)
            if not isinstance(value, str) or not value.strip():
                raise InvalidRequestError(f"A grievance requires a non-empty '{name}'")

    def build_row(
        self,
        request: SubmissionRequest,
        references: list[str],
        labels: list[str],
        submitted_at: datetime,
    ) -> dict[str, Any]:
        return {
            "user_id": request.owner_id,
            "scheme_id": request.target_id or None,
            "application_id": request.fields.get("application_id") or None,
            "issue_type": request.fields["issue_type"],
            "description": request.fields["description"],
            "status": PENDING,
            "document_ids": list(references),
            "submitted_data": build_snapshot(request.fields, references, labels, submitted_at),
        }

    def from_row(self, row: dict[str, Any]) -> Grievance:
        return Grievance.from_row(row)
