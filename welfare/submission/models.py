from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class PendingDocument:
    """A labelled document waiting to be uploaded."""

    label: str
    payload: bytes
    filename: str | None = None
    content_type: str = "application/octet-stream"

    @property
    def original_name(self) -> str:
        return self.filename or self.label


@dataclass(frozen=True)
class SubmissionRequest:
    """One user-initiated submit action. Consumed once by the pipeline."""

    owner_id: str
    target_id: str | None = None
    fields: dict[str, Any] = field(default_factory=dict)
    documents: list[PendingDocument] = field(default_factory=list)
