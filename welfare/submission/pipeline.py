import threading
from collections.abc import Callable
from datetime import UTC, datetime

from welfare.database.exceptions import RecordStoreError
from welfare.database.models import SubmissionRecord
from welfare.database.record_store import RecordStore
from welfare.logging.logger import Log
from welfare.storage.base import BaseDocumentStore
from welfare.storage.exceptions import StorageError
from welfare.storage.paths import document_path
from welfare.submission.exceptions import (
    DocumentUploadFailedError,
    InvalidRequestError,
    RecordCreationFailedError,
    SubmissionCancelledError,
)
from welfare.submission.kinds import SubmissionKind
from welfare.submission.models import SubmissionRequest


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


class SubmissionPipeline:
    """Uploads a submission's documents in order, then creates its record.

    Pipeline: check -> upload each document -> insert one record.
    A record is only inserted once every document has a reference, so a stored
    record never lists fewer references than documents submitted. Documents
    uploaded before a failure are not removed; they stay unreferenced.
    """

    def __init__(
        self,
        kind: SubmissionKind,
        document_store: BaseDocumentStore,
        record_store: RecordStore,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._kind = kind
        self._document_store = document_store
        self._record_store = record_store
        self._clock = clock

    @property
    def kind(self) -> SubmissionKind:
        return self._kind

    def submit(
        self,
        request: SubmissionRequest,
        cancel_event: threading.Event | None = None,
    ) -> SubmissionRecord:
        """Run one submission end to end.

        Raises:
            InvalidRequestError: if the request is structurally incomplete.
            DocumentUploadFailedError: if any upload fails; later documents are skipped.
            RecordCreationFailedError: if the insert fails.
            SubmissionCancelledError: if cancel_event is set before the insert.
        """
        self._check(request)
        Log.info(
            f"Submitting {self._kind.noun} for owner {request.owner_id} "
            f"with {len(request.documents)} documents"
        )

        references = self._upload_documents(request, cancel_event)
        if cancel_event is not None and cancel_event.is_set():
            self._log_orphans(references)
            raise SubmissionCancelledError(f"{self._kind.noun} submission cancelled")

        row = self._kind.build_row(
            request,
            references,
            [document.label for document in request.documents],
            self._clock(),
        )
        try:
            created = self._record_store.insert(self._kind.table, row, embed=self._kind.embed)
        except RecordStoreError as exc:
            Log.error(f"Creating {self._kind.noun} for owner {request.owner_id} failed: {exc}")
            self._log_orphans(references)
            raise RecordCreationFailedError(self._kind.noun, exc) from exc

        record = self._kind.from_row(created)
        Log.info(f"Created {self._kind.noun} {record.id} with {len(references)} documents")
        return record

    def _check(self, request: SubmissionRequest) -> None:
        if not request.owner_id:
            raise InvalidRequestError("A submission requires an owner id")
        for index, document in enumerate(request.documents):
            if not document.label or not document.label.strip():
                raise InvalidRequestError(f"Document at position {index} has no label")
            if not isinstance(document.payload, bytes) or not document.payload:
                raise InvalidRequestError(f"Document '{document.label}' has no content")
        self._kind.check(request)

    def _upload_documents(
        self,
        request: SubmissionRequest,
        cancel_event: threading.Event | None,
    ) -> list[str]:
        references: list[str] = []
        for document in request.documents:
            if cancel_event is not None and cancel_event.is_set():
                self._log_orphans(references)
                raise SubmissionCancelledError(f"{self._kind.noun} submission cancelled")
            path = document_path(request.owner_id, document.original_name, self._clock())
            try:
                reference = self._document_store.upload(
                    self._kind.bucket,
                    path,
                    document.payload,
                    content_type=document.content_type,
                )
            except StorageError as exc:
                Log.error(f"Upload of '{document.label}' to {self._kind.bucket} failed: {exc}")
                self._log_orphans(references)
                raise DocumentUploadFailedError(document.label, exc) from exc
            Log.debug(f"Uploaded '{document.label}' as {reference}")
            references.append(reference)
        return references

    def _log_orphans(self, references: list[str]) -> None:
        for reference in references:
            Log.warning(
                f"Orphaned upload left in {self._kind.bucket}: {reference}",
                bucket=self._kind.bucket,
                reference=reference,
            )
