import threading
from typing import Any

from welfare.auth.base import BaseIdentityProvider
from welfare.config.settings import Settings
from welfare.database.models import Application, Grievance
from welfare.database.record_store import RecordStore
from welfare.logging.logger import Log
from welfare.storage.base import BaseDocumentStore
from welfare.storage.factory import DocumentStoreFactory
from welfare.stores.auth_store import AuthStore
from welfare.stores.scheme_store import SchemeStore
from welfare.stores.submission_store import SubmissionStore
from welfare.submission.kinds import ApplicationKind, GrievanceKind
from welfare.submission.models import PendingDocument, SubmissionRequest
from welfare.submission.pipeline import SubmissionPipeline


class Session:
    """Owns every per-user cache and the user-scoped document store from sign-in until sign-out."""

    def __init__(
        self,
        identity_provider: BaseIdentityProvider,
        auth: AuthStore,
        applications: SubmissionStore,
        grievances: SubmissionStore,
        schemes: SchemeStore,
        document_store: BaseDocumentStore | None = None,
    ) -> None:
        self._identity_provider = identity_provider
        self.auth = auth
        self.applications = applications
        self.grievances = grievances
        self.schemes = schemes
        self._document_store = document_store

    @property
    def owner_id(self) -> str:
        if self.auth.user is None:
            raise RuntimeError("No signed-in user. Call start() after signing in.")
        return self.auth.user.id

    def start(self) -> bool:
        """Load the signed-in user, then their applications and grievances."""
        if not self.auth.initialize() or self.auth.user is None:
            return False
        owner_id = self.auth.user.id
        applications_loaded = self.applications.fetch(owner_id)
        grievances_loaded = self.grievances.fetch(owner_id)
        Log.info(f"Session started for user {owner_id}")
        return applications_loaded and grievances_loaded

    def submit_application(
        self,
        scheme_id: str,
        fields: dict[str, Any],
        documents: list[PendingDocument],
        cancel_event: threading.Event | None = None,
    ) -> Application | None:
        request = SubmissionRequest(
            owner_id=self.owner_id,
            target_id=scheme_id,
            fields=fields,
            documents=documents,
        )
        return self.applications.submit(request, cancel_event)

    def submit_grievance(
        self,
        fields: dict[str, Any],
        documents: list[PendingDocument] | None = None,
        scheme_id: str | None = None,
        cancel_event: threading.Event | None = None,
    ) -> Grievance | None:
        request = SubmissionRequest(
            owner_id=self.owner_id,
            target_id=scheme_id,
            fields=fields,
            documents=documents or [],
        )
        return self.grievances.submit(request, cancel_event)

    def sign_out(self) -> None:
        """End the identity session, drop every cache and close the document store, even if sign-out fails."""
        try:
            self._identity_provider.sign_out()
        finally:
            self.auth.clear()
            self.applications.clear()
            self.grievances.clear()
            self.schemes.clear()
            if self._document_store is not None:
                self._document_store.close()
            Log.info("Session closed")


def build_session(
    settings: Settings,
    identity_provider: BaseIdentityProvider,
    access_token: str | None = None,
) -> Session:
    """Build a Session with all required adapters. The connection pool must be open."""
    record_store = RecordStore()
    document_store = DocumentStoreFactory.create(settings, access_token=access_token)
    application_pipeline = SubmissionPipeline(
        kind=ApplicationKind(bucket=settings.application_documents_bucket),
        document_store=document_store,
        record_store=record_store,
    )
    grievance_pipeline = SubmissionPipeline(
        kind=GrievanceKind(bucket=settings.grievance_documents_bucket),
        document_store=document_store,
        record_store=record_store,
    )
    return Session(
        identity_provider=identity_provider,
        auth=AuthStore(identity_provider, record_store),
        applications=SubmissionStore(application_pipeline, record_store, settings.store_max_records),
        grievances=SubmissionStore(grievance_pipeline, record_store, settings.store_max_records),
        schemes=SchemeStore(record_store),
        document_store=document_store,
    )
