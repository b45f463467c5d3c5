import threading

from welfare.database.exceptions import RecordStoreError
from welfare.database.models import SubmissionRecord
from welfare.database.record_store import RecordStore
from welfare.logging.logger import Log
from welfare.submission.exceptions import SubmissionError
from welfare.submission.models import SubmissionRequest
from welfare.submission.pipeline import SubmissionPipeline


class SubmissionStore:
    """Session cache of the signed-in owner's records of one submission kind.

    Records are kept newest first and bounded to ``max_records``. A fetch
    replaces the cache; a successful submit adds the new record without a
    refetch. Calls may overlap across threads: ``is_loading`` stays True
    until the last in-flight fetch or submit has returned.
    """

    def __init__(
        self,
        pipeline: SubmissionPipeline,
        record_store: RecordStore,
        max_records: int = 200,
    ) -> None:
        self._pipeline = pipeline
        self._kind = pipeline.kind
        self._record_store = record_store
        self._max_records = max_records
        self._lock = threading.Lock()
        self._in_flight = 0
        self.records: list[SubmissionRecord] = []
        self.current: SubmissionRecord | None = None
        self.error: str | None = None

    @property
    def is_loading(self) -> bool:
        with self._lock:
            return self._in_flight > 0

    def fetch(self, owner_id: str) -> bool:
        """Replace the cache with the owner's records. Returns False on failure."""
        self._begin()
        try:
            rows = self._record_store.query(
                self._kind.table,
                {"user_id": owner_id},
                order_by="created_at",
                descending=True,
                embed=self._kind.embed,
            )
        except RecordStoreError as exc:
            Log.error(f"Error fetching {self._kind.noun}s for owner {owner_id}: {exc}")
            self.error = f"Failed to fetch {self._kind.noun}s"
            return False
        finally:
            self._end()

        records = [self._kind.from_row(row) for row in rows[: self._max_records]]
        with self._lock:
            self.records = records
        Log.debug(f"Cached {len(records)} {self._kind.noun}s for owner {owner_id}")
        return True

    def submit(
        self,
        request: SubmissionRequest,
        cancel_event: threading.Event | None = None,
    ) -> SubmissionRecord | None:
        """Submit through the pipeline. Returns None and sets ``error`` on failure."""
        self._begin()
        try:
            record = self._pipeline.submit(request, cancel_event)
        except SubmissionError as exc:
            Log.error(f"Error submitting {self._kind.noun}: {exc}")
            self.error = str(exc)
            return None
        finally:
            self._end()

        with self._lock:
            self.records = [record, *self.records][: self._max_records]
        return record

    def set_current(self, record: SubmissionRecord | None) -> None:
        self.current = record

    def clear(self) -> None:
        with self._lock:
            self.records = []
        self.current = None
        self.error = None

    def _begin(self) -> None:
        with self._lock:
            self._in_flight += 1
        self.error = None

    def _end(self) -> None:
        with self._lock:
            self._in_flight -= 1
