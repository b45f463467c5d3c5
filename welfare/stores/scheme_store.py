from dataclasses import asdict, dataclass, replace
from typing import Any

from welfare.database.exceptions import RecordStoreError
from welfare.database.models import Profile, Scheme
from welfare.database.record_store import RecordStore
from welfare.eligibility import recommend
from welfare.logging.logger import Log


@dataclass(frozen=True)
class SchemeFilters:
    """Scheme list filters. Empty values are ignored."""

    region: str | None = None
    category: str | None = None
    ministry: str | None = None
    income_limit: float | None = None
    age_min: int | None = None
    age_max: int | None = None
    gender_specific: str | None = None
    caste_categories: list[str] | None = None

    def to_query(self) -> dict[str, Any]:
        """Translate to record store filters; region matches the regions array."""
        query: dict[str, Any] = {}
        for name, value in asdict(self).items():
            if not value:
                continue
            if name == "region":
                query["regions"] = [value]
            else:
                query[name] = value
        return query


class SchemeStore:
    """Session cache of the scheme catalogue, the active filters and recommendations."""

    def __init__(self, record_store: RecordStore) -> None:
        self._record_store = record_store
        self.schemes: list[Scheme] = []
        self.current: Scheme | None = None
        self.recommended: list[Scheme] = []
        self.filters = SchemeFilters()
        self.is_loading = False
        self.error: str | None = None

    def fetch_schemes(self, filters: SchemeFilters | None = None) -> bool:
        self.is_loading = True
        self.error = None
        try:
            rows = self._record_store.query(
                "schemes",
                (filters or SchemeFilters()).to_query(),
                order_by="title",
            )
        except RecordStoreError as exc:
            Log.error(f"Error fetching schemes: {exc}")
            self.error = "Failed to fetch schemes"
            return False
        finally:
            self.is_loading = False
        self.schemes = [Scheme.from_row(row) for row in rows]
        return True

    def fetch_scheme_by_id(self, scheme_id: str) -> bool:
        self.is_loading = True
        self.error = None
        try:
            row = self._record_store.find_one("schemes", {"id": scheme_id})
        except RecordStoreError as exc:
            Log.error(f"Error fetching scheme {scheme_id}: {exc}")
            self.error = "Failed to fetch scheme details"
            return False
        finally:
            self.is_loading = False
        if row is None:
            self.error = f"Scheme {scheme_id} not found"
            self.current = None
            return False
        self.current = Scheme.from_row(row)
        return True

    def set_filters(self, **changes: Any) -> bool:
        """Merge filter changes into the active filters and refetch."""
        self.filters = replace(self.filters, **changes)
        return self.fetch_schemes(self.filters)

    def clear_filters(self) -> bool:
        self.filters = SchemeFilters()
        return self.fetch_schemes(self.filters)

    def set_recommended(self, schemes: list[Scheme]) -> None:
        self.recommended = list(schemes)

    def recommend_for(self, profile: Profile) -> list[Scheme]:
        """Recommend from the cached schemes for a profile."""
        self.recommended = recommend(profile, self.schemes)
        Log.info(f"Recommended {len(self.recommended)} of {len(self.schemes)} schemes")
        return self.recommended

    def clear(self) -> None:
        self.schemes = []
        self.current = None
        self.recommended = []
        self.filters = SchemeFilters()
        self.is_loading = False
        self.error = None
