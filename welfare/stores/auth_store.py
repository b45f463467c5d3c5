from typing import Any

from welfare.auth.base import BaseIdentityProvider, Identity
from welfare.auth.exceptions import AuthError
from welfare.database.exceptions import RecordStoreError
from welfare.database.models import Profile
from welfare.database.record_store import RecordStore
from welfare.logging.logger import Log

PUBLIC_USER = "PUBLIC_USER"


class AuthStore:
    """Signed-in user, their profile row and role for the current session."""

    def __init__(
        self,
        identity_provider: BaseIdentityProvider,
        record_store: RecordStore,
    ) -> None:
        self._identity_provider = identity_provider
        self._record_store = record_store
        self.user: Identity | None = None
        self.profile: Profile | None = None
        self.role: str | None = None
        self.is_loading = False
        self.error: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def initialize(self) -> bool:
        """Load the current user and their profile, creating the profile if missing."""
        self.is_loading = True
        self.error = None
        try:
            user = self._identity_provider.get_current_user()
            profile = self._load_or_create_profile(user) if user is not None else None
        except (AuthError, RecordStoreError) as exc:
            Log.error(f"Error initializing auth: {exc}")
            self.error = str(exc) or "Failed to initialize authentication"
            return False
        finally:
            self.is_loading = False

        self.user = user
        self.profile = profile
        self.role = PUBLIC_USER if user is not None else None
        return True

    def update_profile(self, changes: dict[str, Any]) -> bool:
        if self.user is None:
            self.error = "Sign in to update your profile"
            return False
        self.error = None
        try:
            row = self._record_store.update("profiles", self.user.id, changes)
        except RecordStoreError as exc:
            Log.error(f"Error updating profile {self.user.id}: {exc}")
            self.error = str(exc)
            return False
        self.profile = Profile.from_row(row)
        return True

    def clear(self) -> None:
        self.user = None
        self.profile = None
        self.role = None
        self.error = None

    def _load_or_create_profile(self, user: Identity) -> Profile:
        row = self._record_store.find_one("profiles", {"id": user.id})
        if row is None:
            Log.info(f"Creating profile for user {user.id}")
            row = self._record_store.insert("profiles", {"id": user.id})
        return Profile.from_row(row)
