from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Identity:
    """Authenticated user as reported by the identity provider."""

    id: str
    email: str | None = None
    phone: str | None = None


class BaseIdentityProvider(ABC):
    """Contract for identity providers. The portal only relies on Identity.id."""

    @abstractmethod
    def get_current_user(self) -> Identity | None:
        """Return the signed-in user, or None when there is no session."""

    @abstractmethod
    def sign_up_with_email(self, email: str, password: str) -> Identity:
        """Register a new user."""

    @abstractmethod
    def sign_in_with_email(self, email: str, password: str) -> Identity:
        """Start a session with email and password."""

    @abstractmethod
    def sign_in_with_otp(self, phone: str) -> None:
        """Send a one-time passcode to a phone number."""

    @abstractmethod
    def sign_out(self) -> None:
        """End the current session."""
