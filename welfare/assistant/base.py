from abc import ABC, abstractmethod

from welfare.assistant.models import ChatMessage
from welfare.database.models import Profile


class BaseResponder(ABC):
    """Contract for all assistant reply adapters."""

    @abstractmethod
    def respond(
        self,
        message: str,
        *,
        language: str,
        history: list[ChatMessage],
        profile: Profile | None = None,
    ) -> str:
        """Produce the assistant reply to a user message.

        Args:
            message: The user's message, as typed.
            language: Language code of the conversation ("en", "hi").
            history: Conversation so far, including this message.
            profile: Profile of the signed-in user, if any.

        Raises:
            AssistantError: on any failure.
        """
