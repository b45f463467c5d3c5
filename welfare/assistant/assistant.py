from welfare.assistant.base import BaseResponder
from welfare.assistant.models import ChatMessage
from welfare.assistant.responses import WELCOME
from welfare.database.models import Profile
from welfare.logging.logger import Log


class ChatAssistant:
    """Conversation state around a responder: history, language and user profile."""

    def __init__(
        self,
        responder: BaseResponder,
        language: str = "en",
        user_profile: Profile | None = None,
    ) -> None:
        self._responder = responder
        self._language = language
        self._user_profile = user_profile
        self._history: list[ChatMessage] = [self._welcome()]

    @property
    def language(self) -> str:
        return self._language

    def get_chat_history(self) -> list[ChatMessage]:
        return list(self._history)

    def send_message(self, message: str) -> ChatMessage:
        """Ask the responder, then record the user message and its reply.

        When the responder raises, history is left as it was.
        """
        question = ChatMessage(role="user", content=message)
        content = self._responder.respond(
            message,
            language=self._language,
            history=[*self._history, question],
            profile=self._user_profile,
        )
        reply = ChatMessage(role="assistant", content=content)
        self._history.extend((question, reply))
        Log.debug(f"Assistant replied with {len(content)} chars")
        return reply

    def set_language(self, language: str) -> None:
        self._language = language

    def update_user_profile(self, profile: Profile | None) -> None:
        self._user_profile = profile

    def clear_chat_history(self) -> None:
        self._history = [self._welcome()]

    def _welcome(self) -> ChatMessage:
        return ChatMessage(role="assistant", content=WELCOME.get(self._language, WELCOME["en"]))
