from welfare.assistant.base import BaseResponder
from welfare.assistant.models import ChatMessage
from welfare.assistant.responses import DEFAULT_REPLY, RULES, Rule
from welfare.database.models import Profile


class RulesResponder(BaseResponder):
    """Keyword-matching responder over static replies. No network calls."""

    FALLBACK_LANGUAGE = "en"

    def respond(
        self,
        message: str,
        *,
        language: str,
        history: list[ChatMessage],
        profile: Profile | None = None,
    ) -> str:
        _ = history, profile
        if language not in RULES:
            language = self.FALLBACK_LANGUAGE
        lowered = message.lower()
        reply = self._match(lowered, RULES[language])
        return reply if reply is not None else DEFAULT_REPLY[language]

    @staticmethod
    def _match(message: str, rules: list[Rule]) -> str | None:
        for keywords, reply in rules:
            if any(keyword in message for keyword in keywords):
                return reply
        return None
