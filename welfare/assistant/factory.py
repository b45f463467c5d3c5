from welfare.assistant.assistant import ChatAssistant
from welfare.assistant.base import BaseResponder
from welfare.assistant.openai_responder import OpenAIResponder
from welfare.assistant.rules_responder import RulesResponder
from welfare.config.settings import Settings


class AssistantFactory:
    """Creates the chat assistant with the configured responder."""

    PROVIDERS = ("rules", "openai", "openai_compatible")

    @classmethod
    def create(cls, settings: Settings) -> ChatAssistant:
        return ChatAssistant(
            responder=cls.create_responder(settings),
            language=settings.assistant_language,
        )

    @classmethod
    def create_responder(cls, settings: Settings) -> BaseResponder:
        provider = settings.assistant_provider.lower()
        if provider == "rules":
            return RulesResponder()
        if provider not in cls.PROVIDERS:
            raise ValueError(
                f"Unknown assistant provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
            )
        base_url = None
        if provider == "openai_compatible":
            base_url = (settings.assistant_openai_base_url or "").strip()
            if not base_url:
                raise ValueError(
                    "assistant_openai_base_url is required for "
                    "assistant_provider=openai_compatible"
                )
        return OpenAIResponder(
            api_key=settings.assistant_openai_api_key,
            model=settings.assistant_openai_model_name,
            timeout_seconds=settings.assistant_openai_timeout_seconds,
            base_url=base_url,
            temperature=settings.assistant_openai_temperature,
        )
