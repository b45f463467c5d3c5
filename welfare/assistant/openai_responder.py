import httpx
import openai

from welfare.assistant.base import BaseResponder
from welfare.assistant.exceptions import AssistantError, AssistantNetworkError
from welfare.assistant.models import ChatMessage
from welfare.assistant.responses import SYSTEM_PROMPT
from welfare.database.models import Profile


class OpenAIResponder(BaseResponder):
    """Assistant responder built on an OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout_seconds: int,
        base_url: str | None = None,
        temperature: float = 0.3,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )
        self._model = model
        self._temperature = temperature

    def respond(
        self,
        message: str,
        *,
        language: str,
        history: list[ChatMessage],
        profile: Profile | None = None,
    ) -> str:
        _ = message  # already the last entry of history
        messages = [{"role": "system", "content": self._system_prompt(language, profile)}]
        messages.extend({"role": turn.role, "content": turn.content} for turn in history)
        try:
            response = self._client.chat.completions.create(
                model=self._model,
                temperature=self._temperature,
                messages=messages,
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AssistantNetworkError(f"Chat provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise AssistantNetworkError(f"Chat provider API error: {exc}") from exc

        if not response.choices:
            raise AssistantError("Chat provider returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise AssistantError("Chat provider returned empty response")
        return content.strip()

    @staticmethod
    def _system_prompt(language: str, profile: Profile | None) -> str:
        prompt = SYSTEM_PROMPT.format(language=language)
        if profile is None:
            return prompt
        details = {
            "age": profile.age,
            "gender": profile.gender,
            "caste category": profile.caste_category,
            "annual income": profile.annual_income,
            "state": profile.state,
        }
        known = [f"{name}: {value}" for name, value in details.items() if value is not None]
        if known:
            prompt += " The user's profile: " + "; ".join(known) + "."
        return prompt
