from unittest.mock import MagicMock

import pytest

from welfare.assistant.assistant import ChatAssistant
from welfare.assistant.base import BaseResponder
from welfare.assistant.exceptions import AssistantNetworkError
from welfare.assistant.models import ChatMessage
from welfare.assistant.responses import WELCOME
from welfare.assistant.rules_responder import RulesResponder
from welfare.database.models import Profile


class TestChatAssistant:
    def test_starts_with_welcome(self) -> None:
        assistant = ChatAssistant(RulesResponder())

        assert assistant.get_chat_history() == [ChatMessage(role="assistant", content=WELCOME["en"])]

    def test_send_message_records_both_turns(self) -> None:
        assistant = ChatAssistant(RulesResponder())

        reply = assistant.send_message("How do I upload a document?")

        history = assistant.get_chat_history()
        assert [m.role for m in history] == ["assistant", "user", "assistant"]
        assert history[1].content == "How do I upload a document?"
        assert history[2] == reply
        assert reply.content.startswith("Most schemes require basic documents")

    def test_passes_language_and_profile_to_responder(self) -> None:
        responder = MagicMock(spec=BaseResponder)
        responder.respond.return_value = "ok"
        profile = Profile(id="user-1", state="Bihar")
        assistant = ChatAssistant(responder, language="hi")
        assistant.update_user_profile(profile)

        assistant.send_message("नमस्ते")

        kwargs = responder.respond.call_args.kwargs
        assert kwargs["language"] == "hi"
        assert kwargs["profile"] is profile
        assert kwargs["history"][-1] == ChatMessage(role="user", content="नमस्ते")

    def test_responder_failure_leaves_history_unchanged(self) -> None:
        responder = MagicMock(spec=BaseResponder)
        responder.respond.side_effect = AssistantNetworkError("Chat provider network error: down")
        assistant = ChatAssistant(responder)

        with pytest.raises(AssistantNetworkError):
            assistant.send_message("hello")

        assert assistant.get_chat_history() == [ChatMessage(role="assistant", content=WELCOME["en"])]

    def test_history_copy_is_detached(self) -> None:
        assistant = ChatAssistant(RulesResponder())

        assistant.get_chat_history().clear()

        assert len(assistant.get_chat_history()) == 1

    def test_clear_uses_current_language_welcome(self) -> None:
        assistant = ChatAssistant(RulesResponder())
        assistant.send_message("eligible?")
        assistant.set_language("hi")

        assistant.clear_chat_history()

        assert assistant.language == "hi"
        assert assistant.get_chat_history() == [ChatMessage(role="assistant", content=WELCOME["hi"])]
