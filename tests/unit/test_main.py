from unittest.mock import MagicMock, patch

from welfare.assistant.assistant import ChatAssistant
from welfare.assistant.base import BaseResponder
from welfare.assistant.exceptions import AssistantNetworkError
from welfare.assistant.responses import WELCOME
from welfare.assistant.rules_responder import RulesResponder
from welfare.main import FAILED_REPLY, main, run_chat


def _printed(mock_print: MagicMock) -> list[str]:
    return [call.args[0] for call in mock_print.call_args_list]


class TestRunChat:
    @patch("builtins.print")
    @patch("builtins.input", side_effect=["", "grievance?", "exit", "never read"])
    def test_answers_until_exit(self, mock_input: MagicMock, mock_print: MagicMock) -> None:
        run_chat(ChatAssistant(RulesResponder()))

        printed = _printed(mock_print)
        assert printed[0] == WELCOME["en"]
        assert printed[1].startswith("To file a grievance")
        assert len(printed) == 2
        assert mock_input.call_count == 3

    @patch("builtins.print")
    @patch("builtins.input", side_effect=EOFError)
    def test_stops_on_eof(self, _mock_input: MagicMock, mock_print: MagicMock) -> None:
        run_chat(ChatAssistant(RulesResponder()))

        assert _printed(mock_print) == [WELCOME["en"]]

    @patch("builtins.print")
    @patch("builtins.input", side_effect=["hello", "how to apply", EOFError])
    def test_keeps_chatting_after_responder_failure(
        self, mock_input: MagicMock, mock_print: MagicMock
    ) -> None:
        responder = MagicMock(spec=BaseResponder)
        responder.respond.side_effect = [AssistantNetworkError("Chat provider network error: down"), "ok"]
        assistant = ChatAssistant(responder)

        run_chat(assistant)

        assert _printed(mock_print) == [WELCOME["en"], FAILED_REPLY, "ok"]
        assert mock_input.call_count == 3
        assert [m.content for m in assistant.get_chat_history()] == [WELCOME["en"], "how to apply", "ok"]


class TestMain:
    @patch("welfare.main.run_chat")
    @patch("welfare.main.AssistantFactory")
    @patch("welfare.main.Log")
    @patch("welfare.main.Settings")
    def test_builds_assistant_and_runs(
        self,
        mock_settings: MagicMock,
        mock_log: MagicMock,
        mock_factory: MagicMock,
        mock_run_chat: MagicMock,
    ) -> None:
        mock_settings.return_value.log_level = "DEBUG"

        main()

        mock_log.configure.assert_called_once_with("DEBUG")
        mock_factory.create.assert_called_once_with(mock_settings.return_value)
        mock_run_chat.assert_called_once_with(mock_factory.create.return_value)
