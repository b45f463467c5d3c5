from welfare.assistant.assistant import ChatAssistant
from welfare.assistant.exceptions import AssistantError
from welfare.assistant.factory import AssistantFactory
from welfare.config.settings import Settings
from welfare.logging.logger import Log

EXIT_COMMANDS = frozenset({"exit", "quit"})
FAILED_REPLY = "Sorry, I could not answer that right now. Please try again."


def run_chat(assistant: ChatAssistant) -> None:
    """Read questions from stdin and print replies until EOF, exit or Ctrl-C."""
    print(assistant.get_chat_history()[0].content)
    try:
        while True:
            message = input("> ").strip()
            if not message:
                continue
            if message.lower() in EXIT_COMMANDS:
                break
            try:
                reply = assistant.send_message(message)
            except AssistantError as exc:
                Log.error(f"Error getting response from assistant: {exc}")
                print(FAILED_REPLY)
                continue
            print(reply.content)
    except (EOFError, KeyboardInterrupt):
        Log.info("Chat session ended")


def main() -> None:
    """Entry point: configure logging -> build assistant -> chat loop."""
    settings = Settings()
    Log.configure(settings.log_level)
    assistant = AssistantFactory.create(settings)
    run_chat(assistant)


if __name__ == "__main__":
    main()
