from welfare.assistant.assistant import ChatAssistant
from welfare.assistant.base import BaseResponder
from welfare.assistant.factory import AssistantFactory

__all__ = ["AssistantFactory", "BaseResponder", "ChatAssistant"]
