class AssistantError(Exception):
    """Raised when the assistant cannot produce a reply."""


class AssistantNetworkError(AssistantError):
    """Raised when the chat provider call fails due to network/infrastructure issues."""
