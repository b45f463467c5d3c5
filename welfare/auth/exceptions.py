class AuthError(Exception):
    """Raised when the identity provider rejects or fails a request."""


class AuthNetworkError(AuthError):
    """Raised when the identity provider cannot be reached."""
