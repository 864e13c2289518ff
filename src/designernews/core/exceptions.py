"""Domain exceptions for the designernews library."""


class DesignerNewsError(Exception):
    """Base class for all designernews library exceptions."""


class AuthenticationRequiredError(DesignerNewsError):
    """Raised when an authorized endpoint is called without a token.

    The transport raises this when no access token is stored.  The caller
    (CLI or application) is responsible for running the login flow first.
    """


class LoginError(DesignerNewsError):
    """Raised when a login attempt does not complete.

    ``str(error)`` is the human-readable message handed to error callbacks.
    When the failure came from the transport, the original exception is
    available as ``__cause__``.
    """


class TokenExchangeError(LoginError):
    """Raised when credentials could not be exchanged for an access token."""


class AuthedUserError(LoginError):
    """Raised when the authenticated user could not be fetched."""
