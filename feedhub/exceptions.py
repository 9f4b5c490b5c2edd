"""Domain exceptions shared by the server and the client."""


class FeedHubError(Exception):
    """Base class for FeedHub errors."""


class FieldValidationError(FeedHubError):
    """One or more fields failed their schema rules."""

    def __init__(self, errors: dict[str, str]):
        self.errors = dict(errors)
        super().__init__(f"Validation failed for: {', '.join(sorted(self.errors))}")


class DuplicateEmailError(FeedHubError):
    """Another user record already owns the email."""

    message = "Email is already taken."

    def __init__(self, email: str):
        self.email = email
        super().__init__(self.message)


class UserNotFoundError(FeedHubError):
    """No user record exists for the given id."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"User {user_id} not found")


class MalformedCredentialError(FeedHubError):
    """A password or stored hash cannot be processed."""


class RemoteRejection(FeedHubError):
    """The backend answered with a non-success status."""

    def __init__(
        self,
        status_code: int,
        message: str | None = None,
        errors: dict[str, str] | None = None,
    ):
        self.status_code = status_code
        self.message = message
        self.errors = errors
        super().__init__(message or f"Request failed with status {status_code}")


class TransportError(FeedHubError):
    """The backend could not be reached or the request timed out."""
