"""Domain layer errors.

Routes translate these into HTTP responses; nothing in the domain knows
about status codes.
"""


class DomainError(Exception):
    """Base domain error."""


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthenticatedError(DomainError):
    """Raised when the caller's identity cannot be established."""


class MissingCredentialError(NotAuthenticatedError):
    """Raised when a request carries no credential at all."""

    def __init__(self) -> None:
        super().__init__("No credential presented")


class InvalidCredentialError(NotAuthenticatedError):
    """Raised when a credential fails verification or names no known user."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid credential: {reason}")


class NotAuthorizedError(DomainError):
    """Raised when a user changes a comment they did not write."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(f"User {user_id} does not own {resource} {resource_id}")


class AlreadyLikedError(DomainError):
    """Raised when a user likes a comment they already liked."""

    def __init__(self, comment_id: str, user_id: str):
        super().__init__(f"User {user_id} already liked comment {comment_id}")


class NotLikedError(DomainError):
    """Raised when a user unlikes a comment they never liked."""

    def __init__(self, comment_id: str, user_id: str):
        super().__init__(f"User {user_id} has not liked comment {comment_id}")
